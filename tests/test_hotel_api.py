import asyncio
import json

import httpx
import pytest

from hoteladmin.client import ApiClient
from hoteladmin.exceptions import ValidationError
from hoteladmin.schemas import BookingInput
from hoteladmin.services import HotelAPI
from hoteladmin.session import SessionStore
from hoteladmin.storage import MemoryKeyValueStorage

VALID_BOOKING = {
    "full_name": "Neema Mushi",
    "email": "neema@example.com",
    "start_date": "2025-12-01",
    "end_date": "2025-12-03",
    "property_item_type": "deluxe",
    "number_of_booked_property": 1,
    "amount_paid": "",
}


def run_api(coro_factory, handler):
    requests = []

    def _handler(request):
        requests.append(request)
        return handler(request)

    async def _run():
        client = ApiClient(
            base_url="http://hotel.test",
            token_provider=SessionStore(MemoryKeyValueStorage({"token": "abc123"})),
            transport=httpx.MockTransport(_handler),
        )
        try:
            return await coro_factory(HotelAPI(client))
        finally:
            await client.aclose()

    return asyncio.run(_run()), requests


def echo(request):
    body = json.loads(request.read()) if request.content else None
    return httpx.Response(200, json={"method": request.method, "path": request.url.path, "body": body})


class TestCollections:
    def test_list_rooms_with_filters(self):
        result, requests = run_api(lambda api: api.list_rooms(status="available"), echo)

        assert result["path"] == "/rooms"
        assert requests[0].url.params["status"] == "available"
        assert requests[0].headers["Authorization"] == "Bearer abc123"

    @pytest.mark.parametrize(
        "call, method, path",
        [
            (lambda api: api.list_staff(), "GET", "/staffs"),
            (lambda api: api.list_hotels(), "GET", "/hotels"),
            (lambda api: api.get_hotel(3), "GET", "/hotels/3"),
            (lambda api: api.get_room("101"), "GET", "/rooms/101"),
            (lambda api: api.list_room_types(), "GET", "/room-types"),
            (lambda api: api.list_bookings(), "GET", "/bookings"),
            (lambda api: api.update_booking(5, {"status": "checked-in"}), "PATCH", "/bookings/5"),
            (lambda api: api.delete_booking(5), "DELETE", "/bookings/5"),
            (lambda api: api.list_services(), "GET", "/services"),
        ],
    )
    def test_endpoint_routing(self, call, method, path):
        result, _ = run_api(call, echo)

        assert result["method"] == method
        assert result["path"] == path


class TestBookings:
    def test_create_booking_sends_validated_payload(self):
        result, _ = run_api(lambda api: api.create_booking(VALID_BOOKING), echo)

        body = result["body"]
        assert result["method"] == "POST"
        assert body["amount_paid"] == 0
        assert body["start_date"] == "2025-12-01"
        assert body["number_of_booked_property"] == 1

    def test_create_booking_accepts_schema_instance(self):
        booking = BookingInput.model_validate(VALID_BOOKING)
        result, _ = run_api(lambda api: api.create_booking(booking), echo)

        assert result["body"]["full_name"] == "Neema Mushi"

    @pytest.mark.parametrize(
        "changes",
        [
            {"full_name": "N"},
            {"email": "not-an-email"},
            {"end_date": "2025-12-01"},
            {"number_of_booked_property": 0},
            {"amount_paid": -5},
        ],
    )
    def test_invalid_booking_is_not_sent(self, changes):
        data = {**VALID_BOOKING, **changes}

        with pytest.raises(ValidationError) as excinfo:
            run_api(lambda api: api.create_booking(data), echo)

        assert excinfo.value.errors


class TestServices:
    def test_create_and_update_service(self):
        service = {"name": "Airport shuttle", "description": "Daily pickups", "amendment": "24h notice", "is_active": True}

        created, _ = run_api(lambda api: api.create_service(service), echo)
        updated, _ = run_api(lambda api: api.update_service(9, service), echo)

        assert created["method"] == "POST"
        assert created["body"] == service
        assert updated["method"] == "PUT"
        assert updated["path"] == "/services/9"

    def test_blank_service_fields_are_rejected(self):
        service = {"name": "  ", "description": "x", "amendment": "y", "is_active": False}

        with pytest.raises(ValidationError):
            run_api(lambda api: api.create_service(service), echo)

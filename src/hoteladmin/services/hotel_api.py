"""
Helpers over the REST collections used by the dashboard pages.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from hoteladmin.client.http_client import ApiClient
from hoteladmin.exceptions import ValidationError
from hoteladmin.schemas import BookingInput, ServiceInput

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def _validate(schema: Type[SchemaT], data: Union[SchemaT, Dict[str, Any]]) -> Dict[str, Any]:
    if isinstance(data, schema):
        model = data
    else:
        try:
            model = schema.model_validate(data)
        except PydanticValidationError as e:
            logger.warning(f"{schema.__name__} rejected: {e.error_count()} error(s)")
            raise ValidationError(f"Invalid {schema.__name__}", errors=e.errors()) from e
    return model.model_dump(mode="json")


class HotelAPI:
    """Typed entry points for the staff, hotel, room, booking and service collections."""

    def __init__(self, client: ApiClient):
        self.client = client

    # ------------------------------------
    # Staff & hotels
    # ------------------------------------
    async def list_staff(self) -> List[Dict[str, Any]]:
        return await self.client.get("/staffs")

    async def list_hotels(self) -> List[Dict[str, Any]]:
        return await self.client.get("/hotels")

    async def get_hotel(self, hotel_id: Union[int, str]) -> Dict[str, Any]:
        return await self.client.get(f"/hotels/{hotel_id}")

    # ------------------------------------
    # Rooms
    # ------------------------------------
    async def list_rooms(self, **filters: Any) -> List[Dict[str, Any]]:
        return await self.client.get("/rooms", params=filters or None)

    async def get_room(self, room_id: Union[int, str]) -> Dict[str, Any]:
        return await self.client.get(f"/rooms/{room_id}")

    async def list_room_types(self) -> List[Dict[str, Any]]:
        return await self.client.get("/room-types")

    # ------------------------------------
    # Bookings
    # ------------------------------------
    async def list_bookings(self, **filters: Any) -> List[Dict[str, Any]]:
        return await self.client.get("/bookings", params=filters or None)

    async def create_booking(self, data: Union[BookingInput, Dict[str, Any]]) -> Dict[str, Any]:
        payload = _validate(BookingInput, data)
        logger.info(f"Creating booking for {payload['full_name']}")
        return await self.client.post("/bookings", json=payload)

    async def update_booking(self, booking_id: Union[int, str], changes: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.patch(f"/bookings/{booking_id}", json=changes)

    async def delete_booking(self, booking_id: Union[int, str]) -> Any:
        logger.info(f"Deleting booking {booking_id}")
        return await self.client.delete(f"/bookings/{booking_id}")

    # ------------------------------------
    # Hotel services
    # ------------------------------------
    async def list_services(self) -> List[Dict[str, Any]]:
        return await self.client.get("/services")

    async def create_service(self, data: Union[ServiceInput, Dict[str, Any]]) -> Dict[str, Any]:
        return await self.client.post("/services", json=_validate(ServiceInput, data))

    async def update_service(
        self, service_id: Union[int, str], data: Union[ServiceInput, Dict[str, Any]]
    ) -> Dict[str, Any]:
        return await self.client.put(f"/services/{service_id}", json=_validate(ServiceInput, data))

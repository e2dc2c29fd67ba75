import json

import httpx

from hoteladmin.client import ApiClient, http_client, set_client
from hoteladmin.main import main
from hoteladmin.session import SessionStore, get_session, set_session
from hoteladmin.storage import MemoryKeyValueStorage


def install(handler):
    session = SessionStore(MemoryKeyValueStorage())
    set_session(session)
    set_client(
        ApiClient(
            base_url="http://hotel.test",
            token_provider=session,
            transport=httpx.MockTransport(handler),
        )
    )
    return session


def test_main_prints_payload(capsys):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=[{"id": 1}])

    install(handler)

    assert main(["/rooms", "--token", "abc123"]) == 0
    assert json.loads(capsys.readouterr().out) == [{"id": 1}]
    assert seen[0].headers["Authorization"] == "Bearer abc123"
    assert get_session().current_token() == "abc123"


def test_main_sends_body(capsys):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(201, json={"id": 9})

    install(handler)

    assert main(["/bookings", "-X", "post", "-d", '{"full_name": "Neema"}']) == 0
    assert seen[0].method == "POST"
    assert json.loads(seen[0].read()) == {"full_name": "Neema"}


def test_main_http_failure_exit_code():
    install(lambda request: httpx.Response(404, json={"error": "not found"}))

    assert main(["/rooms/99"]) == 1


def test_main_rejects_bad_json():
    install(lambda request: httpx.Response(200, json={}))

    assert main(["/rooms", "-d", "{oops"]) == 2


def test_main_releases_shared_client():
    install(lambda request: httpx.Response(200, json=[]))

    assert main(["/rooms"]) == 0
    assert http_client._api_client is None

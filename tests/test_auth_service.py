import asyncio
import logging

import httpx
import pytest

from hoteladmin.client import ApiClient
from hoteladmin.exceptions import AuthenticationError
from hoteladmin.services import AuthService
from hoteladmin.session import SessionStore
from hoteladmin.storage import MemoryKeyValueStorage

STAFF = [
    {"id": 1, "email": "amina@hotel.test", "username": "amina", "password": "secret", "role": "admin"},
    {"id": 2, "email": "juma@hotel.test", "username": "juma", "password": "hunter2", "role": "staff"},
]


def make_service(handler):
    session = SessionStore(MemoryKeyValueStorage())
    client = ApiClient(
        base_url="http://hotel.test",
        token_provider=session,
        transport=httpx.MockTransport(handler),
    )
    return AuthService(client, session), session


def staff_handler(payload, status=200):
    def _handler(request):
        assert request.url.path == "/staffs"
        return httpx.Response(status, json=payload)
    return _handler


def login(service, username, password):
    async def _run():
        try:
            return await service.login(username, password)
        finally:
            await service.client.aclose()

    return asyncio.run(_run())


class TestLogin:
    def test_matching_credentials_store_user(self):
        service, session = make_service(staff_handler(STAFF))

        assert login(service, "amina", "secret") is True

        user = session.current_user()
        assert user.id == "1"
        assert user.is_admin()
        assert service.is_authenticated()

    def test_wrong_password_is_rejected(self):
        service, session = make_service(staff_handler(STAFF))

        assert login(service, "juma", "wrong") is False
        assert session.current_user() is None

    def test_non_list_payload_fails(self, caplog):
        caplog.set_level(logging.ERROR, logger="hoteladmin.services.auth_service")
        service, _ = make_service(staff_handler({"staffs": STAFF}))

        assert login(service, "amina", "secret") is False
        assert any("not a list" in r.getMessage() for r in caplog.records)

    def test_http_failure_returns_false(self):
        service, session = make_service(staff_handler({"error": "boom"}, status=500))

        assert login(service, "amina", "secret") is False
        assert session.current_user() is None


class TestLogout:
    def test_logout_clears_user_and_token(self):
        service, session = make_service(staff_handler(STAFF))
        login(service, "juma", "hunter2")
        session.set_token("abc123")

        service.logout()

        assert session.current_user() is None
        assert session.current_token() is None
        assert not service.is_authenticated()

    def test_require_user_without_login(self):
        service, _ = make_service(staff_handler(STAFF))
        with pytest.raises(AuthenticationError):
            service.require_user()

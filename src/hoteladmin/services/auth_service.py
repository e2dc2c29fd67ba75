from __future__ import annotations

import logging
from typing import Optional

import httpx

from hoteladmin.client.http_client import ApiClient
from hoteladmin.exceptions import AuthenticationError
from hoteladmin.models import User
from hoteladmin.session import SessionStore

logger = logging.getLogger(__name__)

STAFF_PATH = "/staffs"


class AuthService:
    """
    Logs staff in against the staff collection and keeps the result in the
    session. The API client reads the same session for its bearer token.
    """

    def __init__(self, client: ApiClient, session: SessionStore):
        self.client = client
        self.session = session

    @property
    def current_user(self) -> Optional[User]:
        return self.session.current_user()

    def is_authenticated(self) -> bool:
        return self.current_user is not None

    def require_user(self) -> User:
        user = self.current_user
        if user is None:
            raise AuthenticationError("No user is logged in")
        return user

    async def login(self, username: str, password: str) -> bool:
        """Returns True and stores the matching staff record, False otherwise."""
        try:
            staff = await self.client.get(STAFF_PATH)
        except httpx.HTTPError as e:
            logger.error(f"Login failed: {e}")
            return False

        if not isinstance(staff, list):
            logger.error(f"Staff response is not a list: {type(staff).__name__}")
            return False

        for record in staff:
            if not isinstance(record, dict):
                continue
            if record.get("username") == username and record.get("password") == password:
                user = User.from_dict(record)
                self.session.set_current_user(user)
                logger.info(f"User '{username}' logged in as {user.role}")
                return True

        logger.info(f"Invalid credentials for '{username}'")
        return False

    def logout(self) -> None:
        user = self.current_user
        self.session.clear()
        if user:
            logger.info(f"User '{user.username}' logged out")

"""
Session slots shared between the authentication flow and the API client.

The client only ever reads the token through the ``TokenProvider`` capability;
writes happen in the login/logout flow.
"""
from __future__ import annotations

import json
import logging
from typing import Optional, Protocol, runtime_checkable

from hoteladmin.config import get_config
from hoteladmin.models import User
from hoteladmin.storage.base import KeyValueStorage

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"
CURRENT_USER_KEY = "currentUser"

_UNREAD = object()


@runtime_checkable
class TokenProvider(Protocol):
    def current_token(self) -> Optional[str]: ...


class SessionStore:
    """Single-slot bearer token plus the logged-in user, kept in key/value storage.

    The token is read from storage once and cached; writes must go through
    ``set_token``/``clear_token`` to keep the cache current.
    """

    def __init__(self, storage: KeyValueStorage):
        self.storage = storage
        self._token = _UNREAD

    # ------------------------------------
    # Token
    # ------------------------------------
    def current_token(self) -> Optional[str]:
        if self._token is _UNREAD:
            # Storage errors propagate and leave the cache unread.
            self._token = self.storage.get_item(TOKEN_KEY) or None
        return self._token

    def set_token(self, token: str) -> None:
        if not token:
            raise ValueError("token must be a non-empty string")
        self.storage.set_item(TOKEN_KEY, token)
        self._token = token

    def clear_token(self) -> None:
        self.storage.remove_item(TOKEN_KEY)
        self._token = None

    # ------------------------------------
    # Current user
    # ------------------------------------
    def current_user(self) -> Optional[User]:
        raw = self.storage.get_item(CURRENT_USER_KEY)
        if not raw:
            return None
        try:
            return User.from_dict(json.loads(raw))
        except (ValueError, TypeError) as e:
            logger.warning(f"Discarding unreadable stored user: {e}")
            return None

    def set_current_user(self, user: User) -> None:
        self.storage.set_item(CURRENT_USER_KEY, json.dumps(user.to_dict(include_password=False)))

    def clear_current_user(self) -> None:
        self.storage.remove_item(CURRENT_USER_KEY)

    def clear(self) -> None:
        self.clear_token()
        self.clear_current_user()


_session: Optional[SessionStore] = None


def get_session() -> SessionStore:
    """Returns the process-wide session, creating its storage from config when needed."""
    global _session
    if _session is None:
        _session = SessionStore(get_config().create_storage())
    return _session


def set_session(session: Optional[SessionStore]) -> None:
    """Sets a custom session instance (useful for testing)."""
    global _session
    _session = session

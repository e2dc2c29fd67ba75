from .auth_service import AuthService
from .hotel_api import HotelAPI

__all__ = [
    "AuthService",
    "HotelAPI",
]

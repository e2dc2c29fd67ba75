"""
Base configuration abstractions for Hotel Admin.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict

from hoteladmin.storage.base import KeyValueStorage


class HotelAdminConfig(ABC):
    """Abstract configuration contract for the API client and session storage."""

    @abstractmethod
    def get_api_base_url(self) -> str: pass

    @abstractmethod
    def get_api_timeout_ms(self) -> int: pass

    @abstractmethod
    def get_storage_url(self) -> str: pass

    @abstractmethod
    def create_storage(self) -> KeyValueStorage: pass

    def get_hotel_display_name(self) -> str: return "Ostub Hotel"
    def get_log_level(self) -> str: return "INFO"

    def get_default_headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Access-Control-Allow-Origin": "*",
        }

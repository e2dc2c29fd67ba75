from __future__ import annotations

import importlib
import os
import logging
from typing import Optional, Type

try:
    from dotenv import load_dotenv

    load_dotenv()
except Exception:
    pass

from hoteladmin.base_config import HotelAdminConfig
from hoteladmin.storage.base import KeyValueStorage
from hoteladmin.storage.sqlite_storage import SQLiteKeyValueStorage
from hoteladmin.exceptions import ConfigurationError


DEFAULT_CONFIG_CLASS = "hoteladmin.config.EnvironmentHotelAdminConfig"
CONFIG_ENV_KEY = "HOTELADMIN_CONFIG"

DEFAULT_API_URL = "http://localhost:3001"
DEFAULT_TIMEOUT_MS = 10000

logger = logging.getLogger(__name__)


def _import_config_class(path: str) -> Type[HotelAdminConfig]:
    try:
        module_path, class_name = path.rsplit(".", 1)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid config path '{path}'") from exc

    try:
        module = importlib.import_module(module_path)
    except ImportError as exc:
        raise ConfigurationError(f"Could not import module '{module_path}'") from exc

    try:
        cls = getattr(module, class_name)
    except AttributeError as exc:
        raise ConfigurationError(f"Config class '{class_name}' not found in '{module_path}'") from exc

    if not isinstance(cls, type) or not issubclass(cls, HotelAdminConfig):
        raise ConfigurationError(f"{path} is not a subclass of HotelAdminConfig")

    return cls


class EnvironmentHotelAdminConfig(HotelAdminConfig):
    """Default configuration that reads from environment variables."""

    def __init__(self) -> None:
        self._env = os.environ

    def get_api_base_url(self) -> str:
        return self._env.get("HOTELADMIN_API_URL", DEFAULT_API_URL)

    def get_api_timeout_ms(self) -> int:
        try:
            return int(self._env.get("HOTELADMIN_API_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))
        except (TypeError, ValueError):
            logger.warning(
                f"Invalid HOTELADMIN_API_TIMEOUT_MS: {self._env.get('HOTELADMIN_API_TIMEOUT_MS')!r}, "
                f"using {DEFAULT_TIMEOUT_MS}"
            )
            return DEFAULT_TIMEOUT_MS

    def get_storage_url(self) -> str:
        return self._env.get("HOTELADMIN_STORAGE_URL", "sqlite:///hoteladmin_session.db")

    def get_hotel_display_name(self) -> str:
        return self._env.get("HOTEL_NAME", super().get_hotel_display_name())

    def get_log_level(self) -> str:
        return self._env.get("HOTELADMIN_LOG_LEVEL", super().get_log_level()).upper()

    def create_storage(self) -> KeyValueStorage:
        """Creates the session storage and makes sure its table exists."""
        storage = SQLiteKeyValueStorage(self.get_storage_url())
        storage.init()
        return storage


_CONFIG: Optional[HotelAdminConfig] = None


def get_config() -> HotelAdminConfig:
    global _CONFIG
    if _CONFIG is None:
        class_path = os.getenv(CONFIG_ENV_KEY, DEFAULT_CONFIG_CLASS)
        cls = _import_config_class(class_path)
        _CONFIG = cls()
    return _CONFIG


def set_config(config: Optional[HotelAdminConfig]) -> None:
    global _CONFIG
    _CONFIG = config

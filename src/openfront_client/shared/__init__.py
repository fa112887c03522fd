"""共有レイヤの公開インターフェース。"""

from .config import AppSettings, OpenFrontSettings, get_settings
from .exceptions import BaseAppError, ConfigurationError
from .logging import configure_logging, configure_logging_from_settings, get_logger
from .types import DTO, JSONValue, QueryValue, ValueObject, utc_now

__all__ = [
    "AppSettings",
    "OpenFrontSettings",
    "get_settings",
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
    "BaseAppError",
    "ConfigurationError",
    "DTO",
    "JSONValue",
    "QueryValue",
    "ValueObject",
    "utc_now",
]

#!filepath: iter_cursor/__init__.py

from .utils.logger import Logging, logs, init_logging
from .utils.errors import IterCursorError, InvalidArgumentError, ConfigError
from .core.sentinel import NO_VALUE, NoValue, is_no_value
from .core.stages import StageKind
from .core.cursor import Iter
from .observability.instrumentation import Instrumentation
from .config.app_config import AppConfig

__version__ = "0.1.0"

__all__ = [
    "logs", "Logging", "init_logging",
    "IterCursorError", "InvalidArgumentError", "ConfigError",
    "NO_VALUE", "NoValue", "is_no_value",
    "StageKind",
    "Iter",
    "Instrumentation",
    "AppConfig",
]

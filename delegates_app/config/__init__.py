"""Configuration defaults, loading and validation."""

from .defaults import (
    BookstoreParams,
    ComposeParams,
    ConsoleParams,
    DemoConfig,
    LoggingParams,
    get_default_config,
)
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "BookstoreParams",
    "ComposeParams",
    "ConsoleParams",
    "DemoConfig",
    "LoggingParams",
    "get_default_config",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationError",
]

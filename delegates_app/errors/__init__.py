"""
Error classification for the delegate library and demos.

This module provides the exception hierarchy raised by accumulators,
delegate composition and configuration loading.
"""

from .accumulation import (
    AccumulatorError,
    EmptyAccumulatorError,
)
from .callbacks import (
    CallbackError,
    SignatureMismatchError,
)
from .configuration import ConfigurationError

__all__ = [
    # Accumulator Errors
    "AccumulatorError",
    "EmptyAccumulatorError",
    # Callback Errors
    "CallbackError",
    "SignatureMismatchError",
    # Configuration Errors
    "ConfigurationError",
]

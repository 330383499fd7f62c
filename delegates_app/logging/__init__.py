"""
Logging configuration and utilities for the delegate demos.
"""
from .config import configure_logging, get_callback_logger, get_logger, log_invocation

__all__ = ["configure_logging", "get_callback_logger", "get_logger", "log_invocation"]

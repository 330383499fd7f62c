"""
Configuration error classifications.
"""

from typing import Optional, Dict, Any


class ConfigurationError(Exception):
    """Configuration could not be loaded or failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.errors = errors or []
        self.context = context or {}

"""
Callback error classifications for delegate composition.
"""

from typing import Optional, Dict, Any


class CallbackError(Exception):
    """Base class for delegate construction and composition errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class SignatureMismatchError(CallbackError, TypeError):
    """Two delegates with different signatures were combined."""

    def __init__(self, message: str, expected: Optional[str] = None,
                 actual: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.expected = expected
        self.actual = actual

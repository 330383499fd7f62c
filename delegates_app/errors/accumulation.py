"""
Accumulator error classifications.

Reading a derived value from an accumulator that has not seen any input
is a caller bug; these errors make it loud instead of returning a number.
"""

from typing import Optional, Dict, Any


class AccumulatorError(Exception):
    """Base class for accumulator failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class EmptyAccumulatorError(AccumulatorError, ZeroDivisionError):
    """Average requested before any value was recorded."""

    def __init__(self, message: str, accumulator: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.accumulator = accumulator

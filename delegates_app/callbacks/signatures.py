from typing import Protocol

from .delegate import Delegate


class MessageCallback(Protocol):
    """
    Callback that receives a single piece of text and returns nothing.
    """

    def __call__(self, message: str) -> None: ...


class MessageDelegate(Delegate):
    """Delegate over MessageCallback targets."""

    __slots__ = ()

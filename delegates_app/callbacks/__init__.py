from .delegate import (
    Delegate,
    compose,
    remove,
)

from .signatures import (
    MessageCallback,
    MessageDelegate,
)

__all__ = [
    "Delegate",
    "compose",
    "remove",
    "MessageCallback",
    "MessageDelegate",
]

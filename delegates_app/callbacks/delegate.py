"""
Immutable, composable callback values.

A Delegate holds an ordered tuple of invocation targets. Calling the
delegate calls each target in order with the same arguments. Delegates
never change after construction: compose() and remove() (and the + and -
operators) always return new delegates.

Subclasses name a callback signature. Only delegates of the same class
can be combined, the way typed delegates only combine with their own
type:

    class MessageDelegate(Delegate):
        pass

    a = MessageDelegate(hello)
    b = MessageDelegate(goodbye)
    c = a + b          # hello, then goodbye
    d = c - a          # goodbye only
"""

from typing import Any, Callable, Iterable, Union

from ..errors import SignatureMismatchError
from ..logging.config import get_logger

logger = get_logger(__name__)

Target = Callable[..., Any]


def _describe(target: Target) -> str:
    receiver = getattr(target, "__self__", None)
    name = getattr(target, "__qualname__", None) or repr(target)
    if receiver is not None:
        return f"{name} of {type(receiver).__name__}@{id(receiver):#x}"
    return name


class Delegate:
    """Ordered, immutable list of callables sharing one signature."""

    __slots__ = ("_targets",)

    def __init__(self, target: Target):
        if isinstance(target, Delegate):
            _check_signature(self, target)
            targets = target._targets
        elif callable(target):
            targets = (target,)
        else:
            raise TypeError(f"Delegate target must be callable, got {type(target).__name__}")
        object.__setattr__(self, "_targets", targets)

    @classmethod
    def _from_targets(cls, targets: Iterable[Target]) -> "Delegate":
        instance = object.__new__(cls)
        object.__setattr__(instance, "_targets", tuple(targets))
        return instance

    @classmethod
    def noop(cls) -> "Delegate":
        """Delegate with no targets; calling it does nothing."""
        return cls._from_targets(())

    @classmethod
    def signature(cls) -> str:
        return cls.__name__

    @property
    def targets(self) -> tuple[Target, ...]:
        return self._targets

    @property
    def is_noop(self) -> bool:
        return not self._targets

    def invocation_list(self) -> tuple["Delegate", ...]:
        """Single-target delegates in invocation order."""
        return tuple(type(self)._from_targets((t,)) for t in self._targets)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        # Result of the last target wins; an exception stops the chain.
        result = None
        for target in self._targets:
            result = target(*args, **kwargs)
        return result

    def __add__(self, other: Any) -> "Delegate":
        if not callable(other):
            return NotImplemented
        return compose(self, other)

    def __radd__(self, other: Any) -> "Delegate":
        if not callable(other):
            return NotImplemented
        return compose(type(self)(other), self)

    def __sub__(self, other: Any) -> "Delegate":
        if not callable(other):
            return NotImplemented
        return remove(self, other)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} objects are immutable")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Delegate):
            return NotImplemented
        return type(self) is type(other) and self._targets == other._targets

    def __hash__(self) -> int:
        # Targets may be bound to unhashable receivers.
        return hash((type(self), len(self._targets)))

    def __repr__(self) -> str:
        inner = ", ".join(_describe(t) for t in self._targets)
        return f"{type(self).__name__}([{inner}])"


def _check_signature(expected: Delegate, actual: Delegate) -> None:
    if type(expected) is not type(actual):
        raise SignatureMismatchError(
            f"Cannot combine {type(actual).__name__} with {type(expected).__name__}",
            expected=type(expected).signature(),
            actual=type(actual).signature(),
        )


def _coerce(template: Delegate, value: Union[Delegate, Target]) -> Delegate:
    if isinstance(value, Delegate):
        _check_signature(template, value)
        return value
    return type(template)(value)


def compose(first: Union[Delegate, Target], second: Union[Delegate, Target]) -> Delegate:
    """
    Combine two callbacks into one that calls all of first's targets, then
    all of second's.

    At least one side must be a Delegate; a plain callable on the other side
    takes that delegate's signature.
    """
    if not isinstance(first, Delegate):
        if not isinstance(second, Delegate):
            raise TypeError("compose() needs at least one Delegate")
        first = type(second)(first)
    second = _coerce(first, second)

    return type(first)._from_targets(first._targets + second._targets)


def remove(composite: Delegate, target: Union[Delegate, Target]) -> Delegate:
    """
    Remove the first occurrence of target from composite.

    A multi-target delegate is removed as a contiguous run. Removing a
    target that is not present returns an equal delegate; removing the last
    target returns a no-op delegate.
    """
    removed = _coerce(composite, target)._targets
    targets = composite._targets
    size = len(removed)

    if size:
        for start in range(len(targets) - size + 1):
            if targets[start:start + size] == removed:
                return type(composite)._from_targets(targets[:start] + targets[start + size:])

    logger.debug(
        "Remove target not found",
        signature=type(composite).signature(),
        target=", ".join(_describe(t) for t in removed) or "<noop>",
    )
    return composite

"""
Book data model.

Books are immutable values; two books with the same fields are equal.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

PriceLike = Union[Decimal, int, float, str]


def to_price(value: PriceLike) -> Decimal:
    """Convert a price to Decimal, going through str for floats so 19.95 stays 19.95."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


@dataclass(frozen=True)
class Book:
    """A single entry in the book catalog."""
    title: str
    author: str
    price: Decimal
    paperback: bool     # True for paperbacks, False for hardbacks

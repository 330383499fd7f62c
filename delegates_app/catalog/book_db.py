"""
Book catalog that hands paperback books to a caller-supplied callback.

The catalog knows how books are stored and how to find paperbacks; the
client decides what to do with each one. Neither side knows about the
other's details.
"""

from typing import Iterator, Protocol

from ..callbacks.delegate import Delegate
from ..logging.config import get_logger
from .models import Book, PriceLike, to_price

logger = get_logger(__name__)


class ProcessBookCallback(Protocol):
    """
    Callback that receives one book. Return values are ignored.
    """

    def __call__(self, book: Book) -> None: ...


class ProcessBookDelegate(Delegate):
    """Delegate over ProcessBookCallback targets."""

    __slots__ = ()


class BookCatalog:
    """Insertion-ordered, append-only collection of books."""

    def __init__(self) -> None:
        self._books: list[Book] = []
        self.logger = logger

    def add_book(self, title: str, author: str, price: PriceLike, paperback: bool) -> Book:
        """Append a new book and return it."""
        book = Book(title=title, author=author, price=to_price(price), paperback=paperback)
        self._books.append(book)
        self.logger.debug("Book added", title=title, paperback=paperback, size=len(self._books))
        return book

    def for_each_in_category(self, callback: ProcessBookCallback) -> None:
        """
        Call callback once for every paperback book, in insertion order.

        Exceptions raised by the callback propagate and stop the iteration.

        :param callback: A function, bound method or delegate that receives (book).
        """
        matched = 0
        for book in self._books:
            if book.paperback:
                callback(book)
                matched += 1
        self.logger.debug("Processed paperback books", matched=matched, total=len(self._books))

    def paperbacks(self) -> tuple[Book, ...]:
        return tuple(book for book in self._books if book.paperback)

    def __iter__(self) -> Iterator[Book]:
        return iter(tuple(self._books))

    def __len__(self) -> int:
        return len(self._books)

from .book_db import (
    BookCatalog,
    ProcessBookCallback,
    ProcessBookDelegate,
)

from .models import Book, to_price

__all__ = [
    "BookCatalog",
    "ProcessBookCallback",
    "ProcessBookDelegate",
    "Book",
    "to_price",
]

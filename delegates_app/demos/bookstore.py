#!/usr/bin/env python3
"""
Bookstore Demo - calling a delegate for each paperback book

The catalog finds the paperback books and calls a delegate for each one.
This client uses it twice: once with a free function that prints the
title, and once with a bound method of a PriceTotaller that sums the
prices so the average can be shown afterwards.

Run: python -m delegates_app.demos.bookstore
"""

import sys

from ..catalog import Book, BookCatalog, ProcessBookDelegate
from ..config import DemoConfig
from ..errors import ConfigurationError
from ..logging.config import get_logger
from ..totals import PriceTotaller
from ..utils.formatting import format_price
from .common import load_demo_config, pause_on_exit

logger = get_logger(__name__)

TITLE_INDENT = "   "


def print_title(book: Book) -> None:
    """Print the title of the book."""
    print(f"{TITLE_INDENT}{book.title}")


def add_books(catalog: BookCatalog) -> None:
    """Initialize the catalog with some test books."""
    catalog.add_book("The C Programming Language",
                     "Brian W. Kernighan and Dennis M. Ritchie", "19.95", True)
    catalog.add_book("The Unicode Standard 2.0",
                     "The Unicode Consortium", "39.95", True)
    catalog.add_book("The MS-DOS Encyclopedia",
                     "Ray Duncan", "129.95", False)
    catalog.add_book("Dogbert's Clues for the Clueless",
                     "Scott Adams", "12.00", True)


def run(config: DemoConfig) -> PriceTotaller:
    """Print paperback titles and their average price; return the totaller used."""
    params = config.bookstore

    catalog = BookCatalog()
    add_books(catalog)

    print(params.header)
    # Delegate over a free function
    catalog.for_each_in_category(ProcessBookDelegate(print_title))

    # Delegate over a bound method; the totaller is the receiver
    totaller = PriceTotaller()
    catalog.for_each_in_category(ProcessBookDelegate(totaller.add_book_to_total))

    average = format_price(totaller.average(), params.currency_symbol, params.price_places)
    print(f"{params.average_label} {average}")

    logger.info("Bookstore demo finished", paperbacks=totaller.count, total=str(totaller.total))
    return totaller


def main() -> int:
    try:
        config = load_demo_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    run(config)
    pause_on_exit(config.console)
    return 0


if __name__ == "__main__":
    sys.exit(main())

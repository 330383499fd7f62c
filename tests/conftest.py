"""Pytest configuration and shared fixtures."""

import pytest
from typing import Any, Callable, List, Tuple

from delegates_app.catalog import BookCatalog
from delegates_app.config import DemoConfig, get_default_config
from delegates_app.logging.config import configure_logging


@pytest.fixture(autouse=True, scope="session")
def quiet_logging() -> None:
    """Keep structlog output off stdout so demo output can be compared exactly."""
    configure_logging(level="WARNING", include_timestamp=False)


class CallRecorder:
    """Builds callbacks that append (label, argument) to a shared list."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Any]] = []

    def target(self, label: str) -> Callable[[Any], None]:
        def record(argument: Any) -> None:
            self.calls.append((label, argument))
        record.__qualname__ = f"record_{label}"
        return record

    def labels(self) -> List[str]:
        return [label for label, _ in self.calls]


@pytest.fixture
def recorder() -> CallRecorder:
    return CallRecorder()


@pytest.fixture
def seeded_catalog() -> BookCatalog:
    """The four books used by the bookstore demo."""
    catalog = BookCatalog()
    catalog.add_book("The C Programming Language",
                     "Brian W. Kernighan and Dennis M. Ritchie", "19.95", True)
    catalog.add_book("The Unicode Standard 2.0",
                     "The Unicode Consortium", "39.95", True)
    catalog.add_book("The MS-DOS Encyclopedia",
                     "Ray Duncan", "129.95", False)
    catalog.add_book("Dogbert's Clues for the Clueless",
                     "Scott Adams", "12.00", True)
    return catalog


@pytest.fixture
def default_config() -> DemoConfig:
    return get_default_config()

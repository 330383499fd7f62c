"""Default configuration parameters for the delegate demos."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BookstoreParams:
    """Output layout for the paperback bookstore demo."""
    header: str = "Paperback Book Titles:"
    average_label: str = "Average Paperback Book Price:"
    currency_symbol: str = "$"
    price_places: int = 2                             # Max fractional digits shown


@dataclass(frozen=True)
class ComposeParams:
    """Output layout for the delegate composition demo."""
    label_template: str = "Invoking delegate {name}:"


@dataclass(frozen=True)
class ConsoleParams:
    """Console behaviour shared by both demos."""
    pause_on_exit: bool = False                       # Wait for Enter before exiting
    exit_prompt: str = "Press any key to exit ...."


@dataclass(frozen=True)
class LoggingParams:
    """structlog settings applied by the demo entry points."""
    level: str = "WARNING"
    format_json: bool = False
    include_timestamp: bool = True


@dataclass(frozen=True)
class DemoConfig:
    """Complete demo configuration."""
    bookstore: BookstoreParams
    compose: ComposeParams
    console: ConsoleParams
    logging: LoggingParams


def get_default_config() -> DemoConfig:
    """Get the default configuration instance."""
    return DemoConfig(
        bookstore=BookstoreParams(),
        compose=ComposeParams(),
        console=ConsoleParams(),
        logging=LoggingParams(),
    )

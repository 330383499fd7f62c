"""Startup and shutdown steps shared by the demo entry points."""

from pathlib import Path
from typing import Any, Optional

from ..config import ConfigLoader, ConsoleParams, DemoConfig
from ..logging.config import configure_logging


def load_demo_config(
    config_dir: Optional[Path] = None,
    overrides: Optional[dict[str, Any]] = None
) -> DemoConfig:
    """Load configuration and apply its logging settings."""
    config = ConfigLoader.create(config_dir).load(overrides)
    configure_logging(
        level=config.logging.level,
        format_json=config.logging.format_json,
        include_timestamp=config.logging.include_timestamp,
    )
    return config


def pause_on_exit(console: ConsoleParams) -> None:
    """Print the exit prompt and wait for Enter when pausing is enabled."""
    if not console.pause_on_exit:
        return
    print(console.exit_prompt)
    try:
        input()
    except EOFError:
        # stdin closed, nothing to wait for
        return

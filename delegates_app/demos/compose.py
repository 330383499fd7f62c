#!/usr/bin/env python3
"""
Compose Demo - combining and splitting delegates

Two delegates, a (hello) and b (goodbye), are composed with + into c,
which calls both. Removing a from c with - leaves d, which calls only
goodbye. Each delegate is then invoked after a label line.

Run: python -m delegates_app.demos.compose
"""

import sys

from ..callbacks import MessageDelegate
from ..config import DemoConfig
from ..errors import ConfigurationError
from ..logging.config import get_callback_logger, log_invocation
from .common import load_demo_config, pause_on_exit


def hello(name: str) -> None:
    print(f"  Hello, {name}!")


def goodbye(name: str) -> None:
    print(f"  Goodbye, {name}!")


def build_delegates() -> dict[str, MessageDelegate]:
    a = MessageDelegate(hello)
    b = MessageDelegate(goodbye)
    c = a + b
    d = c - a
    return {"a": a, "b": b, "c": c, "d": d}


def run(config: DemoConfig) -> dict[str, MessageDelegate]:
    """Invoke a, b, c and d in order; return them keyed by name."""
    params = config.compose
    callback_logger = get_callback_logger(__name__)

    delegates = build_delegates()
    for name, delegate in delegates.items():
        argument = name.upper()
        print(params.label_template.format(name=name))
        log_invocation(callback_logger, name, len(delegate.targets), argument)
        delegate(argument)

    return delegates


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

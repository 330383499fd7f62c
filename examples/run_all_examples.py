#!/usr/bin/env python3
"""
Run All Examples - delegate demos

Runs the bookstore and compose demos in sequence, then prints a short
summary with the status and duration of each.

Run: python examples/run_all_examples.py
"""

import sys
import time
import traceback
from typing import Any, Callable, Dict

from delegates_app.demos import bookstore, compose
from delegates_app.demos.common import load_demo_config
from delegates_app.errors import ConfigurationError


class ExampleRunner:
    """Manages execution of the demo programs."""

    def __init__(self):
        self.results = []
        self.config = load_demo_config()

    def run_example(self, example_name: str, run: Callable[[Any], Any]) -> Dict[str, Any]:
        """Run a single demo and capture its result."""
        print(f"\n{'=' * 60}")
        print(f"RUNNING: {example_name}")
        print(f"{'=' * 60}")

        start_time = time.time()

        try:
            run(self.config)
            return {
                'name': example_name,
                'status': 'success',
                'duration': time.time() - start_time,
                'error': None
            }
        except Exception as e:
            error_msg = f"{type(e).__name__}: {e}"
            print(f"ERROR in {example_name}: {error_msg}")
            traceback.print_exc()
            return {
                'name': example_name,
                'status': 'failed',
                'duration': time.time() - start_time,
                'error': error_msg
            }

    def run_all_examples(self) -> bool:
        """Run every demo; True when all succeeded."""
        examples = [
            ('Bookstore Demo', bookstore.run),
            ('Compose Demo', compose.run),
        ]

        for name, run in examples:
            self.results.append(self.run_example(name, run))

        self.print_summary()
        return all(r['status'] == 'success' for r in self.results)

    def print_summary(self):
        print(f"\n{'=' * 60}")
        print("SUMMARY")
        print(f"{'=' * 60}")
        for i, result in enumerate(self.results, 1):
            print(f"  {i}. {result['name']}: {result['status']} ({result['duration']:.3f}s)")
            if result['error']:
                print(f"     Error: {result['error']}")


def main():
    """Main function to run all examples."""
    try:
        runner = ExampleRunner()
        ok = runner.run_all_examples()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\n\nExample suite interrupted by user")
        sys.exit(1)
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()

"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .args import parse_settings
from .simulation import Table

USAGE_HINT = "girl, you're supposed to give more arguments?"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation with the given parameters and return an exit code.

    Parameters: number_of_philosophers time_to_die time_to_eat time_to_sleep
    [number_of_meals].
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 3:
        print(USAGE_HINT)
        return 0
    try:
        table = Table(parse_settings(args))
    except ValueError as error:
        print(f"philo: {error}", file=sys.stderr)
        return 1
    table.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Command-line entry point of the dining philosophers simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from philosophers.config import ConfigError, parse_arguments
from philosophers.simulation import Simulation

SUCCESS = 0
FAILURE = 1


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the simulation and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        config = parse_arguments(args)
    except ConfigError as error:
        sys.stderr.write(f"{error}\n")
        return FAILURE
    try:
        Simulation(config).run()
    except RuntimeError:
        sys.stderr.write("Error: Failed to create philosopher thread.\n")
        return FAILURE
    return SUCCESS


if __name__ == "__main__":
    sys.exit(main())
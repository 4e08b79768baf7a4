"""Command-line parameters of the dining philosophers simulation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from philosophers.utils import parse_int


class ConfigError(ValueError):
    """Raised when the simulation parameters are missing or invalid."""


@dataclass(frozen=True)
class SimulationConfig:
    """Validated simulation parameters; times are in milliseconds.

    ``required_meals`` is ``None`` when the simulation only ends on a death.
    """

    philosopher_count: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    required_meals: int | None = None


def parse_arguments(args: Sequence[str]) -> SimulationConfig:
    """Build a configuration from the command-line arguments (program name excluded).

    Expects ``number_of_philosophers time_to_die time_to_eat time_to_sleep``
    and optionally ``number_of_times_each_philosopher_must_eat``.
    """
    if len(args) not in (4, 5):
        raise ConfigError("Error: Wrong number of arguments")

    count, to_die, to_eat, to_sleep = (parse_int(arg) for arg in args[:4])
    if min(count, to_die, to_eat, to_sleep) < 1:
        raise ConfigError("Error: Invalid argument value.")

    required_meals = None
    if len(args) == 5:
        required_meals = parse_int(args[4])
        if required_meals < 1:
            raise ConfigError("Error: Invalid number of meals.")

    return SimulationConfig(
        philosopher_count=count,
        time_to_die=to_die,
        time_to_eat=to_eat,
        time_to_sleep=to_sleep,
        required_meals=required_meals,
    )
# philosophers

This package simulates the dining philosophers problem. Each philosopher runs in its own
thread. A fork sits between each pair of neighbours, and a lock guards each fork. A
philosopher picks up both neighbouring forks and eats. Then the philosopher puts the
forks down, sleeps and thinks.

Odd-numbered philosophers take their left fork first. Even-numbered philosophers take
their right fork first.

While the philosophers run, the thread that started the simulation acts as a monitor.
It checks for starvation, and it checks whether everyone has eaten enough.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_meals]
```

All times are in milliseconds, and every value must be at least 1. The numbers are read
leniently:

- leading whitespace and one sign are accepted;
- reading stops at the first non-digit, so `10ms` counts as 10;
- text with no digits counts as 0, which is then rejected.

If you leave out the meal count, the simulation runs until a philosopher dies.

Example:

```
philo 5 800 200 200 7
```

Each state change is printed on standard output as one line:

```
<elapsed ms> <philosopher id> <message>
```

The messages are `has taken a fork`, `is eating`, `is sleeping`, `is thinking` and
`died`. The simulation stops at the first death, or once every philosopher has eaten
the required number of meals.

If the argument count is wrong or a value is invalid, `philo` writes an error message
to standard error and exits with status 1. It also does this if a philosopher thread
cannot be started. Otherwise it exits with status 0.

## Use from Python

```python
import sys

from philosophers.config import parse_arguments
from philosophers.simulation import Simulation

config = parse_arguments(["4", "410", "200", "200", "3"])
dead = Simulation(config, sys.stdout).run()
```

The pieces behave as follows:

- `parse_arguments` takes the arguments without the program name. It returns a frozen
  `SimulationConfig`. If the values are invalid, it raises `ConfigError`, which is a
  subclass of `ValueError`.
- `Simulation.run` blocks until the simulation ends. It returns the `Philosopher` who
  died, or `None` if everyone ate the required number of meals.
- `philosophers.utils.parse_int` is the lenient integer parser described above.
- `philosophers.simulation.monitor_interval_ms` gives the pause between monitor checks.

## Running the tests

```
pip install .[test]
pytest
```
"""Threaded dining philosophers simulation with a monitoring loop."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from typing import TextIO

from philosophers.config import SimulationConfig
from philosophers.utils import current_time_ms

_MIN_CHECK_INTERVAL_US = 500
_MAX_CHECK_INTERVAL_US = 5000
_SLEEP_STEP_S = 0.0005
_THINK_PAUSE_S = 0.0001

FORK_TAKEN = "has taken a fork"
EATING = "is eating"
SLEEPING = "is sleeping"
THINKING = "is thinking"
DIED = "died"


def monitor_interval_ms(time_to_die: int) -> float:
    """Return the pause between two monitor checks, in milliseconds.

    A tenth of ``time_to_die`` is taken as microseconds and kept between
    0.5 and 5 milliseconds.
    """
    interval_us = time_to_die // 10
    interval_us = max(_MIN_CHECK_INTERVAL_US, min(_MAX_CHECK_INTERVAL_US, interval_us))
    return interval_us / 1000


@dataclass(eq=False)
class Philosopher:
    """One diner: its seat, its two forks and its eating record."""

    id: int
    left_fork: int
    right_fork: int
    simulation: Simulation = field(repr=False)
    meals_eaten: int = 0
    last_meal_time: int = 0

    def _take_fork(self, index: int) -> None:
        self.simulation.forks[index].acquire()
        self.simulation.print_status(self, FORK_TAKEN)

    def _eat_alone(self) -> None:
        sim = self.simulation
        self._take_fork(self.left_fork)
        try:
            sim.sleep_for(sim.config.time_to_die + 1)
        finally:
            sim.forks[self.left_fork].release()

    def _eat(self) -> None:
        sim = self.simulation
        if sim.config.philosopher_count == 1:
            self._eat_alone()
            return

        if self.id % 2 == 1:
            first, second = self.left_fork, self.right_fork
        else:
            first, second = self.right_fork, self.left_fork

        self._take_fork(first)
        try:
            self._take_fork(second)
            try:
                sim.print_status(self, EATING)
                with sim.data_lock:
                    self.last_meal_time = current_time_ms()
                    self.meals_eaten += 1
                sim.sleep_for(sim.config.time_to_eat)
            finally:
                sim.forks[second].release()
        finally:
            sim.forks[first].release()

    def run(self) -> None:
        """Eat, sleep and think until the simulation ends."""
        sim = self.simulation
        config = sim.config
        if self.id % 2 == 0:
            time.sleep(config.time_to_eat / 2 / 1_000_000)
        while not sim.is_finished():
            self._eat()
            if sim.is_finished():
                break
            sim.print_status(self, SLEEPING)
            sim.sleep_for(config.time_to_sleep)
            if sim.is_finished():
                break
            sim.print_status(self, THINKING)
            if config.philosopher_count % 2 == 1:
                time.sleep(_THINK_PAUSE_S)


class Simulation:
    """Shared table state: forks, locks, the philosophers and the status log."""

    def __init__(self, config: SimulationConfig, out: TextIO | None = None) -> None:
        self.config = config
        self.out = out if out is not None else sys.stdout
        count = config.philosopher_count
        self.forks = [threading.Lock() for _ in range(count)]
        self.print_lock = threading.Lock()
        self.data_lock = threading.RLock()
        self.ended = False
        self.start_time = current_time_ms()
        self.philosophers = [
            Philosopher(id=seat + 1, left_fork=seat, right_fork=(seat + 1) % count, simulation=self)
            for seat in range(count)
        ]
        self._threads: list[threading.Thread] = []

    def is_finished(self) -> bool:
        """Return whether the simulation has ended."""
        with self.data_lock:
            return self.ended

    def print_status(self, philosopher: Philosopher, message: str, is_death: bool = False) -> None:
        """Log ``message`` for ``philosopher`` unless the simulation has ended.

        A death is always logged and ends the simulation.
        """
        with self.print_lock:
            if self.ended and not is_death:
                return
            elapsed = current_time_ms() - self.start_time
            self.out.write(f"{elapsed} {philosopher.id} {message}\n")
            self.out.flush()
            if is_death:
                with self.data_lock:
                    self.ended = True

    def sleep_for(self, duration_ms: int) -> None:
        """Wait ``duration_ms`` milliseconds, returning early once the simulation ends."""
        start = current_time_ms()
        while not self.is_finished():
            if current_time_ms() - start >= duration_ms:
                break
            time.sleep(_SLEEP_STEP_S)

    def check_for_death(self) -> Philosopher | None:
        """Return the first philosopher who starved, ending the simulation, or None."""
        with self.data_lock:
            now = current_time_ms()
            for philosopher in self.philosophers:
                if now - philosopher.last_meal_time >= self.config.time_to_die:
                    self.ended = True
                    return philosopher
            return None

    def all_satisfied(self) -> bool:
        """Return whether every philosopher ate the required meals, ending the simulation if so."""
        required = self.config.required_meals
        if required is None:
            return False
        with self.data_lock:
            if all(p.meals_eaten >= required for p in self.philosophers):
                self.ended = True
                return True
            return False

    def _evaluate(self) -> tuple[bool, Philosopher | None]:
        with self.data_lock:
            dead = self.check_for_death()
            if dead is None:
                return self.all_satisfied(), None
        self.print_status(dead, DIED, is_death=True)
        return True, dead

    def _launch(self) -> None:
        self.start_time = current_time_ms()
        for philosopher in self.philosophers:
            philosopher.last_meal_time = self.start_time
            thread = threading.Thread(
                target=philosopher.run, name=f"philosopher-{philosopher.id}", daemon=True
            )
            try:
                thread.start()
            except RuntimeError:
                with self.data_lock:
                    self.ended = True
                self._join()
                raise
            self._threads.append(thread)

    def _join(self) -> None:
        for thread in self._threads:
            thread.join()

    def run(self) -> Philosopher | None:
        """Run the simulation to its end; return the philosopher who died, if any."""
        self._launch()
        pause = monitor_interval_ms(self.config.time_to_die) / 1000
        try:
            while True:
                done, dead = self._evaluate()
                if done:
                    return dead
                time.sleep(pause)
        finally:
            with self.data_lock:
                self.ended = True
            self._join()
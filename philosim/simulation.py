"""The dining philosophers simulation: philosophers, forks and a monitor."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass
from typing import TextIO

from .args import Settings

TAKEN_FORK = "has taken a fork"
EATING = "is eating"
SLEEPING = "is sleeping"
THINKING = "is thinking"
DIED = "died"


def current_time_ms() -> int:
    """Return the wall-clock time in milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass
class Philosopher:
    """One seat at the table with the indices of its two forks."""

    id: int
    left_fork: int
    right_fork: int
    meals_eaten: int = 0
    last_meal: int = 0


class Table:
    """Shared state of a simulation run: forks, the death flag and output."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        count = settings.philosophers
        if count < 1:
            raise ValueError("there must be at least one philosopher")
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self._dead = False
        self._death_lock = threading.Lock()
        self._msg_lock = threading.Lock()
        self._state_lock = threading.Lock()
        self.forks = [threading.Lock() for _ in range(count)]
        self.start_time = current_time_ms()
        self.philosophers = [
            Philosopher(
                id=seat + 1,
                left_fork=seat,
                right_fork=(seat + 1) % count,
                last_meal=self.start_time,
            )
            for seat in range(count)
        ]

    @property
    def dead(self) -> bool:
        """True once the simulation has been stopped."""
        with self._death_lock:
            return self._dead

    def _write(self, philosopher: Philosopher, message: str) -> None:
        stamp = current_time_ms() - self.start_time
        print(f"{stamp} {philosopher.id} {message}", file=self.out, flush=True)

    def _report_death(self, philosopher: Philosopher) -> None:
        with self._msg_lock:
            self._write(philosopher, DIED)

    def announce(self, philosopher: Philosopher, message: str) -> bool:
        """Print a status line unless the simulation has stopped.

        Returns False, printing nothing, once the simulation is over.
        """
        if self.dead:
            return False
        with self._msg_lock:
            self._write(philosopher, message)
        return True

    def sleep(self, ms: int) -> bool:
        """Wait ``ms`` milliseconds; return False early if the run stops."""
        start = current_time_ms()
        while current_time_ms() - start < ms:
            if self.dead:
                return False
            time.sleep(0.0001)
        return True

    def _dine(self, philosopher: Philosopher) -> bool:
        if philosopher.id % 2 == 0:
            first, second = philosopher.right_fork, philosopher.left_fork
        else:
            first, second = philosopher.left_fork, philosopher.right_fork
        with self.forks[first]:
            if not self.announce(philosopher, TAKEN_FORK):
                return False
            with self.forks[second]:
                if not self.announce(philosopher, TAKEN_FORK):
                    return False
                with self._state_lock:
                    philosopher.last_meal = current_time_ms()
                    philosopher.meals_eaten += 1
                if not self.announce(philosopher, EATING):
                    return False
                return self.sleep(self.settings.time_to_eat)

    def eat(self, philosopher: Philosopher) -> bool:
        """Take both forks and eat once; return False if the run stopped.

        A philosopher who already ate the required number of meals skips the
        meal. A lone philosopher holds the single fork until time runs out.
        """
        settings = self.settings
        if self.dead:
            return False
        with self._state_lock:
            full = settings.meals != 0 and philosopher.meals_eaten == settings.meals
        if full:
            return True
        if settings.philosophers == 1:
            with self.forks[philosopher.left_fork]:
                self.announce(philosopher, TAKEN_FORK)
                self.sleep(settings.time_to_die)
            return True
        return self._dine(philosopher)

    def _starved(self, philosopher: Philosopher) -> bool:
        with self._state_lock:
            if current_time_ms() - philosopher.last_meal <= self.settings.time_to_die:
                return False
            with self._death_lock:
                self._dead = True
                self._report_death(philosopher)
            return True

    def live(self, philosopher: Philosopher) -> None:
        """Run one philosopher's eat, sleep and think cycle until the end."""
        settings = self.settings
        if philosopher.id % 2 == 0:
            self.sleep(15)
        with self._state_lock:
            philosopher.last_meal = current_time_ms()
        while not self.dead:
            if not self.eat(philosopher):
                break
            if not self.announce(philosopher, SLEEPING):
                break
            if not self.sleep(settings.time_to_sleep):
                break
            if not self.announce(philosopher, THINKING):
                break
            if self._starved(philosopher):
                break
            if settings.philosophers % 2 == 1 and settings.time_to_sleep <= settings.time_to_eat:
                time.sleep((settings.time_to_eat - settings.time_to_sleep + 1) / 1000)

    def monitor(self) -> Philosopher | None:
        """Watch for starvation or for everyone being full, then stop the run.

        Returns the philosopher who died, or None if the run ended otherwise.
        """
        settings = self.settings
        while not self.dead:
            full = 0
            for philosopher in self.philosophers:
                with self._state_lock:
                    if current_time_ms() - philosopher.last_meal > settings.time_to_die:
                        with self._death_lock:
                            self._dead = True
                        self._report_death(philosopher)
                        return philosopher
                if settings.meals > 0 and philosopher.meals_eaten >= settings.meals:
                    full += 1
            if settings.meals > 0 and full == len(self.philosophers):
                with self._death_lock:
                    self._dead = True
                return None
            time.sleep(0.001)
        return None

    def run(self) -> None:
        """Start every philosopher and the monitor, and wait for them all."""
        diners = [
            threading.Thread(target=self.live, args=(philosopher,), name=f"philosopher-{philosopher.id}")
            for philosopher in self.philosophers
        ]
        for diner in diners:
            diner.start()
        watcher = threading.Thread(target=self.monitor, name="monitor")
        watcher.start()
        for diner in diners:
            diner.join()
        watcher.join()
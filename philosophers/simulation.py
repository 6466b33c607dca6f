"""The dining philosophers simulation: threads, forks and a death monitor."""

from __future__ import annotations

import enum
import sys
import threading
import time
from typing import TextIO

from philosophers.parsing import InputError, Settings, check_input, parse_settings

_POLL_SECONDS = 0.0001


def now_ms() -> int:
    """Wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


class Event(enum.Enum):
    """State changes a philosopher announces."""

    TAKEN_FORK = "has taken a fork"
    EATING = "is eating"
    SLEEPING = "is sleeping"
    THINKING = "is thinking"
    DIED = "died"


class Table:
    """Shared state of one simulation: settings, forks, philosophers and locks."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.start = now_ms()
        self.dead = False
        self._state_lock = threading.Lock()
        self._meal_lock = threading.Lock()
        forks = [threading.Lock() for _ in range(settings.number)]
        self.philosophers = [
            Philosopher(self, seat + 1, fork, forks[(seat + 1) % len(forks)])
            for seat, fork in enumerate(forks)
        ]

    @property
    def meal_lock(self) -> threading.Lock:
        return self._meal_lock

    def report(self, event: Event, philosopher: Philosopher) -> bool:
        """Print an event line unless the simulation is over; deaths always print."""
        with self._state_lock:
            if self.dead and event is not Event.DIED:
                return False
            elapsed = now_ms() - self.start
            self.out.write(f"{elapsed} {philosopher.ident} {event.value}\n")
            self.out.flush()
            return True

    def is_over(self) -> bool:
        """Whether a philosopher has died."""
        with self._state_lock:
            return self.dead

    def pause(self, duration_ms: int) -> None:
        """Sleep for a duration, waking early once the simulation is over."""
        begin = now_ms()
        while duration_ms > now_ms() - begin:
            if self.is_over():
                return
            time.sleep(_POLL_SECONDS)

    def monitor(self) -> None:
        """Watch every philosopher until one starves, then end the simulation."""
        while True:
            for philosopher in self.philosophers:
                with self._meal_lock:
                    if self.settings.time_to_die < now_ms() - philosopher.last_meal:
                        self.report(Event.DIED, philosopher)
                        with self._state_lock:
                            self.dead = True
                        return
            time.sleep(_POLL_SECONDS)

    def run(self) -> None:
        """Start every philosopher and the monitor, and wait for all of them."""
        if len(self.philosophers) == 1:
            targets = [self.philosophers[0].dine_alone]
        else:
            targets = [philosopher.dine for philosopher in self.philosophers]
        threads = [threading.Thread(target=target) for target in targets]
        for thread in threads:
            thread.start()
        watcher = threading.Thread(target=self.monitor)
        watcher.start()
        for thread in threads:
            thread.join()
        watcher.join()


class Philosopher:
    """One seat at the table with the two forks beside it."""

    def __init__(
        self,
        table: Table,
        ident: int,
        left_fork: threading.Lock,
        right_fork: threading.Lock,
    ) -> None:
        self.table = table
        self.ident = ident
        self.left_fork = left_fork
        self.right_fork = right_fork
        self.last_meal = now_ms()

    def record_meal(self) -> None:
        """Note the current time as the end of the latest meal."""
        with self.table.meal_lock:
            self.last_meal = now_ms()

    def dine(self) -> None:
        """Take forks, eat, sleep and think until the simulation ends."""
        table = self.table
        settings = table.settings
        if self.ident % 2 == 0:
            time.sleep(settings.time_to_eat / 2000)
        while True:
            if table.is_over():
                return
            with self.left_fork:
                if table.is_over():
                    return
                table.report(Event.TAKEN_FORK, self)
                with self.right_fork:
                    if table.is_over():
                        return
                    table.report(Event.TAKEN_FORK, self)
                    table.report(Event.EATING, self)
                    table.pause(settings.time_to_eat)
                    self.record_meal()
            if table.is_over():
                return
            table.report(Event.SLEEPING, self)
            table.pause(settings.time_to_sleep)
            if table.is_over():
                return
            table.report(Event.THINKING, self)

    def dine_alone(self) -> None:
        """Hold the single fork and wait, since a lone philosopher cannot eat."""
        table = self.table
        while True:
            if table.is_over():
                return
            with self.left_fork:
                table.report(Event.TAKEN_FORK, self)
                table.pause(table.settings.time_to_die * 1000)
                if table.is_over():
                    return


def main(argv: list[str] | None = None) -> int:
    """Run the simulation for the given arguments and return an exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        check_input(args)
    except InputError:
        sys.stderr.write("input error\n")
        return 1
    try:
        settings = parse_settings(args)
    except InputError:
        return 1
    Table(settings, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
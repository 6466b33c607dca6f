# philosophers

A console simulation of the dining philosophers problem. Each philosopher runs
in its own thread. There is one fork between each pair of neighbours. A
philosopher takes the left fork and then the right fork, eats, sleeps and
thinks, over and over. A monitor thread watches for anyone who has gone too
long without a meal. When that happens it announces the death and ends the
simulation.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

The same program can also be started with
`python -m philosophers.simulation ...`.

All times are in milliseconds. The arguments are checked as follows:

- There must be four or five arguments, and each must be made only of the
  digits `0`-`9`. If not, `input error` is written to standard error and the
  exit status is 1.
- A value that does not fit in a signed 32-bit integer gives exit status 1
  without a message.
- A philosopher count of zero also gives exit status 1 without a message.

Example:

```
philo 5 800 200 200
```

Each state change is printed on its own line. A line gives the milliseconds
since the start of the simulation, then the philosopher's number (counted from
1), then the event:

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
400 1 is thinking
```

The possible events are `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` and `died`. Even-numbered philosophers wait half of
`time_to_eat` before they first reach for a fork. A meal counts from the moment
eating ends. A philosopher dies once more than `time_to_die` has passed since
that moment, or since the start if they have not eaten yet. After a death no
further state lines are printed, and the program exits with status 0 once
every thread has stopped.

A table with a single philosopher has only one fork. That philosopher takes the
fork and never eats, and dies once `time_to_die` has passed.

## What it does not do

The optional fifth argument is checked for its form, but nothing else is done
with it. The simulation does not stop when every philosopher has eaten that
many times. It runs until a philosopher dies.

## Library use

```python
import sys

from philosophers.parsing import parse_settings
from philosophers.simulation import Table

settings = parse_settings(["3", "400", "100", "100"])
Table(settings, sys.stdout).run()
```

`philosophers.parsing`:

- `check_input(args)` requires four or five all-digit arguments.
- `parse_int(text)` reads a leading integer the way `atoi` does. It skips
  leading whitespace and one sign, and rejects values outside 32 bits.
- `parse_settings(args)` builds a frozen `Settings`, which has the fields
  `number`, `time_to_die`, `time_to_eat`, `time_to_sleep` and `meals`.
  `meals` is `None` when there is no fifth argument.
- Each of these functions raises `InputError`, a subclass of `ValueError`,
  when the input is invalid.

`philosophers.simulation`:

- `Table(settings, out)` builds the forks and the `Philosopher` objects. `out`
  defaults to standard output.
- `Table.run()` starts the philosopher threads and the monitor and waits for
  all of them.
- `Table.report(event, philosopher)` prints one `Event` line. It returns
  `False` without printing once the simulation is over, except for `DIED`.
- `Table.is_over()` tells whether a philosopher has died.
- `Table.pause(duration_ms)` sleeps for that many milliseconds, but wakes early
  once the simulation is over.
- `Table.monitor()` watches the philosophers until one of them starves.
- `now_ms()` returns the wall-clock time in milliseconds.
- `main(argv=None)` is the command's entry point and returns the exit status.

## Running the tests

```
pip install ".[test]"
pytest
```
# philosim

A threaded simulation of the dining philosophers problem.

Philosophers sit around a round table with one fork between each pair of
neighbours. A philosopher needs both neighbouring forks to eat. Each one runs in
its own thread and repeatedly takes forks, eats, sleeps and thinks, while a
monitor thread watches the table. The simulation ends when a philosopher has
gone longer than the time to die without starting a meal, or, when a meal
count is given, once every philosopher has eaten that many meals.

## Installation

```
pip install .
```

## Usage

```
philosim NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS]
```

All times are in milliseconds.

- `NUMBER_OF_PHILOSOPHERS`: how many philosophers, and how many forks, there
  are. It must be at least 1.
- `TIME_TO_DIE`: how long a philosopher may go without starting a meal.
- `TIME_TO_EAT`: how long a meal takes. A philosopher holds two forks for the
  whole meal.
- `TIME_TO_SLEEP`: how long a philosopher sleeps after eating.
- `MEALS` (optional): stop once every philosopher has eaten this many times.
  Leave it out, or give 0, to run until somebody dies. A philosopher who has
  eaten enough skips further meals but keeps sleeping and thinking.

Each number is read leniently: leading whitespace and one sign are allowed,
reading stops at the first character that is not a digit, and text with no
leading digits counts as 0.

With fewer than three arguments the command prints a short hint and exits with
status 0. With exactly three, or with fewer than one philosopher, it prints an
error to standard error and exits with status 1.

Example:

```
philosim 5 800 200 200 7
```

Each event is printed on its own line as the time in milliseconds since the
start, the philosopher's number (counted from 1) and what happened:

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
...
```

The events are `has taken a fork`, `is eating`, `is sleeping`, `is thinking` and
`died`. Once the run has stopped, philosophers print no further events.

A single philosopher has only one fork: it takes it, waits for the time to die
and then starves.

## Using it from Python

```python
import io

from philosim.args import parse_settings
from philosim.simulation import Table

settings = parse_settings(["4", "410", "200", "200", "3"])
output = io.StringIO()
table = Table(settings, out=output)
table.run()
print(output.getvalue())
```

`philosim.args`:

- `Settings` holds `philosophers`, `time_to_die`, `time_to_eat`,
  `time_to_sleep` and `meals` (0 for no limit).
- `parse_settings(args)` builds `Settings` from the arguments without the
  program name, and raises `ArgumentError` (a `ValueError`) when there are
  fewer than four.
- `parse_int(text)` reads one number with the lenient rules above; the result
  wraps like a signed 32-bit integer.
- `is_alpha(text)` tells whether a string is non-empty and made only of ASCII
  letters.
- `check_args(args)` raises `ArgumentError` when there are fewer than four
  arguments, when any of the first five reads as a negative number, or when
  any of them is not made only of ASCII letters. Numeric arguments are
  therefore rejected by it; the command does not call it.

`philosim.simulation`:

- `Table(settings, out=None)` sets up the forks and `Philosopher` records;
  output goes to standard output unless a text stream is given.
- `Table.run()` starts every philosopher and the monitor and waits for them.
- `Table.monitor()` returns the `Philosopher` who died, or `None` if the run
  ended because everyone was full.
- `Table.dead` is true once the run has stopped.
- `Table.announce`, `Table.sleep`, `Table.eat` and `Table.live` are the steps
  of a philosopher's cycle; each returns `False` once the run has stopped.
- `current_time_ms()` gives the wall-clock time in milliseconds.

## Running the tests

```
pip install ".[test]"
pytest
```
"""Command-line argument handling for the dining philosophers simulation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

_WHITESPACE = frozenset("\t\n\v\f\r ")
_INT_BITS = 32


class ArgumentError(ValueError):
    """Raised when the simulation arguments are unusable."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds."""

    philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals: int = 0  # 0 means no meal limit


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer."""
    modulus = 1 << _INT_BITS
    value %= modulus
    if value >= modulus // 2:
        value -= modulus
    return value


def parse_int(text: str) -> int:
    """Parse a leading integer leniently, returning 0 when there is none.

    Leading whitespace is skipped, one optional sign is accepted and parsing
    stops at the first non-digit. The result wraps like a 32-bit integer.
    """
    position = 0
    while position < len(text) and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < len(text) and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    result = 0
    for char in text[position:]:
        if not "0" <= char <= "9":
            break
        result = result * 10 + (ord(char) - ord("0"))
    return _wrap_int(result * sign)


def is_alpha(text: str | None) -> bool:
    """Return True if ``text`` is non-empty and made only of ASCII letters."""
    if not text:
        return False
    return all("a" <= char <= "z" or "A" <= char <= "Z" for char in text)


def check_args(args: Sequence[str]) -> None:
    """Validate the simulation arguments, raising ArgumentError if rejected.

    ``args`` holds the parameters without the program name. Each of the first
    four, and the fifth when given, must not parse to a negative number and
    must consist of letters only.
    """
    if len(args) < 4:
        raise ArgumentError("expected at least four arguments")
    checked = list(args[:5])
    for value in checked:
        if parse_int(value) < 0:
            raise ArgumentError(f"negative argument: {value!r}")
    for value in checked:
        if not is_alpha(value):
            raise ArgumentError(f"argument is not alphabetic: {value!r}")


def parse_settings(args: Sequence[str]) -> Settings:
    """Build Settings from the parameters (without the program name).

    The order is: number of philosophers, time to die, time to eat, time to
    sleep and, optionally, the number of meals each philosopher must eat.
    """
    if len(args) < 4:
        raise ArgumentError("expected at least four arguments")
    philosophers, die, eat, sleep = (parse_int(value) for value in args[:4])
    meals = parse_int(args[4]) if len(args) > 4 else 0
    return Settings(
        philosophers=philosophers,
        time_to_die=die,
        time_to_eat=eat,
        time_to_sleep=sleep,
        meals=meals,
    )
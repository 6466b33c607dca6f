"""Command-line argument validation and conversion for the dining simulation."""

from __future__ import annotations

from dataclasses import dataclass

_WHITESPACE = "\t\n\v\f\r "
_DIGITS = "0123456789"
_INT_MIN = -2_147_483_648
_INT_MAX = 2_147_483_647


class InputError(ValueError):
    """Raised when the command-line arguments cannot describe a simulation."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation; all durations are in milliseconds."""

    number: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals: int | None = None


def parse_int(text: str) -> int:
    """Read a leading integer the way atoi does, rejecting values outside 32 bits.

    Leading whitespace and one sign are skipped, digits are read up to the
    first non-digit, and an empty digit run gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]

    digits = []
    for char in rest:
        if char not in _DIGITS:
            break
        digits.append(char)

    value = sign * int("".join(digits)) if digits else 0
    if not _INT_MIN <= value <= _INT_MAX:
        raise InputError(f"number out of range: {text!r}")
    return value


def check_input(args: list[str]) -> None:
    """Require four or five arguments made only of decimal digits."""
    if not 4 <= len(args) <= 5:
        raise InputError("input error")
    for arg in args:
        if any(char not in _DIGITS for char in arg):
            raise InputError("input error")


def parse_settings(args: list[str]) -> Settings:
    """Validate the arguments and turn them into simulation settings."""
    check_input(args)
    number = parse_int(args[0])
    if number <= 0:
        raise InputError("there must be at least one philosopher")

    durations = [parse_int(arg) for arg in args[1:4]]
    if any(value < 0 for value in durations):
        raise InputError("durations must not be negative")
    time_to_die, time_to_eat, time_to_sleep = durations

    meals = parse_int(args[4]) if len(args) == 5 else None
    return Settings(number, time_to_die, time_to_eat, time_to_sleep, meals)
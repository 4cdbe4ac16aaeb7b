"""Variables and primitive types: bindings, booleans, characters, arrays, slices, tuples."""

from __future__ import annotations

from collections.abc import Sequence


def _display(value: object) -> str:
    """Render a value as plain text, writing whole floats without a fractional part."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def ten_check(x: int) -> str:
    """Tell whether the value is ten."""
    prefix = "" if x == 10 else "Not "
    return f"{prefix}ten!".capitalize()


def numbers_sequence() -> list[str]:
    """Show a binding that is reassigned from 3 to 5."""
    x = 3
    lines = [f"Number {x}"]
    x = 5
    lines.append(f"Number {x}")
    return lines


def greeting(is_morning: bool, is_evening: bool) -> list[str]:
    """Return the greetings that apply to the time of day."""
    greetings = []
    if is_morning:
        greetings.append("Good morning!")
    if is_evening:
        greetings.append("Good evening!")
    return greetings


def describe_char(c: str) -> str:
    """Classify a single character as alphabetic, numeric or neither."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    if c.isalpha():
        return "Alphabetical!"
    if c.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def array_message(a: Sequence) -> list[str]:
    """Describe an array: big ones (100 or more items) also show their sixth item."""
    if len(a) >= 100:
        return [_display(a[5]), "Wow, that's a big array!"]
    return ["Meh, I eat arrays like that for breakfast."]


def nice_slice(a: Sequence) -> Sequence:
    """Return the items at positions 1 to 3."""
    return a[1:4]


def describe_cat(cat: tuple) -> str:
    """Describe a (name, age) pair."""
    name, age = cat
    return f"{name} is {_display(age)} years old."


def second_number(numbers: Sequence):
    """Return the second element of a tuple."""
    return numbers[1]
"""Functions and conditionals: calls, parameters, return values and branching."""

from __future__ import annotations


def call_me(num: int) -> list[str]:
    """Return one ring message for each call, numbered from 1."""
    return [f"Ring! Call number {i}" for i in range(1, num + 1)]


def is_even(num: int) -> bool:
    """Tell whether a number is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off an even price and 3 off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Return the square of a number."""
    return num * num


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return a if a > b else b


def calculate_apple_price(amount: int) -> int:
    """Price an order of apples: 2 each, or 1 each for orders above 40."""
    return amount if amount > 40 else amount * 2


def times_two(num: int) -> int:
    """Double a number."""
    return num * 2
"""Error handling: raising with messages, parsing input and validating values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

_DIGITS = frozenset("0123456789")


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width: an optional sign, then ASCII digits."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError("invalid digit found in string")
    value = int(text)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the nametag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Cost in tokens of the typed quantity: 5 per item plus a fee of 1."""
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_int(item_quantity, 32)
    cost = qty * cost_per_item + processing_fee
    if not -(1 << 31) <= cost < (1 << 31):
        raise OverflowError("cost does not fit in a 32-bit integer")
    return cost


def purchase(tokens: int, item_quantity: str) -> str:
    """Describe the outcome of buying the typed quantity with the given tokens."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        return "You can't afford that many!"
    return f"You now have {tokens - cost} tokens."


class CreationError(ValueError):
    """Raised when a value is not a positive nonzero integer."""

    NEGATIVE = "Negative"
    ZERO = "Zero"

    def __init__(self, kind: str) -> None:
        super().__init__(kind)
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer known to be greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value == 0:
            raise CreationError(CreationError.ZERO)
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)


def read_and_validate(stream: TextIO) -> PositiveNonzeroInteger:
    """Read one line, parse it as an integer and check that it is positive.

    Errors from reading, parsing and validating propagate unchanged.
    """
    line = stream.readline()
    return PositiveNonzeroInteger(_parse_int(line.strip(), 64))


def pop_too_much() -> bool:
    """Pop from a one-item list twice without failing on the empty second pop."""
    items = [3]
    last = items.pop() if items else None
    print(f"The last item in the list is {last}")
    second_to_last = items.pop() if items else None
    if second_to_last is not None:
        print(f"The second-to-last item in the list is {second_to_last}")
    return True
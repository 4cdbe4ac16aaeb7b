"""Ownership of lists, structs and message variants handled by pattern matching."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

_FILL_VALUES = (22, 44, 66)


def _check_byte(value: int, what: str) -> int:
    if not 0 <= value <= 255:
        raise ValueError(f"{what} must be between 0 and 255, got {value}")
    return value


def fill_vec(vec: list[int]) -> list[int]:
    """Append 22, 44 and 66 to the given list and hand the same list back."""
    vec.extend(_FILL_VALUES)
    return vec


def copy_and_fill(vec: list[int]) -> list[int]:
    """Return a new list holding the first three items; the original is left alone."""
    if len(vec) < 3:
        raise IndexError(f"need at least 3 items, got {len(vec)}")
    return list(vec[:3])


def new_filled_vec() -> list[int]:
    """Create a fresh list holding 22, 44 and 66."""
    return fill_vec([])


@dataclass
class ColorClassicStruct:
    """A colour with named fields."""

    name: str
    hex: str


class ColorTupleStruct(NamedTuple):
    """A colour as a (name, hex) pair."""

    name: str
    hex: str


class UnitStruct:
    """A type without fields; all of its values are equal."""

    def __repr__(self) -> str:
        return "UnitStruct"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnitStruct)

    def __hash__(self) -> int:
        return hash(UnitStruct)


@dataclass
class Order:
    """A customer order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """Return the order that new orders are based on."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass
class Point:
    """A position on a byte-sized grid."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_byte(self.x, "x")
        _check_byte(self.y, "y")


@dataclass(frozen=True)
class ChangeColor:
    """Message: switch to a new RGB colour."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel, value in zip("rgb", (self.r, self.g, self.b)):
            _check_byte(value, channel)


@dataclass(frozen=True)
class Echo:
    """Message: print some text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Message: move to a new position."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_byte(self.x, "x")
        _check_byte(self.y, "y")


@dataclass(frozen=True)
class Quit:
    """Message: stop."""


Message = ChangeColor | Echo | Move | Quit


@dataclass
class State:
    """Mutable state driven by messages."""

    color: tuple[int, int, int]
    position: Point
    quit: bool

    def change_color(self, color: tuple[int, int, int]) -> None:
        """Set the current colour."""
        self.color = color

    def quit_now(self) -> None:
        """Mark the state as finished."""
        self.quit = True

    def echo(self, s: str) -> None:
        """Print the text."""
        print(s)

    def move_position(self, p: Point) -> None:
        """Set the current position."""
        self.position = p

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(r, g, b):
                self.change_color((r, g, b))
            case Echo(text):
                self.echo(text)
            case Move(x, y):
                self.move_position(Point(x, y))
            case Quit():
                self.quit_now()
            case _:
                raise TypeError(f"unknown message: {message!r}")
"""Strings, macros and modules: owned and borrowed text, variadic helpers, re-exports."""

from __future__ import annotations

PEAR = "Pear"
APPLE = "Apple"
CUCUMBER = "Cucumber"
CARROT = "Carrot"

FRUIT = PEAR
VEGGIE = CUCUMBER


def current_favorite_color() -> str:
    """Return the current favourite colour."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Tell whether the word is one of the known colours."""
    return attempt in ("green", "blue", "red")


def string_examples() -> list[str]:
    """Build each example value with the string operation it demonstrates."""
    return [
        "blue",
        str("red"),
        "hi",
        "rust is fun!",
        "nice weather",
        "Interpolation {}".format("Station"),
        "abc"[0:1],
        "  hello there ".strip(),
        "Happy Monday!".replace("Mon", "Tues"),
        "mY sHiFt KeY iS sTiCkY".lower(),
    ]


def hello_macro(var: object) -> str:
    """Greet the given value."""
    return f"Hello {var}"


def my_macro(*args: object) -> str:
    """Return the fixed message with no argument, or a message showing one argument."""
    if not args:
        return "Check out my macro!"
    if len(args) == 1:
        return f"Look at this other macro: {args[0]}"
    raise TypeError(f"my_macro takes at most one argument ({len(args)} given)")


def make_sausage() -> str:
    """Make a sausage."""
    return "sausage!"


def favorite_snacks() -> str:
    """Name the favourite fruit and vegetable."""
    return f"favorite snacks: {FRUIT} and {VEGGIE}"
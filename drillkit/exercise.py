"""Exercise definitions: loading the exercise list, compiling, running and state."""

from __future__ import annotations

import os
import re
import subprocess
import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

RUSTC_COLOR_ARGS = ("--color", "always")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2


def temp_file() -> str:
    """Return the path of the per-process binary produced by compilation."""
    return f"./temp_{os.getpid()}"


class Mode(Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"


@dataclass(frozen=True)
class ContextLine:
    """One source line shown around the `I AM NOT DONE` marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class Done:
    """The exercise carries no `I AM NOT DONE` marker."""


@dataclass(frozen=True)
class Pending:
    """The exercise still carries the marker; `context` surrounds it."""

    context: tuple[ContextLine, ...]


State = Done | Pending


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part.removesuffix("\r") for part in parts]


@dataclass
class Exercise:
    """A single exercise as listed in the exercise file."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def compile(self) -> subprocess.CompletedProcess:
        """Compile the exercise into the temporary binary."""
        args = ["rustc"]
        if self.mode is Mode.TEST:
            args.append("--test")
        args += [str(self.path), "-o", temp_file(), *RUSTC_COLOR_ARGS]
        try:
            return subprocess.run(args, capture_output=True)
        except OSError as exc:
            raise RuntimeError("Failed to run 'compile' command.") from exc

    def run(self) -> subprocess.CompletedProcess:
        """Run the compiled temporary binary."""
        try:
            return subprocess.run([temp_file()], capture_output=True)
        except OSError as exc:
            raise RuntimeError("Failed to run 'run' command") from exc

    def clean(self) -> None:
        """Remove the temporary binary, ignoring any error."""
        try:
            os.remove(temp_file())
        except OSError:
            pass

    def state(self) -> State:
        """Tell whether the exercise still carries the `I AM NOT DONE` marker."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return Done()

        lines = _lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)),
            None,
        )
        if matched is None:
            raise RuntimeError("The marker spans several lines in " + str(self.path))

        low = max(matched - CONTEXT, 0)
        high = matched + CONTEXT
        return Pending(
            tuple(
                ContextLine(line=line, number=i + 1, important=i == matched)
                for i, line in enumerate(lines[low : high + 1], start=low)
            )
        )

    def __str__(self) -> str:
        return str(self.path)


def load_exercises(path) -> list[Exercise]:
    """Read the exercise list from a TOML file with an `exercises` array."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    try:
        return [
            Exercise(
                name=entry["name"],
                path=Path(entry["path"]),
                mode=Mode(entry["mode"]),
                hint=entry["hint"],
            )
            for entry in data["exercises"]
        ]
    except KeyError as exc:
        raise ValueError(f"missing field {exc.args[0]!r} in {path}") from exc
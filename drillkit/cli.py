"""Command-line entry point: verify, watch, run and hint."""

from __future__ import annotations

import argparse
import os
import queue
import subprocess
import sys
import threading
from pathlib import Path
from typing import Iterable, Iterator, Sequence, TextIO

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .exercise import Exercise, load_exercises
from .run import run
from .verify import VerificationFailed, verify

INFO_FILE = "info.toml"
DEFAULT_OUT_FILE = "default_out.txt"
WATCH_DIR = "./exercises"
DEBOUNCE_SECONDS = 2.0
# ANSI "reset to initial state"; works in UNIX and newer Windows terminals.
CLEAR_SCREEN = "\x1bc"

BANNER = r"""
       welcome to...
      _      _ _ _ _    _ _
   __| |_ __(_) | | | _(_) |_
  / _` | '__| | | | |/ / | __|
 | (_| | |  | | | |   <| | |_
  \__,_|_|  |_|_|_|_|\_\_|\__|
"""


class _Parser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on usage errors."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="drillkit",
        description="A collection of small exercises to get you used to "
        "writing and reading Rust code",
    )
    parser.set_defaults(command=None)
    commands = parser.add_subparsers(metavar="COMMAND")

    verify_cmd = commands.add_parser(
        "verify",
        aliases=["v"],
        help="Verifies all exercises according to the recommended order",
    )
    verify_cmd.set_defaults(command="verify")

    watch_cmd = commands.add_parser(
        "watch", aliases=["w"], help="Reruns `verify` when files were edited"
    )
    watch_cmd.set_defaults(command="watch")

    run_cmd = commands.add_parser(
        "run", aliases=["r"], help="Runs/Tests a single exercise"
    )
    run_cmd.add_argument("name")
    run_cmd.set_defaults(command="run")

    hint_cmd = commands.add_parser(
        "hint", aliases=["h"], help="Returns a hint for the current exercise"
    )
    hint_cmd.add_argument("name")
    hint_cmd.set_defaults(command="hint")
    return parser


def _find(exercises: Iterable[Exercise], name: str) -> Exercise | None:
    return next((e for e in exercises if e.name == name), None)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line and carry out the chosen command; return the exit code."""
    args = _build_parser().parse_args(argv)

    if args.command is None:
        print(BANNER)

    if not Path(INFO_FILE).exists():
        print(f"{sys.argv[0]} must be run from the exercise directory")
        print(f"Try changing into the directory that holds {INFO_FILE}!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1

    exercises = load_exercises(INFO_FILE)

    if args.command in ("run", "hint"):
        exercise = _find(exercises, args.name)
        if exercise is None:
            print("No exercise found for your given name!")
            return 1
        if args.command == "hint":
            print(exercise.hint)
            return 0
        try:
            run(exercise)
        except VerificationFailed:
            return 1
        return 0

    if args.command == "verify":
        try:
            verify(exercises)
        except VerificationFailed:
            return 1
        return 0

    if args.command == "watch":
        watch(exercises)
        return 0

    print(Path(DEFAULT_OUT_FILE).read_text(encoding="utf-8"))
    return 0


class _HintBox:
    """Thread-safe holder for the hint of the exercise that last failed."""

    def __init__(self, hint: str | None) -> None:
        self._lock = threading.Lock()
        self._hint = hint

    def get(self) -> str | None:
        with self._lock:
            return self._hint

    def set(self, hint: str | None) -> None:
        with self._lock:
            self._hint = hint


class _ChangeHandler(FileSystemEventHandler):
    def __init__(self, events: "queue.Queue[Path]") -> None:
        super().__init__()
        self._events = events

    def _push(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._events.put(Path(os.fsdecode(event.src_path)))

    def on_created(self, event: FileSystemEvent) -> None:
        self._push(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._push(event)


def _clear_screen(stream: TextIO | None = None) -> None:
    """Send the terminal reset sequence to the stream and flush it."""
    out = sys.stdout if stream is None else stream
    out.write(CLEAR_SCREEN + "\n")
    out.flush()


def _failed_hint(exercises: Iterable[Exercise]) -> str | None:
    try:
        verify(exercises)
    except VerificationFailed as failure:
        return failure.exercise.hint
    return None


def _path_ends_with(full: Path, tail: Path) -> bool:
    tail_parts = tail.parts
    return len(tail_parts) <= len(full.parts) and full.parts[-len(tail_parts):] == tail_parts


def _exercises_from(exercises: Iterable[Exercise], filepath: Path) -> Iterator[Exercise]:
    """Yield the exercises starting at the one whose path the file path ends with."""
    started = False
    for exercise in exercises:
        started = started or _path_ends_with(filepath, exercise.path)
        if started:
            yield exercise


def _spawn_watch_shell(hint_box: _HintBox) -> None:
    print("Type 'hint' to get help")

    def shell() -> None:
        while True:
            try:
                line = sys.stdin.readline()
            except (OSError, ValueError) as error:
                print(f"error reading command: {error}")
                continue
            if not line:
                return
            if line.strip() == "hint":
                hint = hint_box.get()
                if hint is not None:
                    print(hint)
            else:
                print(f"unknown command: {line}")

    threading.Thread(target=shell, daemon=True).start()


def _debounced(events: "queue.Queue[Path]") -> list[Path]:
    """Wait for a change, then gather further changes until things go quiet."""
    changed = {events.get(): None}
    while True:
        try:
            changed[events.get(timeout=DEBOUNCE_SECONDS)] = None
        except queue.Empty:
            return list(changed)


def watch(exercises: Iterable[Exercise]) -> None:
    """Verify the exercises, then verify again from each exercise file that changes."""
    exercises = list(exercises)
    events: "queue.Queue[Path]" = queue.Queue()
    observer = Observer()
    observer.schedule(_ChangeHandler(events), WATCH_DIR, recursive=True)
    observer.start()
    try:
        _clear_screen()
        hint_box = _HintBox(_failed_hint(exercises))
        _spawn_watch_shell(hint_box)
        while True:
            for path in _debounced(events):
                if path.suffix == ".rs" and path.exists():
                    filepath = path.resolve()
                    _clear_screen()
                    hint_box.set(_failed_hint(_exercises_from(exercises, filepath)))
    finally:
        observer.stop()
        observer.join()


def rustc_exists() -> bool:
    """Tell whether `rustc --version` can be run successfully."""
    try:
        result = subprocess.run(["rustc", "--version"], stdout=subprocess.DEVNULL)
    except OSError:
        return False
    return result.returncode == 0


if __name__ == "__main__":
    sys.exit(main())
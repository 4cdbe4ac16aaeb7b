"""Verify exercises in order, stopping at the first one that is not finished."""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.text import Text

from .exercise import Done, Exercise, Mode

console = Console(highlight=False, soft_wrap=True)


class VerificationFailed(Exception):
    """Raised when an exercise fails to compile, fails its tests or is pending."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"verification of {exercise} failed")
        self.exercise = exercise


def _emoji(fancy: str, plain: str) -> str:
    return fancy if console.encoding.lower().startswith("utf") else plain


def _say(message: str, style: str) -> None:
    console.print(Text(message, style=style))


def _print_raw(data: bytes) -> None:
    print(data.decode("utf-8", errors="replace"), file=console.file, flush=True)


def verify(exercises: Iterable[Exercise]) -> None:
    """Check each exercise in turn; raise VerificationFailed at the first failure."""
    for exercise in exercises:
        if exercise.mode is Mode.TEST:
            finished = _compile_and_test(exercise, skip_prompt=False)
        else:
            finished = _compile_only(exercise)
        if not finished:
            raise VerificationFailed(exercise)


def test(exercise: Exercise) -> None:
    """Compile and run the tests of one exercise without the completion prompt."""
    _compile_and_test(exercise, skip_prompt=True)


def _compile_only(exercise: Exercise) -> bool:
    with console.status(Text(f"Compiling {exercise}...")):
        output = exercise.compile()
    if output.returncode == 0:
        _say(f"{_emoji('✅', '✓')} Successfully compiled {exercise}!", "green")
        exercise.clean()
        return prompt_for_completion(exercise)

    _say(
        f"{_emoji('⚠️ ', '!')} Compilation of {exercise} failed! "
        "Compiler error message:\n",
        "red",
    )
    _print_raw(output.stderr)
    exercise.clean()
    raise VerificationFailed(exercise)


def _compile_and_test(exercise: Exercise, skip_prompt: bool) -> bool:
    result = None
    with console.status(Text(f"Testing {exercise}...")) as status:
        output = exercise.compile()
        if output.returncode == 0:
            status.update(Text(f"Running {exercise}..."))
            result = exercise.run()

    if result is None:
        _say(
            f"{_emoji('⚠️ ', '!')} Compiling of {exercise} failed! "
            "Please try again. Here's the output:",
            "red",
        )
        _print_raw(output.stderr)
        exercise.clean()
        raise VerificationFailed(exercise)

    if result.returncode == 0:
        _say(f"{_emoji('✅', '✓')} Successfully tested {exercise}!", "green")
        exercise.clean()
        return skip_prompt or prompt_for_completion(exercise)

    _say(
        f"{_emoji('⚠️ ', '!')} Testing of {exercise} failed! "
        "Please try again. Here's the output:",
        "red",
    )
    _print_raw(result.stdout)
    exercise.clean()
    raise VerificationFailed(exercise)


def prompt_for_completion(exercise: Exercise) -> bool:
    """Return True if the exercise is finished; otherwise show where the marker is."""
    state = exercise.state()
    if isinstance(state, Done):
        return True

    if exercise.mode is Mode.COMPILE:
        success_msg = "The code is compiling!"
    else:
        success_msg = "The code is compiling, and the tests pass!"

    console.print()
    console.print(Text(f"🎉 🎉  {success_msg} 🎉 🎉"))
    console.print()
    console.print(Text("You can keep working on this exercise,"))
    console.print(
        Text.assemble(
            "or jump into the next one by removing the ",
            ("`I AM NOT DONE`", "bold"),
            " comment:",
        )
    )
    console.print()
    for context_line in state.context:
        console.print(
            Text.assemble(
                (f"{context_line.number:>2}", "blue bold"),
                " ",
                ("|", "blue"),
                "  ",
                (context_line.line, "bold" if context_line.important else ""),
            )
        )
    return False
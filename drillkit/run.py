"""Run or test a single exercise."""

from __future__ import annotations

from rich.text import Text

from .exercise import Exercise, Mode
from .verify import VerificationFailed, console, test


def _emoji(fancy: str, plain: str) -> str:
    return fancy if console.encoding.lower().startswith("utf") else plain


def _print_raw(data: bytes) -> None:
    print(data.decode("utf-8", errors="replace"), file=console.file, flush=True)


def run(exercise: Exercise) -> None:
    """Run or test one exercise; raise VerificationFailed if it does not pass."""
    if exercise.mode is Mode.TEST:
        test(exercise)
    else:
        compile_and_run(exercise)


def compile_and_run(exercise: Exercise) -> None:
    """Compile the exercise, run the binary and show its output."""
    result = None
    with console.status(Text(f"Compiling {exercise}...")) as status:
        output = exercise.compile()
        status.update(Text(f"Running {exercise}..."))
        if output.returncode == 0:
            result = exercise.run()

    if result is None:
        console.print(
            Text(
                f"{_emoji('⚠️ ', '!')} Compilation of {exercise} failed! "
                "Compiler error message:\n",
                style="red",
            )
        )
        _print_raw(output.stderr)
        exercise.clean()
        raise VerificationFailed(exercise)

    _print_raw(result.stdout)
    if result.returncode == 0:
        console.print(
            Text(f"{_emoji('✅', '✓')} Successfully ran {exercise}", style="green")
        )
        exercise.clean()
        return

    _print_raw(result.stderr)
    console.print(
        Text(f"{_emoji('⚠️ ', '!')} Ran {exercise} with errors", style="red")
    )
    exercise.clean()
    raise VerificationFailed(exercise)
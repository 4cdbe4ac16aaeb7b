"""Iterators and threads: capitalising words, checked division, products, shared data."""

from __future__ import annotations

import math
import threading
import time
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

_U64_MAX = (1 << 64) - 1


def capitalize_first(text: str) -> str:
    """Upper-case the first character of the text and leave the rest alone."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words(words: Iterable[str]) -> list[str]:
    """Capitalise every word, keeping them as separate strings."""
    return [capitalize_first(word) for word in words]


def capitalize_joined(words: Iterable[str]) -> str:
    """Capitalise every word and join the results into one string."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """Raised when a number cannot be divided evenly."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor


class DivideByZero(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")


def divide(a: int, b: int) -> int:
    """Return a divided by b when b divides a evenly; raise DivisionError otherwise."""
    if b == 0:
        raise DivideByZero()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def factorial(num: int) -> int:
    """Return the product of 1 through num, which must fit in an unsigned 64-bit value."""
    if num < 0:
        raise ValueError(f"factorial needs a non-negative number, got {num}")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError(f"factorial of {num} does not fit in 64 bits")
    return result


def offset_sums(numbers: Sequence[int], offsets: Iterable[int], step: int) -> dict[int, int]:
    """Sum every step-th number from each offset, one worker thread per offset.

    All workers read the same sequence; nothing is copied.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    offsets = list(offsets)
    if any(offset < 0 for offset in offsets):
        raise ValueError("offsets must be non-negative")

    def worker(offset: int) -> int:
        total = sum(numbers[offset::step])
        print(f"Sum of offset {offset} is {total}")
        return total

    if not offsets:
        return {}
    with ThreadPoolExecutor(max_workers=len(offsets)) as pool:
        results = list(pool.map(worker, offsets))
    return dict(zip(offsets, results))


class _JobStatus:
    """Counter of finished jobs shared between threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._completed = 0

    def finish_one(self) -> None:
        with self._lock:
            self._completed += 1

    @property
    def completed(self) -> int:
        with self._lock:
            return self._completed


def run_jobs(total: int, interval: float) -> int:
    """Complete jobs on a worker thread while the caller waits for them.

    The worker finishes one job every interval seconds; the caller reports
    "waiting..." every two intervals until all jobs are done. Returns how many
    times it waited.
    """
    if total < 0:
        raise ValueError(f"total must be non-negative, got {total}")
    if interval < 0:
        raise ValueError(f"interval must be non-negative, got {interval}")

    status = _JobStatus()

    def work() -> None:
        for _ in range(total):
            time.sleep(interval)
            status.finish_one()

    worker = threading.Thread(target=work, daemon=True)
    worker.start()
    waits = 0
    while status.completed < total:
        print("waiting... ")
        waits += 1
        time.sleep(interval * 2)
    worker.join()
    return waits
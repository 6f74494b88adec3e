"""Helpers that fill priority queues with data and duplicate them."""

from __future__ import annotations

import os
import random
from collections.abc import Iterator
from typing import Protocol, TypeVar

MIN_VALUE = 0
MAX_VALUE = 300000
PRIORITY_SPREAD = 10


class _Queue(Protocol):
    def insert(self, value: int, priority: int) -> None: ...


class _Copyable(Protocol):
    def copy(self) -> _Copyable: ...


_C = TypeVar("_C", bound=_Copyable)


def fill_random(queue: _Queue, size: int, rng: random.Random | None = None) -> None:
    """Insert ``size`` random pairs.

    Values are drawn from 0..300000 and priorities from 0..size*10, both inclusive.
    """
    rng = rng if rng is not None else random.Random()
    max_priority = size * PRIORITY_SPREAD
    for _ in range(size):
        queue.insert(
            rng.randint(MIN_VALUE, MAX_VALUE), rng.randint(MIN_VALUE, max_priority)
        )


def _integers(tokens: Iterator[str]) -> Iterator[int]:
    for token in tokens:
        try:
            yield int(token)
        except ValueError:
            return


def fill_from_file(queue: _Queue, path: str | os.PathLike[str]) -> int:
    """Insert ``value priority`` pairs read from a whitespace-separated file.

    Reading stops at the first token that is not an integer or at an unpaired
    trailing value. Returns the number of pairs inserted.
    """
    with open(path, encoding="ascii") as handle:
        tokens = (token for line in handle for token in line.split())
        numbers = _integers(tokens)
        count = 0
        for value in numbers:
            priority = next(numbers, None)
            if priority is None:
                break
            queue.insert(value, priority)
            count += 1
    return count


def prepare_copies(obj: _C, number_of_copies: int) -> list[_C]:
    """Return ``number_of_copies`` independent copies of ``obj``."""
    if number_of_copies < 0:
        raise ValueError("number_of_copies must not be negative")
    return [obj.copy() for _ in range(number_of_copies)]
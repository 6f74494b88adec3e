"""Interactive benchmark comparing priority-queue implementations."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Callable, Iterator, Sequence
from enum import IntEnum
from pathlib import Path
from typing import TextIO, Union

from pqbench.binary_heap import BinaryHeap
from pqbench.data_generator import fill_from_file, fill_random, prepare_copies
from pqbench.linked_list import LinkedList
from pqbench.timer import Timer

DATASET_SIZES = (5, 10, 15, 20, 25, 30, 35, 40, 45, 50,
                 55, 60, 65, 70, 75, 80, 85, 90, 95, 100)
DEFAULT_COPIES = 100

Queue = Union[LinkedList, BinaryHeap]


class Operation(IntEnum):
    """Operations that can be benchmarked, numbered as in the menu."""

    INSERT = 1
    EXTRACT_MAX = 2
    PEEK = 3
    MODIFY_KEY = 4
    RETURN_SIZE = 5


_ACTIONS: dict[Operation, Callable[[Queue, int, int], object]] = {
    Operation.INSERT: lambda q, value, priority: q.insert(value, priority),
    Operation.EXTRACT_MAX: lambda q, value, priority: q.extract_max(),
    Operation.PEEK: lambda q, value, priority: q.peek(),
    Operation.MODIFY_KEY: lambda q, value, priority: q.modify_key(value, priority),
    Operation.RETURN_SIZE: lambda q, value, priority: len(q),
}

_STRUCTURES: dict[int, Callable[[], Queue]] = {1: LinkedList, 2: BinaryHeap}

_STRUCTURE_MENU = ("Choose a data structure:", ("List", "Heap"))
_INPUT_METHOD_MENU = (
    "\nChoose the data input method:",
    ("Generate randomly", "Load from file"),
)
_OPERATION_MENU = (
    "\nChoose an operation to perform:",
    ("Insert()", "Extract-max()", "Peek()", "Modify-key()", "Return-size()"),
)


def dataset_path(folder: str | os.PathLike[str], file_number: int) -> Path:
    """Return the path of data file ``file_number`` (1-20) inside ``folder``."""
    if not 1 <= file_number <= len(DATASET_SIZES):
        raise ValueError("Invalid file number.")
    return Path(folder) / f"DataBase{DATASET_SIZES[file_number - 1]}k.txt"


def _failure_message(queue: Queue, exc: Exception) -> str:
    if isinstance(exc, KeyError):
        return "Element is not found!" if isinstance(queue, BinaryHeap) else "Element not found"
    return str(exc)


def run_benchmark(
    copies: Sequence[Queue],
    operation: Operation | int,
    value: int = 0,
    priority: int = 0,
) -> int:
    """Run ``operation`` once on every copy and return the mean time in ns.

    Failures of the operation itself (an empty queue, a missing value) are
    reported on standard output and still count towards the timing.
    """
    if not copies:
        raise ValueError("at least one copy is required")
    action = _ACTIONS[Operation(operation)]
    timer = Timer()
    for queue in copies:
        with timer:
            try:
                action(queue, value, priority)
            except (IndexError, KeyError) as exc:
                failure: Exception | None = exc
            else:
                failure = None
        if failure is not None:
            print(_failure_message(queue, failure))
    return timer.result() // len(copies)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


class _InputError(Exception):
    pass


def _read_int(tokens: Iterator[str]) -> int:
    token = next(tokens, None)
    if token is None:
        raise _InputError("Unexpected end of input.")
    try:
        return int(token)
    except ValueError:
        raise _InputError(f"Invalid number: {token}") from None


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def _format_menu(menu: tuple[str, Sequence[str]]) -> str:
    """Render a menu header followed by its numbered options."""
    header, options = menu
    lines = [header]
    lines.extend(f"{number}. {option}" for number, option in enumerate(options, 1))
    return "\n".join(lines)


def _format_files() -> str:
    rows = len(DATASET_SIZES) // 4
    lines = ["\nChoose a file (1-20):"]
    for row in range(rows):
        cells = (
            f"{f'{number + 1}. {DATASET_SIZES[number]}k':<16}"
            for number in range(row, len(DATASET_SIZES), rows)
        )
        lines.append("".join(cells).rstrip())
    return "\n".join(lines)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pqbench",
        description="Time priority-queue operations on a list and a binary heap.",
    )
    parser.add_argument(
        "--data-dir", default="DataBase", help="folder holding the DataBase<N>k.txt files"
    )
    parser.add_argument(
        "--copies", type=int, default=DEFAULT_COPIES,
        help="number of queue copies the operation is timed on",
    )
    args = parser.parse_args(argv)
    if args.copies < 1:
        parser.error("--copies must be at least 1")
    return args


def _interact(args: argparse.Namespace, tokens: Iterator[str]) -> int:
    print(_format_menu(_STRUCTURE_MENU))
    structure_choice = _read_int(tokens)

    print(_format_menu(_INPUT_METHOD_MENU))
    data_method = _read_int(tokens)
    size = 0
    filename: Path | None = None
    if data_method == 1:
        _prompt("Please, enter what size do you want to test: ")
        size = _read_int(tokens)
    if data_method == 2:
        print(_format_files())
        file_number = _read_int(tokens)
        try:
            filename = dataset_path(args.data_dir, file_number)
        except ValueError as exc:
            print(exc)
            return 1

    print(_format_menu(_OPERATION_MENU))
    operation_choice = _read_int(tokens)
    value = priority = 0
    if operation_choice in (Operation.INSERT, Operation.MODIFY_KEY):
        _prompt("Enter value: ")
        value = _read_int(tokens)
        _prompt("Enter priority: ")
        priority = _read_int(tokens)

    factory = _STRUCTURES.get(structure_choice)
    if factory is None:
        print("There is no such data structure")
        return 0

    queue = factory()
    if data_method == 1:
        fill_random(queue, size)
    else:
        try:
            if filename is None:
                raise FileNotFoundError("no data file chosen")
            fill_from_file(queue, filename)
        except OSError:
            print("Failed to open file.")
    copies = prepare_copies(queue, args.copies)

    try:
        operation = Operation(operation_choice)
    except ValueError:
        print("There is no such operation")
        return 0

    average = run_benchmark(copies, operation, value, priority)
    print(f"\nThis operation took: {average} ns")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive benchmark, reading choices from standard input."""
    args = _parse_args(argv)
    try:
        return _interact(args, _tokens(sys.stdin))
    except _InputError as exc:
        print(exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
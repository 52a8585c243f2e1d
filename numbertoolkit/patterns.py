"""Text patterns, tables, string reversal, Tower of Hanoi and sorting."""

from __future__ import annotations

from typing import Iterable, Iterator, TypeVar

T = TypeVar("T")

Move = tuple[int, str, str]


def pyramid(rows: int) -> list[str]:
    """Lines of a centred star pyramid with ``rows`` rows."""
    return ["  " * (rows - i) + "* " * (2 * i - 1) for i in range(1, rows + 1)]


def multiplication_table(num: int) -> list[str]:
    """Lines ``num * i = product`` for i from 1 to 10."""
    return [f"{num} * {i} = {num * i}" for i in range(1, 11)]


def reverse_string(text: str) -> str:
    """The characters of ``text`` in reverse order."""
    return text[::-1]


def _hanoi(n: int, source: str, helper: str, destination: str) -> Iterator[Move]:
    if n == 1:
        yield (1, source, destination)
        return
    yield from _hanoi(n - 1, source, destination, helper)
    yield (n, source, destination)
    yield from _hanoi(n - 1, helper, source, destination)


def hanoi_moves(
    n: int, source: str = "S", helper: str = "H", destination: str = "D"
) -> Iterator[Move]:
    """Moves ``(disk, from_peg, to_peg)`` that carry ``n`` disks to the destination."""
    if n < 1:
        raise ValueError("number of disks must be at least 1")
    return _hanoi(n, source, helper, destination)


def bubble_sort(values: Iterable[T]) -> list[T]:
    """A new list holding ``values`` in ascending order, sorted by bubble sort."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items
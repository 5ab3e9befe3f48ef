"""In-place selection sort."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, MutableSequence, Sequence
from typing import Any


def selection_sort(items: MutableSequence[Any]) -> None:
    """Sort items in place, ascending, by repeatedly selecting the minimum."""
    n = len(items)
    for i in range(n - 1):
        min_index = min(range(i, n), key=items.__getitem__)
        if min_index != i:
            items[i], items[min_index] = items[min_index], items[i]


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str], prompt: str = "") -> int:
    print(prompt, end="", flush=True)
    try:
        token = next(tokens)
    except StopIteration:
        raise EOFError("unexpected end of input") from None
    return int(token)


def main(argv: Sequence[str] | None = None) -> int:
    """Read integers from standard input and print them sorted."""
    tokens = _tokens(sys.stdin)
    try:
        count = _read_int(tokens, "Enter number of elements: ")
        if count < 0:
            raise ValueError(f"number of elements must not be negative, got {count}")
        print(f"Enter {count} elements:")
        values = [_read_int(tokens) for _ in range(count)]
    except (EOFError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    selection_sort(values)
    print("Sorted array: " + "".join(f"{value} " for value in values))
    return 0
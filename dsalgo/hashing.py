"""Open-addressing hash tables with linear, quadratic and double probing."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from functools import partial

Probe = Callable[[int, int, int], int]


class TableFullError(Exception):
    """Raised when no probe position for a value is free."""


def linear_probe(value: int, i: int, size: int) -> int:
    """Slot for the i-th attempt under linear probing."""
    return ((value % size) + i) % size


def quadratic_probe(value: int, i: int, size: int) -> int:
    """Slot for the i-th attempt under quadratic probing."""
    return (value + i * i) % size


def double_probe(value: int, i: int, size: int, size2: int, num: int, op: str) -> int:
    """Slot for the i-th attempt under double hashing with step num op (value % size2)."""
    if op == "+":
        step = num + value % size2
    elif op == "-":
        step = num - value % size2
    else:
        raise ValueError(f"unknown operator {op!r}")
    return ((value % size) + i * step) % size


def make_double_probe(size2: int, num: int, op: str) -> Probe:
    """Fix the second-hash parameters of double_probe, giving a three-argument probe."""
    if op not in ("+", "-"):
        raise ValueError(f"unknown operator {op!r}")
    return partial(double_probe, size2=size2, num=num, op=op)


class HashTable:
    """A fixed-size table of integers placed by a probe function."""

    def __init__(self, size: int, probe: Probe = linear_probe) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self._size = size
        self._probe = probe
        self._slots: list[int | None] = [None] * size

    def insert(self, value: int) -> int:
        """Store value in the first free probed slot and return that slot."""
        # Every probe here is periodic in i with period size, so size attempts suffice.
        for attempt in range(self._size):
            index = self._probe(value, attempt, self._size)
            if self._slots[index] is None:
                self._slots[index] = value
                return index
        raise TableFullError(f"no free slot for {value}")

    def clear(self) -> None:
        """Empty every slot."""
        self._slots = [None] * self._size

    def __str__(self) -> str:
        cells = "".join(
            f"[{i}: {0 if v is None else v}] " for i, v in enumerate(self._slots)
        )
        return cells + "end"


_DEMOS = (
    ((10, 20, 30, 40, 33, 46, 50, 60), 13, 11, 1, "+"),
    ((12, 44, 13, 88, 23, 94, 11, 39, 20, 16, 5), 11, 7, 7, "-"),
)


def main(argv: list[str] | None = None) -> int:
    """Fill tables with each probing scheme and print them."""
    argparse.ArgumentParser(
        description="Show open-addressing hash tables under three probing schemes."
    ).parse_args(argv)
    for elements, size, size2, num, op in _DEMOS:
        for probe in (linear_probe, quadratic_probe, make_double_probe(size2, num, op)):
            table = HashTable(size, probe)
            for value in elements:
                table.insert(value)
            print(table)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
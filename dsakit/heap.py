"""A bounded array-backed binary min-heap."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence

MAX_SIZE = 100


class HeapFullError(OverflowError):
    """Raised when inserting into a heap at capacity."""


class HeapEmptyError(IndexError):
    """Raised when reading from or removing from an empty heap."""


class MinHeap:
    """Binary min-heap stored in level order, with a fixed capacity."""

    def __init__(self, capacity: int = MAX_SIZE) -> None:
        self.capacity = capacity
        self._data: list[int] = []

    def insert(self, value: int) -> None:
        """Add value, sifting it up; raise HeapFullError at capacity."""
        if len(self._data) >= self.capacity:
            raise HeapFullError("heap is full, cannot insert")
        data = self._data
        data.append(value)
        current = len(data) - 1
        while current > 0:
            parent = (current - 1) // 2
            if data[current] >= data[parent]:
                break
            data[current], data[parent] = data[parent], data[current]
            current = parent

    def delete_min(self) -> int:
        """Remove and return the smallest value; raise HeapEmptyError if empty."""
        if not self._data:
            raise HeapEmptyError("heap is empty, cannot delete")
        data = self._data
        smallest_value = data[0]
        last = data.pop()
        if not data:
            return smallest_value
        data[0] = last
        current = 0
        size = len(data)
        while True:
            smallest = current
            for child in (2 * current + 1, 2 * current + 2):
                if child < size and data[child] < data[smallest]:
                    smallest = child
            if smallest == current:
                break
            data[current], data[smallest] = data[smallest], data[current]
            current = smallest
        return smallest_value

    def peek(self) -> int:
        """Return the smallest value without removing it."""
        if not self._data:
            raise HeapEmptyError("heap is empty")
        return self._data[0]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        """Iterate in storage (level) order."""
        return iter(list(self._data))


def _line(heap: MinHeap) -> str:
    return "".join(f"{value} " for value in heap)


def main(argv: Sequence[str] | None = None) -> int:
    """Insert a few values, print the heap, delete the minimum, print again."""
    parser = argparse.ArgumentParser(description="Min-heap demo.")
    parser.add_argument("values", nargs="*", type=int)
    args = parser.parse_args(argv)

    heap = MinHeap()
    for value in args.values or [10, 20, 5, 30, 15]:
        heap.insert(value)
    print("Heap After insertions:")
    print(_line(heap))
    print("Deleting the minimum element...")
    heap.delete_min()
    print("Heap after deletion ")
    print(_line(heap))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
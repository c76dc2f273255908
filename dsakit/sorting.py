"""Classic comparison sorts and a small command-line demo."""

from __future__ import annotations

import argparse
import bisect
import heapq
from collections.abc import Iterable, Sequence

DEMO_ARRAYS: dict[str, list[int]] = {
    "insertion": [12, 11, 13, 5, 6],
    "selection": [64, 25, 12, 22, 11],
    "merge": [12, 11, 13, 5, 6, 7],
    "quick": [10, 7, 8, 9, 1, 5],
}


def insertion_sort(items: Iterable[int]) -> list[int]:
    """Return a new list sorted by insertion; equal items keep their order."""
    result: list[int] = []
    for item in items:
        bisect.insort_right(result, item)
    return result


def selection_sort(items: Iterable[int]) -> list[int]:
    """Return a new list sorted by repeatedly selecting the minimum."""
    result = list(items)
    for position in range(len(result) - 1):
        smallest = min(range(position, len(result)), key=result.__getitem__)
        if smallest != position:
            result[position], result[smallest] = result[smallest], result[position]
    return result


def merge_sort(items: Iterable[int]) -> list[int]:
    """Return a new list sorted by top-down merge sort (stable)."""
    values = list(items)
    if len(values) <= 1:
        return values
    middle = (len(values) - 1) // 2 + 1
    left = merge_sort(values[:middle])
    right = merge_sort(values[middle:])
    return list(heapq.merge(left, right))


def quick_sort(items: Iterable[int]) -> list[int]:
    """Return a new list sorted by quicksort using the last element as pivot."""
    values = list(items)
    if len(values) <= 1:
        return values
    *rest, pivot = values
    smaller = [value for value in rest if value < pivot]
    larger = [value for value in rest if value >= pivot]
    return quick_sort(smaller) + [pivot] + quick_sort(larger)


def format_array(items: Sequence[int]) -> str:
    """Render items as space-terminated numbers, one line without newline."""
    return "".join(f"{item} " for item in items)


_ALGORITHMS = {
    "insertion": insertion_sort,
    "selection": selection_sort,
    "merge": merge_sort,
    "quick": quick_sort,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Sort a demo array (or the given numbers) and print before and after."""
    parser = argparse.ArgumentParser(description="Sort an array of integers.")
    parser.add_argument(
        "algorithm", nargs="?", default="insertion", choices=sorted(_ALGORITHMS)
    )
    parser.add_argument("values", nargs="*", type=int)
    args = parser.parse_args(argv)

    values = args.values or DEMO_ARRAYS[args.algorithm]
    print("Original array: ")
    print(format_array(values))
    print("Sorted array: ")
    print(format_array(_ALGORITHMS[args.algorithm](values)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Small integer-matrix helpers: reading, addition and sparse triplets."""

from __future__ import annotations

import argparse
import itertools
from collections.abc import Callable, Sequence

Matrix = list[list[int]]

SPARSE_EXAMPLE: Matrix = [
    [0, 0, 6, 0, 9],
    [0, 0, 4, 6, 0],
    [0, 0, 0, 0, 0],
    [0, 1, 2, 0, 0],
]


class MatrixShapeError(ValueError):
    """Raised when matrix dimensions are invalid or do not agree."""


def read_matrix(
    rows: int, cols: int, read_value: Callable[[str], str] = input
) -> Matrix:
    """Read rows x cols integers in row order, prompting for each element."""
    if rows < 0 or cols < 0:
        raise MatrixShapeError(f"invalid matrix shape {rows}x{cols}")
    counter = itertools.count(1)
    return [
        [int(read_value(f"Enter the {next(counter)} element\t:")) for _ in range(cols)]
        for _ in range(rows)
    ]


def add_matrices(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the element-wise sum of two matrices of the same shape."""
    try:
        return [
            [x + y for x, y in zip(row_a, row_b, strict=True)]
            for row_a, row_b in zip(a, b, strict=True)
        ]
    except ValueError as error:
        raise MatrixShapeError("matrices must have the same shape") from error


def to_triplets(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return the three-row (row, column, value) form of the non-zero entries."""
    entries = [
        (row_index, col_index, value)
        for row_index, row in enumerate(matrix)
        for col_index, value in enumerate(row)
        if value != 0
    ]
    if not entries:
        return [[], [], []]
    return [list(column) for column in zip(*entries)]


def format_matrix(matrix: Sequence[Sequence[int]], separator: str = " ") -> str:
    """Render each row as values each followed by separator, one row per line."""
    return "".join(
        "".join(f"{value}{separator}" for value in row) + "\n" for row in matrix
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the matrix demos: add, column-major or sparse."""
    parser = argparse.ArgumentParser(description="Matrix demos.")
    parser.add_argument(
        "demo", nargs="?", default="add", choices=["add", "column-major", "sparse"]
    )
    args = parser.parse_args(argv)

    if args.demo == "add":
        print("Enter the A matrix values:")
        a = read_matrix(2, 3)
        print("Enter the B matrix values:")
        b = read_matrix(2, 3)
        print("The Addition matrix values:")
        print(format_matrix(add_matrices(a, b), " "), end="")
    elif args.demo == "column-major":
        matrix = read_matrix(3, 3)
        print("\nColumn major matrix is :")
        print(format_matrix(matrix, "\t"), end="")
    else:
        print(format_matrix(to_triplets(SPARSE_EXAMPLE), " \t"), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
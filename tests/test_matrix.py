import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.matrix import (
    SPARSE_EXAMPLE,
    MatrixShapeError,
    add_matrices,
    format_matrix,
    main,
    read_matrix,
    to_triplets,
)


def _matrices(rows, cols):
    return st.lists(
        st.lists(st.integers(-100, 100), min_size=cols, max_size=cols),
        min_size=rows,
        max_size=rows,
    )


def test_read_matrix_row_order_and_prompts():
    prompts = []
    values = iter(["1", "2", "3", "4", "5", "6"])

    def reader(prompt):
        prompts.append(prompt)
        return next(values)

    assert read_matrix(2, 3, reader) == [[1, 2, 3], [4, 5, 6]]
    assert prompts[0] == "Enter the 1 element\t:"
    assert prompts[-1] == "Enter the 6 element\t:"
    assert len(prompts) == 6


def test_read_matrix_rejects_non_integer():
    with pytest.raises(ValueError):
        read_matrix(1, 1, lambda prompt: "x")


def test_read_matrix_rejects_negative_shape():
    with pytest.raises(MatrixShapeError):
        read_matrix(-1, 2, lambda prompt: "0")


@given(st.data())
def test_add_is_elementwise_and_commutative(data):
    a = data.draw(_matrices(2, 3))
    b = data.draw(_matrices(2, 3))
    total = add_matrices(a, b)
    assert total == add_matrices(b, a)
    zero = [[0] * 3 for _ in range(2)]
    assert add_matrices(a, zero) == a
    negated = [[-v for v in row] for row in b]
    assert add_matrices(total, negated) == a


def test_add_shape_mismatch():
    with pytest.raises(MatrixShapeError):
        add_matrices([[1, 2]], [[1, 2, 3]])
    with pytest.raises(MatrixShapeError):
        add_matrices([[1]], [[1], [2]])


def test_triplets_of_source_example():
    assert to_triplets(SPARSE_EXAMPLE) == [
        [0, 0, 1, 1, 3, 3],
        [2, 4, 2, 3, 1, 2],
        [6, 9, 4, 6, 1, 2],
    ]


@given(_matrices(4, 5))
def test_triplets_round_trip(matrix):
    rows, cols, values = to_triplets(matrix)
    rebuilt = [[0] * 5 for _ in range(4)]
    for r, c, v in zip(rows, cols, values):
        rebuilt[r][c] = v
    assert rebuilt == matrix
    assert all(v != 0 for v in values)


def test_triplets_all_zero():
    assert to_triplets([[0, 0], [0, 0]]) == [[], [], []]


def test_format_matrix():
    assert format_matrix([[1, 2], [3, 4]]) == "1 2 \n3 4 \n"
    assert format_matrix([[1, 2]], "\t") == "1\t2\t\n"


def test_main_sparse(capsys):
    assert main(["sparse"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "0 \t0 \t1 \t1 \t3 \t3 \t"
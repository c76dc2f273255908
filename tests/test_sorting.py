import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.sorting import (
    DEMO_ARRAYS,
    format_array,
    insertion_sort,
    main,
    merge_sort,
    quick_sort,
    selection_sort,
)

INT_LISTS = st.lists(st.integers(min_value=-1000, max_value=1000))


@given(values=INT_LISTS)
def test_insertion_sort_matches_builtin_sorted(values):
    assert insertion_sort(values) == sorted(values)


@given(values=INT_LISTS)
def test_selection_sort_matches_builtin_sorted(values):
    assert selection_sort(values) == sorted(values)


@given(values=INT_LISTS)
def test_merge_sort_matches_builtin_sorted(values):
    assert merge_sort(values) == sorted(values)


@given(values=INT_LISTS)
def test_quick_sort_matches_builtin_sorted(values):
    assert quick_sort(values) == sorted(values)


def test_sorts_do_not_modify_input():
    values = [3, 1, 2]
    assert insertion_sort(values) == [1, 2, 3]
    assert selection_sort(values) == [1, 2, 3]
    assert merge_sort(values) == [1, 2, 3]
    assert quick_sort(values) == [1, 2, 3]
    assert values == [3, 1, 2]


def test_sorts_empty_and_single():
    assert insertion_sort([]) == []
    assert insertion_sort([7]) == [7]
    assert selection_sort([]) == []
    assert selection_sort([7]) == [7]
    assert merge_sort([]) == []
    assert merge_sort([7]) == [7]
    assert quick_sort([]) == []
    assert quick_sort([7]) == [7]


def test_sorts_accept_any_iterable():
    assert insertion_sort(iter((5, 4, 3))) == [3, 4, 5]
    assert selection_sort(iter((5, 4, 3))) == [3, 4, 5]
    assert merge_sort(iter((5, 4, 3))) == [3, 4, 5]
    assert quick_sort(iter((5, 4, 3))) == [3, 4, 5]


def test_insertion_demo_array_sorted():
    assert insertion_sort(DEMO_ARRAYS["insertion"]) == [5, 6, 11, 12, 13]


def test_selection_demo_array_sorted():
    assert selection_sort(DEMO_ARRAYS["selection"]) == [11, 12, 22, 25, 64]


def test_merge_demo_array_sorted():
    assert merge_sort(DEMO_ARRAYS["merge"]) == [5, 6, 7, 11, 12, 13]


def test_quick_demo_array_sorted():
    assert quick_sort(DEMO_ARRAYS["quick"]) == [1, 5, 7, 8, 9, 10]


def test_format_array_source_example():
    assert format_array([12, 11, 13, 5, 6]) == "12 11 13 5 6 "


def test_format_array_empty():
    assert format_array([]) == ""


def test_main_prints_demo(capsys):
    assert main(["insertion"]) == 0
    out = capsys.readouterr().out
    assert out == (
        "Original array: \n12 11 13 5 6 \nSorted array: \n5 6 11 12 13 \n"
    )


def test_main_with_custom_values(capsys):
    assert main(["quick", "3", "-1", "2"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[-1] == "-1 2 3 "


def test_main_rejects_unknown_algorithm():
    with pytest.raises(SystemExit):
        main(["bogo"])
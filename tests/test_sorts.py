import pytest

from algopractice.sorts import (
    bubble_sort,
    bucket_sort,
    counting_sort,
    insertion_sort,
    merge,
    merge_sort,
    radix_sort,
    selection_sort,
)

SAMPLES = [
    [],
    [7],
    [5, 2, 9, 1, 5, 6],
    [3, 3, 3],
    [9999, 0, 2548, 17, 305, 17],
    list(range(20, 0, -1)),
]


@pytest.mark.parametrize("data", SAMPLES)
def test_sorts_match_builtin(data):
    expected = sorted(data)
    assert bubble_sort(list(data)) == expected
    assert counting_sort(list(data)) == expected
    assert insertion_sort(list(data)) == expected
    assert merge_sort(list(data)) == expected
    assert radix_sort(list(data)) == expected
    assert selection_sort(list(data)) == expected


@pytest.mark.parametrize("sort", [bubble_sort, insertion_sort, selection_sort])
def test_in_place_sorts_return_same_list(sort):
    data = [4, 1, 3, 2]
    result = sort(data)
    assert result is data
    assert data == sorted([4, 1, 3, 2])


@pytest.mark.parametrize("sort", [bubble_sort, insertion_sort, selection_sort, merge_sort])
def test_comparison_sorts_handle_negatives(sort):
    data = [-3, 10, -40, 0, 7]
    assert sort(list(data)) == sorted(data)


@pytest.mark.parametrize(
    "data",
    [
        [],
        [5, 3, 1, 9, 7],
        [12, 3, 25, 1, 14, 48, 30],
        [0, 0, 1, 2],
    ],
)
def test_bucket_sort_matches_builtin(data):
    assert bucket_sort(list(data)) == sorted(data)


def test_bucket_sort_rejects_value_beyond_buckets():
    with pytest.raises(ValueError):
        bucket_sort([1, 50])


def test_counting_sort_rejects_negative():
    with pytest.raises(ValueError):
        counting_sort([3, -1, 2])


def test_counting_sort_leaves_input_untouched():
    data = [3, 1, 2]
    counting_sort(data)
    assert data == [3, 1, 2]


@pytest.mark.parametrize("bad", [[-1, 2], [10000, 5]])
def test_radix_sort_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        radix_sort(bad)


def test_merge_combines_sorted_lists():
    first, second = [1, 4, 9], [2, 3, 10, 11]
    assert merge(first, second) == sorted(first + second)


def test_merge_with_empty_side():
    assert merge([], [1, 2]) == [1, 2]
    assert merge([5], []) == [5]


def test_merge_sort_is_idempotent():
    data = [8, 2, 6, 4, 2]
    once = merge_sort(data)
    assert merge_sort(once) == once
    assert len(once) == len(data)
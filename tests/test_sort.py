"""Tests for the recursive and iterative binary radix sorts."""

import random
import sys
from array import array
from collections import Counter

import pytest

from bin_radix.sort import _drain, partition, sort_iterative, sort_recursive
from bin_radix.widths import SUPPORTED_WIDTHS, make_array, max_value


VARIANTS = [sort_recursive, sort_iterative]


@pytest.fixture(params=VARIANTS, ids=["recursive", "iterative"])
def sort(request):
    return request.param


@pytest.mark.parametrize(
    "values, expected",
    [
        ([5, 2, 8, 1, 9, 3], [1, 2, 3, 5, 8, 9]),
        ([255, 0, 128, 127], [0, 127, 128, 255]),
        ([], []),
        ([42], [42]),
        ([7, 7, 7], [7, 7, 7]),
    ],
)
def test_sorts_8_bit_examples(sort, values, expected) -> None:
    """Known 8-bit inputs sort to the expected order."""
    seq = list(values)
    assert sort(seq, 8) is None
    assert seq == expected


def test_sorts_in_place(sort) -> None:
    """The caller's own list object is reordered."""
    seq = [3, 1, 2]
    alias = seq
    sort(seq, 8)
    assert alias is seq
    assert seq == [1, 2, 3]


@pytest.mark.parametrize("width", SUPPORTED_WIDTHS)
def test_boundary_orders(sort, width: int) -> None:
    """Ascending input is unchanged and strictly descending input is reversed."""
    top = max_value(width)
    ascending = [0, 1, 2, top // 2, top - 1, top]

    seq = list(ascending)
    sort(seq, width)
    assert seq == ascending

    seq = list(reversed(ascending))
    sort(seq, width)
    assert seq == ascending


@pytest.mark.parametrize("width", SUPPORTED_WIDTHS)
def test_all_zero_and_all_one_patterns(sort, width: int) -> None:
    """Every bit clear, every bit set, and a mix of the two."""
    top = max_value(width)

    zeros = [0] * 17
    sort(zeros, width)
    assert zeros == [0] * 17

    ones = [top] * 17
    sort(ones, width)
    assert ones == [top] * 17

    mixed = [top, 0] * 9
    sort(mixed, width)
    assert mixed == [0] * 9 + [top] * 9


@pytest.mark.parametrize("width", SUPPORTED_WIDTHS)
@pytest.mark.parametrize("seed", range(5))
def test_permutation_and_order(sort, width: int, seed: int) -> None:
    """Output is an ascending rearrangement of exactly the input values."""
    rng = random.Random(seed)
    values = [rng.getrandbits(width) for _ in range(300)]
    seq = list(values)

    sort(seq, width)

    assert Counter(seq) == Counter(values)
    assert all(seq[i] <= seq[i + 1] for i in range(len(seq) - 1))
    assert seq == sorted(values)


def test_sorting_twice_changes_nothing(sort) -> None:
    rng = random.Random(7)
    seq = [rng.getrandbits(16) for _ in range(200)]
    sort(seq, 16)
    once = list(seq)
    sort(seq, 16)
    assert seq == once


@pytest.mark.parametrize("seed", range(10))
def test_variants_agree(seed: int) -> None:
    """Recursive, iterative and the built-in sort produce the same list."""
    rng = random.Random(seed)
    values = [rng.getrandbits(32) for _ in range(rng.randrange(0, 500))]
    rec = list(values)
    it = list(values)

    sort_recursive(rec, 32)
    sort_iterative(it, 32)

    assert rec == it == sorted(values)


def test_many_duplicates(sort) -> None:
    rng = random.Random(3)
    values = [rng.choice([0, 1, 200, 255]) for _ in range(500)]
    seq = list(values)
    sort(seq, 8)
    assert seq == sorted(values)


@pytest.mark.parametrize("width", SUPPORTED_WIDTHS)
def test_sorts_arrays_with_inferred_width(sort, width: int) -> None:
    """An unsigned `array.array` is sorted in place using its item width."""
    rng = random.Random(width)
    values = [rng.getrandbits(width) for _ in range(100)]
    seq = make_array(values, width)

    sort(seq)

    assert isinstance(seq, array)
    assert list(seq) == sorted(values)


def test_infers_width_from_list_values(sort) -> None:
    """Without a width, a list is sorted on the narrowest width holding its maximum."""
    values = [1 << 40, 3, 1 << 20, 0, (1 << 64) - 1]
    seq = list(values)
    sort(seq)
    assert seq == sorted(values)


def test_rejects_unsupported_width(sort) -> None:
    with pytest.raises(ValueError):
        sort([1, 2, 3], 12)


def test_partition_splits_on_bit() -> None:
    """Clear-bit values land before the boundary, set-bit values after it."""
    seq = [9, 99, 4, 6, 1, 2, 8, 15]
    boundary = partition(seq, 2, 7, 2)

    assert seq[:2] == [9, 99]
    assert seq[7:] == [15]
    assert sorted(seq[2:7]) == [1, 2, 4, 6, 8]
    assert all((v >> 2) & 1 == 0 for v in seq[2:boundary])
    assert all((v >> 2) & 1 == 1 for v in seq[boundary:7])
    assert boundary == 5


def test_partition_of_empty_range() -> None:
    seq = [1, 2]
    assert partition(seq, 1, 1, 0) == 1
    assert seq == [1, 2]


class _PeakList(list):
    """A list that remembers the most entries it ever held."""

    peak = 0

    def append(self, item) -> None:
        super().append(item)
        self.peak = max(self.peak, len(self))


def _frame_depth() -> int:
    depth = 0
    frame = sys._getframe()
    while frame is not None:
        depth += 1
        frame = frame.f_back
    return depth


@pytest.mark.parametrize("width", SUPPORTED_WIDTHS)
def test_recursion_depth_follows_width_not_length(width: int) -> None:
    """Recursion needs about W frames, however long the input is."""
    rng = random.Random(width)
    values = [rng.getrandbits(width) for _ in range(3000)]
    seq = list(values)

    limit = sys.getrecursionlimit()
    sys.setrecursionlimit(_frame_depth() + width + 20)
    try:
        sort_recursive(seq, width)
    finally:
        sys.setrecursionlimit(limit)

    assert seq == sorted(values)


@pytest.mark.parametrize("width", SUPPORTED_WIDTHS)
@pytest.mark.parametrize("seed", range(3))
def test_worklist_holds_at_most_width_plus_one_tasks(width: int, seed: int) -> None:
    rng = random.Random(seed)
    values = [rng.getrandbits(width) for _ in range(3000)]
    seq = list(values)
    stack = _PeakList([(0, len(seq), width - 1)])

    _drain(seq, stack)

    assert seq == sorted(values)
    assert not stack
    assert stack.peak <= width + 1


def test_worklist_peak_on_distinct_keys() -> None:
    """All 256 byte values split on every bit and reach the full W + 1 bound."""
    seq = list(range(255, -1, -1))
    stack = _PeakList([(0, len(seq), 7)])

    _drain(seq, stack)

    assert seq == list(range(256))
    assert stack.peak == 9


@pytest.mark.slow
@pytest.mark.parametrize("width", SUPPORTED_WIDTHS)
def test_stress_against_reference(width: int) -> None:
    """1,000 random sequences of 1,000 values match the built-in sort exactly."""
    rng = random.Random(width * 1000)
    for _ in range(1000):
        values = [rng.getrandbits(width) for _ in range(1000)]
        expected = sorted(values)

        rec = list(values)
        sort_recursive(rec, width)
        assert rec == expected

        it = list(values)
        sort_iterative(it, width)
        assert it == expected

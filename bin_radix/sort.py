"""
Binary (radix-2) MSD radix sort over fixed-width unsigned integers.

Both variants partition a range by one bit at a time, most significant bit
first, swapping elements in place. Integer comparison is lexicographic over
bits from MSB to LSB, so grouping by each bit in turn yields ascending order.

- `sort_recursive` lets the call stack hold the pending ranges. Depth is
  bounded by the key width, not by the sequence length.
- `sort_iterative` keeps them in an explicit work-list of
  `(start, length, bit)` tasks instead.
"""

from __future__ import annotations

from typing import List, MutableSequence, Tuple

from bin_radix.widths import resolve_width

__all__ = ["partition", "sort_recursive", "sort_iterative"]


def partition(seq: MutableSequence[int], start: int, end: int, bit: int) -> int:
    """Partition seq[start:end] in place by `bit` and return the boundary.

    On return every element in [start, boundary) has the bit clear and every
    element in [boundary, end) has it set. Order inside each half is not kept.
    """
    left = start
    right = end - 1

    while left <= right:
        if (seq[left] >> bit) & 1 == 0:
            left += 1
        else:
            # The element swapped into `left` has not been looked at yet.
            seq[left], seq[right] = seq[right], seq[left]
            right -= 1

    return left


def sort_recursive(seq: MutableSequence[int], width: int | None = None) -> None:
    """Sort `seq` ascending in place, recursing once per bit."""
    bits = resolve_width(seq, width)

    def _sort(start: int, end: int, bit: int) -> None:
        if end - start <= 1 or bit < 0:
            return

        left = partition(seq, start, end, bit)

        _sort(start, left, bit - 1)
        _sort(left, end, bit - 1)

    _sort(0, len(seq), bits - 1)


def _drain(seq: MutableSequence[int], stack: List[Tuple[int, int, int]]) -> None:
    """Pop and partition `(start, length, bit)` tasks until `stack` is empty."""
    while stack:
        start, length, bit = stack.pop()

        if length <= 1 or bit < 0:
            continue

        left = partition(seq, start, start + length, bit)

        stack.append((start, left - start, bit - 1))
        stack.append((left, length - (left - start), bit - 1))


def sort_iterative(seq: MutableSequence[int], width: int | None = None) -> None:
    """Sort `seq` ascending in place using an explicit work-list.

    Each task is `(start, length, bit)`. The high half of a split is pushed
    last so it is popped first. At most one sibling per bit level waits on the
    list, so it never holds more than `width + 1` tasks.
    """
    bits = resolve_width(seq, width)
    _drain(seq, [(0, len(seq), bits - 1)])

from __future__ import annotations

from array import array
from typing import Iterable, MutableSequence

SUPPORTED_WIDTHS = (8, 16, 32, 64)

_UNSIGNED_TYPECODES = "BHILQ"


def _typecode_for(width: int) -> str:
    """Pick the first unsigned array typecode whose item is exactly `width` bits."""
    for code in _UNSIGNED_TYPECODES:
        if array(code).itemsize * 8 == width:
            return code
    raise ValueError(f"no unsigned array typecode holds {width}-bit values")


def check_width(width: int) -> int:
    if width not in SUPPORTED_WIDTHS:
        raise ValueError(f"unsupported key width {width!r}, expected one of {SUPPORTED_WIDTHS}")
    return width


def max_value(width: int) -> int:
    """Largest unsigned value representable in `width` bits."""
    return (1 << check_width(width)) - 1


ARRAY_TYPECODES = {width: _typecode_for(width) for width in SUPPORTED_WIDTHS}


def resolve_width(sequence: MutableSequence[int], width: int | None = None) -> int:
    """Return the key width W to sort `sequence` with.

    An explicit width wins. An `array.array` carries its own width in its item
    size. Anything else gets the narrowest supported width that holds its
    largest value; an empty or all-zero sequence resolves to 8.
    """
    if width is not None:
        return check_width(width)

    if isinstance(sequence, array):
        if sequence.typecode not in _UNSIGNED_TYPECODES:
            raise ValueError(f"array typecode {sequence.typecode!r} is not an unsigned integer type")
        return check_width(sequence.itemsize * 8)

    if not sequence:
        return SUPPORTED_WIDTHS[0]

    if min(sequence) < 0:
        raise ValueError("negative values cannot be sorted as unsigned keys")

    bits = max(sequence).bit_length()
    for candidate in SUPPORTED_WIDTHS:
        if bits <= candidate:
            return candidate
    raise ValueError(f"value needs {bits} bits, wider than {SUPPORTED_WIDTHS[-1]}")


def make_array(values: Iterable[int], width: int) -> array:
    """Pack `values` into an unsigned `array.array` of the given width."""
    return array(ARRAY_TYPECODES[check_width(width)], values)

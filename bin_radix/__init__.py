"""In-place binary MSD radix sort over fixed-width unsigned integers."""

from bin_radix.sort import partition, sort_iterative, sort_recursive
from bin_radix.widths import SUPPORTED_WIDTHS, resolve_width

__all__ = ["SUPPORTED_WIDTHS", "partition", "resolve_width", "sort_iterative", "sort_recursive"]

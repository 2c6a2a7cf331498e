"""
Comparison harness: sort the same random input with a baseline comparison
sort and both radix variants, check they agree and time each one.
"""

from __future__ import annotations

import logging
import random
import time
from array import array
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, MutableSequence, Sequence, Tuple

from bin_radix.sort import sort_iterative, sort_recursive
from bin_radix.widths import make_array

log = logging.getLogger(__name__)

SortFn = Callable[..., None]


def reference_sort(seq: MutableSequence[int], width: int | None = None) -> None:
    """Baseline comparison sort (Timsort), in place."""
    if isinstance(seq, array):
        seq[:] = array(seq.typecode, sorted(seq))
    else:
        seq.sort()


SORTS: Dict[str, SortFn] = {
    "reference": reference_sort,
    "recursive": sort_recursive,
    "iterative": sort_iterative,
}


@dataclass(frozen=True)
class Mismatch:
    label: str
    index: int
    expected: int | None
    actual: int | None

    def __str__(self) -> str:
        return f"({self.label}) Error: v1[{self.index}] = {self.expected} != {self.actual}"


@dataclass
class WidthResult:
    width: int
    reps: int
    size: int
    seconds: Dict[str, float] = field(default_factory=lambda: {name: 0.0 for name in SORTS})
    mismatches: List[Mismatch] = field(default_factory=list)

    @property
    def type_name(self) -> str:
        return f"uint{self.width}_t"

    @property
    def ok(self) -> bool:
        return not self.mismatches


def random_values(size: int, width: int, rng: random.Random) -> array:
    """Draw `size` values uniformly over the full `width`-bit range."""
    return make_array((rng.getrandbits(width) for _ in range(size)), width)


def first_mismatch(expected: Sequence[int], actual: Sequence[int], label: str) -> Mismatch | None:
    """Return the first index where `actual` differs from `expected`, if any.

    A shorter side is reported at its first missing index with `None` in
    place of the absent value.
    """
    for i, (e, a) in enumerate(zip(expected, actual)):
        if e != a:
            return Mismatch(label, i, e, a)

    if len(expected) != len(actual):
        i = min(len(expected), len(actual))
        e = expected[i] if i < len(expected) else None
        a = actual[i] if i < len(actual) else None
        return Mismatch(label, i, e, a)

    return None


def time_sort(
    sort: SortFn, values: MutableSequence[int], width: int | None = None
) -> Tuple[MutableSequence[int], float]:
    """Sort a same-typed copy of `values` and return it with the elapsed seconds."""
    work = values[:]
    start = time.perf_counter()
    sort(work, width)
    end = time.perf_counter()
    return work, end - start


def benchmark(reps: int, size: int, width: int, rng: random.Random) -> WidthResult:
    result = WidthResult(width=width, reps=reps, size=size)
    log.info("Benchmarking %s: reps=%d size=%d", result.type_name, reps, size)

    for r in range(reps):
        values = random_values(size, width, rng)

        outputs: Dict[str, MutableSequence[int]] = {}
        for name, sort in SORTS.items():
            outputs[name], elapsed = time_sort(sort, values, width)
            result.seconds[name] += elapsed

        expected = outputs["reference"]
        for name in SORTS:
            if name == "reference":
                continue
            mismatch = first_mismatch(expected, outputs[name], f"reference_{name}")
            if mismatch is not None:
                log.warning("rep %d of %s: %s", r, result.type_name, mismatch)
                result.mismatches.append(mismatch)

    return result


def run(reps: int, size: int, widths: Iterable[int], seed: int | None = None) -> List[WidthResult]:
    """Benchmark every width in turn from a single seeded generator."""
    rng = random.Random(seed)
    return [benchmark(reps, size, width, rng) for width in widths]

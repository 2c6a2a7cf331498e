"""
Render benchmark results, either as the plain console printout or as a
GitHub-flavored Markdown table whose pipes line up across rows.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from bin_radix.harness import SORTS, WidthResult


def format_console(results: Sequence[WidthResult]) -> str:
    lines: List[str] = []
    for result in results:
        lines.append(f'Benchmarking with type "{result.type_name}"')
        for name in SORTS:
            lines.append(f"    {name}_time (s): {result.seconds[name]:.6f}")
        for mismatch in result.mismatches:
            lines.append(f"    {mismatch}")
    return "\n".join(lines)


def is_delimiter_cell(cell: str) -> bool:
    """True for `---`, `:---`, `---:` or `:---:`."""
    dashes = cell.strip().strip(":")
    return len(dashes) >= 3 and set(dashes) == {"-"}


def _stretch(cell: str, width: int) -> str:
    """Widen a delimiter cell to `width`, keeping its `:` markers."""
    marker = cell.strip()
    head = ":" if marker.startswith(":") else "-"
    tail = ":" if marker.endswith(":") else "-"
    return head + "-" * (width - 2) + tail


def _row(cells: Iterable[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def align_table(rows: Sequence[Sequence[str]]) -> List[str]:
    """Lay out header, delimiter and body rows so the pipes line up.

    The second row must be the delimiter row. Columns are as wide as their
    widest header or body cell, and never narrower than three characters.
    """
    if len(rows) < 2 or not all(is_delimiter_cell(c) for c in rows[1]):
        raise ValueError("second row of a table must be a delimiter row")

    ncols = max(len(r) for r in rows)
    header, delimiter, *body = [list(r) + [""] * (ncols - len(r)) for r in rows]

    widths = [max(3, *(len(r[c]) for r in [header, *body])) for c in range(ncols)]

    out = [
        _row(cell.ljust(w) for cell, w in zip(header, widths)),
        _row(_stretch(cell, w) for cell, w in zip(delimiter, widths)),
    ]
    out.extend(_row(cell.ljust(w) for cell, w in zip(r, widths)) for r in body)
    return out


def render_markdown(results: Sequence[WidthResult]) -> str:
    header = ["Type", "Reps", "Size"] + [f"{name} (s)" for name in SORTS] + ["Verified"]
    delimiter = ["---"] + ["--:"] * (len(header) - 2) + ["---"]
    rows = [header, delimiter]
    for result in results:
        rows.append(
            [f"`{result.type_name}`", str(result.reps), str(result.size)]
            + [f"{result.seconds[name]:.6f}" for name in SORTS]
            + ["yes" if result.ok else f"no ({len(result.mismatches)})"]
        )
    return "\n".join(align_table(rows)) + "\n"

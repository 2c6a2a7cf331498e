from __future__ import annotations

import logging
import os
from pathlib import Path

import mkdocs_gen_files
from mkdocs.exceptions import ConfigurationError

from bin_radix.harness import run
from bin_radix.report import render_markdown
from bin_radix.widths import SUPPORTED_WIDTHS

log = logging.getLogger("mkdocs.plugins.gen-files")

DOCS_DIR = Path(os.environ.get("BIN_RADIX_DOCS_DIR", Path(__file__).resolve().parents[1] / "docs"))

BENCH_REPS = int(os.environ.get("BIN_RADIX_BENCH_REPS", "3"))
BENCH_SIZE = int(os.environ.get("BIN_RADIX_BENCH_SIZE", "1000"))
# Fixed so the published table only changes when the code does.
BENCH_SEED = 42

REL_PATH = "_snippets/tables/bin_radix_bench.md"


def _render_snippet() -> str:
    """Run the benchmark and wrap its table for inclusion via pymdownx.snippets."""
    results = run(BENCH_REPS, BENCH_SIZE, SUPPORTED_WIDTHS, BENCH_SEED)
    failed = [r.type_name for r in results if not r.ok]
    if failed:
        log.warning("Benchmark mismatches for %s", ", ".join(failed))

    lines: list[str] = []
    lines.append("<!-- THIS FILE IS AUTOGENERATED. DO NOT EDIT BY HAND. -->")
    lines.append("")
    lines.append("<!-- markdownlint-disable MD013 MD060 -->")
    lines.append(f"Reps: {BENCH_REPS}, vector size: {BENCH_SIZE}, seed: {BENCH_SEED}")
    lines.append("")
    lines.append(render_markdown(results).rstrip("\n"))
    lines.append("")
    lines.append("<!-- markdownlint-enable MD013 MD060 -->")
    return "\n".join(lines)


def main() -> None:
    """Main entry point for generating the benchmark table snippet."""
    log.info("Benchmark snippet: reps=%d size=%d", BENCH_REPS, BENCH_SIZE)
    content = _render_snippet()

    # Write to mkdocs virtual filesystem first (used during build)
    try:
        with mkdocs_gen_files.open(REL_PATH, "w") as f:
            f.write(content)
    except ConfigurationError:
        # Not running via mkdocs (standalone execution)
        pass

    # ALSO write the physical file so pymdownx.snippets can find it.
    out = DOCS_DIR / REL_PATH
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(content, encoding="utf-8")
    log.info("Wrote %s", out)


# Configure logging for standalone execution
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(levelname)s - %(message)s')

# Always run - mkdocs-gen-files imports this script, so main() must execute at module level
main()

"""Generate record layouts for every copybook in a directory."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.table import Table

from reclayout.config import LayoutConfig, load_config
from reclayout.errors import LayoutError
from reclayout.layout.render import render_report
from reclayout.log import configure_logging
from reclayout.pipeline import compute_layout

PATTERNS = ("*.cpy", "*.CPY", "*.DS", "*.FD")


def batch_layout(source_dir: Path, output_dir: Path, config: LayoutConfig) -> list[dict]:
    output_dir.mkdir(parents=True, exist_ok=True)
    results: list[dict] = []
    paths = sorted({p for pattern in PATTERNS for p in source_dir.glob(pattern)})
    for path in paths:
        try:
            layout = compute_layout(path.read_text(encoding=config.encoding), config)
        except UnicodeDecodeError as exc:
            error = f"not valid {config.encoding}: {exc.reason}"
            results.append({"file": path.name, "structure": "", "total": None, "error": error})
            continue
        except LayoutError as exc:
            results.append({"file": path.name, "structure": "", "total": None, "error": str(exc)})
            continue
        target = output_dir / path.with_suffix(config.output_suffix).name
        target.write_text(render_report(layout), encoding=config.encoding)
        results.append(
            {
                "file": path.name,
                "structure": layout.structure_name,
                "total": layout.grand_total,
                "error": "",
            }
        )
    return results


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Generate layouts for a directory of copybooks.")
    parser.add_argument("source_dir", type=Path, help="Directory holding copybooks.")
    parser.add_argument(
        "--output-dir", type=Path, default=Path("artifacts/layouts"), help="Where to write reports."
    )
    parser.add_argument("--config", type=Path, default=None, help="Optional YAML/JSON config.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable DEBUG logging.")
    args = parser.parse_args()

    configure_logging(args.verbose)
    cfg = load_config(args.config) if args.config else LayoutConfig()
    rows = batch_layout(args.source_dir, args.output_dir, cfg)

    console = Console()
    table = Table(title=f"Layouts in {args.output_dir}")
    table.add_column("File")
    table.add_column("Structure")
    table.add_column("Total", justify="right")
    table.add_column("Error")
    for row in rows:
        total = "" if row["total"] is None else str(row["total"])
        table.add_row(row["file"], row["structure"], total, row["error"])
    console.print(table)
    failures = sum(1 for row in rows if row["error"])
    if failures:
        raise SystemExit(1)

"""Structured exports of a computed layout (JSON, CSV, Arrow IPC)."""

from __future__ import annotations

import csv
from dataclasses import asdict
from pathlib import Path
from typing import Any

import orjson
import pyarrow as pa

from reclayout.layout.walker import Layout

COLUMNS = [
    "name",
    "level",
    "depth",
    "format",
    "usage",
    "position",
    "unit_length",
    "multiplier",
    "effective_length",
    "span",
    "is_group",
    "is_root",
    "line_number",
]


def layout_to_records(layout: Layout) -> list[dict[str, Any]]:
    return [asdict(row) for row in layout.rows]


def layout_to_payload(layout: Layout) -> dict[str, Any]:
    return {
        "structure": layout.structure_name,
        "total": layout.grand_total,
        "fields": layout_to_records(layout),
    }


def layout_to_json(layout: Layout) -> bytes:
    return orjson.dumps(layout_to_payload(layout), option=orjson.OPT_INDENT_2)


def write_csv(layout: Layout, path: Path) -> None:
    """Write one CSV row per field, header first."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=COLUMNS)
        writer.writeheader()
        writer.writerows(layout_to_records(layout))


def write_arrow(layout: Layout, path: Path) -> None:
    """Write the layout rows to an Arrow IPC file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    records = layout_to_records(layout)
    table = pa.table({column: [r[column] for r in records] for column in COLUMNS})
    table = table.replace_schema_metadata(
        {"structure": layout.structure_name, "total": str(layout.grand_total)}
    )
    with pa.OSFile(str(path), "wb") as sink:
        with pa.ipc.new_file(sink, table.schema) as writer:
            writer.write_table(table)

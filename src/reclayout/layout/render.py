"""Fixed-column record layout report."""

from __future__ import annotations

from reclayout.layout.walker import Layout, LayoutRow

NAME_WIDTH = 29
FORMAT_WIDTH = 14
TYPE_WIDTH = 14
NUM_WIDTH = 5

HEADER = "Data Name                     Format         Type           N-Len  Pos  F-Len"
DIVIDER = " ".join(
    "-" * width for width in (NAME_WIDTH, FORMAT_WIDTH, TYPE_WIDTH, NUM_WIDTH, NUM_WIDTH, NUM_WIDTH)
)
FOOTER_DIVIDER = " " * 72 + "-" * NUM_WIDTH
BLANK_NUM = " " * NUM_WIDTH


def _clip(text: str, width: int) -> str:
    return text[:width]


def _root_line(row: LayoutRow) -> str:
    return (
        f"{_clip(row.name, NAME_WIDTH):<{NAME_WIDTH}} {'':<{FORMAT_WIDTH}} {'':<{TYPE_WIDTH}} "
        f"{row.span:{NUM_WIDTH}} {row.position:{NUM_WIDTH}}      "
    )


def _field_line(row: LayoutRow) -> str:
    # groups and zero-length placeholders leave F-Len blank
    if row.is_group or row.effective_length == 0:
        length = BLANK_NUM
    else:
        length = f"{row.effective_length:{NUM_WIDTH}}"
    return (
        f"{_clip(row.name, NAME_WIDTH):<{NAME_WIDTH}} "
        f"{_clip(row.format, FORMAT_WIDTH):<{FORMAT_WIDTH}} "
        f"{_clip(row.usage, TYPE_WIDTH):<{TYPE_WIDTH}} "
        f"{BLANK_NUM} {row.position:{NUM_WIDTH}} {length}"
    )


def render_report(layout: Layout) -> str:
    """Header, one line per field (summary line for roots), divider and Total."""
    lines = [HEADER, DIVIDER]
    for row in layout.rows:
        lines.append(_root_line(row) if row.is_root else _field_line(row))
    lines.append(FOOTER_DIVIDER)
    lines.append(f"{'':40}Total{'':12}{layout.grand_total:6}")
    return "\n".join(lines) + "\n"

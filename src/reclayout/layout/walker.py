"""Position and multiplier walk over a parsed structure.

One depth-first, left-to-right pass:
- a field's multiplier is its own OCCURS count times its parent's multiplier
- leaves start at the running cursor and advance it by length * multiplier
- groups never advance the cursor themselves; their span is how far their
  children moved it
"""

from __future__ import annotations

from dataclasses import dataclass

from reclayout.copybook.hierarchy import Structure
from reclayout.copybook.parser import Field
from reclayout.layout.lengths import field_length


@dataclass(frozen=True)
class LayoutRow:
    name: str
    level: int
    depth: int
    format: str
    usage: str
    position: int
    unit_length: int
    multiplier: int
    effective_length: int
    span: int
    is_group: bool
    is_root: bool
    line_number: int


@dataclass(frozen=True)
class Layout:
    structure_name: str
    rows: list[LayoutRow]
    grand_total: int

    @property
    def root_rows(self) -> list[LayoutRow]:
        return [row for row in self.rows if row.is_root]

    @property
    def leaf_rows(self) -> list[LayoutRow]:
        return [row for row in self.rows if not row.is_group]


def format_column(field: Field) -> str:
    """OCCURS marker when repeated, else the raw picture, else blank."""
    if field.repeat_count is not None:
        return f"OCCURS({field.repeat_count})"
    return field.picture or ""


def _visit(
    field: Field,
    inherited: int,
    cursor: int,
    depth: int,
    rows: list[LayoutRow],
) -> int:
    multiplier = inherited * field.multiplier
    unit = field_length(field)
    start = cursor
    # the row is inserted ahead of its children once the span is known
    index = len(rows)

    if field.children:
        for child in field.children:
            cursor = _visit(child, multiplier, cursor, depth + 1, rows)
    else:
        cursor += unit * multiplier

    row = LayoutRow(
        name=field.name,
        level=field.level,
        depth=depth,
        format=format_column(field),
        usage=field.usage or "",
        position=start,
        unit_length=unit,
        multiplier=multiplier,
        effective_length=unit * multiplier,
        span=cursor - start,
        is_group=field.is_group,
        is_root=depth == 0,
        line_number=field.source_line,
    )
    rows.insert(index, row)
    return cursor


def root_span(field: Field, start: int = 1) -> int:
    """Displayed total of a single root field laid out from ``start``."""
    return _visit(field, 1, start, 0, []) - start


def walk_structure(structure: Structure) -> Layout:
    """Compute every field's position, effective length and span."""
    rows: list[LayoutRow] = []
    cursor = 1
    grand_total = 0
    for root in structure.root_fields:
        start = cursor
        cursor = _visit(root, 1, cursor, 0, rows)
        # last root wins: the footer reports only the final root's span
        grand_total = cursor - start
    return Layout(structure_name=structure.name, rows=rows, grand_total=grand_total)

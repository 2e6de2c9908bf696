"""Copybook text in, record layout out.

guard -> field-line parser -> hierarchy builder -> walker -> renderer. Every
stage is a pure function of the input text; errors propagate as LayoutError.
"""

from __future__ import annotations

import logging

from reclayout.config import LayoutConfig
from reclayout.copybook.guard import check_unsupported_features
from reclayout.copybook.hierarchy import Structure, build_structure
from reclayout.copybook.parser import parse_copybook
from reclayout.layout.render import render_report
from reclayout.layout.walker import Layout, walk_structure

logger = logging.getLogger(__name__)


def parse_structure(text: str, strict: bool = False) -> Structure:
    check_unsupported_features(text)
    fields = parse_copybook(text, strict=strict)
    structure = build_structure(fields)
    logger.info(
        "Parsed %d fields into structure %r (%d root fields)",
        len(fields),
        structure.name,
        len(structure.root_fields),
    )
    return structure


def compute_layout(text: str, config: LayoutConfig | None = None) -> Layout:
    cfg = config or LayoutConfig()
    layout = walk_structure(parse_structure(text, strict=cfg.strict))
    logger.info("Layout %r totals %d bytes", layout.structure_name, layout.grand_total)
    return layout


def generate_layout(text: str, config: LayoutConfig | None = None) -> str:
    """Render the fixed-column layout report for a copybook."""
    return render_report(compute_layout(text, config))

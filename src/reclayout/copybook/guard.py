"""Reject copybooks that use constructs the layout generator does not model.

Detection is textual over the whole document, so a mention inside a comment
is rejected too.
"""

from __future__ import annotations

import re

from reclayout.errors import UnsupportedFeature

VARYING_RE = re.compile(r"varying in size", re.IGNORECASE)
OCCURS_RANGE_RE = re.compile(r"occurs\s+\d+\s+to", re.IGNORECASE)
REDEFINES_RE = re.compile(r"redefines", re.IGNORECASE)

# Checked in order; the first hit wins.
UNSUPPORTED: list[tuple[re.Pattern[str], str, str]] = [
    (VARYING_RE, "variable length", "variable length files not implemented"),
    (OCCURS_RANGE_RE, "variable length", "variable length files not implemented"),
    (REDEFINES_RE, "redefines", "redefines not implemented"),
]


def _locate(text: str, index: int) -> tuple[int, str]:
    """Return the 1-based line number and stripped line text at ``index``."""
    line_number = text.count("\n", 0, index) + 1
    start = text.rfind("\n", 0, index) + 1
    end = text.find("\n", index)
    if end == -1:
        end = len(text)
    return line_number, text[start:end].strip()


def check_unsupported_features(text: str) -> None:
    """Raise UnsupportedFeature if the text needs variable-length or REDEFINES support."""
    for pattern, feature, message in UNSUPPORTED:
        match = pattern.search(text)
        if match:
            line_number, line = _locate(text, match.start())
            raise UnsupportedFeature(message, feature=feature, line_number=line_number, text=line)

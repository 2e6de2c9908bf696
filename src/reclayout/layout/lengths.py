"""Byte lengths of a single occurrence of a field.

OCCURS counts are not applied here; the walker multiplies them in.
"""

from __future__ import annotations

import re

from reclayout.copybook.parser import Field, Usage

DECIMAL_RE = re.compile(r"s?9\((\d+)\)(?:v9\((\d+)\))?", re.IGNORECASE)
ALPHA_RE = re.compile(r"x\((\d+)\)", re.IGNORECASE)
ZERO_SUPPRESSED = "zzzzz9"
# Binary items are sized as a fullword whatever their digit count.
BINARY_LENGTH = 4


def _decimal_digits(picture: str) -> int | None:
    match = DECIMAL_RE.search(picture)
    if not match:
        return None
    return int(match.group(1)) + int(match.group(2) or 0)


def picture_length(picture: str) -> int:
    """Display (zoned) length of a picture: 9 -> 1, 9(8) -> 8, x(20) -> 20, s9(9)v9(2) -> 11."""
    if picture == "9":
        return 1
    if picture.lower() == ZERO_SUPPRESSED:
        return 6
    digits = _decimal_digits(picture)
    if digits is not None:
        return digits
    match = ALPHA_RE.search(picture)
    if match:
        return int(match.group(1))
    # edited pictures: one byte per symbol
    return len(picture)


def comp3_digits(picture: str) -> int:
    if picture == "9":
        return 1
    digits = _decimal_digits(picture)
    if digits is not None:
        return digits
    return picture_length(picture)


def comp_length(picture: str, usage: Usage) -> int:
    """Length of a leaf with a picture under the given usage."""
    if usage is Usage.COMP_3:
        # one nibble per digit plus the sign nibble, rounded up to whole bytes
        return (comp3_digits(picture) + 2) // 2
    if usage in (Usage.COMP, Usage.COMP_1, Usage.COMP_2):
        return BINARY_LENGTH
    return picture_length(picture)


def field_length(field: Field) -> int:
    """Unmultiplied length: children summed for groups, picture-derived for leaves."""
    if field.children:
        return sum(field_length(child) for child in field.children)
    if field.picture:
        return comp_length(field.picture, field.usage_kind)
    # OCCURS placeholder without a picture
    return 0

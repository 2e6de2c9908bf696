"""Field-line parser for copybook record descriptions.

Recognizes one declaration per line:
- a two-digit level number and a name starting with a letter
- optional PIC/PICTURE [IS] clause (token up to whitespace or period)
- optional [USAGE [IS]] COMP, COMP-n or COMPUTATIONAL[-n]
- optional OCCURS n [TIMES]
- optional trailing period

Blank lines, ``*`` comments and FD declarations are skipped. Anything else that
does not have this shape is ignored unless strict parsing is requested.
Continuation lines are not reassembled.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

from reclayout.errors import MalformedField

logger = logging.getLogger(__name__)

FIELD_RE = re.compile(
    r"""
    ^\s*(?P<level>\d{2})\s+
    (?P<name>[A-Za-z][A-Za-z0-9-]*)
    \s*(?:PIC(?:TURE)?\s+(?:IS\s+)?(?P<picture>[^\s.]+))?
    \s*(?:(?:USAGE\s+(?:IS\s+)?)?(?P<usage>COMP(?:UTATIONAL)?(?:-?\d+)?))?
    \s*(?:OCCURS\s+(?P<occurs>\d+)(?:\s+TIMES?)?)?
    \s*\.?
    """,
    re.IGNORECASE | re.VERBOSE,
)
FD_RE = re.compile(r"^FD\s", re.IGNORECASE)
USAGE_SUFFIX_RE = re.compile(r"^COMP-?(\d+)$")


class Usage(Enum):
    DISPLAY = "DISPLAY"
    COMP = "COMP"
    COMP_1 = "COMP-1"
    COMP_2 = "COMP-2"
    COMP_3 = "COMP-3"
    OTHER = "OTHER"

    @classmethod
    def from_text(cls, usage: str | None) -> Usage:
        """Map normalized usage text to its storage kind; no usage means display."""
        if not usage:
            return cls.DISPLAY
        return _USAGE_BY_TEXT.get(usage, cls.OTHER)


_USAGE_BY_TEXT = {
    "COMP": Usage.COMP,
    "COMP-1": Usage.COMP_1,
    "COMP-2": Usage.COMP_2,
    "COMP-3": Usage.COMP_3,
}


@dataclass(frozen=True)
class Field:
    level: int
    name: str
    picture: str | None = None
    usage: str | None = None
    repeat_count: int | None = None
    children: tuple[Field, ...] = ()
    source_line: int = 0

    @property
    def is_group(self) -> bool:
        return bool(self.children)

    @property
    def usage_kind(self) -> Usage:
        return Usage.from_text(self.usage)

    @property
    def multiplier(self) -> int:
        return 1 if self.repeat_count is None else self.repeat_count


def normalize_usage(token: str) -> str:
    """COMPUTATIONAL-3 / comp3 / Comp-3 -> COMP-3."""
    usage = token.upper()
    if usage.startswith("COMPUTATIONAL"):
        usage = "COMP" + usage[len("COMPUTATIONAL") :]
    suffix = USAGE_SUFFIX_RE.match(usage)
    if suffix:
        usage = f"COMP-{suffix.group(1)}"
    return usage


def is_ignorable(line: str) -> bool:
    """Blank lines, comments and FD declarations never describe a field."""
    stripped = line.strip()
    return not stripped or stripped.startswith("*") or bool(FD_RE.match(stripped))


def _parse_int(raw: str, what: str, line_number: int, line: str) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        raise MalformedField(f"invalid {what} {raw!r}", line_number, line) from exc


def parse_field_line(line: str, line_number: int) -> Field | None:
    """Parse one source line into a childless Field, or None when it is not a field."""
    stripped = line.lstrip()
    if is_ignorable(stripped):
        return None
    match = FIELD_RE.match(stripped)
    if not match:
        return None

    level = _parse_int(match.group("level"), "level number", line_number, stripped.rstrip())
    occurs_raw = match.group("occurs")
    repeat_count = (
        _parse_int(occurs_raw, "OCCURS count", line_number, stripped.rstrip())
        if occurs_raw is not None
        else None
    )
    usage_raw = match.group("usage")
    return Field(
        level=level,
        name=match.group("name"),
        picture=match.group("picture"),
        usage=normalize_usage(usage_raw) if usage_raw else None,
        repeat_count=repeat_count,
        source_line=line_number,
    )


def parse_copybook(text: str, strict: bool = False) -> list[Field]:
    """Parse every field declaration in source order.

    With ``strict`` set, a content line that is not a field raises MalformedField
    instead of being skipped.
    """
    fields: list[Field] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        field = parse_field_line(line, line_number)
        if field is not None:
            fields.append(field)
            continue
        if is_ignorable(line):
            continue
        if strict:
            raise MalformedField("not a field declaration", line_number, line.strip())
        logger.debug("Skipping non-field line %d: %s", line_number, line.strip())
    return fields

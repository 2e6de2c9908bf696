"""Rebuild the field tree from flat, leveled declarations.

A field closes every open field whose level is equal to or higher than its own;
a strictly higher level nests under the open field. Order is never changed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace

from reclayout.copybook.parser import Field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Structure:
    name: str
    root_fields: tuple[Field, ...]

    def iter_fields(self) -> Iterable[Field]:
        """Depth-first, source-order walk over every field."""
        stack = list(reversed(self.root_fields))
        while stack:
            field = stack.pop()
            yield field
            stack.extend(reversed(field.children))

    @property
    def field_count(self) -> int:
        return sum(1 for _ in self.iter_fields())


@dataclass
class _OpenField:
    field: Field
    children: list[Field]


def _close_top(stack: list[_OpenField], roots: list[Field]) -> None:
    top = stack.pop()
    done = replace(top.field, children=tuple(top.children))
    if stack:
        stack[-1].children.append(done)
    else:
        roots.append(done)
    logger.debug("Closed %s (level %d, %d children)", done.name, done.level, len(done.children))


def build_structure(fields: Iterable[Field]) -> Structure:
    """Nest fields by level number and name the structure after its outermost field."""
    stack: list[_OpenField] = []
    roots: list[Field] = []
    current_level = 0

    for field in fields:
        while stack and current_level >= field.level:
            _close_top(stack, roots)
            current_level = stack[-1].field.level if stack else 0
        stack.append(_OpenField(field=field, children=[]))
        current_level = field.level

    while stack:
        _close_top(stack, roots)

    name = ""
    if roots:
        outermost = min(root.level for root in roots)
        name = next(root.name for root in roots if root.level == outermost)
    return Structure(name=name, root_fields=tuple(roots))

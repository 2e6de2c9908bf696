"""Fatal conversion errors.

Every error aborts the whole conversion; callers print ``str(exc)`` verbatim.
"""

from __future__ import annotations


class LayoutError(Exception):
    """Base class for errors raised while turning a copybook into a layout."""

    def __init__(
        self, message: str, line_number: int | None = None, text: str | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line_number = line_number
        self.text = text

    def __str__(self) -> str:
        parts = []
        if self.line_number is not None:
            parts.append(f"line {self.line_number}")
        parts.append(self.message)
        if self.text:
            parts.append(self.text)
        return ": ".join(parts)


class UnsupportedFeature(LayoutError):
    """Input uses a construct the layout generator refuses to handle."""

    def __init__(
        self,
        message: str,
        feature: str,
        line_number: int | None = None,
        text: str | None = None,
    ) -> None:
        super().__init__(message, line_number=line_number, text=text)
        self.feature = feature


class MalformedField(LayoutError):
    """A field declaration whose numeric parts are unusable."""

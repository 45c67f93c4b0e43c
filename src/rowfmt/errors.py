"""Exception hierarchy shared by the parser, layout and renderer."""
from __future__ import annotations

from typing import Optional


class RowFormatError(Exception):
    """Base class for all template, layout and rendering failures."""


class TemplateParseError(RowFormatError, ValueError):
    """
    Raised when a template string is malformed.

    Parsing stops at the first failure, so the error describes the left-most
    problem in the source. ``position`` is the codepoint offset where the
    offending construct starts and ``token`` is the text that was rejected.
    """

    def __init__(
        self,
        message: str,
        *,
        source: str = "",
        position: Optional[int] = None,
        token: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.source = source
        self.position = position
        self.token = token

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (at position {self.position} in {self.source!r})"


class LayoutError(RowFormatError):
    """Raised when a row cannot be laid out at the requested width."""


class RenderError(RowFormatError):
    """Raised when a data value cannot be converted to display text."""


__all__ = [
    "LayoutError",
    "RenderError",
    "RowFormatError",
    "TemplateParseError",
]

"""Structured template representation produced by the parser."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple, overload

from rich.color import Color
from rich.color_triplet import ColorTriplet
from rich.style import Style


class Alignment(str, Enum):
    """Horizontal alignment applied to a field's lines within its column."""

    DEFAULT = "default"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    JUSTIFY = "justify"


ALIGNMENTS_BY_NAME: Dict[str, Alignment] = {
    member.value: member for member in Alignment if member is not Alignment.DEFAULT
}


def is_alignment_name(name: str) -> bool:
    """Return True when ``name`` is a tag that selects an alignment."""

    return name in ALIGNMENTS_BY_NAME


@dataclass(frozen=True)
class FieldFormatting:
    """Display options attached to a field node."""

    color: Optional[ColorTriplet] = None
    bold: bool = False
    italic: bool = False
    underline: bool = False
    wrap: bool = False
    alignment: Alignment = Alignment.DEFAULT

    @property
    def effective_alignment(self) -> Alignment:
        """The alignment used for rendering; DEFAULT behaves as LEFT."""

        if self.alignment is Alignment.DEFAULT:
            return Alignment.LEFT
        return self.alignment

    def tags(self) -> List[str]:
        """Return the formatting as the tag names a template would use."""

        names: List[str] = []
        for name in ("bold", "italic", "underline", "wrap"):
            if getattr(self, name):
                names.append(name)
        if self.alignment is not Alignment.DEFAULT:
            names.append(self.alignment.value)
        if self.color is not None:
            names.append(self.color.hex.lstrip("#"))
        return names

    def rich_style(self) -> Style:
        """Describe the formatting as a rich ``Style`` for display purposes."""

        return Style(
            color=Color.from_triplet(self.color) if self.color is not None else None,
            bold=self.bold or None,
            italic=self.italic or None,
            underline=self.underline or None,
        )


@dataclass(frozen=True)
class Node:
    """
    One template element: either literal text or a substituted field.

    For fields ``value`` is the lookup key and ``width`` the explicit column
    width (``0`` means auto). For literals ``value`` holds the text with
    escapes resolved; ``width`` is unused and ``formatting`` is ``None``.
    """

    is_field: bool
    value: str
    width: int = 0
    formatting: Optional[FieldFormatting] = None

    @classmethod
    def literal(cls, text: str) -> "Node":
        return cls(is_field=False, value=text)

    @classmethod
    def field(
        cls, key: str, width: int = 0, formatting: Optional[FieldFormatting] = None
    ) -> "Node":
        return cls(
            is_field=True,
            value=key,
            width=width,
            formatting=formatting if formatting is not None else FieldFormatting(),
        )

    @property
    def is_auto(self) -> bool:
        """True for fields that take their width from the remaining space."""

        return self.is_field and self.width == 0

    @property
    def fixed_width(self) -> int:
        """Width this node claims before auto columns are sized (0 for auto fields)."""

        if self.is_field:
            return self.width
        return len(self.value)


@dataclass(frozen=True)
class Template:
    """An immutable, ordered sequence of nodes parsed from ``source``."""

    nodes: Tuple[Node, ...] = ()
    source: str = field(default="", compare=False)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    @overload
    def __getitem__(self, index: int) -> Node: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Node, ...]: ...

    def __getitem__(self, index):
        return self.nodes[index]

    def fields(self) -> List[Node]:
        """Return the field nodes in template order."""

        return [node for node in self.nodes if node.is_field]

    def keys(self) -> List[str]:
        """Return the field keys in template order (duplicates preserved)."""

        return [node.value for node in self.nodes if node.is_field]


__all__ = [
    "ALIGNMENTS_BY_NAME",
    "Alignment",
    "FieldFormatting",
    "Node",
    "Template",
    "is_alignment_name",
]

"""
Row template parser.

A template such as ``"Title: @title{15} Description: @desc.wrap"`` is a
sequence of literal text and ``@``-prefixed fields:

- ``@key`` introduces a field; ``@@`` is a literal ``@``.
- ``.tag`` suffixes set formatting (``bold``, ``italic``, ``underline``,
  ``wrap``, an alignment, a named color or a six-digit hex color).
- ``{N}`` sets an explicit column width; without it the field shares the
  remaining row width with the other auto fields.
- A space ending a field specifier is consumed; every other space belongs to
  a literal.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from ..colors import decode_hex_color, resolve_color
from ..errors import TemplateParseError
from .models import (
    ALIGNMENTS_BY_NAME,
    Alignment,
    FieldFormatting,
    Node,
    Template,
    is_alignment_name,
)

logger = logging.getLogger(__name__)

_FIELD_MARKER = "@"
_TAG_SEPARATOR = "."
_WIDTH_OPEN = "{"
_WIDTH_CLOSE = "}"
_BOOL_TAGS = ("bold", "italic", "underline", "wrap")
_ASCII_DIGITS = frozenset("0123456789")


class _TemplateParser:
    """Cursor over a template source that emits one node per step."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.index = 0

    def _error(self, message: str, position: int, token: Optional[str] = None) -> TemplateParseError:
        return TemplateParseError(message, source=self.source, position=position, token=token)

    def _at_field_start(self) -> bool:
        text = self.source
        index = self.index
        return (
            text[index] == _FIELD_MARKER
            and index + 1 < len(text)
            and text[index + 1] != _FIELD_MARKER
        )

    def parse(self) -> Template:
        nodes: List[Node] = []
        while self.index < len(self.source):
            if self._at_field_start():
                nodes.append(self._parse_field())
            else:
                nodes.append(self._parse_literal())
        logger.debug("Parsed template %r into %d nodes", self.source, len(nodes))
        return Template(nodes=tuple(nodes), source=self.source)

    def _parse_literal(self) -> Node:
        text = self.source
        chars: List[str] = []
        start = self.index
        while self.index < len(text):
            char = text[self.index]
            if char != _FIELD_MARKER:
                chars.append(char)
                self.index += 1
                continue
            if self.index == len(text) - 1:
                raise self._error(
                    "Unexpected end of input in literal", self.index, token=text[start:]
                )
            if text[self.index + 1] == _FIELD_MARKER:
                chars.append(_FIELD_MARKER)
                self.index += 2
                continue
            # Unescaped marker; a field starts here.
            break
        return Node.literal("".join(chars))

    def _parse_field(self) -> Node:
        text = self.source
        start = self.index
        self.index += 1  # skip the marker
        specifier_start = self.index
        width = 0
        while self.index < len(text):
            char = text[self.index]
            if char == _WIDTH_OPEN:
                specifier = text[specifier_start : self.index]
                width = self._parse_width()
                break
            if char == " ":
                specifier = text[specifier_start : self.index]
                self.index += 1
                break
            if char == _FIELD_MARKER:
                specifier = text[specifier_start : self.index]
                break
            self.index += 1
        else:
            specifier = text[specifier_start:]

        key, formatting = self._parse_specifier(specifier, start)
        return Node.field(key, width=width, formatting=formatting)

    def _parse_width(self) -> int:
        text = self.source
        brace = self.index
        digits: List[str] = []
        self.index = brace + 1
        while self.index < len(text):
            char = text[self.index]
            if char == _WIDTH_CLOSE:
                if not digits:
                    raise self._error(
                        "Unexpected empty width. Expected digits.", self.index, token="{}"
                    )
                self.index += 1
                return int("".join(digits))
            if char not in _ASCII_DIGITS:
                raise self._error(
                    f"Unexpected character '{char}'; expected digit", self.index, token=char
                )
            digits.append(char)
            self.index += 1
        raise self._error(
            "Unexpected end of input in width string; expected digits followed by }",
            brace,
            token=text[brace:],
        )

    def _parse_specifier(self, specifier: str, position: int) -> tuple[str, FieldFormatting]:
        key, *tags = specifier.split(_TAG_SEPARATOR)
        if not key:
            raise self._error("Empty field key", position, token=f"@{specifier}")

        flags = {name: False for name in _BOOL_TAGS}
        alignment = Alignment.DEFAULT
        color = None
        # Offset of the first tag: past the marker, the key and the separator.
        next_offset = position + 1 + len(key) + 1
        for tag in tags:
            offset, next_offset = next_offset, next_offset + len(tag) + 1
            if tag in flags:
                if flags[tag]:
                    raise self._error(
                        f"Cannot specify {tag} more than once", offset, token=tag
                    )
                flags[tag] = True
                continue
            if is_alignment_name(tag):
                if alignment is not Alignment.DEFAULT:
                    raise self._error(
                        f"Cannot specify more than one alignment in {specifier}",
                        offset,
                        token=tag,
                    )
                alignment = ALIGNMENTS_BY_NAME[tag]
                continue
            parsed_color = resolve_color(tag)
            if parsed_color is None:
                parsed_color = decode_hex_color(tag)
            if parsed_color is None:
                raise self._error(
                    f"Invalid field format: {tag} in {specifier}", offset, token=tag
                )
            if color is not None:
                raise self._error(
                    f"Cannot add second color {tag} in {specifier}", offset, token=tag
                )
            color = parsed_color

        return key, FieldFormatting(color=color, alignment=alignment, **flags)


def parse_template(source: str) -> Template:
    """
    Parse a row template string into a :class:`Template`.

    Parameters:
        source (str): Template text, e.g. ``"Title: @title{15} @desc.wrap.justify"``.

    Returns:
        Template: The nodes in left-to-right order. An empty source gives an empty template.

    Raises:
        TemplateParseError: On the first malformed construct; no partial template is returned.
    """
    return _TemplateParser(source).parse()


__all__ = ["parse_template"]

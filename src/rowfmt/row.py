"""Rendering of data records through a laid-out row template."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from itertools import zip_longest
from typing import Any, List, Mapping, Optional, Tuple

from .datatypes import AppConfig, OverflowPolicy, TruncationPolicy
from .errors import RenderError
from .layout import allocate_widths
from .layout_utils import blank, truncate_to_width
from .template.models import FieldFormatting, Template
from .text import align_line, align_paragraph, wrap_text

logger = logging.getLogger(__name__)


def format_value(value: Any) -> str:
    """
    Convert a data value to the text shown in its column.

    ``None`` becomes an empty string and booleans render as ``true``/``false``;
    everything else goes through ``str()``.

    Raises:
        RenderError: If the value's string conversion fails.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    try:
        return str(value)
    except Exception as exc:
        raise RenderError(
            f"Cannot display value of type {type(value).__name__}: {exc}"
        ) from exc


@dataclass(frozen=True)
class Row:
    """
    A template laid out at a fixed total width.

    ``widths`` is computed once on construction and parallels ``template``.
    A row holds no per-render state, so one instance can render any number of
    records.
    """

    template: Template
    inner_width: int
    config: AppConfig = field(default_factory=AppConfig, compare=False, repr=False)
    widths: Tuple[int, ...] = field(init=False)

    def __post_init__(self) -> None:
        widths = allocate_widths(
            self.template, self.inner_width, overflow=self.config.layout.overflow
        )
        object.__setattr__(self, "widths", tuple(widths))

    @property
    def slack(self) -> int:
        """Columns left unclaimed when a row has no auto fields to absorb them."""

        return max(0, self.inner_width - sum(self.widths))

    @property
    def overflow(self) -> int:
        """Columns by which the fixed widths exceed ``inner_width`` (0 when they fit)."""

        return max(0, sum(self.widths) - self.inner_width)

    def _resolve_text(self, key: str, data: Mapping[str, Any]) -> str:
        if key not in data:
            return ""
        try:
            return format_value(data[key])
        except RenderError as exc:
            if self.config.render.strict_values:
                raise RenderError(f"Field '{key}': {exc}") from exc
            logger.warning("Rendering field '%s' as empty: %s", key, exc)
            return ""

    def render_node_at_index(self, index: int, data: Mapping[str, Any]) -> List[str]:
        """
        Render one column of the row.

        Parameters:
            index (int): Position of the node within the template.
            data (Mapping[str, Any]): Field values keyed by field name.

        Returns:
            List[str]: The column's lines, each exactly as wide as the column. Literals yield their text once.
        """
        node = self.template[index]
        if not node.is_field:
            return [node.value]

        width = self.widths[index]
        if width == 0:
            return [""]
        formatting = node.formatting or FieldFormatting()
        alignment = formatting.effective_alignment
        text = self._resolve_text(node.value, data)

        if formatting.wrap:
            text = text.replace("\r\n", "\n").replace("\r", "\n")
            lines: List[str] = []
            for paragraph in wrap_text(text, width):
                if not paragraph:
                    lines.append(blank(width))
                    continue
                lines.extend(align_paragraph(paragraph, width, alignment))
            return lines

        single = text.replace("\r\n", " ").replace("\n", " ").replace("\r", " ")
        render_config = self.config.render
        ellipsis = render_config.ellipsis if render_config.truncation is TruncationPolicy.ELLIPSIS else ""
        single = truncate_to_width(single, width, ellipsis=ellipsis)
        return [align_line(single, width, alignment)]

    def render(self, data: Mapping[str, Any]) -> List[str]:
        """
        Render a data record into the row's output lines.

        Each column is rendered on its own; the row is as tall as its tallest
        column and shorter columns (including every literal after the first
        line) are filled with blanks of their width.

        Parameters:
            data (Mapping[str, Any]): Field values keyed by field name; missing keys render empty.

        Returns:
            List[str]: Lines of exactly ``inner_width`` codepoints, or wider when fixed widths overflow the row.
        """
        columns = [self.render_node_at_index(index, data) for index in range(len(self.template))]
        if not columns:
            return [blank(self.inner_width)]

        trailing = blank(self.slack)
        output: List[str] = []
        for parts in zip_longest(*columns):
            chunks = [
                part if part is not None else blank(width)
                for part, width in zip(parts, self.widths)
            ]
            output.append("".join(chunks) + trailing)
        return output


def make_row(
    template: Template,
    inner_width: int,
    *,
    overflow: Optional[OverflowPolicy] = None,
    config: Optional[AppConfig] = None,
) -> Row:
    """
    Lay out ``template`` at ``inner_width`` columns.

    Parameters:
        template (Template): Parsed template.
        inner_width (int): Total row width.
        overflow (Optional[OverflowPolicy]): Overrides ``config.layout.overflow`` when given.
        config (Optional[AppConfig]): Layout and render options; defaults apply when omitted.

    Returns:
        Row: The laid-out row.

    Raises:
        LayoutError: If the width is negative or the fixed widths overflow under ``OverflowPolicy.ERROR``.
    """
    resolved = config if config is not None else AppConfig()
    if overflow is not None and overflow is not resolved.layout.overflow:
        resolved = replace(resolved, layout=replace(resolved.layout, overflow=overflow))
    return Row(template, inner_width, config=resolved)


def render(row: Row, data: Mapping[str, Any]) -> List[str]:
    """Render ``data`` through ``row``; see :meth:`Row.render`."""

    return row.render(data)


__all__ = ["Row", "format_value", "make_row", "render"]

"""Fixed-width row rendering from ``@field`` templates."""
from __future__ import annotations

from .colors import decode_hex_color, resolve_color
from .config_loader import ConfigError, load_config
from .datatypes import (
    AppConfig,
    CLIConfig,
    LayoutConfig,
    OverflowPolicy,
    RenderConfig,
    TruncationPolicy,
)
from .errors import LayoutError, RenderError, RowFormatError, TemplateParseError
from .layout import allocate_widths
from .row import Row, format_value, make_row, render
from .template import Alignment, FieldFormatting, Node, Template, parse_template
from .text import align_line, align_line_justify, align_paragraph, wrap_line, wrap_text

__all__ = [
    "Alignment",
    "AppConfig",
    "CLIConfig",
    "ConfigError",
    "FieldFormatting",
    "LayoutConfig",
    "LayoutError",
    "Node",
    "OverflowPolicy",
    "RenderConfig",
    "RenderError",
    "Row",
    "RowFormatError",
    "Template",
    "TemplateParseError",
    "TruncationPolicy",
    "align_line",
    "align_line_justify",
    "align_paragraph",
    "allocate_widths",
    "decode_hex_color",
    "format_value",
    "load_config",
    "make_row",
    "parse_template",
    "render",
    "resolve_color",
    "wrap_line",
    "wrap_text",
]

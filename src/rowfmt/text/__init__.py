"""Text utilities: wrapping and alignment."""
from __future__ import annotations

from .align import align_line, align_line_justify, align_paragraph
from .wrap import wrap_line, wrap_text

__all__ = [
    "align_line",
    "align_line_justify",
    "align_paragraph",
    "wrap_line",
    "wrap_text",
]

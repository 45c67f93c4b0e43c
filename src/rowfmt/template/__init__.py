"""Template language: data model and parser."""
from __future__ import annotations

from .models import (
    ALIGNMENTS_BY_NAME,
    Alignment,
    FieldFormatting,
    Node,
    Template,
    is_alignment_name,
)
from .parser import parse_template

__all__ = [
    "ALIGNMENTS_BY_NAME",
    "Alignment",
    "FieldFormatting",
    "Node",
    "Template",
    "is_alignment_name",
    "parse_template",
]

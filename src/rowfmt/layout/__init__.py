"""Row layout: per-column width allocation."""
from __future__ import annotations

from .widths import allocate_widths

__all__ = ["allocate_widths"]

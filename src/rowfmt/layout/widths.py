"""Column width allocation for a parsed template."""
from __future__ import annotations

import logging
from typing import List

from ..datatypes import OverflowPolicy
from ..errors import LayoutError
from ..layout_utils import round_half_away
from ..template.models import Template

logger = logging.getLogger(__name__)


def allocate_widths(
    template: Template,
    inner_width: int,
    *,
    overflow: OverflowPolicy = OverflowPolicy.CLAMP,
) -> List[int]:
    """
    Compute the width of every node of ``template`` for a row ``inner_width`` wide.

    Literals take their codepoint count and explicit-width fields their stated
    width. Auto fields then split what is left, one at a time from left to
    right: each takes ``round(remaining / auto_fields_left)`` and that amount is
    subtracted before the next one is sized, so the widths always sum to
    ``inner_width`` when at least one auto field exists.

    Parameters:
        template (Template): Parsed template.
        inner_width (int): Total row width in codepoints.
        overflow (OverflowPolicy): What to do when fixed widths alone exceed ``inner_width``.

    Returns:
        List[int]: One width per node, parallel to ``template``.

    Raises:
        LayoutError: If ``inner_width`` is negative, or fixed widths overflow under ``OverflowPolicy.ERROR``.
    """
    if inner_width < 0:
        raise LayoutError(f"Row width must be >= 0 (got {inner_width})")

    widths = [0] * len(template)
    auto_indexes: List[int] = []
    remaining = inner_width
    for index, node in enumerate(template):
        if node.is_auto:
            auto_indexes.append(index)
            continue
        widths[index] = node.fixed_width
        remaining -= node.fixed_width

    if remaining < 0:
        fixed_total = inner_width - remaining
        if overflow is OverflowPolicy.ERROR:
            raise LayoutError(
                f"Fixed widths total {fixed_total} columns, exceeding row width {inner_width}"
            )
        logger.warning(
            "Fixed widths total %d columns but the row is %d wide; "
            "auto columns collapse to 0 and the row overflows",
            fixed_total,
            inner_width,
        )
        return widths

    for position, index in enumerate(auto_indexes):
        buckets = len(auto_indexes) - position
        width = round_half_away(remaining / buckets)
        widths[index] = width
        remaining -= width

    return widths


__all__ = ["allocate_widths"]

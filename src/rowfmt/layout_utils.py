"""Shared numeric and padding helpers for layout and alignment."""

from __future__ import annotations

import math


def round_half_away(value: float) -> int:
    """
    Round to the nearest integer, resolving ties away from zero.

    ``round()`` uses banker's rounding, which would move where the rounding
    error of width and gap allocation lands.
    """

    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return -whole if value < 0 else whole


def blank(width: int) -> str:
    """Return a space-filled string of ``width`` codepoints."""

    return " " * max(0, width)


def truncate_to_width(text: str, width: int, *, ellipsis: str = "") -> str:
    """
    Cut ``text`` down to at most ``width`` codepoints.

    When ``ellipsis`` is given and truncation happens, the marker replaces the
    tail of the kept text so the result still fits ``width``.

    Parameters:
        text (str): Text to shorten.
        width (int): Maximum codepoint length of the result.
        ellipsis (str): Optional marker appended when text is cut.

    Returns:
        str: ``text`` unchanged when it fits, otherwise the shortened text.
    """

    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    if not ellipsis:
        return text[:width]
    if width <= len(ellipsis):
        return ellipsis[:width]
    return f"{text[: width - len(ellipsis)]}{ellipsis}"


__all__ = ["blank", "round_half_away", "truncate_to_width"]

"""Greedy word wrapping measured in codepoints."""
from __future__ import annotations

from typing import List


def wrap_line(text: str, width: int) -> List[str]:
    """
    Wrap a single line of text so no output line exceeds ``width`` codepoints.

    Lines break at the last space that fits; the space itself is dropped. A
    word longer than ``width`` is split at exactly ``width`` codepoints.
    Tabs and other whitespace are not break points.

    Parameters:
        text (str): Text without line breaks.
        width (int): Maximum line length, at least 1.

    Returns:
        List[str]: Wrapped lines; empty when ``text`` is empty.

    Raises:
        ValueError: If ``width`` is smaller than 1.
    """
    if width < 1:
        raise ValueError(f"width must be >= 1 (got {width})")

    lines: List[str] = []
    rest = text
    while len(rest) > width:
        # One codepoint past the limit, so a space right at the boundary still counts.
        window = rest[: width + 1]
        split_at = window.rfind(" ")
        if split_at == -1:
            lines.append(window[:width])
            rest = rest[width:]
        else:
            lines.append(window[:split_at])
            rest = rest[split_at + 1 :]
    if rest:
        lines.append(rest)
    return lines


def wrap_text(text: str, width: int) -> List[List[str]]:
    """Wrap multi-line text paragraph by paragraph; one list of lines per input line."""

    return [wrap_line(paragraph, width) for paragraph in text.split("\n")]


__all__ = ["wrap_line", "wrap_text"]

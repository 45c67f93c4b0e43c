"""Padding and justification of wrapped lines to an exact column width."""
from __future__ import annotations

from typing import List, Sequence

from ..layout_utils import blank, round_half_away
from ..template.models import Alignment


def align_line_justify(line: str, width: int) -> str:
    """
    Stretch the gaps between words so ``line`` fills exactly ``width`` codepoints.

    Runs of whitespace collapse to word boundaries. The free space is split
    over the gaps one gap at a time: each gap takes the ideal (fractional)
    gap width corrected by the rounding error accumulated so far, rounded
    half away from zero. The gaps therefore sum to the free space exactly.
    Lines with fewer than two words are left aligned.
    """
    words = line.split()
    if len(words) < 2:
        return align_line(" ".join(words), width, Alignment.LEFT)

    word_length = sum(len(word) for word in words)
    free = width - word_length
    if free < len(words) - 1:
        raise ValueError(f"line {line!r} does not fit in {width} columns")

    ideal = free / (len(words) - 1)
    error = 0.0
    parts = [words[0]]
    for word in words[1:]:
        target = ideal - error
        gap = round_half_away(target)
        error = gap - target
        parts.append(blank(gap))
        parts.append(word)
    return "".join(parts)


def align_line(line: str, width: int, alignment: Alignment) -> str:
    """
    Pad ``line`` to exactly ``width`` codepoints according to ``alignment``.

    Parameters:
        line (str): Text no longer than ``width``.
        width (int): Target width.
        alignment (Alignment): DEFAULT and LEFT pad on the right, RIGHT on the left, CENTER on both sides (extra space on the right), JUSTIFY widens word gaps.

    Returns:
        str: The aligned line.

    Raises:
        ValueError: If ``line`` is longer than ``width``.
    """
    needed = width - len(line)
    if needed < 0:
        raise ValueError(f"line {line!r} is longer than {width} columns")
    if alignment is Alignment.JUSTIFY:
        return align_line_justify(line, width)
    if alignment is Alignment.RIGHT:
        return blank(needed) + line
    if alignment is Alignment.CENTER:
        left = needed // 2
        return blank(left) + line + blank(needed - left)
    return line + blank(needed)


def align_paragraph(lines: Sequence[str], width: int, alignment: Alignment) -> List[str]:
    """Align every line of a wrapped paragraph; a justified paragraph keeps a ragged last line."""

    if not lines:
        return []
    last_alignment = Alignment.LEFT if alignment is Alignment.JUSTIFY else alignment
    aligned = [align_line(line, width, alignment) for line in lines[:-1]]
    aligned.append(align_line(lines[-1], width, last_alignment))
    return aligned


__all__ = ["align_line", "align_line_justify", "align_paragraph"]

"""Greedy line packing for one paragraph.

WHY: This is the heart of the filter. Words are packed left to right onto
lines no wider than the configured width, the way classic fmt-style tools
do it, but with every width counted in codepoints.

HOW: A single pass keeps the words of the line in progress and its running
width. Each word either joins the current line (if the line is empty, or
the line plus one space plus the word still fits) or closes the current
line and starts the next one. The last line is emitted at the end.

RULES:
- Every word appears exactly once, in order, never split.
- A line with more than one word is never wider than max_width.
- A word wider than max_width sits alone on its own overflow line. This
  is silent; only a DEBUG log record is written.
- No rebalancing pass: a greedy decision is never reconsidered.
- max_width is trusted here; validation happens in ReflowSettings.
- An empty paragraph produces no lines.
"""

from __future__ import annotations

import logging
from typing import Iterable

from subpar.core.ir import Line, Paragraph, Word, WrappedParagraph

logger = logging.getLogger(__name__)


def wrap_words(words: Iterable[Word], max_width: int) -> list[Line]:
    """Greedily pack ``words`` into lines of at most ``max_width`` codepoints.

    Args:
        words: The paragraph's words, in order.
        max_width: Maximum line width in codepoints.

    Returns:
        Output lines covering every word exactly once.
    """
    lines: list[Line] = []
    current: list[Word] = []
    current_width = 0

    for word in words:
        if not current:
            current.append(word)
            current_width = word.width
        elif current_width + 1 + word.width <= max_width:
            current.append(word)
            current_width += 1 + word.width
        else:
            lines.append(Line(tuple(current)))
            current = [word]
            current_width = word.width

        if len(current) == 1 and current_width > max_width:
            logger.debug(
                "Word %r (width %d) exceeds max width %d", word.text, word.width, max_width
            )

    if current:
        lines.append(Line(tuple(current)))

    return lines


def wrap_paragraph(paragraph: Paragraph, max_width: int) -> WrappedParagraph:
    """Wrap one Paragraph into a WrappedParagraph."""
    return WrappedParagraph(tuple(wrap_words(paragraph.words, max_width)))

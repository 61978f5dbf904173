"""Split paragraph text into words.

WHY: Reflow discards the original spacing inside a paragraph. What survives
is the ordered sequence of words, each of which is placed on some output
line without being split.

HOW: Split on runs of whitespace. By default "whitespace" is whatever
Python classifies as whitespace (str.split() with no argument), which
includes Unicode spaces such as NO-BREAK SPACE and IDEOGRAPHIC SPACE.
With ascii_only=True only ASCII whitespace separates words.

RULES:
- Leading and trailing whitespace is discarded.
- Words are never empty.
- The same whitespace policy decides what counts as a blank line.
"""

from __future__ import annotations

import re

from subpar.core.ir import Word

ASCII_WHITESPACE = " \t\n\r\f\v"

_ASCII_WS_RE = re.compile(r"[ \t\n\r\f\v]+")


def split_words(text: str, ascii_only: bool = False) -> list[str]:
    """Split ``text`` into non-empty word strings."""
    if ascii_only:
        return [part for part in _ASCII_WS_RE.split(text) if part]
    return text.split()


def tokenize(text: str, ascii_only: bool = False) -> list[Word]:
    """Split a paragraph's text into Word objects, in order.

    Args:
        text: Paragraph text (its lines joined with single spaces).
        ascii_only: Only treat ASCII whitespace as a separator.

    Returns:
        The paragraph's words; empty for whitespace-only text.
    """
    return [Word(part) for part in split_words(text, ascii_only)]

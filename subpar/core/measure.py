"""Width measurement for words and lines.

WHY: Line-breaking decisions must be based on the number of displayed
characters, not on how many bytes an encoding spends per character. A
word like "åäöü" is 4 wide, even though UTF-8 stores it in 8 bytes.

HOW: Width is the codepoint count of a decoded ``str``. Bytes are refused
outright so a caller cannot accidentally measure storage units.

RULES:
- One codepoint is one width unit; no zero-width, combining-mark or
  double-width special cases.
- display_width() only accepts str; bytes raise TypeError.
- line_width() counts one separating space between adjacent words.
"""

from __future__ import annotations

from typing import Iterable


def display_width(text: str) -> int:
    """Return the display width of ``text`` in codepoints."""
    if isinstance(text, (bytes, bytearray)):
        raise TypeError("display_width() needs decoded text, not bytes")
    return len(text)


def line_width(widths: Iterable[int]) -> int:
    """Width of a line made of words with the given widths.

    Sum of the word widths plus one space between each pair of words.
    An empty line has width 0.
    """
    total = 0
    count = 0
    for width in widths:
        total += width
        count += 1
    if count == 0:
        return 0
    return total + count - 1

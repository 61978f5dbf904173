"""Ruler formatter: a debugging view of the wrap margin.

WHY: When tuning a width, or checking that multi-byte text is measured by
codepoint, it helps to see where the margin actually is. This view pads
each line out to the margin and marks it, so a line that was measured
wrong sticks out visually.

HOW: Each line that fits is right-padded with spaces to max_width
codepoints and followed by ``|<max_width>``. Overflow lines are printed
unpadded and unmarked, since they are already past the margin.

RULES:
- Padding is computed from Line.width (codepoints), never bytes
- A line exactly max_width wide gets the marker with no padding
- Separators verbatim (handled by BaseFormatter)
"""

from __future__ import annotations

from subpar.core.ir import Line
from subpar.formatters.base import BaseFormatter


class RulerFormatter(BaseFormatter):
    """Formatter that pads each line to the margin and marks it."""

    @property
    def name(self) -> str:
        return "Ruler"

    def render_line(self, line: Line, max_width: int) -> str:
        text = line.text
        if line.width > max_width:
            return text
        return "{}{}|{}".format(text, " " * (max_width - line.width), max_width)

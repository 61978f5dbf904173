"""Plain text formatter: the normal filter output.

WHY: This is what a paragraph filter prints: the reflowed lines and the
original blank lines, nothing else.

HOW: Each line is its words joined with single spaces.

RULES:
- No padding, no trailing whitespace on wrapped lines
- Separators verbatim (handled by BaseFormatter)
"""

from __future__ import annotations

from subpar.core.ir import Line
from subpar.formatters.base import BaseFormatter


class PlainTextFormatter(BaseFormatter):
    """Formatter that prints reflowed lines as-is."""

    @property
    def name(self) -> str:
        return "Plain Text"

    def render_line(self, line: Line, max_width: int) -> str:
        return line.text

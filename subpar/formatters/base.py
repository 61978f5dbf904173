"""Abstract base formatter.

WHY: Every output view consumes the same ReflowResult but renders lines
differently. This base class enforces a consistent interface so the CLI,
the HTTP service and the streaming pipeline can work with any formatter
generically.

HOW: BaseFormatter is an ABC with two requirements: a ``name`` property
and a ``render_line()`` method. Rendering of separators, blocks and whole
results is shared here.

RULES:
- Subclasses MUST implement ``name`` and ``render_line()``
- Separators are always rendered verbatim
- Rendered lines carry no newline; ``format()`` adds exactly one per line
- Formatters hold no per-run state; ``max_width`` is passed in every call

To add a new output format:
1. Create a new file in formatters/
2. Subclass BaseFormatter
3. Implement render_line() and name
4. Register in FORMATTERS dict in formatters/__init__.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from subpar.core.ir import Block, Line, ReflowResult, Separator


class BaseFormatter(ABC):
    """Abstract base for all output formatters."""

    media_type = "text/plain"

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Plain Text'."""

    @abstractmethod
    def render_line(self, line: Line, max_width: int) -> str:
        """Render one wrapped line, without a trailing newline."""

    def render_block(self, block: Block, max_width: int) -> list[str]:
        """Render a WrappedParagraph or Separator as output lines."""
        if isinstance(block, Separator):
            return [block.text]
        return [self.render_line(line, max_width) for line in block.lines]

    def format(self, result: ReflowResult) -> str:
        """Render a full ReflowResult, one newline after every line."""
        parts: list[str] = []
        for block in result.blocks:
            for rendered in self.render_block(block, result.max_width):
                parts.append(rendered)
                parts.append("\n")
        return "".join(parts)

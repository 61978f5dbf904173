"""Intermediate representation dataclasses for reflowed documents.

WHY: Each pipeline stage (segment, tokenize, wrap, format) needs the same
view of the text: paragraphs made of words, blank-line separators between
them, and wrapped lines ready for output. The IR gives every stage one
well-typed form and keeps the stages decoupled.

HOW: Frozen dataclasses form a small hierarchy:
  Word             one run of non-whitespace codepoints and its width
  Paragraph        the words of one run of non-blank input lines
  Separator        one blank input line, reproduced verbatim
  Line             words packed onto one output line
  WrappedParagraph the lines produced from one Paragraph
  Document         input order of Paragraphs and Separators
  ReflowResult     output order of WrappedParagraphs and Separators

RULES:
- Everything is immutable once built; words are never shared or mutated.
- Word.width is derived from Word.text (codepoint count), never passed in.
- Word.text is never empty.
- Order of entries/blocks is the input order and must be preserved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from subpar.core.measure import display_width, line_width


@dataclass(frozen=True)
class Word:
    """A maximal run of non-whitespace codepoints.

    Attributes:
        text: The word text, never empty.
        width: Codepoint count of ``text`` (derived).
    """

    text: str
    width: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("Word text must not be empty")
        object.__setattr__(self, "width", display_width(self.text))


@dataclass(frozen=True)
class Paragraph:
    """The ordered words of one contiguous run of non-blank lines."""

    words: tuple[Word, ...] = ()

    @property
    def texts(self) -> list[str]:
        return [word.text for word in self.words]


@dataclass(frozen=True)
class Separator:
    """A blank input line, kept verbatim (without its line terminator)."""

    text: str = ""


@dataclass(frozen=True)
class Line:
    """Words packed onto a single output line.

    RULES:
    - width counts one space between adjacent words.
    - A line wider than the limit holds exactly one word (overflow line).
    """

    words: tuple[Word, ...]

    @property
    def width(self) -> int:
        return line_width(word.width for word in self.words)

    @property
    def text(self) -> str:
        return " ".join(word.text for word in self.words)

    def is_overflow(self, max_width: int) -> bool:
        """True if this is a lone word wider than ``max_width``."""
        return len(self.words) == 1 and self.width > max_width


@dataclass(frozen=True)
class WrappedParagraph:
    """The output lines of one Paragraph, in order."""

    lines: tuple[Line, ...] = ()


Entry = Union[Paragraph, Separator]
Block = Union[WrappedParagraph, Separator]


@dataclass
class Document:
    """Paragraphs and separators in input order."""

    entries: list[Entry] = field(default_factory=list)

    @property
    def paragraphs(self) -> list[Paragraph]:
        return [e for e in self.entries if isinstance(e, Paragraph)]


@dataclass
class ReflowResult:
    """Wrapped paragraphs and separators in output order.

    Attributes:
        blocks: WrappedParagraph and Separator entries, input order.
        max_width: The width the paragraphs were wrapped to.
    """

    blocks: list[Block]
    max_width: int

    @property
    def paragraph_count(self) -> int:
        return sum(1 for b in self.blocks if isinstance(b, WrappedParagraph))

    @property
    def line_count(self) -> int:
        return sum(len(b.lines) for b in self.blocks if isinstance(b, WrappedParagraph))

    @property
    def overflow_count(self) -> int:
        return sum(
            1
            for b in self.blocks
            if isinstance(b, WrappedParagraph)
            for line in b.lines
            if line.is_overflow(self.max_width)
        )

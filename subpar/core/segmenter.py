"""Split input text into paragraphs and blank-line separators.

WHY: Reflow works one paragraph at a time, and the blank lines between
paragraphs must come out exactly as they went in. The segmenter turns a
flat sequence of input lines into that structure.

HOW: Walk the lines once. Non-blank lines accumulate into the current
paragraph. A blank line flushes the current paragraph (if any) and is
itself emitted as a Separator. At the end, any pending paragraph is
flushed. The lines of one paragraph are joined with single spaces before
tokenizing, so line breaks inside a paragraph are soft.

RULES:
- A blank line contains only whitespace, or nothing at all.
- Every blank line yields its own Separator, so blank-line counts survive.
- Separator.text is the blank line verbatim, minus its line terminator.
- Any input is valid; empty input yields nothing.
- segment_lines() is a generator and accepts any iterable of lines.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from subpar.core.ir import Document, Entry, Paragraph, Separator
from subpar.core.tokenizer import ASCII_WHITESPACE, tokenize


def split_lines(text: str) -> list[str]:
    """Split text into lines without their terminators.

    ``\\r\\n`` and lone ``\\r`` count as line ends. A trailing terminator
    does not produce an extra empty line.
    """
    if not text:
        return []
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def is_blank(line: str, ascii_only: bool = False) -> bool:
    """True if ``line`` holds nothing but whitespace."""
    if ascii_only:
        return not line.strip(ASCII_WHITESPACE)
    return not line.strip()


def segment_lines(lines: Iterable[str], ascii_only: bool = False) -> Iterator[Entry]:
    """Yield Paragraph and Separator entries in input order.

    Args:
        lines: Input lines. A trailing ``\\n`` / ``\\r\\n`` on each line
            is tolerated and removed.
        ascii_only: Use the ASCII-only whitespace policy.
    """
    pending: list[str] = []

    for raw in lines:
        line = raw.rstrip("\r\n")
        if is_blank(line, ascii_only):
            if pending:
                yield Paragraph(tuple(tokenize(" ".join(pending), ascii_only)))
                pending = []
            yield Separator(line)
        else:
            pending.append(line)

    if pending:
        yield Paragraph(tuple(tokenize(" ".join(pending), ascii_only)))


def segment_text(text: str, ascii_only: bool = False) -> Document:
    """Segment a whole decoded text into a Document."""
    return Document(list(segment_lines(split_lines(text), ascii_only)))

"""Reflow pipeline: decode, segment, wrap, render.

WHY: Callers (the CLI, the HTTP service, tests) want a single call that
turns input text or bytes into reflowed output, without wiring the
segmenter, wrapper and formatter together themselves.

HOW: decode_input() turns bytes into text with strict decoding. The text
is segmented into a Document, every Paragraph is wrapped, and the chosen
formatter renders the ReflowResult. iter_reflow_lines() does the same one
paragraph at a time for streaming callers.

RULES:
- Width is always measured on decoded text (codepoints), never on bytes.
- Malformed input bytes raise DecodingError; nothing is decoded
  best-effort and no partial output is produced.
- max_width is passed explicitly to every stage; there is no module state.
- Separators pass through unchanged and in place.
- Every output line ends with exactly one newline; empty input gives
  empty output.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from subpar.core.ir import Block, Document, Paragraph, ReflowResult
from subpar.core.segmenter import segment_lines, segment_text
from subpar.core.wrapper import wrap_paragraph
from subpar.formatters import get_formatter

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


class DecodingError(ValueError):
    """Raised when input bytes are not valid in the configured encoding.

    WHY: Measuring width needs real codepoints. Input that cannot be
    decoded has no well-defined width, so the whole run fails instead of
    guessing.

    HOW: Raised by decode_input() from the underlying UnicodeDecodeError.

    RULES:
    - encoding, position (byte offset) and reason are always set
    - The message names all three
    """

    def __init__(self, encoding: str, position: int, reason: str) -> None:
        self.encoding = encoding
        self.position = position
        self.reason = reason
        super().__init__(
            "cannot decode input as {} at byte {}: {}".format(encoding, position, reason)
        )


def decode_input(data: bytes, encoding: str = DEFAULT_ENCODING) -> str:
    """Decode ``data`` strictly.

    Raises:
        DecodingError: If ``data`` contains malformed sequences.
        LookupError: If ``encoding`` is unknown.
    """
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as exc:
        raise DecodingError(encoding, exc.start, exc.reason) from exc


def reflow_document(document: Document, max_width: int) -> ReflowResult:
    """Wrap every paragraph of ``document``, keeping separators in place."""
    blocks: list[Block] = []
    for entry in document.entries:
        if isinstance(entry, Paragraph):
            blocks.append(wrap_paragraph(entry, max_width))
        else:
            blocks.append(entry)
    result = ReflowResult(blocks=blocks, max_width=max_width)
    logger.debug(
        "Reflowed %d paragraphs into %d lines (%d overflowing) at width %d",
        result.paragraph_count,
        result.line_count,
        result.overflow_count,
        max_width,
    )
    return result


def reflow_text(
    text: str,
    max_width: int,
    output_format: str = "plain",
    ascii_only: bool = False,
) -> str:
    """Reflow decoded ``text`` and render it with ``output_format``.

    Raises:
        ValueError: If ``output_format`` is not a registered formatter.
    """
    formatter = get_formatter(output_format)
    document = segment_text(text, ascii_only)
    return formatter.format(reflow_document(document, max_width))


def reflow_bytes(
    data: bytes,
    max_width: int,
    encoding: str = DEFAULT_ENCODING,
    output_format: str = "plain",
    ascii_only: bool = False,
) -> bytes:
    """Reflow encoded ``data``; the output uses the same encoding.

    Raises:
        DecodingError: If ``data`` is not valid in ``encoding``.
    """
    text = decode_input(data, encoding)
    return reflow_text(text, max_width, output_format, ascii_only).encode(encoding)


def iter_reflow_lines(
    lines: Iterable[str],
    max_width: int,
    output_format: str = "plain",
    ascii_only: bool = False,
) -> Iterator[str]:
    """Yield rendered output lines, one paragraph at a time.

    Lines are yielded without their newline; the caller terminates each.
    """
    formatter = get_formatter(output_format)
    for entry in segment_lines(lines, ascii_only):
        if isinstance(entry, Paragraph):
            block: Block = wrap_paragraph(entry, max_width)
        else:
            block = entry
        for rendered in formatter.render_block(block, max_width):
            yield rendered

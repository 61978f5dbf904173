"""subpar: paragraph reflow filter with codepoint-accurate widths.

WHY: Classic paragraph formatters measure line width in bytes, so text with
multi-byte characters (accents, Cyrillic, Greek, ...) gets wrapped too
early. subpar measures every word in codepoints, so a line of "åäö" is
as wide as a line of "abc".

HOW: Four-stage pipeline: segment (paragraphs and blank lines), tokenize
(words), measure (codepoints), wrap (greedy packing), followed by a
pluggable formatter. Each stage is independently testable.

RULES:
- reflow_text() / reflow_bytes() are the public entry points
- Blank lines between paragraphs are reproduced exactly
- Words are never split, dropped or reordered
"""

from subpar.core.reflow import DecodingError, reflow_bytes, reflow_text

__version__ = "0.1.0"

__all__ = [
    "DecodingError",
    "reflow_bytes",
    "reflow_text",
    "__version__",
]

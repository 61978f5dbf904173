"""Output formatter registry.

WHY: The CLI, the HTTP service and the pipeline need a single lookup to
find the right formatter by name. A central dict makes it trivial to add
new views: create the formatter class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
get_formatter() instantiates by key and reports unknown keys clearly.

RULES:
- Keys are short lowercase identifiers (used in CLI flags and the API)
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from subpar.formatters.plain_text import PlainTextFormatter
from subpar.formatters.ruler import RulerFormatter

if TYPE_CHECKING:
    from subpar.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "plain": PlainTextFormatter,
    "ruler": RulerFormatter,
}


def get_formatter(key: str) -> BaseFormatter:
    """Instantiate the formatter registered under ``key``.

    Raises:
        ValueError: If ``key`` is not registered.
    """
    try:
        formatter_cls = FORMATTERS[key]
    except KeyError:
        raise ValueError(
            "Unknown format '{}'. Available: {}".format(key, ", ".join(FORMATTERS))
        ) from None
    return formatter_cls()

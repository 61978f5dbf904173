"""Unit tests for the output formatters and their registry.

WHY: Formatters decide the exact bytes the user sees. The plain view must
be the bare reflowed text; the ruler view must pad by codepoints so the
margin marker lines up for multi-byte text too.

HOW: Render ReflowResults built from small documents and compare the
exact output strings.

RULES:
- Every rendered line ends with exactly one newline.
- Separators are rendered verbatim by every formatter.
"""

import pytest

from subpar.core.reflow import reflow_document
from subpar.core.segmenter import segment_text
from subpar.formatters import FORMATTERS, get_formatter
from subpar.formatters.base import BaseFormatter
from subpar.formatters.plain_text import PlainTextFormatter
from subpar.formatters.ruler import RulerFormatter


def _result(text, max_width):
    return reflow_document(segment_text(text), max_width)


class TestRegistry:

    def test_registered_keys(self):
        assert sorted(FORMATTERS) == ["plain", "ruler"]

    def test_all_are_base_formatters(self):
        for formatter_cls in FORMATTERS.values():
            assert issubclass(formatter_cls, BaseFormatter)

    def test_get_formatter_instantiates(self):
        assert isinstance(get_formatter("plain"), PlainTextFormatter)
        assert isinstance(get_formatter("ruler"), RulerFormatter)

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown format 'html'"):
            get_formatter("html")


class TestPlainTextFormatter:

    def test_name_and_media_type(self):
        formatter = PlainTextFormatter()
        assert formatter.name == "Plain Text"
        assert formatter.media_type == "text/plain"

    def test_lines_and_separators(self):
        output = PlainTextFormatter().format(_result("aaaa a bbbbbb\n  \nc\n", 9))
        assert output == "aaaa a\nbbbbbb\n  \nc\n"

    def test_empty_result(self):
        assert PlainTextFormatter().format(_result("", 9)) == ""


class TestRulerFormatter:

    def test_pads_to_margin(self):
        output = RulerFormatter().format(_result("aaaa a bbbbbb", 9))
        assert output == "aaaa a   |9\nbbbbbb   |9\n"

    def test_exact_width_line_has_no_padding(self):
        output = RulerFormatter().format(_result("aaaa bbbb", 9))
        assert output == "aaaa bbbb|9\n"

    def test_overflow_line_unmarked(self):
        output = RulerFormatter().format(_result("abcdefghijkl x", 9))
        assert output == "abcdefghijkl\nx        |9\n"

    def test_multibyte_padding_uses_codepoints(self, accented_word):
        output = RulerFormatter().format(_result(accented_word, 6))
        assert output == "{}  |6\n".format(accented_word)

    def test_separators_not_padded(self):
        output = RulerFormatter().format(_result("a\n\nb", 3))
        assert output == "a  |3\n\nb  |3\n"

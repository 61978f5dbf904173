"""Tests for the end-to-end reflow pipeline.

WHY: The public entry points (reflow_text, reflow_bytes,
iter_reflow_lines) combine segmenting, wrapping and rendering. These tests
pin down the observable output: exact text for the reference scenarios,
blank-line preservation, idempotence, and strict decoding.

HOW: Call the public functions with small inputs and compare whole
outputs. Idempotence and separator checks run over every sample text.

RULES:
- Every output line ends with exactly one newline.
- Bytes in, bytes out in the same encoding.
"""

import pytest

from subpar import DecodingError, reflow_bytes, reflow_text
from subpar.core.reflow import decode_input, iter_reflow_lines, reflow_document
from subpar.core.segmenter import segment_text, split_lines


class TestReferenceScenarios:

    def test_simple_wrap(self):
        assert reflow_text("aaaa a bbbbbb", 9) == "aaaa a\nbbbbbb\n"

    def test_multibyte_word(self, accented_word):
        data = "{} a bbbbbb".format(accented_word).encode("utf-8")
        expected = "{} a\nbbbbbb\n".format(accented_word).encode("utf-8")
        assert reflow_bytes(data, 9) == expected

    def test_empty_input(self):
        assert reflow_text("", 9) == ""
        assert reflow_bytes(b"", 9) == b""

    def test_two_paragraphs_no_wrapping(self, two_paragraphs):
        assert reflow_text(two_paragraphs, 79) == (
            "Hello there, world.\n"
            "\n"
            "Second paragraph here.\n"
        )

    def test_overlong_word(self):
        assert reflow_text("abcdefghijkl", 9) == "abcdefghijkl\n"


class TestSeparators:

    def test_blank_line_count_preserved(self):
        assert reflow_text("a\n\n\n\nb\n", 79) == "a\n\n\n\nb\n"

    def test_whitespace_only_blank_line_verbatim(self):
        assert reflow_text("a\n  \t\nb\n", 79) == "a\n  \t\nb\n"

    def test_whitespace_only_input(self):
        assert reflow_text("   \n\n", 10) == "   \n\n"

    def test_separator_positions_preserved(self, sample_text, max_width):
        output = reflow_text(sample_text, max_width)
        in_blanks = [line for line in split_lines(sample_text) if not line.strip()]
        out_blanks = [line for line in split_lines(output) if not line.strip()]
        assert out_blanks == in_blanks

        in_doc = segment_text(sample_text)
        out_doc = segment_text(output)
        in_kinds = [type(e).__name__ for e in in_doc.entries]
        out_kinds = [type(e).__name__ for e in out_doc.entries]
        assert out_kinds == in_kinds


class TestNormalisation:

    def test_inner_whitespace_collapses(self):
        assert reflow_text("a   b\t\tc", 79) == "a b c\n"

    def test_missing_final_newline_added(self):
        assert reflow_text("a b", 79) == "a b\n"

    def test_crlf_input(self):
        assert reflow_text("one\r\ntwo\r\n\r\nthree\r\n", 79) == "one two\n\nthree\n"

    def test_ascii_only_policy(self):
        text = "a\u00a0b c"
        assert reflow_text(text, 3) == "a b\nc\n"
        assert reflow_text(text, 3, ascii_only=True) == "a\u00a0b\nc\n"


class TestIdempotence:

    def test_rewrap_is_stable(self, sample_text, max_width):
        once = reflow_text(sample_text, max_width)
        twice = reflow_text(once, max_width)
        assert twice == once


class TestStreaming:

    def test_iter_matches_whole_text(self, sample_text, max_width):
        streamed = "".join(
            line + "\n" for line in iter_reflow_lines(split_lines(sample_text), max_width)
        )
        assert streamed == reflow_text(sample_text, max_width)

    def test_ruler_format(self):
        lines = list(iter_reflow_lines(["aaaa a bbbbbb"], 9, output_format="ruler"))
        assert lines == ["aaaa a   |9", "bbbbbb   |9"]


class TestReflowDocument:

    def test_counts(self):
        result = reflow_document(segment_text("a abcdefghijkl\n\nb c\n"), 9)
        assert result.paragraph_count == 2
        assert result.line_count == 3
        assert result.overflow_count == 1
        assert result.max_width == 9


class TestDecoding:

    def test_invalid_start_byte(self):
        with pytest.raises(DecodingError) as exc_info:
            decode_input(b"ab\xffcd")
        err = exc_info.value
        assert err.encoding == "utf-8"
        assert err.position == 2
        assert "invalid start byte" in err.reason
        assert "byte 2" in str(err)

    def test_truncated_sequence(self):
        with pytest.raises(DecodingError) as exc_info:
            reflow_bytes("ab\u00e9".encode("utf-8")[:-1], 9)
        assert exc_info.value.position == 2

    def test_decoding_error_is_value_error(self):
        with pytest.raises(ValueError):
            decode_input(b"\xc3")

    def test_other_encoding_round_trips(self):
        data = "\u00e9\u00e8\u00ea\u00eb a bbbbbb".encode("latin-1")
        out = reflow_bytes(data, 9, encoding="latin-1")
        assert out == "\u00e9\u00e8\u00ea\u00eb a\nbbbbbb\n".encode("latin-1")

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unknown format"):
            reflow_text("a", 9, output_format="fancy")

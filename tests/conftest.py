"""Shared test fixtures for the subpar test suite.

WHY: Several test modules need the same sample texts (ASCII, accented,
multi-paragraph) and the same clean configuration environment. A stray
SUBPAR_WIDTH in the developer's shell or .env must not change results.

HOW: An autouse fixture removes every SUBPAR_* variable before each test.
Plain fixtures provide the sample texts.

RULES:
- Tests that need an environment value set it with monkeypatch.setenv.
- Sample texts use escapes for non-ASCII characters so the byte/codepoint
  difference is visible in the source.
"""

import pytest

_ENV_VARS = ("SUBPAR_WIDTH", "SUBPAR_ENCODING", "SUBPAR_FORMAT", "SUBPAR_LOG_LEVEL")

# Four 2-byte-per-codepoint characters in UTF-8: width 4, 8 bytes
ACCENTED_WORD = "\u00e9\u00e8\u00ea\u00eb"

SAMPLE_TEXTS = [
    "",
    "aaaa a bbbbbb",
    "{} a bbbbbb".format(ACCENTED_WORD),
    "The quick brown fox jumps over the lazy dog.\n",
    "first paragraph line one\nline two\n\nsecond paragraph\n",
    "\n\n  leading blanks\n\n\n\ntrailing   spaces   inside \n   \n",
    "supercalifragilistic is long\n",
    "Привет мир, "
    "это тест "
    "переноса строк.\n",
    "tabs\tand\t\tmixed \t whitespace\r\nwith CRLF endings\r\n",
]


@pytest.fixture(autouse=True)
def _clean_subpar_env(monkeypatch):
    """Remove SUBPAR_* configuration from the environment for each test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(params=SAMPLE_TEXTS, ids=lambda t: repr(t[:20]))
def sample_text(request):
    """Each sample text in turn."""
    return request.param


@pytest.fixture(params=[1, 5, 9, 20, 79])
def max_width(request):
    """A spread of widths, from degenerate to default."""
    return request.param


@pytest.fixture
def accented_word():
    return ACCENTED_WORD


@pytest.fixture
def two_paragraphs():
    """Two paragraphs separated by a single blank line."""
    return "Hello   there,\nworld.\n\nSecond  paragraph\there.\n"

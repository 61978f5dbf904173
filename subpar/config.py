"""Configuration defaults, .env loading and settings validation.

WHY: The reflow core trusts its configuration: it assumes a positive
width, a known encoding and a registered output format. Something has to
check those before the core runs, and the defaults should be easy to find
and override per machine.

HOW: python-dotenv loads the .env file on import. Built-in defaults are
module-level constants. load_settings() layers environment variables and
then explicit overrides on top of them and validates the result through
the ReflowSettings pydantic model.

RULES:
- SUBPAR_WIDTH, SUBPAR_ENCODING, SUBPAR_FORMAT, SUBPAR_LOG_LEVEL override
  the built-in defaults; explicit overrides beat the environment
- Environment is read when load_settings() is called, not at import
- max_width must be a positive integer; anything else is a ValidationError
- Only text encodings known to the codecs registry are accepted
- Only formats registered in FORMATTERS are accepted
"""

from __future__ import annotations

import codecs
import os
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field, PositiveInt, field_validator

from subpar.formatters import FORMATTERS

# Load .env from the working directory
load_dotenv()

# ---------------------------------------------------------------------------
# Built-in defaults
# ---------------------------------------------------------------------------

DEFAULT_WIDTH = 79
DEFAULT_ENCODING = "utf-8"
DEFAULT_FORMAT = "plain"
DEFAULT_LOG_LEVEL = "WARNING"

_ENV_KEYS: dict[str, str] = {
    "max_width": "SUBPAR_WIDTH",
    "encoding": "SUBPAR_ENCODING",
    "output_format": "SUBPAR_FORMAT",
}


class ReflowSettings(BaseModel):
    """Validated configuration for one reflow run.

    RULES:
    - Frozen: fixed for the whole run, no per-paragraph override
    - max_width counts codepoints
    """

    model_config = {"frozen": True}

    max_width: PositiveInt = Field(
        default=DEFAULT_WIDTH,
        description="Maximum line width in codepoints.",
    )
    encoding: str = Field(
        default=DEFAULT_ENCODING,
        description="Encoding of the input and output byte streams.",
    )
    output_format: str = Field(
        default=DEFAULT_FORMAT,
        description="Key of the output formatter.",
    )
    ascii_whitespace: bool = Field(
        default=False,
        description="Only treat ASCII whitespace as word and blank-line separators.",
    )

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError("unknown encoding '{}'".format(value)) from None
        # Binary transforms such as hex or rot13 are registered codecs too,
        # but cannot decode input or encode output
        try:
            b"".decode(value)
            "".encode(value)
        except (LookupError, UnicodeError):
            raise ValueError("'{}' is not a text encoding".format(value)) from None
        return value

    @field_validator("output_format")
    @classmethod
    def _registered_format(cls, value: str) -> str:
        if value not in FORMATTERS:
            raise ValueError(
                "unknown format '{}', available: {}".format(value, ", ".join(FORMATTERS))
            )
        return value


def load_settings(**overrides: Any) -> ReflowSettings:
    """Build validated settings from the environment plus ``overrides``.

    Overrides whose value is None are ignored, so argparse namespaces with
    unset options can be passed straight through.

    Raises:
        pydantic.ValidationError: If any value is invalid.
    """
    values: dict[str, Any] = {}
    for field_name, env_key in _ENV_KEYS.items():
        env_value = os.getenv(env_key, "").strip()
        if env_value:
            values[field_name] = env_value
    for key, value in overrides.items():
        if value is not None:
            values[key] = value
    return ReflowSettings(**values)


def log_level() -> str:
    """Log level name from SUBPAR_LOG_LEVEL, default WARNING."""
    return os.getenv("SUBPAR_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL

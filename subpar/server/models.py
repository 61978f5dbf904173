"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation. Pydantic
models enforce field types at runtime and generate JSON Schema that
appears in the /docs UI.

HOW: Each endpoint has its own model. OutputFormat is an enum of the
registered formatter keys. All models include Field descriptions.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- OutputFormat values match keys in subpar.formatters.FORMATTERS exactly
- width must be positive when given; omitted means the configured default
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class OutputFormat(str, Enum):
    """Available output format identifiers."""

    plain = "plain"
    ruler = "ruler"


class ReflowRequest(BaseModel):
    """Text to reflow plus per-request options."""

    text: str = Field(description="Text to reflow. Blank lines separate paragraphs.")
    width: Optional[int] = Field(
        default=None,
        gt=0,
        description="Maximum line width in characters. Defaults to the server setting.",
    )
    format: Optional[OutputFormat] = Field(
        default=None,
        description="Output view. Defaults to the server setting.",
    )
    ascii_whitespace: bool = Field(
        default=False,
        description="Only treat ASCII whitespace as separating words.",
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {"text": "aaaa a bbbbbb", "width": 9},
        ]
    }}


class ReflowResponse(BaseModel):
    """Reflowed text and a summary of what the wrapper did."""

    text: str = Field(description="Reflowed text; every line ends with a newline.")
    width: int = Field(description="Width the text was wrapped to.")
    format: OutputFormat = Field(description="Output view used.")
    paragraphs: int = Field(description="Number of paragraphs reflowed.")
    lines: int = Field(description="Number of wrapped lines produced (separators excluded).")
    overflow_lines: int = Field(
        description="Lines holding a single word wider than the width.",
    )


class FormatInfo(BaseModel):
    """Description of an available output format."""

    key: str = Field(description="Format identifier used in API requests.")
    name: str = Field(description="Human-readable format name.")
    media_type: str = Field(description="MIME type of the rendered output.")


class ErrorResponse(BaseModel):
    """Standard error response body.

    RULES:
    - detail is always a human-readable error message
    """

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})

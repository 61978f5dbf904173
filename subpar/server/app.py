"""FastAPI application exposing the reflow filter over HTTP.

WHY: Tools that cannot spawn a process (web editors, chat bots, n8n
flows) still want codepoint-accurate paragraph reflow. A small HTTP API
gives them the same filter the CLI provides, with OpenAPI docs.

HOW: POST /reflow takes JSON text and returns the reflowed text with a
summary. POST /reflow/raw takes the raw request body as bytes, decodes it
strictly, and returns reflowed bytes in the same encoding. GET /formats
and GET /health round out the API.

RULES:
- Each request is independent; nothing is shared between requests
- Settings are validated through config.load_settings(); invalid values
  become 400 responses (422 for schema violations caught by FastAPI)
- Undecodable raw bodies return 400 with the DecodingError message
- Error responses use the ErrorResponse schema
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import Response
from pydantic import ValidationError

from subpar import __version__
from subpar.config import ReflowSettings, load_settings
from subpar.core.reflow import DecodingError, reflow_bytes, reflow_document
from subpar.core.segmenter import segment_text
from subpar.formatters import FORMATTERS, get_formatter
from subpar.server.models import (
    ErrorResponse,
    FormatInfo,
    HealthResponse,
    OutputFormat,
    ReflowRequest,
    ReflowResponse,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="subpar Reflow API",
    description=(
        "Reflow plain-text paragraphs to a maximum line width. Widths are "
        "counted in characters (codepoints), not bytes, so accented and "
        "non-Latin text wraps at the same margin as ASCII."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _settings_or_400(**overrides) -> ReflowSettings:
    """Validate settings, turning a ValidationError into HTTP 400."""
    try:
        return load_settings(**overrides)
    except ValidationError as exc:
        detail = "; ".join(
            "{}: {}".format(".".join(str(p) for p in err.get("loc", ())), err.get("msg", ""))
            for err in exc.errors()
        )
        raise HTTPException(status_code=400, detail="Invalid settings: {}".format(detail))


# ---------------------------------------------------------------------------
# Endpoints: Reflow
# ---------------------------------------------------------------------------


@app.post(
    "/reflow",
    response_model=ReflowResponse,
    tags=["reflow"],
    summary="Reflow JSON text",
    description=(
        "Reflow the given text. Blank lines are kept as paragraph separators; "
        "words inside a paragraph are greedily packed onto lines no wider than "
        "the width, except that a single word wider than the width sits alone."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Invalid server settings"},
    },
)
async def reflow_json(request: ReflowRequest) -> ReflowResponse:
    settings = _settings_or_400(
        max_width=request.width,
        output_format=request.format.value if request.format else None,
        ascii_whitespace=request.ascii_whitespace,
    )
    document = segment_text(request.text, settings.ascii_whitespace)
    result = reflow_document(document, settings.max_width)
    text = get_formatter(settings.output_format).format(result)
    return ReflowResponse(
        text=text,
        width=settings.max_width,
        format=OutputFormat(settings.output_format),
        paragraphs=result.paragraph_count,
        lines=result.line_count,
        overflow_lines=result.overflow_count,
    )


@app.post(
    "/reflow/raw",
    tags=["reflow"],
    summary="Reflow a raw byte body",
    description=(
        "Send the text as the raw request body. It is decoded strictly with "
        "the given encoding and the reflowed text is returned in the same "
        "encoding."
    ),
    responses={
        200: {"content": {"text/plain": {}}, "description": "Reflowed text"},
        400: {"model": ErrorResponse, "description": "Undecodable body or invalid settings"},
    },
)
async def reflow_raw(
    request: Request,
    width: Optional[int] = Query(default=None, gt=0, description="Maximum line width."),
    format: Optional[OutputFormat] = Query(default=None, description="Output view."),
    encoding: Optional[str] = Query(default=None, description="Body encoding (default utf-8)."),
    ascii_whitespace: bool = Query(default=False, description="ASCII-only whitespace."),
) -> Response:
    settings = _settings_or_400(
        max_width=width,
        output_format=format.value if format else None,
        encoding=encoding,
        ascii_whitespace=ascii_whitespace,
    )
    body = await request.body()
    try:
        content = reflow_bytes(
            body,
            settings.max_width,
            encoding=settings.encoding,
            output_format=settings.output_format,
            ascii_only=settings.ascii_whitespace,
        )
    except DecodingError as exc:
        logger.info("Rejected undecodable body: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc))

    return Response(
        content=content,
        media_type="text/plain; charset={}".format(settings.encoding),
    )


# ---------------------------------------------------------------------------
# Endpoints: Formats
# ---------------------------------------------------------------------------


@app.get(
    "/formats",
    response_model=List[FormatInfo],
    tags=["formats"],
    summary="List available output formats",
    description="Returns all supported output views with their identifiers and names.",
)
async def list_formats() -> List[FormatInfo]:
    result = []
    for key, formatter_cls in sorted(FORMATTERS.items()):
        formatter = formatter_cls()
        result.append(FormatInfo(
            key=key,
            name=formatter.name,
            media_type=formatter.media_type,
        ))
    return result


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness and readiness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the subpar-api console script."""
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)

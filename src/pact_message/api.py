"""FastAPI application for inspecting pact messages."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Body, FastAPI, Request
from fastapi.responses import JSONResponse

from .config import settings
from .interaction import PactSpecVersion
from .transcoder import MessageParseError, decode, encode

logger = logging.getLogger(__name__)
logger.setLevel(settings.log_level)

app = FastAPI()

__all__ = ["app"]


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log basic information about incoming requests and outgoing responses."""
    logger.info("Request %s %s", request.method, request.url.path)
    response = await call_next(request)
    logger.info("Response %s %s", response.status_code, request.url.path)
    return response


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint.

    Returns a simple status dictionary indicating the API is running.
    """
    return {"status": "ok"}


@app.post("/messages", response_model=None)
async def inspect_message(payload: Any = Body(...)):
    """Decode a wire message and describe it.

    Returns:
        The message's unique key, effective content type, formatted body and
        its re-encoded wire map. Malformed messages yield a 400 response.
    """
    try:
        message = decode(payload)
    except MessageParseError as e:
        logger.warning(f"Rejected message in /messages endpoint: {e}")
        return JSONResponse(
            status_code=400,
            content={"error": str(e), "error_type": "parse_error"},
        )

    spec_version = PactSpecVersion.from_string(settings.spec_version)
    return {
        "key": message.unique_key(),
        "contentType": message.effective_content_type(),
        "formattedBody": message.formatted_body(),
        "message": encode(message, spec_version),
    }

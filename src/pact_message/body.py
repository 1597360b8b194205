"""Message body states and their rendering to wire-safe text.

A body is exactly one of three states:

* :class:`MissingBody` - no body was ever supplied; it is left out of the
  wire representation entirely.
* :class:`NullBody` - the contract declares an explicit ``null`` body.
* :class:`PresentBody` - raw bytes together with the content type they were
  produced with.

The state is fixed when the body is built. A message changes its body by
replacing it wholesale.
"""

from __future__ import annotations

import base64
import json
import logging
from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field

from .config import settings
from .content_type import ContentType, content_type_of, is_json, is_octet_stream

__all__ = [
    "TRACE",
    "Body",
    "MissingBody",
    "NullBody",
    "PresentBody",
    "missing",
    "null_body",
    "present",
    "parse_json",
    "format_body",
    "is_structured_json",
    "embed_contents",
]

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

logger = logging.getLogger(__name__)


class _BodyState(BaseModel):
    model_config = ConfigDict(frozen=True)

    def is_missing(self) -> bool:
        return False

    def is_null(self) -> bool:
        return False

    def is_present(self) -> bool:
        return False

    def or_empty(self) -> bytes:
        return b""

    def value_as_string(self) -> str:
        return ""

    def mime_type(self) -> str | None:
        return None


class MissingBody(_BodyState):
    """No body was supplied."""

    state: Literal["missing"] = "missing"

    def is_missing(self) -> bool:
        return True


class NullBody(_BodyState):
    """An explicit JSON ``null`` body."""

    state: Literal["null"] = "null"

    def is_null(self) -> bool:
        return True


class PresentBody(_BodyState):
    """Body bytes and the content type describing them."""

    state: Literal["present"] = "present"
    value: bytes
    content_type: ContentType = Field(default_factory=ContentType)

    def is_present(self) -> bool:
        return True

    def or_empty(self) -> bytes:
        return self.value

    def value_as_string(self) -> str:
        """Decode the bytes with the body's own charset."""
        return self.value.decode(self.content_type.charset_or_default(), errors="replace")

    def mime_type(self) -> str | None:
        return self.content_type.mime_type or None


Body = Annotated[Union[MissingBody, NullBody, PresentBody], Field(discriminator="state")]


def missing() -> MissingBody:
    return MissingBody()


def null_body() -> NullBody:
    return NullBody()


def present(value: bytes | str, content_type: ContentType | None = None) -> PresentBody:
    """Build a present body, encoding ``str`` values with the content type's charset."""
    content_type = content_type or ContentType()
    if isinstance(value, str):
        value = value.encode(content_type.charset_or_default(), errors="replace")
    return PresentBody(value=value, content_type=content_type)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON literal: {name}")


def parse_json(text: str) -> Any:
    """Parse ``text`` as strict JSON (no ``NaN`` or ``Infinity``).

    Raises:
        ValueError: If ``text`` is not a valid JSON document.
    """
    return json.loads(text, parse_constant=_reject_constant)


def _parse_body(value: PresentBody) -> tuple[bool, Any]:
    try:
        return True, parse_json(value.value_as_string())
    except ValueError as e:
        logger.log(TRACE, "Failed to parse JSON body: %s", e)
        return False, None


def _formatting_mime_type(value: Body, metadata: Mapping[str, Any]) -> str | None:
    # A metadata declaration overrides the body's own type when rendering.
    return content_type_of(metadata) or value.mime_type()


def format_body(value: Body, mime_type: str | None) -> str:
    """Render ``value`` as text according to ``mime_type``.

    JSON bodies are pretty printed, ``application/octet-stream`` bodies are
    base64 encoded and anything else is decoded verbatim. A JSON body that
    does not parse falls back to its raw text.
    """
    if not isinstance(value, PresentBody):
        return ""
    if is_json(mime_type):
        ok, parsed = _parse_body(value)
        if not ok:
            return value.value_as_string()
        return json.dumps(parsed, indent=settings.json_indent, ensure_ascii=False)
    if is_octet_stream(mime_type):
        return base64.b64encode(value.value).decode("ascii")
    return value.value_as_string()


def is_structured_json(value: Body, metadata: Mapping[str, Any]) -> bool:
    """Return ``True`` when the body should be embedded as a JSON value.

    The body must be present, typed as JSON and parse to something other
    than a bare JSON string. Bare strings stay plain text so they are not
    quoted twice on the wire.
    """
    if not isinstance(value, PresentBody):
        return False
    if not is_json(_formatting_mime_type(value, metadata)):
        return False
    ok, parsed = _parse_body(value)
    return ok and not isinstance(parsed, str)


def embed_contents(value: Body, metadata: Mapping[str, Any]) -> Any:
    """Return the ``contents`` wire value for a body that is not missing."""
    if not isinstance(value, PresentBody):
        return None
    if is_structured_json(value, metadata):
        return parse_json(value.value_as_string())
    mime_type = _formatting_mime_type(value, metadata)
    if is_json(mime_type):
        # Bare JSON strings and unparseable JSON bodies keep their raw text.
        return value.value_as_string()
    return format_body(value, mime_type)

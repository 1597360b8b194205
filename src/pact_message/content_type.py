"""Content type values and resolution from message metadata."""

from __future__ import annotations

import codecs
import logging
import re
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict

__all__ = [
    "JSON",
    "TEXT",
    "OCTET_STREAM",
    "ContentType",
    "ContentTypeError",
    "parse_content_type",
    "resolve",
    "content_type_of",
    "is_json",
    "is_octet_stream",
]

logger = logging.getLogger(__name__)

JSON = "application/json"
TEXT = "text/plain"
OCTET_STREAM = "application/octet-stream"

DEFAULT_CHARSET = "utf-8"

_CONTENT_TYPE_KEYS = {"contenttype", "content-type"}
_RESERVED_CHARS = ('"', ",")
# The suffix match is case-sensitive: "application/JSON" is not JSON here.
_JSON_PATTERN = re.compile(r"application/.*json")


class ContentTypeError(ValueError):
    """Raised when a content type declaration cannot be parsed."""


class ContentType(BaseModel):
    """A MIME type with an optional charset.

    An empty ``mime_type`` stands for "no content type declared"; bodies
    decoded from a contract without a metadata declaration carry one.
    """

    model_config = ConfigDict(frozen=True)

    mime_type: str = ""
    charset: str | None = None

    def is_empty(self) -> bool:
        return not self.mime_type

    def charset_or_default(self) -> str:
        return self.charset or DEFAULT_CHARSET

    def __str__(self) -> str:
        if self.charset:
            return f"{self.mime_type}; charset={self.charset}"
        return self.mime_type


def parse_content_type(text: str) -> ContentType:
    """Parse a header style declaration such as ``text/plain; charset=UTF-8``.

    Raises:
        ContentTypeError: If the MIME type is blank or contains reserved
            characters, or if the charset is not known to Python.
    """
    mime, _, rest = text.partition(";")
    mime = mime.strip()
    if not mime:
        raise ContentTypeError(f"Invalid content type: {text!r}")
    if any(ch in mime for ch in _RESERVED_CHARS):
        raise ContentTypeError(f"MIME type may not contain reserved characters: {mime!r}")

    charset = None
    for param in rest.split(";"):
        name, sep, value = param.partition("=")
        if sep and name.strip().lower() == "charset":
            charset = value.strip().strip('"')
            try:
                codec = codecs.lookup(charset)
            except LookupError as e:
                raise ContentTypeError(f"Unsupported charset: {charset!r}") from e
            # base64, zlib, hex and friends are codecs but not text encodings.
            if not getattr(codec, "_is_text_encoding", True):
                raise ContentTypeError(f"Not a text encoding: {charset!r}")
    return ContentType(mime_type=mime, charset=charset)


def _metadata_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def resolve(metadata: Mapping[str, Any]) -> ContentType | None:
    """Return the content type declared in ``metadata``, if any.

    Keys are matched case-insensitively against ``contentType`` and
    ``content-type``; the first match wins. A declaration that fails to parse
    is logged and treated as absent.
    """
    value = next(
        (v for k, v in metadata.items() if k.lower() in _CONTENT_TYPE_KEYS),
        None,
    )
    if value is None:
        return None
    text = _metadata_text(value)
    if not text.strip():
        return None
    try:
        return parse_content_type(text)
    except ContentTypeError as e:
        logger.debug("Failed to parse content type %r: %s", text, e)
        return None


def content_type_of(metadata: Mapping[str, Any]) -> str | None:
    """Return just the MIME type declared in ``metadata``."""
    content_type = resolve(metadata)
    return content_type.mime_type if content_type is not None else None


def is_json(mime_type: str | None) -> bool:
    return mime_type is not None and _JSON_PATTERN.fullmatch(mime_type) is not None


def is_octet_stream(mime_type: str | None) -> bool:
    return mime_type == OCTET_STREAM

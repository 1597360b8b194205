"""Conversion between wire JSON objects and :class:`~pact_message.message.Message`."""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError

from .body import Body, missing, null_body, present
from .content_type import ContentType, resolve
from .interaction import PactSpecVersion
from .message import Message
from .provider_state import ProviderState
from .rulesets import get_codec

__all__ = ["MessageParseError", "decode", "encode", "loads", "dumps"]

logger = logging.getLogger(__name__)


class MessageParseError(ValueError):
    """Raised when a wire object cannot be turned into a message."""


def _as_string(value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return json.dumps(value)


def _canonical_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _decode_provider_states(json_obj: dict[str, Any]) -> list[ProviderState]:
    if "providerStates" in json_obj:
        states = json_obj["providerStates"]
        if not isinstance(states, list) or not all(isinstance(s, dict) for s in states):
            raise MessageParseError("providerStates must be an array of objects")
        try:
            return [ProviderState.from_json(s) for s in states]
        except ValidationError as e:
            raise MessageParseError(f"Invalid provider state: {e}") from e
    if "providerState" in json_obj:
        # Pact files older than v3 declare a single state by name.
        return [ProviderState(name=_as_string(json_obj["providerState"]))]
    return []


def _decode_metadata(json_obj: dict[str, Any]) -> dict[str, Any]:
    metadata = json_obj.get("metaData")
    if metadata is None:
        return {}
    if not isinstance(metadata, dict):
        raise MessageParseError("metaData must be an object")
    return dict(metadata)


def _decode_body(json_obj: dict[str, Any], content_type: ContentType) -> Body:
    if "contents" not in json_obj:
        return missing()
    contents = json_obj["contents"]
    if contents is None:
        return null_body()
    if isinstance(contents, str):
        return present(contents, content_type)
    return present(_canonical_json(contents), content_type)


def decode(json_obj: Any) -> Message:
    """Build a message from a parsed wire object.

    Raises:
        MessageParseError: If ``json_obj`` is not an object, lacks a
            ``description`` or has a ``null`` one, or has malformed provider
            states or metadata.
    """
    if not isinstance(json_obj, dict):
        raise MessageParseError(f"Message must be a JSON object, got {type(json_obj).__name__}")
    if json_obj.get("description") is None:
        raise MessageParseError("Message is missing the required 'description' field")

    provider_states = _decode_provider_states(json_obj)
    metadata = _decode_metadata(json_obj)
    content_type = resolve(metadata) or ContentType()
    body = _decode_body(json_obj, content_type)

    rulesets = {}
    for field in ("matchingRules", "generators"):
        codec = get_codec(field)
        rulesets[field] = codec.decode(json_obj[field]) if field in json_obj else codec.empty()

    try:
        message = Message(
            description=_as_string(json_obj["description"]),
            provider_states=provider_states,
            body=body,
            matching_rules=rulesets["matchingRules"],
            generators=rulesets["generators"],
            metadata=metadata,
            interaction_id=_as_string(json_obj.get("_id")),
        )
    except ValidationError as e:
        raise MessageParseError(f"Invalid message: {e}") from e
    logger.debug("Decoded message %r", message.unique_key())
    return message


def loads(text: str | bytes) -> Message:
    """Parse JSON ``text`` and decode it into a message."""
    try:
        json_obj = json.loads(text)
    except ValueError as e:
        raise MessageParseError(f"Invalid JSON: {e}") from e
    return decode(json_obj)


def encode(message: Message, spec_version: PactSpecVersion = PactSpecVersion.V3) -> dict[str, Any]:
    """Return the wire object for ``message``."""
    return message.to_map(spec_version)


def dumps(message: Message, spec_version: PactSpecVersion = PactSpecVersion.V3) -> str:
    return json.dumps(encode(message, spec_version), ensure_ascii=False)

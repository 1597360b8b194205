"""Message interactions for asynchronous (message) pacts."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, JsonValue

from .body import Body, MissingBody, embed_contents, format_body
from .content_type import content_type_of
from .interaction import Interaction, PactSpecVersion
from .provider_state import ProviderState
from .rulesets import Generators, MatchingRules, get_codec

__all__ = ["Message"]


class Message(BaseModel, Interaction):
    """A single message in a message pact.

    ``description``, ``provider_states`` and ``interaction_id`` are fixed at
    construction. ``body``, ``matching_rules``, ``generators`` and
    ``metadata`` may be reassigned afterwards, either directly or through the
    ``with_*`` methods. Instances carry no locking; callers sharing a message
    between threads must serialize those assignments themselves.

    Two messages are equal when their description, provider states, body,
    matching rules and generators are equal. Metadata and the interaction id
    do not take part in equality or hashing.
    """

    description: str = Field(frozen=True)
    provider_states: list[ProviderState] = Field(default_factory=list, frozen=True)
    body: Body = Field(default_factory=MissingBody)
    matching_rules: MatchingRules = Field(default_factory=MatchingRules)
    generators: Generators = Field(default_factory=Generators)
    metadata: dict[str, JsonValue] = Field(default_factory=dict)
    interaction_id: str | None = Field(default=None, frozen=True)

    def as_bytes(self) -> bytes:
        """Return the body bytes, empty for a missing or null body."""
        return self.body.or_empty()

    def as_text(self) -> str:
        """Return the body decoded with the body's own charset."""
        return self.body.value_as_string()

    def effective_content_type(self) -> str | None:
        """Return the MIME type of the message.

        A content type declared in the metadata takes precedence over the one
        the body carries.
        """
        return content_type_of(self.metadata) or self.body.mime_type()

    def formatted_body(self) -> str:
        """Render the body as text: pretty JSON, base64 binary or plain text."""
        mime_type = content_type_of(self.metadata) or self.body.mime_type()
        return format_body(self.body, mime_type)

    def unique_key(self) -> str:
        names = ", ".join(
            "null" if state.name is None else state.name for state in self.provider_states
        )
        return f"{names or 'None'}_{self.description}"

    def conflicts_with(self, other: Interaction) -> bool:
        return not isinstance(other, Message)

    def to_map(self, spec_version: PactSpecVersion = PactSpecVersion.V3) -> dict[str, Any]:
        """Return the wire map of this message for ``spec_version``."""
        result: dict[str, Any] = {
            "description": self.description,
            "metaData": dict(self.metadata),
        }
        if not self.body.is_missing():
            result["contents"] = embed_contents(self.body, self.metadata)
        if self.provider_states:
            result["providerStates"] = [state.to_map() for state in self.provider_states]

        for field, ruleset in (
            ("matchingRules", self.matching_rules),
            ("generators", self.generators),
        ):
            codec = get_codec(field)
            if not codec.is_empty(ruleset):
                result[field] = codec.encode(ruleset, spec_version)
        return result

    def with_body(self, body: Body) -> "Message":
        self.body = body
        return self

    def with_matching_rules(self, matching_rules: MatchingRules) -> "Message":
        self.matching_rules = matching_rules
        return self

    def with_generators(self, generators: Generators) -> "Message":
        self.generators = generators
        return self

    def with_metadata(self, metadata: dict[str, JsonValue]) -> "Message":
        self.metadata = dict(metadata)
        return self

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return (
            self.description == other.description
            and self.provider_states == other.provider_states
            and self.body == other.body
            and self.matching_rules == other.matching_rules
            and self.generators == other.generators
        )

    def __hash__(self) -> int:
        return hash(
            (
                self.description,
                tuple(self.provider_states),
                self.body,
                self.matching_rules,
                self.generators,
            )
        )

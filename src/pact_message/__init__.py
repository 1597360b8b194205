"""Message interactions for consumer-driven contract (pact) files."""

from .body import MissingBody, NullBody, PresentBody, missing, null_body, present
from .content_type import JSON, OCTET_STREAM, TEXT, ContentType
from .interaction import Interaction, PactSpecVersion
from .message import Message
from .provider_state import ProviderState
from .rulesets import Generators, MatchingRules
from .transcoder import MessageParseError, decode, dumps, encode, loads

__all__ = [
    "JSON",
    "TEXT",
    "OCTET_STREAM",
    "ContentType",
    "MissingBody",
    "NullBody",
    "PresentBody",
    "missing",
    "null_body",
    "present",
    "Interaction",
    "PactSpecVersion",
    "Message",
    "ProviderState",
    "MatchingRules",
    "Generators",
    "MessageParseError",
    "decode",
    "encode",
    "loads",
    "dumps",
]

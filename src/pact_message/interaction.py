"""Base interface shared by all interaction kinds in a pact."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

__all__ = ["PactSpecVersion", "Interaction"]


class PactSpecVersion(str, Enum):
    """Versions of the pact specification an interaction can be written as."""

    V1 = "1.0.0"
    V1_1 = "1.1.0"
    V2 = "2.0.0"
    V3 = "3.0.0"
    V4 = "4.0.0"

    @classmethod
    def from_string(cls, value: str) -> "PactSpecVersion":
        """Return the version matching ``value`` (``"3"``, ``"v3"`` or ``"3.0.0"``)."""
        text = value.strip().lower().lstrip("v")
        for version in cls:
            if text == version.value or version.value.startswith(f"{text}."):
                return version
        raise ValueError(f"Unknown pact specification version: {value!r}")


class Interaction(ABC):
    """Abstract interaction in a pact file.

    Concrete kinds (asynchronous messages, request/response pairs) carry a
    ``description``, a list of ``provider_states`` and an optional
    ``interaction_id``, and provide identity, conflict detection and a wire
    map representation.
    """

    @abstractmethod
    def unique_key(self) -> str:
        """Return the key identifying this interaction within a pact."""

    @abstractmethod
    def conflicts_with(self, other: "Interaction") -> bool:
        """Return ``True`` if ``other`` cannot coexist with this interaction."""

    @abstractmethod
    def to_map(self, spec_version: PactSpecVersion) -> dict[str, Any]:
        """Return the wire representation for ``spec_version``."""

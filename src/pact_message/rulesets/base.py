"""Base classes for opaque ruleset codecs."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, JsonValue

from ..interaction import PactSpecVersion


class Ruleset(BaseModel):
    """Rules grouped by category (``body``, ``metadata``, ...).

    The categories are carried as raw JSON; nothing in this package
    interprets them.
    """

    categories: dict[str, JsonValue] = Field(default_factory=dict)

    def non_empty_categories(self) -> dict[str, JsonValue]:
        return {k: v for k, v in self.categories.items() if v}

    def is_empty(self) -> bool:
        return not self.non_empty_categories()

    def __eq__(self, other: object) -> bool:
        # Empty categories never reach the wire, so they do not count.
        if type(other) is not type(self):
            return NotImplemented
        return self.non_empty_categories() == other.non_empty_categories()

    def __hash__(self) -> int:
        return hash(json.dumps(self.non_empty_categories(), sort_keys=True))


R = TypeVar("R", bound=Ruleset)


class RulesetCodec(ABC, Generic[R]):
    """Abstract base class for ruleset codecs.

    Subclasses must implement :meth:`decode`, :meth:`encode` and
    :meth:`empty`. The registry looks codecs up by :attr:`field`, the key the
    ruleset lives under in a wire message.
    """

    field: str = "base"

    @abstractmethod
    def decode(self, json_value: Any) -> R:
        """Build a ruleset from its wire value."""

    @abstractmethod
    def encode(self, ruleset: R, spec_version: PactSpecVersion) -> dict[str, Any]:
        """Return the wire value of ``ruleset`` for ``spec_version``."""

    @abstractmethod
    def empty(self) -> R:
        """Return a ruleset with no rules."""

    def is_empty(self, ruleset: R) -> bool:
        return ruleset.is_empty()

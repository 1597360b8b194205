"""Provider state records attached to interactions."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, Field, JsonValue

__all__ = ["ProviderState"]


class ProviderState(BaseModel):
    """A named precondition the provider must be in for an interaction."""

    name: str | None = None
    params: dict[str, JsonValue] = Field(default_factory=dict)

    @classmethod
    def from_json(cls, json_obj: dict[str, Any]) -> "ProviderState":
        """Build a provider state from its wire object."""
        name = json_obj.get("name")
        if name is not None and not isinstance(name, str):
            name = json.dumps(name)
        return cls(name=name, params=json_obj.get("params") or {})

    def to_map(self) -> dict[str, Any]:
        result: dict[str, Any] = {"name": self.name}
        if self.params:
            result["params"] = self.params
        return result

    def __hash__(self) -> int:
        return hash((self.name, json.dumps(self.params, sort_keys=True)))

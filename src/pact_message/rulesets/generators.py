"""Codec for the ``generators`` section of a message."""

from __future__ import annotations

import logging
from typing import Any

from ..interaction import PactSpecVersion
from .base import Ruleset, RulesetCodec

logger = logging.getLogger(__name__)


class Generators(Ruleset):
    """Value generators keyed by category, e.g. ``{"body": {"$.ts": {...}}}``."""


class GeneratorsCodec(RulesetCodec[Generators]):
    """Carry generators through decode and encode untouched."""

    field = "generators"

    def decode(self, json_value: Any) -> Generators:
        if not isinstance(json_value, dict):
            logger.warning("%r is not a valid generators format", json_value)
            return self.empty()
        return Generators(categories=json_value)

    def encode(self, ruleset: Generators, spec_version: PactSpecVersion) -> dict[str, Any]:
        return ruleset.non_empty_categories()

    def empty(self) -> Generators:
        return Generators()

"""Codec for the ``matchingRules`` section of a message."""

from __future__ import annotations

import logging
from typing import Any

from ..interaction import PactSpecVersion
from .base import Ruleset, RulesetCodec

logger = logging.getLogger(__name__)


class MatchingRules(Ruleset):
    """Matching rules keyed by category, e.g. ``{"body": {"$.id": {...}}}``."""


class MatchingRulesCodec(RulesetCodec[MatchingRules]):
    """Carry matching rules through decode and encode untouched."""

    field = "matchingRules"

    def decode(self, json_value: Any) -> MatchingRules:
        if not isinstance(json_value, dict):
            logger.warning("%r is not a valid matching rules format", json_value)
            return self.empty()
        return MatchingRules(categories=json_value)

    def encode(self, ruleset: MatchingRules, spec_version: PactSpecVersion) -> dict[str, Any]:
        return ruleset.non_empty_categories()

    def empty(self) -> MatchingRules:
        return MatchingRules()

"""Ruleset codec registry and discovery utilities."""

from __future__ import annotations

from importlib import import_module
from pkgutil import iter_modules

from .base import Ruleset, RulesetCodec
from .generators import Generators, GeneratorsCodec
from .matching_rules import MatchingRules, MatchingRulesCodec

__all__ = [
    "Ruleset",
    "RulesetCodec",
    "MatchingRules",
    "MatchingRulesCodec",
    "Generators",
    "GeneratorsCodec",
    "register",
    "get_codec",
]

_REGISTRY: dict[str, RulesetCodec] = {}


def _discover_codecs() -> None:
    """Import all modules in this package to populate the registry."""
    package = __name__
    for module_info in iter_modules(__path__):
        if module_info.name == "base":
            continue
        module = import_module(f"{package}.{module_info.name}")
        for obj in module.__dict__.values():
            if (
                isinstance(obj, type)
                and issubclass(obj, RulesetCodec)
                and obj is not RulesetCodec
            ):
                register(obj())


def register(codec: RulesetCodec) -> None:
    """Register ``codec`` for its wire field, replacing any previous one."""
    _REGISTRY[codec.field] = codec


def get_codec(field: str) -> RulesetCodec:
    """Return the codec handling the wire ``field``."""
    try:
        return _REGISTRY[field]
    except KeyError:
        raise ValueError(f"No ruleset codec registered for: {field!r}") from None


# Discover codecs on import.
_discover_codecs()

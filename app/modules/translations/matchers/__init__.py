"""Interpolation matchers.

The registry is an immutable name -> matcher mapping built once at start-up
and handed to whoever needs it:

    matchers = build_matcher_registry()
    matcher = get_matcher(matchers, "icu")
"""

from types import MappingProxyType
from typing import Mapping

from modules.translations.domain.errors import ConfigurationError
from modules.translations.matchers.base import (
    InterpolationMatcher,
    ProtectedText,
    RegexMatcher,
)
from modules.translations.matchers.strategies import (
    I18NextMatcher,
    IcuMatcher,
    NoMatcher,
    SprintfMatcher,
)

__all__ = [
    "InterpolationMatcher",
    "ProtectedText",
    "RegexMatcher",
    "NoMatcher",
    "IcuMatcher",
    "I18NextMatcher",
    "SprintfMatcher",
    "build_matcher_registry",
    "get_matcher",
]


def build_matcher_registry() -> Mapping[str, InterpolationMatcher]:
    """Create the read-only registry of available matchers."""
    matchers = (NoMatcher(), IcuMatcher(), I18NextMatcher(), SprintfMatcher())
    return MappingProxyType({m.name: m for m in matchers})


def get_matcher(
    registry: Mapping[str, InterpolationMatcher], name: str
) -> InterpolationMatcher:
    """Look up a matcher by name.

    Raises:
        ConfigurationError: If no matcher is registered under name.
    """
    try:
        return registry[name]
    except KeyError as e:
        raise ConfigurationError(f"The matcher {name} doesn't exist.", cause=e) from e

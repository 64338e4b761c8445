"""Concrete interpolation matchers."""

import re

from modules.translations.matchers.base import RegexMatcher


class NoMatcher(RegexMatcher):
    """Protects nothing; strings reach the provider unchanged."""

    name = "none"


class IcuMatcher(RegexMatcher):
    """ICU message format arguments: ``{name}``, ``{count, number}``.

    One level of nested braces is allowed, so plural and select arguments
    such as ``{count, plural, one {# item} other {# items}}`` are protected
    as a whole.
    """

    name = "icu"
    pattern = re.compile(r"\{(?:[^{}]|\{[^{}]*\})*\}")


class I18NextMatcher(RegexMatcher):
    """i18next interpolations ``{{name}}`` and nestings ``$t(key)``."""

    name = "i18next"
    pattern = re.compile(r"\{\{.+?\}\}|\$t\([^)]*\)")


class SprintfMatcher(RegexMatcher):
    """printf-style conversions: ``%s``, ``%d``, ``%1$s``, ``%(name)s``, ``%.2f``."""

    name = "sprintf"
    pattern = re.compile(
        r"%(?:\d+\$)?(?:\([^)]+\))?[-+ 0#]*(?:\d+|\*)?(?:\.\d+)?[sdifuxXoeEgGc@%]"
    )

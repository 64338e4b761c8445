"""Interpolation matcher abstract class and regex-based implementation.

A matcher finds interpolation placeholders in a string and swaps them for
tokens that translation services leave alone, then swaps them back after
translation:

    masked, restore_map = matcher.protect("Hello {name}")
    # masked == 'Hello <span translate="no">0</span>'
    matcher.restore(masked, restore_map) == "Hello {name}"
"""

import re
from abc import ABC, abstractmethod
from typing import Dict, List, NamedTuple, Optional, Pattern, Tuple

TOKEN_TEMPLATE = '<span translate="no">{}</span>'


class ProtectedText(NamedTuple):
    """Result of InterpolationMatcher.protect.

    Attributes:
        masked: Text with every placeholder replaced by a token.
        restore_map: token -> original placeholder, in order of appearance.
    """

    masked: str
    restore_map: Dict[str, str]


class InterpolationMatcher(ABC):
    """Abstract base for interpolation matchers.

    Subclasses only define how placeholders are located. For every text,
    ``restore(*protect(text)) == text``.

    Attributes:
        name: Registry name used to select the matcher.
    """

    name: str = ""

    @abstractmethod
    def find(self, text: str) -> List[Tuple[int, int]]:
        """Return the (start, end) spans of placeholders, sorted and disjoint."""
        raise NotImplementedError()

    def protect(self, text: str) -> ProtectedText:
        """Replace placeholders with tokens that do not already occur in text."""
        spans = self.find(text)
        if not spans:
            return ProtectedText(text, {})

        offset = _free_token_offset(text, len(spans))
        restore_map: Dict[str, str] = {}
        parts = []
        cursor = 0
        for index, (start, end) in enumerate(spans):
            token = TOKEN_TEMPLATE.format(offset + index)
            restore_map[token] = text[start:end]
            parts.append(text[cursor:start])
            parts.append(token)
            cursor = end
        parts.append(text[cursor:])
        return ProtectedText("".join(parts), restore_map)

    def restore(self, masked: str, restore_map: Dict[str, str]) -> str:
        """Put the original placeholders back in a single left-to-right pass."""
        if not restore_map:
            return masked
        pattern = re.compile("|".join(re.escape(token) for token in restore_map))
        return pattern.sub(lambda m: restore_map[m.group(0)], masked)


class RegexMatcher(InterpolationMatcher):
    """Matcher whose placeholders are the matches of a single pattern."""

    pattern: Optional[Pattern[str]] = None

    def find(self, text: str) -> List[Tuple[int, int]]:
        if self.pattern is None:
            return []
        return [m.span() for m in self.pattern.finditer(text) if m.end() > m.start()]


def _free_token_offset(text: str, count: int) -> int:
    # Token numbering starts at the first block of `count` numbers whose
    # tokens are all absent from the text, so restore never hits literal text.
    offset = 0
    while any(TOKEN_TEMPLATE.format(offset + i) in text for i in range(count)):
        offset += count
    return offset

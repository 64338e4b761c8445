# modules/translations/__init__.py
"""JSON translation file synchronization.

Keeps the translation files of every target language in step with a source
language: missing strings are machine translated, unused ones can be removed,
and interpolation placeholders survive the round trip to the provider.

Features:
- Key-based (nested) and natural (string-as-key) files, detected per file
- Incremental translation, only keys missing from a target are sent
- Pluggable providers (Google Translate, DeepL, dry run)
- Pluggable interpolation matchers (ICU, i18next, sprintf)
"""

from modules.translations.filesystem import LanguageDirectory
from modules.translations.loader import JSONTranslationLoader, TranslationLoader
from modules.translations.orchestrator import (
    SyncOptions,
    SyncOrchestrator,
    compute_diff,
)

__all__ = [
    "LanguageDirectory",
    "JSONTranslationLoader",
    "TranslationLoader",
    "SyncOptions",
    "SyncOrchestrator",
    "compute_diff",
]

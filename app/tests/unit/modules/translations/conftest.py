"""Feature-level fixtures for translation synchronization tests.

Provides language directory builders and a deterministic provider.
"""

import json
from typing import List

import pytest

from modules.translations import JSONTranslationLoader, LanguageDirectory
from modules.translations.domain import FileType
from modules.translations.matchers import IcuMatcher
from modules.translations.orchestrator import SyncOptions, SyncOrchestrator
from modules.translations.providers import ProviderCapabilities, TranslationProvider


class FakeProvider(TranslationProvider):
    """Prefixes every string with the target language.

    Records the keys of every translate_strings call so tests can assert how
    often and with what the provider was called.
    """

    name = "fake"

    def __init__(self, languages=("en", "fr", "de"), writes_files=True):
        super().__init__()
        self.languages = list(languages)
        self.writes_files = writes_files
        self.requests: List[List[str]] = []
        self.batches: List[List[str]] = []

    @property
    def capabilities(self) -> ProviderCapabilities:
        return ProviderCapabilities(writes_files=self.writes_files)

    async def get_available_languages(self) -> List[str]:
        return self.languages

    async def translate_strings(self, items, source_language, target_language):
        self.requests.append([item.key for item in items])
        return await super().translate_strings(items, source_language, target_language)

    async def _translate_batch(self, texts, source_language, target_language):
        self.batches.append(list(texts))
        return [f"{target_language}:{text}" for text in texts]


def write_document(root, language, name, document):
    directory = root / language
    directory.mkdir(parents=True, exist_ok=True)
    (directory / name).write_text(json.dumps(document), encoding="utf-8")


@pytest.fixture
def make_languages(tmp_path):
    """Build a languages root from {language: {file name: document}}.

    Languages mapped to an empty dict get an empty directory.
    """

    def _make(layout):
        root = tmp_path / "i18n"
        root.mkdir(exist_ok=True)
        for language, files in layout.items():
            (root / language).mkdir(exist_ok=True)
            for name, document in files.items():
                write_document(root, language, name, document)
        return root

    return _make


@pytest.fixture
def make_provider():
    """Create an initialized FakeProvider using the ICU matcher."""

    def _make(languages=("en", "fr", "de"), writes_files=True):
        provider = FakeProvider(languages, writes_files)
        provider.initialize(None, IcuMatcher())
        return provider

    return _make


@pytest.fixture
def fake_provider(make_provider):
    return make_provider()


@pytest.fixture
def make_orchestrator(fake_provider):
    """Create a SyncOrchestrator over a root with a fresh loader."""

    def _make(
        root,
        provider=None,
        file_type=FileType.AUTO,
        **options,
    ):
        directory = LanguageDirectory(root)
        loader = JSONTranslationLoader(directory, file_type)
        return SyncOrchestrator(
            directory,
            loader,
            provider or fake_provider,
            SyncOptions(**options),
        )

    return _make

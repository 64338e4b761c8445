"""Translation provider abstract class and shared transport helpers.

Every provider goes through the same lifecycle:

    provider = GoogleTranslateProvider()
    provider.initialize(config, matcher)
    languages = await provider.get_available_languages()
    results = await provider.translate_strings(items, "en", "fr")

``translate_strings`` protects interpolation placeholders with the matcher
given to ``initialize`` before the strings leave the process, and restores
them in the results. Providers only implement ``get_available_languages``
and ``_translate_batch``.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

import requests

from infrastructure.configuration import ProviderSettings, settings
from infrastructure.logging import get_module_logger
from modules.translations.domain.errors import TranslationProviderError
from modules.translations.domain.models import StringToTranslate, TranslatedString
from modules.translations.matchers import InterpolationMatcher

logger = get_module_logger()


@dataclass(frozen=True)
class ProviderCapabilities:
    """Capability flags for a provider.

    Attributes:
        writes_files: False for dry-run providers; the run then writes nothing.
        supports_all_languages: Accept every language code without consulting
            get_available_languages.
        max_batch_size: Maximum strings per request to the service.
    """

    writes_files: bool = True
    supports_all_languages: bool = False
    max_batch_size: int = 50


class TranslationProvider(ABC):
    """Abstract Base Class for translation providers.

    Attributes:
        name: Registry name used to select the provider.
        settings: ProviderSettings with credentials and transport options.
        matcher: InterpolationMatcher set by initialize().
    """

    name: str = ""

    def __init__(self, provider_settings: Optional[ProviderSettings] = None):
        self.settings = provider_settings or settings.providers
        self.matcher: Optional[InterpolationMatcher] = None
        self._session = requests.Session()
        self._session.headers.update({"Accept": "application/json"})

    @property
    def capabilities(self) -> ProviderCapabilities:
        return ProviderCapabilities(max_batch_size=self.settings.TRANSLATION_BATCH_SIZE)

    def initialize(self, config: Optional[str], matcher: InterpolationMatcher) -> None:
        """Acquire provider resources.

        Args:
            config: Provider-specific configuration value from the command
                line (an API key for the HTTP providers).
            matcher: Matcher used to protect placeholders.

        Raises:
            ConfigurationError: If required credentials are missing.
        """
        self.matcher = matcher
        self._configure(config)
        logger.info("provider_initialized", provider=self.name, matcher=matcher.name)

    def _configure(self, config: Optional[str]) -> None:
        """Hook for providers that need credentials."""

    @abstractmethod
    async def get_available_languages(self) -> List[str]:
        """Return the language codes the service can translate."""
        raise NotImplementedError()

    async def translate_strings(
        self,
        items: Sequence[StringToTranslate],
        source_language: str,
        target_language: str,
    ) -> List[TranslatedString]:
        """Translate a batch of strings, preserving key identity and order.

        Raises:
            RuntimeError: If initialize() has not been called.
            TranslationProviderError: If the service fails or answers with a
                different number of strings.
        """
        if self.matcher is None:
            raise RuntimeError(f"Provider {self.name} used before initialize()")
        if not items:
            return []

        protected = [self.matcher.protect(item.value) for item in items]
        batch_size = max(1, self.capabilities.max_batch_size)
        translated: List[str] = []

        for start in range(0, len(protected), batch_size):
            chunk = [p.masked for p in protected[start : start + batch_size]]
            results = await self._translate_batch(
                chunk, source_language, target_language
            )
            if len(results) != len(chunk):
                raise TranslationProviderError(
                    f"{self.name} returned {len(results)} translations "
                    f"for {len(chunk)} strings"
                )
            translated.extend(results)

        return [
            TranslatedString(
                key=item.key,
                translated=self.matcher.restore(text, p.restore_map),
            )
            for item, p, text in zip(items, protected, translated)
        ]

    @abstractmethod
    async def _translate_batch(
        self, texts: List[str], source_language: str, target_language: str
    ) -> List[str]:
        """Translate already protected texts, one result per input."""
        raise NotImplementedError()

    async def _request(self, method: str, url: str, **kwargs) -> Any:
        """Run a blocking HTTP request in a worker thread and decode JSON."""
        return await asyncio.to_thread(self._request_sync, method, url, **kwargs)

    def _request_sync(self, method: str, url: str, **kwargs) -> Any:
        kwargs.setdefault("timeout", self.settings.TRANSLATION_TIMEOUT_SECONDS)
        try:
            response = self._session.request(method, url, **kwargs)
        except requests.RequestException as e:
            logger.error("provider_request_failed", provider=self.name, error=str(e))
            raise TranslationProviderError(
                f"{self.name} request failed: {e}", cause=e
            ) from e

        if response.status_code >= 400:
            logger.error(
                "provider_request_rejected",
                provider=self.name,
                status_code=response.status_code,
            )
            raise TranslationProviderError(
                f"{self.name} responded with HTTP {response.status_code}: "
                f"{response.text[:200]}",
                response=response,
            )

        try:
            return response.json()
        except ValueError as e:
            raise TranslationProviderError(
                f"{self.name} returned a response that is not JSON",
                response=response,
                cause=e,
            ) from e

"""Google Cloud Translation (v2 REST API) provider."""

import html
from typing import List, Optional

from modules.translations.domain.errors import (
    ConfigurationError,
    TranslationProviderError,
)
from modules.translations.providers.base import (
    ProviderCapabilities,
    TranslationProvider,
)

# Cloud Translation v2 accepts at most 128 text segments per request.
MAX_SEGMENTS = 128


class GoogleTranslateProvider(TranslationProvider):
    """Translates with an API key against the Cloud Translation v2 API.

    Strings are sent as HTML so that ``<span translate="no">`` tokens set by
    the matcher are left untouched; HTML entities in the answer are decoded.
    """

    name = "google-translate"

    def __init__(self, provider_settings=None):
        super().__init__(provider_settings)
        self._api_key: Optional[str] = None

    @property
    def capabilities(self) -> ProviderCapabilities:
        return ProviderCapabilities(
            max_batch_size=min(self.settings.TRANSLATION_BATCH_SIZE, MAX_SEGMENTS)
        )

    def _configure(self, config: Optional[str]) -> None:
        self._api_key = config or self.settings.GOOGLE_TRANSLATE_API_KEY
        if not self._api_key:
            raise ConfigurationError(
                "google-translate needs an API key: pass --config or set "
                "GOOGLE_TRANSLATE_API_KEY"
            )

    async def get_available_languages(self) -> List[str]:
        payload = await self._request(
            "GET",
            f"{self.settings.GOOGLE_TRANSLATE_API_URL}/languages",
            params={"key": self._api_key},
        )
        try:
            return [entry["language"] for entry in payload["data"]["languages"]]
        except (KeyError, TypeError) as e:
            raise TranslationProviderError(
                "google-translate returned an unexpected language list",
                response=payload,
                cause=e,
            ) from e

    async def _translate_batch(
        self, texts: List[str], source_language: str, target_language: str
    ) -> List[str]:
        payload = await self._request(
            "POST",
            self.settings.GOOGLE_TRANSLATE_API_URL,
            params={"key": self._api_key},
            json={
                "q": texts,
                "source": source_language,
                "target": target_language,
                "format": "html",
            },
        )
        try:
            translations = payload["data"]["translations"]
            return [html.unescape(t["translatedText"]) for t in translations]
        except (KeyError, TypeError) as e:
            raise TranslationProviderError(
                "google-translate returned an unexpected translation payload",
                response=payload,
                cause=e,
            ) from e

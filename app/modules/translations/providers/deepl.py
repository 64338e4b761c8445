"""DeepL (v2 REST API) provider."""

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

# DeepL accepts at most 50 texts per request.
MAX_TEXTS = 50


class DeepLProvider(TranslationProvider):
    """Translates with a DeepL authentication key.

    Language codes are compared in lower case. Regional codes such as
    ``en-gb`` are also listed under their base language (``en``).
    """

    name = "deepl"

    def __init__(self, provider_settings=None):
        super().__init__(provider_settings)
        self._auth_key: Optional[str] = None

    @property
    def capabilities(self) -> ProviderCapabilities:
        return ProviderCapabilities(
            max_batch_size=min(self.settings.TRANSLATION_BATCH_SIZE, MAX_TEXTS)
        )

    def _configure(self, config: Optional[str]) -> None:
        self._auth_key = config or self.settings.DEEPL_AUTH_KEY
        if not self._auth_key:
            raise ConfigurationError(
                "deepl needs an authentication key: pass --config or set "
                "DEEPL_AUTH_KEY"
            )
        self._session.headers.update(
            {"Authorization": f"DeepL-Auth-Key {self._auth_key}"}
        )

    async def get_available_languages(self) -> List[str]:
        languages: List[str] = []
        for language_type in ("source", "target"):
            payload = await self._request(
                "GET",
                f"{self.settings.DEEPL_API_URL}/languages",
                params={"type": language_type},
            )
            try:
                codes = [entry["language"].lower() for entry in payload]
            except (KeyError, TypeError, AttributeError) as e:
                raise TranslationProviderError(
                    "deepl returned an unexpected language list",
                    response=payload,
                    cause=e,
                ) from e
            for code in codes:
                for candidate in (code, code.split("-")[0]):
                    if candidate not in languages:
                        languages.append(candidate)
        return languages

    async def _translate_batch(
        self, texts: List[str], source_language: str, target_language: str
    ) -> List[str]:
        payload = await self._request(
            "POST",
            f"{self.settings.DEEPL_API_URL}/translate",
            json={
                "text": texts,
                "source_lang": source_language.split("-")[0].upper(),
                "target_lang": target_language.upper(),
                "tag_handling": "html",
            },
        )
        try:
            return [html.unescape(t["text"]) for t in payload["translations"]]
        except (KeyError, TypeError) as e:
            raise TranslationProviderError(
                "deepl returned an unexpected translation payload",
                response=payload,
                cause=e,
            ) from e

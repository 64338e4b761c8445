"""Dry-run provider: computes everything, translates nothing, writes nothing."""

from typing import List

from infrastructure.logging import get_module_logger
from modules.translations.providers.base import (
    ProviderCapabilities,
    TranslationProvider,
)

logger = get_module_logger()


class DryRunProvider(TranslationProvider):
    """Returns every string unchanged and turns the run into a report."""

    name = "dry-run"

    @property
    def capabilities(self) -> ProviderCapabilities:
        return ProviderCapabilities(
            writes_files=False,
            supports_all_languages=True,
            max_batch_size=self.settings.TRANSLATION_BATCH_SIZE,
        )

    async def get_available_languages(self) -> List[str]:
        return []

    async def _translate_batch(
        self, texts: List[str], source_language: str, target_language: str
    ) -> List[str]:
        for text in texts:
            logger.info(
                "dry_run_string",
                source_language=source_language,
                target_language=target_language,
                text=text,
            )
        return list(texts)

"""Synchronization of target languages against a source language.

For every target language and every source ("template") file, the
orchestrator computes which keys are missing from the target and which are
no longer used, has the missing strings translated in one provider call, and
writes the merged file back. Translation is incremental: keys already present
in a target are never translated again.

Pre-flight checks (source language present and not empty, source supported
by the provider, key-based source keys free of periods) run before anything
is written. Languages and files are processed one at a time; a provider
failure aborts the run and leaves files written so far in place.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

from infrastructure.logging import get_module_logger
from modules.translations import codec, consistency
from modules.translations.domain.errors import ConfigurationError, InvalidKeysError
from modules.translations.domain.models import (
    FileDiff,
    FileResult,
    FileType,
    LanguageResult,
    StringToTranslate,
    SyncReport,
    TranslationFile,
)
from modules.translations.filesystem import LanguageDirectory
from modules.translations.loader import TranslationLoader
from modules.translations.providers import TranslationProvider

logger = get_module_logger()


@dataclass(frozen=True)
class SyncOptions:
    """Directives of a synchronization run.

    Attributes:
        source_language: Template language directory name.
        delete_unused_strings: Drop target keys (and whole target files)
            that no longer exist in the template.
        fix_inconsistencies: Rewrite inconsistent natural source files so
            that every value equals its key.
    """

    source_language: str = "en"
    delete_unused_strings: bool = False
    fix_inconsistencies: bool = False


def compute_diff(
    template: TranslationFile, existing: Optional[TranslationFile]
) -> FileDiff:
    """Compute the strings a target file lacks and the strings it no longer needs.

    Args:
        template: Source file.
        existing: Target file of the same name, or None if there is none.

    Returns:
        FileDiff with strings_to_translate in template order and
        unused_strings in target order.
    """
    existing_content: Mapping[str, Any] = existing.content if existing else {}

    strings_to_translate = []
    for key, value in template.content.items():
        if key in existing_content:
            continue
        text = value if template.type == FileType.KEY_BASED else key
        strings_to_translate.append(StringToTranslate(key=key, value=text))

    unused_strings = [key for key in existing_content if key not in template.content]
    return FileDiff(strings_to_translate, unused_strings)


def merge_content(
    existing: Mapping[str, Any],
    new_strings: Mapping[str, Any],
    unused_strings: Iterable[str] = (),
) -> Dict[str, Any]:
    """Existing content minus unused_strings, followed by the new strings."""
    removed = set(unused_strings)
    merged = {key: value for key, value in existing.items() if key not in removed}
    merged.update(new_strings)
    return merged


def render_document(
    template: TranslationFile,
    existing: Optional[TranslationFile],
    content: Mapping[str, Any],
    new_keys: Iterable[str] = (),
) -> Dict[str, Any]:
    """Build the JSON document written for a target file.

    Key-based files are re-nested and their array leaves split again; natural
    files are written flat. A leaf is split only if it was an array in the
    record its value came from: the template for new_keys, the existing
    target for everything else.
    """
    if template.type != FileType.KEY_BASED:
        return dict(content)
    new_keys = set(new_keys)
    array_keys = {key for key in template.array_keys if key in new_keys}
    if existing is not None:
        array_keys |= {key for key in existing.array_keys if key not in new_keys}
    return codec.to_document(content, array_keys)


def _is_translatable(item: StringToTranslate) -> bool:
    return isinstance(item.value, str) and item.value != ""


class SyncOrchestrator:
    """Runs one synchronization pass.

    Attributes:
        directory: LanguageDirectory the files are read from and written to.
        loader: TranslationLoader producing normalized files per language.
        provider: Initialized TranslationProvider.
        options: SyncOptions of the run.
    """

    def __init__(
        self,
        directory: LanguageDirectory,
        loader: TranslationLoader,
        provider: TranslationProvider,
        options: SyncOptions,
    ):
        self.directory = directory
        self.loader = loader
        self.provider = provider
        self.options = options

    @property
    def writes_files(self) -> bool:
        return self.provider.capabilities.writes_files

    async def run(self) -> SyncReport:
        """Synchronize every target language with the source language.

        Returns:
            SyncReport describing what was translated, removed and written.

        Raises:
            ConfigurationError: If the source language is missing, empty or
                not supported by the provider.
            InvalidKeysError: If key-based source files contain periods in
                their keys.
            TranslationProviderError: If the provider fails.
        """
        source = self.options.source_language
        report = SyncReport(source_language=source, dry_run=not self.writes_files)

        languages = self.loader.list_languages()
        if source not in languages:
            raise ConfigurationError(f"The source language {source} doesn't exist.")
        targets = [language for language in languages if language != source]

        template_files = self.loader.load(source)
        if not template_files:
            raise ConfigurationError(
                f"The source language {source} doesn't contain any JSON files."
            )

        logger.info("target_languages_found", count=len(targets), languages=targets)
        for file in template_files:
            logger.info("source_file_loaded", file=file.name, type=file.type.value)

        supported = await self._supported_languages()
        if supported is not None and source.lower() not in supported:
            raise ConfigurationError(
                f"{self.provider.name} doesn't support the source language {source}"
            )

        invalid = consistency.invalid_files(template_files)
        if invalid:
            for name, keys in invalid.items():
                logger.error("invalid_keys_found", file=name, count=len(keys))
            raise InvalidKeysError(invalid)
        logger.info("no_invalid_keys_found")

        template_files = self._check_consistency(template_files, report)

        for language in targets:
            if supported is not None and language.lower() not in supported:
                logger.warning(
                    "language_skipped",
                    language=language,
                    reason=f"{self.provider.name} doesn't support {language}",
                )
                report.languages.append(LanguageResult(language=language, skipped=True))
                continue
            report.languages.append(
                await self._sync_language(language, template_files)
            )

        logger.info(
            "sync_completed",
            translated=report.translated_count,
            skipped_languages=report.skipped_languages,
            dry_run=report.dry_run,
        )
        return report

    async def _supported_languages(self) -> Optional[set]:
        if self.provider.capabilities.supports_all_languages:
            return None
        available = await self.provider.get_available_languages()
        logger.info("available_languages_loaded", count=len(available))
        return {code.lower() for code in available}

    def _check_consistency(
        self, template_files: List[TranslationFile], report: SyncReport
    ) -> List[TranslationFile]:
        inconsistent = consistency.inconsistent_files(template_files)
        report.inconsistent_files = inconsistent
        if not inconsistent:
            logger.info("no_inconsistencies_found")
            return template_files

        for name, keys in inconsistent.items():
            logger.warning("inconsistent_keys_found", file=name, count=len(keys))

        if not self.options.fix_inconsistencies:
            logger.warning(
                "inconsistencies_not_fixed",
                files=len(inconsistent),
                hint="fix them manually or pass --fix-inconsistencies",
            )
            return template_files

        fixed_files = []
        for file in template_files:
            if file.name in inconsistent:
                file = consistency.fix_file(file)
                if self.writes_files:
                    self.directory.write_json(
                        self.options.source_language, file.name, file.original_content
                    )
                report.fixed_files.append(file.name)
            fixed_files.append(file)
        logger.info("inconsistencies_fixed", files=report.fixed_files)
        return fixed_files

    async def _sync_language(
        self, language: str, template_files: List[TranslationFile]
    ) -> LanguageResult:
        source = self.options.source_language
        result = LanguageResult(language=language)
        existing_files = {f.name: f for f in self.loader.load(language)}
        template_names = {f.name for f in template_files}

        logger.info("translating_language", source=source, target=language)

        if self.options.delete_unused_strings:
            for name in existing_files:
                if name in template_names:
                    continue
                logger.warning("unused_file_deleted", language=language, file=name)
                if self.writes_files:
                    self.directory.delete(language, name)
                result.files.append(FileResult(name=name, deleted=self.writes_files))

        for template in template_files:
            existing = existing_files.get(template.name)
            result.files.append(await self._sync_file(language, template, existing))

        logger.info(
            "language_completed",
            language=language,
            added=result.added,
            removed=result.removed,
        )
        return result

    async def _sync_file(
        self,
        language: str,
        template: TranslationFile,
        existing: Optional[TranslationFile],
    ) -> FileResult:
        diff = compute_diff(template, existing)
        translatable = [s for s in diff.strings_to_translate if _is_translatable(s)]

        translated = await self.provider.translate_strings(
            translatable, self.options.source_language, language
        )
        translated_by_key = {t.key: t.translated for t in translated}

        new_strings = {
            item.key: translated_by_key.get(item.key, item.value)
            for item in diff.strings_to_translate
        }
        unused = diff.unused_strings if self.options.delete_unused_strings else []
        content = merge_content(
            existing.content if existing else {}, new_strings, unused
        )
        document = render_document(template, existing, content, new_strings)

        written = False
        if self.writes_files and (
            existing is None or document != existing.original_content
        ):
            self.directory.write_json(language, template.name, document)
            written = True

        logger.info(
            "file_translated",
            language=language,
            file=template.name,
            added=len(new_strings),
            removed=len(unused),
            written=written,
        )
        return FileResult(
            name=template.name,
            added=len(new_strings),
            removed=len(unused),
            written=written,
        )

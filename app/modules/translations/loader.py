"""Translation loading interface and implementations.

Defines the contract for loading the translation files of a language and
provides the JSON loader used by the synchronization run.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping

from infrastructure.logging import get_module_logger
from modules.translations import codec
from modules.translations.detection import detect_file_type
from modules.translations.domain.models import FileType, TranslationFile
from modules.translations.filesystem import LanguageDirectory

logger = get_module_logger()


def build_translation_file(
    name: str,
    document: Mapping[str, Any],
    file_type: FileType = FileType.AUTO,
) -> TranslationFile:
    """Normalize one parsed document into a TranslationFile.

    Args:
        name: File name.
        document: Parsed JSON object.
        file_type: Forced type, or AUTO to detect it from the document.

    Returns:
        TranslationFile whose content and original_content come from the
        same parse.
    """
    resolved = detect_file_type(document) if file_type == FileType.AUTO else file_type

    if resolved == FileType.KEY_BASED:
        content, array_keys = codec.flatten(document)
    else:
        content, array_keys = dict(document), frozenset()

    return TranslationFile(
        name=name,
        original_content=dict(document),
        type=resolved,
        content=content,
        array_keys=array_keys,
    )


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations must define how to discover languages and how to load
    and normalize the translation files of one language.
    """

    @abstractmethod
    def list_languages(self) -> List[str]:
        """Return all available language codes."""
        pass

    @abstractmethod
    def load(self, language: str) -> List[TranslationFile]:
        """Load the translation files of a language.

        Args:
            language: Language code (directory name).

        Returns:
            TranslationFile records sorted by name. A language without files
            yields an empty list.

        Raises:
            ValueError: If a file cannot be parsed.
        """
        pass


class JSONTranslationLoader(TranslationLoader):
    """Loader for JSON translation files laid out as ``<root>/<language>/*.json``.

    Every file is parsed exactly once per loader; later calls for the same
    language are served from the cache.

    Attributes:
        directory: LanguageDirectory used for reading.
        file_type: Forced file type, or AUTO to detect per file.
        cache: Loaded files per language.
    """

    def __init__(
        self,
        directory: LanguageDirectory,
        file_type: FileType = FileType.AUTO,
    ):
        """Initialize JSON translation loader.

        Args:
            directory: LanguageDirectory to read from.
            file_type: Forced file type for every file, or AUTO.
        """
        self.directory = directory
        self.file_type = file_type
        self.cache: Dict[str, List[TranslationFile]] = {}

        logger.info(
            "initialized_json_loader",
            root=str(directory.root),
            file_type=file_type.value,
        )

    def list_languages(self) -> List[str]:
        return self.directory.list_languages()

    def load(self, language: str) -> List[TranslationFile]:
        if language in self.cache:
            return self.cache[language]

        files = [
            build_translation_file(
                name, self.directory.read_json(language, name), self.file_type
            )
            for name in self.directory.list_files(language)
        ]

        logger.info(
            "loaded_translations",
            language=language,
            file_count=len(files),
        )

        self.cache[language] = files
        return files

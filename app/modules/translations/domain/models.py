"""Data structures for the translation synchronization engine.

Lightweight dataclasses (no runtime validation) shared by the loader, the
consistency checks, the providers and the orchestrator.

Key distinctions:
  - TranslationFile: one parsed JSON document of a language directory
  - StringToTranslate / TranslatedString: the provider contract payloads
  - FileDiff: key-set difference between a template file and a target file
  - FileResult / LanguageResult / SyncReport: what a run did
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping


class FileType(str, Enum):
    """Structure of a translation file.

    ``AUTO`` is a load-time directive only; a loaded file always carries
    ``KEY_BASED`` or ``NATURAL``.
    """

    KEY_BASED = "key-based"
    NATURAL = "natural"
    AUTO = "auto"

    @classmethod
    def from_string(cls, value: str) -> "FileType":
        """Convert string to FileType enum.

        Args:
            value: "key-based", "natural" or "auto".

        Returns:
            Matching FileType value.

        Raises:
            ValueError: If the value is not a known file type.
        """
        try:
            return cls(value)
        except ValueError as e:
            raise ValueError(f"Unsupported file type: {value}") from e


@dataclass(frozen=True)
class TranslationFile:
    """One JSON document discovered in a language directory.

    Frozen: transformations build new records instead of mutating this one.

    Attributes:
        name: File name, unique within its directory (e.g., "common.json").
        original_content: The document exactly as parsed.
        type: KEY_BASED or NATURAL, fixed at load time.
        content: Normalized mapping. Flat dot-path keys for key-based files,
            the document as-is for natural files.
        array_keys: Flat keys whose source leaf was an array.
    """

    name: str
    original_content: Dict[str, Any]
    type: FileType
    content: Mapping[str, Any]
    array_keys: frozenset = frozenset()

    def __post_init__(self):
        if not isinstance(self.content, MappingProxyType):
            object.__setattr__(self, "content", MappingProxyType(dict(self.content)))

    @property
    def keys(self) -> List[str]:
        """Canonical keys in enumeration order."""
        return list(self.content.keys())


@dataclass(frozen=True)
class StringToTranslate:
    """A string submitted to a translation provider.

    Attributes:
        key: Canonical identifier (flat dot-path or the natural string).
        value: Literal text to translate.
    """

    key: str
    value: str


@dataclass(frozen=True)
class TranslatedString:
    """A provider result, keyed like the StringToTranslate it answers."""

    key: str
    translated: str


@dataclass(frozen=True)
class FileDiff:
    """Key-set difference between a template file and an existing target file.

    Attributes:
        strings_to_translate: Template keys absent from the target, in
            template order.
        unused_strings: Target keys absent from the template, in target order.
    """

    strings_to_translate: List[StringToTranslate]
    unused_strings: List[str]


@dataclass
class FileResult:
    """Outcome for one template file in one target language."""

    name: str
    added: int = 0
    removed: int = 0
    written: bool = False
    deleted: bool = False


@dataclass
class LanguageResult:
    """Outcome for one target language."""

    language: str
    skipped: bool = False
    files: List[FileResult] = field(default_factory=list)

    @property
    def added(self) -> int:
        return sum(f.added for f in self.files)

    @property
    def removed(self) -> int:
        return sum(f.removed for f in self.files)


@dataclass
class SyncReport:
    """Summary of a synchronization run.

    Attributes:
        source_language: Template language of the run.
        dry_run: True when the provider never writes files.
        inconsistent_files: Natural source files whose keys and values differ,
            mapped to the offending keys.
        fixed_files: Source files rewritten by the fix directive.
        languages: Per target language outcome, in processing order.
    """

    source_language: str
    dry_run: bool = False
    inconsistent_files: Dict[str, List[str]] = field(default_factory=dict)
    fixed_files: List[str] = field(default_factory=list)
    languages: List[LanguageResult] = field(default_factory=list)

    @property
    def skipped_languages(self) -> List[str]:
        return [r.language for r in self.languages if r.skipped]

    @property
    def translated_count(self) -> int:
        return sum(r.added for r in self.languages)

from modules.translations.domain.errors import (
    ConfigurationError,
    InvalidKeysError,
    SyncError,
    TranslationProviderError,
)
from modules.translations.domain.models import (
    FileDiff,
    FileResult,
    FileType,
    LanguageResult,
    StringToTranslate,
    SyncReport,
    TranslatedString,
    TranslationFile,
)

__all__ = [
    "ConfigurationError",
    "InvalidKeysError",
    "SyncError",
    "TranslationProviderError",
    "FileDiff",
    "FileResult",
    "FileType",
    "LanguageResult",
    "StringToTranslate",
    "SyncReport",
    "TranslatedString",
    "TranslationFile",
]

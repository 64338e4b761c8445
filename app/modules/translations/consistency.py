"""Consistency and validity checks for source translation files.

Natural files use their natural-language strings as keys, and each key is
expected to equal its value. Key-based files must not contain periods in
top-level string keys since periods are the flatten path separator.
"""

from dataclasses import replace
from typing import Any, Dict, Iterable, List, Mapping

from modules.translations.domain.models import FileType, TranslationFile


def find_inconsistent_keys(content: Mapping[str, Any]) -> List[str]:
    """Return the keys whose value differs from the key, in content order."""
    return [key for key, value in content.items() if key != value]


def fix(content: Mapping[str, Any]) -> Dict[str, str]:
    """Return a new mapping where every value is reset to its key.

    Destructive: previously stored values are discarded.
    """
    return {key: key for key in content}


def fix_file(file: TranslationFile) -> TranslationFile:
    """Return a copy of a natural file with its inconsistencies fixed."""
    fixed = fix(file.content)
    return replace(file, original_content=dict(fixed), content=fixed)


def find_invalid_keys(document: Mapping[str, Any]) -> List[str]:
    """Return top-level string-valued keys that contain a period."""
    return [
        key for key, value in document.items() if isinstance(value, str) and "." in key
    ]


def inconsistent_files(files: Iterable[TranslationFile]) -> Dict[str, List[str]]:
    """Map each inconsistent natural file name to its offending keys."""
    result = {}
    for file in files:
        if file.type != FileType.NATURAL:
            continue
        keys = find_inconsistent_keys(file.content)
        if keys:
            result[file.name] = keys
    return result


def invalid_files(files: Iterable[TranslationFile]) -> Dict[str, List[str]]:
    """Map each key-based file name with invalid keys to those keys."""
    result = {}
    for file in files:
        if file.type != FileType.KEY_BASED:
            continue
        keys = find_invalid_keys(file.original_content)
        if keys:
            result[file.name] = keys
    return result

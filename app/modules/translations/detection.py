"""File structure detection for parsed translation documents."""

from typing import Any, Mapping

from modules.translations.domain.models import FileType


def detect_file_type(document: Mapping[str, Any]) -> FileType:
    """Classify a parsed JSON object as key-based or natural.

    Only top-level entries with a string value are inspected. A document is
    natural as soon as one of those keys contains a period or a space; nested
    objects and arrays never make it natural.

    Args:
        document: Parsed JSON object.

    Returns:
        FileType.NATURAL or FileType.KEY_BASED.
    """
    for key, value in document.items():
        if isinstance(value, str) and ("." in key or " " in key):
            return FileType.NATURAL
    return FileType.KEY_BASED

"""Errors for the translations module."""

from typing import Any, Dict, List, Optional


class SyncError(Exception):
    """Base class for failures that stop a synchronization run.

    Attributes:
        message: human-friendly message
        cause: the underlying exception, when there is one
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigurationError(SyncError):
    """Raised before any write when the run is misconfigured.

    Unknown provider or matcher, missing input or source directory, a source
    language without JSON files, or a source language the provider does not
    support.
    """


class InvalidKeysError(SyncError):
    """Raised when key-based source files contain top-level keys with periods.

    Attributes:
        invalid_keys: file name -> offending keys
    """

    def __init__(self, invalid_keys: Dict[str, List[str]]):
        files = ", ".join(sorted(invalid_keys))
        super().__init__(
            f"Found invalid keys in {len(invalid_keys)} file(s): {files}. "
            "Key-based files must not use periods (.) in their keys; "
            "use the natural file type for natural-language keys."
        )
        self.invalid_keys = invalid_keys


class TranslationProviderError(SyncError):
    """Raised by providers when the translation service reports an error.

    Attributes:
        response: the original response object, when available
    """

    def __init__(
        self,
        message: str,
        response: Any = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, cause=cause)
        self.response = response

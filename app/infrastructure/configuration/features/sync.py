"""Synchronization feature settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class SyncSettings(FeatureSettings):
    """Defaults for a synchronization run.

    Every value can be overridden on the command line.

    Environment Variables:
        SYNC_INPUT_DIR: Directory with one subdirectory per language (default: ".")
        SYNC_SOURCE_LANGUAGE: Template language directory name (default: "en")
        SYNC_FILE_TYPE: "key-based", "natural" or "auto" (default: "auto")
        SYNC_SERVICE: Translation provider name (default: "google-translate")
        SYNC_MATCHER: Interpolation matcher name (default: "icu")
        SYNC_DELETE_UNUSED_STRINGS: Remove strings missing from the template
        SYNC_FIX_INCONSISTENCIES: Rewrite inconsistent natural source files

    Example:
        ```python
        from infrastructure.configuration import settings

        source = settings.sync.source_language
        ```
    """

    input_dir: str = Field(default=".", alias="SYNC_INPUT_DIR")
    source_language: str = Field(default="en", alias="SYNC_SOURCE_LANGUAGE")
    file_type: str = Field(
        default="auto",
        alias="SYNC_FILE_TYPE",
        pattern=r"^(key-based|natural|auto)$",
    )
    service: str = Field(default="google-translate", alias="SYNC_SERVICE")
    matcher: str = Field(default="icu", alias="SYNC_MATCHER")
    delete_unused_strings: bool = Field(
        default=False, alias="SYNC_DELETE_UNUSED_STRINGS"
    )
    fix_inconsistencies: bool = Field(default=False, alias="SYNC_FIX_INCONSISTENCIES")

"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings with
domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    SyncSettings: Synchronization defaults
    ProviderSettings: Translation provider credentials and transport

Example:
    ```python
    from infrastructure.configuration import settings

    source_language = settings.sync.source_language
    timeout = settings.providers.TRANSLATION_TIMEOUT_SECONDS
    ```
"""

from infrastructure.configuration.features import SyncSettings
from infrastructure.configuration.integrations import ProviderSettings
from infrastructure.configuration.settings import Settings, settings

__all__ = ["settings", "Settings", "SyncSettings", "ProviderSettings"]

"""Translation sync configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.integrations import ProviderSettings
from infrastructure.configuration.features import SyncSettings


class Settings(BaseSettings):
    """Translation sync configuration settings - main aggregator.

    Aggregates the domain-specific settings into a single configuration object:

    - **sync**: defaults for a synchronization run (input directory, source
      language, provider, matcher, directives)
    - **providers**: credentials and transport settings of the translation
      providers

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        LOG_FORMAT: "console" for human-readable output, "json" for machines

    Example:
        ```python
        from infrastructure.configuration import settings

        if settings.json_logs:
            ...
        api_key = settings.providers.DEEPL_AUTH_KEY
        ```
    """

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"

    sync: SyncSettings
    providers: ProviderSettings

    @property
    def json_logs(self) -> bool:
        """Check if log events should be rendered as JSON.

        Returns:
            True if LOG_FORMAT is "json", False otherwise.
        """
        return self.LOG_FORMAT.lower() == "json"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "sync": SyncSettings,
            "providers": ProviderSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the singleton settings instance
settings = Settings()

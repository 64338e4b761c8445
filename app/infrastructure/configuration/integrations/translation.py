"""Translation provider integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class ProviderSettings(IntegrationSettings):
    """Credentials and transport settings for translation providers.

    A value passed with ``--config`` takes precedence over the key configured
    here.

    Environment Variables:
        GOOGLE_TRANSLATE_API_KEY: Cloud Translation API key
        GOOGLE_TRANSLATE_API_URL: Cloud Translation v2 base URL
        DEEPL_AUTH_KEY: DeepL authentication key
        DEEPL_API_URL: DeepL base URL (free keys use api-free.deepl.com)
        TRANSLATION_TIMEOUT_SECONDS: HTTP timeout per request (default: 30)
        TRANSLATION_BATCH_SIZE: Maximum strings per HTTP request (default: 50)
    """

    GOOGLE_TRANSLATE_API_KEY: str | None = Field(
        default=None, alias="GOOGLE_TRANSLATE_API_KEY"
    )
    GOOGLE_TRANSLATE_API_URL: str = Field(
        default="https://translation.googleapis.com/language/translate/v2",
        alias="GOOGLE_TRANSLATE_API_URL",
    )
    DEEPL_AUTH_KEY: str | None = Field(default=None, alias="DEEPL_AUTH_KEY")
    DEEPL_API_URL: str = Field(
        default="https://api-free.deepl.com/v2", alias="DEEPL_API_URL"
    )
    TRANSLATION_TIMEOUT_SECONDS: int = Field(
        default=30,
        alias="TRANSLATION_TIMEOUT_SECONDS",
        description="HTTP timeout for provider requests (seconds)",
    )
    TRANSLATION_BATCH_SIZE: int = Field(
        default=50,
        alias="TRANSLATION_BATCH_SIZE",
        description="Maximum number of strings sent in a single provider request",
    )

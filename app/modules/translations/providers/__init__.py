"""Translation providers.

The registry is an immutable name -> provider class mapping built once at
start-up. Providers are stateful (credentials, matcher), so the registry
holds classes and create_provider() instantiates the selected one:

    providers = build_provider_registry()
    provider = create_provider(providers, "deepl")
    provider.initialize(config, matcher)
"""

from types import MappingProxyType
from typing import Mapping, Optional, Type

from infrastructure.configuration import ProviderSettings
from modules.translations.domain.errors import ConfigurationError
from modules.translations.providers.base import (
    ProviderCapabilities,
    TranslationProvider,
)
from modules.translations.providers.deepl import DeepLProvider
from modules.translations.providers.dry_run import DryRunProvider
from modules.translations.providers.google_translate import GoogleTranslateProvider

__all__ = [
    "ProviderCapabilities",
    "TranslationProvider",
    "DeepLProvider",
    "DryRunProvider",
    "GoogleTranslateProvider",
    "build_provider_registry",
    "create_provider",
]


def build_provider_registry() -> Mapping[str, Type[TranslationProvider]]:
    """Create the read-only registry of available providers."""
    providers = (GoogleTranslateProvider, DeepLProvider, DryRunProvider)
    return MappingProxyType({p.name: p for p in providers})


def create_provider(
    registry: Mapping[str, Type[TranslationProvider]],
    name: str,
    provider_settings: Optional[ProviderSettings] = None,
) -> TranslationProvider:
    """Instantiate the provider registered under name.

    Raises:
        ConfigurationError: If no provider is registered under name.
    """
    try:
        provider_class = registry[name]
    except KeyError as e:
        raise ConfigurationError(f"The service {name} doesn't exist.", cause=e) from e
    return provider_class(provider_settings)

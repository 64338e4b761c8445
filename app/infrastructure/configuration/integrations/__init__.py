"""Integration settings __init__ - exports all integration settings."""

from infrastructure.configuration.integrations.translation import ProviderSettings

__all__ = ["ProviderSettings"]

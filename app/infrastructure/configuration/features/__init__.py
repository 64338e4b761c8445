"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.sync import SyncSettings

__all__ = ["SyncSettings"]

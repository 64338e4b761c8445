"""Infrastructure modules for the translation sync tool.

Centralized infrastructure components:
- configuration: Settings management (settings, SyncSettings, ProviderSettings)
- logging: Structured logging (get_module_logger, bind_run_context)
"""

# Configuration
from infrastructure.configuration import settings

# Logging
from infrastructure.logging import bind_run_context, get_module_logger

__all__ = [
    "settings",
    "bind_run_context",
    "get_module_logger",
]

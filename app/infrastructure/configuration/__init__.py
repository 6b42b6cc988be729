"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the
translation engine using Pydantic BaseSettings.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation engine settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    # Access settings
    max_depth = settings.i18n.max_reference_depth

    # Check environment
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.infrastructure.i18n import I18nSettings

__all__ = ["Settings", "I18nSettings"]

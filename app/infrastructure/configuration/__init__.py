"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the
application using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Message catalog and response settings class

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    lang_dir = settings.i18n.LANG_DIR
    default_lang = settings.i18n.DEFAULT_LANG

    # Check environment
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.infrastructure.i18n import I18nSettings

__all__ = ["Settings", "I18nSettings", "settings"]

"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    ResponderDep,
    TranslatorDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_responder,
    get_translator,
)

__all__ = [
    "SettingsDep",
    "ResponderDep",
    "TranslatorDep",
    "get_settings",
    "get_responder",
    "get_translator",
]

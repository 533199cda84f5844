"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated
from fastapi import Depends
from infrastructure.configuration import Settings
from infrastructure.i18n import Responder, Translator
from infrastructure.services.providers import (
    get_settings,
    get_responder,
    get_translator,
)

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Response envelope builder/renderer
# Usage: return responder.json(request, 0, data)
ResponderDep = Annotated[Responder, Depends(get_responder)]

# Message translator shared by the responder
TranslatorDep = Annotated[Translator, Depends(get_translator)]

__all__ = [
    "SettingsDep",
    "ResponderDep",
    "TranslatorDep",
]

"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n import Responder, Translator, create_responder


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_responder() -> Responder:
    """
    Get application-scoped Responder singleton.

    The catalog is loaded on first call; the server lifespan calls this at
    startup so that a missing or invalid catalog stops the application.

    Returns:
        Responder: Cached responder built from settings.i18n.

    Raises:
        LoadError: If a catalog file cannot be read or parsed.
        EmptyCatalogError: If no catalog file was found.

    Usage:
        @router.get("/ok")
        def ok(request: Request, responder: ResponderDep):
            return responder.json(request, 0, "success")
    """
    return create_responder(get_settings().i18n)


def get_translator() -> Translator:
    """Translator shared with the application Responder."""
    return get_responder().translator

"""Exceptions raised while building message catalogs.

Only catalog construction fails loudly. Lookups never raise: a missing
language or message code falls back to the default language and then to
the code itself.
"""

from typing import Optional


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            translator = create_translator()
        except I18nError as e:
            logger.error("i18n_initialization_failed", error=str(e))
            raise
    """

    pass


class LoadError(I18nError):
    """Raised when a catalog source cannot be read or parsed.

    Attributes:
        source: Name of the offending source (usually a file name).
        reason: Human readable reason.
    """

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to load catalog source '{source}': {reason}")


class EmptyCatalogError(I18nError):
    """Raised when no catalog source was found."""

    def __init__(self, location: Optional[str] = None):
        self.location = location
        message = "No language files found"
        if location:
            message = f"{message} in {location}"
        super().__init__(message)

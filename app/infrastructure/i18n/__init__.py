"""i18n system - message catalogs and localized response envelopes.

Loads per-language message templates, selects a language for each
request, resolves response codes to formatted messages, and builds the
standard response envelope in several output formats.

Main components:
- models: Catalog, CatalogSource, ResolverConfig, RequestSignals, Envelope, Plain, WithParams
- loader: CatalogLoader and DirectoryCatalogLoader
- resolvers: LanguageResolver and DebugResolver
- translator: Translator with fallback and printf-style substitution
- responder: Responder building and rendering envelopes
- errors: I18nError, LoadError, EmptyCatalogError
"""

from infrastructure.i18n.errors import EmptyCatalogError, I18nError, LoadError
from infrastructure.i18n.factory import create_responder, create_translator
from infrastructure.i18n.loader import CatalogLoader, DirectoryCatalogLoader
from infrastructure.i18n.models import (
    Catalog,
    CatalogSource,
    Envelope,
    LanguageSource,
    Plain,
    RequestSignals,
    ResolverConfig,
    Trace,
    WithParams,
)
from infrastructure.i18n.resolvers import (
    DebugResolver,
    LanguageResolver,
    parse_user_agent_language,
)
from infrastructure.i18n.responder import OutputFormat, Responder
from infrastructure.i18n.translator import Translator

__all__ = [
    "Catalog",
    "CatalogSource",
    "Envelope",
    "Trace",
    "Plain",
    "WithParams",
    "RequestSignals",
    "ResolverConfig",
    "LanguageSource",
    "CatalogLoader",
    "DirectoryCatalogLoader",
    "LanguageResolver",
    "DebugResolver",
    "parse_user_agent_language",
    "Translator",
    "Responder",
    "OutputFormat",
    "create_translator",
    "create_responder",
    "I18nError",
    "LoadError",
    "EmptyCatalogError",
]

"""Factory functions for creating i18n components.

Provides convenience functions for building a translator and responder
from application settings.
"""

import os
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Sequence, Union

import structlog
from infrastructure.i18n.loader import DirectoryCatalogLoader
from infrastructure.i18n.models import DEFAULT_LANGUAGE, LanguageSource, ResolverConfig
from infrastructure.i18n.responder import Responder
from infrastructure.i18n.translator import Translator

if TYPE_CHECKING:
    from infrastructure.configuration import I18nSettings

logger = structlog.get_logger()

DEFAULT_LANG_DIR = "./lang"
DEFAULT_ENV_KEY = "RUN_MODE"


def create_translator(
    lang_dir: Union[str, Path] = DEFAULT_LANG_DIR,
    default_language: str = DEFAULT_LANGUAGE,
    env_key: str = DEFAULT_ENV_KEY,
    debug_mode: bool = False,
    detection_order: Sequence[Union[str, LanguageSource]] = (
        LanguageSource.HEADER,
        LanguageSource.USER_AGENT,
    ),
) -> Translator:
    """Load the catalog from ``lang_dir`` and create a Translator.

    The run environment is read from the environment variable named by
    ``env_key`` once, here.

    Args:
        lang_dir: Directory with one catalog file per language (default: ./lang)
        default_language: Fallback language (default: en-US)
        env_key: Environment variable holding the run mode (default: RUN_MODE)
        debug_mode: Attach error descriptions to every response (default: False)
        detection_order: Request language sources in order of precedence

    Returns:
        Translator: Configured translator instance

    Raises:
        LoadError: If a catalog file cannot be read or parsed
        EmptyCatalogError: If ``lang_dir`` holds no catalog file

    Usage:
        translator = create_translator(lang_dir="./lang", debug_mode=True)
        translator.set_language("zh-CN")
    """
    catalog = DirectoryCatalogLoader(lang_dir).load()
    config = ResolverConfig(
        default_language=default_language,
        debug_mode=debug_mode,
        run_env=os.environ.get(env_key, ""),
        detection_order=detection_order,
    )
    logger.info(
        "translator_created",
        lang_dir=str(lang_dir),
        language_count=len(catalog),
        run_env=config.run_env,
    )
    return Translator(catalog, config)


def create_responder(
    i18n_settings: Optional["I18nSettings"] = None,
) -> Responder:
    """Create a Responder from I18nSettings.

    Args:
        i18n_settings: Settings section to use (default: settings.i18n)

    Raises:
        LoadError: If a catalog file cannot be read or parsed
        EmptyCatalogError: If the language directory holds no catalog file
    """
    if i18n_settings is None:
        from infrastructure.configuration import settings

        i18n_settings = settings.i18n

    translator = create_translator(
        lang_dir=i18n_settings.LANG_DIR,
        default_language=i18n_settings.DEFAULT_LANG,
        env_key=i18n_settings.ENV_KEY,
        debug_mode=i18n_settings.DEBUG_MODE,
        detection_order=i18n_settings.DETECTION_ORDER,
    )
    return Responder(translator)

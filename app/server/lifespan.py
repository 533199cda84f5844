from contextlib import asynccontextmanager
from typing import AsyncIterator, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.i18n import I18nError
from infrastructure.logging.setup import configure_logging
from infrastructure.services import get_responder, get_settings

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _get_logger(settings: "Settings") -> BoundLogger:
    return configure_logging(settings=settings)


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


def _load_responder(app: FastAPI, logger: BoundLogger) -> None:
    """Load the message catalog; the application must not start without one."""
    try:
        responder = get_responder()
    except I18nError as exc:
        logger.error("message_catalog_load_failed", error=str(exc))
        raise

    app.state.responder = responder
    logger.info(
        "message_catalog_ready",
        languages=responder.translator.languages(),
        default_language=responder.translator.default_language,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = _get_logger(settings)

    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup")
    _list_configs(settings, logger)

    _load_responder(app, logger)

    yield

    logger.info("application_shutdown")

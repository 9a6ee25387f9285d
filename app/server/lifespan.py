from contextlib import asynccontextmanager
from typing import AsyncIterator, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.i18n import DictionaryResolver, MissingFallback
from infrastructure.logging.setup import configure_logging
from infrastructure.services import (
    get_dictionary_resolver,
    get_settings,
    reset_dictionary_resolver,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _get_logger(settings: "Settings") -> BoundLogger:
    return configure_logging(log_level=settings.LOG_LEVEL)


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


def _activate_resolver(
    app: FastAPI, settings: "Settings", logger: BoundLogger
) -> DictionaryResolver:
    try:
        resolver = get_dictionary_resolver()
    except MissingFallback as exc:
        # Fail fast: never serve a locale without a verified snapshot
        logger.error(
            "dictionary_fallback_missing", locale=exc.locale, error=str(exc)
        )
        raise

    app.state.dictionary_resolver = resolver
    logger.info(
        "dictionary_resolver_activated",
        supported_locales=list(resolver.supported_locales),
        remote_configured=settings.dictionaries.base_url is not None,
    )
    return resolver


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = _get_logger(settings)

    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup")
    _list_configs(settings, logger)

    resolver = _activate_resolver(app, settings, logger)
    if settings.dictionaries.warm_on_startup:
        await resolver.warm()

    yield

    logger.info("application_shutdown")
    await resolver.aclose()
    reset_dictionary_resolver()

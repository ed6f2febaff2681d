from contextlib import asynccontextmanager
from typing import AsyncIterator, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from core.logging import get_module_logger
from infrastructure.services import (
    get_api_versions,
    get_catalog,
    get_settings,
    get_translation_factory,
)

if TYPE_CHECKING:
    from core.config import Settings


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


def _load_catalog(app: FastAPI, logger: BoundLogger) -> None:
    # Fail fast: the API cannot validate any request without its catalog
    try:
        catalog = get_catalog()
    except Exception as exc:
        logger.error("catalog_loading_failed", error=str(exc))
        raise

    app.state.catalog = catalog
    app.state.api_versions = get_api_versions()
    app.state.translations = get_translation_factory()
    logger.info(
        "stores_api_ready",
        products=catalog.get_supported_products(),
        stores=catalog.get_supported_stores(),
        api_versions=list(app.state.api_versions.supported),
        current_api_version=app.state.api_versions.current,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = get_module_logger()

    app.state.settings = settings

    logger.info("application_startup")
    _list_configs(settings, logger)
    _load_catalog(app, logger)

    try:
        yield
    finally:
        app.state.translations.clear_cache()
        logger.info("application_shutdown")

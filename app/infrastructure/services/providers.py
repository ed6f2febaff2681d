"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from core.config import Settings, settings
from infrastructure.i18n import TranslationFactory, create_translation_factory
from modules.stores import APIVersions, YAMLCatalog


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: The settings instance loaded from environment.
    """
    return settings


@lru_cache
def get_catalog() -> YAMLCatalog:
    """
    Get application-scoped catalog singleton.

    Returns:
        YAMLCatalog: Catalog loaded from settings.stores.CATALOG_PATH.

    Raises:
        CatalogError: If the catalog file is missing or malformed.
    """
    return YAMLCatalog.from_file(get_settings().stores.CATALOG_PATH)


@lru_cache
def get_api_versions() -> APIVersions:
    """
    Get the API versions registry from settings.

    Returns:
        APIVersions: Supported versions (oldest first) and the current one.
    """
    stores_settings = get_settings().stores
    return APIVersions(
        supported=tuple(stores_settings.API_SUPPORTED_VERSIONS),
        current=stores_settings.API_CURRENT_VERSION,
    )


@lru_cache
def get_translation_factory() -> TranslationFactory:
    """
    Get application-scoped translation factory singleton.

    The factory caches parsed locale files for the lifetime of the process.

    Returns:
        TranslationFactory: Factory configured from settings.stores.
    """
    stores_settings = get_settings().stores
    return create_translation_factory(
        locales_path=stores_settings.LOCALES_PATH,
        reference_locale=stores_settings.REFERENCE_LOCALE,
    )


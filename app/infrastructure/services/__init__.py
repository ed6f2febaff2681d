"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    CatalogDep,
    APIVersionsDep,
    TranslationFactoryDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_catalog,
    get_api_versions,
    get_translation_factory,
)

__all__ = [
    "SettingsDep",
    "CatalogDep",
    "APIVersionsDep",
    "TranslationFactoryDep",
    "get_settings",
    "get_catalog",
    "get_api_versions",
    "get_translation_factory",
]

"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated
from fastapi import Depends
from core.config import Settings
from infrastructure.i18n import TranslationFactory
from infrastructure.services.providers import (
    get_settings,
    get_catalog,
    get_api_versions,
    get_translation_factory,
)
from modules.stores import APIVersions, YAMLCatalog

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Catalog of products, stores, channels and locales
CatalogDep = Annotated[YAMLCatalog, Depends(get_catalog)]

# Supported and current API versions
APIVersionsDep = Annotated[APIVersions, Depends(get_api_versions)]

# Cached translations for .lang files
TranslationFactoryDep = Annotated[TranslationFactory, Depends(get_translation_factory)]

__all__ = [
    "SettingsDep",
    "CatalogDep",
    "APIVersionsDep",
    "TranslationFactoryDep",
]

"""Catalog of products, stores, channels and locales.

The request validator only depends on the CatalogRegistry protocol. The
YAMLCatalog implementation reads the catalog from a YAML document:

    stores:
      google:
        locales:            # store locale -> Mozilla locale
          fr-FR: fr
          de-DE: de
    products:
      fx_android:
        store: google
        legacy_ids: [firefox_android]
        channels:
          release:
            locales: [fr, de]
            sections:
              listing: [fx_android/description_release.lang]
              whatsnew: [fx_android/whatsnew/android_release.lang]
"""

from pathlib import Path
from typing import Any, Dict, List, Protocol

import yaml

from core.logging import get_module_logger

logger = get_module_logger()


class CatalogError(Exception):
    """Raised when the catalog file is missing or malformed."""


class CatalogRegistry(Protocol):
    """Lookups used to validate and serve API requests."""

    def get_updated_product_code(self, product_id: str) -> str: ...

    def get_product_store(self, product: str) -> str: ...

    def get_product_channels(self, product: str) -> List[str]: ...

    def get_supported_products(self) -> List[str]: ...

    def get_supported_stores(self) -> List[str]: ...

    def get_store_mozilla_common_locales(
        self, product: str, channel: str
    ) -> List[str]: ...

    def get_lang_files(self, product: str, channel: str, section: str) -> List[str]: ...

    def get_store_locales(self, store: str) -> List[str]: ...

    def get_locales_mapping(
        self, store: str, reverse: bool = False
    ) -> Dict[str, str]: ...


class YAMLCatalog:
    """Catalog backed by an in-memory mapping, usually loaded from YAML.

    Attributes:
        stores: {store: {"locales": {store_locale: mozilla_locale}}}
        products: {product: {"store": ..., "legacy_ids": [...], "channels": {...}}}
    """

    def __init__(self, data: Dict[str, Any]):
        if not isinstance(data, dict):
            raise CatalogError("Catalog must be a mapping")

        self.stores: Dict[str, Dict[str, Any]] = data.get("stores") or {}
        self.products: Dict[str, Dict[str, Any]] = data.get("products") or {}

        if not isinstance(self.stores, dict) or not isinstance(self.products, dict):
            raise CatalogError("Catalog 'stores' and 'products' must be mappings")

        self._legacy_ids: Dict[str, str] = {}
        for product, product_data in self.products.items():
            for legacy_id in (product_data or {}).get("legacy_ids") or []:
                self._legacy_ids[legacy_id] = product

    @classmethod
    def from_file(cls, path: Path | str) -> "YAMLCatalog":
        """Load a catalog from a YAML file.

        Raises:
            CatalogError: If the file cannot be read or parsed.
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise CatalogError(f"Catalog file not found: {path}") from e
        except yaml.YAMLError as e:
            logger.error("catalog_parse_error", file=str(path), error=str(e))
            raise CatalogError(f"Failed to parse {path}: {e}") from e

        catalog = cls(data or {})
        logger.info(
            "catalog_loaded",
            file=str(path),
            product_count=len(catalog.products),
            store_count=len(catalog.stores),
        )
        return catalog

    def _channels(self, product: str) -> Dict[str, Any]:
        return (self.products.get(product) or {}).get("channels") or {}

    def _channel(self, product: str, channel: str) -> Dict[str, Any]:
        return self._channels(product).get(channel) or {}

    def get_updated_product_code(self, product_id: str) -> str:
        """Convert legacy product IDs to the current code."""
        return self._legacy_ids.get(product_id, product_id)

    def get_product_store(self, product: str) -> str:
        return (self.products.get(product) or {}).get("store", "")

    def get_product_channels(self, product: str) -> List[str]:
        return list(self._channels(product))

    def get_supported_products(self) -> List[str]:
        return list(self.products)

    def get_supported_stores(self) -> List[str]:
        return list(self.stores)

    def get_product_locales(self, product: str, channel: str) -> List[str]:
        """Mozilla locales shipped for a product on a channel."""
        return list(self._channel(product, channel).get("locales") or [])

    def get_store_mozilla_common_locales(self, product: str, channel: str) -> List[str]:
        """Mozilla locales of a product channel also supported by its store.

        Order follows the product channel locales.
        """
        store_locales = set(
            self.get_locales_mapping(self.get_product_store(product)).values()
        )
        return [
            locale
            for locale in self.get_product_locales(product, channel)
            if locale in store_locales
        ]

    def get_lang_files(self, product: str, channel: str, section: str) -> List[str]:
        """Return the .lang files of a section, or [] if not registered."""
        sections = self._channel(product, channel).get("sections") or {}
        return list(sections.get(section) or [])

    def get_locales_mapping(self, store: str, reverse: bool = False) -> Dict[str, str]:
        """Return {store locale: Mozilla locale}, or the reverse mapping."""
        mapping = dict((self.stores.get(store) or {}).get("locales") or {})
        if reverse:
            return {mozilla: store_locale for store_locale, mozilla in mapping.items()}
        return mapping

    def get_store_locales(self, store: str) -> List[str]:
        return sorted(self.get_locales_mapping(store))

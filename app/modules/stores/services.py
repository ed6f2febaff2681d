"""Stores API services.

Each service receives a validated StructuredQuery and returns a JSON
serializable payload. Services never run for invalid requests.
"""

from typing import Any, Callable, Dict, List

from core.logging import get_module_logger
from infrastructure.i18n import TranslationFactory
from modules.stores.catalog import CatalogRegistry
from modules.stores.models import StructuredQuery

logger = get_module_logger()

SECTIONS = ("listing", "whatsnew")


class StoreServices:
    """Executes the services of the Stores API."""

    def __init__(self, catalog: CatalogRegistry, translations: TranslationFactory):
        self.catalog = catalog
        self.translations = translations
        self._handlers: Dict[
            str, Callable[[StructuredQuery, Dict[str, str]], Any]
        ] = {
            "done": self.done,
            "firefoxlocales": self.supported_locales,
            "listing": self.listing,
            "localesmapping": self.locales_mapping,
            "supportedlocales": self.supported_locales,
            "storelocales": self.store_locales,
            "translation": self.translation,
            "whatsnew": self.whatsnew,
        }

    def dispatch(
        self, query: StructuredQuery, query_parameters: Dict[str, str] | None = None
    ) -> Any:
        """Run the service named in the query.

        Raises:
            KeyError: If the service is unknown. Validated queries always
                name a known service.
        """
        handler = self._handlers[query.service or ""]
        logger.info("dispatching_service", **query.as_dict())
        return handler(query, query_parameters or {})

    def supported_locales(
        self, query: StructuredQuery, query_parameters: Dict[str, str]
    ) -> List[str]:
        """Mozilla locales available in the store for a product channel."""
        return self.catalog.get_store_mozilla_common_locales(
            query.product, query.channel or ""
        )

    def locales_mapping(
        self, query: StructuredQuery, query_parameters: Dict[str, str]
    ) -> Dict[str, str]:
        """Store locale -> Mozilla locale, reversed with ?reverse."""
        return self.catalog.get_locales_mapping(
            query.store, reverse="reverse" in query_parameters
        )

    def store_locales(
        self, query: StructuredQuery, query_parameters: Dict[str, str]
    ) -> List[str]:
        return self.catalog.get_store_locales(query.store)

    def translation(
        self, query: StructuredQuery, query_parameters: Dict[str, str]
    ) -> Dict[str, str]:
        """Translated listing strings for a locale, keyed by source string."""
        files = self.catalog.get_lang_files(
            query.product, query.channel or "", "listing"
        )
        if not files:
            return {}

        translate = self.translations.get(query.locale or "", files)
        return {key: translate.get(key) for key in sorted(translate.source_strings)}

    def done(
        self, query: StructuredQuery, query_parameters: Dict[str, str]
    ) -> List[str]:
        """Locales with every registered section fully translated."""
        channel = query.channel or ""
        sections = [
            files
            for files in (
                self.catalog.get_lang_files(query.product, channel, section)
                for section in SECTIONS
            )
            if files
        ]
        if not sections:
            return []

        return [
            locale
            for locale in self.catalog.get_store_mozilla_common_locales(
                query.product, channel
            )
            if all(
                self.translations.get(locale, files).is_file_translated()
                for files in sections
            )
        ]

    def listing(
        self, query: StructuredQuery, query_parameters: Dict[str, str]
    ) -> Dict[str, bool]:
        return self._section_status(query, "listing")

    def whatsnew(
        self, query: StructuredQuery, query_parameters: Dict[str, str]
    ) -> Dict[str, bool]:
        return self._section_status(query, "whatsnew")

    def _section_status(self, query: StructuredQuery, section: str) -> Dict[str, bool]:
        """{locale: fully translated} for one section of a product channel."""
        channel = query.channel or ""
        files = self.catalog.get_lang_files(query.product, channel, section)
        return {
            locale: bool(files)
            and self.translations.get(locale, files).is_file_translated()
            for locale in self.catalog.get_store_mozilla_common_locales(
                query.product, channel
            )
        }

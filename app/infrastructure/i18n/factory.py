"""Factory functions for creating i18n components.

TranslationFactory keeps a read-through cache of Translate instances keyed by
locale and file list. Locale files are deployment artifacts, so cached
entries are never invalidated at runtime.
"""

from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

import structlog
from core.config import settings
from infrastructure.i18n.dotlang import DotLangParser
from infrastructure.i18n.translate import Translate

logger = structlog.get_logger()

CacheKey = Tuple[str, Tuple[str, ...], bool]


class TranslationFactory:
    """Creates and caches Translate instances.

    Attributes:
        locales_path: Root of the locales tree.
        reference_locale: Source locale used for completeness checks.
        use_cache: Whether to keep created instances in memory.
        cache: Loaded instances keyed by (locale, files, multi-file flag).
    """

    def __init__(
        self,
        locales_path: Path | str,
        reference_locale: str = "en-US",
        parser: Optional[DotLangParser] = None,
        use_cache: bool = True,
    ):
        self.locales_path = Path(locales_path)
        self.reference_locale = reference_locale
        self.parser = parser or DotLangParser()
        self.use_cache = use_cache
        self.cache: Dict[CacheKey, Translate] = {}

        if not self.locales_path.exists():
            logger.warning(
                "locales_path_not_found", locales_path=str(self.locales_path)
            )

    def get(self, locale: str, files: str | Iterable[str]) -> Translate:
        """Return the Translate instance for a locale and file list.

        A single file name and a one-element list are distinct keys: the
        multi-file form does not carry the activation flag.

        Args:
            locale: Locale to load.
            files: A file name or a list of file names.

        Returns:
            Translate instance, from cache when available.
        """
        if isinstance(files, str):
            cache_key: CacheKey = (locale, (files,), False)
            source: str | list[str] = files
        else:
            source = list(files)
            cache_key = (locale, tuple(source), True)

        if self.use_cache and cache_key in self.cache:
            return self.cache[cache_key]

        translate = Translate(
            locale,
            source,
            parser=self.parser,
            locales_path=self.locales_path,
            reference_locale=self.reference_locale,
        )

        if not self.use_cache:
            return translate

        # Sync routes run in a threadpool: concurrent misses may each parse the
        # files, the first stored instance wins and is shared afterwards
        return self.cache.setdefault(cache_key, translate)

    def clear_cache(self) -> None:
        """Clear all cached translations."""
        self.cache.clear()
        logger.info("cleared_translation_cache")


def create_translation_factory(
    locales_path: Path | str | None = None,
    reference_locale: str | None = None,
    use_cache: bool = True,
) -> TranslationFactory:
    """Create a TranslationFactory from application settings.

    Args:
        locales_path: Root of the locales tree (default: settings.stores.LOCALES_PATH).
        reference_locale: Source locale (default: settings.stores.REFERENCE_LOCALE).
        use_cache: Whether to cache Translate instances (default: True).

    Returns:
        TranslationFactory: Configured factory instance
    """
    factory = TranslationFactory(
        locales_path=locales_path or settings.stores.LOCALES_PATH,
        reference_locale=reference_locale or settings.stores.REFERENCE_LOCALE,
        use_cache=use_cache,
    )
    logger.info(
        "translation_factory_created",
        locales_path=str(factory.locales_path),
        reference_locale=factory.reference_locale,
    )
    return factory

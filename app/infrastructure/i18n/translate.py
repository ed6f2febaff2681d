"""Translation lookup and completeness checks for locale files.

A Translate instance wraps the strings of one locale for one file, or for a
list of files merged together, alongside the keys of the same files in the
reference locale. The reference keys are the oracle used to decide whether
the locale is complete.
"""

from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Set

from core.config import settings
from core.logging import get_module_logger
from infrastructure.i18n.dotlang import DotLangParseError, DotLangParser
from infrastructure.i18n.models import TranslationSet, clean_string

logger = get_module_logger()


class Translate:
    """Translation lookup for a locale and a set of .lang files.

    Attributes:
        locale: Locale being translated (e.g. "fr").
        locales_path: Root folder holding one sub-folder per locale.
        reference_locale: Locale holding the source strings (e.g. "en-US").
    """

    def __init__(
        self,
        locale: str,
        files: str | Iterable[str],
        parser: Optional[DotLangParser] = None,
        locales_path: Optional[Path | str] = None,
        reference_locale: Optional[str] = None,
    ):
        """Load translations and reference keys.

        Args:
            locale: Locale to load.
            files: A single file name, or a list of file names to merge.
                Later files override earlier ones on key collisions.
            parser: Parser used to read files (default: DotLangParser).
            locales_path: Root of the locales tree (default: settings).
            reference_locale: Source locale (default: settings).
        """
        self.locale = locale
        self.locales_path = Path(locales_path or settings.stores.LOCALES_PATH)
        self.reference_locale = reference_locale or settings.stores.REFERENCE_LOCALE
        self._parser = parser or DotLangParser()

        if isinstance(files, str):
            self._translations = self._parse(self.locale, files)
            source_keys: Set[str] = set(
                self._parse(self.reference_locale, files).strings
            )
        else:
            # Activation and parse errors are not tracked across merged files
            merged = TranslationSet()
            source_keys = set()
            for file_name in files:
                merged.merge(self._parse(self.locale, file_name))
                source_keys.update(self._parse(self.reference_locale, file_name).strings)
            self._translations = merged

        self._source_strings: FrozenSet[str] = frozenset(source_keys)

    def _parse(self, locale: str, file_name: str) -> TranslationSet:
        path = self.locales_path / locale / file_name
        try:
            return self._parser.parse(path)
        except DotLangParseError as e:
            logger.warning(
                "lang_file_unavailable",
                locale=locale,
                file=file_name,
                error=str(e),
            )
            return TranslationSet()

    @property
    def translations(self) -> TranslationSet:
        """Parsed translations for the locale."""
        return self._translations

    @property
    def source_strings(self) -> FrozenSet[str]:
        """Keys found in the reference locale."""
        return self._source_strings

    def get(self, key: str) -> str:
        """Return the translation for a string.

        Args:
            key: Source string.

        Returns:
            The sanitized translation, or the source string itself if there
            is no translation.
        """
        if key in self._translations.strings:
            return clean_string(self._translations.strings[key])

        return key

    def is_string_translated(self, key: str) -> bool:
        """Check if a string is translated.

        A translation identical to its source string counts as untranslated,
        compared after sanitizing so that get(key) == key always means False.
        """
        if key not in self._translations.strings:
            return False

        if clean_string(self._translations.strings[key]) == key:
            return False

        return True

    def is_file_translated(self) -> bool:
        """Check if every reference string is translated.

        Returns:
            False when the reference files are empty or missing, or when any
            reference string is missing or identical to its source.
        """
        if not self._source_strings:
            return False

        return all(self.is_string_translated(key) for key in self._source_strings)

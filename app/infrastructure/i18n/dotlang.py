"""Parser for .lang locale files.

A .lang file holds pairs of source and translated strings:

    ## active ##
    ## NOTE: Store listing for Firefox
    # Regular comment

    ;Fast, private and secure web browser
    Navigateur web rapide, privé et sécurisé

    ;Firefox
    Firefox {ok}

Lines starting with ``##`` are metadata tags, ``## active ##`` marks the file
as activated. Lines starting with a single ``#`` are comments. A line starting
with ``;`` is a source string and the next non-empty line is its translation.
"""

from pathlib import Path
from typing import Optional

import structlog
from infrastructure.i18n.models import TranslationSet

logger = structlog.get_logger()

ACTIVE_TAG = "## active ##"


class DotLangParseError(Exception):
    """Raised when a .lang file is missing or cannot be decoded.

    Attributes:
        path: Path of the file that could not be parsed.
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class DotLangParser:
    """Reads .lang files into TranslationSet instances."""

    def parse(self, path: Path | str) -> TranslationSet:
        """Parse a .lang file.

        Args:
            path: Path to the .lang file.

        Returns:
            TranslationSet with the activation flag, strings and the source
            strings that had no translation.

        Raises:
            DotLangParseError: If the file is missing, unreadable or not UTF-8.
        """
        path = Path(path)
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise DotLangParseError(f"File not found: {path}", path) from e
        except (OSError, UnicodeDecodeError) as e:
            raise DotLangParseError(f"Failed to read {path}: {e}", path) from e

        return self.parse_content(content)

    def parse_content(self, content: str) -> TranslationSet:
        """Parse .lang content already loaded in memory.

        Args:
            content: Full text of a .lang file.

        Returns:
            TranslationSet built from the content.
        """
        translation_set = TranslationSet()
        pending_source: Optional[str] = None

        for raw_line in content.splitlines():
            line = raw_line.strip()

            if not line:
                continue

            if line.startswith("##"):
                if line == ACTIVE_TAG:
                    translation_set.activated = True
                continue

            if line.startswith("#"):
                continue

            if line.startswith(";"):
                if pending_source is not None:
                    translation_set.ignored_strings.append(pending_source)
                pending_source = line[1:]
                continue

            if pending_source is None:
                logger.debug("lang_line_without_source", line=line)
                continue

            translation_set.strings[pending_source] = line
            pending_source = None

        if pending_source is not None:
            translation_set.ignored_strings.append(pending_source)

        return translation_set

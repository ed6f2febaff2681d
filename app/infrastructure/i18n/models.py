"""Translation models for the i18n system.

Defines the data structures produced by the .lang parser and consumed by the
translation lookup engine.
"""

from dataclasses import dataclass, field
from typing import Dict, List

OK_MARKER = "{ok}"


@dataclass
class TranslationSet:
    """Parsed content of one or more locale files.

    Attributes:
        activated: Whether the file is tagged as active for production.
        strings: Mapping of source string -> translated string.
        ignored_strings: Source strings found without a translation line.
    """

    activated: bool = False
    strings: Dict[str, str] = field(default_factory=dict)
    ignored_strings: List[str] = field(default_factory=list)

    @property
    def errors(self) -> Dict[str, List[str]]:
        """Return parse errors in the {"ignoredstrings": [...]} layout."""
        return {"ignoredstrings": list(self.ignored_strings)}

    def merge(self, other: "TranslationSet") -> None:
        """Merge another set's strings into this one.

        Later entries override earlier ones.

        Args:
            other: TranslationSet to merge.
        """
        self.strings.update(other.strings)


def clean_string(value: str) -> str:
    """Remove the {ok} marker and surrounding whitespace from a translation.

    The {ok} marker is translator metadata and never reaches API output.
    Lookups and completeness checks both work on the sanitized value.

    Args:
        value: Raw translated string.

    Returns:
        Sanitized string.
    """
    return value.replace(OK_MARKER, "").strip()

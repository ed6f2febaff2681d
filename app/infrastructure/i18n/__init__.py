"""i18n system - locale file parsing and translation lookup.

Main components:
- models: TranslationSet and string sanitizing
- dotlang: DotLangParser for .lang files
- translate: Translate lookup and completeness checks
- factory: TranslationFactory read-through cache
"""

from infrastructure.i18n.dotlang import DotLangParseError, DotLangParser
from infrastructure.i18n.factory import TranslationFactory, create_translation_factory
from infrastructure.i18n.models import TranslationSet, clean_string
from infrastructure.i18n.translate import Translate

__all__ = [
    "TranslationSet",
    "clean_string",
    "DotLangParser",
    "DotLangParseError",
    "Translate",
    "TranslationFactory",
    "create_translation_factory",
]

"""Tests for infrastructure.i18n.factory."""

from unittest.mock import MagicMock, patch

import pytest

from infrastructure.i18n import (
    DotLangParser,
    Translate,
    TranslationFactory,
    create_translation_factory,
)
from tests.factories.stores import write_lang_file


@pytest.fixture
def locales(tmp_path):
    root = tmp_path / "locales"
    write_lang_file(root, "en-US", "main.lang", {"Hello": "Hello"})
    write_lang_file(root, "fr", "main.lang", {"Hello": "Bonjour"}, active=True)
    return root


@pytest.mark.unit
class TestTranslationFactory:
    def test_get_returns_translate(self, locales):
        factory = TranslationFactory(locales)
        translate = factory.get("fr", "main.lang")
        assert isinstance(translate, Translate)
        assert translate.get("Hello") == "Bonjour"
        assert translate.reference_locale == "en-US"

    def test_get_is_cached(self, locales):
        factory = TranslationFactory(locales)
        assert factory.get("fr", "main.lang") is factory.get("fr", "main.lang")
        assert factory.get("fr", ["main.lang"]) is factory.get("fr", ["main.lang"])

    def test_single_file_and_list_are_distinct(self, locales):
        factory = TranslationFactory(locales)
        single = factory.get("fr", "main.lang")
        listed = factory.get("fr", ["main.lang"])
        assert single is not listed
        assert single.translations.activated is True
        assert listed.translations.activated is False

    def test_cache_keys(self, locales):
        factory = TranslationFactory(locales)
        factory.get("fr", "main.lang")
        factory.get("fr", ("main.lang", "extra.lang"))
        assert set(factory.cache) == {
            ("fr", ("main.lang",), False),
            ("fr", ("main.lang", "extra.lang"), True),
        }

    def test_files_are_parsed_once(self, locales):
        parser = MagicMock(wraps=DotLangParser())
        factory = TranslationFactory(locales, parser=parser)
        factory.get("fr", "main.lang")
        factory.get("fr", "main.lang")
        # locale file and reference file
        assert parser.parse.call_count == 2

    def test_concurrent_miss_keeps_first_instance(self, locales):
        factory = TranslationFactory(locales)
        first = factory.get("fr", "main.lang")
        factory.clear_cache()

        def _racing_translate(*args, **kwargs):
            # Another request stored its instance while this one was parsing
            factory.cache[("fr", ("main.lang",), False)] = first
            return MagicMock()

        with patch("infrastructure.i18n.factory.Translate", side_effect=_racing_translate):
            assert factory.get("fr", "main.lang") is first
        assert factory.cache == {("fr", ("main.lang",), False): first}

    def test_without_cache(self, locales):
        factory = TranslationFactory(locales, use_cache=False)
        assert factory.get("fr", "main.lang") is not factory.get("fr", "main.lang")
        assert factory.cache == {}

    def test_clear_cache(self, locales):
        factory = TranslationFactory(locales)
        first = factory.get("fr", "main.lang")
        factory.clear_cache()
        assert factory.cache == {}
        assert factory.get("fr", "main.lang") is not first

    def test_custom_reference_locale(self, locales):
        write_lang_file(locales, "en-GB", "main.lang", {"Hello": "Hello", "Colour": "Colour"})
        factory = TranslationFactory(locales, reference_locale="en-GB")
        assert not factory.get("fr", "main.lang").is_file_translated()

    def test_missing_locales_path_is_logged(self, tmp_path):
        with patch("infrastructure.i18n.factory.logger") as mock_logger:
            TranslationFactory(tmp_path / "missing")
        mock_logger.warning.assert_called_once_with(
            "locales_path_not_found", locales_path=str(tmp_path / "missing")
        )


@pytest.mark.unit
class TestCreateTranslationFactory:
    def test_explicit_arguments(self, locales):
        factory = create_translation_factory(
            locales_path=locales, reference_locale="fr", use_cache=False
        )
        assert factory.locales_path == locales
        assert factory.reference_locale == "fr"
        assert factory.use_cache is False

    def test_defaults_from_settings(self, locales):
        with patch("infrastructure.i18n.factory.settings") as mock_settings:
            mock_settings.stores.LOCALES_PATH = locales
            mock_settings.stores.REFERENCE_LOCALE = "en-US"
            factory = create_translation_factory()
        assert factory.locales_path == locales
        assert factory.reference_locale == "en-US"
        assert factory.use_cache is True

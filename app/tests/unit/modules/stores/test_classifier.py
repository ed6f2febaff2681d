"""Tests for modules.stores.classifier."""

from unittest.mock import MagicMock

import pytest

from modules.stores.classifier import classify
from modules.stores.models import PathParameters, QueryType


def _parameters(*segments):
    return PathParameters(segments=tuple(segments))


@pytest.mark.unit
class TestClassify:
    def test_translation_query(self, catalog):
        query = classify(_parameters("fx_android", "translation", "beta", "fr"), catalog)
        assert query.service == "translation"
        assert query.query_type == QueryType.PRODUCT
        assert query.product == "fx_android"
        assert query.store == "google"
        assert query.channel == "beta"
        assert query.locale == "fr"

    @pytest.mark.parametrize("service", ["localesmapping", "storelocales"])
    def test_store_services(self, catalog, service):
        query = classify(_parameters("apple", service), catalog)
        assert query.query_type == QueryType.STORE
        assert query.store == "apple"
        assert query.product == ""

    def test_legacy_product_id_is_updated(self, catalog):
        query = classify(_parameters("firefox_android", "done", "release"), catalog)
        assert query.product == "fx_android"
        assert query.store == "google"

    def test_unknown_product_keeps_its_id(self, catalog):
        query = classify(_parameters("thunderbird", "done", "release"), catalog)
        assert query.product == "thunderbird"
        assert query.store == ""

    def test_locale_only_for_translation(self, catalog):
        query = classify(_parameters("fx_android", "listing", "beta", "fr"), catalog)
        assert query.locale is None
        assert query.channel == "beta"

    def test_missing_segments_are_unset(self, catalog):
        query = classify(_parameters("fx_android"), catalog)
        assert query.service is None
        assert query.query_type == QueryType.PRODUCT
        assert query.channel is None
        assert query.locale is None

    def test_no_segments(self):
        catalog = MagicMock()
        query = classify(_parameters(), catalog)
        assert query.product == ""
        assert query.store == ""
        catalog.get_updated_product_code.assert_not_called()

    def test_store_query_does_not_resolve_product(self):
        catalog = MagicMock()
        classify(_parameters("google", "localesmapping"), catalog)
        catalog.get_updated_product_code.assert_not_called()
        catalog.get_product_store.assert_not_called()

    def test_as_dict(self, catalog):
        query = classify(_parameters("fx_android", "translation", "beta", "fr"), catalog)
        assert query.as_dict() == {
            "service": "translation",
            "product": "fx_android",
            "store": "google",
            "channel": "beta",
            "locale": "fr",
        }

    def test_as_dict_skips_unset_fields(self, catalog):
        query = classify(_parameters("apple", "storelocales"), catalog)
        assert query.as_dict() == {
            "service": "storelocales",
            "product": "",
            "store": "apple",
        }

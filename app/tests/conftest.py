import pytest

from modules.stores import APIVersions
from tests.factories.stores import make_catalog, make_catalog_data, write_lang_file

RELEASE_LISTING = "fx_android/description_release.lang"
RELEASE_WHATSNEW = "fx_android/whatsnew/android_release.lang"
BETA_LISTING = "fx_android/description_beta.lang"


@pytest.fixture
def catalog_data():
    return make_catalog_data()


@pytest.fixture
def catalog(catalog_data):
    return make_catalog(catalog_data)


@pytest.fixture
def api_versions():
    return APIVersions(supported=("v1",), current="v1")


@pytest.fixture
def locales_dir(tmp_path):
    """Create a locales tree for fx_android.

    - fr: release listing, release whatsnew and beta listing fully translated
    - de: release listing has one string identical to English, no whatsnew
    - it: no files at all
    """
    locales = tmp_path / "locales"

    write_lang_file(
        locales,
        "en-US",
        RELEASE_LISTING,
        {"Firefox Browser": "Firefox Browser", "Fast and private": "Fast and private"},
        active=True,
    )
    write_lang_file(
        locales,
        "fr",
        RELEASE_LISTING,
        {"Firefox Browser": "Navigateur Firefox", "Fast and private": "Rapide et privé"},
        active=True,
    )
    write_lang_file(
        locales,
        "de",
        RELEASE_LISTING,
        {"Firefox Browser": "Firefox-Browser", "Fast and private": "Fast and private"},
    )

    write_lang_file(locales, "en-US", RELEASE_WHATSNEW, {"Faster tabs": "Faster tabs"})
    write_lang_file(locales, "fr", RELEASE_WHATSNEW, {"Faster tabs": "Onglets plus rapides"})

    write_lang_file(locales, "en-US", BETA_LISTING, {"Beta browser": "Beta browser"})
    write_lang_file(locales, "fr", BETA_LISTING, {"Beta browser": "Navigateur bêta"})

    return locales

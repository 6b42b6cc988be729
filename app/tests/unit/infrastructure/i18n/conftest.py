"""Feature-level fixtures for i18n system tests.

Provides locale data, trees and pre-wired translation components.
"""

import json

import pytest

from tests.factories.i18n import (
    make_locale_data,
    make_locale_tree,
    make_translation_service,
    make_translator,
)


@pytest.fixture
def locale_data():
    """Sample parsed locale data covering every directive kind."""
    return make_locale_data()


@pytest.fixture
def locale_tree(locale_data):
    """LocaleTree built from locale_data."""
    return make_locale_tree(locale_data)


@pytest.fixture
def translator():
    """Translator with missing-key logging disabled."""
    return make_translator()


@pytest.fixture
def service(locale_data):
    """TranslationService with locale_data installed."""
    return make_translation_service(locale_data)


@pytest.fixture
def russian_data():
    """Russian locale data exercising the three-form plural rule."""
    return {
        "apples": "{{count}} {{count.plural(яблоко, яблока, яблок)}}",
        "files": {
            "deleted": "Удалено {{n}} {{n.plural(файл, файла, файлов)}}",
        },
    }


@pytest.fixture
def locale_json(locale_data):
    """locale_data serialized as a JSON document."""
    return json.dumps(locale_data, ensure_ascii=False, indent=2)

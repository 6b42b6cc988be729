"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_locale_data,
    make_locale_tree,
    make_translation_service,
    make_translator,
)

__all__ = [
    "make_locale_data",
    "make_locale_tree",
    "make_translation_service",
    "make_translator",
]

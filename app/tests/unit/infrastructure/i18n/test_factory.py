"""Tests for infrastructure.i18n.factory module."""

from infrastructure.i18n.factory import create_translation_service, create_translator


class TestFactory:
    """Tests for i18n factory functions."""

    def test_create_translator_uses_settings(self, settings):
        """create_translator() applies i18n settings."""
        translator = create_translator(settings)
        assert translator.expander.max_depth == 5
        assert translator.expander.max_expansions == 40
        assert translator.expander.log_missing_keys is False

    def test_create_translation_service_empty(self, settings):
        """Without a tree the service starts empty."""
        service = create_translation_service(settings=settings)
        assert service.store.is_empty
        assert service.translate("a") == ""

    def test_create_translation_service_preloaded(self, settings):
        """A tree passed to the factory is installed."""
        service = create_translation_service(settings=settings, tree={"a": "b"})
        assert service.translate("a") == "b"

"""Tests for infrastructure.i18n.service module."""

import pytest

from infrastructure.i18n import (
    FormatSpecError,
    LocaleTree,
    TranslationService,
    UnsupportedFormCountError,
)
from infrastructure.i18n.store import LocalizationStore
from infrastructure.i18n.translator import Translator


class TestTranslationService:
    """Tests for TranslationService."""

    def test_translate_before_set_returns_empty(self):
        """An empty service resolves every key to ""."""
        service = TranslationService()
        assert service.translate("anything") == ""
        assert service.translate("a.b", {"n": 1}) == ""

    def test_translate_simple(self, service):
        """translate() resolves simple and nested keys."""
        assert service.translate("simpleKey") == "Simple text"
        assert service.translate("nested.key") == "Nested text"

    def test_translate_reference(self, service):
        """translate() expands references."""
        assert service.translate("keyWithReference") == "Reference: Nested text"

    def test_translate_replacements(self, service):
        """translate() interpolates replacements."""
        assert service.translate("keyWithReplacements", {"name": "Alice"}) == "Name: Alice"

    @pytest.mark.parametrize(
        "count,expected", [(1, "1 apple"), (2, "2 apples"), (5, "5 apples")]
    )
    def test_translate_plural(self, service, count, expected):
        """translate() pluralizes by count."""
        assert service.translate("keyWithPlural", {"count": count}) == expected

    def test_translate_formatted(self, service):
        """translate() applies format specs."""
        assert service.translate("formattedKey", {"number": 3.14159}) == "Number: 3.14"

    def test_translate_arrays(self, service):
        """translate() joins array leaves."""
        assert service.translate("arrayKey", {"number": 3}) == "value1, value2, value3"
        assert (
            service.translate("arrayKey2", {"number": 3.12384}) == "3.12, яблок, test2"
        )

    def test_translate_missing_key(self, service):
        """translate() returns "" for absent keys."""
        assert service.translate("nonExistentKey") == ""

    def test_t_alias(self, service):
        """t() is an alias of translate()."""
        assert service.t("keyWithReplacements", {"name": "Bob"}) == "Name: Bob"

    def test_russian_plurals(self, russian_data):
        """Three-form plurals follow the Slavic rule end to end."""
        service = TranslationService()
        service.set(russian_data)
        assert service.translate("apples", {"count": 21}) == "21 яблоко"
        assert service.translate("apples", {"count": 3}) == "3 яблока"
        assert service.translate("apples", {"count": 11}) == "11 яблок"
        assert service.translate("files.deleted", {"n": 1.5}) == "Удалено 1.5 файлов"

    def test_scenarios(self):
        """Documented behavior on minimal trees."""
        service = TranslationService()

        service.set({"a": "X {{n}}"})
        assert service.translate("a", {"n": 5}) == "X 5"

        service.set({"a": "{{v.format(%.2f)}}"})
        assert service.translate("a", {"v": 3.14159}) == "3.14"

        service.set({"a": "{{c}} item{{c.plural(_, s)}}"})
        assert service.translate("a", {"c": 1}) == "1 item"
        assert service.translate("a", {"c": 2}) == "2 items"

        service.set({"a": "see $t(b)", "b": "there"})
        assert service.translate("a") == "see there"

    def test_self_reference(self):
        """A self-referencing key does not recurse forever."""
        service = TranslationService()
        service.set({"self": "$t(self)"})
        assert service.translate("self") == ""

    def test_format_errors_propagate(self):
        """Format spec errors reach the caller."""
        service = TranslationService()
        service.set({"a": "{{v.format(%d)}}"})
        with pytest.raises(FormatSpecError):
            service.translate("a", {"v": "x"})

    def test_float_under_integer_format_raises(self):
        """A float rendered through %d raises instead of truncating."""
        service = TranslationService()
        service.set({"a": "{{v.format(%d)}}"})
        with pytest.raises(FormatSpecError):
            service.translate("a", {"v": 3.7})
        assert service.translate("a", {"v": 3}) == "3"

    def test_form_count_errors_propagate_from_references(self):
        """Errors raised inside a referenced key reach the caller."""
        service = TranslationService()
        service.set({"a": "see $t(b)", "b": "{{n.plural(a, b, c, d, e)}}"})
        with pytest.raises(UnsupportedFormCountError):
            service.translate("a", {"n": 1})

    def test_set_replaces_tree(self, service):
        """set() swaps the whole tree."""
        service.set({"only": "this"})
        assert service.translate("simpleKey") == ""
        assert service.translate("only") == "this"

    def test_current(self, service):
        """current() returns the installed tree."""
        assert isinstance(service.current(), LocaleTree)
        assert service.current() is service.store.current()

    def test_has_message(self, service):
        """has_message() reports resolvable keys."""
        assert service.has_message("nested.deeper.leaf")
        assert not service.has_message("nested.deeper")

    def test_independent_services(self):
        """Services do not share trees."""
        first = TranslationService()
        second = TranslationService()
        first.set({"k": "first"})
        second.set({"k": "second"})
        assert first.translate("k") == "first"
        assert second.translate("k") == "second"

    def test_injected_components(self):
        """Injected translator and store are used."""
        translator = Translator(log_missing_keys=False)
        store = LocalizationStore()
        store.set({"k": "v"})
        service = TranslationService(translator=translator, store=store)
        assert service.translator is translator
        assert service.store is store
        assert service.translate("k") == "v"

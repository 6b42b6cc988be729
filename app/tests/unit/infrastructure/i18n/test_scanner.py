"""Tests for infrastructure.i18n.scanner module."""

from infrastructure.i18n.scanner import (
    DirectiveKind,
    Placeholder,
    Reference,
    scan_placeholders,
    scan_references,
    substitute,
)


class TestScanPlaceholders:
    """Tests for scan_placeholders()."""

    def test_plain_text(self):
        """Text without directives is a single literal."""
        assert scan_placeholders("Hello") == ["Hello"]
        assert scan_placeholders("") == []

    def test_plain_placeholder(self):
        """{{name}} parses as a plain placeholder."""
        assert scan_placeholders("Hi {{name}}!") == [
            "Hi ",
            Placeholder("{{name}}", "name", DirectiveKind.PLAIN),
            "!",
        ]

    def test_format_placeholder(self):
        """{{name.format(SPEC)}} carries SPEC as its argument."""
        tokens = scan_placeholders("{{v.format(%.2f)}}")
        assert tokens == [
            Placeholder("{{v.format(%.2f)}}", "v", DirectiveKind.FORMAT, "%.2f")
        ]

    def test_plural_placeholder(self):
        """{{name.plural(FORMS)}} carries FORMS as its argument."""
        tokens = scan_placeholders("item{{c.plural(_, s)}}")
        assert tokens == [
            "item",
            Placeholder("{{c.plural(_, s)}}", "c", DirectiveKind.PLURAL, "_, s"),
        ]

    def test_dotted_name(self):
        """Names may contain dots."""
        assert scan_placeholders("{{user.name}}")[0].name == "user.name"
        assert scan_placeholders("{{user.count.plural(a, b)}}")[0].name == "user.count"

    def test_unknown_method_is_literal(self):
        """Unknown methods are not directives."""
        assert scan_placeholders("{{v.upper()}}") == ["{{v.upper()}}"]

    def test_unterminated_is_literal(self):
        """Unterminated placeholders stay literal."""
        assert scan_placeholders("{{name") == ["{{name"]
        assert scan_placeholders("{{v.format(%d}}") == ["{{v.format(%d}}"]
        assert scan_placeholders("{{v.format(%d)}") == ["{{v.format(%d)}"]

    def test_empty_name_is_literal(self):
        """{{}} is not a directive."""
        assert scan_placeholders("{{}}") == ["{{}}"]

    def test_spec_ends_at_first_paren(self):
        """Arguments end at the first closing parenthesis."""
        assert scan_placeholders("{{v.format(a(b))}}") == ["{{v.format(a(b))}}"]

    def test_extra_brace_before_placeholder(self):
        """A stray opening brace does not hide the placeholder after it."""
        tokens = scan_placeholders("{{{name}}}")
        assert tokens == [
            "{",
            Placeholder("{{name}}", "name", DirectiveKind.PLAIN),
            "}",
        ]

    def test_adjacent_placeholders(self):
        """Adjacent directives are all found."""
        tokens = scan_placeholders("{{a}}{{b}}")
        assert [t.name for t in tokens] == ["a", "b"]


class TestScanReferences:
    """Tests for scan_references()."""

    def test_reference(self):
        """$t(key) parses as a reference."""
        assert scan_references("see $t(a.b) now") == [
            "see ",
            Reference("$t(a.b)", "a.b"),
            " now",
        ]

    def test_empty_reference_is_literal(self):
        """$t() is not a reference."""
        assert scan_references("$t()") == ["$t()"]

    def test_unterminated_reference_is_literal(self):
        """$t( without a closing parenthesis is literal."""
        assert scan_references("x $t(a") == ["x $t(a"]

    def test_multiple_references(self):
        """Every reference is found."""
        tokens = scan_references("$t(a) and $t(b)")
        assert [t.key for t in tokens if isinstance(t, Reference)] == ["a", "b"]


class TestSubstitute:
    """Tests for substitute()."""

    def test_none_keeps_raw_text(self):
        """Returning None keeps the directive's source text."""
        tokens = scan_placeholders("{{a}} {{b}}")
        result = substitute(tokens, lambda t: "A" if t.name == "a" else None)
        assert result == "A {{b}}"

    def test_replacement_is_not_rescanned(self):
        """Inserted text is not scanned again."""
        tokens = scan_placeholders("{{a}}")
        assert substitute(tokens, lambda t: "{{a}}") == "{{a}}"

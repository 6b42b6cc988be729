"""Translation pipeline: placeholder substitution and reference expansion.

A raw template goes through three ordered passes, each feeding the next:

1. interpolation of ``{{name}}`` and ``{{name.format(SPEC)}}``
2. pluralization of ``{{count.plural(f1, f2, ...)}}``
3. expansion of ``$t(other.key)`` references through the same pipeline
"""

from typing import Callable, FrozenSet, Optional

from infrastructure.i18n.formatting import ValueFormatter
from infrastructure.i18n.models import KeyPath, LocaleTree, ReplacementMap
from infrastructure.i18n.plurals import PluralSelector, numeric_value, parse_forms
from infrastructure.i18n.resolvers import KeyResolver
from infrastructure.i18n.scanner import (
    DirectiveKind,
    PLACEHOLDER_OPEN,
    scan_placeholders,
    scan_references,
    substitute,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

DEFAULT_MAX_REFERENCE_DEPTH = 10
DEFAULT_MAX_REFERENCE_EXPANSIONS = 1000


class ExpansionBudget:
    """Counts the reference expansions left for one translate call."""

    def __init__(self, limit: int):
        self.remaining = limit

    def take(self) -> bool:
        if self.remaining <= 0:
            return False
        self.remaining -= 1
        return True


class PlaceholderEngine:
    """Applies placeholder directives to a raw template string.

    Attributes:
        formatter: ValueFormatter used for interpolation.
        selector: PluralSelector used for plural directives.
    """

    def __init__(
        self,
        formatter: Optional[ValueFormatter] = None,
        selector: Optional[PluralSelector] = None,
    ):
        self.formatter = formatter or ValueFormatter()
        self.selector = selector or PluralSelector()

    def apply(
        self,
        raw: str,
        replacements: Optional[ReplacementMap] = None,
        expand: Optional[Callable[[str], str]] = None,
    ) -> str:
        """Run the interpolation, plural and reference passes over raw.

        Args:
            raw: Template string resolved from the locale tree.
            replacements: Values for placeholders, keyed by name.
            expand: Callback resolving a referenced key to text. References are
                left as-is when not provided.

        Returns:
            The rendered string.

        Raises:
            FormatSpecError: If a format directive does not fit its value.
            UnsupportedFormCountError: If a plural directive has 0, 1 or 5+ forms.
            PluralCountError: If a plural count is a non-numeric string.
        """
        replacements = replacements or {}
        text = self.interpolate(raw, replacements)
        text = self.pluralize(text, replacements)
        if expand is not None:
            text = self.expand_references(text, expand)
        return text

    def interpolate(self, text: str, replacements: ReplacementMap) -> str:
        """Replace plain and formatted placeholders.

        A name that has at least one ``{{name.format(`` occurrence in text is
        rendered only through its format directives; its plain ``{{name}}``
        occurrences are left untouched.
        """
        if not replacements:
            return text

        formatted_names = {
            name
            for name in replacements
            if f"{PLACEHOLDER_OPEN}{name}.{DirectiveKind.FORMAT.value}(" in text
        }

        def replace(token):
            if token.name not in replacements:
                return None
            value = replacements[token.name]
            if token.kind is DirectiveKind.FORMAT:
                return self.formatter.render(value, token.argument)
            if token.kind is DirectiveKind.PLAIN and token.name not in formatted_names:
                return self.formatter.render(value)
            return None

        return substitute(scan_placeholders(text), replace)

    def pluralize(self, text: str, replacements: ReplacementMap) -> str:
        """Replace plural directives whose count name has a replacement."""
        if not replacements:
            return text

        def replace(token):
            if token.kind is not DirectiveKind.PLURAL:
                return None
            if token.name not in replacements:
                logger.debug("plural_count_missing", name=token.name)
                return None
            count = numeric_value(replacements[token.name])
            return self.selector.select(count, parse_forms(token.argument))

        return substitute(scan_placeholders(text), replace)

    @staticmethod
    def expand_references(text: str, expand: Callable[[str], str]) -> str:
        """Replace every ``$t(key)`` with expand(key)."""
        return substitute(scan_references(text), lambda ref: expand(ref.key))


class ReferenceExpander:
    """Resolves keys and expands ``$t(...)`` references recursively.

    Each expansion carries the set of keys already being expanded on the
    current call chain. A reference to one of them, or one nested deeper than
    max_depth, resolves to the empty string. All expansions made while
    rendering one top-level key share a budget of max_expansions, which bounds
    trees where every key fans out to several others.

    Attributes:
        resolver: KeyResolver for key lookups.
        engine: PlaceholderEngine applied to every resolved key.
        max_depth: Maximum reference nesting depth.
        max_expansions: Maximum number of references expanded per top-level key.
        log_missing_keys: Whether unresolved keys are logged as warnings.
    """

    def __init__(
        self,
        resolver: KeyResolver,
        engine: PlaceholderEngine,
        max_depth: int = DEFAULT_MAX_REFERENCE_DEPTH,
        max_expansions: int = DEFAULT_MAX_REFERENCE_EXPANSIONS,
        log_missing_keys: bool = True,
    ):
        self.resolver = resolver
        self.engine = engine
        self.max_depth = max_depth
        self.max_expansions = max_expansions
        self.log_missing_keys = log_missing_keys

    def resolve(
        self,
        tree: LocaleTree,
        key: str,
        replacements: Optional[ReplacementMap] = None,
        active_keys: FrozenSet[str] = frozenset(),
        depth: int = 0,
        budget: Optional[ExpansionBudget] = None,
    ) -> str:
        """Resolve key and run it through the full pipeline.

        Args:
            tree: Locale tree snapshot.
            key: Dot-separated key.
            replacements: Placeholder values, shared by nested references.
            active_keys: Keys being expanded on the current call chain.
            depth: Current reference nesting depth.
            budget: Expansions left for the current top-level key. A fresh
                budget is started when not given.

        Returns:
            Rendered string, or "" if key does not resolve.
        """
        raw = self.resolver.resolve(tree, KeyPath.parse(key))
        if raw is None:
            if self.log_missing_keys:
                logger.warning("translation_key_not_found", key=key, depth=depth)
            return ""

        if budget is None:
            budget = ExpansionBudget(self.max_expansions)
        chain = active_keys | {key}
        return self.engine.apply(
            raw,
            replacements,
            expand=lambda ref: self.expand(
                tree, ref, replacements, chain, depth + 1, budget
            ),
        )

    def expand(
        self,
        tree: LocaleTree,
        key: str,
        replacements: Optional[ReplacementMap],
        active_keys: FrozenSet[str],
        depth: int,
        budget: ExpansionBudget,
    ) -> str:
        """Expand a single ``$t(key)`` reference."""
        if key in active_keys:
            logger.warning(
                "reference_cycle_detected", key=key, chain=sorted(active_keys)
            )
            return ""
        if depth > self.max_depth:
            logger.warning(
                "reference_depth_exceeded", key=key, max_depth=self.max_depth
            )
            return ""
        if not budget.take():
            logger.warning(
                "reference_budget_exhausted",
                key=key,
                max_expansions=self.max_expansions,
            )
            return ""
        return self.resolve(tree, key, replacements, active_keys, depth, budget)


class Translator:
    """Translates keys against a locale tree snapshot.

    Wires KeyResolver, PlaceholderEngine and ReferenceExpander together.
    Holds no tree of its own, so one Translator can serve any number of trees
    and threads.

    Example:
        translator = Translator()
        tree = LocaleTree.from_data({"cart": "{{n}} item{{n.plural(_, s)}}"})
        translator.translate(tree, "cart", {"n": 2})  # "2 items"
    """

    def __init__(
        self,
        resolver: Optional[KeyResolver] = None,
        engine: Optional[PlaceholderEngine] = None,
        max_reference_depth: int = DEFAULT_MAX_REFERENCE_DEPTH,
        max_reference_expansions: int = DEFAULT_MAX_REFERENCE_EXPANSIONS,
        log_missing_keys: bool = True,
    ):
        self.resolver = resolver or KeyResolver()
        self.engine = engine or PlaceholderEngine()
        self.expander = ReferenceExpander(
            self.resolver,
            self.engine,
            max_depth=max_reference_depth,
            max_expansions=max_reference_expansions,
            log_missing_keys=log_missing_keys,
        )

    def translate(
        self,
        tree: LocaleTree,
        key: str,
        replacements: Optional[ReplacementMap] = None,
    ) -> str:
        """Resolve key in tree and render it with replacements."""
        return self.expander.resolve(tree, key, replacements)

    def has_message(self, tree: LocaleTree, key: str) -> bool:
        """Check whether key resolves to a string in tree."""
        return self.resolver.exists(tree, KeyPath.parse(key))

"""i18n system - locale key resolution and message rendering.

Resolves dotted keys against an immutable locale tree and renders the result
with interpolation, value formatting, pluralization and $t(...) references.

Main components:
- models: LocaleTree, KeyPath, replacement value types
- resolvers: KeyResolver for key path traversal
- formatting: ValueFormatter for printf-style value rendering
- plurals: PluralSelector for 2, 3 and 4 form plural rules
- translator: PlaceholderEngine, ReferenceExpander and Translator
- store: LocalizationStore holding the active tree
- service: TranslationService, the public lookup API
- loader: parse_locale_tree for JSON/YAML documents
"""

from infrastructure.i18n.exceptions import (
    FormatSpecError,
    I18nError,
    PluralCountError,
    UnsupportedFormCountError,
)
from infrastructure.i18n.formatting import ValueFormatter
from infrastructure.i18n.loader import parse_locale_tree
from infrastructure.i18n.models import EMPTY_TREE, KeyPath, LocaleTree
from infrastructure.i18n.plurals import PluralSelector
from infrastructure.i18n.resolvers import KeyResolver
from infrastructure.i18n.service import TranslationService
from infrastructure.i18n.store import LocalizationStore
from infrastructure.i18n.translator import (
    PlaceholderEngine,
    ReferenceExpander,
    Translator,
)

__all__ = [
    "EMPTY_TREE",
    "KeyPath",
    "LocaleTree",
    "KeyResolver",
    "ValueFormatter",
    "PluralSelector",
    "PlaceholderEngine",
    "ReferenceExpander",
    "Translator",
    "LocalizationStore",
    "TranslationService",
    "parse_locale_tree",
    "I18nError",
    "FormatSpecError",
    "UnsupportedFormCountError",
    "PluralCountError",
]

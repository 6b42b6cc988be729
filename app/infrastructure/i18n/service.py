"""Translation service for dependency injection.

Provides the public lookup API: install a locale tree, translate keys.
"""

from typing import Any, Optional, Union

from infrastructure.i18n.models import LocaleTree, ReplacementMap
from infrastructure.i18n.store import LocalizationStore
from infrastructure.i18n.translator import Translator


class TranslationService:
    """Class-based translation service.

    Owns a LocalizationStore and a Translator. Each translate() call takes one
    snapshot of the store, so a concurrent set() never produces a mix of old
    and new entries in a single result.

    Usage:
        # Via the application-scoped provider
        from infrastructure.services import get_translation_service

        service = get_translation_service()
        service.set(parse_locale_tree(text))
        service.translate("cart.summary", {"count": 3})

        # Direct instantiation (tests, multiple independent trees)
        service = TranslationService()
        service.set({"greeting": "Hello, {{name}}"})
        service.translate("greeting", {"name": "Ada"})  # "Hello, Ada"
    """

    def __init__(
        self,
        translator: Optional[Translator] = None,
        store: Optional[LocalizationStore] = None,
    ):
        """Initialize translation service.

        Args:
            translator: Optional pre-configured Translator instance.
            store: Optional LocalizationStore; a new empty store by default.
        """
        self._translator = translator or Translator()
        self._store = store or LocalizationStore()

    def set(self, tree: Union[LocaleTree, Any]) -> None:
        """Install a new locale tree.

        Args:
            tree: LocaleTree, or already-parsed locale data.
        """
        self._store.set(tree)

    def current(self) -> LocaleTree:
        """Return the installed locale tree snapshot."""
        return self._store.current()

    def translate(
        self,
        key: str,
        replacements: Optional[ReplacementMap] = None,
    ) -> str:
        """Resolve and render a translated message.

        Args:
            key: Dot-separated key (e.g. "cart.summary").
            replacements: Optional placeholder values.

        Returns:
            Rendered message, or "" if the key does not resolve.

        Raises:
            FormatSpecError: If a format directive does not fit its value.
            UnsupportedFormCountError: If a plural directive has an unsupported
                number of forms.
            PluralCountError: If a plural count is not numeric.
        """
        return self._translator.translate(self._store.current(), key, replacements)

    t = translate

    def has_message(self, key: str) -> bool:
        """Check if key resolves to a message in the installed tree."""
        return self._translator.has_message(self._store.current(), key)

    @property
    def store(self) -> LocalizationStore:
        """Access the underlying LocalizationStore."""
        return self._store

    @property
    def translator(self) -> Translator:
        """Access the underlying Translator instance."""
        return self._translator

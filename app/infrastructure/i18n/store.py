"""Holder of the active locale tree.

Readers take a snapshot with current() and work on it without locking.
Writers replace the whole tree with a single reference swap.
"""

import threading
from typing import Any, Union

from infrastructure.i18n.models import EMPTY_TREE, LocaleTree, is_object
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class LocalizationStore:
    """Thread-safe store for the current LocaleTree.

    Starts empty: until the first set(), current() returns EMPTY_TREE and
    every lookup resolves to the empty string.

    Example:
        store = LocalizationStore()
        store.set({"greeting": "Hello"})
        tree = store.current()  # snapshot, safe to use after later set() calls
    """

    def __init__(self):
        self._tree: LocaleTree = EMPTY_TREE
        self._write_lock = threading.Lock()
        self._version = 0

    def set(self, tree: Union[LocaleTree, Any]) -> None:
        """Install a new locale tree.

        Args:
            tree: LocaleTree, or already-parsed locale data to build one from.
        """
        new_tree = LocaleTree.from_data(tree)
        with self._write_lock:
            self._tree = new_tree
            self._version += 1
            version = self._version
        logger.info(
            "locale_tree_installed",
            version=version,
            top_level_keys=len(new_tree.root) if is_object(new_tree.root) else 0,
        )

    def current(self) -> LocaleTree:
        """Return the installed tree snapshot."""
        return self._tree

    def clear(self) -> None:
        """Return the store to its empty state."""
        with self._write_lock:
            self._tree = EMPTY_TREE
            self._version += 1
        logger.info("locale_tree_cleared")

    @property
    def is_empty(self) -> bool:
        """True if no tree has been installed (or the store was cleared)."""
        return self._tree is EMPTY_TREE

    @property
    def version(self) -> int:
        """Number of set() and clear() calls so far."""
        return self._version

"""Key path resolution over the locale tree.

Walks a dotted key through nested objects and extracts the raw template string
stored at the end of the path.
"""

from typing import Optional

import structlog
from infrastructure.i18n.models import (
    KeyPath,
    LocaleTree,
    is_array,
    is_object,
    is_scalar,
)

logger = structlog.get_logger().bind(component="i18n.resolver")

ARRAY_SEPARATOR = ", "


class KeyResolver:
    """Resolves key paths to raw template strings.

    Resolution never raises: any path that does not end on a scalar or an
    array of scalars resolves to None.

    Example:
        tree = LocaleTree.from_data({"cart": {"title": "Cart", "tags": ["a", "b"]}})
        resolver = KeyResolver()
        resolver.resolve(tree, KeyPath.parse("cart.title"))  # "Cart"
        resolver.resolve(tree, KeyPath.parse("cart.tags"))   # "a, b"
        resolver.resolve(tree, KeyPath.parse("cart"))        # None
    """

    def resolve(self, tree: LocaleTree, key_path: KeyPath) -> Optional[str]:
        """Resolve a key path to its raw string.

        Args:
            tree: Locale tree snapshot.
            key_path: Path to resolve.

        Returns:
            Raw template string, or None if the path does not resolve.
        """
        if not key_path.is_valid:
            logger.debug("invalid_key_path", key=str(key_path))
            return None

        node = tree.root
        for segment in key_path.segments:
            if not is_object(node) or segment not in node:
                logger.debug(
                    "key_segment_not_found", key=str(key_path), segment=segment
                )
                return None
            node = node[segment]

        if is_scalar(node):
            return node

        if is_array(node):
            if not all(is_scalar(item) for item in node):
                logger.debug("array_contains_non_scalar", key=str(key_path))
                return None
            return ARRAY_SEPARATOR.join(node).strip()

        logger.debug("key_does_not_end_on_value", key=str(key_path))
        return None

    def exists(self, tree: LocaleTree, key_path: KeyPath) -> bool:
        """Check whether a key path resolves to a string."""
        return self.resolve(tree, key_path) is not None

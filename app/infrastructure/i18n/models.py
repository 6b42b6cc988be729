"""Locale data models for the i18n system.

Defines the immutable locale tree, key paths and replacement value types.
"""

from dataclasses import dataclass
from datetime import date, time
from types import MappingProxyType
from typing import Any, Mapping, Tuple, Union

# A locale node is an object (mapping), an array (tuple) or a scalar (str).
LocaleNode = Union[Mapping[str, Any], Tuple[Any, ...], str]

ReplacementValue = Union[int, float, str]
ReplacementMap = Mapping[str, ReplacementValue]

KEY_SEPARATOR = "."


def _scalar_text(data: Any) -> str:
    """Text form of a parsed scalar, shared by keys and values.

    YAML yields bools for yes/true keys and dates for ISO-looking values;
    both are stored as text.
    """
    if isinstance(data, str):
        return data
    if isinstance(data, bool):
        return "true" if data else "false"
    if isinstance(data, (int, float)):
        return str(data)
    if data is None:
        return ""
    if isinstance(data, (date, time)):
        return data.isoformat()
    raise TypeError(f"Unsupported locale data type: {type(data).__name__}")


def _freeze(data: Any) -> LocaleNode:
    if isinstance(data, Mapping):
        return MappingProxyType(
            {_scalar_text(k): _freeze(v) for k, v in data.items()}
        )
    if isinstance(data, (list, tuple)):
        return tuple(_freeze(item) for item in data)
    return _scalar_text(data)


def is_object(node: Any) -> bool:
    """Return True if node is an object (mapping) node."""
    return isinstance(node, Mapping)


def is_array(node: Any) -> bool:
    """Return True if node is an array node."""
    return isinstance(node, tuple)


def is_scalar(node: Any) -> bool:
    """Return True if node is a scalar (string) node."""
    return isinstance(node, str)


@dataclass(frozen=True)
class LocaleTree:
    """Immutable tree of locale data.

    Objects are stored as read-only mappings and arrays as tuples, so an
    installed tree can be shared between threads without copying.

    Attributes:
        root: Root node, normally an object node.
    """

    root: LocaleNode

    @classmethod
    def from_data(cls, data: Any) -> "LocaleTree":
        """Build a LocaleTree from already-parsed data.

        Accepts the shapes produced by json.loads or yaml.safe_load. Numbers
        and booleans are stored as their text, dates as ISO 8601 text and None
        as the empty string. Non-string keys are converted the same way.

        Args:
            data: Parsed locale data (usually a dict).

        Returns:
            LocaleTree instance.

        Raises:
            TypeError: If data contains values that are not dicts, lists or scalars.
        """
        if isinstance(data, LocaleTree):
            return data
        return cls(root=_freeze(data))

    def is_empty(self) -> bool:
        """Check whether the tree has no entries."""
        return is_object(self.root) and len(self.root) == 0


EMPTY_TREE = LocaleTree(root=MappingProxyType({}))


@dataclass(frozen=True)
class KeyPath:
    """Dot-separated path identifying a node in the locale tree.

    Attributes:
        segments: Ordered path segments (e.g. ("cart", "items", "count")).
    """

    segments: Tuple[str, ...]

    def __str__(self) -> str:
        """Return full dot-separated key path."""
        return KEY_SEPARATOR.join(self.segments)

    @classmethod
    def parse(cls, key: str) -> "KeyPath":
        """Create a KeyPath by splitting a key on dots.

        Empty segments are kept so that keys like "a..b" address nothing.

        Args:
            key: Dot-separated key (e.g. "cart.items.count").

        Returns:
            KeyPath instance.
        """
        return cls(segments=tuple(key.split(KEY_SEPARATOR)))

    @property
    def is_valid(self) -> bool:
        """True if every segment is non-empty."""
        return all(self.segments)

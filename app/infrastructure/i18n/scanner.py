"""Single-pass scanner for translation directives.

Splits a template string into literal text and directives:

- ``{{name}}``                  plain placeholder
- ``{{name.format(SPEC)}}``     formatted placeholder, SPEC ends at the first ")"
- ``{{name.plural(FORMS)}}``    plural placeholder, FORMS ends at the first ")"
- ``$t(key)``                   reference to another key, key ends at the first ")"

Anything that does not parse as a directive stays literal text. The scanner
never backtracks: each position is examined once from a "{{" or "$t(" opener.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple, Union

PLACEHOLDER_OPEN = "{{"
PLACEHOLDER_CLOSE = "}}"
REFERENCE_OPEN = "$t("
ARGUMENT_OPEN = "("
ARGUMENT_CLOSE = ")"
METHOD_SEPARATOR = "."

# Characters that end a placeholder name
_NAME_STOP = frozenset("{}()")


class DirectiveKind(str, Enum):
    """Kinds of ``{{...}}`` placeholders."""

    PLAIN = "plain"
    FORMAT = "format"
    PLURAL = "plural"


@dataclass(frozen=True)
class Placeholder:
    """A ``{{...}}`` directive.

    Attributes:
        raw: Exact source text of the directive.
        name: Replacement name (e.g. "count").
        kind: Placeholder kind.
        argument: Text between the parentheses for format and plural kinds.
    """

    raw: str
    name: str
    kind: DirectiveKind
    argument: Optional[str] = None


@dataclass(frozen=True)
class Reference:
    """A ``$t(key)`` directive."""

    raw: str
    key: str


Token = Union[str, Placeholder, Reference]


def _parse_placeholder(text: str, start: int) -> Optional[Tuple[Placeholder, int]]:
    """Parse a placeholder whose "{{" opener is at start.

    Returns:
        (placeholder, end offset) or None if no directive starts here.
    """
    name_start = start + len(PLACEHOLDER_OPEN)
    pos = name_start
    while pos < len(text) and text[pos] not in _NAME_STOP:
        pos += 1
    head = text[name_start:pos]
    if pos == len(text) or not head:
        return None

    if text.startswith(PLACEHOLDER_CLOSE, pos):
        end = pos + len(PLACEHOLDER_CLOSE)
        return Placeholder(text[start:end], head, DirectiveKind.PLAIN), end

    if text[pos] != ARGUMENT_OPEN:
        return None

    name, separator, method = head.rpartition(METHOD_SEPARATOR)
    if not separator or not name:
        return None
    try:
        kind = DirectiveKind(method)
    except ValueError:
        return None
    if kind is DirectiveKind.PLAIN:
        return None

    close = text.find(ARGUMENT_CLOSE, pos + 1)
    if close == -1 or not text.startswith(PLACEHOLDER_CLOSE, close + 1):
        return None
    end = close + 1 + len(PLACEHOLDER_CLOSE)
    return Placeholder(text[start:end], name, kind, text[pos + 1 : close]), end


def scan_placeholders(text: str) -> List[Token]:
    """Split text into literal chunks and Placeholder tokens."""
    tokens: List[Token] = []
    literal_start = 0
    pos = text.find(PLACEHOLDER_OPEN)
    while pos != -1:
        parsed = _parse_placeholder(text, pos)
        if parsed is None:
            pos = text.find(PLACEHOLDER_OPEN, pos + 1)
            continue
        placeholder, end = parsed
        if pos > literal_start:
            tokens.append(text[literal_start:pos])
        tokens.append(placeholder)
        literal_start = end
        pos = text.find(PLACEHOLDER_OPEN, end)
    if literal_start < len(text):
        tokens.append(text[literal_start:])
    return tokens


def scan_references(text: str) -> List[Token]:
    """Split text into literal chunks and Reference tokens."""
    tokens: List[Token] = []
    literal_start = 0
    pos = text.find(REFERENCE_OPEN)
    while pos != -1:
        key_start = pos + len(REFERENCE_OPEN)
        close = text.find(ARGUMENT_CLOSE, key_start)
        if close == -1:
            break
        if close == key_start:
            pos = text.find(REFERENCE_OPEN, pos + 1)
            continue
        if pos > literal_start:
            tokens.append(text[literal_start:pos])
        tokens.append(Reference(text[pos : close + 1], text[key_start:close]))
        literal_start = close + 1
        pos = text.find(REFERENCE_OPEN, literal_start)
    if literal_start < len(text):
        tokens.append(text[literal_start:])
    return tokens


def substitute(
    tokens: List[Token],
    replace: Callable[[Union[Placeholder, Reference]], Optional[str]],
) -> str:
    """Join tokens back into text, replacing directives.

    Args:
        tokens: Output of scan_placeholders() or scan_references().
        replace: Called for each directive; returning None keeps its raw text.

    Returns:
        The rebuilt string.
    """
    parts = []
    for token in tokens:
        if isinstance(token, str):
            parts.append(token)
            continue
        replacement = replace(token)
        parts.append(token.raw if replacement is None else replacement)
    return "".join(parts)

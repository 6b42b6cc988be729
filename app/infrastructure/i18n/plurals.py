"""Plural form selection.

Chooses one of the forms listed in a ``{{count.plural(f1, f2, ...)}}``
directive. The rule is picked from the number of forms:

- 2 forms: one / other (English and most Germanic and Romance languages)
- 3 forms: one / few / many (Russian, Ukrainian and other Slavic languages)
- 4 forms: one / two / few / other (Arabic-style bucketing)
"""

import math
from typing import List, Sequence

from infrastructure.i18n.exceptions import PluralCountError, UnsupportedFormCountError
from infrastructure.i18n.models import ReplacementValue
from infrastructure.logging import get_module_logger

logger = get_module_logger()

EMPTY_FORM_MARKER = "_"
FORM_SEPARATOR = ","


def parse_forms(text: str) -> List[str]:
    """Split a plural form list into forms.

    Forms are comma-separated and stripped; "_" stands for the empty string.

    Args:
        text: Raw form list (e.g. "_, s" or "яблоко, яблока, яблок").

    Returns:
        List of forms in order.
    """
    forms = []
    for form in text.split(FORM_SEPARATOR):
        form = form.strip()
        forms.append("" if form == EMPTY_FORM_MARKER else form)
    return forms


def numeric_value(value: ReplacementValue) -> float:
    """Convert a replacement value to a plural count.

    Raises:
        PluralCountError: If value is a string that is not a number.
        TypeError: If value is not an int, float or str.
    """
    if isinstance(value, bool):
        raise TypeError("Plural count must be an int, float or str, not bool")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError as e:
            raise PluralCountError(value) from e
    raise TypeError(
        f"Plural count must be an int, float or str, not {type(value).__name__}"
    )


class PluralSelector:
    """Selects a plural form for a count.

    Example:
        selector = PluralSelector()
        selector.select(1, ["item", "items"])                 # "item"
        selector.select(22, ["яблоко", "яблока", "яблок"])    # "яблока"
    """

    def select(self, count: float, forms: Sequence[str]) -> str:
        """Select the form matching count.

        Args:
            count: Numeric count.
            forms: Ordered forms, with "_" already mapped to "".

        Returns:
            The selected form.

        Raises:
            UnsupportedFormCountError: If forms does not hold 2, 3 or 4 entries.
        """
        if len(forms) == 2:
            return forms[self._two_forms(count)]
        if len(forms) == 3:
            return forms[self._three_forms(count)]
        if len(forms) == 4:
            return forms[self._four_forms(count)]

        logger.error(
            "unsupported_plural_form_count",
            form_count=len(forms),
            forms=list(forms),
        )
        raise UnsupportedFormCountError(len(forms))

    @staticmethod
    def _two_forms(count: float) -> int:
        return 0 if count == 1 else 1

    @staticmethod
    def _three_forms(count: float) -> int:
        # is_integer() is False for nan and inf as well as fractions
        if not float(count).is_integer():
            return 2

        # truncated remainder: fmod(-21, 10) is -1, not 9
        last_digit = math.fmod(count, 10)
        last_two_digits = math.fmod(count, 100)

        if last_digit == 1 and last_two_digits != 11:
            return 0
        if 2 <= last_digit <= 4 and not 12 <= last_two_digits <= 14:
            return 1
        return 2

    @staticmethod
    def _four_forms(count: float) -> int:
        if count == 1:
            return 0
        if count == 2:
            return 1
        if 2 < count <= 10:
            return 2
        return 3

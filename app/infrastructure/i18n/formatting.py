"""Value formatting for interpolated placeholders.

Renders replacement values either in their natural text form or through a
printf-style directive taken from ``{{name.format(SPEC)}}`` placeholders.
"""

import re
from typing import List, Optional

from infrastructure.i18n.exceptions import FormatSpecError
from infrastructure.i18n.models import ReplacementValue
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# %[(key)][flags][width][.precision][length]conversion
CONVERSION_PATTERN = re.compile(
    r"%(?:\([^)]*\))?[#0\- +]*(?:\*|\d+)?(?:\.(?:\*|\d+))?[hlL]?(.)?", re.DOTALL
)
INTEGER_CONVERSIONS = frozenset("diuxXoc")


def conversions(spec: str) -> List[str]:
    """Return the conversion characters of every directive in spec.

    Escaped percent signs ("%%") are skipped.
    """
    found = []
    for match in CONVERSION_PATTERN.finditer(spec):
        conversion = match.group(1)
        if conversion != "%":
            found.append(conversion or "")
    return found


class ValueFormatter:
    """Renders replacement values to text.

    Example:
        formatter = ValueFormatter()
        formatter.render(3.14159)          # "3.14159"
        formatter.render(3.14159, "%.2f")  # "3.14"
        formatter.render(42, "%05d")       # "00042"
    """

    def render(self, value: ReplacementValue, spec: Optional[str] = None) -> str:
        """Render a value, optionally applying a printf-style format spec.

        Args:
            value: Replacement value (int, float or str).
            spec: Optional printf-style directive (e.g. "%.2f", "%x", "%-8s").

        Returns:
            Rendered text.

        Raises:
            FormatSpecError: If spec is invalid or incompatible with the value,
                including a float under an integer conversion such as "%d".
            TypeError: If value is not an int, float or str.
        """
        self._check_type(value)
        if spec is None:
            return self.natural(value)

        try:
            if isinstance(value, float):
                self._check_float_conversions(spec)
            return spec % (value,)
        except (TypeError, ValueError) as e:
            logger.error(
                "invalid_format_spec",
                spec=spec,
                value_type=type(value).__name__,
                error=str(e),
            )
            raise FormatSpecError(spec, value, str(e)) from e

    @staticmethod
    def natural(value: ReplacementValue) -> str:
        """Render a value without a format spec.

        Floats use the shortest text that reads back as the same number
        (1/3 renders as "0.3333333333333333"); integral floats drop the
        trailing ".0" (3.0 renders as "3").
        """
        if isinstance(value, float):
            text = repr(value)
            return text[:-2] if text.endswith(".0") else text
        return str(value)

    @staticmethod
    def _check_float_conversions(spec: str) -> None:
        # "%d" % 3.7 truncates to "3" instead of failing
        for conversion in conversions(spec):
            if conversion in INTEGER_CONVERSIONS:
                raise TypeError(
                    f"%{conversion} requires an integer, not float"
                )

    @staticmethod
    def _check_type(value: object) -> None:
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            raise TypeError(
                f"Unsupported replacement value type: {type(value).__name__}"
            )

"""Custom exceptions for the i18n system.

Soft misses (unknown keys, reference cycles, plural directives without a
matching replacement) never raise. The exceptions below signal authoring
mistakes in locale data and are propagated to the translate() caller.
"""


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            service.translate("cart.total", {"amount": 12.5})
        except I18nError as e:
            logger.error("translation_failed", error=str(e))
    """

    pass


class FormatSpecError(I18nError):
    """Raised when a format directive cannot be applied to a value.

    Example:
        >>> ValueFormatter().render("abc", "%d")
        Traceback (most recent call last):
        ...
        FormatSpecError: Cannot apply format spec '%d' to str value 'abc'
    """

    def __init__(self, spec: str, value: object, reason: str = ""):
        self.spec = spec
        self.value = value
        self.reason = reason
        message = (
            f"Cannot apply format spec {spec!r} to "
            f"{type(value).__name__} value {value!r}"
        )
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnsupportedFormCountError(I18nError):
    """Raised when a plural directive lists a number of forms with no rule.

    Only 2, 3 and 4 forms are supported.
    """

    def __init__(self, form_count: int):
        self.form_count = form_count
        super().__init__(
            f"Unsupported number of plural forms: {form_count} (expected 2, 3 or 4)"
        )


class PluralCountError(I18nError):
    """Raised when a plural count value cannot be read as a number."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Plural count is not numeric: {value!r}")

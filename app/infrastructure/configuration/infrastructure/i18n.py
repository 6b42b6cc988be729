"""Translation engine infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Translation engine configuration.

    Environment Variables:
        I18N_MAX_REFERENCE_DEPTH: Maximum nesting of $t(...) references (default: 10)
        I18N_MAX_REFERENCE_EXPANSIONS: Maximum $t(...) expansions per translated key (default: 1000)
        I18N_LOG_MISSING_KEYS: Log a warning for keys that do not resolve (default: True)

    Reference Depth:
        A key referencing another key counts as one level. Cycles are cut
        regardless of depth; the ceiling only bounds long acyclic chains.
        The expansion budget bounds the total number of references expanded
        while rendering one key, so wide trees stay cheap under a high ceiling.

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        max_depth = settings.i18n.max_reference_depth
        ```
    """

    max_reference_depth: int = Field(
        default=10,
        ge=1,
        alias="I18N_MAX_REFERENCE_DEPTH",
        description="Maximum nesting depth for $t(...) references",
    )
    max_reference_expansions: int = Field(
        default=1000,
        ge=1,
        alias="I18N_MAX_REFERENCE_EXPANSIONS",
        description="Maximum number of $t(...) expansions per translated key",
    )
    log_missing_keys: bool = Field(
        default=True,
        alias="I18N_LOG_MISSING_KEYS",
        description="Log a warning when a key does not resolve",
    )

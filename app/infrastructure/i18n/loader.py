"""Locale tree parsing from JSON or YAML text.

File discovery is left to the caller; this module only turns document text
into a LocaleTree.
"""

from typing import Union

import yaml

import structlog
from infrastructure.i18n.models import LocaleTree

logger = structlog.get_logger()


def parse_locale_tree(text: Union[str, bytes]) -> LocaleTree:
    """Parse a locale document into a LocaleTree.

    YAML is a superset of JSON, so both formats are accepted.

    Args:
        text: Document text.

    Returns:
        LocaleTree built from the document.

    Raises:
        ValueError: If the document is not valid YAML/JSON or its top level
            is not a mapping.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.error("locale_document_parse_failed", error=str(e))
        raise ValueError(f"Invalid locale document: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ValueError(
            f"Locale document must contain a mapping at top level, got {type(data).__name__}"
        )

    try:
        tree = LocaleTree.from_data(data)
    except TypeError as e:
        raise ValueError(f"Invalid locale document: {e}") from e

    logger.debug("parsed_locale_document", top_level_keys=len(data))
    return tree

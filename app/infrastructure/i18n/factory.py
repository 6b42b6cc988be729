"""Factory functions for creating i18n components.

Provides convenience functions for initializing translation services from
application settings.
"""

from typing import Any, Optional

import structlog
from infrastructure.configuration import Settings
from infrastructure.i18n.service import TranslationService
from infrastructure.i18n.translator import Translator

logger = structlog.get_logger()


def create_translator(settings: Optional[Settings] = None) -> Translator:
    """Create a Translator configured from settings.

    Args:
        settings: Application settings (default: loaded from environment).

    Returns:
        Translator: Configured translator instance
    """
    settings = settings or Settings()
    return Translator(
        max_reference_depth=settings.i18n.max_reference_depth,
        max_reference_expansions=settings.i18n.max_reference_expansions,
        log_missing_keys=settings.i18n.log_missing_keys,
    )


def create_translation_service(
    settings: Optional[Settings] = None,
    tree: Optional[Any] = None,
) -> TranslationService:
    """Create and configure a TranslationService instance.

    Args:
        settings: Application settings (default: loaded from environment).
        tree: Optional locale tree (or parsed data) to install immediately.

    Returns:
        TranslationService: Configured service, empty unless tree is given.

    Usage:
        # Empty service, tree installed later
        service = create_translation_service()
        service.set(parse_locale_tree(text))

        # Preloaded
        service = create_translation_service(tree={"greeting": "Hello"})
    """
    settings = settings or Settings()
    service = TranslationService(translator=create_translator(settings))

    if tree is not None:
        service.set(tree)

    logger.info(
        "translation_service_created",
        max_reference_depth=settings.i18n.max_reference_depth,
        preloaded=tree is not None,
    )
    return service

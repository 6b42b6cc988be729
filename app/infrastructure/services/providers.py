"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n.factory import create_translation_service
from infrastructure.i18n.service import TranslationService


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translation_service() -> TranslationService:
    """
    Get application-scoped translation service singleton.

    The service starts empty; install a locale tree with set() at startup.

    Returns:
        TranslationService: Cached translation service configured from settings.

    Usage:
        service = get_translation_service()
        service.set(parse_locale_tree(text))
        service.translate("greeting", {"name": "Ada"})
    """
    return create_translation_service(settings=get_settings())

import pytest

from infrastructure.configuration import I18nSettings, Settings
from infrastructure.services import providers


@pytest.fixture
def settings():
    """Settings instance with explicit i18n values, independent of the environment."""
    return Settings(
        PREFIX="test-",
        LOG_LEVEL="DEBUG",
        i18n=I18nSettings(
            I18N_MAX_REFERENCE_DEPTH=5,
            I18N_MAX_REFERENCE_EXPANSIONS=40,
            I18N_LOG_MISSING_KEYS=False,
        ),
    )


@pytest.fixture
def clear_provider_caches():
    """Clear application-scoped provider caches before and after a test."""
    providers.get_settings.cache_clear()
    providers.get_translation_service.cache_clear()
    yield
    providers.get_settings.cache_clear()
    providers.get_translation_service.cache_clear()

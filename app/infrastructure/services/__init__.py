"""
Dependency injection services.

Provides application-scoped provider functions.
"""

from infrastructure.services.providers import (
    get_settings,
    get_translation_service,
)

__all__ = [
    "get_settings",
    "get_translation_service",
]

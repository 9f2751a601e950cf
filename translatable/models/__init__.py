"""
SQLAlchemy model helpers
"""
from translatable.models.mixins import HasTranslations, translatable_column

__all__ = [
    "HasTranslations",
    "translatable_column",
]

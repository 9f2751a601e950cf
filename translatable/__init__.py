"""
Translatable - per-locale translations stored in JSON columns of SQLAlchemy models
"""
from translatable.core.events import TranslationUpdated, dispatcher
from translatable.core.exceptions import AttributeNotTranslatable, ShortcutNotPrefixed
from translatable.models import HasTranslations, translatable_column
from translatable.services import LocaleContext, translation_reader, translation_writer

__all__ = [
    "HasTranslations",
    "translatable_column",
    "translation_reader",
    "translation_writer",
    "LocaleContext",
    "TranslationUpdated",
    "dispatcher",
    "AttributeNotTranslatable",
    "ShortcutNotPrefixed",
]

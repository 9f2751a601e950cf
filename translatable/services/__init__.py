"""
Translation services - locale resolution, storage, transforms and shortcut routing
"""
from translatable.services.locale_resolver import LocaleContext, resolve_locale
from translatable.services.translation_store import TranslationStore
from translatable.services.transforms import TransformRegistry, translation_reader, translation_writer
from translatable.services.shortcut_router import ShortcutRouter

__all__ = [
    "LocaleContext",
    "resolve_locale",
    "TranslationStore",
    "TransformRegistry",
    "translation_reader",
    "translation_writer",
    "ShortcutRouter",
]

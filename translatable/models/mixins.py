"""
HasTranslations mixin - per-locale translations for SQLAlchemy models
"""
from typing import Any, Dict, List, Mapping, Optional, Set, Tuple
import logging

from sqlalchemy import JSON, Column
from sqlalchemy.orm import reconstructor

from translatable.core.config import settings
from translatable.core.events import EventDispatcher, dispatcher
from translatable.services.locale_resolver import LocaleContext
from translatable.services.shortcut_router import ShortcutRouter
from translatable.services.transforms import TransformRegistry, collect_transforms
from translatable.services.translation_store import TranslationStore

logger = logging.getLogger(__name__)


def translatable_column(**kwargs) -> Column:
    """JSON column holding a locale -> value map"""
    kwargs.setdefault("nullable", True)
    return Column(JSON, **kwargs)


class HasTranslations:
    """
    Mixin for models with translatable attributes.

    Usage:
        class Article(HasTranslations, Base):
            __tablename__ = "articles"
            __translatable__ = ("name", "description")

            id = Column(Integer, primary_key=True)
            name = translatable_column()
            description = translatable_column()

        article.set_translation("name", "en", "Hello")
        article.trans_name  # translation in the current locale
    """

    __translatable__: Tuple[str, ...] = ()
    __translation_transforms__: TransformRegistry = TransformRegistry()
    __translation_events__: EventDispatcher = dispatcher

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        namespace = vars(cls)

        # Plain mixins in the MRO may carry transforms too; nearer classes win
        transforms = cls.__translation_transforms__
        for klass in reversed(cls.__mro__):
            transforms = collect_transforms(vars(klass)).merged(transforms)
        cls.__translation_transforms__ = transforms

        for key in cls.__translatable__:
            column = namespace.get(key)
            if isinstance(column, Column) and not isinstance(column.type, JSON):
                logger.warning(f"{cls.__name__}.{key} is translatable but not a JSON column")

    def __init__(self, **kwargs):
        self._init_translations()
        super().__init__(**kwargs)

    @reconstructor
    def _init_translations(self) -> None:
        # Prefix is read once per instance, also for rows loaded from the database
        router = ShortcutRouter(
            settings.TRANSLATABLE_PREFIX,
            type(self).__translatable__,
            strict=settings.TRANSLATABLE_STRICT_SHORTCUTS,
        )
        object.__setattr__(self, "_translation_router", router)

    # Shortcut properties

    def _shortcut_router(self) -> ShortcutRouter:
        router = self.__dict__.get("_translation_router")
        if router is None:
            router = ShortcutRouter(settings.TRANSLATABLE_PREFIX, type(self).__translatable__)
        return router

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal attribute lookup fails
        return self._shortcut_router().read(self, name, self._missing_attribute)

    def __setattr__(self, name: str, value: Any) -> None:
        self._shortcut_router().write(self, name, value, super().__setattr__)

    def _missing_attribute(self, name: str) -> Any:
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    # Raw attribute slots

    @classmethod
    def required_structured_attributes(cls) -> Set[str]:
        """Attributes stored as JSON objects rather than plain values"""
        return set(cls.__translatable__)

    def get_raw_attribute(self, key: str) -> Any:
        return getattr(self, key, None)

    def set_raw_attribute(self, key: str, value: Any) -> None:
        """Assign a raw attribute slot, bypassing shortcut routing"""
        super().__setattr__(key, value)

    # Translations

    def locale_context(self) -> LocaleContext:
        return LocaleContext.from_settings()

    def translation_store(self) -> TranslationStore:
        cls = type(self)
        return TranslationStore(
            self,
            cls.__translatable__,
            cls.__translation_transforms__,
            cls.__translation_events__.emit,
        )

    def get_translation(self, key: str, locale: str, use_fallback: bool = True) -> Any:
        """
        Get the translated value of an attribute for a locale.

        Args:
            key: Translatable attribute name
            locale: Locale code
            use_fallback: Use the fallback locale when there is no translation

        Returns:
            Translation, or "" if none
        """
        return self.translation_store().get_translation(key, locale, self.locale_context(), use_fallback)

    def translate(self, key: str, locale: Optional[str] = None) -> Any:
        """Alias of get_translation(); defaults to the current locale"""
        return self.get_translation(key, locale or self.locale_context().current_locale)

    def get_translation_with_fallback(self, key: str, locale: str) -> Any:
        return self.get_translation(key, locale, True)

    def get_translation_without_fallback(self, key: str, locale: str) -> Any:
        return self.get_translation(key, locale, False)

    def get_translations(self, key: Optional[str] = None) -> Dict[str, Any]:
        """
        Get all translations of an attribute, or of every translatable
        attribute when no key is given.
        """
        store = self.translation_store()
        if key is None:
            return store.get_all_translations()
        return store.get_translations(key)

    @property
    def translations(self) -> Dict[str, Dict[str, Any]]:
        """All translations of all translatable attributes"""
        return self.translation_store().get_all_translations()

    def set_translation(self, key: str, locale: str, value: Any) -> "HasTranslations":
        """
        Set the translation of an attribute for a locale.
        Emits a TranslationUpdated event.

        Returns:
            self
        """
        self.translation_store().set_translation(key, locale, value)
        return self

    def set_translations(self, key: str, translations: Mapping[str, Any]) -> "HasTranslations":
        self.translation_store().set_translations(key, translations)
        return self

    def forget_translation(self, key: str, locale: str) -> "HasTranslations":
        self.translation_store().forget_translation(key, locale)
        return self

    def forget_all_translations(self, locale: str) -> "HasTranslations":
        """Remove the given locale from every translatable attribute"""
        self.translation_store().forget_all_translations(locale)
        return self

    def is_translatable(self, key: str) -> bool:
        return key in type(self).__translatable__

    def has_translation(self, key: str, locale: Optional[str] = None) -> bool:
        """Whether the attribute has a translation in the locale (default: current locale)"""
        return self.translation_store().has_translation(key, locale or self.locale_context().current_locale)

    def get_translated_locales(self, key: str) -> List[str]:
        return self.translation_store().get_translated_locales(key)

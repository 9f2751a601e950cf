"""
Translation Store - per-locale values kept in one JSON column per attribute.

The store works on a record that exposes its raw attribute slots through
``get_raw_attribute(key)`` / ``set_raw_attribute(key, value)``. Translation maps
are decoded fresh from the raw slot on every call and written back immediately;
nothing is cached between calls.
"""
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence
import json
import logging

from translatable.core.events import TranslationUpdated
from translatable.core.exceptions import AttributeNotTranslatable
from translatable.services.locale_resolver import LocaleContext, resolve_locale
from translatable.services.transforms import TransformRegistry

logger = logging.getLogger(__name__)

EventSink = Callable[[TranslationUpdated], None]


def is_blank(value: Any) -> bool:
    """
    Whether a stored translation counts as "no value".

    Falsy values and the string "0" are blank, so a translation set to "0"
    reads back as empty (or as the fallback locale's value).
    """
    return not value or value == "0"


def decode_translations(raw: Any) -> Dict[str, Any]:
    """
    Decode a raw column value into a locale -> value dict.

    Args:
        raw: Dict from a JSON column, JSON text, or None

    Returns:
        New dict; empty when the raw value is missing or not a JSON object
    """
    if isinstance(raw, Mapping):
        return dict(raw)

    if isinstance(raw, (str, bytes)) and raw:
        try:
            decoded = json.loads(raw)
        except ValueError:
            logger.debug(f"Ignoring undecodable translations value: {raw!r}")
            return {}
        if isinstance(decoded, dict):
            return decoded

    return {}


def encode_translations(translations: Mapping[str, Any]) -> Dict[str, Any]:
    """Fresh dict for the JSON column (a new object so the ORM sees the change)"""
    return dict(translations)


class TranslationStore:
    """
    Get/set/forget translations of one record's translatable attributes.
    Every operation validates the attribute key against the translatable list.
    """

    def __init__(
        self,
        record: Any,
        translatable: Sequence[str],
        transforms: Optional[TransformRegistry] = None,
        event_sink: Optional[EventSink] = None,
    ):
        self.record = record
        self.translatable = tuple(translatable)
        self.transforms = transforms or TransformRegistry()
        self.event_sink = event_sink

    def is_translatable(self, key: str) -> bool:
        return key in self.translatable

    def ensure_translatable(self, key: str) -> None:
        """
        Raises:
            AttributeNotTranslatable: If key is not in the translatable list
        """
        if not self.is_translatable(key):
            raise AttributeNotTranslatable(key, self.translatable)

    def get_translations(self, key: str) -> Dict[str, Any]:
        """
        All non-blank translations of an attribute.

        Args:
            key: Translatable attribute name

        Returns:
            New dict of locale -> value, in stored order
        """
        self.ensure_translatable(key)

        translations = decode_translations(self.record.get_raw_attribute(key))
        return {locale: value for locale, value in translations.items() if not is_blank(value)}

    def get_all_translations(self) -> Dict[str, Dict[str, Any]]:
        """Translations of every translatable attribute, keyed by attribute"""
        return {key: self.get_translations(key) for key in self.translatable}

    def get_translated_locales(self, key: str) -> List[str]:
        return list(self.get_translations(key))

    def has_translation(self, key: str, locale: str) -> bool:
        return locale in self.get_translations(key)

    def get_translation(
        self,
        key: str,
        locale: str,
        context: LocaleContext,
        use_fallback: bool = True,
    ) -> Any:
        """
        Get the translation of an attribute for a locale.

        Args:
            key: Translatable attribute name
            locale: Requested locale
            context: Locale context providing the fallback locale
            use_fallback: Read the fallback locale when `locale` has no value

        Returns:
            Translation as a string, or "" when there is none. With a read
            transform registered, whatever the transform returns
        """
        translations = self.get_translations(key)
        locale = resolve_locale(locale, translations.keys(), use_fallback, context)

        translation = translations.get(locale, "")

        reader = self.transforms.reader_for(key)
        if reader is not None:
            return reader(self.record, translation)

        return translation if isinstance(translation, str) else str(translation)

    def get_translation_with_fallback(self, key: str, locale: str, context: LocaleContext) -> Any:
        return self.get_translation(key, locale, context, use_fallback=True)

    def get_translation_without_fallback(self, key: str, locale: str, context: LocaleContext) -> Any:
        return self.get_translation(key, locale, context, use_fallback=False)

    def set_translation(self, key: str, locale: str, value: Any) -> TranslationUpdated:
        """
        Set the translation of an attribute for a locale.

        If the attribute has a write transform, it is called with
        (record, value, locale) and whatever it leaves in the raw attribute
        slot is stored as the translation.

        Args:
            key: Translatable attribute name
            locale: Locale to write
            value: Translation value

        Returns:
            The TranslationUpdated event that was emitted
        """
        self.ensure_translatable(key)

        translations = self.get_translations(key)
        old_value = translations.get(locale, "")

        writer = self.transforms.writer_for(key)
        if writer is not None:
            writer(self.record, value, locale)
            value = self.record.get_raw_attribute(key)
            if value is None or isinstance(value, (Mapping, list)):
                logger.warning(
                    f"Write transform for '{key}' did not assign the raw attribute; "
                    f"storing an empty translation for '{locale}'"
                )
                value = ""

        translations[locale] = value
        self.record.set_raw_attribute(key, encode_translations(translations))
        logger.debug(f"Set translation {type(self.record).__name__}.{key}[{locale}]")

        event = TranslationUpdated(self.record, key, locale, old_value, value)
        if self.event_sink is not None:
            self.event_sink(event)
        return event

    def set_translations(self, key: str, translations: Mapping[str, Any]) -> List[TranslationUpdated]:
        """
        Set several translations of one attribute, one locale at a time.
        Each locale is written (and emits its event) separately.
        """
        self.ensure_translatable(key)

        return [self.set_translation(key, locale, value) for locale, value in translations.items()]

    def forget_translation(self, key: str, locale: str) -> None:
        """Remove one locale from an attribute, through the record's normal attribute assignment"""
        translations = self.get_translations(key)
        translations.pop(locale, None)

        setattr(self.record, key, encode_translations(translations))

    def forget_all_translations(self, locale: str) -> None:
        """Remove one locale from every translatable attribute"""
        for key in self.translatable:
            self.forget_translation(key, locale)

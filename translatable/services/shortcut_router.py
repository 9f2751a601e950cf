"""
Shortcut properties for translatable attributes.

``record.trans_name`` reads the translation of ``name`` in the current locale
and ``record.trans_name = "..."`` writes it. Names without the prefix, or whose
remainder is not translatable, go to the record's normal attribute access.
"""
from collections.abc import Mapping
from typing import Any, Callable, Optional, Sequence

from translatable.core.exceptions import ShortcutNotPrefixed

DEFAULT_PREFIX = "trans_"


class ShortcutRouter:
    """Routes prefixed attribute access to a record's translations"""

    def __init__(self, prefix: str, translatable: Sequence[str], strict: bool = False):
        self.prefix = prefix or DEFAULT_PREFIX
        self.translatable = tuple(translatable)
        self.strict = strict

    def translated_key(self, name: str) -> Optional[str]:
        """
        Attribute behind a shortcut name.

        Returns:
            The translatable attribute name, or None if `name` is not a shortcut
        """
        if not name.startswith(self.prefix):
            return None

        key = name[len(self.prefix):]
        return key if key in self.translatable else None

    def read(self, record: Any, name: str, passthrough: Callable[[str], Any]) -> Any:
        """
        Read a property.

        Args:
            record: Model instance with translation methods
            name: Property name
            passthrough: The record's normal attribute read
        """
        key = self.translated_key(name)
        if key is None:
            return passthrough(name)

        return record.get_translation(key, record.locale_context().current_locale)

    def write(self, record: Any, name: str, value: Any, passthrough: Callable[[str, Any], None]) -> None:
        """
        Write a property. Lists and mappings always take the normal path,
        so whole translation maps can be assigned to the attribute itself.

        Args:
            record: Model instance with translation methods
            name: Property name
            value: Value to assign
            passthrough: The record's normal attribute write

        Raises:
            ShortcutNotPrefixed: In strict mode, when a plain value is assigned
                to a translatable attribute without the prefix
        """
        if isinstance(value, (list, tuple, Mapping)):
            passthrough(name, value)
            return

        key = self.translated_key(name)
        if key is None:
            if self.strict and value is not None and name in self.translatable:
                raise ShortcutNotPrefixed(name, self.prefix)
            passthrough(name, value)
            return

        record.set_translation(key, record.locale_context().current_locale, value)

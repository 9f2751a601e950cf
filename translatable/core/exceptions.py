"""
Translation errors
"""
from typing import Iterable


class TranslatableError(Exception):
    """Base class for translation errors"""


class AttributeNotTranslatable(TranslatableError):
    """Raised when an attribute outside the model's translatable list is used"""

    def __init__(self, key: str, translatable: Iterable[str]):
        self.key = key
        self.translatable = tuple(translatable)
        super().__init__(
            f"Cannot translate attribute `{key}` as it's not one of the "
            f"translatable attributes: {', '.join(self.translatable)}"
        )


class ShortcutNotPrefixed(TranslatableError):
    """Raised when a translatable attribute is assigned a plain value without the shortcut prefix"""

    def __init__(self, key: str, prefix: str = "trans_"):
        self.key = key
        self.prefix = prefix
        super().__init__(
            f"Cannot access translated `{key}` attribute directly. To access translation "
            f"directly as a property, prefix the attribute name with '{prefix}': e.g. `{prefix}{key}`"
        )

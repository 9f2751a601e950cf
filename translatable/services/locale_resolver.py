"""
Locale resolution with single fallback
"""
from dataclasses import dataclass
from typing import Iterable, Optional
import logging

from translatable.core.config import get_fallback_locale, get_locale

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocaleContext:
    """Current and fallback locale for one translation call"""

    current_locale: str
    fallback_locale: Optional[str] = None

    @classmethod
    def from_settings(cls) -> "LocaleContext":
        """Snapshot of the application's locale configuration"""
        return cls(current_locale=get_locale(), fallback_locale=get_fallback_locale())


def resolve_locale(
    requested_locale: str,
    populated_locales: Iterable[str],
    use_fallback: bool,
    context: LocaleContext,
) -> str:
    """
    Pick the locale to read a translation from.

    The fallback locale is returned as-is, without checking that it has a
    translation itself; an empty string counts as a configured fallback.

    Args:
        requested_locale: Locale asked for by the caller
        populated_locales: Locales that currently hold a non-blank value
        use_fallback: Whether the fallback locale may be substituted
        context: Locale context carrying the fallback locale

    Returns:
        Locale to look up
    """
    if requested_locale in populated_locales:
        return requested_locale

    if use_fallback and context.fallback_locale is not None:
        logger.debug(f"No translation for '{requested_locale}', falling back to '{context.fallback_locale}'")
        return context.fallback_locale

    return requested_locale

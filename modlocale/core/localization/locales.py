"""Supported locales and the primary (fallback) locale."""

from enum import Enum


class Locale(str, Enum):
    """Languages the mod ships translations for.

    Values are the codes the host reports, so plain strings compare equal.
    """

    CHINESE_SIMPLIFIED = "zh-Hans"
    CHINESE_TRADITIONAL = "zh-Hant"
    ENGLISH = "en"
    JAPANESE = "ja"
    KOREAN = "ko"

    def __str__(self) -> str:
        return self.value


# Used whenever the host reports a language we have no catalog entry for
PRIMARY_LOCALE = Locale.ENGLISH

LANGUAGE_NAMES = {
    Locale.CHINESE_SIMPLIFIED: "简体中文",
    Locale.CHINESE_TRADITIONAL: "繁體中文",
    Locale.ENGLISH: "English",
    Locale.JAPANESE: "日本語",
    Locale.KOREAN: "한국어",
}


def coerce_locale(value: str) -> Locale | None:
    """Map a host locale code onto a supported Locale.

    Args:
        value: Locale code as reported by the host

    Returns:
        Matching Locale, or None if unsupported
    """
    try:
        return Locale(value)
    except ValueError:
        return None


def available_locales() -> list[Locale]:
    """Get the supported locales.

    Returns:
        List of Locale members
    """
    return list(Locale)


def language_name(locale: str) -> str:
    """Get the native display name for a locale.

    Args:
        locale: Locale code

    Returns:
        Display name, or the code itself if unknown
    """
    known = coerce_locale(locale)
    if known is None:
        return str(locale)
    return LANGUAGE_NAMES[known]

"""Translation catalog: locale -> key -> template.

The catalog is assembled once from the per-language translation modules
(plus any extra YAML catalog files) and is read-only afterwards.
"""

import string
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType

import yaml

from modlocale.core.logging_utils import setup_logger

from .locales import PRIMARY_LOCALE, Locale
from .translations_en import TRANSLATIONS_EN
from .translations_ja import TRANSLATIONS_JA
from .translations_ko import TRANSLATIONS_KO
from .translations_zh_hans import TRANSLATIONS_ZH_HANS
from .translations_zh_hant import TRANSLATIONS_ZH_HANT

logger = setup_logger("modlocale.catalog")

# Prefix for every key written to the host's shared override store
KEY_PREFIX = "RadialMenu_"

BUILTIN_TRANSLATIONS = {
    Locale.CHINESE_SIMPLIFIED.value: TRANSLATIONS_ZH_HANS,
    Locale.CHINESE_TRADITIONAL.value: TRANSLATIONS_ZH_HANT,
    Locale.ENGLISH.value: TRANSLATIONS_EN,
    Locale.JAPANESE.value: TRANSLATIONS_JA,
    Locale.KOREAN.value: TRANSLATIONS_KO,
}


class CatalogError(Exception):
    """Raised when catalog data is malformed."""


def full_key(key: str) -> str:
    """Namespace a short key for the host override store."""
    return KEY_PREFIX + key


def locale_code(locale) -> str:
    if isinstance(locale, Enum):
        return str(locale.value)
    return str(locale)


class TranslationCatalog(Mapping):
    """Immutable mapping of locale code to {key: template}.

    The primary locale's key set is canonical; other locales may cover a
    subset of it.
    """

    def __init__(self, data: Mapping[str, Mapping[str, str]], primary: str = PRIMARY_LOCALE):
        """Build a catalog.

        Args:
            data: Locale code -> {key: template}
            primary: Locale used as the universal fallback

        Raises:
            CatalogError: If the primary locale has no entries
        """
        self._primary = locale_code(primary)
        self._data = MappingProxyType(
            {locale_code(locale): MappingProxyType(dict(entries)) for locale, entries in data.items()}
        )
        if self._primary not in self._data:
            raise CatalogError(f"Primary locale '{self._primary}' missing from catalog")

    @property
    def primary(self) -> str:
        return self._primary

    @property
    def locales(self) -> list[str]:
        return list(self._data)

    def __getitem__(self, locale) -> Mapping[str, str]:
        return self._data[locale_code(locale)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, locale) -> bool:
        return locale_code(locale) in self._data

    def entries(self, locale) -> Mapping[str, str] | None:
        """Get all entries for a locale, or None if the locale is absent."""
        return self._data.get(locale_code(locale))

    def lookup(self, locale, key: str) -> str | None:
        """Look up one template.

        Args:
            locale: Locale code
            key: Short (unprefixed) key

        Returns:
            Template string, or None if the locale or key is absent
        """
        entries = self.entries(locale)
        if entries is None:
            return None
        return entries.get(key)

    def keys_for(self, locale) -> frozenset[str]:
        entries = self.entries(locale)
        return frozenset(entries) if entries is not None else frozenset()

    def all_keys(self) -> frozenset[str]:
        """Union of keys across every locale."""
        keys: set[str] = set()
        for entries in self._data.values():
            keys.update(entries)
        return frozenset(keys)

    def get_all_translations(self, key: str) -> dict[str, str]:
        """Get every locale's template for a key.

        Args:
            key: Short key

        Returns:
            Dict mapping locale codes to templates (locales lacking the key are omitted)
        """
        return {locale: entries[key] for locale, entries in self._data.items() if key in entries}


def _read_catalog_file(path: str | Path) -> dict[str, dict[str, str]]:
    """Read a YAML catalog file shaped {locale: {key: template}}."""
    catalog_file = Path(path)
    if not catalog_file.exists():
        raise CatalogError(f"Catalog file not found: {path}")

    try:
        with open(catalog_file, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise CatalogError(f"Invalid YAML in catalog file {path}: {e}") from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise CatalogError(f"Catalog file {path} must map locales to entries")

    result: dict[str, dict[str, str]] = {}
    for locale, entries in raw.items():
        if not isinstance(entries, dict):
            raise CatalogError(f"Entries for '{locale}' in {path} must be a mapping")
        for key, template in entries.items():
            if not isinstance(template, str):
                raise CatalogError(f"Template for '{locale}.{key}' in {path} must be a string")
        result[str(locale)] = {str(k): v for k, v in entries.items()}
    return result


def load_catalog(
    extra_files: Iterable[str | Path] = (),
    primary: str = PRIMARY_LOCALE,
) -> TranslationCatalog:
    """Load the built-in translations, merging any extra catalog files.

    Later files win over earlier ones and over built-in entries.

    Args:
        extra_files: YAML catalog files to merge
        primary: Primary (fallback) locale

    Returns:
        TranslationCatalog

    Raises:
        CatalogError: If an extra file is missing or malformed
    """
    data = {locale: dict(entries) for locale, entries in BUILTIN_TRANSLATIONS.items()}

    for path in extra_files:
        for locale, entries in _read_catalog_file(path).items():
            data.setdefault(locale, {}).update(entries)
        logger.info(f"Merged catalog file: {path}")

    catalog = TranslationCatalog(data, primary=primary)
    logger.info(f"Loaded translations for {len(catalog)} languages")
    return catalog


# Consistency checks


def max_placeholder_index(template: str) -> int:
    """Highest positional placeholder index in a template (-1 if none).

    Raises:
        ValueError: If the template is malformed
    """
    highest = -1
    for _, field_name, _, _ in string.Formatter().parse(template):
        if field_name is None:
            continue
        head = field_name.split(".", 1)[0].split("[", 1)[0]
        if head.isdigit():
            highest = max(highest, int(head))
    return highest


@dataclass
class CatalogReport:
    """Result of check_catalog()."""

    primary: str
    extra_keys: dict[str, list[str]] = field(default_factory=dict)
    missing_keys: dict[str, list[str]] = field(default_factory=dict)
    placeholder_mismatches: dict[str, list[str]] = field(default_factory=dict)
    malformed: dict[str, list[str]] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """No errors. Missing keys are allowed (they fall back to the primary)."""
        return not (self.extra_keys or self.placeholder_mismatches or self.malformed)

    @property
    def clean(self) -> bool:
        return self.ok and not self.missing_keys

    def summary(self) -> str:
        parts = []
        for label, section in (
            ("extra keys", self.extra_keys),
            ("missing keys", self.missing_keys),
            ("placeholder mismatches", self.placeholder_mismatches),
            ("malformed templates", self.malformed),
        ):
            total = sum(len(keys) for keys in section.values())
            if total:
                parts.append(f"{total} {label}")
        return ", ".join(parts) if parts else "catalog consistent"


def check_catalog(catalog: TranslationCatalog) -> CatalogReport:
    """Compare every locale against the primary locale.

    Args:
        catalog: Catalog to check

    Returns:
        CatalogReport
    """
    primary_entries = catalog[catalog.primary]
    report = CatalogReport(primary=catalog.primary)

    def placeholders(locale, key, template):
        try:
            return max_placeholder_index(template)
        except ValueError:
            report.malformed.setdefault(locale, []).append(key)
            return None

    primary_indices = {key: placeholders(catalog.primary, key, t) for key, t in primary_entries.items()}

    for locale in catalog.locales:
        if locale == catalog.primary:
            continue
        entries = catalog[locale]

        extra = sorted(set(entries) - set(primary_entries))
        if extra:
            report.extra_keys[locale] = extra

        missing = sorted(set(primary_entries) - set(entries))
        if missing:
            report.missing_keys[locale] = missing

        for key in sorted(set(entries) & set(primary_entries)):
            index = placeholders(locale, key, entries[key])
            expected = primary_indices[key]
            if index is not None and expected is not None and index != expected:
                report.placeholder_mismatches.setdefault(locale, []).append(key)

    return report

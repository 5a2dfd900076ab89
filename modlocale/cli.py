#!/usr/bin/env python3
"""Command-line tools for checking and previewing translations.

Usage:
    python -m modlocale check
    python -m modlocale show --locale ja UI_ItemCount 3
    python -m modlocale locales
"""

import sys

from modlocale.core.config_loader import ConfigError, get_nested, load_config, set_nested
from modlocale.core.localization import (
    CatalogError,
    InMemoryHost,
    LocalizationContext,
    available_locales,
    check_catalog,
    language_name,
    load_catalog,
)
from modlocale.core.logging_utils import configure_logging


def parse_args(argv=None):
    """Parse command-line arguments.

    Returns:
        argparse.Namespace: Parsed arguments
    """
    import argparse

    parser = argparse.ArgumentParser(prog="modlocale", description="Mod translation override tools")
    parser.add_argument("--config", type=str, help="Path to base config YAML (default: config/base.yaml)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override logging.level from config",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("check", help="Check every locale against the primary locale")
    subparsers.add_parser("locales", help="List supported locales")

    show = subparsers.add_parser("show", help="Preview a key as the host would display it")
    show.add_argument("--locale", type=str, default=None, help="Host language code (default: primary)")
    show.add_argument("key", help="Short (unprefixed) key, e.g. UI_ItemCount")
    show.add_argument("args", nargs="*", help="Positional format arguments")

    return parser.parse_args(argv)


def cmd_check(config) -> int:
    catalog = load_catalog(
        get_nested(config, "localization.extra_catalogs") or [],
        primary=get_nested(config, "localization.primary_locale", "en"),
    )
    report = check_catalog(catalog)

    print(f"Primary locale: {report.primary}")
    for label, section in (
        ("Extra keys (not in primary)", report.extra_keys),
        ("Missing keys (fall back to primary)", report.missing_keys),
        ("Placeholder mismatches", report.placeholder_mismatches),
        ("Malformed templates", report.malformed),
    ):
        for locale, keys in section.items():
            print(f"{label} [{locale}]: {', '.join(keys)}")
    print(report.summary())
    return 0 if report.ok else 1


def cmd_locales(config) -> int:
    primary = get_nested(config, "localization.primary_locale", "en")
    for locale in available_locales():
        marker = " (primary)" if locale == primary else ""
        print(f"{locale.value}\t{language_name(locale)}{marker}")
    return 0


def cmd_show(config, locale: str | None, key: str, args: list[str]) -> int:
    host = InMemoryHost(
        current_locale=locale or get_nested(config, "localization.primary_locale", "en"),
        missing_key_policy=get_nested(config, "localization.missing_key_policy", "key"),
    )
    localization = LocalizationContext.from_config(host, config)

    result = localization.initialize()
    if not result:
        print(f"Initialization failed: {result.error}", file=sys.stderr)
        return 1
    try:
        print(localization.get_formatted(key, *args) if args else localization.get(key))
    finally:
        localization.cleanup()
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ConfigError) as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 2
    if args.log_level:
        set_nested(config, "logging.level", args.log_level)
    configure_logging(config)

    try:
        if args.command == "check":
            return cmd_check(config)
        if args.command == "locales":
            return cmd_locales(config)
        return cmd_show(config, args.locale, args.key, args.args)
    except CatalogError as e:
        print(f"Catalog error: {e}", file=sys.stderr)
        return 2

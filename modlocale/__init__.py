"""modlocale - mod translation overrides for a host localization store."""

from .__version__ import __version__
from .core.localization import (
    KEY_PREFIX,
    PRIMARY_LOCALE,
    Binding,
    InMemoryHost,
    LifecycleResult,
    Locale,
    LocalizationContext,
)

__all__ = [
    "__version__",
    "KEY_PREFIX",
    "PRIMARY_LOCALE",
    "Binding",
    "InMemoryHost",
    "LifecycleResult",
    "Locale",
    "LocalizationContext",
]

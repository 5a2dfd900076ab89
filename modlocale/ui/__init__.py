"""pygame text sinks for localized text."""

from .label import MarqueeLabel, TextLabel

__all__ = ["MarqueeLabel", "TextLabel"]

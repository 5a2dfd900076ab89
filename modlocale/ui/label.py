#!/usr/bin/env python3
"""Text sinks for localized UI text rendered with pygame.

TextLabel exposes a settable ``text``; MarqueeLabel takes ``set_text()``.
Both can be passed to LocalizationContext.bind().
"""

import time

import pygame
from pygame import Surface

DEFAULT_COLOR = (255, 255, 255)


class TextLabel:
    """Single line of text with a cached rendered surface."""

    def __init__(self, text: str = "", color: tuple[int, int, int] = DEFAULT_COLOR, antialias: bool = True):
        """Initialize label.

        Args:
            text: Initial text
            color: RGB text color
            antialias: Render with antialiasing
        """
        self._text = text
        self.color = color
        self.antialias = antialias
        self.destroyed = False

        self._surface: Surface | None = None
        self._surface_font: pygame.font.Font | None = None
        self.render_count = 0

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str):
        if value != self._text:
            self._text = value
            self._surface = None

    @property
    def dirty(self) -> bool:
        """True when the next render() will re-render."""
        return self._surface is None

    def render(self, font: pygame.font.Font) -> Surface:
        """Get the rendered surface, re-rendering only after a text or font change.

        Args:
            font: Font to render with

        Returns:
            Rendered surface
        """
        if self._surface is None or font is not self._surface_font:
            self._surface = font.render(self._text, self.antialias, self.color)
            self._surface_font = font
            self.render_count += 1
        return self._surface

    def draw(self, screen: Surface, pos: tuple[int, int], font: pygame.font.Font) -> pygame.Rect:
        """Blit the label onto a surface.

        Returns:
            Rect covering the drawn text
        """
        return screen.blit(self.render(font), pos)

    def destroy(self):
        """Release the cached surface; bindings skip the label afterwards."""
        self.destroyed = True
        self._surface = None
        self._surface_font = None


class MarqueeLabel:
    """Scrolling text for strings wider than the space they're given."""

    def __init__(self, max_width: int, text: str = "", scroll_speed: float = 50.0, gap: int = 100):
        """Initialize marquee label.

        Args:
            max_width: Maximum width before scrolling
            text: Initial text
            scroll_speed: Pixels per second to scroll
            gap: Gap in pixels between end and start of loop
        """
        self.current_text = text
        self.max_width = max_width
        self.scroll_speed = scroll_speed
        self.gap = gap
        self.destroyed = False

        self.offset = 0.0
        self.last_update = time.time()

    def set_text(self, new_text: str):
        """Replace the text and restart scrolling."""
        self.current_text = new_text
        self.offset = 0.0
        self.last_update = time.time()

    def update(self, text_width: int) -> tuple[int, bool]:
        """Update scroll position and return current offset.

        Args:
            text_width: Actual rendered width of the text

        Returns:
            Tuple of (current x offset, should_draw_second_copy)
        """
        current_time = time.time()

        if text_width <= self.max_width:
            return 0, False

        dt = current_time - self.last_update
        self.last_update = current_time

        self.offset += self.scroll_speed * dt

        # Loop when text has scrolled completely off screen
        loop_point = text_width + self.gap
        if self.offset >= loop_point:
            self.offset -= loop_point

        return int(self.offset), self.offset > 0

    def destroy(self):
        self.destroyed = True

"""Test pygame text sinks."""

import pygame
import pytest

from modlocale.core.localization import is_sink_valid
from modlocale.ui import MarqueeLabel, TextLabel


@pytest.fixture
def font():
    pygame.font.init()
    yield pygame.font.Font(None, 24)
    pygame.font.quit()


def test_label_renders_once_per_text(font):
    """Surface is cached until the text changes."""
    label = TextLabel("Radial Menu")
    first = label.render(font)
    assert label.render(font) is first
    assert label.render_count == 1

    label.text = "Menu radial"
    assert label.dirty
    second = label.render(font)
    assert second is not first
    assert label.render_count == 2


def test_setting_same_text_keeps_cache(font):
    label = TextLabel("same")
    label.render(font)
    label.text = "same"
    assert not label.dirty


def test_label_draws_onto_surface(font):
    screen = pygame.Surface((200, 50))
    label = TextLabel("Count: 3")
    rect = label.draw(screen, (0, 0), font)
    assert rect.width > 0
    assert rect.height > 0


def test_destroyed_label_is_invalid(font):
    label = TextLabel("x")
    label.render(font)
    assert is_sink_valid(label)
    label.destroy()
    assert not is_sink_valid(label)
    assert label.dirty


def test_marquee_set_text_resets_scroll():
    marquee = MarqueeLabel(max_width=100, text="short")
    marquee.offset = 42.0
    marquee.set_text("a much longer localized string")
    assert marquee.current_text == "a much longer localized string"
    assert marquee.offset == 0.0


def test_marquee_does_not_scroll_when_text_fits():
    marquee = MarqueeLabel(max_width=100, text="fits")
    assert marquee.update(text_width=80) == (0, False)

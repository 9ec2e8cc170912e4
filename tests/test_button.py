import pygame

from baddcs.button import Button
from baddcs.core import GREEN, Vec2


def make_button():
    return Button(Vec2(10, 20), 100, 50, GREEN)


def test_pressed_inside_with_click():
    assert make_button().is_pressed(Vec2(60, 40), True)


def test_inside_without_click_is_not_pressed():
    assert not make_button().is_pressed(Vec2(60, 40), False)


def test_click_outside_is_not_pressed():
    button = make_button()
    assert not button.is_pressed(Vec2(5, 40), True)
    assert not button.is_pressed(Vec2(10 + 100, 40), True)


def test_default_thickness():
    assert make_button().thickness == 5.0


def test_draw_outlines_only():
    surface = pygame.Surface((200, 100))
    make_button().draw(surface)
    assert tuple(surface.get_at((11, 21))) == tuple(GREEN)
    assert tuple(surface.get_at((60, 45))) == (0, 0, 0, 255)
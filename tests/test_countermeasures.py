import pygame

from baddcs.core import Screen, Vec2
from baddcs.countermeasures import (
    FLARE_HEALTH,
    INIT_HORIZONTAL_VARIATION,
    INIT_VERTICAL_VARIATION,
    Countermeasures,
)

BIG = Screen(5000, 5000)


class FakeSound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1


def test_player_flare_starts_below_and_plays_sound():
    sound = FakeSound()
    cm = Countermeasures(5, 5, 20, 30, sound=sound)
    cm.add_flare(Vec2(100, 200))
    assert sound.plays == 1
    assert len(cm) == 1
    start = cm.flares[0].positions_right[0]
    assert start.y == 200 + 30 + INIT_VERTICAL_VARIATION
    assert start.x == int(100 + 20 / 2) + 20 / 2 + INIT_HORIZONTAL_VARIATION


def test_enemy_flare_starts_above_and_is_silent():
    sound = FakeSound()
    cm = Countermeasures(2, 5, 20, 30, sound=sound)
    cm.add_flare(Vec2(100, 200))
    assert sound.plays == 0
    assert cm.flares[0].positions_left[0].y == 200 - INIT_VERTICAL_VARIATION


def test_player_flares_fall_and_enemy_flares_rise():
    player = Countermeasures(5, 5, 20, 30)
    enemy = Countermeasures(1, 5, 20, 30)
    player.add_flare(Vec2(1000, 1000))
    enemy.add_flare(Vec2(1000, 1000))
    player_start = player.flares[0].positions_right[0].y
    enemy_start = enemy.flares[0].positions_right[0].y
    player.update(BIG)
    enemy.update(BIG)
    assert player.flares[0].positions_right[0].y > player_start
    assert enemy.flares[0].positions_right[0].y < enemy_start


def test_trail_length_limited_by_flare_health():
    cm = Countermeasures(5, 5, 20, 30)
    cm.add_flare(Vec2(2500, 100))
    for _ in range(30):
        cm.update(BIG)
    assert cm.flares[0].num_positions_right() == FLARE_HEALTH


def test_burnt_out_flares_are_removed():
    cm = Countermeasures(5, 5, 20, 30)
    cm.add_flare(Vec2(100, 100))
    cm.add_flare(Vec2(120, 100))
    small = Screen(300, 300)
    for _ in range(200):
        cm.update(small)
    assert len(cm) == 0


def test_draw_renders_flares():
    cm = Countermeasures(5, 5, 20, 30)
    cm.add_flare(Vec2(100, 100))
    surface = pygame.Surface((400, 400), pygame.SRCALPHA)
    cm.draw(surface)
    point = cm.flares[0].positions_right[0]
    assert surface.get_at((int(point.x) + 1, int(point.y) + 1)).a > 0
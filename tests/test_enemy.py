import pytest

from baddcs.bullet import Owner
from baddcs.core import Screen, Vec2
from baddcs.enemy import (
    ENEMY_BULLET_SPEED,
    ENEMY_HEALTH,
    FIRING_MISSILE_PROBABILITY,
    Enemy,
)

SCREEN = Screen(1500, 900)
LEFT = 300.0


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return self.value % stop


def make_enemy(x=500.0, y=100.0, rng_value=2, num=0):
    return Enemy(Vec2(x, y), num, 5, LEFT, rng=FixedRng(rng_value))


def test_damage_reduces_health_and_clamps_at_zero():
    enemy = make_enemy()
    enemy.damage(1)
    assert enemy.health == ENEMY_HEALTH - 1
    enemy.damage(10)
    assert enemy.health == 0
    assert enemy.color.g == 0 and enemy.color.b == 0


def test_full_health_color_is_brighter_than_damaged():
    enemy = make_enemy()
    before = enemy.color.g
    enemy.damage(1)
    assert enemy.color.g < before
    assert enemy.color.r == 230


def test_move_down_until_bottom():
    enemy = make_enemy(y=100.0)
    enemy.move_down(SCREEN)
    assert enemy.position.y == 101.0
    bottom = make_enemy(y=float(SCREEN.height))
    bottom.move_down(SCREEN)
    assert bottom.position.y == float(SCREEN.height)


def test_update_moves_left_and_requests_missile():
    enemy = make_enemy(x=500.0, rng_value=0)
    enemy.update(2.0, SCREEN)
    assert enemy.position.x == 499.0
    assert enemy.missile_requests == 1


def test_update_moves_right():
    enemy = make_enemy(x=500.0, rng_value=1)
    enemy.update(2.0, SCREEN)
    assert enemy.position.x == 501.0


def test_update_respects_left_boundary():
    enemy = make_enemy(x=LEFT, rng_value=0)
    enemy.update(2.0, SCREEN)
    assert enemy.position.x == LEFT


def test_update_respects_right_boundary():
    enemy = make_enemy(rng_value=1)
    edge = float(SCREEN.width - enemy.width)
    enemy.position = Vec2(edge, 100.0)
    enemy.update(2.0, SCREEN)
    assert enemy.position.x == edge


@pytest.mark.parametrize(
    "roll,expected",
    [(FIRING_MISSILE_PROBABILITY - 1, 1), (FIRING_MISSILE_PROBABILITY, 0)],
)
def test_fire_missile_opportunity(roll, expected):
    enemy = make_enemy(rng_value=roll)
    enemy.fire_missile_opportunity()
    assert enemy.missile_requests == expected


def test_fire_bullet_has_cooldown():
    enemy = make_enemy()
    bullets = []
    assert enemy.fire_bullet(1.0, bullets) is bullets[0]
    assert enemy.fire_bullet(1.5, bullets) is None
    enemy.fire_bullet(2.0, bullets)
    assert len(bullets) == 2
    assert all(b.owner is Owner.ENEMY for b in bullets)
    assert all(b.speed == ENEMY_BULLET_SPEED for b in bullets)


def test_fired_bullet_starts_inside_enemy():
    enemy = make_enemy()
    bullets = []
    enemy.fire_bullet(1.0, bullets)
    assert enemy.rect().contains(bullets[0].position)


def test_fire_countermeasure_cooldown():
    enemy = make_enemy()
    enemy.fire_countermeasure(1.0)
    enemy.fire_countermeasure(1.1)
    assert len(enemy.countermeasures) == 1
    enemy.fire_countermeasure(1.4)
    assert len(enemy.countermeasures) == 2


def test_rect_matches_position_and_size():
    enemy = make_enemy(x=400.0, y=50.0)
    rect = enemy.rect()
    assert (rect.x, rect.y) == (400.0, 50.0)
    assert (rect.width, rect.height) == (enemy.width, enemy.height)


def test_draw_paints_enemy_color():
    import pygame

    surface = pygame.Surface((200, 200))
    enemy = make_enemy(x=10.0, y=10.0)
    enemy.draw(surface)
    assert tuple(surface.get_at((15, 15)))[:3] == enemy.color[:3]
import pygame

from baddcs.bullet import BULLET_COLOR, BULLET_HEIGHT, BULLET_WIDTH, Bullet, Owner
from baddcs.core import Rect, Screen, Vec2

SCREEN = Screen(300, 200)


def test_update_moves_by_speed():
    bullet = Bullet(Vec2(50, 100), -6, Owner.PLAYER)
    bullet.update(SCREEN)
    assert bullet.position == Vec2(50, 100 - 6)
    assert bullet.active


def test_player_bullet_deactivates_just_after_leaving_top():
    bullet = Bullet(Vec2(50, 100), -6, Owner.PLAYER)
    previous_y = bullet.position.y
    for _ in range(100):
        previous_y = bullet.position.y
        bullet.update(SCREEN)
        if not bullet.active:
            break
    assert not bullet.active
    assert bullet.position.y + BULLET_HEIGHT < 0
    assert previous_y + BULLET_HEIGHT >= 0


def test_enemy_bullet_deactivates_below_screen():
    bullet = Bullet(Vec2(50, SCREEN.height - 3), 6, Owner.ENEMY)
    bullet.update(SCREEN)
    assert not bullet.active
    assert bullet.position.y > SCREEN.height


def test_player_bullet_going_down_stays_active():
    bullet = Bullet(Vec2(50, SCREEN.height - 3), 6, Owner.PLAYER)
    bullet.update(SCREEN)
    assert bullet.active


def test_enemy_bullet_above_screen_stays_active():
    bullet = Bullet(Vec2(50, -50), -6, Owner.ENEMY)
    bullet.update(SCREEN)
    assert bullet.active


def test_rect_matches_position_and_size():
    bullet = Bullet(Vec2(12.5, 30), 6, Owner.ENEMY)
    assert bullet.rect() == Rect(12.5, 30, BULLET_WIDTH, BULLET_HEIGHT)


def test_draw_paints_tracer_colour():
    surface = pygame.Surface((40, 40))
    Bullet(Vec2(10, 10), 6, Owner.PLAYER).draw(surface)
    assert tuple(surface.get_at((11, 12))) == tuple(BULLET_COLOR)


def test_inactive_bullet_draws_nothing():
    surface = pygame.Surface((40, 40))
    Bullet(Vec2(10, 10), 6, Owner.PLAYER, active=False).draw(surface)
    assert tuple(surface.get_at((11, 12))) == (0, 0, 0, 255)
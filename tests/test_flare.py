import pygame

from baddcs.core import WHITE, Screen, Vec2
from baddcs.flare import FLARE_SIZE, Flare

BIG = Screen(10000, 10000)


def make_flare(center_x=500, width=20, height=10, y=100, health=5,
               x_var=5, y_var=5, y_velocity=1, y_accel=0.2):
    return Flare(center_x, width, height, y, WHITE, health, 255 / health,
                 4, y_velocity, y_accel, x_var, y_var)


def test_initial_positions():
    flare = make_flare()
    assert flare.num_positions_right() == 1
    assert flare.num_positions_left() == 1
    assert flare.positions_right[0] == Vec2(500 + 20 / 2 + 5, 100 + 10 + 5)
    assert flare.positions_left[0] == Vec2(500 - 20 / 2 - 5, 100 + 10 + 5)


def test_trail_grows_and_is_capped_at_health():
    flare = make_flare(health=5)
    flare.update(BIG)
    assert flare.num_positions_right() == 2
    for _ in range(20):
        flare.update(BIG)
        assert flare.num_positions_right() <= 5
        assert flare.num_positions_left() <= 5
    assert flare.num_positions_right() == 5
    assert flare.num_positions_left() == 5


def test_trails_mirror_about_center():
    flare = make_flare(center_x=500)
    for _ in range(7):
        flare.update(BIG)
        right = flare.positions_right[0]
        left = flare.positions_left[0]
        assert right.x + left.x == 2 * 500
        assert right.y == left.y


def test_newest_position_first_and_moving_down():
    flare = make_flare()
    first = flare.positions_right[0]
    flare.update(BIG)
    assert flare.positions_right[1] == first
    assert flare.positions_right[0].y > first.y
    assert flare.positions_right[0].x > first.x


def test_trails_cleared_when_leaving_screen():
    screen = Screen(200, 200)
    flare = make_flare(center_x=100, y=100)
    for _ in range(100):
        flare.update(screen)
    assert flare.num_positions_right() == 0
    assert flare.num_positions_left() == 0


def test_draw_paints_newest_particle():
    surface = pygame.Surface((700, 300))
    flare = make_flare()
    flare.draw(surface)
    point = flare.positions_right[0]
    colour = surface.get_at((int(point.x) + FLARE_SIZE // 2, int(point.y) + FLARE_SIZE // 2))
    assert colour.r == colour.g == colour.b
    assert colour.r >= 250
"""Enemy aircraft that drift down the screen, shoot and request missiles."""

from __future__ import annotations

import random

import pygame

from baddcs.bullet import Bullet, Owner
from baddcs.core import Color, Rect, Screen, Vec2
from baddcs.countermeasures import Countermeasures

ENEMY_HEALTH = 2
ENEMY_COLOR_STEP = 115
ENEMY_COUNTERMEASURE_COOLDOWN_TIME = 0.3
FIRING_MISSILE_COOLDOWN_TIME = 1.0
FIRING_MISSILE_PROBABILITY_TOTAL = 100
FIRING_MISSILE_PROBABILITY = 5
MOVEMENT_DECISION_INTERVAL = 0.5
BULLET_COOLDOWN_TIME = 1.0
ENEMY_BULLET_SPEED = 6
DEFAULT_ENEMY_SIZE = (40, 40)

MOVE_LEFT = 0
MOVE_RIGHT = 1
MOVE_STRAIGHT = 2


def _health_color(health: int) -> Color:
    shade = (ENEMY_COLOR_STEP * health) & 0xFF
    return Color(230, shade, shade)


class Enemy:
    """An enemy jet numbered `enemy_num` among `num_enemies`."""

    def __init__(
        self,
        position: Vec2,
        enemy_num: int,
        num_enemies: int,
        horizontal_variation_left: float,
        *,
        size: tuple[int, int] = DEFAULT_ENEMY_SIZE,
        image: pygame.Surface | None = None,
        rng: random.Random | None = None,
        hit_sound=None,
        flare_sound=None,
    ) -> None:
        self.position = position
        self.enemy_num = enemy_num
        self.num_enemies = num_enemies
        self.horizontal_variation_left = horizontal_variation_left
        self.image = image
        self.width, self.height = image.get_size() if image is not None else size
        self.rng = rng if rng is not None else random.Random()
        self.hit_sound = hit_sound
        self.health = ENEMY_HEALTH
        self.color = _health_color(self.health)
        self.missile_requests = 0
        self.player_pos = Vec2()
        self.movement_decider = MOVE_STRAIGHT
        self.movement_cooldown = 0.0
        self.fire_missile_cooldown = 0.0
        self.fire_cooldown = 0.0
        self.countermeasure_cooldown = 0.0
        self.countermeasures = Countermeasures(
            enemy_num, num_enemies, self.width, self.height, flare_sound
        )

    def draw(self, surface: pygame.Surface) -> None:
        if self.image is not None:
            tinted = self.image.copy()
            tinted.fill(self.color, special_flags=pygame.BLEND_RGBA_MULT)
            surface.blit(tinted, (int(self.position.x), int(self.position.y)))
        else:
            pygame.draw.rect(
                surface,
                self.color,
                pygame.Rect(
                    int(self.position.x),
                    int(self.position.y),
                    int(self.width),
                    int(self.height),
                ),
            )
        self.countermeasures.draw(surface)

    def move_down(self, screen: Screen) -> None:
        if self.position.y < screen.height:
            self.position = Vec2(self.position.x, self.position.y + 1)

    def fire_countermeasure(self, now: float) -> None:
        if now - self.countermeasure_cooldown >= ENEMY_COUNTERMEASURE_COOLDOWN_TIME:
            self.countermeasures.add_flare(self.position)
            self.countermeasure_cooldown = now

    def update(self, now: float, screen: Screen) -> None:
        """Pick a drift direction now and then, move, and roll for a missile."""
        if now - self.movement_cooldown >= MOVEMENT_DECISION_INTERVAL:
            self.movement_decider = self.rng.randrange(3)
            self.movement_cooldown = now

        if self.movement_decider == MOVE_LEFT:
            if self.position.x > self.horizontal_variation_left:
                self.position = Vec2(self.position.x - 1, self.position.y)
        elif self.movement_decider == MOVE_RIGHT:
            if self.position.x < screen.width - self.width:
                self.position = Vec2(self.position.x + 1, self.position.y)

        if now - self.fire_missile_cooldown > FIRING_MISSILE_COOLDOWN_TIME:
            self.fire_missile_opportunity()
            self.fire_missile_cooldown = now

        self.countermeasures.update(screen)

    def fire_bullet(self, now: float, bullets: list[Bullet]) -> Bullet | None:
        """Append a bullet to `bullets` if the gun has cooled down."""
        if now - self.fire_cooldown < BULLET_COOLDOWN_TIME:
            return None
        bullet = Bullet(
            Vec2(
                self.position.x + self.width // 2 - 2,
                self.position.y + self.height // 2 - 7,
            ),
            ENEMY_BULLET_SPEED,
            Owner.ENEMY,
        )
        bullets.append(bullet)
        self.fire_cooldown = now
        return bullet

    def damage(self, amount: int) -> None:
        self.health = max(0, self.health - amount)
        shade = (ENEMY_COLOR_STEP * self.health) & 0xFF
        self.color = Color(self.color.r, shade, shade, self.color.a)
        if self.hit_sound is not None:
            self.hit_sound.play()

    def rect(self) -> Rect:
        return Rect(
            self.position.x, self.position.y, float(self.width), float(self.height)
        )

    def fire_missile_opportunity(self) -> None:
        roll = self.rng.randrange(FIRING_MISSILE_PROBABILITY_TOTAL)
        if roll < FIRING_MISSILE_PROBABILITY:
            self.missile_requests = 1
"""The player's aircraft."""

from __future__ import annotations

import pygame

from baddcs.bullet import Bullet, Owner
from baddcs.core import Color, Rect, Screen, Vec2
from baddcs.countermeasures import Countermeasures

HORIZONTAL_MOVEMENT_MAGNITUDE = 5.0
PLAYER_COUNTERMEASURE_COOLDOWN_TIME = 0.3
PLAYER_FIRE_COOLDOWN_TIME = 0.1
PLAYER_BULLET_SPEED = -6
PLAYER_MAX_HEALTH = 10
PLAYER_COLOR_STEP = 23
BOTTOM_MARGIN = 100
DEFAULT_PLAYER_SIZE = (40, 40)


class Player:
    """The jet controlled by the player, its bullets and its flares."""

    def __init__(
        self,
        horizontal_variation_left: float = 0.0,
        num_enemies: int = 0,
        health: int = PLAYER_MAX_HEALTH,
        *,
        screen: Screen = Screen(),
        size: tuple[int, int] = DEFAULT_PLAYER_SIZE,
        image: pygame.Surface | None = None,
        gunfire_sound=None,
        hit_sound=None,
        flare_sound=None,
    ) -> None:
        self.screen = screen
        self.image = image
        self.width, self.height = image.get_size() if image is not None else size
        self.gunfire_sound = gunfire_sound
        self.hit_sound = hit_sound
        self.flare_sound = flare_sound
        self.bullets: list[Bullet] = []
        self.reset(horizontal_variation_left, num_enemies, health)

    def reset(
        self, horizontal_variation_left: float, num_enemies: int, health: int
    ) -> None:
        """Put the jet back at its starting spot with fresh health and flares."""
        self.horizontal_variation_left = horizontal_variation_left
        self.num_enemies = num_enemies
        self.health = health
        self.countermeasure_fired = False
        self.position = Vec2(
            float((self.screen.width - self.width) // 2),
            float(self.screen.height - self.height - BOTTOM_MARGIN),
        )
        self.fire_cooldown = 0.0
        self.countermeasure_cooldown = 0.0
        self.color = Color(230, *self._shades())
        self.countermeasures = Countermeasures(
            num_enemies, num_enemies, self.width, self.height, self.flare_sound
        )

    def _shades(self) -> tuple[int, int]:
        shade = (PLAYER_COLOR_STEP * self.health) & 0xFF
        return shade, shade

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

    def update(self) -> None:
        """Advance the player's flares; the jet itself moves only on input."""
        self.countermeasures.update(self.screen)

    def move_left(self) -> None:
        if self.position.x >= self.horizontal_variation_left:
            self.position = Vec2(
                self.position.x - HORIZONTAL_MOVEMENT_MAGNITUDE, self.position.y
            )

    def move_right(self) -> None:
        if self.position.x <= self.screen.width - self.width:
            self.position = Vec2(
                self.position.x + HORIZONTAL_MOVEMENT_MAGNITUDE, self.position.y
            )

    def fire_bullet(self, now: float) -> Bullet | None:
        """Fire a bullet if the gun has cooled down."""
        if now - self.fire_cooldown < PLAYER_FIRE_COOLDOWN_TIME:
            return None
        bullet = Bullet(
            Vec2(self.position.x + self.width // 2 - 2, self.position.y),
            PLAYER_BULLET_SPEED,
            Owner.PLAYER,
        )
        self.bullets.append(bullet)
        self.fire_cooldown = now
        if self.gunfire_sound is not None:
            self.gunfire_sound.play()
        return bullet

    def damage(self, amount: int) -> None:
        self.health = max(0, self.health - amount)
        self.color = Color(self.color.r, *self._shades(), self.color.a)
        if self.hit_sound is not None:
            self.hit_sound.play()

    def handle_input(self, now: float, countermeasure_pressed: bool) -> None:
        if (
            countermeasure_pressed
            and now - self.countermeasure_cooldown
            >= PLAYER_COUNTERMEASURE_COOLDOWN_TIME
        ):
            self.countermeasures.add_flare(self.position)
            self.countermeasure_fired = True
            self.countermeasure_cooldown = now

    def rect(self) -> Rect:
        return Rect(
            self.position.x, self.position.y, float(self.width), float(self.height)
        )
"""Guided missiles that home in on a target until they get close."""

from __future__ import annotations

import math
import random

import pygame

from baddcs.core import WHITE, Rect, Screen, Vec2

LOSING_LOCK_PROBABILITY_TOTAL = 100
LOSING_LOCK_PROBABILITY = 80
MAX_DISTANCE_AWAY_FROM_TARGET_MISSILE_WILL_LOSE_LOCK = 200
DEFAULT_MISSILE_SIZE = (12, 48)


def to_degrees(radians: float) -> float:
    return radians * (180.0 / math.pi)


class Missile:
    """A missile flying towards the target numbered `target_id`.

    Once it comes within the lock-loss distance of its target, or the target
    is gone, it stops steering and keeps its last heading.
    """

    def __init__(
        self,
        position: Vec2,
        speed: float,
        target_id: int,
        *,
        image: pygame.Surface | None = None,
        size: tuple[int, int] = DEFAULT_MISSILE_SIZE,
        rng: random.Random | None = None,
    ) -> None:
        self.position = position
        self.speed = speed
        self.target_id = target_id
        self.image = image
        self.width, self.height = image.get_size() if image is not None else size
        self.rng = rng if rng is not None else random.Random()
        self.rotation = 0.0
        self.active = True
        self.tracking = True
        self.direction = Vec2(0.0, 0.0)

    def update(
        self,
        target_pos: Vec2,
        target_width: float,
        target_height: float,
        screen: Screen,
    ) -> None:
        if self.active and (
            self.position.x + self.width < 0
            or self.position.x > screen.width
            or self.position.y > screen.height
        ):
            self.active = False

        if self.tracking and (
            self.distance_from(target_pos)
            < MAX_DISTANCE_AWAY_FROM_TARGET_MISSILE_WILL_LOSE_LOCK
            or target_pos == screen.corner
        ):
            self.tracking = False

        if self.tracking:
            aim = Vec2(
                target_pos.x + target_width / 2 - self.position.x - self.width / 2,
                target_pos.y + target_height / 2 - self.position.y - self.height / 2,
            )
            self.direction = aim.normalized()
            self.rotation = math.atan2(self.direction.y, self.direction.x)
            self.position = self.position + self.direction * self.speed
        elif self.direction == Vec2(0.0, 0.0):
            self.position = Vec2(self.position.x, self.position.y - self.speed)
            self.rotation = math.atan(-90)
        else:
            self.position = self.position + self.direction * self.speed
            self.rotation = math.atan2(self.direction.y, self.direction.x)

    def _sprite(self) -> pygame.Surface:
        if self.image is not None:
            return self.image
        sprite = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        sprite.fill(WHITE)
        return sprite

    def draw(self, surface: pygame.Surface) -> None:
        if not self.active:
            return
        angle = to_degrees(self.rotation) + 90.0
        rotated = pygame.transform.rotate(self._sprite(), -angle)
        surface.blit(rotated, (int(self.position.x), int(self.position.y)))

    def rect(self) -> Rect:
        return Rect(
            self.position.x, self.position.y, -float(self.width), -float(self.height)
        )

    def lose_lock_opportunity(self) -> None:
        """Roll for the chance that flares break the lock of an untracked missile."""
        roll = self.rng.randrange(LOSING_LOCK_PROBABILITY_TOTAL)
        if roll < LOSING_LOCK_PROBABILITY and not self.tracking:
            self.tracking = False

    def distance_from(self, target_pos: Vec2) -> float:
        return math.hypot(
            abs(self.position.x - target_pos.x), abs(self.position.y - target_pos.y)
        )
"""Bullets fired by the player and by enemies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import pygame

from baddcs.core import Color, Rect, Screen, Vec2

BULLET_WIDTH = 4
BULLET_HEIGHT = 15
BULLET_COLOR = Color(245, 184, 105)


class Owner(Enum):
    """Who fired a bullet."""

    PLAYER = 0
    ENEMY = 1


@dataclass
class Bullet:
    """A tracer round moving vertically at a fixed speed."""

    position: Vec2
    speed: float
    owner: Owner
    active: bool = True

    def update(self, screen: Screen) -> None:
        """Move the bullet and deactivate it once it leaves the screen."""
        self.position = Vec2(self.position.x, self.position.y + self.speed)
        if (
            self.active
            and self.owner is Owner.PLAYER
            and self.position.y + BULLET_HEIGHT < 0
        ):
            self.active = False
        if (
            self.active
            and self.owner is Owner.ENEMY
            and self.position.y > screen.height
        ):
            self.active = False

    def draw(self, surface: pygame.Surface) -> None:
        if self.active:
            pygame.draw.rect(
                surface,
                BULLET_COLOR,
                pygame.Rect(
                    int(self.position.x),
                    int(self.position.y),
                    BULLET_WIDTH,
                    BULLET_HEIGHT,
                ),
            )

    def rect(self) -> Rect:
        return Rect(self.position.x, self.position.y, BULLET_WIDTH, BULLET_HEIGHT)
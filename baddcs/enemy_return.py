"""A contact shown on the radar scope."""

from __future__ import annotations

import math
from dataclasses import dataclass

import pygame

from baddcs.core import Color, Vec2, point_in_circle


@dataclass
class EnemyReturn:
    """A radar blip for the enemy numbered `enemy_num`."""

    position: Vec2
    color: Color
    enemy_num: int
    radius: float = 10.0
    thickness: float = 2.0
    lockable: bool = False

    def draw(self, surface: pygame.Surface) -> None:
        points = [
            (
                self.position.x + self.radius * math.cos(math.radians(angle)),
                self.position.y + self.radius * math.sin(math.radians(angle)),
            )
            for angle in (0, 90, 180, 270)
        ]
        pygame.draw.polygon(surface, self.color, points, width=int(self.thickness))
        if self.lockable:
            pygame.draw.circle(
                surface,
                self.color,
                (int(self.position.x), int(self.position.y)),
                int(self.radius + self.thickness),
                width=int(self.thickness),
            )

    def is_pressed(self, mouse_pos: Vec2, mouse_pressed: bool) -> bool:
        return mouse_pressed and point_in_circle(mouse_pos, self.position, self.radius)
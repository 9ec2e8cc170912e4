"""A rectangular clickable outline."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from baddcs.core import Color, Rect, Vec2


@dataclass
class Button:
    """An outlined box that reports clicks inside it."""

    position: Vec2
    width: float
    height: float
    color: Color
    thickness: float = 5.0

    @property
    def bounds(self) -> Rect:
        return Rect(self.position.x, self.position.y, self.width, self.height)

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.rect(
            surface,
            self.color,
            pygame.Rect(
                int(self.position.x),
                int(self.position.y),
                int(self.width),
                int(self.height),
            ),
            width=int(self.thickness),
        )

    def is_pressed(self, mouse_pos: Vec2, mouse_pressed: bool) -> bool:
        return mouse_pressed and self.bounds.contains(mouse_pos)
"""A pair of burning flares drifting away from an aircraft."""

from __future__ import annotations

from collections import deque

import pygame

from baddcs.core import Color, Screen, Vec2, clamp

FLARE_SIZE = 10


class Flare:
    """Two trails of flare particles, one to each side of the aircraft.

    Each trail keeps its newest position first and holds at most `health`
    positions; older positions fade out as they are drawn.
    """

    def __init__(
        self,
        center_x: int,
        entity_width: float,
        entity_height: float,
        entity_y: float,
        color: Color,
        health: int,
        health_multiplier: float,
        x_velocity: float,
        y_velocity: float,
        y_acceleration: float,
        x_init_variation: float,
        y_init_variation: float,
    ) -> None:
        self.center_x = center_x
        self.entity_width = entity_width
        self.entity_height = entity_height
        self.entity_y = entity_y
        self.color = color
        self.health = health
        self.health_multiplier = health_multiplier
        self.x_velocity = x_velocity
        self.y_velocity = y_velocity
        self.y_acceleration = y_acceleration

        start_y = entity_y + entity_height + y_init_variation
        self.current_right = Vec2(
            center_x + entity_width / 2 + x_init_variation, start_y
        )
        self.current_left = Vec2(
            center_x - entity_width / 2 - x_init_variation, start_y
        )
        self.positions_right: deque[Vec2] = deque([self.current_right])
        self.positions_left: deque[Vec2] = deque([self.current_left])

    def update(self, screen: Screen) -> None:
        """Advance both trails, dropping the oldest point and any that left the screen."""
        if len(self.positions_right) == self.health:
            self.positions_right.pop()
        if len(self.positions_left) == self.health:
            self.positions_left.pop()

        self.y_velocity += self.y_acceleration
        self.current_right = Vec2(
            self.current_right.x + self.x_velocity,
            self.current_right.y + self.y_velocity,
        )
        self.current_left = Vec2(
            self.current_left.x - self.x_velocity,
            self.current_left.y + self.y_velocity,
        )
        self.positions_right.appendleft(self.current_right)
        self.positions_left.appendleft(self.current_left)

        for trail in (self.positions_right, self.positions_left):
            if self._off_screen(trail[-1], screen):
                trail.clear()

    @staticmethod
    def _off_screen(point: Vec2, screen: Screen) -> bool:
        return (
            point.x + FLARE_SIZE >= screen.width
            or point.x <= 0
            or point.y - FLARE_SIZE <= 0
            or point.y >= screen.height
        )

    def _alpha(self, age: int) -> int:
        return int(clamp(int(self.health_multiplier * (self.health - age)), 0, 255))

    def draw(self, surface: pygame.Surface) -> None:
        particle = pygame.Surface((FLARE_SIZE, FLARE_SIZE), pygame.SRCALPHA)
        for trail in (self.positions_right, self.positions_left):
            for age, point in enumerate(trail):
                particle.fill(self.color.with_alpha(self._alpha(age)))
                surface.blit(particle, (int(point.x), int(point.y)))

    def num_positions_right(self) -> int:
        return len(self.positions_right)

    def num_positions_left(self) -> int:
        return len(self.positions_left)
"""Flare dispensers carried by the player and by enemies."""

from __future__ import annotations

import pygame

from baddcs.core import WHITE, Screen, Vec2
from baddcs.flare import Flare

FLARE_HEALTH = 13
FLARE_HORIZONTAL_VELOCITY = 4.0
FLARE_VERTICAL_VELOCITY = 1.0
FLARE_VERTICAL_ACCELERATION = 0.2
INIT_VERTICAL_VARIATION = 5.0
INIT_HORIZONTAL_VARIATION = 5.0


class Countermeasures:
    """Keeps the live flares of one aircraft.

    An owner id equal to the enemy count marks the player, whose flares fall
    behind it (down the screen); enemy flares rise behind them instead.
    """

    def __init__(
        self,
        owner_id: int,
        num_enemies: int,
        entity_width: float,
        entity_height: float,
        sound=None,
    ) -> None:
        self.owner_id = owner_id
        self.num_enemies = num_enemies
        self.entity_width = entity_width
        self.entity_height = entity_height
        self.sound = sound
        self.flares: list[Flare] = []

    @property
    def is_player(self) -> bool:
        return self.owner_id == self.num_enemies

    def __len__(self) -> int:
        return len(self.flares)

    def draw(self, surface: pygame.Surface) -> None:
        for flare in self.flares:
            flare.draw(surface)

    def update(self, screen: Screen) -> None:
        """Advance every flare and drop those with no particles left."""
        for flare in self.flares:
            flare.update(screen)
        self.flares = [
            flare
            for flare in self.flares
            if flare.num_positions_left() or flare.num_positions_right()
        ]

    def add_flare(self, entity_position: Vec2) -> None:
        center_x = int(entity_position.x + self.entity_width / 2)
        multiplier = 255.0 / FLARE_HEALTH
        if self.is_player:
            self.flares.append(
                Flare(
                    center_x,
                    self.entity_width,
                    self.entity_height,
                    entity_position.y,
                    WHITE,
                    FLARE_HEALTH,
                    multiplier,
                    FLARE_HORIZONTAL_VELOCITY,
                    FLARE_VERTICAL_VELOCITY,
                    FLARE_VERTICAL_ACCELERATION,
                    INIT_HORIZONTAL_VARIATION,
                    INIT_VERTICAL_VARIATION,
                )
            )
            if self.sound is not None:
                self.sound.play()
        else:
            self.flares.append(
                Flare(
                    center_x,
                    self.entity_width,
                    0,
                    entity_position.y,
                    WHITE,
                    FLARE_HEALTH,
                    multiplier,
                    FLARE_HORIZONTAL_VELOCITY,
                    -FLARE_VERTICAL_VELOCITY,
                    -FLARE_VERTICAL_ACCELERATION,
                    INIT_HORIZONTAL_VARIATION,
                    -INIT_VERTICAL_VARIATION,
                )
            )
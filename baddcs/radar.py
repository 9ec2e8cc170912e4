"""The radar scope: shows enemy contacts, locks them and fires missiles."""

from __future__ import annotations

import math
import random

import pygame

from baddcs.core import RED, WHITE, YELLOW, Color, Rect, Screen, Vec2, clamp
from baddcs.enemy import Enemy
from baddcs.enemy_return import EnemyReturn
from baddcs.missile import Missile

RWR_TIME = 0.30
RADAR_UPDATE_INTERVAL = 1.0
RETURN_SELECT_COOLDOWN = 0.1
LOCK_TIME = 1.0
LOCKABLE_PROBABILITY = 89
PLAYER_MISSILE_SPEED = 3.0
NO_SELECTION = -1


class Radar:
    """The player's radar display and missile fire control."""

    def __init__(
        self,
        position: Vec2,
        player_width: float,
        player_height: float,
        color: Color,
        horizontal_variation_left: float,
        *,
        screen: Screen = Screen(),
        rng: random.Random | None = None,
        plane_image: pygame.Surface | None = None,
        missile_image: pygame.Surface | None = None,
        ping_sound=None,
        lock_tone=None,
        locking_sound=None,
        launch_warning=None,
    ) -> None:
        self.position = position
        self.player_width = player_width
        self.player_height = player_height
        self.color = color
        self.horizontal_variation_left = horizontal_variation_left
        self.screen = screen
        self.rng = rng if rng is not None else random.Random()
        self.plane_image = plane_image
        self.missile_image = missile_image
        self.ping_sound = ping_sound
        self.lock_tone = lock_tone
        self.locking_sound = locking_sound
        self.launch_warning = launch_warning

        self.can_fire = False
        self.selected_enemy = NO_SELECTION
        self.previous_selected_enemy = NO_SELECTION
        self.outer_radius = 100.0
        self.inner_radius = 20.0
        self.thickness = 2.0
        self.rwr_on = False
        self.faded_color = color.with_alpha(clamp(color.a - 225, 0, 255))
        self.radar_range_x = float(screen.width // 2)
        self.radar_range_y = 1.5 * screen.height
        self.radar_update_cooldown = 0.0
        self.return_select_cooldown = 0.0
        self.missile_locked_cooldown = 0.0
        self.flickering_rwr_timer = 0.0
        self.missiles: list[Missile] = []
        self.enemy_missiles: list[Missile] = []
        self.enemy_returns: list[EnemyReturn] = []
        self._locking_playing = False

    @staticmethod
    def _play(sound) -> None:
        if sound is not None:
            sound.play()

    def draw(self, surface: pygame.Surface, now: float) -> None:
        cx, cy = int(self.position.x), int(self.position.y)
        backdrop_radius = int(self.outer_radius + 10.0)
        backdrop = pygame.Surface(
            (backdrop_radius * 2, backdrop_radius * 2), pygame.SRCALPHA
        )
        pygame.draw.circle(
            backdrop, self.faded_color, (backdrop_radius, backdrop_radius), backdrop_radius
        )
        surface.blit(backdrop, (cx - backdrop_radius, cy - backdrop_radius))

        if self.enemy_missiles and now - self.flickering_rwr_timer > RWR_TIME:
            self.rwr_on = not self.rwr_on
            self.flickering_rwr_timer = now
            self._play(self.launch_warning)

        if self.rwr_on:
            radius = self.outer_radius + 6.0
            bounds = pygame.Rect(0, 0, int(radius * 2), int(radius * 2))
            bounds.center = (cx, cy)
            pygame.draw.arc(surface, YELLOW, bounds, 0.0, math.pi, width=4)

        for enemy_return in self.enemy_returns:
            enemy_return.draw(surface)
        for missile in self.missiles:
            missile.draw(surface)

        thickness = int(self.thickness)
        for radius in (self.outer_radius, self.inner_radius):
            pygame.draw.circle(
                surface,
                self.color,
                (cx, cy),
                int(radius + self.thickness + 10.0),
                width=thickness,
            )

        if self.plane_image is not None:
            w, h = self.plane_image.get_size()
            surface.blit(self.plane_image, (cx - w // 2, cy - h // 2))
        else:
            pygame.draw.polygon(
                surface, WHITE, [(cx, cy - 6), (cx - 5, cy + 6), (cx + 5, cy + 6)]
            )

    def update(
        self,
        now: float,
        player_pos: Vec2,
        enemies: list[Enemy],
        mouse_pos: Vec2,
        mouse_pressed: bool,
        fire_pressed: bool,
    ) -> None:
        """Steer missiles, refresh contacts once a second and run the lock cycle."""
        for missile in self.missiles:
            target = self.find_enemy(missile, enemies)
            target_pos = target.position if target is not None else self.screen.corner
            missile.update(
                target_pos, self.player_width, self.player_height, self.screen
            )

        if now - self.radar_update_cooldown > RADAR_UPDATE_INTERVAL:
            self._refresh_returns(player_pos, enemies)
            if self.enemy_returns:
                self._play(self.ping_sound)
            self.radar_update_cooldown = now

        self.handle_input(now, player_pos, mouse_pos, mouse_pressed, fire_pressed)

        if (
            self.selected_enemy != NO_SELECTION
            and self.selected_enemy == self.previous_selected_enemy
        ):
            if self.locking_sound is not None and not self._locking_playing:
                self.locking_sound.play(loops=-1)
            self._locking_playing = True
            if (
                now - self.missile_locked_cooldown >= LOCK_TIME
                and self.missile_locked_cooldown != 0
            ):
                self._play(self.lock_tone)
                self.missile_locked_cooldown = 0.0
                self.can_fire = True
        else:
            if self.locking_sound is not None and self._locking_playing:
                self.locking_sound.stop()
            self._locking_playing = False
            self.missile_locked_cooldown = now
            self.previous_selected_enemy = self.selected_enemy
            self.can_fire = False

    def _refresh_returns(self, player_pos: Vec2, enemies: list[Enemy]) -> None:
        radar_range = Rect(
            player_pos.x - self.radar_range_x / 2 + self.player_width / 2,
            player_pos.y - self.radar_range_y + self.player_height / 2,
            self.radar_range_x,
            self.radar_range_y,
        )
        scale_x = (self.outer_radius - self.inner_radius) / (self.radar_range_x / 2)
        scale_y = (self.outer_radius - self.inner_radius) / self.radar_range_y
        self.enemy_returns = []
        for enemy in enemies:
            if not enemy.rect().collides(radar_range):
                continue
            offset = enemy.position - player_pos
            distance = offset.length()
            inner_adjust = self.inner_radius / distance if distance else 0.0
            radar_pos = Vec2(
                self.position.x + offset.x * scale_x + inner_adjust * offset.x,
                self.position.y + offset.y * scale_y + inner_adjust * offset.y,
            )
            if (radar_pos - self.position).length() <= self.outer_radius:
                color = RED if enemy.enemy_num == self.selected_enemy else self.color
                self.enemy_returns.append(
                    EnemyReturn(radar_pos, color, enemy.enemy_num)
                )

    def handle_input(
        self,
        now: float,
        player_pos: Vec2,
        mouse_pos: Vec2,
        mouse_pressed: bool,
        fire_pressed: bool,
    ) -> Missile | None:
        """Select or deselect contacts by clicking, and fire once locked."""
        if now - self.return_select_cooldown >= RETURN_SELECT_COOLDOWN:
            if not self.enemy_returns:
                self.selected_enemy = NO_SELECTION
            for enemy_return in self.enemy_returns:
                enemy_return.lockable = (
                    self.rng.randrange(100) < LOCKABLE_PROBABILITY
                )
                if not self.enemy_num_in_list(self.selected_enemy):
                    self.selected_enemy = NO_SELECTION
                if enemy_return.lockable and enemy_return.is_pressed(
                    mouse_pos, mouse_pressed
                ):
                    if enemy_return.enemy_num == self.selected_enemy:
                        enemy_return.color = self.color
                        self.selected_enemy = NO_SELECTION
                    else:
                        enemy_return.color = RED
                        self.selected_enemy = enemy_return.enemy_num
                    self.return_select_cooldown = now
                if (
                    not enemy_return.lockable
                    and self.selected_enemy == enemy_return.enemy_num
                ):
                    self.selected_enemy = NO_SELECTION

        if fire_pressed and self.selected_enemy != NO_SELECTION and self.can_fire:
            missile = Missile(
                player_pos,
                PLAYER_MISSILE_SPEED,
                self.selected_enemy,
                image=self.missile_image,
            )
            self.missiles.append(missile)
            self.selected_enemy = NO_SELECTION
            self.can_fire = False
            return missile
        return None

    def enemy_num_in_list(self, enemy_num: int) -> bool:
        return any(r.enemy_num == enemy_num for r in self.enemy_returns)

    def find_enemy(self, missile: Missile, enemies: list[Enemy]) -> Enemy | None:
        """The enemy the missile is aimed at, or None if it is gone."""
        return next((e for e in enemies if e.enemy_num == missile.target_id), None)

    def clear_missiles(self) -> None:
        self.missiles.clear()

    def set_enemy_missiles(self, enemy_missiles: list[Missile]) -> None:
        self.enemy_missiles = list(enemy_missiles)
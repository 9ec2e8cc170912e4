"""One round of play: the player, the enemy wave, bullets, missiles and radar."""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping
from dataclasses import dataclass, field

import pygame

from baddcs.bullet import Bullet
from baddcs.core import Color, Screen, Vec2
from baddcs.enemy import Enemy
from baddcs.missile import Missile
from baddcs.player import Player
from baddcs.radar import NO_SELECTION, Radar

FLARE_DISTANCE_TO_MISSILE_TO_LOSE_LOCK = 500
ENEMY_MISSILE_SPEED = 3.0
MISSILE_LAUNCH_MIN_SEPARATION = 200
BULLET_DAMAGE = 1
RAMMING_DAMAGE = 8
MISSILE_DAMAGE = 5

log = logging.getLogger(__name__)


@dataclass
class Controls:
    """The state of the player's inputs for one frame."""

    left: bool = False
    right: bool = False
    fire: bool = False
    countermeasure: bool = False
    restart: bool = False
    fire_missile: bool = False
    mouse_pos: Vec2 = field(default_factory=Vec2)
    mouse_pressed: bool = False


class Game:
    """A round against `num_enemies` jets, restartable at any time."""

    def __init__(
        self,
        num_enemies: int,
        player_health: int,
        color_main: Color,
        horizontal_variation_left: float,
        *,
        screen: Screen = Screen(),
        rng: random.Random | None = None,
        images: Mapping[str, pygame.Surface] | None = None,
        sounds: Mapping[str, object] | None = None,
    ) -> None:
        self.screen = screen
        self.color_main = color_main
        self.horizontal_variation_left = horizontal_variation_left
        self.rng = rng if rng is not None else random.Random()
        self.images = dict(images or {})
        self.sounds = dict(sounds or {})

        self.player = Player(
            horizontal_variation_left,
            num_enemies,
            player_health,
            screen=screen,
            image=self.images.get("player"),
            gunfire_sound=self.sounds.get("gunfire"),
            hit_sound=self.sounds.get("hit"),
            flare_sound=self.sounds.get("flare"),
        )
        self.enemies: list[Enemy] = []
        self.enemy_bullets: list[Bullet] = []
        self.enemy_missiles: list[Missile] = []
        self.run = False
        self._init_game(num_enemies, player_health)

        self.radar = Radar(
            Vec2(horizontal_variation_left / 2, screen.height / 2.0),
            self.player.width,
            self.player.height,
            color_main,
            horizontal_variation_left,
            screen=screen,
            rng=self._child_rng(),
            plane_image=self.images.get("radar_plane"),
            missile_image=self.images.get("missile"),
            ping_sound=self.sounds.get("ping"),
            lock_tone=self.sounds.get("lock_tone"),
            locking_sound=self.sounds.get("locking"),
            launch_warning=self.sounds.get("launch_warning"),
        )

    def _child_rng(self) -> random.Random:
        return random.Random(self.rng.getrandbits(32))

    def _init_game(self, num_enemies: int, player_health: int) -> None:
        self.num_enemies = num_enemies
        self.player_health = player_health
        self.enemies = self.create_enemies(num_enemies)
        self.player.reset(self.horizontal_variation_left, num_enemies, player_health)
        self.run = True

    def create_enemies(self, num_enemies: int) -> list[Enemy]:
        """A new wave placed at random above the top of the screen."""
        hvl = self.horizontal_variation_left
        span = self.screen.width - self.player.width - int(hvl)
        wave = []
        for enemy_num in range(num_enemies):
            x = self.rng.randrange(span) + hvl
            y = self.rng.randrange(self.screen.width) * -1.5 - self.player.height
            wave.append(
                Enemy(
                    Vec2(float(x), float(y)),
                    enemy_num,
                    num_enemies,
                    hvl,
                    image=self.images.get("enemy"),
                    rng=self._child_rng(),
                    hit_sound=self.sounds.get("hit"),
                )
            )
        return wave

    def update(self, now: float, controls: Controls) -> None:
        """Advance everything by one frame."""
        if self.run:
            self._advance(now, controls)
        if not self.enemies:
            self.run = False
        if controls.restart:
            self.reset()

    def _advance(self, now: float, controls: Controls) -> None:
        player = self.player
        player.update()

        for enemy in self.enemies:
            enemy.move_down(self.screen)
            enemy.player_pos = player.position
            if (
                enemy.missile_requests == 1
                and player.position.y - enemy.position.y
                > MISSILE_LAUNCH_MIN_SEPARATION
            ):
                self.enemy_missiles.append(
                    Missile(
                        enemy.position,
                        ENEMY_MISSILE_SPEED,
                        self.num_enemies,
                        image=self.images.get("missile"),
                        rng=self._child_rng(),
                    )
                )
                enemy.missile_requests = 0
                log.debug("enemy %d launched a missile", enemy.enemy_num)
            enemy.update(now, self.screen)
            enemy.fire_bullet(now, self.enemy_bullets)

        self.radar.set_enemy_missiles(self.enemy_missiles)

        for missile in self.enemy_missiles:
            missile.update(player.position, player.width, player.height, self.screen)
            if (
                player.countermeasure_fired
                and missile.distance_from(player.position)
                < FLARE_DISTANCE_TO_MISSILE_TO_LOSE_LOCK
            ):
                missile.lose_lock_opportunity()
                player.countermeasure_fired = True

        for bullet in player.bullets:
            bullet.update(self.screen)
        for bullet in self.enemy_bullets:
            bullet.update(self.screen)

        self.radar.update(
            now,
            player.position,
            self.enemies,
            controls.mouse_pos,
            controls.mouse_pressed,
            controls.fire_missile,
        )

        self.delete_inactive()
        self.check_collisions()

    def draw(self, surface: pygame.Surface, now: float) -> None:
        self.player.draw(surface)
        self.radar.draw(surface, now)
        for bullet in self.player.bullets:
            bullet.draw(surface)
        for bullet in self.enemy_bullets:
            bullet.draw(surface)
        for enemy in self.enemies:
            enemy.draw(surface)
        for missile in self.enemy_missiles:
            missile.draw(surface)

    def handle_input(self, now: float, controls: Controls) -> None:
        """Steer, shoot and drop flares while the round is running."""
        if not self.run:
            return
        if controls.left:
            self.player.move_left()
        elif controls.right:
            self.player.move_right()
        if controls.fire:
            self.player.fire_bullet(now)
        self.player.handle_input(now, controls.countermeasure)

    def check_collisions(self) -> None:
        player = self.player

        for bullet in player.bullets:
            survivors = []
            for enemy in self.enemies:
                if enemy.rect().collides(bullet.rect()):
                    bullet.active = False
                    enemy.damage(BULLET_DAMAGE)
                    if enemy.health == 0:
                        continue
                survivors.append(enemy)
            self.enemies = survivors

        for bullet in self.enemy_bullets:
            if bullet.rect().collides(player.rect()):
                bullet.active = False
                player.damage(BULLET_DAMAGE)
                if player.health == 0:
                    self._game_over()

        survivors = []
        for enemy in self.enemies:
            if enemy.rect().collides(player.rect()):
                player.damage(RAMMING_DAMAGE)
                if player.health == 0:
                    self._game_over()
            else:
                survivors.append(enemy)
        self.enemies = survivors

        for missile in self.radar.missiles:
            hit = next(
                (e for e in self.enemies if e.rect().collides(missile.rect())), None
            )
            if hit is not None:
                player.damage(0)
                self.enemies.remove(hit)
                missile.active = False

        remaining = []
        for missile in self.enemy_missiles:
            if missile.rect().collides(player.rect()):
                player.damage(MISSILE_DAMAGE)
                if player.health == 0:
                    self._game_over()
            else:
                remaining.append(missile)
        self.enemy_missiles = remaining

    def delete_inactive(self) -> None:
        """Drop bullets and missiles that are no longer active."""
        self.player.bullets[:] = [b for b in self.player.bullets if b.active]
        self.enemy_bullets = [b for b in self.enemy_bullets if b.active]
        self.radar.missiles[:] = [m for m in self.radar.missiles if m.active]
        self.enemy_missiles = [m for m in self.enemy_missiles if m.active]

    def reset(self) -> None:
        """Start the round over with a fresh wave and a repaired jet."""
        self.enemies = []
        self.enemy_bullets = []
        self.enemy_missiles = []
        self.player.bullets.clear()
        self.radar.clear_missiles()
        self.radar.selected_enemy = NO_SELECTION
        self._init_game(self.num_enemies, self.player_health)

    def _game_over(self) -> None:
        self.run = False
"""The windowed game: title screen, play loop and on-screen status."""

from __future__ import annotations

import argparse
from enum import Enum, auto

import pygame

from baddcs.button import Button
from baddcs.core import GREEN, GREY, Vec2
from baddcs.game import Controls, Game
from baddcs.player import PLAYER_MAX_HEALTH

WINDOW_TITLE = "Bad DCS"
TITLE_MESSAGE = "Bad DCS"
TITLE_MESSAGE_SIZE = 300
START_BUTTON_MESSAGE = "START"
START_BUTTON_MESSAGE_SIZE = 185
STATUS_FONT_SIZE = 16
BANNER_FONT_SIZE = 64

LINE_THICKNESS = 3
BOTTOM_BAR_HORIZONTAL_OFFSET = 25.0
BOTTOM_BAR_VERTICAL_OFFSET = 70.0
VERTICAL_BAR_HORIZONTAL_OFFSET = 300.0
VERTICAL_BAR_VERTICAL_OFFSET = 20.0

WINDOW_WIDTH = 1500
WINDOW_HEIGHT = 900
NUM_ENEMIES = 5
TARGET_FPS = 60


class GameState(Enum):
    TITLE = auto()
    GAME = auto()


def status_lines(game: Game, num_enemies: int) -> tuple[str, str]:
    """The health and enemy-count lines shown in the bottom bar."""
    return (
        f"Health: {game.player.health} / {PLAYER_MAX_HEALTH}",
        f"Enemies: {len(game.enemies)} / {num_enemies}",
    )


def _load_font(path: str, size: int) -> pygame.font.Font:
    try:
        return pygame.font.Font(path, size)
    except (OSError, pygame.error):
        return pygame.font.Font(None, size)


def _load_image(path: str, divisor: int = 1) -> pygame.Surface | None:
    try:
        image = pygame.image.load(path).convert_alpha()
    except (OSError, pygame.error):
        return None
    if divisor != 1:
        width, height = image.get_size()
        image = pygame.transform.scale(
            image, (max(1, width // divisor), max(1, height // divisor))
        )
    return image


def _load_sound(path: str, volume: float = 1.0):
    if pygame.mixer.get_init() is None:
        return None
    try:
        sound = pygame.mixer.Sound(path)
    except (OSError, pygame.error):
        return None
    sound.set_volume(volume)
    return sound


def _start_title_music() -> None:
    if pygame.mixer.get_init() is None:
        return
    try:
        pygame.mixer.music.load("Sounds/Wild_Blue_Yonder.mp3")
    except (OSError, pygame.error):
        return
    pygame.mixer.music.set_volume(0.3)
    pygame.mixer.music.play(-1)


def _pause_title_music() -> None:
    if pygame.mixer.get_init() is not None:
        pygame.mixer.music.pause()


def _blit(surface, font, text, position) -> None:
    surface.blit(font.render(text, True, GREEN), (int(position[0]), int(position[1])))


def _draw_title(surface, title_font, start_font, mouse_pos, mouse_pressed) -> bool:
    """Draw the title screen; True when the start button was clicked."""
    title_w, title_h = title_font.size(TITLE_MESSAGE)
    start_w, start_h = start_font.size(START_BUTTON_MESSAGE)
    button_width = START_BUTTON_MESSAGE_SIZE * 3
    button_height = START_BUTTON_MESSAGE_SIZE * 1.1
    button_pos = Vec2(
        (WINDOW_WIDTH - button_width) / 2, (WINDOW_HEIGHT - button_height) * 2 / 3
    )
    _blit(
        surface,
        title_font,
        TITLE_MESSAGE,
        ((WINDOW_WIDTH - title_w) / 2, (WINDOW_HEIGHT - title_h) / 4),
    )
    _blit(
        surface,
        start_font,
        START_BUTTON_MESSAGE,
        ((WINDOW_WIDTH - start_w) / 2, (WINDOW_HEIGHT - start_h) * 2 / 3),
    )
    button = Button(button_pos, button_width, button_height, GREEN)
    button.draw(surface)
    return button.is_pressed(mouse_pos, mouse_pressed)


def _draw_frame_lines(surface) -> None:
    bar_y = WINDOW_HEIGHT - BOTTOM_BAR_VERTICAL_OFFSET
    pygame.draw.line(
        surface,
        GREEN,
        (BOTTOM_BAR_HORIZONTAL_OFFSET, bar_y),
        (WINDOW_WIDTH - BOTTOM_BAR_HORIZONTAL_OFFSET, bar_y),
        LINE_THICKNESS,
    )
    pygame.draw.line(
        surface,
        GREEN,
        (VERTICAL_BAR_HORIZONTAL_OFFSET, VERTICAL_BAR_VERTICAL_OFFSET),
        (
            VERTICAL_BAR_HORIZONTAL_OFFSET,
            bar_y - LINE_THICKNESS - VERTICAL_BAR_VERTICAL_OFFSET,
        ),
        LINE_THICKNESS,
    )


def _draw_game(surface, game, now, controls, status_font, banner_font) -> None:
    _draw_frame_lines(surface)
    bar_middle = WINDOW_HEIGHT - BOTTOM_BAR_VERTICAL_OFFSET + BOTTOM_BAR_VERTICAL_OFFSET / 2
    if game.run:
        game.handle_input(now, controls)
        game.update(now, controls)
        game.draw(surface, now)
        health, enemies = status_lines(game, NUM_ENEMIES)
        _, health_h = status_font.size(health)
        _blit(surface, status_font, health, (25, bar_middle - health_h / 2))
        enemies_w, enemies_h = status_font.size(enemies)
        _blit(
            surface,
            status_font,
            enemies,
            (WINDOW_WIDTH - enemies_w - 25, bar_middle - enemies_h / 2),
        )
    elif not game.enemies:
        game.update(now, controls)
        game.player.draw(surface)
        message = "YOU WON"
        width, height = banner_font.size(message)
        _blit(
            surface,
            banner_font,
            message,
            ((WINDOW_WIDTH - width) / 2, (WINDOW_WIDTH - height) / 2),
        )
    else:
        game.update(now, controls)
        game.player.draw(surface)
        message = "GAME OVER"
        width, height = banner_font.size(message)
        _blit(
            surface,
            banner_font,
            message,
            ((WINDOW_WIDTH - width) / 2, (WINDOW_HEIGHT - height) / 2),
        )


def _build_game() -> Game:
    images = {
        "player": _load_image("Graphics/jet.png", 25),
        "enemy": _load_image("Graphics/jet2.png", 25),
        "missile": _load_image("Graphics/missile.png", 4),
        "radar_plane": _load_image("Graphics/radar_jet.png"),
    }
    sounds = {
        "gunfire": _load_sound("Sounds/gunfire.wav", 0.5),
        "hit": _load_sound("Sounds/bullet_hit.wav", 0.25),
        "ping": _load_sound("Sounds/radar_update_blip.wav", 0.15),
        "flare": _load_sound("Sounds/Chaff_Flare_SFX.wav"),
        "lock_tone": _load_sound("Sounds/missile_lock_VWS.wav", 1.0),
        "locking": _load_sound("Sounds/missile_locking.mp3", 1.0),
        "launch_warning": _load_sound("missile_launch_warning.mp3", 1.0),
    }
    return Game(
        NUM_ENEMIES,
        PLAYER_MAX_HEALTH,
        GREEN,
        VERTICAL_BAR_HORIZONTAL_OFFSET,
        images={k: v for k, v in images.items() if v is not None},
        sounds={k: v for k, v in sounds.items() if v is not None},
    )


def main(argv=None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="baddcs", description=WINDOW_TITLE)
    parser.parse_args(argv)

    pygame.init()
    try:
        pygame.mixer.init()
    except pygame.error:
        pass
    surface = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    pygame.display.set_caption(WINDOW_TITLE)

    status_font = _load_font("Fonts/PressStart2P-Regular.ttf", STATUS_FONT_SIZE)
    banner_font = _load_font("Fonts/PressStart2P-Regular.ttf", BANNER_FONT_SIZE)
    title_font = _load_font("Fonts/Quantico-Bold.ttf", TITLE_MESSAGE_SIZE)
    start_font = _load_font("Fonts/Quantico-Bold.ttf", START_BUTTON_MESSAGE_SIZE)

    state = GameState.TITLE
    game = _build_game()
    _start_title_music()
    clock = pygame.time.Clock()

    try:
        while True:
            mouse_pressed = False
            missile_pressed = False
            quit_requested = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    quit_requested = True
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        quit_requested = True
                    elif event.key == pygame.K_m:
                        missile_pressed = True
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    mouse_pressed = True
            if quit_requested:
                break

            now = pygame.time.get_ticks() / 1000.0
            keys = pygame.key.get_pressed()
            mouse_pos = Vec2(*map(float, pygame.mouse.get_pos()))
            controls = Controls(
                left=bool(keys[pygame.K_LEFT]),
                right=bool(keys[pygame.K_RIGHT]),
                fire=bool(keys[pygame.K_SPACE]),
                countermeasure=bool(keys[pygame.K_q]),
                restart=bool(keys[pygame.K_RETURN]),
                fire_missile=missile_pressed,
                mouse_pos=mouse_pos,
                mouse_pressed=mouse_pressed,
            )

            surface.fill(GREY)
            if state is GameState.TITLE:
                if _draw_title(surface, title_font, start_font, mouse_pos, mouse_pressed):
                    state = GameState.GAME
                    _pause_title_music()
            else:
                _draw_game(surface, game, now, controls, status_font, banner_font)
            pygame.display.flip()
            clock.tick(TARGET_FPS)
    finally:
        pygame.quit()
    return 0
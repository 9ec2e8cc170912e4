"""Top-down jet combat arcade game with radar locks, guided missiles and flares."""

__version__ = "0.1.0"
__all__ = [
    "app",
    "bullet",
    "button",
    "core",
    "countermeasures",
    "enemy",
    "enemy_return",
    "flare",
    "game",
    "missile",
    "player",
    "radar",
]
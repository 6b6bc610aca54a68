"""Game settings and configuration."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import pygame

from rogue.world.dungeon import Direction
from rogue.world.dungeon_gen import GeneratorConfig

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = "data/config/settings.json"


@dataclass
class KeyBindings:
    """Keyboard bindings configuration."""

    move_up: int = pygame.K_k
    move_down: int = pygame.K_j
    move_left: int = pygame.K_h
    move_right: int = pygame.K_l
    stairs_down: int = pygame.K_PERIOD
    stairs_up: int = pygame.K_COMMA
    quit: int = pygame.K_ESCAPE

    # Arrow keys and the shifted stair glyphs as alternatives
    move_up_alt: int = pygame.K_UP
    move_down_alt: int = pygame.K_DOWN
    move_left_alt: int = pygame.K_LEFT
    move_right_alt: int = pygame.K_RIGHT
    stairs_down_alt: int = pygame.K_GREATER
    stairs_up_alt: int = pygame.K_LESS

    def is_movement_key(self, key: int) -> bool:
        """Check if key is a movement key."""
        return self.get_movement_direction(key) is not None

    def get_movement_direction(self, key: int) -> tuple[int, int] | None:
        """Get movement direction from key."""
        if key in (self.move_up, self.move_up_alt):
            return (0, -1)
        if key in (self.move_down, self.move_down_alt):
            return (0, 1)
        if key in (self.move_left, self.move_left_alt):
            return (-1, 0)
        if key in (self.move_right, self.move_right_alt):
            return (1, 0)
        return None

    def get_stairs_direction(self, key: int) -> Direction | None:
        """Get stair direction from key."""
        if key in (self.stairs_down, self.stairs_down_alt):
            return Direction.DOWN
        if key in (self.stairs_up, self.stairs_up_alt):
            return Direction.UP
        return None


@dataclass
class GameSettings:
    """Main game settings."""

    grid_cols: int = 80
    grid_rows: int = 50
    tile_size: int = 12
    fps: int = 60
    floor_count: int = 5
    seed: Optional[int] = None
    max_rooms: int = 30
    room_min_size: int = 6
    room_max_size: int = 10
    log_level: str = "INFO"
    keybindings: KeyBindings = field(default_factory=KeyBindings)

    @property
    def screen_size(self) -> tuple[int, int]:
        """Window size in pixels."""
        return (self.grid_cols * self.tile_size, self.grid_rows * self.tile_size)

    def generator_config(self) -> GeneratorConfig:
        """Level generation parameters derived from these settings."""
        return GeneratorConfig(
            width=self.grid_cols,
            height=self.grid_rows,
            max_rooms=self.max_rooms,
            room_min_width=self.room_min_size,
            room_max_width=self.room_max_size,
            room_min_height=self.room_min_size,
            room_max_height=self.room_max_size,
        )

    @classmethod
    def load(cls, path: Path | str = DEFAULT_SETTINGS_PATH) -> "GameSettings":
        """Load settings from JSON file. Missing or unreadable files give defaults."""
        path = Path(path)
        if not path.exists():
            return cls()

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", path, e)
            return cls()

        defaults = cls()
        default_keys = defaults.keybindings
        keybindings_data = data.get("keybindings", {})
        keybindings = KeyBindings(
            move_up=keybindings_data.get("move_up", default_keys.move_up),
            move_down=keybindings_data.get("move_down", default_keys.move_down),
            move_left=keybindings_data.get("move_left", default_keys.move_left),
            move_right=keybindings_data.get("move_right", default_keys.move_right),
            stairs_down=keybindings_data.get("stairs_down", default_keys.stairs_down),
            stairs_up=keybindings_data.get("stairs_up", default_keys.stairs_up),
            quit=keybindings_data.get("quit", default_keys.quit),
        )

        return cls(
            grid_cols=data.get("grid_cols", defaults.grid_cols),
            grid_rows=data.get("grid_rows", defaults.grid_rows),
            tile_size=data.get("tile_size", defaults.tile_size),
            fps=data.get("fps", defaults.fps),
            floor_count=data.get("floor_count", defaults.floor_count),
            seed=data.get("seed", defaults.seed),
            max_rooms=data.get("max_rooms", defaults.max_rooms),
            room_min_size=data.get("room_min_size", defaults.room_min_size),
            room_max_size=data.get("room_max_size", defaults.room_max_size),
            log_level=data.get("log_level", defaults.log_level),
            keybindings=keybindings,
        )

    def save(self, path: Path | str = DEFAULT_SETTINGS_PATH) -> None:
        """Save settings to JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        data: Dict[str, Any] = {
            "grid_cols": self.grid_cols,
            "grid_rows": self.grid_rows,
            "tile_size": self.tile_size,
            "fps": self.fps,
            "floor_count": self.floor_count,
            "seed": self.seed,
            "max_rooms": self.max_rooms,
            "room_min_size": self.room_min_size,
            "room_max_size": self.room_max_size,
            "log_level": self.log_level,
            "keybindings": {
                "move_up": self.keybindings.move_up,
                "move_down": self.keybindings.move_down,
                "move_left": self.keybindings.move_left,
                "move_right": self.keybindings.move_right,
                "stairs_down": self.keybindings.stairs_down,
                "stairs_up": self.keybindings.stairs_up,
                "quit": self.keybindings.quit,
            },
        }

        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

"""
Game configuration.

Glyphs, colors and the field size come from a YAML file (cfg.yaml);
process-level settings (config path, logging, random seed) come from
environment variables, optionally loaded from a .env file.
"""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv

load_dotenv()
logger = logging.getLogger(__name__)

CONFIG_FILENAME = "cfg.yaml"
MIN_FIELD_SIZE = 5
MAX_FIELD_SIZE = 61  # largest field where the speed curve still starts above MAX_SNAKE_SPEED
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Fallback glyphs for keys a config file leaves out
DEFAULT_GLYPHS = {
    "left_up_corner": "╔",
    "up": "═══",
    "right_up_corner": "╗",
    "left": "║",
    "right": "║",
    "left_down_corner": "╚",
    "down": "═══",
    "right_down_corner": "╝",
    "snake_body": " ■ ",
    "empty": "   ",
    "apple": " ● ",
    "snake_color": "32",
    "apple_color": "31",
}


@dataclass
class GameConfig:
    field_size: int
    left_up_corner: str = DEFAULT_GLYPHS["left_up_corner"]
    up: str = DEFAULT_GLYPHS["up"]
    right_up_corner: str = DEFAULT_GLYPHS["right_up_corner"]
    left: str = DEFAULT_GLYPHS["left"]
    right: str = DEFAULT_GLYPHS["right"]
    left_down_corner: str = DEFAULT_GLYPHS["left_down_corner"]
    down: str = DEFAULT_GLYPHS["down"]
    right_down_corner: str = DEFAULT_GLYPHS["right_down_corner"]
    snake_body: str = DEFAULT_GLYPHS["snake_body"]
    empty: str = DEFAULT_GLYPHS["empty"]
    apple: str = DEFAULT_GLYPHS["apple"]
    snake_color: str = DEFAULT_GLYPHS["snake_color"]
    apple_color: str = DEFAULT_GLYPHS["apple_color"]

    @classmethod
    def from_dict(cls, data: Any) -> "GameConfig":
        """
        Build a validated GameConfig from parsed YAML.

        Raises:
            ValueError: If the document is not a mapping, field_size is
                missing or out of range, or a glyph is not a string.
        """
        if not isinstance(data, dict):
            raise ValueError("Config must be a mapping of settings.")

        field_size = data.get("field_size")
        if field_size is None:
            raise ValueError("Config is missing 'field_size'.")
        if isinstance(field_size, bool) or not isinstance(field_size, int):
            raise ValueError(f"'field_size' must be an integer, got {field_size!r}.")
        if not MIN_FIELD_SIZE <= field_size <= MAX_FIELD_SIZE:
            raise ValueError(
                f"'field_size' must be between {MIN_FIELD_SIZE} and "
                f"{MAX_FIELD_SIZE}, got {field_size}."
            )

        glyphs = {}
        for key in DEFAULT_GLYPHS:
            if key not in data:
                continue
            value = data[key]
            # YAML reads unquoted color codes such as 32 as integers
            if key.endswith("_color") and isinstance(value, int) and not isinstance(value, bool):
                value = str(value)
            if not isinstance(value, str):
                raise ValueError(f"'{key}' must be a string, got {value!r}.")
            glyphs[key] = value

        unknown = set(data) - {f.name for f in fields(cls)}
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(sorted(unknown)))

        return cls(field_size=field_size, **glyphs)

    @property
    def glyphs(self) -> Dict[str, str]:
        """Renderer glyphs and colors keyed like the config file."""
        return {key: getattr(self, key) for key in DEFAULT_GLYPHS}


def candidate_paths(explicit: Optional[str] = None) -> List[Path]:
    """
    Return the places a config file is looked for, in order.

    Priority:
    1. The explicit path (--config), else SNAKE_CONFIG
    2. cfg.yaml in the current working directory
    3. cfg.yaml next to the program itself
    """
    explicit = explicit or os.getenv("SNAKE_CONFIG")
    if explicit:
        return [Path(explicit)]
    return [
        Path.cwd() / CONFIG_FILENAME,
        Path(__file__).resolve().parent / CONFIG_FILENAME,
    ]


def load_game_config(path: Optional[str] = None) -> GameConfig:
    """
    Load and validate the game config.

    Raises:
        FileNotFoundError: If no config file exists at any candidate path.
        ValueError: If the file is not valid YAML or fails validation.
    """
    paths = candidate_paths(path)
    for config_path in paths:
        if not config_path.is_file():
            logger.debug("No config at %s", config_path)
            continue

        with open(config_path, 'r', encoding='utf-8') as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Could not parse {config_path}: {e}") from e

        logger.info("Loaded config from %s", config_path)
        return GameConfig.from_dict(data)

    searched = ", ".join(str(p) for p in paths)
    raise FileNotFoundError(f"No {CONFIG_FILENAME} found (looked in: {searched})")


def get_log_level() -> str:
    """
    Return the log level name from SNAKE_LOG_LEVEL (default WARNING).

    Raises:
        ValueError: If SNAKE_LOG_LEVEL is not a standard level name.
    """
    level = (os.getenv("SNAKE_LOG_LEVEL") or "WARNING").strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(
            f"SNAKE_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {level!r}."
        )
    return level


def get_log_file() -> Optional[str]:
    return os.getenv("SNAKE_LOG_FILE") or None


def get_seed() -> Optional[int]:
    """
    Return the random seed from SNAKE_SEED, or None when unset.

    Raises:
        ValueError: If SNAKE_SEED is set but is not an integer.
    """
    raw = os.getenv("SNAKE_SEED")
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"SNAKE_SEED must be an integer, got {raw!r}.") from e

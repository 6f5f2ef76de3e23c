"""
Runtime settings, read from the environment (and a local .env file).
"""

import os
from typing import Optional

from dotenv import load_dotenv

from domain.constants import FOOD_REWARD, SNAKE_GRID_SIZE, TICK_INTERVAL_MS

load_dotenv()


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


SNAKE_GRID_WIDTH = _int_env("SNAKE_GRID_WIDTH", SNAKE_GRID_SIZE)
SNAKE_GRID_HEIGHT = _int_env("SNAKE_GRID_HEIGHT", SNAKE_GRID_SIZE)
SNAKE_TICK_MS = _int_env("SNAKE_TICK_MS", TICK_INTERVAL_MS)
SNAKE_FOOD_REWARD = _int_env("SNAKE_FOOD_REWARD", FOOD_REWARD)

# Unset means every run draws fresh randomness
GAME_SEED = _int_env("GAME_SEED", None)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

"""
Configuration loading utilities.

Loads environment variables from `.env`, applies defaults for the weekly menu
settings, and ensures data directories exist.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv, find_dotenv
from streamlit.logger import get_logger

logger = get_logger(__name__)

DEFAULT_RESTAURANTS = "Gira,Luna,Sole,Espace,Turbolama,Freibank"
DEFAULT_WEEK_HISTORY = 4
MAX_WEEK_HISTORY = 52


@dataclass(frozen=True)
class Config:
    data_dir: Path
    menus_dir: Path
    restaurants: Tuple[str, ...]
    week_history: int


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _parse_restaurants(raw: str) -> Tuple[str, ...]:
    return tuple(name.strip() for name in raw.split(",") if name.strip())


def load_config() -> Config:
    """Load configuration from environment and provision directories."""
    load_dotenv(find_dotenv(), override=True)

    data_dir_str = os.getenv("DATA_DIR", "./data")
    data_dir = Path(data_dir_str).expanduser().resolve()
    menus_dir = data_dir / "menus"

    restaurants = _parse_restaurants(os.getenv("MENU_RESTAURANTS", DEFAULT_RESTAURANTS))
    logger.debug("MENU_RESTAURANTS: %s", restaurants)

    week_history_str = os.getenv("WEEK_HISTORY", str(DEFAULT_WEEK_HISTORY))
    try:
        week_history = int(week_history_str)
    except (ValueError, TypeError):
        logger.debug("Invalid WEEK_HISTORY %r, using %s", week_history_str, DEFAULT_WEEK_HISTORY)
        week_history = DEFAULT_WEEK_HISTORY
    if week_history < 0 or week_history > MAX_WEEK_HISTORY:
        logger.debug("WEEK_HISTORY %s out of range, using %s", week_history, DEFAULT_WEEK_HISTORY)
        week_history = DEFAULT_WEEK_HISTORY

    _ensure_dir(data_dir)
    _ensure_dir(menus_dir)

    return Config(
        data_dir=data_dir,
        menus_dir=menus_dir,
        restaurants=restaurants,
        week_history=week_history,
    )

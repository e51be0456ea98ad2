"""
User configuration for the calculator front end.

Reads settings like the offered gain choices from a JSON file.
Only host preferences live here; progression state is never stored.
"""

import json
import logging
from pathlib import Path
from typing import TypedDict

logger = logging.getLogger(__name__)


class Config(TypedDict, total=False):
    """User configuration."""
    gain_choices: list[float]  # Gains selectable in the gain dropdown
    max_active_bonus: int  # Highest selectable number of activated tsukumo
    animate_banner: bool  # Show animated banner on startup


DEFAULT_CONFIG: Config = {
    "gain_choices": [1.0, 1.5],  # x1.5 during campaigns
    "max_active_bonus": 3,
    "animate_banner": True,
}

CONFIG_FILENAME = ".tsukumo_config.json"


def get_config_path(config_dir: Path | str = ".") -> Path:
    """Get path to config file."""
    return Path(config_dir) / CONFIG_FILENAME


def validate_config(config: Config) -> Config:
    """
    Drop settings the calculator cannot use.

    Gain choices must be positive numbers; if none remain the default
    choices are used. max_active_bonus must be a non-negative integer.
    """
    config = Config(**config)

    choices = config.get("gain_choices", DEFAULT_CONFIG["gain_choices"])
    if not isinstance(choices, list):
        choices = []
    valid = [
        float(g) for g in choices
        if isinstance(g, (int, float)) and not isinstance(g, bool) and g > 0
    ]
    if len(valid) != len(choices):
        logger.warning(f"Ignoring invalid gain choices in {choices}")
    config["gain_choices"] = valid or list(DEFAULT_CONFIG["gain_choices"])

    max_bonus = config.get("max_active_bonus", DEFAULT_CONFIG["max_active_bonus"])
    if not isinstance(max_bonus, int) or isinstance(max_bonus, bool) or max_bonus < 0:
        logger.warning(f"Ignoring invalid max_active_bonus {max_bonus!r}")
        max_bonus = DEFAULT_CONFIG["max_active_bonus"]
    config["max_active_bonus"] = max_bonus

    return config


def load_config(path: Path | str | None = None) -> Config:
    """Load config from file, or return defaults if not found."""
    path = Path(path) if path is not None else get_config_path()

    if not path.exists():
        return DEFAULT_CONFIG.copy()

    try:
        with open(path, "r", encoding="utf-8") as f:
            saved = json.load(f)
        # Merge with defaults to handle missing keys
        config = DEFAULT_CONFIG.copy()
        config.update(saved)
        return validate_config(config)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Ignoring unreadable config {path}: {e}")
        return DEFAULT_CONFIG.copy()

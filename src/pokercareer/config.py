"""Runtime configuration for Poker Career.

Values come from environment variables with documented defaults.
"""

import logging
import os

from pokercareer.parameters import DEFAULT_BANKROLL, DEFAULT_ENERGY

# Default configuration (can be overridden via environment variables)
DEFAULT_LOG_LEVEL = "WARNING"


def get_log_level() -> int:
    """Get configured logging level from environment.

    Unknown level names fall back to DEFAULT_LOG_LEVEL.
    """
    level_name = os.environ.get("POKERCAREER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        return logging.getLevelName(DEFAULT_LOG_LEVEL)
    return level


def _get_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def get_starting_bankroll() -> int:
    """Get configured starting bankroll from environment."""
    return _get_int("POKERCAREER_STARTING_BANKROLL", DEFAULT_BANKROLL)


def get_starting_energy() -> int:
    """Get configured starting energy from environment."""
    return _get_int("POKERCAREER_STARTING_ENERGY", DEFAULT_ENERGY)

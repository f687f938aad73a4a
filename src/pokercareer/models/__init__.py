"""Poker Career models.

This module exports the core data structures for the game.
"""

from .profile import StatProfile, clamp_stat, default_resources, default_stats
from .results import EntryOutcome, EntryResult
from .tournament import TournamentKind, TournamentStatus

__all__ = [
    # Enums
    "TournamentKind",
    "TournamentStatus",
    # Character
    "StatProfile",
    "clamp_stat",
    "default_stats",
    "default_resources",
    # Results
    "EntryResult",
    "EntryOutcome",
]

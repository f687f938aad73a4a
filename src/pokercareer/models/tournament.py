"""Tournament classification models for Poker Career."""

from __future__ import annotations

from enum import Enum

from pokercareer.parameters import ENERGY_COST


class TournamentKind(Enum):
    """Closed set of tournament classes."""

    LOCAL = "local"
    ONLINE = "online"  # Played from home, costs no energy
    MAJOR = "major"
    HIGHROLLER = "highroller"

    @property
    def energy_required(self) -> int:
        """Energy charged (and required) to enter this kind of tournament."""
        if self is TournamentKind.ONLINE:
            return 0
        return ENERGY_COST

    @property
    def is_energy_exempt(self) -> bool:
        return self.energy_required == 0


class TournamentStatus(Enum):
    """Lifecycle status of a tournament.

    Only OPEN is reachable: every entry is independent and the tournament
    stays re-enterable. IN_PROGRESS and COMPLETED are kept so that future
    transition logic has a home.
    """

    OPEN = "open"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

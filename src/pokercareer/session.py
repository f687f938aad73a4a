"""Career session - the surface a presentation layer talks to.

A CareerSession exclusively owns one StatProfile and the standard lineup of
tournaments. Presentation code renders the dicts and results returned here
and never reaches into field generation.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from pokercareer.config import get_starting_bankroll, get_starting_energy
from pokercareer.engine.scoring import RandomSource
from pokercareer.engine.stats import summarize_history
from pokercareer.engine.tournament import Tournament
from pokercareer.models.profile import StatProfile
from pokercareer.models.results import EntryOutcome, EntryResult
from pokercareer.models.tournament import TournamentKind

logger = logging.getLogger(__name__)


# (kind, buy_in, field_size) for the tournaments offered in the lobby
STANDARD_LINEUP: tuple[tuple[TournamentKind, int, int], ...] = (
    (TournamentKind.LOCAL, 100, 20),
    (TournamentKind.ONLINE, 100, 1000),
    (TournamentKind.MAJOR, 2000, 100),
    (TournamentKind.HIGHROLLER, 1000, 200),
)


def create_profile(
    name: str = "Player",
    style: str = "balanced",
    stats: Optional[Mapping[str, int]] = None,
) -> StatProfile:
    """Create a fresh profile using the configured starting resources."""
    return StatProfile(
        name=name,
        style=style,
        stats=dict(stats or {}),
        resources={
            "bankroll": get_starting_bankroll(),
            "energy": get_starting_energy(),
        },
    )


class CareerSession:
    """One player's career: a profile plus the tournaments they can enter.

    Attributes:
        profile: The player's profile, mutated by every entry
        tournaments: Tournament per kind
    """

    def __init__(
        self,
        profile: Optional[StatProfile] = None,
        rng: Optional[RandomSource] = None,
        lineup: tuple[tuple[TournamentKind, int, int], ...] = STANDARD_LINEUP,
    ) -> None:
        self.profile = profile if profile is not None else create_profile()
        self.tournaments: dict[TournamentKind, Tournament] = {
            kind: Tournament(kind, buy_in, field_size, rng=rng)
            for kind, buy_in, field_size in lineup
        }
        logger.debug(f"Session for {self.profile.name} with {len(self.tournaments)} tournaments")

    def get_tournament(self, kind: Union[TournamentKind, str]) -> Tournament:
        """Look up a tournament by kind.

        Raises:
            ValueError: If no tournament of that kind is in the lineup
        """
        kind = TournamentKind(kind)
        tournament = self.tournaments.get(kind)
        if tournament is None:
            raise ValueError(f"No {kind.value} tournament in this session")
        return tournament

    def list_tournaments(self) -> list[dict[str, Any]]:
        """get_info() of every tournament, with entry eligibility."""
        return [
            {**tournament.get_info(), "can_enter": tournament.can_enter(self.profile)}
            for tournament in self.tournaments.values()
        ]

    def enter(self, kind: Union[TournamentKind, str]) -> EntryOutcome:
        return self.get_tournament(kind).enter(self.profile)

    def all_results(self) -> list[EntryResult]:
        results = []
        for tournament in self.tournaments.values():
            results.extend(tournament.history)
        return results

    def career_summary(self) -> dict[str, Any]:
        """Character info plus statistics across every tournament."""
        return {
            "character": self.profile.get_character_info(),
            "stats": summarize_history(self.all_results()).to_dict(),
            "by_kind": {
                kind.value: tournament.get_stats().to_dict()
                for kind, tournament in self.tournaments.items()
            },
        }

    def reset_stats(self) -> None:
        for tournament in self.tournaments.values():
            tournament.reset_stats()

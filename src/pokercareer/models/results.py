"""Entry result models for Poker Career.

EntryResult is the immutable record of one tournament entry. EntryOutcome
wraps it with the success flag returned to the presentation layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from pokercareer.models.tournament import TournamentKind


class EntryResult(BaseModel):
    """Outcome of a single tournament entry.

    Attributes:
        entry_number: 1-based sequence number within the tournament's history
        kind: Tournament class entered
        buy_in: Buy-in paid for this entry
        score: Player performance score (0-100)
        rank: Finishing position (1 = best)
        prize: Currency won (0 when out of the payout schedule)
        percentile: rank / field_size * 100 (lower is better)
        field_size: Total entrants including the player
        reputation_gain: Reputation credited for this finish
        in_the_money: Finished in a prize-paying place (prize > 0)
        final_table: Finished within the final table
    """

    model_config = ConfigDict(frozen=True)

    entry_number: int = Field(ge=1)
    kind: TournamentKind
    buy_in: int = Field(ge=1)
    score: float = Field(ge=0.0, le=100.0)
    rank: int = Field(ge=1)
    prize: int = Field(ge=0)
    percentile: float = Field(gt=0.0, le=100.0)
    field_size: int = Field(ge=2)
    reputation_gain: int = Field(default=0, ge=0)
    in_the_money: bool = False
    final_table: bool = False

    @property
    def net(self) -> int:
        """Prize minus buy-in."""
        return self.prize - self.buy_in

    @property
    def is_victory(self) -> bool:
        return self.rank == 1


@dataclass
class EntryOutcome:
    """Result of calling Tournament.enter().

    Attributes:
        success: Whether the entry was accepted
        message: Human-readable reason when success=False
        result: The EntryResult when success=True
    """

    success: bool
    message: Optional[str] = None
    result: Optional[EntryResult] = None

    @property
    def final_table(self) -> bool:
        """True when the accepted entry reached the final table."""
        return self.result is not None and self.result.final_table

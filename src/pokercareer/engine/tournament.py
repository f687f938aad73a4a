"""Tournament outcome engine for Poker Career.

This module implements the Tournament class, which resolves one entry at a
time against a freshly generated simulated field.

Entry Sequence:
1. VALIDATE - Status open, bankroll >= buy-in, energy >= energy required
2. FIELD - Generate field_size - 1 opponent scores
3. SCORE - Score the player, clamped to [0, 100]
4. RANK - 1 + number of opponents scoring strictly higher
5. PAYOUT - Resolve prize from the payout table
6. REPUTATION - floor(prize / 100) + ITM bonus, when prize > 0
7. APPLY - Deduct buy-in and energy (unless energy-exempt), credit prize
   and reputation
8. RECORD - Append the EntryResult to history

The profile is mutated only after the EntryResult has been built.

The tournament never leaves the OPEN status: entries are independent and
repeatable.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from pokercareer.engine.field import FieldGenerator
from pokercareer.engine.payout import PayoutTable
from pokercareer.engine.scoring import RandomSource, ScoringFunction, clamp
from pokercareer.engine.stats import TournamentStats, summarize_history
from pokercareer.models.profile import StatProfile
from pokercareer.models.results import EntryOutcome, EntryResult
from pokercareer.models.tournament import TournamentKind, TournamentStatus
from pokercareer.parameters import (
    FINAL_TABLE_SIZE,
    ITM_BASE_BONUS,
    ITM_PERCENT,
    PRIZE_POOL_DENOMINATOR,
    PRIZE_POOL_NUMERATOR,
    REPUTATION_PRIZE_DIVISOR,
    SCORE_MAX,
    SCORE_MIN,
)

logger = logging.getLogger(__name__)


def calculate_prize_pool(buy_in: int, field_size: int) -> int:
    """Prize pool = floor(buy_in * field_size * 0.9).

    Examples:
        >>> calculate_prize_pool(100, 1000)
        90000
        >>> calculate_prize_pool(1000, 200)
        180000
    """
    return buy_in * field_size * PRIZE_POOL_NUMERATOR // PRIZE_POOL_DENOMINATOR


def calculate_itm_count(field_size: int) -> int:
    """Number of ranks considered in the money: floor(field_size * 15%).

    Examples:
        >>> calculate_itm_count(1000)
        150
        >>> calculate_itm_count(20)
        3
        >>> calculate_itm_count(2)
        0
    """
    return field_size * ITM_PERCENT // 100


def calculate_itm_bonus(rank: int, field_size: int) -> int:
    """Reputation bonus for finishing in the money.

    Formula:
        bonus = floor(100 * (itm_count - rank + 1) / itm_count), 0 if rank > itm_count

    Examples:
        >>> calculate_itm_bonus(1, 1000)
        100
        >>> calculate_itm_bonus(150, 1000)
        0
        >>> calculate_itm_bonus(151, 1000)
        0
    """
    itm_count = calculate_itm_count(field_size)
    if rank > itm_count:
        return 0
    return ITM_BASE_BONUS * (itm_count - rank + 1) // itm_count


def calculate_rank(player_score: float, field_scores: Iterable[float]) -> int:
    """1-based rank of the player among the field.

    Ties resolve in the player's favour: the player takes the first of
    any positions sharing their exact score.

    Examples:
        >>> calculate_rank(80.0, [90.0, 70.0, 60.0])
        2
        >>> calculate_rank(70.0, [90.0, 70.0, 70.0])
        2
        >>> calculate_rank(100.0, [])
        1
    """
    return 1 + sum(1 for score in field_scores if score > player_score)


def calculate_percentile(rank: int, field_size: int) -> float:
    return rank / field_size * 100.0


class Tournament:
    """A re-enterable tournament of a fixed kind, buy-in and field size.

    Attributes:
        kind: Tournament class
        buy_in: Entry fee
        field_size: Total entrants including the player
        prize_pool: floor(buy_in * field_size * 0.9), fixed at construction
        status: Always TournamentStatus.OPEN
        history: Entry results in the order they were played
    """

    def __init__(
        self,
        kind: TournamentKind,
        buy_in: int,
        field_size: int,
        rng: Optional[RandomSource] = None,
        scoring: Optional[ScoringFunction] = None,
        field_generator: Optional[FieldGenerator] = None,
    ) -> None:
        """Initialize a tournament.

        Args:
            kind: Tournament class
            buy_in: Entry fee (>= 1)
            field_size: Total entrants including the player (>= 2)
            rng: Uniform random source (default: a fresh random.Random)
            scoring: Override for the scoring function (default: built on rng)
            field_generator: Override for the field generator (default: built on scoring)

        Raises:
            ValueError: If buy_in or field_size is out of range
        """
        if buy_in < 1:
            raise ValueError(f"buy_in must be positive, got {buy_in}")
        if field_size < 2:
            raise ValueError(f"field_size must be >= 2, got {field_size}")

        self.kind = TournamentKind(kind)
        self.buy_in = buy_in
        self.field_size = field_size
        self._prize_pool = calculate_prize_pool(buy_in, field_size)
        self.status = TournamentStatus.OPEN
        self.current_players = field_size
        self.history: list[EntryResult] = []

        self.scoring = scoring if scoring is not None else ScoringFunction(rng)
        self.field_generator = (
            field_generator if field_generator is not None else FieldGenerator(self.scoring)
        )

    @property
    def prize_pool(self) -> int:
        return self._prize_pool

    @property
    def energy_required(self) -> int:
        return self.kind.energy_required

    @property
    def itm_count(self) -> int:
        return calculate_itm_count(self.field_size)

    def can_enter(self, profile: StatProfile) -> bool:
        """Check status, bankroll and energy for a prospective entry."""
        return self._refusal_reason(profile) is None

    def _refusal_reason(self, profile: StatProfile) -> Optional[str]:
        if self.status is not TournamentStatus.OPEN:
            return f"Tournament is not open (status: {self.status.value})"
        if profile.bankroll < self.buy_in:
            return f"Insufficient bankroll: need {self.buy_in}, have {profile.bankroll}"
        if profile.energy < self.energy_required:
            return f"Insufficient energy: need {self.energy_required}, have {profile.energy}"
        return None

    def enter(self, profile: StatProfile) -> EntryOutcome:
        """Play one entry with the given profile, mutating it in place.

        Args:
            profile: The acting player's profile (owned by the caller)

        Returns:
            EntryOutcome with success=False and a message if the entry is
            refused (profile untouched), otherwise success=True and the result.
        """
        reason = self._refusal_reason(profile)
        if reason is not None:
            logger.warning(f"Entry refused for {self.kind.value} tournament: {reason}")
            return EntryOutcome(success=False, message=reason)

        self.current_players = self.field_size
        field_scores = self.field_generator.generate_scores(self.field_size)
        score = clamp(self.scoring.score_profile(profile), SCORE_MIN, SCORE_MAX)
        result = self._resolve(score, field_scores)

        # Profile is only touched once the result is fully built
        profile.modify_resource("bankroll", -self.buy_in)
        if not self.kind.is_energy_exempt:
            profile.modify_resource("energy", -self.energy_required)
        if result.prize > 0:
            profile.modify_resource("bankroll", result.prize)
            profile.modify_resource("reputation", result.reputation_gain)
        self.history.append(result)

        logger.info(
            f"{self.kind.value} entry #{result.entry_number}: score={score:.2f} "
            f"rank={result.rank}/{self.field_size} prize={result.prize}"
        )
        return EntryOutcome(success=True, result=result)

    def _resolve(self, score: float, field_scores: list[float]) -> EntryResult:
        """Rank the player, resolve prize and reputation, build the EntryResult."""
        rank = calculate_rank(score, field_scores)
        prize = PayoutTable.prize_for(rank, self.field_size, self.prize_pool)

        reputation_gain = 0
        if prize > 0:
            reputation_gain = prize // REPUTATION_PRIZE_DIVISOR + calculate_itm_bonus(
                rank, self.field_size
            )

        return EntryResult(
            entry_number=len(self.history) + 1,
            kind=self.kind,
            buy_in=self.buy_in,
            score=score,
            rank=rank,
            prize=prize,
            percentile=calculate_percentile(rank, self.field_size),
            field_size=self.field_size,
            reputation_gain=reputation_gain,
            in_the_money=prize > 0,
            final_table=rank <= FINAL_TABLE_SIZE,
        )

    def get_info(self) -> dict[str, Any]:
        """Summary for display. Pure: no side effects."""
        return {
            "name": self.kind.value,
            "kind": self.kind.value,
            "buy_in": self.buy_in,
            "prize_pool": self.prize_pool,
            "field_size": self.field_size,
            "current_players": self.current_players,
            "status": self.status.value,
            "energy_required": self.energy_required,
            "itm_count": self.itm_count,
        }

    def get_history(self) -> list[EntryResult]:
        """Entry results sorted by rank ascending (play order among equal ranks)."""
        return sorted(self.history, key=lambda r: r.rank)

    def get_stats(self) -> TournamentStats:
        return summarize_history(self.history)

    def reset_stats(self) -> None:
        """Forget all recorded entries."""
        logger.info(f"Resetting {len(self.history)} {self.kind.value} entries")
        self.history.clear()

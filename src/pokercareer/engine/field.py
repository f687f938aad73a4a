"""Simulated field generation for Poker Career.

Produces the field_size - 1 opponents that fill a tournament around the
acting player. Opponents are tiered by generation order, not by sorting:

- Elite: first ceil(1% of field_size) opponents, +10 score
- Strong: next opponents up to index ceil(5% of field_size), +5 score
- Baseline: everyone else

Each opponent is scored by the same ScoringFunction as the player, with a
random skill bonus standing in for stats. Scores are clamped to [0, 100]
after the tier bonus.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum

from pokercareer.engine.scoring import ScoringFunction, clamp
from pokercareer.parameters import (
    ELITE_BONUS,
    ELITE_PERCENT,
    SCORE_MAX,
    SCORE_MIN,
    STRONG_BONUS,
    STRONG_PERCENT,
)

logger = logging.getLogger(__name__)


class FieldTier(Enum):
    """Strength class of a simulated opponent."""

    ELITE = "elite"
    STRONG = "strong"
    BASELINE = "baseline"

    @property
    def bonus(self) -> float:
        if self is FieldTier.ELITE:
            return ELITE_BONUS
        if self is FieldTier.STRONG:
            return STRONG_BONUS
        return 0.0


@dataclass(frozen=True)
class FieldEntry:
    """One simulated opponent. Ephemeral: discarded after ranking.

    Attributes:
        name: Synthetic identity ("NPC 1", "NPC 2", ...)
        tier: Strength class
        score: Final score after tier bonus, in [0, 100]
    """

    name: str
    tier: FieldTier
    score: float


def tier_limits(field_size: int) -> tuple[int, int]:
    """Generation-index limits for the elite and strong tiers.

    Returns:
        (elite_count, strong_limit): indices [0, elite_count) are elite,
        [elite_count, strong_limit) are strong.

    Examples:
        >>> tier_limits(1000)
        (10, 50)
        >>> tier_limits(20)
        (1, 1)
        >>> tier_limits(200)
        (2, 10)
    """
    elite_count = math.ceil(field_size * ELITE_PERCENT / 100)
    strong_limit = math.ceil(field_size * STRONG_PERCENT / 100)
    return elite_count, max(elite_count, strong_limit)


def tier_for_index(index: int, field_size: int) -> FieldTier:
    """Tier of the opponent generated at the given 0-based index."""
    elite_count, strong_limit = tier_limits(field_size)
    if index < elite_count:
        return FieldTier.ELITE
    if index < strong_limit:
        return FieldTier.STRONG
    return FieldTier.BASELINE


class FieldGenerator:
    """Synthesizes the opponent field for one tournament entry."""

    def __init__(self, scoring: ScoringFunction) -> None:
        self.scoring = scoring

    def generate(self, field_size: int) -> list[FieldEntry]:
        """Generate field_size - 1 opponents in tier order.

        Args:
            field_size: Total entrants including the player (>= 2)

        Returns:
            List of FieldEntry, elites first
        """
        if field_size < 2:
            raise ValueError(f"field_size must be >= 2, got {field_size}")

        elite_count, strong_limit = tier_limits(field_size)
        logger.debug(
            f"Generating field of {field_size - 1} opponents "
            f"(elite={elite_count}, strong={max(0, strong_limit - elite_count)})"
        )

        entries = []
        for i in range(field_size - 1):
            tier = tier_for_index(i, field_size)
            score = clamp(self.scoring.score_npc() + tier.bonus, SCORE_MIN, SCORE_MAX)
            entries.append(FieldEntry(name=f"NPC {i + 1}", tier=tier, score=score))
        return entries

    def generate_scores(self, field_size: int) -> list[float]:
        """Generate only the opponent scores."""
        return [entry.score for entry in self.generate(field_size)]

"""Tournament engine module for Poker Career.

This module contains the core tournament logic including:
- scoring: Box-Muller score synthesis for the player and the field
- field: Tiered simulated-field generation
- payout: Generic and large-field payout schedules
- tournament: Entry validation, ranking, payout and history
- stats: ROI / ITM / final-table statistics over a history

Usage:
    from pokercareer.engine import Tournament
    from pokercareer.models import StatProfile, TournamentKind

    profile = StatProfile()
    tournament = Tournament(TournamentKind.ONLINE, buy_in=100, field_size=1000)

    outcome = tournament.enter(profile)
    if outcome.success:
        print(f"Finished {outcome.result.rank} for {outcome.result.prize}")
    else:
        print(outcome.message)
"""

from pokercareer.engine.field import (
    FieldEntry,
    FieldGenerator,
    FieldTier,
    tier_for_index,
    tier_limits,
)
from pokercareer.engine.payout import PayoutTable
from pokercareer.engine.scoring import (
    RandomSource,
    ScoringFunction,
    box_muller,
    calculate_score,
    calculate_skill_bonus,
    clamp,
    standard_normal,
)
from pokercareer.engine.stats import TournamentStats, summarize_history
from pokercareer.engine.tournament import (
    Tournament,
    calculate_itm_bonus,
    calculate_itm_count,
    calculate_percentile,
    calculate_prize_pool,
    calculate_rank,
)

__all__ = [
    # Engine classes
    "Tournament",
    "TournamentStats",
    "FieldGenerator",
    "FieldEntry",
    "FieldTier",
    "PayoutTable",
    "ScoringFunction",
    "RandomSource",
    # Scoring functions
    "box_muller",
    "calculate_score",
    "calculate_skill_bonus",
    "clamp",
    "standard_normal",
    # Field functions
    "tier_for_index",
    "tier_limits",
    # Tournament functions
    "calculate_itm_bonus",
    "calculate_itm_count",
    "calculate_percentile",
    "calculate_prize_pool",
    "calculate_rank",
    "summarize_history",
]

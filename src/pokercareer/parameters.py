"""Game balance parameters for Poker Career.

This module is the SINGLE SOURCE OF TRUTH for all tunable tournament constants.

Parameter Categories:
- Character: Stat/resource names and starting values
- Scoring: How a character's stats become a tournament score
- Field: How the simulated field is tiered
- Economy: Rake, energy cost, ITM band, payout schedules

Usage:
    from pokercareer.parameters import STAT_WEIGHTS, ITM_PERCENT

Note: Fractions that feed integer prize math are stored as integer basis
points (1 bp = 0.01%) so that floor(pool * fraction) is computed exactly.
"""

# =============================================================================
# CHARACTER PARAMETERS
# =============================================================================

STAT_NAMES = ("poker_iq", "insight", "gto_mastery", "focus", "stamina", "luck")
"""Skill attributes every character carries.

- poker_iq: probability math and strategic understanding
- insight: bluffing, bluff-catching, hero folds
- gto_mastery: theoretically optimal play
- focus: endurance over a long tournament
- stamina: fatigue management across back-to-back sessions
- luck: the random element
"""

RESOURCE_NAMES = ("bankroll", "reputation", "energy")

STAT_MIN = 0
STAT_MAX = 100

DEFAULT_STAT_VALUE = 50
DEFAULT_BANKROLL = 1000
DEFAULT_REPUTATION = 0
DEFAULT_ENERGY = 100


# =============================================================================
# SCORING PARAMETERS
# =============================================================================

STAT_WEIGHTS = {
    "poker_iq": 0.30,
    "insight": 0.25,
    "gto_mastery": 0.20,
    "focus": 0.15,
    "stamina": 0.05,
    "luck": 0.05,
}
"""Relative importance of each stat in the skill bonus.

Contract: the weights MUST sum to 1.0 so that the weighted average of
stats in [0, 100] divided by 100 stays in [0, 1].

Tuning:
    - Shift weight between stats freely, but re-check the sum.
"""

BASE_SCORE_MEAN = 50.0
BASE_SCORE_STDDEV = 15.0
"""Base score ~ Normal(50, 15), drawn with the Box-Muller transform."""

SKILL_SCORE_SCALE = 25.0
"""Maximum points a perfect skill bonus (1.0) adds to the score."""

LUCK_FACTOR_RANGE = 10.0
"""Luck factor is uniform in [-LUCK_FACTOR_RANGE, +LUCK_FACTOR_RANGE]."""

SCORE_MIN = 0.0
SCORE_MAX = 100.0

NPC_SKILL_MEAN = 0.5
NPC_SKILL_STDDEV = 0.15
"""Simulated opponents draw their skill bonus from Normal(0.5, 0.15),
clamped to [0, 1], in place of a stat-weighted bonus."""


# =============================================================================
# FIELD PARAMETERS
# =============================================================================

ELITE_PERCENT = 1
"""First ceil(1% of field size) generated opponents are elite."""

ELITE_BONUS = 10.0

STRONG_PERCENT = 5
"""Opponents after the elite band, up to ceil(5% of field size), are strong."""

STRONG_BONUS = 5.0


# =============================================================================
# ECONOMY PARAMETERS
# =============================================================================

PRIZE_POOL_NUMERATOR = 9
PRIZE_POOL_DENOMINATOR = 10
"""Prize pool = floor(buy_in * field_size * 9 / 10), a fixed 10% rake."""

ENERGY_COST = 20
"""Energy charged per entry for every kind except the energy-exempt one."""

ITM_PERCENT = 15
"""itm_count = floor(field_size * 15 / 100)."""

ITM_BASE_BONUS = 100
"""Reputation bonus at rank 1, decaying linearly to the bubble."""

FINAL_TABLE_SIZE = 9

REPUTATION_PRIZE_DIVISOR = 100
"""One reputation point per 100 currency won."""

BASIS_POINTS = 10_000

LARGE_FIELD_SIZE = 1000
"""The one field size that uses the deep large-field payout schedule."""

GENERIC_PAYOUT_BP = (2500, 1500, 1000, 800, 600)
"""Generic schedule: ranks 1-5 get 25%, 15%, 10%, 8%, 6% of the pool."""

LARGE_FIELD_TOP_BP = (2300, 1350, 850, 650, 550, 390, 290, 190, 130, 100)
"""Large-field schedule, ranks 1-10, individually tabulated."""

LARGE_FIELD_BANDS_BP = (
    (11, 15, 100),
    (16, 20, 70),
    (21, 25, 60),
    (26, 30, 50),
    (31, 35, 45),
    (36, 40, 40),
    (41, 50, 28),
    (51, 60, 24),
    (61, 75, 22),
    (76, 100, 21),
)
"""Large-field schedule, (first_rank, last_rank, basis points per entrant).

Remaining pool after all paid places is retained, not an error.
"""

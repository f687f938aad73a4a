"""Tournament score synthesis for Poker Career.

Every entrant's tournament performance is a single score in [0, 100]:

    Score = clamp(Base_score + Skill_score + Luck_factor, 0, 100)

- Base_score = 50 + z * 15, z ~ N(0, 1) via the Box-Muller transform
- Skill_score = Skill_bonus * 25, Skill_bonus in [0, 1]
- Luck_factor ~ Uniform(-10, +10)

The player's skill bonus is a weighted average of their stats. Simulated
opponents draw theirs from N(0.5, 0.15) clamped to [0, 1].

Randomness comes from an injectable RandomSource. Anything with a
random() -> float method in [0, 1) works, so random.Random instances
(seeded or not) and the random module itself both qualify.
"""

from __future__ import annotations

import math
import random
from typing import Mapping, Optional, Protocol

from pokercareer.models.profile import StatProfile
from pokercareer.parameters import (
    BASE_SCORE_MEAN,
    BASE_SCORE_STDDEV,
    LUCK_FACTOR_RANGE,
    NPC_SKILL_MEAN,
    NPC_SKILL_STDDEV,
    SCORE_MAX,
    SCORE_MIN,
    SKILL_SCORE_SCALE,
    STAT_WEIGHTS,
)


class RandomSource(Protocol):
    """Protocol for the uniform random generator used by scoring."""

    def random(self) -> float: ...


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp a value to the specified range."""
    return max(min_val, min(max_val, value))


def box_muller(u1: float, u2: float) -> float:
    """Convert two uniform samples into one standard-normal sample.

    Formula:
        z = sqrt(-2 * ln(u1)) * cos(2 * pi * u2)

    Args:
        u1: Uniform sample in (0, 1]
        u2: Uniform sample in [0, 1)

    Returns:
        Standard-normal sample

    Examples:
        >>> round(box_muller(math.exp(-0.5), 0.0), 6)
        1.0
    """
    return math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)


def standard_normal(rng: RandomSource) -> float:
    """Draw z ~ N(0, 1) from two uniforms.

    u1 is taken as 1 - random() so it lies in (0, 1] and log(u1) is defined.
    """
    u1 = 1.0 - rng.random()
    u2 = rng.random()
    return box_muller(u1, u2)


def calculate_skill_bonus(stats: Mapping[str, int]) -> float:
    """Stat-weighted skill bonus in [0, 1].

    Formula:
        (0.30*poker_iq + 0.25*insight + 0.20*gto_mastery
         + 0.15*focus + 0.05*stamina + 0.05*luck) / 100

    Examples:
        >>> calculate_skill_bonus({n: 0 for n in STAT_WEIGHTS})
        0.0
    """
    weighted = sum(weight * stats[name] for name, weight in STAT_WEIGHTS.items())
    return clamp(weighted / 100.0, 0.0, 1.0)


def calculate_score(base_score: float, skill_bonus: float, luck_factor: float) -> float:
    """Combine the three score components and clamp to [0, 100]."""
    skill_score = skill_bonus * SKILL_SCORE_SCALE
    return clamp(base_score + skill_score + luck_factor, SCORE_MIN, SCORE_MAX)


class ScoringFunction:
    """Maps a skill bonus (player stats or NPC skill tier) to a tournament score.

    Attributes:
        rng: Uniform random source shared by every draw
    """

    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        self.rng: RandomSource = rng if rng is not None else random.Random()

    def draw_base_score(self) -> float:
        """Base score ~ N(50, 15)."""
        return BASE_SCORE_MEAN + standard_normal(self.rng) * BASE_SCORE_STDDEV

    def draw_luck_factor(self) -> float:
        """Luck factor ~ Uniform(-10, +10)."""
        return self.rng.random() * (2 * LUCK_FACTOR_RANGE) - LUCK_FACTOR_RANGE

    def draw_npc_skill(self) -> float:
        """Random opponent skill bonus ~ N(0.5, 0.15), clamped to [0, 1]."""
        z = standard_normal(self.rng)
        return clamp(NPC_SKILL_MEAN + z * NPC_SKILL_STDDEV, 0.0, 1.0)

    def score_skill(self, skill_bonus: float) -> float:
        """Score one tournament instance for an entrant with the given skill bonus."""
        base_score = self.draw_base_score()
        luck_factor = self.draw_luck_factor()
        return calculate_score(base_score, skill_bonus, luck_factor)

    def score_profile(self, profile: StatProfile) -> float:
        """Score the player for one tournament instance."""
        return self.score_skill(calculate_skill_bonus(profile.snapshot_stats()))

    def score_npc(self) -> float:
        """Score a simulated opponent (before any tier bonus)."""
        # Base score is drawn before the skill level
        base_score = self.draw_base_score()
        skill_bonus = self.draw_npc_skill()
        luck_factor = self.draw_luck_factor()
        return calculate_score(base_score, skill_bonus, luck_factor)

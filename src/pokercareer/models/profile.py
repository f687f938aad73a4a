"""Character stat model for Poker Career.

A StatProfile holds the character's skill attributes and resources.
Stats are clamped to [0, 100] on every mutation; resources are not clamped
here (bankroll and reputation may go negative, energy is bounded by the
callers that spend it).

The calling session owns exactly one StatProfile and passes it by reference
into every tournament entry, so payouts are visible as soon as enter() returns.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, Field, field_validator

from pokercareer.parameters import (
    DEFAULT_BANKROLL,
    DEFAULT_ENERGY,
    DEFAULT_REPUTATION,
    DEFAULT_STAT_VALUE,
    RESOURCE_NAMES,
    STAT_MAX,
    STAT_MIN,
    STAT_NAMES,
)

logger = logging.getLogger(__name__)


def clamp_stat(value: int) -> int:
    """Clamp a stat value to [STAT_MIN, STAT_MAX]."""
    return max(STAT_MIN, min(STAT_MAX, int(value)))


def default_stats() -> dict[str, int]:
    return {name: DEFAULT_STAT_VALUE for name in STAT_NAMES}


def default_resources() -> dict[str, int]:
    return {
        "bankroll": DEFAULT_BANKROLL,
        "reputation": DEFAULT_REPUTATION,
        "energy": DEFAULT_ENERGY,
    }


class StatProfile(BaseModel):
    """A player character: identity, skill stats and resources.

    Attributes:
        name: Display name
        style: Free-form playing style label (e.g. "tight-aggressive")
        stats: Skill attribute -> value in [0, 100]
        resources: bankroll / reputation / energy -> signed integer

    Missing stats or resources are filled with defaults; unknown keys are
    rejected at construction.
    """

    name: str = Field(default="Player")
    style: str = Field(default="balanced")
    stats: dict[str, int] = Field(default_factory=default_stats)
    resources: dict[str, int] = Field(default_factory=default_resources)

    @field_validator("stats", mode="before")
    @classmethod
    def fill_and_clamp_stats(cls, v: dict[str, Any]) -> dict[str, int]:
        """Fill missing stats with defaults and clamp supplied ones to [0, 100]."""
        unknown = set(v) - set(STAT_NAMES)
        if unknown:
            raise ValueError(f"Unknown stats: {sorted(unknown)}")
        stats = default_stats()
        for name, value in v.items():
            stats[name] = clamp_stat(value)
        return stats

    @field_validator("resources", mode="before")
    @classmethod
    def fill_resources(cls, v: dict[str, Any]) -> dict[str, int]:
        """Fill missing resources with defaults."""
        unknown = set(v) - set(RESOURCE_NAMES)
        if unknown:
            raise ValueError(f"Unknown resources: {sorted(unknown)}")
        resources = default_resources()
        for name, value in v.items():
            resources[name] = int(value)
        return resources

    def modify_stat(self, name: str, delta: int) -> bool:
        """Add delta to a stat, clamping the result to [0, 100].

        Returns:
            False if the stat name is not recognized, True otherwise.
        """
        if name not in self.stats:
            logger.warning(f"modify_stat: unknown stat {name!r}")
            return False
        self.stats[name] = clamp_stat(self.stats[name] + delta)
        return True

    def modify_resource(self, name: str, delta: int) -> bool:
        """Add delta to a resource. No clamping.

        Returns:
            False if the resource name is not recognized, True otherwise.
        """
        if name not in self.resources:
            logger.warning(f"modify_resource: unknown resource {name!r}")
            return False
        self.resources[name] += delta
        return True

    def snapshot_stats(self) -> dict[str, int]:
        """Independent copy of the stats mapping."""
        return dict(self.stats)

    def snapshot_resources(self) -> dict[str, int]:
        """Independent copy of the resources mapping."""
        return dict(self.resources)

    def get_character_info(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "style": self.style,
            "stats": self.snapshot_stats(),
            "resources": self.snapshot_resources(),
        }

    # Convenience accessors
    @property
    def bankroll(self) -> int:
        return self.resources["bankroll"]

    @property
    def reputation(self) -> int:
        return self.resources["reputation"]

    @property
    def energy(self) -> int:
        return self.resources["energy"]

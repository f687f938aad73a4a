"""Prize distribution for Poker Career.

Two mutually exclusive payout schedules, selected by field size:

- Generic (every field size other than 1000): ranks 1-5 are paid
  25% / 15% / 10% / 8% / 6% of the prize pool.
- Large field (exactly 1000 entrants): ranks 1-10 individually tabulated,
  then flat per-entrant bands down to rank 100.

Prize = floor(prize_pool * fraction). Fractions are held as basis points,
so the floor is exact integer division. The schedules do not distribute the
whole pool; the remainder is retained.
"""

from __future__ import annotations

from pokercareer.parameters import (
    BASIS_POINTS,
    GENERIC_PAYOUT_BP,
    LARGE_FIELD_BANDS_BP,
    LARGE_FIELD_SIZE,
    LARGE_FIELD_TOP_BP,
)


class PayoutTable:
    """Pure lookup from (rank, field size, prize pool) to prize."""

    @staticmethod
    def uses_large_field_schedule(field_size: int) -> bool:
        return field_size == LARGE_FIELD_SIZE

    @staticmethod
    def generic_basis_points(rank: int) -> int:
        if rank <= len(GENERIC_PAYOUT_BP):
            return GENERIC_PAYOUT_BP[rank - 1]
        return 0

    @staticmethod
    def large_field_basis_points(rank: int) -> int:
        if rank <= len(LARGE_FIELD_TOP_BP):
            return LARGE_FIELD_TOP_BP[rank - 1]
        for first, last, bp in LARGE_FIELD_BANDS_BP:
            if first <= rank <= last:
                return bp
        return 0

    @classmethod
    def basis_points(cls, rank: int, field_size: int) -> int:
        """Share of the prize pool paid to a rank, in basis points.

        Raises:
            ValueError: If rank is outside [1, field_size]
        """
        if not 1 <= rank <= field_size:
            raise ValueError(f"rank must be in [1, {field_size}], got {rank}")
        if cls.uses_large_field_schedule(field_size):
            return cls.large_field_basis_points(rank)
        return cls.generic_basis_points(rank)

    @classmethod
    def fraction(cls, rank: int, field_size: int) -> float:
        """Share of the prize pool paid to a rank (0.23 == 23%)."""
        return cls.basis_points(rank, field_size) / BASIS_POINTS

    @classmethod
    def prize_for(cls, rank: int, field_size: int, prize_pool: int) -> int:
        """Prize for a finishing rank.

        Examples:
            >>> PayoutTable.prize_for(1, 1000, 90000)
            20700
            >>> PayoutTable.prize_for(6, 20, 1800)
            0
            >>> PayoutTable.prize_for(100, 1000, 90000)
            189
        """
        return prize_pool * cls.basis_points(rank, field_size) // BASIS_POINTS

    @classmethod
    def paid_places(cls, field_size: int) -> int:
        """Number of ranks that receive a prize."""
        if cls.uses_large_field_schedule(field_size):
            return LARGE_FIELD_BANDS_BP[-1][1]
        return min(len(GENERIC_PAYOUT_BP), field_size)

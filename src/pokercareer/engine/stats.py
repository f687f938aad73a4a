"""Career statistics over a tournament's entry history."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from pokercareer.models.results import EntryResult


@dataclass
class TournamentStats:
    """Aggregate statistics for a sequence of entries.

    Attributes:
        entries: Number of entries played
        total_buy_ins: Sum of buy-ins paid
        total_winnings: Sum of prizes won
        roi: Return on investment in percent
        itm: Percentage of entries finishing in the money
        final_table: Percentage of entries reaching the final table
        victories: Number of first-place finishes
        best_rank: Best finishing rank (None without entries)
    """

    entries: int = 0
    total_buy_ins: int = 0
    total_winnings: int = 0
    roi: float = 0.0
    itm: float = 0.0
    final_table: float = 0.0
    victories: int = 0
    best_rank: Optional[int] = None

    @property
    def net(self) -> int:
        return self.total_winnings - self.total_buy_ins

    def to_dict(self) -> dict:
        return {
            "entries": self.entries,
            "total_buy_ins": self.total_buy_ins,
            "total_winnings": self.total_winnings,
            "net": self.net,
            "roi": self.roi,
            "itm": self.itm,
            "final_table": self.final_table,
            "victories": self.victories,
            "best_rank": self.best_rank,
        }


def summarize_history(history: Iterable[EntryResult]) -> TournamentStats:
    """Aggregate entry results into TournamentStats.

    ROI = (total_winnings - total_buy_ins) / total_buy_ins * 100
    """
    results = list(history)
    if not results:
        return TournamentStats()

    entries = len(results)
    total_buy_ins = sum(r.buy_in for r in results)
    total_winnings = sum(r.prize for r in results)
    itm_count = sum(1 for r in results if r.in_the_money)
    final_table_count = sum(1 for r in results if r.final_table)

    return TournamentStats(
        entries=entries,
        total_buy_ins=total_buy_ins,
        total_winnings=total_winnings,
        roi=(total_winnings - total_buy_ins) / total_buy_ins * 100.0,
        itm=itm_count / entries * 100.0,
        final_table=final_table_count / entries * 100.0,
        victories=sum(1 for r in results if r.is_victory),
        best_rank=min(r.rank for r in results),
    )

"""Command-line runner for Poker Career.

Usage:
    pokercareer lineup
    pokercareer play --kind online --entries 20
    pokercareer play --kind major --entries 5 --seed 42 --stat poker_iq=80 --stat focus=70
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Optional, Sequence

from pokercareer.config import get_log_level
from pokercareer.models.tournament import TournamentKind
from pokercareer.parameters import STAT_NAMES
from pokercareer.session import CareerSession, create_profile

logger = logging.getLogger(__name__)


def parse_stat(text: str) -> tuple[str, int]:
    """Parse a NAME=VALUE stat override."""
    name, sep, value = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {text!r}")
    if name not in STAT_NAMES:
        raise argparse.ArgumentTypeError(
            f"unknown stat {name!r} (choose from {', '.join(STAT_NAMES)})"
        )
    try:
        return name, int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"stat value must be an integer, got {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pokercareer", description="Simulate a poker tournament career"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("lineup", help="List the tournaments on offer")

    play = subparsers.add_parser("play", help="Enter a tournament repeatedly")
    play.add_argument(
        "--kind",
        choices=[kind.value for kind in TournamentKind],
        default=TournamentKind.ONLINE.value,
        help="Tournament kind to enter (default: online)",
    )
    play.add_argument("--entries", type=int, default=10,
                      help="Number of entries to attempt (default: 10)")
    play.add_argument("--seed", type=int, default=None,
                      help="Random seed for a repeatable run")
    play.add_argument("--name", default="Player", help="Character name")
    play.add_argument("--stat", type=parse_stat, action="append", default=[],
                      metavar="NAME=VALUE", help="Override a starting stat (repeatable)")
    return parser


def print_lineup(session: CareerSession) -> None:
    print(f"{'Kind':<12}{'Buy-in':>8}{'Field':>8}{'Prize pool':>12}{'Energy':>8}{'ITM':>6}")
    for info in session.list_tournaments():
        print(
            f"{info['kind']:<12}{info['buy_in']:>8}{info['field_size']:>8}"
            f"{info['prize_pool']:>12}{info['energy_required']:>8}{info['itm_count']:>6}"
        )


def run_play(session: CareerSession, kind: str, entries: int) -> int:
    """Play up to `entries` entries; returns the number actually played."""
    played = 0
    for _ in range(entries):
        outcome = session.enter(kind)
        if not outcome.success:
            print(f"Stopped: {outcome.message}")
            break
        played += 1
        result = outcome.result
        marker = " (ITM)" if result.in_the_money else ""
        if result.final_table:
            marker = " (final table)"
        if result.is_victory:
            marker = " (victory!)"
        print(
            f"#{result.entry_number:<4} score {result.score:6.2f}  "
            f"rank {result.rank:>4}/{result.field_size}  prize {result.prize:>7}{marker}"
        )

    stats = session.get_tournament(kind).get_stats()
    resources = session.profile.snapshot_resources()
    print()
    print(f"Entries: {stats.entries}  Victories: {stats.victories}  "
          f"ITM: {stats.itm:.1f}%  Final tables: {stats.final_table:.1f}%  ROI: {stats.roi:.2f}%")
    print(f"Bankroll: {resources['bankroll']}  Reputation: {resources['reputation']}  "
          f"Energy: {resources['energy']}")
    return played


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the command-line runner."""
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        profile = create_profile(
            name=getattr(args, "name", "Player"),
            stats=dict(getattr(args, "stat", [])),
        )
    except ValueError as e:
        # Malformed POKERCAREER_STARTING_* values
        parser.error(str(e))

    if args.command == "lineup":
        print_lineup(CareerSession(profile=profile))
        return 0

    rng = random.Random(args.seed) if args.seed is not None else None
    session = CareerSession(profile=profile, rng=rng)
    logger.info(f"Playing {args.entries} {args.kind} entries as {profile.name}")
    run_play(session, args.kind, args.entries)
    return 0


if __name__ == "__main__":
    sys.exit(main())

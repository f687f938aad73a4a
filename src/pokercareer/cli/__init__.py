"""Poker Career CLI module.

Provides an argparse-based command-line runner for the tournament engine.

Usage:
    pokercareer play --kind online --entries 20

Or directly:
    python -m pokercareer.cli.app
"""

from pokercareer.cli.app import build_parser, main

__all__ = ["build_parser", "main"]

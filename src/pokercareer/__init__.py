"""Poker Career: a poker-tournament career simulator."""

__version__ = "0.1.0"

"""Tests for pokercareer.config module."""

import logging

import pytest

from pokercareer.config import get_log_level, get_starting_bankroll, get_starting_energy


class TestConfig:
    """Environment-driven configuration."""

    def test_log_level_default(self, monkeypatch):
        monkeypatch.delenv("POKERCAREER_LOG_LEVEL", raising=False)
        assert get_log_level() == logging.WARNING

    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("POKERCAREER_LOG_LEVEL", "debug")
        assert get_log_level() == logging.DEBUG

    def test_unknown_log_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("POKERCAREER_LOG_LEVEL", "chatty")
        assert get_log_level() == logging.WARNING

    def test_blank_value_uses_default(self, monkeypatch):
        monkeypatch.setenv("POKERCAREER_STARTING_BANKROLL", "  ")
        assert get_starting_bankroll() == 1000

    def test_invalid_integer(self, monkeypatch):
        monkeypatch.setenv("POKERCAREER_STARTING_ENERGY", "lots")
        with pytest.raises(ValueError, match="POKERCAREER_STARTING_ENERGY"):
            get_starting_energy()

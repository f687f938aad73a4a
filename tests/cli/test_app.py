"""Tests for the pokercareer command-line runner."""

import argparse

import pytest

from pokercareer.cli.app import build_parser, main, parse_stat


class TestParseStat:
    """Tests for NAME=VALUE stat overrides."""

    def test_valid(self):
        assert parse_stat("poker_iq=80") == ("poker_iq", 80)

    @pytest.mark.parametrize("text", ["poker_iq", "charisma=5", "focus=high"])
    def test_invalid(self, text):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_stat(text)

    def test_parser_rejects_unknown_stat(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["play", "--stat", "charisma=5"])


class TestMain:
    """End-to-end CLI runs."""

    def test_lineup(self, capsys):
        assert main(["lineup"]) == 0
        out = capsys.readouterr().out
        for kind in ("local", "online", "major", "highroller"):
            assert kind in out

    def test_play_online(self, capsys, monkeypatch):
        monkeypatch.delenv("POKERCAREER_STARTING_BANKROLL", raising=False)
        assert main(["play", "--kind", "online", "--entries", "3", "--seed", "7"]) == 0
        out = capsys.readouterr().out
        assert "Entries: 3" in out
        assert "Bankroll:" in out

    def test_play_stops_when_energy_runs_out(self, capsys, monkeypatch):
        monkeypatch.delenv("POKERCAREER_STARTING_ENERGY", raising=False)
        monkeypatch.delenv("POKERCAREER_STARTING_BANKROLL", raising=False)
        assert main(["play", "--kind", "local", "--entries", "10", "--seed", "3"]) == 0
        out = capsys.readouterr().out
        assert "Stopped: Insufficient energy" in out
        assert "Entries: 5" in out

    def test_play_with_stat_override(self, capsys):
        assert main(
            ["play", "--entries", "1", "--seed", "1", "--stat", "poker_iq=100", "--name", "Doyle"]
        ) == 0
        assert "Entries: 1" in capsys.readouterr().out

    def test_malformed_starting_env_exits_cleanly(self, capsys, monkeypatch):
        monkeypatch.setenv("POKERCAREER_STARTING_BANKROLL", "lots")
        with pytest.raises(SystemExit) as exc:
            main(["lineup"])
        assert exc.value.code == 2
        assert "POKERCAREER_STARTING_BANKROLL" in capsys.readouterr().err

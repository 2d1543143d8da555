"""Tests for the non-interactive CLI commands."""

import pytest
from click.testing import CliRunner

from ring_tracker.cli import main
from ring_tracker.services.auth import decode_token


@pytest.fixture
def runner(tmp_path, monkeypatch):
    """CLI runner with the data directory pointed at a temp dir."""
    monkeypatch.setenv("RING_TRACKER_DATA_DIR", str(tmp_path))
    return CliRunner()


class TestProgramCommand:
    """Tests for `ring-tracker program`."""

    def test_overview(self, runner):
        result = runner.invoke(main, ["program"])
        assert result.exit_code == 0
        assert "Phase 1: Foundation (6 weeks)" in result.output
        assert "Monday" in result.output

    def test_phase_sessions(self, runner):
        result = runner.invoke(main, ["program", "--phase", "2", "--deload"])
        assert result.exit_code == 0
        assert "Phase 2: Development (deload)" in result.output
        assert "Two Arm Hang" not in result.output

    def test_phase_out_of_range(self, runner):
        result = runner.invoke(main, ["program", "--phase", "4"])
        assert result.exit_code != 0


class TestAccountCommands:
    """Tests for init, login and seed."""

    def test_requires_init(self, runner):
        result = runner.invoke(main, ["login", "a@example.com"])
        assert result.exit_code == 1
        assert "ring-tracker init" in result.output

    def test_init_login_seed(self, runner):
        assert runner.invoke(main, ["init"]).exit_code == 0

        result = runner.invoke(main, ["login", "a@example.com", "--name", "A"])
        assert result.exit_code == 0
        token = result.output.strip().splitlines()[-1]
        assert decode_token(token).email == "a@example.com"

        result = runner.invoke(main, ["seed", "2", "--email", "a@example.com"])
        assert result.exit_code == 0
        assert "8 workouts (2 weeks, 1 phase)" in result.output

        result = runner.invoke(main, ["seed-delete", "--email", "a@example.com"])
        assert result.exit_code == 0
        assert "8 workouts" in result.output

    def test_unknown_user(self, runner):
        runner.invoke(main, ["init"])
        result = runner.invoke(main, ["stats", "--email", "nobody@example.com"])
        assert result.exit_code == 1
        assert "not found" in result.output

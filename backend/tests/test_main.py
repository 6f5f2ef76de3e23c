"""
Tests for main.py - the headless simulation driver.
"""

import json
import sys
import os
from unittest.mock import patch

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from main import build_parser, main, run_2048_simulation, run_snake_simulation


class TestRunSnakeSimulation:
    """Tests for run_snake_simulation()."""

    def test_respects_step_limit(self):
        """The driver never ticks more than max_steps times."""
        result = run_snake_simulation(seed=11, max_steps=25)
        assert result["game"] == "snake"
        assert result["steps"] <= 25
        assert result["state"]["tick_number"] <= 25

    def test_same_seed_same_game(self):
        """A fixed seed makes the run reproducible."""
        first = run_snake_simulation(seed=5, max_steps=200)
        second = run_snake_simulation(seed=5, max_steps=200)
        assert first["state"] == second["state"]

    def test_finished_game_reports_reason(self):
        """A run that ends reports game over and the death reason."""
        result = run_snake_simulation(seed=1, max_steps=10_000, width=4, height=4)
        assert result["finished"] is True
        assert result["state"]["game_over"] is True
        assert result["state"]["death_reason"] in {"wall", "self", "board_full"}
        assert result["length"] == len(result["state"]["snake_positions"])

    @patch('main.time.sleep')
    def test_delay_sleeps_between_ticks(self, mock_sleep):
        """A positive delay sleeps once per tick."""
        result = run_snake_simulation(seed=2, max_steps=3, delay=0.15)
        assert mock_sleep.call_count == result["steps"]
        mock_sleep.assert_called_with(0.15)


class TestRun2048Simulation:
    """Tests for run_2048_simulation()."""

    def test_plays_to_game_over(self):
        """The random player reaches game over well within the step limit."""
        result = run_2048_simulation(seed=3)
        assert result["finished"] is True
        assert result["state"]["game_over"] is True
        assert result["max_tile"] >= 4
        assert result["state"]["best_score"] == result["state"]["score"]

    def test_same_seed_same_game(self):
        """A fixed seed makes the run reproducible."""
        assert run_2048_simulation(seed=9)["state"] == run_2048_simulation(seed=9)["state"]

    def test_step_limit(self):
        """A small step limit stops the run early."""
        result = run_2048_simulation(seed=4, max_steps=5)
        assert result["steps"] == 5
        assert result["finished"] is False


class TestMain:
    """Tests for the command-line entry point."""

    def test_parser_defaults(self):
        """Defaults come from the environment-backed config."""
        args = build_parser().parse_args(["2048"])
        assert args.game == "2048"
        assert args.delay is None
        assert args.output is None

    def test_unknown_game_rejected(self):
        """Only snake and 2048 are accepted."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["tetris"])

    def test_main_writes_summary(self, tmp_path, capsys):
        """--output writes the JSON summary without the board text."""
        out_file = tmp_path / "summary.json"
        main(["2048", "--seed", "8", "--quiet", "--output", str(out_file)])

        summary = json.loads(out_file.read_text())
        assert summary["game"] == "2048"
        assert summary["seed"] == 8
        assert "board" not in summary
        assert '"game": "2048"' in capsys.readouterr().out

    @patch('main.time.sleep')
    def test_main_snake_uses_tick_period(self, mock_sleep):
        """Without --delay the snake driver sleeps for the configured period."""
        result = main(["snake", "--seed", "1", "--max-steps", "2", "--quiet"])
        assert result["steps"] <= 2
        mock_sleep.assert_called_with(0.15)

    def test_non_positive_step_limit_rejected(self):
        """--max-steps must be positive."""
        with pytest.raises(SystemExit):
            main(["2048", "--max-steps", "0", "--quiet"])

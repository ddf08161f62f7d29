"""Tests for the vbgp command-line interface."""

import json

import pytest
from click.testing import CliRunner

from vbgp.cli import cli


CONFIG_CSV = """\
Profit,Profit,Cost,Cost
Gain/Loss,Value,Gain/Loss,Value
-20,30,-20,30
-10,10,-10,10
0,0,0,0
50,20,-,
"""


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "vbgp.csv"
    path.write_text(CONFIG_CSV)
    return path


@pytest.fixture
def goals_file(tmp_path):
    path = tmp_path / "goals.json"
    path.write_text(json.dumps([
        {"name": "Profit", "type": "maximize", "value": 80, "prior_value": 100,
         "importance": 1.0, "confidence": False},
        {"name": "Cost", "type": "minimize", "importance": 1.0},
    ]))
    return path


class TestValidate:
    """Tests for `vbgp validate`."""

    def test_lists_goals(self, runner, config_file):
        result = runner.invoke(cli, ["validate", str(config_file)])

        assert result.exit_code == 0
        assert "2 goals" in result.output
        assert "Profit: 2 loss points, 2 gain points" in result.output
        assert "Cost: 2 loss points, 1 gain points" in result.output

    def test_invalid_configuration_fails(self, runner, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("A,A\nGain/Loss,Value\n0,0\n5,1\n")

        result = runner.invoke(cli, ["validate", str(path)])

        assert result.exit_code != 0
        assert "Missing losses" in result.output

    def test_undecodable_file_reports_error(self, runner, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_bytes(b"A,A\nGain/Loss,Value\n-10,\xff\xfe\n10,1\n")

        result = runner.invoke(cli, ["validate", str(path)])

        assert result.exit_code == 1
        assert not isinstance(result.exception, UnicodeDecodeError)
        assert "Invalid utf-8 text" in result.output

    def test_missing_file_fails(self, runner, tmp_path):
        result = runner.invoke(cli, ["validate", str(tmp_path / "nope.csv")])
        assert result.exit_code != 0


class TestLookup:
    """Tests for `vbgp lookup`."""

    def test_negative_argument_uses_loss_curve(self, runner, config_file):
        result = runner.invoke(cli, ["lookup", str(config_file), "Profit", "-0.2"])
        assert result.exit_code == 0, result.output
        assert result.output.strip().splitlines()[-1] == "0.3"

    def test_positive_argument_uses_gain_curve(self, runner, config_file):
        result = runner.invoke(cli, ["lookup", str(config_file), "Profit", "0.4"])
        assert result.exit_code == 0, result.output
        assert result.output.strip().splitlines()[-1] == "0.2"

    def test_explicit_side(self, runner, config_file):
        result = runner.invoke(cli, ["lookup", str(config_file), "Profit", "0.4", "--side", "loss"])
        assert result.output.strip().splitlines()[-1] == "0.1"

    def test_unknown_goal(self, runner, config_file):
        result = runner.invoke(cli, ["lookup", str(config_file), "Water", "0.1"])
        assert result.exit_code != 0
        assert "Unknown goal 'Water'" in result.output


class TestPrioritize:
    """Tests for `vbgp prioritize`."""

    def test_prints_adjusted_importance(self, runner, config_file, goals_file):
        result = runner.invoke(cli, ["prioritize", str(config_file), str(goals_file)])

        assert result.exit_code == 0, result.output
        adjusted = json.loads(result.output[result.output.index("{"):])
        assert adjusted["Profit"] == pytest.approx(0.7 / 1.7)
        assert adjusted["Cost"] == pytest.approx(1.0 / 1.7)

    def test_no_adjusting(self, runner, config_file, goals_file):
        result = runner.invoke(
            cli, ["prioritize", str(config_file), str(goals_file), "--no-adjusting"]
        )

        assert result.exit_code == 0, result.output
        assert json.loads(result.output[result.output.index("{"):]) == {"Profit": 1.0, "Cost": 1.0}

    def test_invalid_snapshot(self, runner, config_file, tmp_path):
        path = tmp_path / "goals.json"
        path.write_text(json.dumps([{"name": "Profit", "type": "sustain"}]))

        result = runner.invoke(cli, ["prioritize", str(config_file), str(path)])

        assert result.exit_code != 0
        assert "invalid goal states" in result.output

    def test_unknown_goal(self, runner, config_file, tmp_path):
        path = tmp_path / "goals.json"
        path.write_text(json.dumps([
            {"name": "Water", "type": "maximize", "value": 1, "prior_value": 2,
             "importance": 1.0, "confidence": False},
        ]))

        result = runner.invoke(cli, ["prioritize", str(config_file), str(path)])

        assert result.exit_code != 0
        assert "Water" in result.output

"""Tests for CLI."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from crand.cli.main import cli
from crand.config.schema import EngineConfig
from crand.core.factory import make_engine
from crand.io.serialize import load_engine_state


class TestCLI:
    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_sample_defaults(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["sample", "--count", "5", "--seed", "42"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines[0] == "Sampling 5 x uniform_real with xoshiro256**"
        values = [float(line) for line in lines[1:]]
        assert len(values) == 5
        assert all(0.0 <= v < 1.0 for v in values)

    def test_sample_is_reproducible(self) -> None:
        runner = CliRunner()
        first = runner.invoke(cli, ["sample", "--engine", "xorshift64", "--seed", "9"])
        second = runner.invoke(cli, ["sample", "--engine", "xorshift64", "--seed", "9"])
        assert first.exit_code == 0
        assert first.output == second.output

    def test_sample_with_config(self, tmp_path: Path) -> None:
        config = tmp_path / "dice.yaml"
        config.write_text(
            "engine: {kind: splitmix64, seed: 1}\n"
            "distribution:\n"
            "  kind: uniform_int\n"
            "  a: {value: 1}\n"
            "  b: {value: 6}\n"
            "count: 20\n"
        )
        runner = CliRunner()
        result = runner.invoke(cli, ["sample", "--config", str(config)])
        assert result.exit_code == 0
        assert "uniform_int with splitmix64" in result.output
        values = [int(line) for line in result.output.strip().splitlines()[1:]]
        assert len(values) == 20
        assert set(values) <= {1, 2, 3, 4, 5, 6}

    def test_sample_output_file(self, tmp_path: Path) -> None:
        output_file = tmp_path / "summary.json"
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["sample", "--count", "50", "--seed", "1", "--output", str(output_file)],
        )
        assert result.exit_code == 0
        assert "Summary written to" in result.output
        data = json.loads(output_file.read_text())
        assert data["count"] == 50
        assert data["engine"]["kind"] == "xoshiro256**"

    def test_engine_override_drops_gamma(self, tmp_path: Path) -> None:
        config = tmp_path / "split.json"
        config.write_text(json.dumps({"engine": {"kind": "splitmix64", "gamma": 5}}))
        runner = CliRunner()
        result = runner.invoke(cli, ["sample", "--config", str(config), "--engine", "xorshift32"])
        assert result.exit_code == 0
        assert "with xorshift32" in result.output

    def test_invalid_config_reports_error(self, tmp_path: Path) -> None:
        config = tmp_path / "bad.json"
        config.write_text(json.dumps({"count": 0}))
        runner = CliRunner()
        result = runner.invoke(cli, ["sample", "--config", str(config)])
        assert result.exit_code != 0
        assert "Error" in result.output

    def test_invalid_count(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["sample", "--count", "0"])
        assert result.exit_code != 0

    def test_count_above_limit(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["sample", "--count", "10000001"])
        assert result.exit_code == 1
        assert "Error" in result.output
        assert "Sampling" not in result.output

    def test_malformed_yaml_reports_error(self, tmp_path: Path) -> None:
        config = tmp_path / "bad.yaml"
        config.write_text("engine: [xorshift32\n  seed: 1\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["sample", "--config", str(config)])
        assert result.exit_code == 1
        assert "invalid YAML" in result.output

    def test_huge_bound_reports_error(self, tmp_path: Path) -> None:
        config = tmp_path / "huge.json"
        config.write_text('{"distribution": {"b": {"value": 1' + "0" * 400 + '}}}')
        runner = CliRunner()
        result = runner.invoke(cli, ["sample", "--config", str(config)])
        assert result.exit_code == 1
        assert "finite" in result.output

    def test_state(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["state", "--engine", "xorshift32", "--seed", "4", "--discard", "3"])
        assert result.exit_code == 0
        engine = make_engine(EngineConfig(kind="xorshift32", seed=4))
        engine.discard(3)
        assert load_engine_state(result.output.strip()) == engine

    def test_state_rejects_negative_discard(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["state", "--engine", "splitmix64", "--discard", "-1"])
        assert result.exit_code == 2

    def test_state_rejects_negative_seed(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["state", "--seed", "-3"])
        assert result.exit_code != 0

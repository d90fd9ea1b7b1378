"""End-to-end tests for CLI commands."""

import json
import sys

import pytest
from loguru import logger
from typer.testing import CliRunner

from ck_metrics import __version__
from ck_metrics.cli.main import app


class TestCLICommands:
    """End-to-end tests for CLI commands."""

    @pytest.fixture
    def cli_runner(self):
        """Create CLI runner for testing."""
        return CliRunner()

    @pytest.fixture(autouse=True)
    def restore_logging(self, monkeypatch):
        """The CLI replaces loguru sinks; put the default one back afterwards."""
        monkeypatch.delenv("CK_METRICS_INCLUDE_PLATFORM", raising=False)
        monkeypatch.delenv("CK_METRICS_WORKERS", raising=False)
        yield
        logger.remove()
        logger.add(sys.stderr)

    def test_version(self, cli_runner):
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_analyze_table(self, cli_runner, facts_file):
        result = cli_runner.invoke(app, ["analyze", str(facts_file)])

        assert result.exit_code == 0
        assert "CK Metrics" in result.output
        assert "Classes Analyzed: 2" in result.output
        assert "Referenced Only: 3" in result.output

    def test_analyze_text(self, cli_runner, facts_file):
        result = cli_runner.invoke(app, ["analyze", str(facts_file), "--text"])

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines == [
            "com.example.shop.BaseService 1.0 0 1 0 0 1 0 1 0 1 0",
            "com.example.shop.OrderService 3.333333 1 0 3 1 5 3 0 2 5 0",
        ]

    def test_analyze_text_public_only(self, cli_runner, facts_file):
        result = cli_runner.invoke(
            app, ["analyze", str(facts_file), "--text", "--public-only"]
        )

        assert result.exit_code == 0
        assert result.output.strip().startswith("com.example.shop.OrderService ")
        assert "BaseService 1" not in result.output

    def test_analyze_json(self, cli_runner, facts_file):
        result = cli_runner.invoke(app, ["analyze", str(facts_file), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        by_name = {entry["class_name"]: entry for entry in data}
        assert by_name["com.example.shop.OrderService"]["dicbo"] == 1
        assert by_name["com.example.shop.BaseService"]["noc"] == 1
        assert by_name["com.example.shop.BaseService"]["is_public"] is False

    def test_include_platform_flag(self, cli_runner, facts_file):
        result = cli_runner.invoke(
            app, ["analyze", str(facts_file), "--json", "--include-platform"]
        )

        assert result.exit_code == 0
        by_name = {entry["class_name"]: entry for entry in json.loads(result.output)}
        assert by_name["com.example.shop.OrderService"]["cbo"] == 4
        assert by_name["com.example.shop.OrderService"]["drfc"] == 1

    def test_config_file(self, cli_runner, facts_file, tmp_path):
        config = tmp_path / "ck-metrics.yaml"
        config.write_text("include_platform: true\nmax_workers: 2\n")

        result = cli_runner.invoke(
            app, ["analyze", str(facts_file), "--json", "--config", str(config)]
        )

        assert result.exit_code == 0
        by_name = {entry["class_name"]: entry for entry in json.loads(result.output)}
        assert by_name["com.example.shop.OrderService"]["cbo"] == 4

    def test_flag_overrides_config(self, cli_runner, facts_file, tmp_path):
        config = tmp_path / "ck-metrics.yaml"
        config.write_text("include_platform: true\n")

        result = cli_runner.invoke(
            app,
            [
                "analyze",
                str(facts_file),
                "--json",
                "--config",
                str(config),
                "--exclude-platform",
                "--workers",
                "1",
            ],
        )

        assert result.exit_code == 0
        by_name = {entry["class_name"]: entry for entry in json.loads(result.output)}
        assert by_name["com.example.shop.OrderService"]["cbo"] == 3

    def test_malformed_facts(self, cli_runner, tmp_path):
        facts = tmp_path / "facts.json"
        facts.write_text('{"classes": [{"fields": []}]}')

        result = cli_runner.invoke(app, ["analyze", str(facts)])

        assert result.exit_code == 1
        assert "Class entry without a name" in result.output

    def test_invalid_config(self, cli_runner, facts_file, tmp_path):
        config = tmp_path / "ck-metrics.yaml"
        config.write_text("include_jdk: true\n")

        result = cli_runner.invoke(
            app, ["analyze", str(facts_file), "--config", str(config)]
        )

        assert result.exit_code == 1
        assert "Unknown configuration keys" in result.output

    def test_missing_facts_file(self, cli_runner, tmp_path):
        result = cli_runner.invoke(app, ["analyze", str(tmp_path / "none.json")])
        assert result.exit_code != 0

"""
Tests para la CLI (typer).
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from dynaform.cli import app
from dynaform.config import DEFAULT_API_URL

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("DYNAFORM_API_URL", "DYNAFORM_TIMEOUT", "DYNAFORM_OUTPUT_DIR"):
        monkeypatch.delenv(name, raising=False)


class TestCheck:
    """Tests del comando check."""

    def test_valid_schema(self, schema_file):
        result = runner.invoke(app, ["check", str(schema_file)])
        assert result.exit_code == 0
        assert "Schema is valid" in result.output

    def test_invalid_schema(self, tmp_path, schema_dict):
        del schema_dict["sections"][0]["fields"][0]["label"]
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(schema_dict), encoding="utf-8")

        result = runner.invoke(app, ["check", str(path)])

        assert result.exit_code == 1
        assert "Invalid schema" in result.output

    def test_not_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("<html>", encoding="utf-8")
        result = runner.invoke(app, ["check", str(path)])
        assert result.exit_code == 1
        assert "Cannot read" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["check", str(tmp_path / "missing.json")])
        assert result.exit_code != 0


class TestRun:
    """Tests del comando run."""

    def test_offline_mode(self, schema_file, tmp_path):
        with patch("dynaform.cli.wizard.wizard_main") as wizard:
            result = runner.invoke(app, ["run", "--schema", str(schema_file), "-o", str(tmp_path)])

        assert result.exit_code == 0
        settings = wizard.call_args.args[0]
        assert settings.output_dir == tmp_path
        assert settings.api_url == DEFAULT_API_URL
        assert wizard.call_args.kwargs["schema_file"] == Path(schema_file)

    def test_overrides_env(self, monkeypatch):
        monkeypatch.setenv("DYNAFORM_API_URL", "https://env.example.org")
        monkeypatch.setenv("DYNAFORM_TIMEOUT", "5")
        with patch("dynaform.cli.wizard.wizard_main") as wizard:
            result = runner.invoke(app, ["run", "--timeout", "2.5"])

        assert result.exit_code == 0
        settings = wizard.call_args.args[0]
        assert settings.api_url == "https://env.example.org"
        assert settings.timeout_s == 2.5
        assert wizard.call_args.kwargs["schema_file"] is None

    def test_verbose_flag(self):
        with patch("dynaform.cli.wizard.wizard_main"), \
             patch("dynaform.cli.setup_logging") as setup:
            result = runner.invoke(app, ["-v", "run"])
        assert result.exit_code == 0
        setup.assert_called_once_with(True)


class TestLogging:
    """Tests para setup_logging."""

    def test_single_handler_and_level(self):
        import logging

        from rich.logging import RichHandler

        from dynaform.logging_setup import setup_logging

        logger = setup_logging(verbose=True)
        assert logger.level == logging.DEBUG
        logger = setup_logging(verbose=False)
        assert logger.level == logging.WARNING
        assert sum(isinstance(h, RichHandler) for h in logger.handlers) == 1
        assert logger.propagate

"""
Tests for the command line interface
"""

import importlib
import logging
from unittest.mock import patch

from click.testing import CliRunner

from library_catalog import __version__
from library_catalog.cli import cli
from library_catalog.config import settings
from library_catalog.logging import configure_logging


def test_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_export_schema_to_stdout():
    result = CliRunner().invoke(cli, ["export-schema"])

    assert result.exit_code == 0
    assert "type Book implements Entity" in result.output
    assert "union SearchResult = Book | Author | Genre" in result.output
    assert "bookAdded: Book!" in result.output


def test_export_schema_to_file(tmp_path):
    target = tmp_path / "schema.graphql"

    result = CliRunner().invoke(cli, ["export-schema", "--output", str(target)])

    assert result.exit_code == 0
    assert "Schema written to" in result.output
    assert "input BookUpdateInput" in target.read_text(encoding="utf-8")


def test_seed_summary():
    result = CliRunner().invoke(cli, ["seed-summary"])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert {"books: 15", "authors: 5", "genres: 8"} <= set(lines)


def test_serve_log_level_reaches_the_app(monkeypatch):
    # Registered so monkeypatch restores the shared settings afterwards
    monkeypatch.setattr(settings, "debug", True)
    monkeypatch.setattr(settings, "log_level", "INFO")
    seen = {}

    def run_in_process(app_path, **kwargs):
        # What uvicorn does without --reload: import the app module here
        importlib.reload(importlib.import_module(app_path.split(":")[0]))
        seen["root_level"] = logging.getLogger().level
        seen["uvicorn_level"] = kwargs["log_level"]

    try:
        with patch("library_catalog.cli.uvicorn.run", side_effect=run_in_process):
            result = CliRunner().invoke(cli, ["serve", "--log-level", "warning"])
    finally:
        configure_logging(debug=True)

    assert result.exit_code == 0, result.output
    assert seen == {"root_level": logging.WARNING, "uvicorn_level": "warning"}

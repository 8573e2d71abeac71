"""Tests for the command-line entry point."""

import logging
from unittest.mock import patch

from conftest import FakeProvider
from src import main as cli
from src.core.exceptions import ClassifierUnavailable


def _down_provider(settings):
    return FakeProvider(error=ClassifierUnavailable("offline", "fake"))


def test_cli_classifies_with_fallback(caplog):
    caplog.set_level(logging.INFO, logger="IssueClassifier")
    with patch.object(cli, "build_provider", side_effect=_down_provider):
        exit_code = cli.main(["--title", "Broken streetlight", "--description", "Flickering all night"])

    assert exit_code == 0
    assert "Predicted Category: Electricity and Power" in caplog.text
    assert "Method: keyword-fallback" in caplog.text


def test_cli_empty_input_fails():
    with patch.object(cli, "build_provider", side_effect=_down_provider):
        assert cli.main(["--title", " "]) == 1


def test_cli_lists_categories(caplog):
    caplog.set_level(logging.INFO, logger="IssueClassifier")
    assert cli.main(["--list-categories"]) == 0
    assert "1. Roads and Infrastructure" in caplog.text
    assert "10. General Complaints" in caplog.text


def test_cli_missing_config_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert cli.main(["--config", "missing.yaml", "--title", "x"]) == 1

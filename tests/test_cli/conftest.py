"""Shared fixtures for CLI tests."""

import pytest
from click.testing import CliRunner

from domo.cli.main import cli


@pytest.fixture
def runner():
    """Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def mock_credentials(monkeypatch, tmp_path):
    """Set mock client credentials and isolate from local config files."""
    monkeypatch.setenv("DOMO_API_CLIENT_ID", "test_client")
    monkeypatch.setenv("DOMO_API_CLIENT_SECRET", "test_secret")
    monkeypatch.delenv("DOMO_API_HOST", raising=False)
    monkeypatch.chdir(tmp_path)
    from domo.cli import config
    monkeypatch.setattr(config, "get_credentials_path", lambda: tmp_path / "credentials.json")


@pytest.fixture
def mock_editor(monkeypatch):
    """Replace the interactive editor.

    The returned function sets an edit callback that receives the buffer
    text and returns the saved text. Each buffer the editor saw is kept in
    ``seen``.
    """
    state = {"edit": lambda text: text, "seen": []}

    def fake_edit(text=None, editor=None, env=None, require_save=True, extension=".txt", filename=None):
        state["seen"].append(text)
        return state["edit"](text)

    monkeypatch.setattr("click.edit", fake_edit)

    def set_edit(func):
        state["edit"] = func
        return state["seen"]

    return set_edit


@pytest.fixture
def cli_invoke(runner, mock_credentials):
    """Helper to invoke CLI commands with credentials already set."""
    def invoke(*args, **kwargs):
        return runner.invoke(cli, args, catch_exceptions=False, **kwargs)
    return invoke

"""Tests for CLI credential loading."""

import json

import pytest

from domo.cli.config import load_client_config, load_setting, save_credentials
from domo.cli.errors import MissingCredentialsError


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ("DOMO_API_HOST", "DOMO_API_CLIENT_ID", "DOMO_API_CLIENT_SECRET"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    from domo.cli import config
    creds_file = tmp_path / "config" / "credentials.json"
    monkeypatch.setattr(config, "get_credentials_path", lambda: creds_file)
    return creds_file


class TestLoadSetting:
    def test_explicit_value_wins(self, clean_env, monkeypatch):
        monkeypatch.setenv("DOMO_API_CLIENT_ID", "env_id")
        assert load_setting("DOMO_API_CLIENT_ID", "option_id") == "option_id"

    def test_from_env_var(self, clean_env, monkeypatch):
        monkeypatch.setenv("DOMO_API_CLIENT_ID", "env_id")
        assert load_setting("DOMO_API_CLIENT_ID") == "env_id"

    def test_env_var_takes_precedence(self, clean_env, monkeypatch, tmp_path):
        monkeypatch.setenv("DOMO_API_CLIENT_ID", "env_id")
        (tmp_path / ".env").write_text("DOMO_API_CLIENT_ID=dotenv_id\n")
        assert load_setting("DOMO_API_CLIENT_ID") == "env_id"

    def test_from_dotenv_file(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text("DOMO_API_CLIENT_ID='dotenv_id'\n")
        assert load_setting("DOMO_API_CLIENT_ID") == "dotenv_id"

    def test_from_credentials_file(self, clean_env):
        clean_env.parent.mkdir(parents=True)
        clean_env.write_text(json.dumps({"client_id": "file_id", "host": "https://h"}))
        assert load_setting("DOMO_API_CLIENT_ID") == "file_id"
        assert load_setting("DOMO_API_HOST") == "https://h"

    def test_unreadable_credentials_file(self, clean_env):
        clean_env.parent.mkdir(parents=True)
        clean_env.write_text("{not json")
        assert load_setting("DOMO_API_CLIENT_ID") is None

    def test_returns_none_when_unset(self, clean_env):
        assert load_setting("DOMO_API_CLIENT_SECRET") is None


class TestLoadClientConfig:
    def test_defaults_host(self, clean_env, monkeypatch):
        monkeypatch.setenv("DOMO_API_CLIENT_ID", "id")
        monkeypatch.setenv("DOMO_API_CLIENT_SECRET", "secret")

        config = load_client_config()

        assert config.client_id == "id"
        assert config.client_secret == "secret"
        assert config.host == "https://api.domo.com"

    def test_strips_trailing_slash(self, clean_env):
        config = load_client_config(host="https://api.example.com/", client_id="a", client_secret="b")
        assert config.host == "https://api.example.com"

    def test_missing_secret(self, clean_env, monkeypatch):
        monkeypatch.setenv("DOMO_API_CLIENT_ID", "id")
        with pytest.raises(MissingCredentialsError):
            load_client_config()


class TestSaveCredentials:
    def test_saves_and_loads(self, clean_env):
        path = save_credentials("saved_id", "saved_secret")

        assert path == clean_env
        assert load_client_config().client_id == "saved_id"
        assert json.loads(path.read_text()) == {"client_id": "saved_id", "client_secret": "saved_secret"}

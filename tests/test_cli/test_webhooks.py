"""Tests for webhook CLI commands."""

import json

import responses

from domo.cli.main import cli


WEBHOOK_URL = "https://example.domo.com/api/iw/v1/webhook"


class TestIntegrationMessage:
    @responses.activate
    def test_posts_edited_markdown(self, runner, monkeypatch, mock_editor):
        monkeypatch.setenv("DOMO_INTEGRATION_WH_URL", WEBHOOK_URL)
        monkeypatch.setenv("DOMO_INTEGRATION_WH_TOKEN", "bot-token")
        responses.add(responses.POST, WEBHOOK_URL, status=200)
        seen = mock_editor(lambda text: "**Build passed**")

        result = runner.invoke(cli, ["webhook", "create-integration-message"])

        assert result.exit_code == 0
        assert seen == ["Your message here"]
        request = responses.calls[0].request
        assert request.headers["x-buzz-bot-token"] == "bot-token"
        assert json.loads(request.body) == {"content": {"text": "**Build passed**"}}

    def test_url_is_required(self, runner, monkeypatch):
        monkeypatch.delenv("DOMO_INTEGRATION_WH_URL", raising=False)
        monkeypatch.delenv("DOMO_INTEGRATION_WH_TOKEN", raising=False)
        result = runner.invoke(cli, ["webhook", "create-integration-message"])
        assert result.exit_code == 2


class TestBuzzMessage:
    @responses.activate
    def test_with_title(self, runner, mock_editor):
        responses.add(responses.POST, WEBHOOK_URL, status=200)
        mock_editor(lambda text: "Deployed v2")

        result = runner.invoke(cli, ["webhook", "create-buzz-message", "--url", WEBHOOK_URL, "Release"])

        assert result.exit_code == 0
        assert json.loads(responses.calls[0].request.body) == {"title": "Release", "text": "Deployed v2"}

    @responses.activate
    def test_rejected(self, runner, mock_editor):
        responses.add(responses.POST, WEBHOOK_URL, json={"status": 404, "message": "Unknown webhook"}, status=404)
        mock_editor(lambda text: text)

        result = runner.invoke(cli, ["webhook", "create-buzz-message", "--url", WEBHOOK_URL])

        assert result.exit_code == 1
        assert "Unknown webhook" in result.output


class TestDatasetJson:
    @responses.activate
    def test_posts_edited_row(self, runner, mock_editor):
        responses.add(responses.POST, WEBHOOK_URL, status=200)
        mock_editor(lambda text: text.replace("43", "44"))

        result = runner.invoke(cli, ["webhook", "create-dataset-json", "--url", WEBHOOK_URL])

        assert result.exit_code == 0
        assert json.loads(responses.calls[0].request.body) == {
            "a": "Column A Value",
            "b": 44,
            "c": "Column C Value",
        }

    def test_empty_row(self, runner, mock_editor):
        mock_editor(lambda text: "")

        result = runner.invoke(cli, ["webhook", "create-dataset-json", "--url", WEBHOOK_URL])

        assert result.exit_code == 7

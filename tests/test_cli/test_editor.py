"""Tests for the editor round trip."""

import click
import pytest
import responses
import yaml

from domo.cli.editor import edit_markdown, edit_model, edit_value
from domo.cli.errors import EditorError
from domo.models import Group


BASE_URL = "https://api.domo.com/v1"
TOKEN_URL = "https://api.domo.com/oauth/token"


class TestEditModel:
    def test_unchanged_buffer_round_trips(self, mock_editor):
        seen = mock_editor(lambda text: text)
        group = Group(id=3, name="Sales", active=True, member_count=0)

        assert edit_model(group, "vim").to_wire() == group.to_wire()
        assert yaml.safe_load(seen[0]) == {"id": 3, "name": "Sales", "active": True, "memberCount": 0}

    def test_edited_values_are_parsed(self, mock_editor):
        mock_editor(lambda text: text.replace("Sales", "Marketing"))

        assert edit_model(Group(name="Sales"), "vim").name == "Marketing"

    def test_invalid_yaml(self, mock_editor):
        mock_editor(lambda text: "name: [unclosed")

        with pytest.raises(EditorError, match="parse"):
            edit_model(Group(name="Sales"), "vim")

    def test_non_mapping(self, mock_editor):
        mock_editor(lambda text: "- just\n- a list\n")

        with pytest.raises(EditorError, match="mapping"):
            edit_model(Group(name="Sales"), "vim")

    def test_validation_error(self, mock_editor):
        mock_editor(lambda text: "id: not-a-number\n")

        with pytest.raises(EditorError, match="Invalid Group"):
            edit_model(Group(id=1), "vim")

    def test_editor_failure(self, mock_editor):
        def fail(text):
            raise click.ClickException("vim: Editing failed")

        mock_editor(fail)

        with pytest.raises(EditorError, match="Editing failed"):
            edit_model(Group(id=1), "vim")


class TestEditValue:
    def test_list(self, mock_editor):
        mock_editor(lambda text: text + "- 4\n")

        assert edit_value([1, 2], "vim") == [1, 2, 4]


class TestEditMarkdown:
    def test_returns_text(self, mock_editor):
        seen = mock_editor(lambda text: "# Hello\n")

        assert edit_markdown("Your message here", "vim") == "# Hello\n"
        assert seen == ["Your message here"]


class TestEditorFailureExitCode:
    @responses.activate
    def test_update_exits_without_writing(self, cli_invoke, mock_editor):
        responses.add(responses.GET, TOKEN_URL, json={"access_token": "t"}, status=200)
        responses.add(responses.GET, f"{BASE_URL}/groups/3", json={"id": 3, "name": "Sales"}, status=200)
        mock_editor(lambda text: "name: [unclosed")

        result = cli_invoke("group", "update", "3")

        assert result.exit_code == 7
        assert "Error:" in result.output
        methods = [c.request.method for c in responses.calls if "/oauth/token" not in c.request.url]
        assert methods == ["GET"]

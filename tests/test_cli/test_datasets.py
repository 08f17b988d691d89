"""Tests for dataset CLI commands."""

import json

import responses
import yaml

from domo.cli.main import cli


BASE_URL = "https://api.domo.com/v1"
TOKEN_URL = "https://api.domo.com/oauth/token"


def add_token():
    responses.add(responses.GET, TOKEN_URL, json={"access_token": "t"}, status=200)


def api_calls():
    return [c for c in responses.calls if "/oauth/token" not in c.request.url]


class TestDatasetsList:
    @responses.activate
    def test_list(self, runner, mock_credentials):
        add_token()
        responses.add(responses.GET, f"{BASE_URL}/datasets", json=[{"id": "ds1", "name": "Sales"}], status=200)
        result = runner.invoke(cli, ["-t", "json", "dataset", "list", "--limit", "1", "--offset", "2"])
        assert result.exit_code == 0
        assert json.loads(result.output)[0]["name"] == "Sales"
        assert api_calls()[0].request.params == {"limit": "1", "offset": "2"}

    @responses.activate
    def test_list_all(self, runner, mock_credentials):
        add_token()
        for size in (50, 3):
            responses.add(
                responses.GET,
                f"{BASE_URL}/datasets",
                json=[{"id": f"ds{i}"} for i in range(size)],
                status=200,
            )
        result = runner.invoke(cli, ["-t", "json", "dataset", "list-all"])
        assert result.exit_code == 0
        assert len(json.loads(result.output)) == 53
        assert len(api_calls()) == 2


class TestDatasetsCreate:
    @responses.activate
    def test_create_from_template(self, runner, mock_credentials, mock_editor):
        add_token()
        responses.add(responses.POST, f"{BASE_URL}/datasets", json={"id": "new", "name": "Edited"}, status=200)
        seen = mock_editor(lambda text: "name: Edited\nschema:\n  columns:\n  - name: a\n    type: STRING\n")

        result = runner.invoke(cli, ["dataset", "create"])

        assert result.exit_code == 0
        assert "DataSet Name" in seen[0]
        assert json.loads(api_calls()[0].request.body) == {
            "name": "Edited",
            "schema": {"columns": [{"name": "a", "type": "STRING"}]},
        }
        assert yaml.safe_load(result.output) == {"id": "new", "name": "Edited"}


class TestDatasetsData:
    @responses.activate
    def test_import(self, runner, mock_credentials, tmp_path):
        add_token()
        responses.add(responses.PUT, f"{BASE_URL}/datasets/ds1/data", status=204)
        csv_file = tmp_path / "data.csv"
        csv_file.write_text("a,b\n1,2\n")

        result = runner.invoke(cli, ["dataset", "import", str(csv_file), "ds1"])

        assert result.exit_code == 0
        request = api_calls()[0].request
        assert request.body == b"a,b\n1,2\n"
        assert request.headers["Content-Type"] == "text/csv"

    def test_import_missing_file(self, runner, mock_credentials):
        result = runner.invoke(cli, ["dataset", "import", "missing.csv", "ds1"])
        assert result.exit_code == 2

    @responses.activate
    def test_query_csv(self, runner, mock_credentials):
        add_token()
        responses.add(
            responses.POST,
            f"{BASE_URL}/datasets/query/execute/ds1",
            json={"columns": ["region", "total"], "rows": [["West", 10], ["East", None]]},
            status=200,
        )

        result = runner.invoke(cli, ["-t", "csv", "dataset", "query", "ds1", "SELECT * FROM table"])

        assert result.exit_code == 0
        assert result.output == "region,total\nWest,10\nEast,\n"
        assert json.loads(api_calls()[0].request.body) == {"sql": "SELECT * FROM table"}


class TestDatasetPolicies:
    @responses.activate
    def test_update_policy(self, runner, mock_credentials, mock_editor):
        add_token()
        responses.add(
            responses.GET,
            f"{BASE_URL}/datasets/ds1/policies/4",
            json={"id": 4, "name": "West", "type": "user", "users": [1]},
            status=200,
        )
        responses.add(
            responses.PUT,
            f"{BASE_URL}/datasets/ds1/policies/4",
            json={"id": 4, "name": "West", "type": "user", "users": [1, 2]},
            status=200,
        )
        mock_editor(lambda text: text.replace("- 1", "- 1\n- 2"))

        result = runner.invoke(cli, ["-t", "json", "dataset", "update-policy", "ds1", "4"])

        assert result.exit_code == 0
        assert json.loads(api_calls()[1].request.body)["users"] == [1, 2]
        assert json.loads(result.output)["users"] == [1, 2]

    @responses.activate
    def test_delete_policy(self, runner, mock_credentials):
        add_token()
        responses.add(responses.DELETE, f"{BASE_URL}/datasets/ds1/policies/4", status=204)
        result = runner.invoke(cli, ["dataset", "delete-policy", "ds1", "4"])
        assert result.exit_code == 0
        assert api_calls()[0].request.method == "DELETE"

"""Tests for CLI output formatting."""

import json

import responses
import yaml

from domo.cli.output import (
    DEFAULT_FORMAT,
    RENDERERS,
    OutputFormat,
    format_csv,
    format_json,
    output,
    render,
    render_csv_text,
    render_query_result,
)
from domo.models import Group, QueryResult


BASE_URL = "https://api.domo.com/v1"
TOKEN_URL = "https://api.domo.com/oauth/token"

SAMPLE_RECORDS = [
    {"id": 1, "name": "Alice", "email": "alice@example.com"},
    {"id": 2, "name": "Bob", "email": "bob@example.com"},
    {"id": 3, "name": "Charlie", "email": "charlie@example.com"},
]


class TestOutputFormat:
    def test_default_is_yaml(self):
        assert DEFAULT_FORMAT is OutputFormat.YAML

    def test_every_format_has_a_renderer(self):
        assert set(RENDERERS) == set(OutputFormat)


class TestFormatJson:
    def test_formats_list(self):
        parsed = json.loads(format_json(SAMPLE_RECORDS))
        assert len(parsed) == 3
        assert parsed[0]["name"] == "Alice"

    def test_indented(self):
        assert "\n" in format_json({"id": 1})


class TestFormatCsv:
    def test_csv_with_headers(self):
        lines = format_csv(SAMPLE_RECORDS).split("\n")
        assert lines[0] == "id,name,email"
        assert len(lines) == 4

    def test_nested_values_flattened(self):
        result = format_csv([{"id": 1, "ids": [1, 2], "ok": True}])
        assert result.split("\n")[1] == '1,"[1, 2]",true'

    def test_scalar_records(self):
        assert format_csv([1, 2, 3]) == "1\n2\n3"

    def test_empty_list(self):
        assert format_csv([]) == ""


class TestRender:
    def test_models_render_with_wire_names(self):
        result = render(Group(id=1, member_count=3), OutputFormat.JSON)
        assert json.loads(result) == {"id": 1, "memberCount": 3}

    def test_yaml(self):
        result = render([Group(id=1, name="Sales")], OutputFormat.YAML)
        assert yaml.safe_load(result) == [{"id": 1, "name": "Sales"}]

    def test_debug(self):
        result = render(Group(id=1, name="Sales"), OutputFormat.DEBUG)
        assert "'name': 'Sales'" in result


class TestRenderQueryResult:
    def test_csv_table(self):
        result = QueryResult(columns=["a", "b", "c"], rows=[[1, "x", None], [2.5, True, {"k": 1}]])
        assert render_query_result(result, OutputFormat.CSV) == "a,b,c\n1,x,\n2.5,,"

    def test_csv_without_columns_has_no_header(self):
        result = QueryResult(rows=[[1, "x"]])
        assert render_query_result(result, OutputFormat.CSV) == "1,x"

    def test_json_renders_whole_result(self):
        result = QueryResult(columns=["a"], rows=[[1]], num_rows=1)
        parsed = json.loads(render_query_result(result, OutputFormat.JSON))
        assert parsed == {"columns": ["a"], "rows": [[1]], "numRows": 1}


class TestRenderCsvText:
    def test_json_rows(self):
        assert json.loads(render_csv_text("a,b\n1,2\n", OutputFormat.JSON)) == [["a", "b"], ["1", "2"]]

    def test_yaml_rows(self):
        assert yaml.safe_load(render_csv_text("a,b\n1,2\n", OutputFormat.YAML)) == [["a", "b"], ["1", "2"]]

    def test_quoted_fields(self):
        rows = json.loads(render_csv_text('name,note\n"Doe, J","say ""hi"""\n', OutputFormat.JSON))
        assert rows == [["name", "note"], ["Doe, J", 'say "hi"']]

    def test_raw_text_otherwise(self):
        assert render_csv_text("a,b\n1,2\n", OutputFormat.CSV) == "a,b\n1,2"
        assert render_csv_text("a,b\n1,2\n", OutputFormat.DEBUG) == "a,b\n1,2"


class TestOutput:
    def test_json_format(self, capsys):
        output(SAMPLE_RECORDS, fmt=OutputFormat.JSON)
        parsed = json.loads(capsys.readouterr().out)
        assert len(parsed) == 3

    def test_head_truncation(self, capsys):
        output(SAMPLE_RECORDS, fmt=OutputFormat.JSON, head=2)
        assert len(json.loads(capsys.readouterr().out)) == 2

    def test_field_filtering(self, capsys):
        output(SAMPLE_RECORDS, fmt=OutputFormat.JSON, fields="id,name")
        parsed = json.loads(capsys.readouterr().out)
        assert parsed[0] == {"id": 1, "name": "Alice"}

    def test_single_record_stays_object(self, capsys):
        output({"id": 1}, fmt=OutputFormat.JSON)
        assert json.loads(capsys.readouterr().out) == {"id": 1}

    def test_output_to_file(self, tmp_path):
        out_file = tmp_path / "out.json"
        output(SAMPLE_RECORDS, fmt=OutputFormat.JSON, output_file=str(out_file))
        assert len(json.loads(out_file.read_text())) == 3


class TestExportCommand:
    @responses.activate
    def test_export_as_json(self, cli_invoke):
        responses.add(responses.GET, TOKEN_URL, json={"access_token": "t"}, status=200)
        responses.add(responses.GET, f"{BASE_URL}/datasets/ds1/data", body="a,b\n1,2\n", status=200)

        result = cli_invoke("-t", "json", "dataset", "export", "ds1")

        assert result.exit_code == 0
        assert json.loads(result.output) == [["a", "b"], ["1", "2"]]

    @responses.activate
    def test_export_raw_by_template(self, cli_invoke):
        responses.add(responses.GET, TOKEN_URL, json={"access_token": "t"}, status=200)
        responses.add(responses.GET, f"{BASE_URL}/datasets/ds1/data", body="a,b\n1,2\n", status=200)

        result = cli_invoke("-t", "csv", "dataset", "export", "ds1")

        assert result.output == "a,b\n1,2\n"

"""Output formatting for the Domo CLI."""

from __future__ import annotations

import csv
import io
import json
from enum import Enum
from numbers import Number
from typing import Any, Callable

import click
import yaml
from pydantic import BaseModel
from rich.pretty import pretty_repr

from domo.models import DomoModel, QueryResult


class OutputFormat(str, Enum):
    JSON = "json"
    YAML = "yaml"
    CSV = "csv"
    DEBUG = "debug"


DEFAULT_FORMAT = OutputFormat.YAML


def to_plain(data: Any) -> Any:
    """Convert models (and lists of models) into JSON-compatible values."""
    if isinstance(data, DomoModel):
        return data.to_wire()
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(data, list):
        return [to_plain(item) for item in data]
    return data


def _filter_fields(data: dict, fields: list[str]) -> dict:
    """Filter a dict to only include specified fields."""
    return {k: v for k, v in data.items() if k in fields}


def _flatten_value(value: Any) -> str:
    """Flatten a value to a string for CSV display."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (list, dict)):
        return json.dumps(value, default=str)
    return str(value)


def format_json(data: Any) -> str:
    """Format data as indented JSON."""
    return json.dumps(data, indent=2, default=str)


def format_yaml(data: Any) -> str:
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True).rstrip()


def format_csv(data: Any) -> str:
    """Format records as CSV, one row per record.

    Records that are not mappings (such as a list of member ids) are written
    one value per row without a header.
    """
    records = data if isinstance(data, list) else [data]
    if not records:
        return ""
    buf = io.StringIO()
    if not all(isinstance(r, dict) for r in records):
        writer = csv.writer(buf, lineterminator="\n")
        for record in records:
            writer.writerow([_flatten_value(record)])
        return buf.getvalue().rstrip()

    keys: list[str] = []
    for record in records:
        keys.extend(k for k in record if k not in keys)
    writer = csv.DictWriter(buf, fieldnames=keys, extrasaction="ignore", lineterminator="\n")
    writer.writeheader()
    for record in records:
        writer.writerow({k: _flatten_value(record.get(k)) for k in keys})
    return buf.getvalue().rstrip()


def format_debug(data: Any) -> str:
    return pretty_repr(data)


RENDERERS: dict[OutputFormat, Callable[[Any], str]] = {
    OutputFormat.JSON: format_json,
    OutputFormat.YAML: format_yaml,
    OutputFormat.CSV: format_csv,
    OutputFormat.DEBUG: format_debug,
}


def render(data: Any, fmt: OutputFormat = DEFAULT_FORMAT) -> str:
    return RENDERERS[fmt](to_plain(data))


def _query_cell(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, (Number, str)):
        return ""
    return str(value)


def render_query_result(result: QueryResult, fmt: OutputFormat = DEFAULT_FORMAT) -> str:
    """Render a query result.

    As CSV the result becomes a table: the column names, then one line per
    row. Numbers and strings are written as text and any other cell as an
    empty field. Other formats render the whole result object.
    """
    if fmt is not OutputFormat.CSV:
        return render(result, fmt)
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    if result.columns is not None:
        writer.writerow(result.columns)
    for row in result.rows or []:
        writer.writerow([_query_cell(cell) for cell in row])
    return buf.getvalue().rstrip()


def render_csv_text(text: str, fmt: OutputFormat = DEFAULT_FORMAT) -> str:
    """Render exported CSV text.

    JSON and YAML parse the text into a list of rows of strings. Every other
    format prints the text as received.
    """
    if fmt not in (OutputFormat.JSON, OutputFormat.YAML):
        return text.rstrip("\n")
    rows = [list(row) for row in csv.reader(io.StringIO(text))]
    return RENDERERS[fmt](rows)


def output(
    data: Any,
    *,
    fmt: OutputFormat = DEFAULT_FORMAT,
    fields: str | None = None,
    head: int | None = None,
    output_file: str | None = None,
) -> None:
    """Main output function that handles all formatting and output options.

    Args:
        data: Models, lists of models or any JSON-serializable value.
        fmt: Output format.
        fields: Comma-separated field names to include.
        head: Truncate a list to its first N records.
        output_file: If set, write to this file instead of stdout.
    """
    data = to_plain(data)
    is_list = isinstance(data, list)
    records = data if is_list else [data]

    # Field filtering
    if fields:
        field_list = [f.strip() for f in fields.split(",")]
        records = [_filter_fields(r, field_list) if isinstance(r, dict) else r for r in records]

    # Head truncation
    if head is not None and head > 0:
        records = records[:head]

    out_data = records if is_list else records[0]
    write_output(RENDERERS[fmt](out_data), output_file)


def write_output(text: str, output_file: str | None = None) -> None:
    """Write output to file or stdout."""
    if output_file:
        with open(output_file, "w") as f:
            f.write(text)
            if not text.endswith("\n"):
                f.write("\n")
    else:
        click.echo(text)

"""Round-tripping records through the user's text editor.

``click.edit`` writes the buffer to a temporary file, runs the editor on it
and removes the file afterwards, whether or not the editor succeeded.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import click
import yaml
from pydantic import ValidationError

from domo.models import DomoModel

from .errors import EditorError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=DomoModel)


def _edit(text: str, editor: str, extension: str) -> str:
    logger.debug("Opening %s buffer in %r", extension, editor)
    try:
        edited = click.edit(text, editor=editor, extension=extension, require_save=False)
    except click.ClickException as exc:
        raise EditorError(exc.format_message()) from exc
    if edited is None:
        raise EditorError("Editor returned no content")
    return edited


def _load_yaml(text: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise EditorError(f"Could not parse edited YAML: {exc}") from exc


def edit_model(model: M, editor: str) -> M:
    """Let the user edit ``model`` as YAML and parse the result back.

    Raises:
        EditorError: the editor failed, or the buffer is not a valid record.
    """
    text = yaml.safe_dump(model.to_wire(), sort_keys=False, allow_unicode=True)
    data = _load_yaml(_edit(text, editor, ".yaml"))
    if not isinstance(data, dict):
        raise EditorError(f"Edited {type(model).__name__} must be a YAML mapping")
    try:
        return type(model).model_validate(data)
    except ValidationError as exc:
        raise EditorError(f"Invalid {type(model).__name__}: {exc}") from exc


def edit_value(value: Any, editor: str) -> Any:
    """Edit a plain YAML value (a mapping or a list) and return what was saved."""
    text = yaml.safe_dump(value, sort_keys=False, allow_unicode=True)
    return _load_yaml(_edit(text, editor, ".yaml"))


def edit_markdown(text: str, editor: str) -> str:
    return _edit(text, editor, ".md")

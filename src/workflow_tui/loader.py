"""Load a workflow definition file into typed models.

JSON is the native format; ``.yaml`` / ``.yml`` files are read with
PyYAML into the same structure.  Every failure (missing file, syntax
error, schema mismatch) surfaces as a ``WorkflowFileError``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from workflow_tui.errors import WorkflowFileError
from workflow_tui.models.workflow import Workflow

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


def resolve_path(path: str | Path) -> Path:
    """Absolute path; relative paths are resolved against the cwd."""
    p = Path(path)
    return p if p.is_absolute() else Path.cwd() / p


def read_raw(path: Path) -> Any:
    """Parse the file as JSON or YAML depending on its suffix."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in _YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise WorkflowFileError(f"Invalid YAML: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise WorkflowFileError(f"Invalid JSON: {exc}") from exc


def load_workflow(path: str | Path) -> Workflow:
    """Read and validate a workflow definition.

    Raises:
        WorkflowFileError: if the file is missing or malformed.
    """
    file_path = resolve_path(path)
    if not file_path.is_file():
        raise WorkflowFileError(f"File not found: {file_path}")

    raw = read_raw(file_path)
    if not isinstance(raw, dict):
        raise WorkflowFileError(
            f"Invalid workflow definition: expected an object, got {type(raw).__name__}"
        )

    try:
        workflow = Workflow.model_validate(raw)
    except ValidationError as exc:
        raise WorkflowFileError(f"Invalid workflow definition: {exc}") from exc

    logger.info(
        "Loaded workflow %r from %s: %d nodes, entry=%s",
        workflow.meta.name,
        file_path,
        len(workflow.nodes),
        workflow.entry_node_id,
    )
    return workflow

"""workflow_tui — terminal client for step-by-step workflows.

Public API:
    WorkflowRunner      — drives one session from entry node to terminal node
    WorkflowEngine      — ABC for the engine (validation, classification, branching)
    LineReader          — the session's single line-reading interface
    prompt_field        — prompt/parse/validate loop for one field
    validate_field_value — pure field-level validator
    load_workflow       — read a JSON/YAML workflow file into typed models
    load_engine         — resolve an engine from a "module:attribute" path

Models live in ``workflow_tui.models``.
"""

from workflow_tui.engine import WorkflowEngine, load_engine
from workflow_tui.loader import load_workflow
from workflow_tui.models import (
    FieldDefinition,
    PromptBack,
    PromptResult,
    PromptValue,
    Workflow,
    WorkflowValidation,
)
from workflow_tui.prompt import format_select_options, parse_field_input, prompt_field
from workflow_tui.runner import WorkflowRunner
from workflow_tui.terminal import LineReader
from workflow_tui.validator import validate_field_value

__all__ = [
    # Session
    "WorkflowRunner",
    "WorkflowEngine",
    "LineReader",
    "load_engine",
    "load_workflow",
    # Fields
    "prompt_field",
    "parse_field_input",
    "format_select_options",
    "validate_field_value",
    # Models
    "FieldDefinition",
    "PromptBack",
    "PromptResult",
    "PromptValue",
    "Workflow",
    "WorkflowValidation",
]

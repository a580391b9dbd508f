"""Public model re-exports for workflow_tui.

Consumers should import from ``workflow_tui.models`` rather than
reaching into sub-modules directly.
"""

# --- Fields ---
from workflow_tui.models.field import (
    FieldDefinition,
    FieldOption,
    FieldValidation,
)

# --- Prompt / engine results ---
from workflow_tui.models.result import (
    PromptBack,
    PromptResult,
    PromptValue,
    WorkflowValidation,
)

# --- Workflow graph ---
from workflow_tui.models.workflow import (
    ConditionalEdge,
    EdgeCondition,
    EndNode,
    Node,
    QuestionNode,
    Workflow,
    WorkflowMeta,
)

__all__ = [
    # Fields
    "FieldDefinition",
    "FieldOption",
    "FieldValidation",
    # Results
    "PromptBack",
    "PromptResult",
    "PromptValue",
    "WorkflowValidation",
    # Workflow
    "ConditionalEdge",
    "EdgeCondition",
    "EndNode",
    "Node",
    "QuestionNode",
    "Workflow",
    "WorkflowMeta",
]

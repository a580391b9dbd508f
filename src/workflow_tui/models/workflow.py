"""Workflow graph models.

A workflow is a set of nodes keyed by id plus an entry node:

  - QuestionNode: prompts one or more fields, then follows an edge
  - EndNode:      terminates the session with a ``status``

Edges are carried as data only.  Which edge fires is decided by the
engine (``WorkflowEngine.next_node``); the client never evaluates
``EdgeCondition`` itself.

The discriminated ``Node`` union uses ``type`` as its discriminator so
workflow files deserialise straight into the right class.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import Field

from .field import CamelModel, FieldDefinition


class EdgeCondition(CamelModel):
    """Condition on a collected field value, e.g. ``hasEmployees eq true``."""

    field_id: str
    operator: str
    value: Any = None


class ConditionalEdge(CamelModel):
    """Transition taken when ``condition`` holds."""

    target_node_id: str
    condition: EdgeCondition


class QuestionNode(CamelModel):
    """A step that prompts its fields in order."""

    type: Literal["question"] = "question"
    id: str
    label: str
    description: Optional[str] = None
    fields: List[FieldDefinition] = []
    default_edge: Optional[str] = None
    conditional_edges: List[ConditionalEdge] = []


class EndNode(CamelModel):
    """Terminal step; reaching it completes the session."""

    type: Literal["end"] = "end"
    id: str
    status: str = "complete"


Node = Annotated[Union[QuestionNode, EndNode], Field(discriminator="type")]


class WorkflowMeta(CamelModel):
    """Descriptive metadata shown in the banner and the summary."""

    id: Optional[str] = None
    name: str
    description: Optional[str] = None
    version: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    source: Optional[str] = None


class Workflow(CamelModel):
    """A complete workflow definition."""

    meta: WorkflowMeta
    entry_node_id: str
    nodes: Dict[str, Node]

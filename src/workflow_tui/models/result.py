"""Result models exchanged between the prompt loop, runner and engine.

Prompt results:
  - PromptValue: a validated, typed answer
  - PromptBack:  the user asked to go to the previous node

``PromptResult`` covers both cases so callers can dispatch on ``type``.
No partially parsed or invalid value is ever wrapped in a ``PromptValue``.
"""

from typing import Any, Literal

from pydantic import BaseModel


class PromptValue(BaseModel):
    """Prompt outcome: the answer passed validation."""

    type: Literal["value"] = "value"
    value: Any = None


class PromptBack(BaseModel):
    """Prompt outcome: navigate back one node."""

    type: Literal["back"] = "back"


PromptResult = PromptValue | PromptBack


class WorkflowValidation(BaseModel):
    """Engine verdict on a workflow graph."""

    is_valid: bool
    errors: list[str] = []

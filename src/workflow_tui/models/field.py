"""Field definition models — one question inside a question node.

A field declares its ``type`` (see ``constants.FIELD_TYPES``), a display
``label``, validation constraints and type-specific extras:

  - options:            choice list for select / radio / checkboxGroup
  - min_date, max_date: ISO bounds for date fields
  - currency:           ISO currency code for currency fields (display only)
  - read_only:          printed for context, never prompted or validated

Workflow files use camelCase keys (``minDate``, ``readOnly``); the models
accept both spellings.
"""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads camelCase keys and accepts snake_case names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FieldValidation(CamelModel):
    """Constraints checked by the field validator.

    ``min``/``max`` are character-length bounds for text types and numeric
    bounds for number/currency; other types ignore them.
    """

    required: bool = False
    min: Optional[Union[int, float]] = None
    max: Optional[Union[int, float]] = None
    pattern: Optional[str] = None


class FieldOption(CamelModel):
    """A selectable option: the stored ``value`` and its display ``label``."""

    value: str
    label: str


class FieldDefinition(CamelModel):
    """One question presented to the user."""

    id: str
    type: str
    label: str
    validation: FieldValidation = FieldValidation()
    options: List[FieldOption] = []
    min_date: Optional[str] = None
    max_date: Optional[str] = None
    currency: Optional[str] = None
    read_only: bool = False
    placeholder: Optional[str] = None
    help_text: Optional[str] = None

    @property
    def option_values(self) -> list[str]:
        """Declared option values in order."""
        return [o.value for o in self.options]

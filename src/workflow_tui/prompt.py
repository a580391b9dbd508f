"""Prompt the user for field values in the terminal.

One call to :func:`prompt_field` asks for one field until the answer
passes :func:`~workflow_tui.validator.validate_field_value`, or until the
user types the reserved back command.

Raw input is converted to a typed candidate by :func:`parse_field_input`:

  - text, textarea, email, phone, date: the raw string
  - number:        int/float, ``None`` when empty, NaN when unparseable
  - currency:      as number after stripping ``$`` and ``,``
  - boolean:       y/yes/true/1 → True, n/no/false/0 → False, else None
  - select, radio: 1-based index, option value or label, else raw text
  - checkboxGroup: comma-separated list, blanks dropped

An empty line re-uses the field's existing value verbatim when there is one.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from rich.markup import escape

from workflow_tui.constants import (
    BACK_COMMAND,
    CHOICE_TYPES,
    CURRENCY_STRIP_CHARS,
    EMPTY_PLACEHOLDER,
    FALSE_TOKENS,
    TEXT_TYPES,
    TRUE_TOKENS,
    TYPE_HINTS,
)
from workflow_tui.models.field import FieldDefinition
from workflow_tui.models.result import PromptBack, PromptResult, PromptValue
from workflow_tui.terminal import LineReader
from workflow_tui.validator import INTEGER_RE, NUMBER_RE, is_empty, validate_field_value

logger = logging.getLogger(__name__)


def get_type_hint(field: FieldDefinition) -> str:
    """Short format hint for the prompt; empty for unknown types."""
    return TYPE_HINTS.get(field.type, "")


def format_value(value: Any) -> str:
    """Render a collected value for prompts, read-only fields and the summary."""
    if value is None:
        return EMPTY_PLACEHOLDER
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(format_value(v) for v in value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_select_options(field: FieldDefinition) -> str:
    """Numbered option list shown before select/radio prompts."""
    return "\n".join(
        f"  {i}. {opt.label} ({opt.value})" for i, opt in enumerate(field.options, 1)
    )


def build_prompt_text(field: FieldDefinition, existing: Any = None) -> str:
    """``"<label> <hint> [<default>]: "`` — the default part only when set."""
    default_hint = "" if is_empty(existing) else f" [{format_value(existing)}]"
    return f"{field.label} {get_type_hint(field)}{default_hint}: "


def prompt_field(
    reader: LineReader,
    field: FieldDefinition,
    existing_data: Mapping[str, Any],
    *,
    back_command: str = BACK_COMMAND,
) -> PromptResult:
    """Prompt for a single field, re-asking until the answer is valid.

    Returns:
        ``PromptValue`` with the validated answer, or ``PromptBack`` if the
        user typed the back command (checked before any parsing).

    Raises:
        SessionAborted: if input ends while waiting for an answer.
    """
    existing = existing_data.get(field.id)
    has_default = not is_empty(existing)
    prompt_text = build_prompt_text(field, existing)

    while True:
        raw = reader.ask(prompt_text)
        if raw.lower() == back_command.lower():
            logger.debug("Back requested at field %s", field.id)
            return PromptBack()

        # Empty line with a default: keep the stored value, no re-conversion
        candidate = existing if raw == "" and has_default else parse_field_input(field, raw, existing)
        error = validate_field_value(field, candidate)
        if error:
            logger.debug("Field %s rejected %r: %s", field.id, raw, error)
            reader.console.print(f"[yellow]  ⚠ {escape(error)}[/]\n")
            continue
        return PromptValue(value=candidate)


# ------------------------------------------------------------------
# Raw input → typed candidate
# ------------------------------------------------------------------

def parse_field_input(field: FieldDefinition, raw: str, existing: Any = None) -> Any:
    """Convert raw text into the value type expected by ``field``."""
    if raw == "" and existing is not None:
        return existing

    ftype = field.type
    if ftype in TEXT_TYPES or ftype == "date":
        return raw
    if ftype == "number":
        return None if raw == "" else parse_number(raw)
    if ftype == "currency":
        cleaned = raw.translate(str.maketrans("", "", CURRENCY_STRIP_CHARS))
        return None if cleaned == "" else parse_number(cleaned)
    if ftype == "boolean":
        return _parse_boolean(raw)
    if ftype in CHOICE_TYPES:
        return _resolve_option(field, raw)
    if ftype == "checkboxGroup":
        return [part.strip() for part in raw.split(",") if part.strip()]
    return raw


def parse_number(text: str) -> int | float:
    """Integer when ``text`` is an integer literal, float otherwise, NaN on failure."""
    text = text.strip()
    if INTEGER_RE.fullmatch(text):
        return int(text)
    if NUMBER_RE.fullmatch(text):
        return float(text)
    return float("nan")


def _parse_boolean(raw: str) -> bool | None:
    lower = raw.lower()
    if lower in TRUE_TOKENS:
        return True
    if lower in FALSE_TOKENS:
        return False
    return None


def _resolve_option(field: FieldDefinition, raw: str) -> str:
    """Map an index, value or label to an option value; fall back to ``raw``.

    Unmatched text is returned unchanged so the validator can reject it
    with the list of valid choices.
    """
    options = field.options
    if raw.isascii() and raw.isdigit():
        index = int(raw) - 1
        if 0 <= index < len(options):
            return options[index].value

    lower = raw.lower()
    for opt in options:
        if opt.value == raw or opt.label.lower() == lower:
            return opt.value
    return raw

"""Field-level validation for answers collected in the terminal.

Mirrors the ``FieldValidation`` rules (required, min, max, pattern) plus
the type-specific checks for choices, booleans and dates.  The validator
is a pure function: it never coerces user input (that happens upstream in
``prompt.parse_field_input``) and only reports the first problem found.

Date bounds are compared to the raw string, which orders correctly only
for zero-padded ISO ``YYYY-MM-DD`` values.
"""

from __future__ import annotations

import logging
import math
import re
from datetime import date
from typing import Any

from workflow_tui.constants import CHOICE_TYPES, NUMERIC_TYPES, TEXT_TYPES
from workflow_tui.models.field import FieldDefinition

logger = logging.getLogger(__name__)

REQUIRED_MESSAGE = "This field is required."

# Plain ASCII decimal or exponent notation.  Anything else (inf, nan,
# underscores, non-ASCII digits) is not a number.
NUMBER_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def is_empty(value: Any) -> bool:
    """True for ``None`` and the empty string — the only "no answer" values."""
    return value is None or (isinstance(value, str) and value == "")


def validate_field_value(field: FieldDefinition, value: Any) -> str | None:
    """Validate a single field value against its definition.

    Returns:
        The first error message, or ``None`` if the value is valid.
    """
    rules = field.validation

    # --- Empty short-circuit: required check only ---
    if is_empty(value):
        return REQUIRED_MESSAGE if rules.required else None

    ftype = field.type
    if ftype in TEXT_TYPES:
        return _validate_text(field, value)
    if ftype in NUMERIC_TYPES:
        return _validate_number(field, value)
    if ftype == "boolean":
        if not isinstance(value, bool):
            return "Please answer yes or no."
        return None
    if ftype in CHOICE_TYPES:
        allowed = field.option_values
        if str(value) not in allowed:
            return f"Choose one of: {', '.join(allowed)}"
        return None
    if ftype == "checkboxGroup":
        return _validate_checkbox_group(field, value)
    if ftype == "date":
        return _validate_date(field, value)

    # Unknown types are accepted as-is
    return None


# ------------------------------------------------------------------
# Type-specific validators
# ------------------------------------------------------------------

def _validate_text(field: FieldDefinition, value: Any) -> str | None:
    rules = field.validation
    text = str(value).strip()

    if rules.required and not text:
        return REQUIRED_MESSAGE
    if rules.min is not None and len(text) < rules.min:
        return f"Must be at least {_fmt_bound(rules.min)} characters."
    if rules.max is not None and len(text) > rules.max:
        return f"Must be at most {_fmt_bound(rules.max)} characters."
    if rules.pattern:
        try:
            regex = re.compile(rules.pattern)
        except re.error as exc:
            # Malformed pattern: skip the format check, never bother the user
            logger.debug("Ignoring invalid pattern %r on %s: %s", rules.pattern, field.id, exc)
        else:
            if not regex.search(text):
                return "Invalid format."
    return None


def _validate_number(field: FieldDefinition, value: Any) -> str | None:
    rules = field.validation
    number = to_number(value)

    if number is None:
        return "Please enter a valid number."
    if rules.min is not None and number < rules.min:
        return f"Must be at least {_fmt_bound(rules.min)}."
    if rules.max is not None and number > rules.max:
        return f"Must be at most {_fmt_bound(rules.max)}."
    return None


def _validate_checkbox_group(field: FieldDefinition, value: Any) -> str | None:
    if not isinstance(value, (list, tuple)):
        return "Please select one or more options."
    allowed = field.option_values
    for item in value:
        if str(item) not in allowed:
            return f"Invalid option: {item}"
    return None


def _validate_date(field: FieldDefinition, value: Any) -> str | None:
    raw = value if isinstance(value, str) else str(value)
    try:
        date.fromisoformat(raw)
    except ValueError:
        return "Please enter a valid date (YYYY-MM-DD)."

    # Lexicographic comparison on the raw string
    if field.min_date and raw < field.min_date:
        return f"Date must be on or after {field.min_date}."
    if field.max_date and raw > field.max_date:
        return f"Date must be on or before {field.max_date}."
    return None


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def to_number(value: Any) -> float | int | None:
    """Coerce ``value`` to a number; ``None`` if not numeric.

    ``bool`` is a subclass of ``int`` in Python, so it is rejected
    explicitly.  NaN counts as "not a number".  Strings must match
    ``NUMBER_RE``.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = value
    else:
        text = str(value).strip()
        if not NUMBER_RE.fullmatch(text):
            return None
        number = float(text)
    if isinstance(number, float) and math.isnan(number):
        return None
    return number


def _fmt_bound(bound: int | float) -> str:
    """Render a bound without a trailing ``.0`` when it is integral."""
    if isinstance(bound, float) and bound.is_integer():
        return str(int(bound))
    return str(bound)

"""Constants shared by the prompt loop, validator and session runner.

The field-type tables live here so that parsing, validation and prompt
hints all agree on the same closed set of types.
"""

# Default reserved word that navigates to the previous node from any prompt.
# Deployments override it through WORKFLOW_TUI_BACK_COMMAND (see config).
BACK_COMMAND = "back"

# Placeholder printed for missing values (read-only fields, summary).
EMPTY_PLACEHOLDER = "—"

# Field types whose answer is the raw string.
TEXT_TYPES: frozenset[str] = frozenset({"text", "textarea", "email", "phone"})

# Field types whose answer is a number.
NUMERIC_TYPES: frozenset[str] = frozenset({"number", "currency"})

# Field types answered by picking exactly one option.
CHOICE_TYPES: frozenset[str] = frozenset({"select", "radio"})

# Every field type the client knows how to parse and validate.
# Unknown types still load; they are prompted as plain text and always pass.
FIELD_TYPES: frozenset[str] = TEXT_TYPES | NUMERIC_TYPES | CHOICE_TYPES | frozenset(
    {"boolean", "date", "checkboxGroup"}
)

# Short format hint appended to each prompt, keyed by field type.
TYPE_HINTS: dict[str, str] = {
    "text": "(text)",
    "textarea": "(text)",
    "email": "(email)",
    "phone": "(phone)",
    "number": "(number)",
    "currency": "(number, $ optional e.g. 50000 or $50,000)",
    "boolean": "(y/n)",
    "select": "(number or value)",
    "radio": "(number or value)",
    "date": "(YYYY-MM-DD)",
    "checkboxGroup": "(comma-separated values)",
}

# Case-insensitive tokens accepted for boolean fields.
TRUE_TOKENS: frozenset[str] = frozenset({"y", "yes", "true", "1"})
FALSE_TOKENS: frozenset[str] = frozenset({"n", "no", "false", "0"})

# Characters stripped from currency input before numeric coercion.
CURRENCY_STRIP_CHARS = "$,"

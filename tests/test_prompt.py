"""Prompt loop tests — type hints, raw-input parsing and the re-ask loop.

The loop is driven by a LineReader over a StringIO script, with output
captured by an in-memory rich console.
"""

import io
import math

import pytest

from helpers.builders import COVERAGE_OPTIONS, field
from helpers.console import output_of
from workflow_tui.errors import SessionAborted
from workflow_tui.models import PromptBack, PromptValue
from workflow_tui.prompt import (
    build_prompt_text,
    format_select_options,
    format_value,
    get_type_hint,
    parse_field_input,
    parse_number,
    prompt_field,
)
from workflow_tui.terminal import LineReader


# =====================================================================
# Type hints and display helpers
# =====================================================================


class TestTypeHints:
    @pytest.mark.parametrize(
        "ftype, hint",
        [
            ("text", "(text)"),
            ("textarea", "(text)"),
            ("number", "(number)"),
            ("boolean", "(y/n)"),
            ("date", "(YYYY-MM-DD)"),
            ("select", "(number or value)"),
            ("checkboxGroup", "(comma-separated values)"),
        ],
    )
    def test_known_types(self, ftype, hint):
        assert get_type_hint(field(ftype=ftype)) == hint

    def test_currency_hint_mentions_dollar(self):
        assert "$50,000" in get_type_hint(field(ftype="currency"))

    def test_unknown_type_has_no_hint(self):
        assert get_type_hint(field(ftype="signature")) == ""


class TestPromptText:
    def test_without_default(self):
        f = field("age", "number", "Your age")
        assert build_prompt_text(f) == "Your age (number): "

    def test_with_default(self):
        f = field("age", "number", "Your age")
        assert build_prompt_text(f, 42) == "Your age (number) [42]: "

    def test_empty_string_is_not_a_default(self):
        f = field("name", "text", "Name")
        assert build_prompt_text(f, "") == "Name (text): "

    def test_boolean_default_rendered(self):
        f = field("ok", "boolean", "OK?")
        assert build_prompt_text(f, False) == "OK? (y/n) [false]: "


class TestFormatting:
    def test_select_options_block(self):
        f = field(ftype="select", options=COVERAGE_OPTIONS)
        assert format_select_options(f) == (
            "  1. Basic (basic)\n  2. Standard (standard)\n  3. Premium (premium)"
        )

    @pytest.mark.parametrize(
        "value, shown",
        [(None, "—"), (True, "true"), (50000.0, "50000"), (2.5, "2.5"), (["a", "b"], "a,b")],
    )
    def test_format_value(self, value, shown):
        assert format_value(value) == shown


# =====================================================================
# Raw input parsing
# =====================================================================


class TestParseFieldInput:
    """parse_field_input converts raw text per field type."""

    @pytest.mark.parametrize("ftype", ["text", "textarea", "email", "phone", "date", "signature"])
    def test_raw_string_types(self, ftype):
        assert parse_field_input(field(ftype=ftype), "Acme 2024-01-01") == "Acme 2024-01-01"

    def test_number(self):
        f = field(ftype="number")
        assert parse_field_input(f, "12") == 12
        assert isinstance(parse_field_input(f, "12"), int)
        assert parse_field_input(f, "3.5") == 3.5
        assert parse_field_input(f, "") is None

    def test_number_garbage_is_nan(self):
        assert math.isnan(parse_field_input(field(ftype="number"), "abc"))

    def test_currency_strips_symbols(self):
        value = parse_field_input(field(ftype="currency"), "$50,000")
        assert value == 50000
        assert isinstance(value, int)

    def test_currency_only_symbols_is_empty(self):
        assert parse_field_input(field(ftype="currency"), "$") is None

    @pytest.mark.parametrize("raw", ["y", "YES", "True", "1"])
    def test_boolean_true(self, raw):
        assert parse_field_input(field(ftype="boolean"), raw) is True

    @pytest.mark.parametrize("raw", ["n", "No", "FALSE", "0"])
    def test_boolean_false(self, raw):
        assert parse_field_input(field(ftype="boolean"), raw) is False

    def test_boolean_unknown_is_none(self):
        assert parse_field_input(field(ftype="boolean"), "maybe") is None

    def test_select_by_index(self):
        f = field(ftype="select", options=COVERAGE_OPTIONS[:2])
        assert parse_field_input(f, "2") == "standard"

    def test_select_by_value_and_label(self):
        f = field(ftype="radio", options=COVERAGE_OPTIONS)
        assert parse_field_input(f, "premium") == "premium"
        assert parse_field_input(f, "STANDARD") == "standard"

    def test_select_index_out_of_range_falls_back_to_raw(self):
        f = field(ftype="select", options=COVERAGE_OPTIONS)
        assert parse_field_input(f, "9") == "9"

    def test_select_no_match_returns_raw(self):
        f = field(ftype="select", options=COVERAGE_OPTIONS)
        assert parse_field_input(f, "gold") == "gold"

    def test_checkbox_split(self):
        f = field(ftype="checkboxGroup")
        assert parse_field_input(f, "a, b ,,c") == ["a", "b", "c"]

    def test_empty_with_existing_reuses_it(self):
        assert parse_field_input(field(ftype="number"), "", existing=7) == 7


class TestParseNumber:
    def test_forms(self):
        assert parse_number("10") == 10
        assert parse_number("-2") == -2
        assert parse_number("1e3") == 1000.0
        assert math.isnan(parse_number("12abc"))

    @pytest.mark.parametrize("text", ["inf", "infinity", "NaN", "1_000", "\u0661\u0662", " "])
    def test_non_decimal_text_is_nan(self, text):
        assert math.isnan(parse_number(text))

    def test_decimal_forms_are_floats(self):
        assert parse_number(".5") == 0.5
        assert isinstance(parse_number("2.0"), float)


# =====================================================================
# prompt_field loop
# =====================================================================


class TestPromptField:
    """prompt_field re-asks until valid and recognises the back command."""

    def test_returns_valid_value(self, scripted):
        reader = scripted("Acme")
        result = prompt_field(reader, field("name", required=True), {})
        assert result == PromptValue(value="Acme")

    @pytest.mark.parametrize("raw", ["back", "BACK", "Back"])
    def test_back_is_case_insensitive(self, scripted, raw):
        reader = scripted(raw)
        assert isinstance(prompt_field(reader, field(required=True), {}), PromptBack)

    def test_back_skips_validation(self, scripted, console):
        """'back' on a number field is not reported as an invalid number."""
        reader = scripted("back")
        prompt_field(reader, field(ftype="number", required=True), {})
        assert "valid number" not in output_of(console)

    def test_back_command_given_in_mixed_case(self, scripted):
        reader = scripted("zurück")
        result = prompt_field(reader, field(), {}, back_command="Zurück")
        assert isinstance(result, PromptBack)

    def test_custom_back_command(self, scripted):
        reader = scripted("back", "zurück")
        result = prompt_field(reader, field(), {}, back_command="zurück")
        # "back" is ordinary text here
        assert result == PromptValue(value="back")

    def test_reasks_until_valid(self, scripted, console):
        f = field("count", "number", "Count", required=True, min=1)
        reader = scripted("", "abc", "0", "5")
        result = prompt_field(reader, f, {})

        assert result == PromptValue(value=5)
        out = output_of(console)
        assert out.count("⚠") == 3
        assert "This field is required." in out
        assert "Please enter a valid number." in out
        assert "Must be at least 1." in out

    def test_infinity_reasks_on_currency(self, scripted, console):
        f = field("rev", "currency", "Revenue", required=True, min=0)
        result = prompt_field(scripted("inf", "5"), f, {})
        assert result == PromptValue(value=5)
        assert "Please enter a valid number." in output_of(console)

    def test_underscore_digits_reask_on_number(self, scripted, console):
        f = field("count", "number", "Count", required=True)
        result = prompt_field(scripted("1_000", "5"), f, {})
        assert result == PromptValue(value=5)
        assert output_of(console).count("⚠") == 1

    def test_prompt_text_written(self, scripted, console):
        reader = scripted("y")
        prompt_field(reader, field("ok", "boolean", "Agree?"), {})
        assert "Agree? (y/n):" in output_of(console)

    def test_empty_line_reuses_default_verbatim(self, scripted):
        """The stored value is returned as-is, without re-parsing."""
        existing = ["basic", "premium"]
        f = field("cov", "checkboxGroup", options=COVERAGE_OPTIONS, required=True)
        result = prompt_field(scripted(""), f, {"cov": existing})
        assert result.value is existing

    def test_default_shown_in_prompt(self, scripted, console):
        f = field("rev", "currency", "Revenue")
        prompt_field(scripted(""), f, {"rev": 50000})
        assert "[50000]:" in output_of(console)

    def test_new_answer_overrides_default(self, scripted):
        f = field("rev", "currency", "Revenue")
        assert prompt_field(scripted("$1,200"), f, {"rev": 50000}).value == 1200

    def test_select_rejects_unknown_choice_then_accepts_index(self, scripted, console):
        f = field("cov", "select", options=COVERAGE_OPTIONS, required=True)
        result = prompt_field(scripted("gold", "3"), f, {})
        assert result.value == "premium"
        assert "Choose one of: basic, standard, premium" in output_of(console)

    def test_eof_aborts(self, console):
        reader = LineReader(console, io.StringIO(""))
        with pytest.raises(SessionAborted):
            prompt_field(reader, field(required=True), {})

    def test_eof_after_invalid_answers_aborts(self, scripted):
        with pytest.raises(SessionAborted):
            prompt_field(scripted("x"), field(ftype="boolean", required=True), {})

"""
Tests for the validator library.

Each validator returns None for values satisfying its constraint and a
message for values violating it; empty values are vacuously valid except
for `required` and `match`.
"""

import re

import pytest

from formguard.validators.library import (
    BUILTIN_VALIDATORS,
    custom,
    email,
    in_range,
    match,
    max_length,
    min_length,
    number,
    pattern,
    phone,
    required,
    url,
)


class TestRequired:

    @pytest.mark.parametrize("value", ["", "   ", "\t\n", None])
    def test_blank_values_fail(self, value):
        assert required(value) == "Field is required"

    def test_non_blank_passes(self):
        assert required("x") is None

    def test_field_name_in_message(self):
        assert required("", "Email") == "Email is required"


class TestLength:

    def test_min_length_too_short(self):
        assert min_length("ab", 3) == "Field must be at least 3 characters"

    def test_min_length_exact(self):
        assert min_length("abc", 3) is None

    def test_min_length_empty_is_vacuous(self):
        assert min_length("", 3) is None

    def test_max_length_too_long(self):
        assert max_length("abcd", 3, "Name") == "Name must not exceed 3 characters"

    def test_max_length_exact(self):
        assert max_length("abc", 3) is None


class TestEmail:

    @pytest.mark.parametrize("value", ["a@b.com", "first.last@sub.example.org", ""])
    def test_valid(self, value):
        assert email(value) is None

    @pytest.mark.parametrize("value", ["a@b", "ab.com", "a b@c.com", "a@@b.com", "@b.com"])
    def test_invalid(self, value):
        assert email(value) == "Invalid email format"


class TestNumber:

    @pytest.mark.parametrize("value", ["42", "-3.5", "1e3", " 7 ", "", "   "])
    def test_numeric_or_empty(self, value):
        assert number(value) is None

    @pytest.mark.parametrize("value", ["abc", "12abc", "nan", "1,000", "1_000", "inf", "infinity", "0x10"])
    def test_non_numeric(self, value):
        assert number(value, "Age") == "Age must be a number"


class TestRange:

    def test_inside(self):
        assert in_range("50", 0, 100) is None

    @pytest.mark.parametrize("value", ["0", "100"])
    def test_bounds_are_inclusive(self, value):
        assert in_range(value, 0, 100) is None

    @pytest.mark.parametrize("value", ["150", "-1", "100.5"])
    def test_outside(self, value):
        assert in_range(value, 0, 100) == "Must be between 0 and 100"

    def test_non_numeric_is_out_of_range(self):
        assert in_range("abc", 0, 100) == "Must be between 0 and 100"

    @pytest.mark.parametrize("value", ["1_0", "Infinity", "-inf"])
    def test_non_decimal_forms_are_out_of_range(self, value):
        assert in_range(value, 0, 100) == "Must be between 0 and 100"

    def test_empty_is_vacuous(self):
        assert in_range("", 0, 100) is None


class TestPattern:

    def test_string_regex(self):
        assert pattern("abc", r"^\d+$") == "Invalid format"
        assert pattern("123", r"^\d+$") is None

    def test_compiled_regex_and_custom_message(self):
        regex = re.compile(r"^[A-Z]{3}$")
        assert pattern("abc", regex, "Three capitals") == "Three capitals"
        assert pattern("ABC", regex, "Three capitals") is None

    def test_unanchored_search(self):
        assert pattern("order-42", r"\d") is None

    def test_empty_is_vacuous(self):
        assert pattern("", r"^\d+$") is None


class TestMatch:

    def test_equal(self):
        assert match("a", "a") is None

    def test_different(self):
        assert match("a", "b") == "The Fields do not match"

    def test_field_name(self):
        assert match("a", "b", "passwords") == "The passwords do not match"


class TestUrl:

    @pytest.mark.parametrize("value", [
        "https://example.com",
        "http://localhost:8080/path?q=1",
        "ftp://files.example.com/pub",
        "mailto:neo@matrix.io",
        "",
    ])
    def test_valid(self, value):
        assert url(value) is None

    @pytest.mark.parametrize("value", [
        "example.com",
        "http://",
        "//example.com",
        "http://exa mple.com",
        "1http://example.com",
    ])
    def test_invalid(self, value):
        assert url(value) == "Invalid URL"

    @pytest.mark.parametrize("value", ["http://[::1", "http://example.com:port"])
    def test_parser_errors_become_messages(self, value):
        assert url(value) == "Invalid URL"


class TestPhone:

    @pytest.mark.parametrize("value", ["+1 (555) 123-4567", "5551234", "555 1234", ""])
    def test_valid(self, value):
        assert phone(value) is None

    @pytest.mark.parametrize("value", ["12345", "555-abc-1234", "555.123.4567"])
    def test_invalid(self, value):
        assert phone(value) == "Invalid phone number"


class TestCustom:

    def test_delegates_to_predicate(self):
        no_spaces = lambda v: "No spaces allowed" if " " in v else None
        assert custom("a b", no_spaces) == "No spaces allowed"
        assert custom("ab", no_spaces) is None


def test_builtin_names():
    assert set(BUILTIN_VALIDATORS) == {
        "required", "min_length", "max_length", "email", "number", "range",
        "pattern", "match", "url", "phone", "custom",
    }

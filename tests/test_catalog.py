"""
Tests for the validator catalog: binding, registration, and composite
assembly from the catalog's own entries.
"""

import pytest

from formguard.validators import RuleSpec, UnknownValidatorError, ValidatorCatalog


@pytest.fixture
def catalog():
    return ValidatorCatalog.default()


class TestBinding:

    def test_bind_with_params(self, catalog):
        rule = catalog.bind("min_length", min_len=3, field_name="Name")
        assert rule("ab") == "Name must be at least 3 characters"
        assert rule("abc") is None

    def test_bind_without_params_returns_predicate(self, catalog):
        rule = catalog.bind("email")
        assert rule("a@b") == "Invalid email format"

    def test_bind_spec(self, catalog):
        rule = catalog.bind_spec(RuleSpec(validator="range", params={"min_value": 0, "max_value": 10}))
        assert rule("11") == "Must be between 0 and 10"
        assert rule("5") is None

    def test_bind_composite(self, catalog):
        assert catalog.bind("username")("ab") == "Username must be at least 3 characters"
        assert catalog.bind("password", min_len=8)("short") == "Password must be at least 8 characters"

    def test_unknown_validator(self, catalog):
        with pytest.raises(UnknownValidatorError) as exc_info:
            catalog.bind("zip_code")
        assert isinstance(exc_info.value, ValueError)
        assert "zip_code" in str(exc_info.value)


class TestRegistration:

    def test_register_custom_predicate(self, catalog):
        catalog.register("no_spaces", lambda v: "No spaces allowed" if v and " " in v else None)
        assert "no_spaces" in catalog
        assert catalog.bind("no_spaces")("a b") == "No spaces allowed"

    def test_register_rejects_non_callable(self, catalog):
        with pytest.raises(TypeError):
            catalog.register("broken", "not a function")

    def test_override_base_changes_composite(self, catalog):
        catalog.register("required", lambda value, field_name="Field": "Needed" if not value else None)
        assert catalog.username()("") == "Needed"

    def test_catalogs_are_independent(self):
        first = ValidatorCatalog.default()
        second = ValidatorCatalog.default()
        first.register("required", lambda value, field_name="Field": "Needed" if not value else None)

        assert first.bind("required")("") == "Needed"
        assert second.bind("required")("") == "Field is required"

    def test_separator_applies_to_composites(self):
        catalog = ValidatorCatalog.default(separator=" | ")
        assert " | " in catalog.username()("a!")

    def test_names_include_composites(self, catalog):
        names = catalog.names()
        assert "username" in names
        assert "range" in names
        assert names == sorted(names)


class TestLookup:

    def test_get_resolves_composites(self, catalog):
        assert "username" in catalog
        assert catalog.get("username")("ab") == "Username must be at least 3 characters"
        assert catalog.get("password")("") == "Password is required"

    def test_get_prefers_registered_entry(self, catalog):
        catalog.register("username", lambda value: "taken")
        assert catalog.get("username")("neo") == "taken"

    def test_get_unknown(self, catalog):
        with pytest.raises(UnknownValidatorError):
            catalog.get("zip_code")


class TestCheckParams:

    def test_accepts_matching_params(self, catalog):
        catalog.check_params("min_length", {"min_len": 3, "field_name": "Name"})
        catalog.check_params("email", {})
        catalog.check_params("username", {"min_len": 5, "label": "Login"})

    def test_rejects_unexpected_param(self, catalog):
        with pytest.raises(TypeError):
            catalog.check_params("min_length", {"min": 3})

    def test_rejects_missing_required_param(self, catalog):
        with pytest.raises(TypeError):
            catalog.check_params("range", {"min_value": 0})

    def test_rejects_bad_composite_param(self, catalog):
        with pytest.raises(TypeError):
            catalog.check_params("password", {"length": 8})
        with pytest.raises(TypeError):
            catalog.check_params("username", {"required_fn": None})

    def test_unknown_validator(self, catalog):
        with pytest.raises(UnknownValidatorError):
            catalog.check_params("zip_code", {})

"""Validation models — field outcomes, form reports, and declarative rule specs."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class FieldOutcome(str, Enum):
    """Result of evaluating a single field."""

    VALID = "valid"      # Every rule passed (or the field has no rules)
    INVALID = "invalid"  # At least one rule produced a message
    MISSING = "missing"  # The field accessor could not resolve the field


class FieldResult(BaseModel):
    """Outcome of one field evaluation."""

    field: str
    outcome: FieldOutcome
    messages: list[str] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.outcome == FieldOutcome.VALID

    @property
    def first_message(self) -> Optional[str]:
        """The message a presenter is asked to show."""
        return self.messages[0] if self.messages else None


class FormReport(BaseModel):
    """Outcome of a whole-form evaluation, in registration order."""

    form_id: str
    passed: bool
    fields: list[FieldResult] = Field(default_factory=list)
    errors: dict[str, list[str]] = Field(default_factory=dict)
    missing_fields: list[str] = Field(default_factory=list)
    duration_ms: float = 0.0

    @classmethod
    def build(cls, form_id: str, results: list[FieldResult], duration_ms: float = 0.0) -> "FormReport":
        """Aggregate per-field results into a report."""
        return cls(
            form_id=form_id,
            passed=all(r.passed for r in results),
            fields=results,
            errors={r.field: list(r.messages) for r in results if r.outcome == FieldOutcome.INVALID},
            missing_fields=[r.field for r in results if r.outcome == FieldOutcome.MISSING],
            duration_ms=round(duration_ms, 3),
        )


class RuleSpec(BaseModel):
    """Declarative reference to a catalog validator plus its parameters.

    Example:
        {"validator": "min_length", "params": {"min_len": 3, "field_name": "Name"}}
    """

    validator: str = Field(min_length=1)
    params: dict[str, Any] = Field(default_factory=dict)


class FormDefinition(BaseModel):
    """A named form: field name → ordered rule specs."""

    form_id: str = Field(min_length=1)
    name: str = ""
    description: str = ""
    fields: dict[str, list[RuleSpec]] = Field(default_factory=dict)

"""API response models."""

from typing import Literal

from pydantic import BaseModel, Field

from formguard.validators.models import RuleSpec


class HealthResponse(BaseModel):
    status: Literal["healthy", "degraded"]
    version: str
    uptime_seconds: float
    forms_loaded: int


class FormSummary(BaseModel):
    form_id: str
    name: str
    description: str
    fields: list[str]


class FormDetailResponse(FormSummary):
    rules: dict[str, list[RuleSpec]]


class ValidateFormResponse(BaseModel):
    """Outcome of validating one submission."""

    form_id: str
    valid: bool
    errors: dict[str, list[str]] = Field(default_factory=dict, description="Full ordered messages per failing field")
    displayed: dict[str, str] = Field(default_factory=dict, description="The single message shown per failing field")
    missing_fields: list[str] = Field(default_factory=list)

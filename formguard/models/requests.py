"""API request models."""

from pydantic import BaseModel, Field


class ValidateFormRequest(BaseModel):
    """Submitted form values. Fields absent here are reported as missing."""

    values: dict[str, str] = Field(
        default_factory=dict,
        description="Field name → raw submitted value",
        examples=[{"username": "neo_1", "password": "trinity"}],
    )

"""Forms API — list definitions and validate submitted values against them."""

from fastapi import APIRouter, HTTPException, Request

import structlog

from formguard.models.requests import ValidateFormRequest
from formguard.models.responses import FormDetailResponse, FormSummary, ValidateFormResponse
from formguard.validators import FormValidator, MappingFieldAccessor, RecordingPresenter
from formguard.validators.models import FormDefinition

logger = structlog.get_logger()

router = APIRouter()


def _get_definition(request: Request, form_id: str) -> FormDefinition:
    definition = request.app.state.form_store.get(form_id)
    if definition is None:
        raise HTTPException(status_code=404, detail=f"Form '{form_id}' not found")
    return definition


def _summary(definition: FormDefinition) -> FormSummary:
    return FormSummary(
        form_id=definition.form_id,
        name=definition.name,
        description=definition.description,
        fields=list(definition.fields),
    )


@router.get("/forms", response_model=list[FormSummary])
async def list_forms(request: Request):
    """All loaded form definitions."""
    return [_summary(d) for d in request.app.state.form_store.all()]


@router.get("/forms/{form_id}", response_model=FormDetailResponse)
async def get_form(form_id: str, request: Request):
    definition = _get_definition(request, form_id)
    return FormDetailResponse(**_summary(definition).model_dump(), rules=definition.fields)


@router.post("/forms/{form_id}/validate", response_model=ValidateFormResponse)
async def validate_form(form_id: str, body: ValidateFormRequest, request: Request):
    """Validate one submission. Each request gets its own engine and presenter."""
    definition = _get_definition(request, form_id)

    presenter = RecordingPresenter()
    engine = FormValidator.from_definition(
        definition,
        MappingFieldAccessor(body.values),
        presenter,
        catalog=request.app.state.catalog,
    )
    report = engine.check()

    unknown = sorted(set(body.values) - set(definition.fields))
    if unknown:
        logger.debug("unvalidated_fields_submitted", form_id=form_id, fields=unknown)

    return ValidateFormResponse(
        form_id=form_id,
        valid=report.passed,
        errors=report.errors,
        displayed=dict(presenter.shown),
        missing_fields=report.missing_fields,
    )

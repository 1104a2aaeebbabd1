"""Form validation — validator library, rule registry, and engine.

Usage:
    from formguard.validators import FormValidator, MappingFieldAccessor, RecordingPresenter

    engine = FormValidator(MappingFieldAccessor(values), RecordingPresenter())
    engine.add_rule("username", [username])
    if not engine.validate():
        print(engine.get_errors())
"""

from formguard.validators.catalog import ValidatorCatalog
from formguard.validators.composites import compose_all, password, username
from formguard.validators.engine import FormValidator
from formguard.validators.exceptions import FormDefinitionError, FormGuardError, UnknownValidatorError
from formguard.validators.library import (
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
from formguard.validators.models import FieldOutcome, FieldResult, FormDefinition, FormReport, RuleSpec
from formguard.validators.ports import (
    ErrorPresenter,
    FieldAccessor,
    LoggingPresenter,
    MappingFieldAccessor,
    NullPresenter,
    RecordingPresenter,
)

__all__ = [
    "FormValidator",
    "ValidatorCatalog",
    "FieldAccessor",
    "ErrorPresenter",
    "MappingFieldAccessor",
    "RecordingPresenter",
    "LoggingPresenter",
    "NullPresenter",
    "FieldOutcome",
    "FieldResult",
    "FormReport",
    "FormDefinition",
    "RuleSpec",
    "FormGuardError",
    "UnknownValidatorError",
    "FormDefinitionError",
    "compose_all",
    "username",
    "password",
    "required",
    "min_length",
    "max_length",
    "email",
    "number",
    "in_range",
    "pattern",
    "match",
    "url",
    "phone",
    "custom",
]

"""Validation Engine — binds rule chains to fields, aggregates failures, drives the presenter.

This is the main entry point for form validation. It reads each registered
field through the host's field accessor, runs the field's rules in order,
keeps the failing messages, and asks the presenter to show the first one
(or to clear the field).

Usage:
    engine = FormValidator(MappingFieldAccessor(values), presenter)
    engine.add_rule("email", [partial(required, field_name="Email"), email])
    if not engine.validate():
        errors = engine.get_errors()
"""

import inspect
import time
from typing import Iterable, Optional

import structlog

from formguard.validators.catalog import ValidatorCatalog
from formguard.validators.library import Validator
from formguard.validators.models import FieldOutcome, FieldResult, FormDefinition, FormReport
from formguard.validators.ports import ErrorPresenter, FieldAccessor, FieldValue, NullPresenter
from formguard.validators.rules import RuleRegistry, describe_validator

logger = structlog.get_logger()


class FormValidator:
    """Validates the fields of one form.

    Design principles:
        - Deterministic: same rules + same values → same result
        - Exhaustive: every rule of a field runs, every field of the form runs
        - Non-throwing: failures travel through return values and error state
        - Owned state: the rule registry and error state belong to this instance
    """

    def __init__(
        self,
        accessor: FieldAccessor,
        presenter: Optional[ErrorPresenter] = None,
        form_id: str = "form",
    ):
        self.accessor = accessor
        self.presenter = presenter or NullPresenter()
        self.form_id = form_id
        self._rules = RuleRegistry()
        self._errors: dict[str, list[str]] = {}
        self._missing: set[str] = set()

    @classmethod
    def from_definition(
        cls,
        definition: FormDefinition,
        accessor: FieldAccessor,
        presenter: Optional[ErrorPresenter] = None,
        catalog: Optional[ValidatorCatalog] = None,
    ) -> "FormValidator":
        """Build an engine whose rules come from a declarative form definition."""
        catalog = catalog or ValidatorCatalog.default()
        engine = cls(accessor, presenter, form_id=definition.form_id)
        for field, specs in definition.fields.items():
            engine.add_rule(field, [catalog.bind_spec(spec) for spec in specs])
        return engine

    # ── Rule registration ──

    def add_rule(self, field: str, validators: Iterable[Validator]) -> None:
        """Set the ordered rule chain for ``field``, replacing any previous one."""
        self._rules.set(field, validators)

    def remove_rule(self, field: str) -> None:
        self._rules.remove(field)
        self._errors.pop(field, None)
        self._missing.discard(field)

    def has_rule(self, field: str) -> bool:
        return field in self._rules

    @property
    def fields(self) -> list[str]:
        """Registered field names in registration order."""
        return self._rules.fields

    # ── Field-level validation ──

    def validate_field(self, field: str) -> bool:
        """Validate one field; True iff no rule produced a message."""
        return self.check_field(field).passed

    def check_field(self, field: str) -> FieldResult:
        """Validate one field and return its explicit outcome."""
        self._require_sync_accessor()
        return self._evaluate(field, self._read(field), self._rules.get(field))

    async def validate_field_async(self, field: str) -> bool:
        return (await self.check_field_async(field)).passed

    async def check_field_async(self, field: str) -> FieldResult:
        value = await self._read_async(field)
        return self._evaluate(field, value, self._rules.get(field))

    # ── Form-level validation ──

    def validate(self) -> bool:
        """Validate every registered field; True iff all of them pass."""
        return self.check().passed

    def check(self) -> FormReport:
        """Validate every registered field without short-circuiting."""
        self._require_sync_accessor()
        start_time = time.perf_counter()
        self._reset_state()

        results = [
            self._evaluate(field, self._read(field), validators)
            for field, validators in self._rules.snapshot()
        ]
        return self._report(results, start_time)

    async def validate_async(self) -> bool:
        return (await self.check_async()).passed

    async def check_async(self) -> FormReport:
        """Like ``check`` but awaits an asynchronous accessor, one field at a time."""
        start_time = time.perf_counter()
        self._reset_state()

        results = []
        for field, validators in self._rules.snapshot():
            value = await self._read_async(field)
            results.append(self._evaluate(field, value, validators))
        return self._report(results, start_time)

    # ── Error state ──

    def get_errors(self) -> dict[str, list[str]]:
        """Currently failing fields with their full, ordered message lists."""
        return {field: list(messages) for field, messages in self._errors.items()}

    def missing_fields(self) -> list[str]:
        """Fields the accessor could not resolve during the latest evaluation."""
        return [field for field in self._rules.fields if field in self._missing] + sorted(
            self._missing - set(self._rules.fields)
        )

    def clear_errors(self) -> None:
        """Clear every registered field on the presenter and forget all errors. Rules are kept."""
        for field in self._rules.fields:
            self.presenter.clear(field)
        self._reset_state()
        logger.debug("errors_cleared", form_id=self.form_id, field_count=len(self._rules))

    # ── Internals ──

    def _reset_state(self) -> None:
        self._errors = {}
        self._missing = set()

    def _require_sync_accessor(self) -> None:
        """Reject a coroutine accessor before any state or presenter is touched."""
        if inspect.iscoroutinefunction(getattr(self.accessor, "read", None)):
            raise TypeError(
                f"Field accessor {type(self.accessor).__name__}.read is asynchronous; "
                "use the *_async validation methods"
            )

    def _read(self, field: str) -> FieldValue:
        try:
            value = self.accessor.read(field)
        except Exception as e:
            logger.warning("field_accessor_failed", form_id=self.form_id, field=field, error=str(e))
            return None

        if inspect.isawaitable(value):
            if inspect.iscoroutine(value):
                value.close()
            raise TypeError(
                f"Field accessor returned an awaitable for '{field}'; "
                "use the *_async validation methods"
            )
        return value

    async def _read_async(self, field: str) -> FieldValue:
        try:
            value = self.accessor.read(field)
            if inspect.isawaitable(value):
                value = await value
        except Exception as e:
            logger.warning("field_accessor_failed", form_id=self.form_id, field=field, error=str(e))
            return None
        return value

    def _evaluate(self, field: str, value: FieldValue, validators: tuple[Validator, ...]) -> FieldResult:
        """Run ``validators`` against ``value`` and update error and presenter state."""
        if value is None:
            # Unresolvable field: failing, but no message and no presenter call
            logger.warning("field_not_found", form_id=self.form_id, field=field)
            self._missing.add(field)
            return FieldResult(field=field, outcome=FieldOutcome.MISSING)

        self._missing.discard(field)
        messages: list[str] = []

        for validator in validators:
            try:
                message = validator(value)
            except Exception as e:
                name = describe_validator(validator)
                logger.error(
                    "validator_failed",
                    form_id=self.form_id,
                    field=field,
                    validator=name,
                    error=str(e),
                )
                # A broken rule fails its field instead of the whole run
                message = f"Validator '{name}' crashed: {str(e)}"
            if message and not isinstance(message, str):
                name = describe_validator(validator)
                logger.error(
                    "validator_failed",
                    form_id=self.form_id,
                    field=field,
                    validator=name,
                    error=f"returned {type(message).__name__}, expected str or None",
                )
                message = f"Validator '{name}' returned a non-message result: {message!r}"
            if message:
                messages.append(message)

        if messages:
            self._errors[field] = messages
            self.presenter.show(field, messages[0])
            return FieldResult(field=field, outcome=FieldOutcome.INVALID, messages=messages)

        self._errors.pop(field, None)
        self.presenter.clear(field)
        return FieldResult(field=field, outcome=FieldOutcome.VALID)

    def _report(self, results: list[FieldResult], start_time: float) -> FormReport:
        duration_ms = (time.perf_counter() - start_time) * 1000
        report = FormReport.build(self.form_id, results, duration_ms=duration_ms)

        logger.info(
            "validation_complete",
            form_id=self.form_id,
            passed=report.passed,
            field_count=len(results),
            failed_fields=len(report.errors),
            missing_fields=report.missing_fields,
            duration_ms=report.duration_ms,
        )
        return report

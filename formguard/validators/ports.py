"""Host capabilities the engine consumes: reading field values and presenting errors.

The engine never touches a rendering surface. Hosts implement these two
protocols for whatever surface they drive (terminal, HTML, widget tree).
"""

from typing import Awaitable, Mapping, Optional, Protocol, Union, runtime_checkable

import structlog

logger = structlog.get_logger()

FieldValue = Optional[str]


@runtime_checkable
class FieldAccessor(Protocol):
    """Reads a field's current value. ``None`` means the field does not exist."""

    def read(self, field: str) -> Union[FieldValue, Awaitable[FieldValue]]:
        ...


@runtime_checkable
class ErrorPresenter(Protocol):
    """Marks fields invalid or clears that marking."""

    def show(self, field: str, message: str) -> None:
        ...

    def clear(self, field: str) -> None:
        ...


# ── Stock implementations ──


class MappingFieldAccessor:
    """Field accessor backed by a mapping of submitted values."""

    def __init__(self, values: Optional[Mapping[str, Optional[str]]] = None):
        self.values: dict[str, Optional[str]] = dict(values or {})

    def read(self, field: str) -> FieldValue:
        return self.values.get(field)

    def set(self, field: str, value: str) -> None:
        self.values[field] = value


class NullPresenter:
    """Discards presentation requests."""

    def show(self, field: str, message: str) -> None:
        pass

    def clear(self, field: str) -> None:
        pass


class RecordingPresenter:
    """Keeps the message currently shown per field, plus a log of every call.

    ``shown`` mirrors what a UI would display right now; ``calls`` records
    ``("show", field, message)`` and ``("clear", field, None)`` in order.
    """

    def __init__(self):
        self.shown: dict[str, str] = {}
        self.calls: list[tuple[str, str, Optional[str]]] = []

    def show(self, field: str, message: str) -> None:
        self.shown[field] = message
        self.calls.append(("show", field, message))

    def clear(self, field: str) -> None:
        self.shown.pop(field, None)
        self.calls.append(("clear", field, None))


class LoggingPresenter:
    """Emits presentation requests as structured log events."""

    def __init__(self, form_id: str = "form"):
        self.form_id = form_id

    def show(self, field: str, message: str) -> None:
        logger.info("field_invalid", form_id=self.form_id, field=field, message=message)

    def clear(self, field: str) -> None:
        logger.info("field_cleared", form_id=self.form_id, field=field)

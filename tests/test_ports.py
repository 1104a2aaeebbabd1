"""
Tests for the stock field accessor and presenter implementations.
"""

from structlog.testing import capture_logs

from formguard.validators import (
    ErrorPresenter,
    FieldAccessor,
    FormValidator,
    LoggingPresenter,
    MappingFieldAccessor,
    NullPresenter,
    RecordingPresenter,
    required,
)


def test_stock_implementations_satisfy_protocols():
    assert isinstance(MappingFieldAccessor(), FieldAccessor)
    for presenter in (NullPresenter(), RecordingPresenter(), LoggingPresenter()):
        assert isinstance(presenter, ErrorPresenter)


def test_mapping_accessor_reads_and_updates():
    accessor = MappingFieldAccessor({"a": "1"})
    assert accessor.read("a") == "1"
    assert accessor.read("b") is None

    accessor.set("b", "2")
    assert accessor.read("b") == "2"


def test_recording_presenter_tracks_current_state():
    presenter = RecordingPresenter()
    presenter.show("email", "Invalid email format")
    presenter.show("name", "Name is required")
    presenter.clear("email")

    assert presenter.shown == {"name": "Name is required"}
    assert presenter.calls[0] == ("show", "email", "Invalid email format")
    assert presenter.calls[-1] == ("clear", "email", None)


def test_logging_presenter_emits_events():
    engine = FormValidator(
        MappingFieldAccessor({"name": "", "city": "Zion"}),
        LoggingPresenter(form_id="signup"),
        form_id="signup",
    )
    engine.add_rule("name", [required])
    engine.add_rule("city", [required])

    with capture_logs() as logs:
        engine.validate()

    invalid = [e for e in logs if e["event"] == "field_invalid"]
    cleared = [e for e in logs if e["event"] == "field_cleared"]
    assert invalid == [{
        "event": "field_invalid",
        "log_level": "info",
        "form_id": "signup",
        "field": "name",
        "message": "Field is required",
    }]
    assert [e["field"] for e in cleared] == ["city"]
    assert any(e["event"] == "validation_complete" and e["passed"] is False for e in logs)

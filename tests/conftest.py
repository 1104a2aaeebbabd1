"""Shared fixtures for engine tests."""

import pytest

from formguard.validators import FormValidator, MappingFieldAccessor, RecordingPresenter


@pytest.fixture
def accessor():
    return MappingFieldAccessor()


@pytest.fixture
def presenter():
    return RecordingPresenter()


@pytest.fixture
def engine(accessor, presenter):
    return FormValidator(accessor, presenter, form_id="test_form")

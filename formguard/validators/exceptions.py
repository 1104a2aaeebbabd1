"""Exceptions raised for configuration mistakes, never for validation failures."""


class FormGuardError(Exception):
    """Base class for formguard errors."""


class UnknownValidatorError(FormGuardError, ValueError):
    """A rule referenced a validator name the catalog does not know."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown validator '{name}'")


class FormDefinitionError(FormGuardError, ValueError):
    """A form definition file could not be parsed or bound."""

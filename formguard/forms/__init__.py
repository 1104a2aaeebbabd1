"""Form definitions — JSON files mapping field names to rule specs."""

from formguard.forms.loader import BUILTIN_DEFINITIONS_DIR, FormDefinitionStore, parse_form_definition

__all__ = ["BUILTIN_DEFINITIONS_DIR", "FormDefinitionStore", "parse_form_definition"]

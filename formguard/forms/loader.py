"""Form definition loader — reads JSON form definitions from disk.

Each file holds one definition:

    {
        "form_id": "access",
        "name": "Access form",
        "fields": {
            "username": [{"validator": "username"}],
            "password": [{"validator": "password"}]
        }
    }

Unreadable or malformed files are logged and skipped so one bad file does
not hide the rest.
"""

import json
from pathlib import Path
from typing import Optional, Union

import structlog
from pydantic import ValidationError

from formguard.validators.catalog import ValidatorCatalog
from formguard.validators.exceptions import FormDefinitionError
from formguard.validators.models import FormDefinition

logger = structlog.get_logger()

BUILTIN_DEFINITIONS_DIR = Path(__file__).parent / "definitions"


def parse_form_definition(data: dict, catalog: Optional[ValidatorCatalog] = None) -> FormDefinition:
    """Validate raw definition data; with a catalog, also check every validator name.

    Raises:
        FormDefinitionError: structure is invalid, a validator is unknown, or its params do not fit
    """
    try:
        definition = FormDefinition.model_validate(data)
    except ValidationError as e:
        raise FormDefinitionError(f"Invalid form definition: {e.error_count()} error(s): {e}") from e

    if catalog is not None:
        for field, specs in definition.fields.items():
            for spec in specs:
                if spec.validator not in catalog:
                    raise FormDefinitionError(
                        f"Form '{definition.form_id}' field '{field}' uses unknown validator '{spec.validator}'"
                    )
                try:
                    catalog.check_params(spec.validator, spec.params)
                except TypeError as e:
                    raise FormDefinitionError(
                        f"Form '{definition.form_id}' field '{field}' has invalid params "
                        f"for '{spec.validator}': {e}"
                    ) from e
    return definition


class FormDefinitionStore:
    """In-memory collection of form definitions keyed by ``form_id``."""

    def __init__(self, catalog: Optional[ValidatorCatalog] = None):
        self.catalog = catalog
        self._definitions: dict[str, FormDefinition] = {}

    def add(self, definition: FormDefinition) -> None:
        if definition.form_id in self._definitions:
            logger.info("form_definition_replaced", form_id=definition.form_id)
        self._definitions[definition.form_id] = definition

    def load_dir(self, directory: Union[str, Path]) -> int:
        """Load every ``*.json`` file in ``directory``; returns how many loaded."""
        directory = Path(directory)
        if not directory.is_dir():
            logger.warning("form_definitions_dir_missing", path=str(directory))
            return 0

        loaded = 0
        for json_file in sorted(directory.glob("*.json")):
            try:
                data = json.loads(json_file.read_text(encoding="utf-8"))
                definition = parse_form_definition(data, self.catalog)
            except (OSError, json.JSONDecodeError, FormDefinitionError) as e:
                logger.warning("form_definition_skipped", path=str(json_file), error=str(e))
                continue
            self.add(definition)
            loaded += 1

        logger.info("form_definitions_loaded", path=str(directory), count=loaded)
        return loaded

    def get(self, form_id: str) -> Optional[FormDefinition]:
        return self._definitions.get(form_id)

    def all(self) -> list[FormDefinition]:
        return [self._definitions[k] for k in sorted(self._definitions)]

    def __contains__(self, form_id: str) -> bool:
        return form_id in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

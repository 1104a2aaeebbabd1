"""Rule registry — per-field ordered validator chains owned by one engine."""

from typing import Iterable, Iterator

from formguard.validators.library import Validator


def describe_validator(validator: Validator) -> str:
    """Readable name for logs; unwraps ``functools.partial``."""
    target = getattr(validator, "func", validator)
    return getattr(target, "__name__", None) or repr(target)


class RuleRegistry:
    """Field name → ordered tuple of validators.

    Registration order of fields is preserved and defines the order in which
    a whole-form validation visits them.
    """

    def __init__(self):
        self._rules: dict[str, tuple[Validator, ...]] = {}

    def set(self, field: str, validators: Iterable[Validator]) -> None:
        """Replace the rule chain for ``field``."""
        chain = tuple(validators)
        for validator in chain:
            if not callable(validator):
                raise TypeError(f"Rule for field '{field}' is not callable: {validator!r}")
        self._rules[field] = chain

    def remove(self, field: str) -> None:
        self._rules.pop(field, None)

    def get(self, field: str) -> tuple[Validator, ...]:
        """Rules for ``field``; an unregistered field has none."""
        return self._rules.get(field, ())

    def snapshot(self) -> list[tuple[str, tuple[Validator, ...]]]:
        """Frozen view used for the duration of one whole-form run."""
        return list(self._rules.items())

    @property
    def fields(self) -> list[str]:
        return list(self._rules)

    def __contains__(self, field: str) -> bool:
        return field in self._rules

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._rules))

    def __len__(self) -> int:
        return len(self._rules)

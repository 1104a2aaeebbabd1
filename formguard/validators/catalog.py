"""Validator catalog — an explicitly constructed name → predicate registry.

Each engine host builds its own catalog; nothing here is module-level state.

Usage:
    catalog = ValidatorCatalog.default()
    catalog.register("no_spaces", lambda v: "No spaces allowed" if v and " " in v else None)

    rule = catalog.bind("min_length", min_len=3, field_name="Name")
    rule("ab")  # → "Name must be at least 3 characters"
"""

import inspect
from functools import partial
from typing import Any, Callable, Optional

import structlog

from formguard.validators.composites import DEFAULT_SEPARATOR, build_password, build_username
from formguard.validators.exceptions import UnknownValidatorError
from formguard.validators.library import BUILTIN_VALIDATORS, Message, Validator
from formguard.validators.models import RuleSpec

logger = structlog.get_logger()

COMPOSITE_NAMES = ("username", "password")


class ValidatorCatalog:
    """Named predicates plus the composites built from them.

    Composites are assembled from the catalog's own ``required``,
    ``min_length`` and ``pattern`` entries, so overriding a base entry is
    reflected in ``username()`` and ``password()``.
    """

    def __init__(
        self,
        validators: Optional[dict[str, Callable[..., Message]]] = None,
        separator: str = DEFAULT_SEPARATOR,
    ):
        self._validators: dict[str, Callable[..., Message]] = dict(validators or {})
        self.separator = separator

    @classmethod
    def default(cls, separator: str = DEFAULT_SEPARATOR) -> "ValidatorCatalog":
        """A fresh catalog seeded with the built-in validators."""
        return cls(BUILTIN_VALIDATORS, separator=separator)

    def register(self, name: str, fn: Callable[..., Message]) -> None:
        """Add or replace a predicate under ``name``."""
        if not callable(fn):
            raise TypeError(f"Validator '{name}' must be callable, got {type(fn).__name__}")
        replaced = name in self._validators
        self._validators[name] = fn
        logger.debug("validator_registered", name=name, replaced=replaced)

    def get(self, name: str) -> Callable[..., Message]:
        """Raw predicate for ``name``; composites resolve to their built validator."""
        if name in self._validators:
            return self._validators[name]
        if name in COMPOSITE_NAMES:
            return getattr(self, name)()
        raise UnknownValidatorError(name)

    def names(self) -> list[str]:
        """All bindable names, composites included."""
        extra = [n for n in COMPOSITE_NAMES if n not in self._validators]
        return sorted(list(self._validators) + extra)

    def __contains__(self, name: str) -> bool:
        return name in self._validators or name in COMPOSITE_NAMES

    # ── Binding ──

    def bind(self, name: str, **params: Any) -> Validator:
        """Turn a catalog entry plus parameters into a one-argument validator."""
        if name in self._validators:
            fn = self._validators[name]
            return partial(fn, **params) if params else fn
        if name == "username":
            return self.username(**params)
        if name == "password":
            return self.password(**params)
        raise UnknownValidatorError(name)

    def bind_spec(self, spec: RuleSpec) -> Validator:
        return self.bind(spec.validator, **spec.params)

    def username(self, **options: Any) -> Validator:
        options.setdefault("separator", self.separator)
        return build_username(self.get("required"), self.get("min_length"), self.get("pattern"), **options)

    def password(self, **options: Any) -> Validator:
        options.setdefault("separator", self.separator)
        return build_password(self.get("required"), self.get("min_length"), **options)

    def check_params(self, name: str, params: dict[str, Any]) -> None:
        """Verify ``params`` fit the signature ``bind(name, **params)`` will call.

        Raises:
            UnknownValidatorError: ``name`` is not in the catalog
            TypeError: a parameter is unexpected or a required one is absent
        """
        if name in self._validators:
            target, args = self._validators[name], (None,)
        elif name == "username":
            target, args = build_username, (None, None, None)
        elif name == "password":
            target, args = build_password, (None, None)
        else:
            raise UnknownValidatorError(name)

        try:
            signature = inspect.signature(target)
        except (TypeError, ValueError):
            # No introspectable signature (C callables); checked at call time
            return
        signature.bind(*args, **params)

"""Composite validators — fixed sub-chains whose messages are all reported.

A composite runs every validator of its chain and joins the non-empty
messages with a separator, in chain order. It does not stop at the first
failure. The base validators are passed in explicitly so a composite never
depends on a shared catalog.
"""

import re
from functools import partial
from typing import Callable

from formguard.validators.library import Message, Validator, min_length, pattern, required

DEFAULT_SEPARATOR = "; "

USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")
USERNAME_PATTERN_MESSAGE = "Username may only contain letters, numbers, hyphens and underscores"
MIN_CREDENTIAL_LENGTH = 3


def compose_all(*validators: Validator, separator: str = DEFAULT_SEPARATOR) -> Validator:
    """Build a validator that reports every failure of ``validators``."""

    def composite(value):
        messages = [message for message in (v(value) for v in validators) if message]
        return separator.join(messages) if messages else None

    return composite


def build_username(
    required_fn: Callable[..., Message] = required,
    min_length_fn: Callable[..., Message] = min_length,
    pattern_fn: Callable[..., Message] = pattern,
    *,
    label: str = "Username",
    min_len: int = MIN_CREDENTIAL_LENGTH,
    separator: str = DEFAULT_SEPARATOR,
) -> Validator:
    """required → min_length → allowed-characters pattern."""
    return compose_all(
        partial(required_fn, field_name=label),
        partial(min_length_fn, min_len=min_len, field_name=label),
        partial(pattern_fn, regex=USERNAME_PATTERN, message=USERNAME_PATTERN_MESSAGE),
        separator=separator,
    )


def build_password(
    required_fn: Callable[..., Message] = required,
    min_length_fn: Callable[..., Message] = min_length,
    *,
    label: str = "Password",
    min_len: int = MIN_CREDENTIAL_LENGTH,
    separator: str = DEFAULT_SEPARATOR,
) -> Validator:
    """required → min_length."""
    return compose_all(
        partial(required_fn, field_name=label),
        partial(min_length_fn, min_len=min_len, field_name=label),
        separator=separator,
    )


def username(value) -> Message:
    return build_username()(value)


def password(value) -> Message:
    return build_password()(value)

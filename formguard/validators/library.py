"""Validator library — pure, context-free predicates for form values.

Every validator takes the raw field value first, optionally followed by
parameters, and returns either ``None`` (valid) or a human-readable message.

Contract:
    - Deterministic: same input → same output
    - No side effects, no I/O, no shared state
    - Empty values are vacuously valid for everything except ``required``
      and ``match``
    - Never raises for string input; parser failures become messages
"""

import re
from typing import Callable, Optional, Pattern, Union
from urllib.parse import urlsplit

Message = Optional[str]
Validator = Callable[[Optional[str]], Message]

DEFAULT_FIELD_NAME = "Field"

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"[\d\s\-+()]{7,}", re.ASCII)
# Plain decimal notation with optional exponent; no "_", "inf", "nan" or hex
NUMBER_PATTERN = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*", re.ASCII)
URL_SCHEME_PATTERN = re.compile(r"[a-zA-Z][a-zA-Z0-9+.\-]*")

# Schemes that are meaningless without a host component
HOST_REQUIRED_SCHEMES = {"http", "https", "ftp", "ws", "wss"}


def _is_blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


def _to_number(value: str) -> Optional[float]:
    """Parse a decimal string the way a form user writes numbers."""
    if not NUMBER_PATTERN.fullmatch(value):
        return None
    return float(value)


def required(value: Optional[str], field_name: str = DEFAULT_FIELD_NAME) -> Message:
    """Fail when the value is empty or whitespace only."""
    if _is_blank(value):
        return f"{field_name} is required"
    return None


def min_length(value: Optional[str], min_len: int, field_name: str = DEFAULT_FIELD_NAME) -> Message:
    if value and len(value) < min_len:
        return f"{field_name} must be at least {min_len} characters"
    return None


def max_length(value: Optional[str], max_len: int, field_name: str = DEFAULT_FIELD_NAME) -> Message:
    if value and len(value) > max_len:
        return f"{field_name} must not exceed {max_len} characters"
    return None


def email(value: Optional[str]) -> Message:
    """Conservative ``local@domain.tld`` shape check."""
    if value and not EMAIL_PATTERN.fullmatch(value):
        return "Invalid email format"
    return None


def number(value: Optional[str], field_name: str = DEFAULT_FIELD_NAME) -> Message:
    if _is_blank(value):
        return None
    if _to_number(value) is None:
        return f"{field_name} must be a number"
    return None


def in_range(value: Optional[str], min_value: float, max_value: float) -> Message:
    """Numeric bounds check, inclusive on both ends.

    A non-numeric value cannot lie inside the bounds, so it fails too.
    """
    if _is_blank(value):
        return None
    parsed = _to_number(value)
    if parsed is None or parsed < min_value or parsed > max_value:
        return f"Must be between {min_value} and {max_value}"
    return None


def pattern(
    value: Optional[str],
    regex: Union[str, Pattern[str]],
    message: str = "Invalid format",
) -> Message:
    """Search ``regex`` anywhere in the value; anchor it yourself if needed."""
    if not value:
        return None
    compiled = re.compile(regex) if isinstance(regex, str) else regex
    if not compiled.search(value):
        return message
    return None


def match(value1: Optional[str], value2: Optional[str], field_name: str = "Fields") -> Message:
    if value1 != value2:
        return f"The {field_name} do not match"
    return None


def url(value: Optional[str]) -> Message:
    """Accept absolute URLs only.

    ``urlsplit`` and the ``port`` accessor raise ``ValueError`` on malformed
    input (bad IPv6 literal, non-numeric port); that is reported as a
    message rather than propagated.
    """
    if not value:
        return None

    candidate = value.strip()
    try:
        parts = urlsplit(candidate)
        parts.port  # raises ValueError on a malformed port
    except ValueError:
        return "Invalid URL"

    if any(ch.isspace() for ch in candidate):
        return "Invalid URL"
    if not parts.scheme or not URL_SCHEME_PATTERN.fullmatch(parts.scheme):
        return "Invalid URL"
    if parts.scheme.lower() in HOST_REQUIRED_SCHEMES and not parts.hostname:
        return "Invalid URL"
    if not parts.netloc and not parts.path:
        return "Invalid URL"
    return None


def phone(value: Optional[str]) -> Message:
    """Loose check: digits, spaces, ``-``, ``+`` and parentheses, 7 chars minimum."""
    if value and not PHONE_PATTERN.fullmatch(value):
        return "Invalid phone number"
    return None


def custom(value: Optional[str], predicate: Validator) -> Message:
    """Delegate to a caller-supplied predicate."""
    return predicate(value)


# Name → predicate, as exposed through ``ValidatorCatalog.default()``
BUILTIN_VALIDATORS: dict[str, Callable[..., Message]] = {
    "required": required,
    "min_length": min_length,
    "max_length": max_length,
    "email": email,
    "number": number,
    "range": in_range,
    "pattern": pattern,
    "match": match,
    "url": url,
    "phone": phone,
    "custom": custom,
}

"""formguard — rule-based form validation engine."""

__version__ = "1.0.0"

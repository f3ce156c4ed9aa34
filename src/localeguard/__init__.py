"""Locale file validation against a canonical locale."""

from .config import LocaleConfig
from .errors import LocaleValidationError
from .validation import ValidationReport, extract_placeholders, validate_locales

__all__ = [
    "LocaleConfig",
    "LocaleValidationError",
    "ValidationReport",
    "extract_placeholders",
    "validate_locales",
]

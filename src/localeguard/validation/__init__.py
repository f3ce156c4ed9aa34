"""Locale validation exports."""

from .compare import compare_locale
from .core import ValidationReport, validate_locales
from .loader import LoadedLocale, discover_locale_files, load_locale
from .placeholders import extract_placeholders
from .structure import build_shape, flatten_keys, serialize_shape

__all__ = [
    "LoadedLocale",
    "ValidationReport",
    "build_shape",
    "compare_locale",
    "discover_locale_files",
    "extract_placeholders",
    "flatten_keys",
    "load_locale",
    "serialize_shape",
    "validate_locales",
]

"""Validation failures raised while checking locale files."""

from __future__ import annotations

import copy


class LocaleValidationError(ValueError):
    def __init__(self, message: str, filename: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.filename = filename

    def with_filename(self, filename: str) -> "LocaleValidationError":
        # Same error type and attributes, message prefixed with the offending file.
        wrapped = copy.copy(self)
        wrapped.message = f"{filename}: {self.message}"
        wrapped.filename = filename
        wrapped.args = (wrapped.message,)
        return wrapped

    def __str__(self) -> str:
        return self.message


class NoLocalesFound(LocaleValidationError):
    pass


class CanonicalMissing(LocaleValidationError):
    pass


class InvalidJSON(LocaleValidationError):
    pass


class InvalidStructure(LocaleValidationError):
    pass


class InvalidValueType(LocaleValidationError):
    def __init__(self, message: str, key: str = "", filename: str | None = None) -> None:
        super().__init__(message, filename)
        self.key = key


class MalformedPlaceholder(LocaleValidationError):
    def __init__(self, value: str, filename: str | None = None) -> None:
        super().__init__(f'Malformed placeholder in value: "{value}"', filename)
        self.value = value


class MissingKeys(LocaleValidationError):
    def __init__(
        self, message: str, keys: list[str] | None = None, filename: str | None = None
    ) -> None:
        super().__init__(message, filename)
        self.keys = list(keys or [])


class ExtraKeys(LocaleValidationError):
    def __init__(
        self, message: str, keys: list[str] | None = None, filename: str | None = None
    ) -> None:
        super().__init__(message, filename)
        self.keys = list(keys or [])


class ShapeMismatch(LocaleValidationError):
    pass


class PlaceholderMismatch(LocaleValidationError):
    def __init__(
        self,
        message: str,
        key: str = "",
        names: list[str] | None = None,
        kind: str = "missing",
        filename: str | None = None,
    ) -> None:
        super().__init__(message, filename)
        self.key = key
        self.names = list(names or [])
        self.kind = kind

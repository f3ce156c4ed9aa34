"""Comparison of one locale against the canonical locale."""

from __future__ import annotations

from ..errors import ExtraKeys, MissingKeys, PlaceholderMismatch, ShapeMismatch
from .loader import LoadedLocale
from .placeholders import PLACEHOLDER_RE, extract_placeholders


def compare_locale(canonical: LoadedLocale, other: LoadedLocale) -> None:
    """Raise the first discrepancy between ``other`` and ``canonical``.

    Checks run in a fixed order: missing keys, extra keys, nesting shape,
    then placeholders key by key in canonical order. Missing and extra key
    failures list every offending key at once.
    """
    name = other.name
    canonical_keys = canonical.flattened
    locale_keys = other.flattened

    missing = [key for key in canonical_keys if key not in locale_keys]
    if missing:
        raise MissingKeys(
            f"{name}: Missing keys compared to canonical: {', '.join(missing)}",
            keys=missing,
            filename=name,
        )

    extra = [key for key in locale_keys if key not in canonical_keys]
    if extra:
        raise ExtraKeys(
            f"{name}: Extra keys not in canonical: {', '.join(extra)}",
            keys=extra,
            filename=name,
        )

    if other.shape != canonical.shape:
        raise ShapeMismatch(
            f"{name}: Nesting shape mismatch compared to canonical {canonical.name}",
            filename=name,
        )

    for key, canonical_value in canonical_keys.items():
        _check_placeholders(name, key, canonical_value, locale_keys[key])


def _check_placeholders(name: str, key: str, canonical_value: str, locale_value: str) -> None:
    expected = extract_placeholders(canonical_value)
    found = extract_placeholders(locale_value)
    missing = _in_order(canonical_value, expected - found)
    if missing:
        raise PlaceholderMismatch(
            f'{name}: Key "{key}" missing placeholders: {", ".join(missing)}',
            key=key,
            names=missing,
            kind="missing",
            filename=name,
        )
    extra = _in_order(locale_value, found - expected)
    if extra:
        raise PlaceholderMismatch(
            f'{name}: Key "{key}" has extra placeholders: {", ".join(extra)}',
            key=key,
            names=extra,
            kind="extra",
            filename=name,
        )


def _in_order(value: str, names: set[str]) -> list[str]:
    # Names as they first appear in the value.
    ordered = dict.fromkeys(match.group(1) for match in PLACEHOLDER_RE.finditer(value))
    return [placeholder for placeholder in ordered if placeholder in names]

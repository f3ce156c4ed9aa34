from __future__ import annotations

import json
from pathlib import Path

import pytest

from localeguard.config import LocaleConfig
from localeguard.errors import (
    CanonicalMissing,
    ExtraKeys,
    InvalidJSON,
    InvalidValueType,
    LocaleValidationError,
    MalformedPlaceholder,
    MissingKeys,
    NoLocalesFound,
    PlaceholderMismatch,
    ShapeMismatch,
)
from localeguard.validation import validate_locales


def _write(directory: Path, name: str, payload) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    (directory / name).write_text(json.dumps(payload), encoding="utf-8")


def test_matching_nested_locales_pass(tmp_path: Path) -> None:
    _write(tmp_path, "en.json", {"common": {"hello": "Hello", "goodbye": "Goodbye {{name}}"}})
    _write(tmp_path, "de-DE.json", {"common": {"hello": "Hallo", "goodbye": "Auf Wiedersehen {{name}}"}})

    report = validate_locales(tmp_path)

    assert report.file_count == 2
    assert report.key_count == 2
    assert report.canonical == "en.json"
    assert report.files == ("de-DE.json", "en.json")
    assert report.summary_lines() == [
        "✓ Validated 2 locale file(s)",
        "✓ All locales have 2 keys matching canonical",
    ]


def test_canonical_only_passes(tmp_path: Path) -> None:
    _write(tmp_path, "en.json", {"title": "App"})

    report = validate_locales(tmp_path)

    assert report.file_count == 1
    assert report.key_count == 1


def test_accepts_string_directory(tmp_path: Path) -> None:
    _write(tmp_path, "en.json", {"title": "App"})

    assert validate_locales(str(tmp_path)).file_count == 1


@pytest.mark.parametrize(
    ("canonical", "locale", "error", "message"),
    [
        (
            {"common": {"hello": "Hello"}},
            {"common": {"hello": "Hallo", "extra": "Extra key"}},
            ExtraKeys,
            "Extra keys not in canonical",
        ),
        (
            {"common": {"hello": "Hello", "goodbye": "Goodbye"}},
            {"common": {"hello": "Hallo"}},
            MissingKeys,
            "Missing keys compared to canonical",
        ),
        (
            {"greeting": "Hello {{name}}"},
            {"greeting": "Hallo {{username}}"},
            PlaceholderMismatch,
            "missing placeholders",
        ),
        (
            {"common": {"hello": "Hello"}},
            {"common.hello": "Hallo"},
            ShapeMismatch,
            "Nesting shape mismatch",
        ),
        (
            {"greeting": "Hello"},
            {"greeting": "Hallo {{name"},
            MalformedPlaceholder,
            "Malformed placeholder",
        ),
    ],
)
def test_locale_discrepancies_fail(
    tmp_path: Path, canonical: dict, locale: dict, error: type, message: str
) -> None:
    _write(tmp_path, "en.json", canonical)
    _write(tmp_path, "de-DE.json", locale)

    with pytest.raises(error, match=message) as excinfo:
        validate_locales(tmp_path)
    assert str(excinfo.value).startswith("de-DE.json: ")
    assert excinfo.value.filename == "de-DE.json"


def test_malformed_canonical_placeholder_fails(tmp_path: Path) -> None:
    _write(tmp_path, "en.json", {"broken": "Hello {{name"})

    with pytest.raises(MalformedPlaceholder, match="Malformed placeholder"):
        validate_locales(tmp_path)


def test_non_string_value_fails(tmp_path: Path) -> None:
    _write(tmp_path, "en.json", {"nested": {"bad": 123}})

    with pytest.raises(InvalidValueType, match="non-string value"):
        validate_locales(tmp_path)


def test_invalid_json_fails(tmp_path: Path) -> None:
    (tmp_path / "en.json").write_text("{ invalid json }", encoding="utf-8")

    with pytest.raises(InvalidJSON, match="Invalid JSON"):
        validate_locales(tmp_path)


def test_canonical_missing(tmp_path: Path) -> None:
    _write(tmp_path, "de-DE.json", {"hello": "Hallo"})

    with pytest.raises(CanonicalMissing, match="Canonical locale file en.json not found"):
        validate_locales(tmp_path)


def test_no_locale_files(tmp_path: Path) -> None:
    (tmp_path / "README.md").write_text("docs", encoding="utf-8")

    with pytest.raises(NoLocalesFound, match="No locale files found"):
        validate_locales(tmp_path)


def test_first_failing_file_in_discovery_order_is_reported(tmp_path: Path) -> None:
    _write(tmp_path, "en.json", {"a": "A", "b": "B"})
    _write(tmp_path, "zz.json", {"a": "A"})
    _write(tmp_path, "aa.json", {"b": "B"})

    with pytest.raises(MissingKeys) as excinfo:
        validate_locales(tmp_path)
    assert str(excinfo.value) == "aa.json: Missing keys compared to canonical: a"


def test_load_errors_surface_before_comparison(tmp_path: Path) -> None:
    _write(tmp_path, "en.json", {"a": "A", "b": "B"})
    _write(tmp_path, "de.json", {"a": "A"})
    (tmp_path / "fr.json").write_text("[1, 2", encoding="utf-8")

    with pytest.raises(InvalidJSON, match="fr.json: Invalid JSON"):
        validate_locales(tmp_path)


def test_custom_canonical_locale(tmp_path: Path) -> None:
    _write(tmp_path, "de-DE.json", {"hello": "Hallo"})
    _write(tmp_path, "fr.json", {"hello": "Bonjour"})
    config = LocaleConfig.from_dict({"canonical_locale": "de-DE.json"})

    report = validate_locales(tmp_path, config)

    assert report.canonical == "de-DE.json"
    assert report.file_count == 2


def test_default_directory_comes_from_config(tmp_path: Path, monkeypatch) -> None:
    _write(tmp_path / "src" / "locales", "en.json", {"hello": "Hello"})
    monkeypatch.chdir(tmp_path)

    assert validate_locales().key_count == 1


def test_errors_are_value_errors(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        validate_locales(tmp_path)
    with pytest.raises(LocaleValidationError):
        validate_locales(tmp_path)

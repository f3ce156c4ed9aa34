"""Locale file discovery and loading."""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from pathlib import Path
from typing import Any

from ..errors import InvalidJSON, InvalidStructure, LocaleValidationError, NoLocalesFound
from .placeholders import extract_placeholders
from .structure import flatten_keys, serialize_shape

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadedLocale:
    name: str
    path: Path
    flattened: dict[str, str]
    raw: dict[str, Any]
    shape: str


def discover_locale_files(base_dir: Path, extension: str = ".json") -> list[str]:
    if not base_dir.is_dir():
        raise NoLocalesFound(f"Locale directory not found: {base_dir}")
    names = [
        path.name
        for path in base_dir.iterdir()
        if path.is_file() and path.name.endswith(extension)
    ]
    return sorted(names)


def load_locale(path: Path) -> LoadedLocale:
    name = path.name
    try:
        parsed = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
        raise InvalidJSON(f"{name}: Invalid JSON - {exc}", filename=name) from exc

    try:
        flattened = flatten_keys(parsed)
        shape = serialize_shape(parsed)
        for value in flattened.values():
            extract_placeholders(value)
    except LocaleValidationError as exc:
        raise exc.with_filename(name) from exc
    except RecursionError as exc:
        raise InvalidStructure(f"{name}: Invalid structure: nesting is too deep", filename=name) from exc

    logger.debug("Loaded %s: %s keys", name, len(flattened))
    return LoadedLocale(name=name, path=path, flattened=flattened, raw=parsed, shape=shape)

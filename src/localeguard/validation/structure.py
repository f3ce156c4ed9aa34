"""Flattening and shape description of nested locale documents."""

from __future__ import annotations

import json
from typing import Any

from ..errors import InvalidStructure, InvalidValueType

SHAPE_LEAF = True


def json_type_name(value: Any) -> str:
    if isinstance(value, dict):
        return "object"
    if isinstance(value, list):
        return "array"
    if isinstance(value, str):
        return "string"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if value is None:
        return "null"
    return type(value).__name__


def flatten_keys(document: Any, prefix: str = "") -> dict[str, str]:
    if not isinstance(document, dict):
        raise InvalidStructure(
            f"Invalid structure: expected object, got {json_type_name(document)}"
        )

    flattened: dict[str, str] = {}
    for key, value in document.items():
        path = f"{prefix}.{key}" if prefix else key
        if isinstance(value, dict):
            nested = flatten_keys(value, path)
        elif isinstance(value, str):
            nested = {path: value}
        else:
            raise InvalidValueType(
                f'Key "{path}" has non-string value (found {json_type_name(value)})',
                key=path,
            )
        for nested_path, nested_value in nested.items():
            if nested_path in flattened:
                raise InvalidStructure(f'Key path "{nested_path}" is defined more than once')
            flattened[nested_path] = nested_value
    return flattened


def build_shape(document: Any) -> Any:
    # Keys sorted at every level, leaves collapsed to a sentinel.
    if isinstance(document, dict):
        shape = {}
        for key in sorted(document):
            shape[key] = build_shape(document[key])
        return shape
    return SHAPE_LEAF


def serialize_shape(document: Any) -> str:
    return json.dumps(build_shape(document), separators=(",", ":"))

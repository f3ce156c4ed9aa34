"""Placeholder extraction for ``{{name}}`` interpolation markers."""

from __future__ import annotations

import re

from ..errors import MalformedPlaceholder

PLACEHOLDER_RE = re.compile(r"\{\{(\w+)\}\}", re.ASCII)
OPEN_MARKER = "{{"
CLOSE_MARKER = "}}"


def extract_placeholders(value: str) -> set[str]:
    names = {match.group(1) for match in PLACEHOLDER_RE.finditer(value)}

    open_count = value.count(OPEN_MARKER)
    close_count = value.count(CLOSE_MARKER)
    if open_count != close_count:
        raise MalformedPlaceholder(value)
    # Repeated names also land here: "{{name}} {{name}}" has one name, two markers.
    if open_count > 0 and len(names) < open_count:
        raise MalformedPlaceholder(value)
    return names

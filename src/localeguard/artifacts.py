"""Generated artifacts: translation key enumeration and per-locale exports."""

from __future__ import annotations

from dataclasses import dataclass
import json
import keyword
import logging
from pathlib import Path
import re
from typing import Any, Mapping, Protocol

from .config import LocaleConfig
from .validation import ValidationReport, flatten_keys, validate_locales

logger = logging.getLogger(__name__)

_NAME_SPLIT_RE = re.compile(r"[-_.\s]+")
_HEADER = "Generated by localeguard from {source}. Do not edit."

# Reserved in strict-mode ES modules, so unusable as `export const` names.
TS_RESERVED_WORDS = frozenset(
    {
        "arguments", "await", "break", "case", "catch", "class", "const", "continue",
        "debugger", "default", "delete", "do", "else", "enum", "eval", "export",
        "extends", "false", "finally", "for", "function", "if", "implements", "import",
        "in", "instanceof", "interface", "let", "new", "null", "package", "private",
        "protected", "public", "return", "static", "super", "switch", "this", "throw",
        "true", "try", "typeof", "var", "void", "while", "with", "yield",
    }
)


@dataclass(frozen=True)
class GeneratedArtifacts:
    keys_path: Path
    exports_path: Path
    key_count: int
    report: ValidationReport


class ArtifactRenderer(Protocol):
    name: str

    def render_keys(self, keys: list[str], source: str) -> str:
        ...

    def render_exports(self, locales: Mapping[str, Mapping[str, Any]], source: str) -> str:
        ...


class PythonRenderer:
    name = "python"

    def render_keys(self, keys: list[str], source: str) -> str:
        _require_keys(keys)
        literals = [json.dumps(key, ensure_ascii=False) for key in keys]
        lines = [f'"""{_HEADER.format(source=source)}"""', ""]
        lines.append("from typing import Literal")
        lines.append("")
        lines.append("TranslationKey = Literal[")
        lines.extend(f"    {literal}," for literal in literals)
        lines.append("]")
        lines.append("")
        lines.append("TRANSLATION_KEYS: tuple[TranslationKey, ...] = (")
        lines.extend(f"    {literal}," for literal in literals)
        lines.append(")")
        return "\n".join(lines) + "\n"

    def render_exports(self, locales: Mapping[str, Mapping[str, Any]], source: str) -> str:
        names = export_names(locales)
        lines = [f'"""{_HEADER.format(source=source)}"""', ""]
        # JSON objects of strings are valid Python literals.
        for filename, name in names.items():
            body = json.dumps(locales[filename], ensure_ascii=False, indent=4)
            lines.append(f"{name} = {body}")
            lines.append("")
        lines.append("LOCALES = {")
        for filename, name in names.items():
            lines.append(f"    {json.dumps(Path(filename).stem)}: {name},")
        lines.append("}")
        return "\n".join(lines) + "\n"


class TypeScriptRenderer:
    name = "typescript"

    def render_keys(self, keys: list[str], source: str) -> str:
        _require_keys(keys)
        literals = [json.dumps(key, ensure_ascii=False) for key in keys]
        union = "\n".join(f"  | {literal}" for literal in literals)
        items = ",\n".join(f"  {literal}" for literal in literals)
        return (
            f"// {_HEADER.format(source=source)}\n\n"
            f"export type TranslationKey =\n{union};\n\n"
            f"export const translationKeys = [\n{items}\n"
            "] as const satisfies readonly TranslationKey[];\n"
        )

    def render_exports(self, locales: Mapping[str, Mapping[str, Any]], source: str) -> str:
        names = export_names(locales, TS_RESERVED_WORDS)
        lines = [f"// {_HEADER.format(source=source)}", ""]
        for filename, name in names.items():
            body = json.dumps(locales[filename], ensure_ascii=False, indent=2)
            lines.append(f"export const {name} = {body} as const;")
            lines.append("")
        return "\n".join(lines)


_RENDERERS: dict[str, ArtifactRenderer] = {
    "python": PythonRenderer(),
    "typescript": TypeScriptRenderer(),
}


def get_artifact_renderer(name: str) -> ArtifactRenderer:
    key = (name or "").strip().lower()
    renderer = _RENDERERS.get(key)
    if renderer is None:
        supported = ", ".join(sorted(_RENDERERS.keys()))
        raise ValueError(f"Unsupported artifact format '{name}'. Supported: {supported}")
    return renderer


def collect_translation_keys(document: Mapping[str, Any]) -> list[str]:
    return sorted(flatten_keys(document))


def export_name(filename: str, reserved: frozenset[str] = frozenset()) -> str:
    """Identifier used for a locale file in generated exports.

    ``en.json`` -> ``en``, ``de-DE.json`` -> ``deDE``, ``pt_BR.json`` -> ``ptBR``.
    """
    parts = [part for part in _NAME_SPLIT_RE.split(Path(filename).stem) if part]
    if not parts:
        raise ValueError(f"Cannot derive export name from {filename!r}")
    name = parts[0] + "".join(part[:1].upper() + part[1:] for part in parts[1:])
    if not name.isidentifier() or keyword.iskeyword(name) or name in reserved:
        raise ValueError(f"Locale file {filename!r} does not map to a valid identifier ({name!r})")
    return name


def export_names(
    locales: Mapping[str, Any], reserved: frozenset[str] = frozenset()
) -> dict[str, str]:
    names: dict[str, str] = {}
    seen: dict[str, str] = {}
    for filename in sorted(locales):
        name = export_name(filename, reserved)
        if name in seen:
            raise ValueError(f"Locale files {seen[name]} and {filename} both export as {name!r}")
        seen[name] = filename
        names[filename] = name
    return names


def generate_artifacts(config: LocaleConfig, project_root: Path) -> GeneratedArtifacts:
    config.validate()
    resolved = config.resolve(project_root)
    renderer = get_artifact_renderer(resolved.artifact_format)

    # Artifacts are only written for a locale set that validates.
    report = validate_locales(resolved.locales_dir, resolved)

    locales = report.documents
    keys = collect_translation_keys(locales[report.canonical])
    source = _display_path(resolved.locales_dir, project_root)

    _write(resolved.keys_output, renderer.render_keys(keys, source))
    logger.info("Translation keys written: %s (%s keys)", resolved.keys_output, len(keys))
    _write(resolved.exports_output, renderer.render_exports(locales, source))
    logger.info("Locale exports written: %s (%s locales)", resolved.exports_output, len(locales))

    return GeneratedArtifacts(
        keys_path=resolved.keys_output,
        exports_path=resolved.exports_output,
        key_count=len(keys),
        report=report,
    )


def _require_keys(keys: list[str]) -> None:
    if not keys:
        raise ValueError("Canonical locale has no translation keys")


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def _display_path(path: Path, project_root: Path) -> str:
    try:
        return path.relative_to(project_root).as_posix()
    except ValueError:
        return path.as_posix()

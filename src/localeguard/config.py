from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path


ARTIFACT_FORMATS = {"python", "typescript"}


@dataclass(frozen=True)
class LocaleConfig:
    locales_dir: Path
    canonical_locale: str
    extension: str
    artifact_format: str
    keys_output: Path
    exports_output: Path

    @staticmethod
    def default_path(project_root: Path) -> Path:
        return project_root / "localeguard.json"

    @staticmethod
    def load_default(project_root: Path) -> "LocaleConfig":
        return LocaleConfig.load(project_root)

    @staticmethod
    def load(
        project_root: Path,
        path: Path | None = None,
        overrides: dict | None = None,
    ) -> "LocaleConfig":
        # An explicit path must exist; the project default is optional.
        data: dict = {}
        if path is not None:
            data = _read_json(path)
        else:
            default = LocaleConfig.default_path(project_root)
            if default.exists():
                data = _read_json(default)
        data.update(overrides or {})
        return LocaleConfig.from_dict(data)

    @staticmethod
    def from_json(path: Path) -> "LocaleConfig":
        return LocaleConfig.from_dict(_read_json(path))

    @staticmethod
    def from_dict(data: dict) -> "LocaleConfig":
        artifact_format = str(data.get("artifact_format", "python")).lower()
        default_suffix = ".ts" if artifact_format == "typescript" else ".py"
        return LocaleConfig(
            locales_dir=Path(data.get("locales_dir", "src/locales")),
            canonical_locale=str(data.get("canonical_locale", "en.json")),
            extension=str(data.get("extension", ".json")),
            artifact_format=artifact_format,
            keys_output=Path(
                data.get("keys_output", f"src/generated/translation_keys{default_suffix}")
            ),
            exports_output=Path(data.get("exports_output", f"src/generated/locales{default_suffix}")),
        )

    def resolve(self, project_root: Path) -> "LocaleConfig":
        return replace(
            self,
            locales_dir=_resolve(project_root, self.locales_dir),
            keys_output=_resolve(project_root, self.keys_output),
            exports_output=_resolve(project_root, self.exports_output),
        )

    def validate(self) -> None:
        if not self.extension.startswith(".") or len(self.extension) < 2:
            raise ValueError('extension must start with "." and name a suffix')
        if not self.canonical_locale:
            raise ValueError("canonical_locale must not be empty")
        if not self.canonical_locale.endswith(self.extension):
            raise ValueError("canonical_locale must end with extension")
        if Path(self.canonical_locale).name != self.canonical_locale:
            raise ValueError("canonical_locale must be a file name, not a path")
        if self.artifact_format not in ARTIFACT_FORMATS:
            raise ValueError("artifact_format must be python or typescript")
        if self.keys_output == self.exports_output:
            raise ValueError("keys_output and exports_output must differ")


def _resolve(project_root: Path, path: Path) -> Path:
    if path.is_absolute():
        return path
    return project_root / path


def _read_json(path: Path) -> dict:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a JSON object: {path}")
    return data

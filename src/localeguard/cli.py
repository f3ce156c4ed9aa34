from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from .artifacts import generate_artifacts
from .config import LocaleConfig
from .errors import LocaleValidationError
from .validation import validate_locales


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    project_root = Path.cwd()
    try:
        config = _load_config(args, project_root)
    except (OSError, ValueError) as exc:
        print(f"Invalid config: {exc}", file=sys.stderr)
        return 1

    if args.command == "validate":
        return _run_validate(args, config, project_root)
    return _run_generate(args, config, project_root)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="localeguard",
        description="Validate locale JSON files against the canonical locale.",
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to localeguard.json config",
    )
    common.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)

    validate = commands.add_parser("validate", parents=[common], help="Check locale files")
    validate.add_argument(
        "locales_dir",
        type=Path,
        nargs="?",
        default=None,
        help="Directory with locale files (default: src/locales)",
    )
    validate.add_argument("--canonical", default=None, help="Canonical locale file name")

    generate = commands.add_parser(
        "generate", parents=[common], help="Validate, then write translation keys and locale exports"
    )
    generate.add_argument("--format", dest="artifact_format", choices=["python", "typescript"], default=None)
    generate.add_argument("--keys-output", type=Path, default=None, help="Translation keys output path")
    generate.add_argument("--exports-output", type=Path, default=None, help="Locale exports output path")
    return parser


def _load_config(args: argparse.Namespace, project_root: Path) -> LocaleConfig:
    overrides: dict = {}
    if getattr(args, "canonical", None):
        overrides["canonical_locale"] = args.canonical
    if getattr(args, "artifact_format", None):
        overrides["artifact_format"] = args.artifact_format
    if getattr(args, "keys_output", None) is not None:
        overrides["keys_output"] = args.keys_output
    if getattr(args, "exports_output", None) is not None:
        overrides["exports_output"] = args.exports_output
    config = LocaleConfig.load(project_root, args.config, overrides)
    config.validate()
    return config


def _run_validate(args: argparse.Namespace, config: LocaleConfig, project_root: Path) -> int:
    base_dir = args.locales_dir or config.resolve(project_root).locales_dir
    try:
        report = validate_locales(base_dir, config)
    except (LocaleValidationError, OSError) as exc:
        print(f"Validation failed: {exc}", file=sys.stderr)
        return 1
    for line in report.summary_lines():
        print(line)
    return 0


def _run_generate(args: argparse.Namespace, config: LocaleConfig, project_root: Path) -> int:
    try:
        artifacts = generate_artifacts(config, project_root)
    except (OSError, ValueError) as exc:
        print(f"Generation failed: {exc}", file=sys.stderr)
        return 1
    print(f"✓ Generated translation keys: {artifacts.key_count} keys")
    print(f"✓ Wrote {artifacts.keys_path}")
    print(f"✓ Wrote {artifacts.exports_path}")
    return 0


def _configure_logging(verbose: bool) -> None:
    if not logging.getLogger().handlers:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


if __name__ == "__main__":
    raise SystemExit(main())

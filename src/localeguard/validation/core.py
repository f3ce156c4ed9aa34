from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path

from ..config import LocaleConfig
from ..errors import CanonicalMissing, NoLocalesFound
from .compare import compare_locale
from .loader import LoadedLocale, discover_locale_files, load_locale

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationReport:
    canonical: str
    files: tuple[str, ...]
    key_count: int
    documents: dict[str, dict] = field(default_factory=dict, repr=False, compare=False)

    @property
    def file_count(self) -> int:
        return len(self.files)

    def summary_lines(self) -> list[str]:
        return [
            f"✓ Validated {self.file_count} locale file(s)",
            f"✓ All locales have {self.key_count} keys matching canonical",
        ]


def validate_locales(
    base_dir: Path | str | None = None,
    config: LocaleConfig | None = None,
) -> ValidationReport:
    # 主流程：发现文件 -> 逐个加载 -> 与基准语言逐个比较
    config = config or LocaleConfig.from_dict({})
    config.validate()
    locales_dir = Path(base_dir) if base_dir is not None else config.locales_dir
    canonical_name = config.canonical_locale

    # 1) 发现候选文件，基准文件必须存在
    files = discover_locale_files(locales_dir, config.extension)
    if not files:
        raise NoLocalesFound(f"No locale files found in {locales_dir}")
    if canonical_name not in files:
        raise CanonicalMissing(f"Canonical locale file {canonical_name} not found")
    logger.info("Locale files: %s", ", ".join(files))

    # 2) 加载全部文件；任一文件失败即终止
    locales: dict[str, LoadedLocale] = {}
    for name in files:
        locales[name] = load_locale(locales_dir / name)

    # 3) 与基准语言比较（键缺失/多余、嵌套形状、占位符）
    canonical = locales[canonical_name]
    for name, locale in locales.items():
        if name == canonical_name:
            continue
        compare_locale(canonical, locale)
        logger.debug("Locale %s matches %s", name, canonical_name)

    report = ValidationReport(
        canonical=canonical_name,
        files=tuple(files),
        key_count=len(canonical.flattened),
        documents={name: locale.raw for name, locale in locales.items()},
    )
    logger.info(
        "Validated %s locale file(s) against %s: %s keys",
        report.file_count,
        canonical_name,
        report.key_count,
    )
    return report

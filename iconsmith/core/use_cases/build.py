"""
Build use case — the full icon build, stage by stage.

    generate   → make sure the SVG source directory exists
    components → regenerate one component per SVG
    format     → run the formatter over the components

Stages run in order; the first failure stops the build and the
remaining stages are recorded as skipped. Domain failures (config,
preconditions, tools, transformer) land in ``BuildResult.error``;
OS-level I/O errors propagate to the caller.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from iconsmith.adapters.base import Adapter
from iconsmith.core.config.loader import ConfigError, find_config_file, load_config, project_root
from iconsmith.core.context import get_config_path
from iconsmith.core.models.action import Receipt
from iconsmith.core.models.asset import TransformReport
from iconsmith.core.models.config import IconsmithConfig, ProjectPaths
from iconsmith.core.services.directories import PreconditionError
from iconsmith.core.services.pipeline import build_components
from iconsmith.core.services.tools import ToolError, ensure_source_assets, format_components
from iconsmith.core.services.transformers.base import ContentTransformer, TransformError

logger = logging.getLogger(__name__)

STAGES: tuple[tuple[str, str], ...] = (
    ("generate", "Generate SVG icons"),
    ("components", "Transform to components"),
    ("format", "Format components"),
)

_DOMAIN_ERRORS = (PreconditionError, ToolError, TransformError)


@dataclass
class StageResult:
    """Result of executing one build stage."""

    name: str
    label: str
    status: str = "pending"             # "pending" | "done" | "skipped" | "error"
    duration_ms: int = 0
    error: str = ""
    detail: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        result = {
            "name": self.name,
            "label": self.label,
            "status": self.status,
            "duration_ms": self.duration_ms,
        }
        if self.error:
            result["error"] = self.error
        if self.detail:
            result["detail"] = self.detail
        return result


@dataclass
class BuildResult:
    """Result of a build run."""

    config: IconsmithConfig | None = None
    paths: ProjectPaths | None = None
    stages: list[StageResult] = field(default_factory=list)
    report: TransformReport | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def stage(self, name: str) -> StageResult | None:
        for s in self.stages:
            if s.name == name:
                return s
        return None

    def to_dict(self) -> dict:
        result: dict = {"ok": self.ok}
        if self.error:
            result["error"] = self.error
        if self.paths:
            result["project_root"] = str(self.paths.root)
        result["stages"] = [s.to_dict() for s in self.stages]
        if self.report:
            result["components"] = self.report.to_dict()
        return result


def load_project(config_path: Path | None = None) -> tuple[IconsmithConfig, ProjectPaths]:
    """Load config and resolve paths.

    Resolution order for the config file: explicit argument, the one
    registered in the process context, then a search upward from cwd.

    Raises:
        ConfigError: the config file is invalid or unreadable.
    """
    if config_path is None:
        config_path = get_config_path() or find_config_file()
    config = load_config(config_path)
    return config, config.resolve_paths(project_root(config_path))


def default_adapter(mock: bool = False) -> Adapter:
    """The process runner used when the caller does not supply one."""
    if mock:
        from iconsmith.adapters.mock import MockAdapter

        return MockAdapter()
    from iconsmith.adapters.shell.process import ProcessAdapter

    return ProcessAdapter()


def default_transformer() -> ContentTransformer:
    from iconsmith.core.services.transformers.svg_component import SvgComponentTransformer

    return SvgComponentTransformer()


def run_build(
    config_path: Path | None = None,
    adapter: Adapter | None = None,
    transformer: ContentTransformer | None = None,
    skip_generate: bool = False,
    skip_format: bool = False,
    only: set[str] | None = None,
    dry_run: bool = False,
) -> BuildResult:
    """Run the build stages.

    Args:
        config_path: Optional explicit path to iconsmith.yml.
        adapter: Process runner for generator/formatter (default: real processes).
        transformer: Content transformer (default: SvgComponentTransformer).
        skip_generate: Do not run the generator stage.
        skip_format: Do not run the formatter stage.
        only: Restrict the run to these stage names.
        dry_run: Report the generator/formatter commands without running
            them. The components stage writes files, so it is skipped.

    Returns:
        BuildResult with per-stage outcomes.
    """
    result = BuildResult()

    try:
        config, paths = load_project(config_path)
    except ConfigError as e:
        result.error = str(e)
        return result

    result.config = config
    result.paths = paths
    adapter = adapter or default_adapter()
    transformer = transformer or default_transformer()

    def _tool_stage(stage: StageResult, receipt: Receipt | None) -> None:
        stage.status = "done" if receipt is not None and receipt.ok else "skipped"
        if receipt is not None and not receipt.ok:
            stage.detail = {"dry_run": receipt.output}

    def _generate(stage: StageResult) -> None:
        _tool_stage(stage, ensure_source_assets(paths, config.generator, adapter, dry_run))

    def _components(stage: StageResult) -> None:
        report = build_components(
            paths.source_dir,
            paths.components_dir,
            transformer,
            options=config.transform,
            extension=config.component_extension,
        )
        result.report = report
        stage.status = "skipped" if report.skipped else "done"
        stage.detail = {"transformed": len(report.artifacts), "written": report.written}

    def _format(stage: StageResult) -> None:
        _tool_stage(stage, format_components(paths, config.formatter, adapter, dry_run))

    runners: dict[str, Callable[[StageResult], None]] = {
        "generate": _generate,
        "components": _components,
        "format": _format,
    }
    disabled = set()
    if skip_generate:
        disabled.add("generate")
    if skip_format:
        disabled.add("format")
    if dry_run:
        disabled.add("components")
    if only is not None:
        disabled |= {name for name, _ in STAGES if name not in only}

    for name, label in STAGES:
        stage = StageResult(name=name, label=label)
        result.stages.append(stage)

        if result.error is not None or name in disabled:
            stage.status = "skipped"
            continue

        start = time.monotonic()
        try:
            runners[name](stage)
        except _DOMAIN_ERRORS as e:
            stage.status = "error"
            stage.error = str(e)
            result.error = str(e)
            logger.debug("%s failed", label, exc_info=True)
        finally:
            stage.duration_ms = int((time.monotonic() - start) * 1000)

    return result

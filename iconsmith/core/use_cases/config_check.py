"""
Config check use case — validate iconsmith.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from iconsmith.core.config.loader import ConfigError, find_config_file, load_config, project_root
from iconsmith.core.context import get_config_path
from iconsmith.core.models.asset import PathState
from iconsmith.core.models.config import IconsmithConfig, ProjectPaths
from iconsmith.core.services.directories import detect_path_state


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    config: IconsmithConfig | None = None
    config_path: Path | None = None
    paths: ProjectPaths | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "name": self.config.name if self.config else None,
            "source_dir": str(self.paths.source_dir) if self.paths else None,
            "components_dir": str(self.paths.components_dir) if self.paths else None,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate configuration and the state of the paths it names."""
    result = ConfigCheckResult()

    if config_path is None:
        config_path = get_config_path() or find_config_file()
    result.config_path = config_path

    try:
        config = load_config(config_path)
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    result.config = config
    paths = config.resolve_paths(project_root(config_path))
    result.paths = paths

    if config_path is None:
        result.warnings.append("No iconsmith.yml found; using defaults.")

    # Source directory
    source = paths.relative(paths.source_dir)
    source_state = detect_path_state(paths.source_dir)
    if source_state is PathState.FILE:
        result.errors.append(f"source_dir '{source}' exists but is not a directory.")
    elif source_state is PathState.MISSING:
        if config.generator.active:
            result.warnings.append(f"source_dir '{source}' does not exist yet; the generator will create it.")
        else:
            result.errors.append(f"source_dir '{source}' does not exist and the generator is disabled.")

    # Components directory
    components = paths.relative(paths.components_dir)
    if detect_path_state(paths.components_dir) is PathState.FILE:
        result.errors.append(f"components_dir '{components}' exists but is not a directory.")

    if paths.components_dir.resolve() == paths.source_dir.resolve():
        result.errors.append("components_dir must differ from source_dir; it is wiped on every build.")
    elif paths.source_dir.resolve().is_relative_to(paths.components_dir.resolve()):
        result.errors.append("source_dir must not live inside components_dir; it is wiped on every build.")

    if not config.formatter.active:
        result.warnings.append("Formatter disabled; generated components will not be formatted.")

    result.valid = len(result.errors) == 0
    return result

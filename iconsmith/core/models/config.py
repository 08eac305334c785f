"""
Project configuration model — loaded from iconsmith.yml.

Every key is optional. A project without a config file gets the
defaults below, rooted at the current working directory.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

JSX_PLUGIN = "@svgr/plugin-jsx"


class TransformOptions(BaseModel):
    """Options handed to the content transformer for every icon."""

    model_config = ConfigDict(extra="forbid")

    icon: bool = True
    typescript: bool = True
    jsx_runtime: Literal["automatic", "classic"] = "automatic"
    prettier: bool = False
    plugins: list[str] = Field(default_factory=lambda: [JSX_PLUGIN])


class ToolCommand(BaseModel):
    """An external tool invocation (argv template).

    Placeholders ``{source_dir}`` and ``{components_dir}`` expand to
    paths relative to the project root.
    """

    model_config = ConfigDict(extra="forbid")

    command: list[str] = Field(default_factory=list)
    enabled: bool = True

    @property
    def active(self) -> bool:
        return self.enabled and bool(self.command)

    def render(self, paths: ProjectPaths) -> list[str]:
        """Expand placeholders against the resolved project paths."""
        values = {
            "{source_dir}": paths.relative(paths.source_dir),
            "{components_dir}": paths.relative(paths.components_dir),
        }
        rendered = []
        for part in self.command:
            # Other braces (shell-style globs like *.{ts,tsx}) pass through
            for placeholder, value in values.items():
                part = part.replace(placeholder, value)
            rendered.append(part)
        return rendered


class BrowserConfig(BaseModel):
    """Static browsing page settings."""

    model_config = ConfigDict(extra="forbid")

    output: str = "dist/index.html"
    title: str = "SF Symbols Browser"
    eyebrow: str = "SF Symbols"
    default_icon_size: int = Field(default=72, ge=32, le=144)


class IconsmithConfig(BaseModel):
    """Root configuration for one icon project."""

    model_config = ConfigDict(extra="forbid")

    version: Literal[1] = 1          # config file schema version
    name: str = "icons"

    source_dir: str = "src/sf-symbols"
    components_dir: str = "dist/components"
    component_extension: str = "tsx"

    browser: BrowserConfig = Field(default_factory=BrowserConfig)
    generator: ToolCommand = Field(
        default_factory=lambda: ToolCommand(
            command=["yarn", "sf-symbols-svg", "-o", "{source_dir}"],
        )
    )
    formatter: ToolCommand = Field(
        default_factory=lambda: ToolCommand(
            command=["yarn", "prettier", "--write", "{components_dir}"],
        )
    )
    transform: TransformOptions = Field(default_factory=TransformOptions)

    @field_validator("component_extension")
    @classmethod
    def validate_component_extension(cls, value: str) -> str:
        value = value.lstrip(".")
        if not re.fullmatch(r"[A-Za-z0-9]+", value):
            raise ValueError("component_extension must be alphanumeric, e.g. 'tsx'")
        return value

    def resolve_paths(self, root: Path) -> ProjectPaths:
        """Resolve configured paths against the project root."""
        root = root.resolve()
        return ProjectPaths(
            root=root,
            source_dir=root / self.source_dir,
            components_dir=root / self.components_dir,
            browser_output=root / self.browser.output,
        )


@dataclass(frozen=True)
class ProjectPaths:
    """Absolute paths for one project, plus display helpers."""

    root: Path
    source_dir: Path
    components_dir: Path
    browser_output: Path

    def relative(self, target: Path) -> str:
        """``target`` relative to the project root, for messages and argv."""
        return os.path.relpath(target, self.root)

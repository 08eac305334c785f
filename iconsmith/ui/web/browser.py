"""
Icon browser — one self-contained HTML page listing every icon.

The page embeds the sorted file names as JSON and references the SVG
files by a relative URL, so it can be opened straight from disk or
served by ``iconsmith serve``.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from jinja2 import Environment, PackageLoader, select_autoescape

from iconsmith.core.models.config import BrowserConfig, ProjectPaths
from iconsmith.core.services.directories import PreconditionError, require_directory
from iconsmith.core.services.discovery import list_icon_names

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "browser.html"

_env = Environment(
    loader=PackageLoader("iconsmith.ui.web", "templates"),
    autoescape=select_autoescape(["html"]),
    keep_trailing_newline=True,
)


@dataclass
class BrowserResult:
    """What was written."""

    output: Path
    icon_count: int

    def to_dict(self) -> dict:
        return {"output": str(self.output), "icon_count": self.icon_count}


def safe_json(value: object) -> str:
    """JSON that can sit inside a <script> element."""
    return json.dumps(value).replace("<", "\\u003c")


def icon_url_prefix(output: Path, source_dir: Path) -> str:
    """Relative URL from the page's directory to the SVG directory."""
    rel = os.path.relpath(source_dir, output.parent).replace(os.sep, "/")
    return rel if rel.endswith("/") else f"{rel}/"


def render_browser(
    icon_names: list[str],
    icon_prefix: str,
    settings: BrowserConfig | None = None,
    source_label: str = "",
) -> str:
    """Render the browser page for ``icon_names`` (already sorted)."""
    settings = settings or BrowserConfig()
    template = _env.get_template(TEMPLATE_NAME)
    return template.render(
        title=settings.title,
        eyebrow=settings.eyebrow,
        icon_size=settings.default_icon_size,
        icon_count=f"{len(icon_names):,}",
        source_label=source_label,
        icons_json=safe_json(icon_names),
        icon_prefix_json=safe_json(icon_prefix),
    )


def load_icon_names(paths: ProjectPaths) -> list[str]:
    """Sorted icon file names; fails when there are none.

    Raises:
        PreconditionError: the source directory is missing or empty.
    """
    source = paths.relative(paths.source_dir)
    require_directory(paths.source_dir, f"SVG icon directory not found at {source}.")

    names = list_icon_names(paths.source_dir)
    if not names:
        raise PreconditionError(f"No icons found in {source}", path=paths.source_dir)
    return names


def write_browser_page(
    paths: ProjectPaths,
    settings: BrowserConfig | None = None,
    output: Path | None = None,
) -> BrowserResult:
    """Render and write the browser page.

    Args:
        paths: Resolved project paths.
        settings: Page settings (title, default icon size, ...).
        output: Override for the output file (default: paths.browser_output).
    """
    output = (output or paths.browser_output).resolve()
    names = load_icon_names(paths)

    html = render_browser(
        names,
        icon_url_prefix(output, paths.source_dir),
        settings,
        source_label=paths.relative(paths.source_dir),
    )

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")

    logger.info("Wrote icon browser for %d icon(s) -> %s", len(names), paths.relative(output))
    return BrowserResult(output=output, icon_count=len(names))

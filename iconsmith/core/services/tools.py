"""
External tool stages — the icon generator and the code formatter.

Both are plain subprocesses run through an Adapter:

    generator  populates the source directory; only runs when that
               directory does not exist at all
    formatter  rewrites the generated components in place; skipped
               when the components directory is absent

A non-zero exit from either is fatal (ToolError). Nothing is retried.
"""

from __future__ import annotations

import logging

from iconsmith.adapters.base import Adapter
from iconsmith.core.models.action import Action, Receipt
from iconsmith.core.models.asset import PathState
from iconsmith.core.models.config import ProjectPaths, ToolCommand
from iconsmith.core.services.directories import PreconditionError, detect_path_state

logger = logging.getLogger(__name__)


class ToolError(RuntimeError):
    """An external tool exited unsuccessfully."""

    def __init__(self, message: str, receipt: Receipt | None = None):
        super().__init__(message)
        self.receipt = receipt


def _run_tool(
    action_id: str,
    label: str,
    tool: ToolCommand,
    paths: ProjectPaths,
    adapter: Adapter,
    dry_run: bool = False,
) -> Receipt:
    action = Action(
        id=action_id,
        name=label,
        command=tool.render(paths),
        cwd=str(paths.root),
    )
    receipt = adapter.run(action, dry_run=dry_run)
    if receipt.failed:
        raise ToolError(f"{label} failed: {receipt.error}", receipt=receipt)
    if receipt.ok:
        logger.debug("%s finished in %dms", label, receipt.duration_ms)
    else:
        logger.info("%s", receipt.output)
    return receipt


def ensure_source_assets(
    paths: ProjectPaths,
    generator: ToolCommand,
    adapter: Adapter,
    dry_run: bool = False,
) -> Receipt | None:
    """Make sure the SVG source directory exists, generating it if absent.

    Returns:
        The generator's Receipt (status ``skipped`` on a dry run), or
        None when the generator was not needed or is disabled.

    Raises:
        PreconditionError: the source path exists but is a file.
        ToolError: the generator exited unsuccessfully.
    """
    source = paths.relative(paths.source_dir)
    state = detect_path_state(paths.source_dir)

    if state is PathState.DIRECTORY:
        logger.info("Skipping SVG generation; directory already exists at %s", source)
        return None

    if state is PathState.FILE:
        raise PreconditionError(
            f"{source} exists but is not a directory. Remove it so icons can be generated.",
            path=paths.source_dir,
        )

    if not generator.active:
        logger.warning("No SVG directory at %s and the generator is disabled.", source)
        return None

    logger.info("Generating SVG icons into %s...", source)
    return _run_tool("generate-icons", "Icon generator", generator, paths, adapter, dry_run)


def format_components(
    paths: ProjectPaths,
    formatter: ToolCommand,
    adapter: Adapter,
    dry_run: bool = False,
) -> Receipt | None:
    """Run the formatter over the components directory.

    Returns:
        The formatter's Receipt (status ``skipped`` on a dry run), or
        None when there was nothing to format or it is disabled.

    Raises:
        ToolError: the formatter exited unsuccessfully.
    """
    components = paths.relative(paths.components_dir)
    state = detect_path_state(paths.components_dir)

    if state is PathState.MISSING:
        logger.info("Skipping formatter; components directory missing at %s.", components)
        return None

    if state is PathState.FILE:
        logger.info("Skipping formatter; %s exists but is not a directory.", components)
        return None

    if not formatter.active:
        logger.info("Skipping formatter; disabled in configuration.")
        return None

    logger.info("Formatting generated components in %s...", components)
    return _run_tool("format-components", "Formatter", formatter, paths, adapter, dry_run)

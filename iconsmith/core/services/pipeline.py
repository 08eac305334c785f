"""
Transform pipeline — SVG directory in, one component file per icon out.

Order of operations for a run:

    1. the source directory must exist as a directory
    2. enumerate *.svg (listing order)
    3. nothing found → log and return; the components directory is
       left as it was
    4. wipe and recreate the components directory
    5. per icon: read → derive name → transform → write <Name>.<ext>

Any failure aborts the run. Files written before the failure stay on
disk; there is no rollback.
"""

from __future__ import annotations

import logging
from pathlib import Path

from iconsmith.core.models.asset import GeneratedArtifact, TransformReport
from iconsmith.core.models.config import TransformOptions
from iconsmith.core.services.directories import rebuild_directory, require_directory
from iconsmith.core.services.discovery import list_source_assets
from iconsmith.core.services.naming import derive_name
from iconsmith.core.services.transformers.base import ContentTransformer

logger = logging.getLogger(__name__)


def build_components(
    source_dir: Path,
    components_dir: Path,
    transformer: ContentTransformer,
    options: TransformOptions | None = None,
    extension: str = "tsx",
) -> TransformReport:
    """Regenerate every component in ``components_dir`` from ``source_dir``.

    Args:
        source_dir: Directory holding the SVG icons (read only).
        components_dir: Output directory, owned by this run.
        transformer: Turns SVG markup into component source.
        options: Transformer options (defaults to the fixed TSX set).
        extension: File extension for generated components.

    Returns:
        TransformReport describing what was written.

    Raises:
        PreconditionError: source is not a directory, or the components
            path is an existing non-directory.
        TransformError: the transformer rejected an icon.
        OSError: any read/write failure.
    """
    options = options or TransformOptions()
    report = TransformReport(source_dir=source_dir, components_dir=components_dir)

    require_directory(
        source_dir,
        f"SVG icon directory not found at {source_dir}. Generation may have failed.",
    )

    assets = list_source_assets(source_dir)
    if not assets:
        logger.info("No SVG icons found in %s; nothing to transform.", source_dir)
        report.skipped = True
        return report

    rebuild_directory(components_dir)

    logger.info("Transforming %d icon(s) with %s...", len(assets), transformer.name)

    written: dict[str, str] = {}
    for asset in assets:
        content = asset.read()
        identifier = derive_name(asset.file_name).final

        source = transformer.transform(content, options, identifier)

        target = components_dir / f"{identifier}.{extension}"
        target.write_text(source, encoding="utf-8")

        if identifier in written:
            # Later file in enumeration order wins
            logger.debug(
                "%s overwrote %s (from %s)", asset.file_name, target.name, written[identifier]
            )
            report.overwritten.append(identifier)
        written[identifier] = asset.file_name

        report.artifacts.append(
            GeneratedArtifact(identifier=identifier, path=target, source=asset.file_name)
        )

    logger.info("Generated %d component(s) in %s.", report.written, components_dir)
    return report

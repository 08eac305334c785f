"""
Source discovery — list the SVG files in a directory.
"""

from __future__ import annotations

import locale
import logging
import os
from pathlib import Path

from iconsmith.core.models.asset import SourceAsset
from iconsmith.core.services.naming import SVG_EXTENSION

logger = logging.getLogger(__name__)


def is_svg_name(file_name: str) -> bool:
    """Whether ``file_name`` carries the SVG extension (any case)."""
    return file_name.lower().endswith(SVG_EXTENSION)


def sort_key(file_name: str) -> tuple[str, str]:
    """Human-friendly ordering: locale collation, case-insensitive first.

    The raw name breaks ties so the order is total and repeatable.
    """
    return (locale.strxfrm(file_name.casefold()), file_name)


def list_source_assets(directory: Path, *, sort: bool = False) -> list[SourceAsset]:
    """Return the regular ``.svg`` files directly inside ``directory``.

    Subdirectories (even ones named ``*.svg``) and other extensions are
    skipped. Without ``sort`` the listing order of the filesystem is
    kept; with ``sort`` names are ordered for display.

    An empty list is a normal result. The caller decides whether that
    is an error.
    """
    assets: list[SourceAsset] = []
    with os.scandir(directory) as entries:
        for entry in entries:
            if entry.is_file() and is_svg_name(entry.name):
                assets.append(SourceAsset(file_name=entry.name, path=Path(entry.path)))

    if sort:
        assets.sort(key=lambda a: sort_key(a.file_name))

    logger.debug("Found %d SVG file(s) in %s", len(assets), directory)
    return assets


def list_icon_names(directory: Path) -> list[str]:
    """Sorted SVG file names, for the browsing page."""
    return [a.file_name for a in list_source_assets(directory, sort=True)]

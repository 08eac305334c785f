"""
Component naming — SVG file name to a safe identifier.

Pure and total: every input yields a non-empty name that starts with
an ASCII letter and contains only ASCII letters and digits, so it is
usable as a type name in TypeScript (and most other languages).

    circle.svg      → CircleIcon
    arrow-up.svg    → ArrowUpIcon
    1-circle.svg    → Icon1Circle
    ___.svg         → IconIcon

Different file names can collapse to the same identifier
(``a-b.svg`` and ``a_b.svg`` both give ``ABIcon``); the pipeline lets
the later file win.
"""

from __future__ import annotations

import re

from iconsmith.core.models.asset import DerivedIdentifier

SVG_EXTENSION = ".svg"
ICON_TOKEN = "Icon"

_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")
_SVG_SUFFIX = re.compile(r"\.svg\Z", re.IGNORECASE)


def strip_svg_extension(file_name: str) -> str:
    """Drop a trailing ``.svg`` (any case)."""
    return _SVG_SUFFIX.sub("", file_name)


def derive_name(file_name: str) -> DerivedIdentifier:
    """Derive the component identifier for an SVG file name."""
    base = strip_svg_extension(file_name)
    parts = [p for p in _SEPARATORS.split(base) if p]
    raw = "".join(p[:1].upper() + p[1:] for p in parts)

    # Segments hold ASCII alphanumerics only, so isalpha() is ASCII here
    if raw and raw[0].isalpha():
        final = f"{raw}{ICON_TOKEN}"
    else:
        final = f"{ICON_TOKEN}{raw or ICON_TOKEN}"
    return DerivedIdentifier(raw=raw, final=final)


def component_name(file_name: str) -> str:
    """Shortcut for ``derive_name(file_name).final``."""
    return derive_name(file_name).final

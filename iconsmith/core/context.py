"""
Project context — which config file this process is working from.

Set ONCE at startup by the CLI (``main.py``) from ``--config`` or the
nearest iconsmith.yml. Use cases fall back to it when they are not
handed an explicit config path.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


_config_path: Optional[Path] = None


def set_config_path(config_path: Optional[Path]) -> None:
    """Register the config file for this process (None: defaults in cwd)."""
    global _config_path
    _config_path = config_path


def get_config_path() -> Optional[Path]:
    """Return the registered config file, or None."""
    return _config_path

"""
Directory state guard and output directory rebuilder.

``detect_path_state`` answers "what is at this path?" with a
three-way ``PathState`` instead of letting callers catch
FileNotFoundError. ``rebuild_directory`` wipes and recreates the
components directory before a fresh batch write.
"""

from __future__ import annotations

import logging
import shutil
import stat
from pathlib import Path

from iconsmith.core.models.asset import PathState

logger = logging.getLogger(__name__)


class PreconditionError(RuntimeError):
    """A path is not in the state an operation requires."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


def detect_path_state(path: Path) -> PathState:
    """Probe ``path`` and classify it.

    Not-found is a normal result (``MISSING``). Anything else that goes
    wrong while probing (permission denied, I/O error) propagates.
    """
    try:
        st = path.stat()
    except FileNotFoundError:
        return PathState.MISSING
    except NotADirectoryError:
        # A parent component is a regular file
        return PathState.MISSING

    if stat.S_ISDIR(st.st_mode):
        return PathState.DIRECTORY
    return PathState.FILE


def require_directory(path: Path, message: str) -> None:
    """Raise PreconditionError with ``message`` unless ``path`` is a directory."""
    if detect_path_state(path) is not PathState.DIRECTORY:
        raise PreconditionError(message, path=path)


def rebuild_directory(path: Path) -> None:
    """Remove ``path`` recursively (if present) and recreate it empty.

    A symlink at ``path`` is removed as a link; whatever it points to
    is left alone and a real directory takes its place.

    Raises:
        PreconditionError: ``path`` exists but is not a directory.
            Nothing is deleted in that case.
    """
    state = detect_path_state(path)

    if state is PathState.FILE:
        raise PreconditionError(
            f"{path} exists but is not a directory; refusing to replace it.",
            path=path,
        )

    if path.is_symlink():
        logger.debug("Replacing symlink %s", path)
        path.unlink()
    elif state is PathState.DIRECTORY:
        logger.debug("Clearing %s", path)
        shutil.rmtree(path)

    path.mkdir(parents=True, exist_ok=True)
    logger.debug("Recreated %s", path)

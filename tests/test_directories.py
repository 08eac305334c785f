"""
Tests for the directory state guard and the output directory rebuilder.
"""

import os

import pytest

from iconsmith.core.models.asset import PathState
from iconsmith.core.services.directories import (
    PreconditionError,
    detect_path_state,
    rebuild_directory,
    require_directory,
)


# ── detect_path_state ──────────────────────────────────────────────


class TestDetectPathState:
    def test_missing(self, tmp_path):
        assert detect_path_state(tmp_path / "nope") is PathState.MISSING

    def test_directory(self, tmp_path):
        assert detect_path_state(tmp_path) is PathState.DIRECTORY

    def test_file(self, tmp_path):
        f = tmp_path / "f.txt"
        f.write_text("x")
        assert detect_path_state(f) is PathState.FILE

    def test_parent_is_file(self, tmp_path):
        f = tmp_path / "f.txt"
        f.write_text("x")
        assert detect_path_state(f / "child") is PathState.MISSING

    def test_symlink_to_directory(self, tmp_path):
        target = tmp_path / "real"
        target.mkdir()
        link = tmp_path / "link"
        link.symlink_to(target)
        assert detect_path_state(link) is PathState.DIRECTORY

    def test_dangling_symlink_is_missing(self, tmp_path):
        link = tmp_path / "dangling"
        link.symlink_to(tmp_path / "gone")
        assert detect_path_state(link) is PathState.MISSING

    @pytest.mark.skipif(
        not hasattr(os, "geteuid") or os.geteuid() == 0,
        reason="root ignores directory permissions",
    )
    def test_permission_error_propagates(self, tmp_path):
        locked = tmp_path / "locked"
        locked.mkdir()
        locked.chmod(0)
        try:
            with pytest.raises(PermissionError):
                detect_path_state(locked / "inner")
        finally:
            locked.chmod(0o755)


class TestRequireDirectory:
    def test_passes_for_directory(self, tmp_path):
        require_directory(tmp_path, "unused")

    def test_missing_raises_with_message(self, tmp_path):
        with pytest.raises(PreconditionError, match="icons are gone") as exc:
            require_directory(tmp_path / "x", "icons are gone")
        assert exc.value.path == tmp_path / "x"

    def test_file_raises(self, tmp_path):
        f = tmp_path / "f"
        f.write_text("")
        with pytest.raises(PreconditionError):
            require_directory(f, "not a dir")


# ── rebuild_directory ──────────────────────────────────────────────


class TestRebuildDirectory:
    def test_creates_missing(self, tmp_path):
        target = tmp_path / "a" / "b" / "c"
        rebuild_directory(target)
        assert target.is_dir()
        assert list(target.iterdir()) == []

    def test_empties_existing(self, tmp_path):
        target = tmp_path / "out"
        (target / "nested" / "deeper").mkdir(parents=True)
        (target / "Stale.tsx").write_text("old")
        (target / "nested" / "deeper" / "x.txt").write_text("old")

        rebuild_directory(target)

        assert target.is_dir()
        assert list(target.iterdir()) == []

    def test_idempotent(self, tmp_path):
        target = tmp_path / "out"
        rebuild_directory(target)
        rebuild_directory(target)
        assert target.is_dir()
        assert list(target.iterdir()) == []

    def test_refuses_file(self, tmp_path):
        target = tmp_path / "out"
        target.write_text("precious")

        with pytest.raises(PreconditionError, match="not a directory"):
            rebuild_directory(target)

        assert target.read_text() == "precious"

    def test_leaves_siblings_alone(self, tmp_path):
        target = tmp_path / "out"
        target.mkdir()
        sibling = tmp_path / "keep.txt"
        sibling.write_text("keep")

        rebuild_directory(target)

        assert sibling.read_text() == "keep"

    def test_symlink_to_directory_replaced(self, tmp_path):
        real = tmp_path / "real"
        real.mkdir()
        (real / "Stale.tsx").write_text("old")
        link = tmp_path / "components"
        link.symlink_to(real)

        rebuild_directory(link)

        assert not link.is_symlink()
        assert link.is_dir()
        assert list(link.iterdir()) == []
        assert (real / "Stale.tsx").read_text() == "old"

    def test_dangling_symlink_replaced(self, tmp_path):
        link = tmp_path / "components"
        link.symlink_to(tmp_path / "gone")

        rebuild_directory(link)

        assert not link.is_symlink()
        assert link.is_dir()

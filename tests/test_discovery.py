"""
Tests for SVG input enumeration.
"""

import pytest

from iconsmith.core.services.discovery import (
    is_svg_name,
    list_icon_names,
    list_source_assets,
    sort_key,
)


class TestIsSvgName:
    @pytest.mark.parametrize("name", ["a.svg", "a.SVG", "a.Svg", ".svg"])
    def test_accepts(self, name):
        assert is_svg_name(name)

    @pytest.mark.parametrize("name", ["a.svgz", "a.png", "svg", "a.svg.bak"])
    def test_rejects(self, name):
        assert not is_svg_name(name)


class TestListSourceAssets:
    def test_filters_extension_and_kind(self, tmp_path):
        (tmp_path / "icon.svg").write_text("<svg/>")
        (tmp_path / "other.SVG").write_text("<svg/>")
        (tmp_path / "readme.txt").write_text("hi")
        sub = tmp_path / "sub"
        sub.mkdir()
        (sub / "icon.svg").write_text("<svg/>")
        (tmp_path / "folder.svg").mkdir()

        assets = list_source_assets(tmp_path)

        assert sorted(a.file_name for a in assets) == ["icon.svg", "other.SVG"]

    def test_paths_point_into_directory(self, tmp_path):
        (tmp_path / "icon.svg").write_text("<svg/>")
        [asset] = list_source_assets(tmp_path)
        assert asset.path == tmp_path / "icon.svg"
        assert asset.read() == "<svg/>"

    def test_empty_directory(self, tmp_path):
        assert list_source_assets(tmp_path) == []

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            list_source_assets(tmp_path / "missing")

    def test_symlinked_file_counts(self, tmp_path):
        real = tmp_path / "real.svg"
        real.write_text("<svg/>")
        src = tmp_path / "src"
        src.mkdir()
        (src / "link.svg").symlink_to(real)

        assert [a.file_name for a in list_source_assets(src)] == ["link.svg"]

    def test_sorted(self, tmp_path):
        for name in ["b.svg", "A.svg", "c.svg"]:
            (tmp_path / name).write_text("<svg/>")

        names = [a.file_name for a in list_source_assets(tmp_path, sort=True)]

        assert names == ["A.svg", "b.svg", "c.svg"]


class TestSortKey:
    def test_case_insensitive(self):
        assert sorted(["b.svg", "A.svg", "a.svg"], key=sort_key)[1:] == ["a.svg", "b.svg"]

    def test_total_order_for_case_variants(self):
        first = sorted(["a.svg", "A.svg"], key=sort_key)
        second = sorted(["A.svg", "a.svg"], key=sort_key)
        assert first == second


class TestListIconNames:
    def test_names_only(self, icon_project):
        names = list_icon_names(icon_project / "src" / "sf-symbols")
        assert names == ["2-circles.svg", "arrow-up.svg"]

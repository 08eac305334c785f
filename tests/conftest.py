"""
Shared test fixtures and configuration.
"""

import logging
from pathlib import Path

import pytest

from iconsmith.adapters.mock import MockAdapter
from iconsmith.core.models.config import IconsmithConfig

SIMPLE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" width="24" height="24">'
    '<path d="M12 4l-8 8h16z" fill-rule="evenodd"/>'
    "</svg>\n"
)


@pytest.fixture
def simple_svg() -> str:
    """A minimal valid SVG document."""
    return SIMPLE_SVG


@pytest.fixture
def icon_project(tmp_path: Path) -> Path:
    """A project root with an SVG source directory holding two icons."""
    source = tmp_path / "src" / "sf-symbols"
    source.mkdir(parents=True)
    (source / "arrow-up.svg").write_text(SIMPLE_SVG)
    (source / "2-circles.svg").write_text(SIMPLE_SVG)
    return tmp_path


@pytest.fixture
def project_paths(icon_project: Path):
    """Resolved default paths for ``icon_project``."""
    return IconsmithConfig().resolve_paths(icon_project)


@pytest.fixture
def mock_adapter() -> MockAdapter:
    """A process runner that records instead of spawning."""
    return MockAdapter()


@pytest.fixture
def write_config():
    """Write an iconsmith.yml into a project root and return its path."""

    def _write(root: Path, text: str = "name: test-icons\n") -> Path:
        path = root / "iconsmith.yml"
        path.write_text(text)
        return path

    return _write


@pytest.fixture(autouse=True)
def _isolate_process_state(monkeypatch):
    """Keep the CLI's process-wide setup from leaking between tests."""
    monkeypatch.setattr("iconsmith.core.context._config_path", None)

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)

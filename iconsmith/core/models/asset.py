"""
Asset models — what flows through the transform pipeline.

A ``SourceAsset`` is one SVG file in the source directory. Its file name
maps to a ``DerivedIdentifier`` (the component name), and each write
produces one ``GeneratedArtifact`` in the components directory.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class PathState(str, Enum):
    """What a filesystem path currently is."""

    MISSING = "missing"
    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class SourceAsset:
    """An input SVG file. Identity is ``file_name`` within its directory."""

    file_name: str
    path: Path

    def read(self) -> str:
        """Full file content as UTF-8 text."""
        return self.path.read_text(encoding="utf-8")


@dataclass(frozen=True)
class DerivedIdentifier:
    """A component name derived from a file name.

    ``raw`` is the capitalised, concatenated file-name segments (may be
    empty). ``final`` always starts with an ASCII letter.
    """

    raw: str
    final: str

    def __str__(self) -> str:
        return self.final


@dataclass(frozen=True)
class GeneratedArtifact:
    """One component file written by the pipeline."""

    identifier: str
    path: Path
    source: str                         # file name of the SourceAsset

    def to_dict(self) -> dict:
        return {
            "identifier": self.identifier,
            "path": str(self.path),
            "source": self.source,
        }


@dataclass
class TransformReport:
    """Outcome of one transform pipeline run."""

    source_dir: Path
    components_dir: Path
    artifacts: list[GeneratedArtifact] = field(default_factory=list)
    overwritten: list[str] = field(default_factory=list)
    skipped: bool = False

    @property
    def written(self) -> int:
        """Number of distinct component files on disk after the run."""
        return len({a.identifier for a in self.artifacts})

    def to_dict(self) -> dict:
        return {
            "source_dir": str(self.source_dir),
            "components_dir": str(self.components_dir),
            "skipped": self.skipped,
            "transformed": len(self.artifacts),
            "written": self.written,
            "overwritten": self.overwritten,
            "artifacts": [a.to_dict() for a in self.artifacts],
        }

"""
Domain models for the icon pipeline.

All models are re-exported here for convenient access:

    from iconsmith.core.models import IconsmithConfig, SourceAsset, Receipt
"""

from iconsmith.core.models.action import Action, Receipt
from iconsmith.core.models.asset import (
    DerivedIdentifier,
    GeneratedArtifact,
    PathState,
    SourceAsset,
    TransformReport,
)
from iconsmith.core.models.config import (
    BrowserConfig,
    IconsmithConfig,
    ProjectPaths,
    ToolCommand,
    TransformOptions,
)

__all__ = [
    # action.py
    "Action",
    "Receipt",
    # asset.py
    "DerivedIdentifier",
    "GeneratedArtifact",
    "PathState",
    "SourceAsset",
    "TransformReport",
    # config.py
    "BrowserConfig",
    "IconsmithConfig",
    "ProjectPaths",
    "ToolCommand",
    "TransformOptions",
]

"""Content transformers — SVG markup to component source."""

from iconsmith.core.services.transformers.base import ContentTransformer, TransformError
from iconsmith.core.services.transformers.svg_component import SvgComponentTransformer

__all__ = [
    "ContentTransformer",
    "SvgComponentTransformer",
    "TransformError",
]

"""
Content transformer interface — SVG markup in, component source out.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from iconsmith.core.models.config import TransformOptions


class TransformError(RuntimeError):
    """The transformer could not turn the markup into a component."""


class ContentTransformer(ABC):
    """Turns one SVG document into the source text of one component.

    Implementations are synchronous and stateless between calls.
    Failures raise TransformError (or let I/O errors propagate);
    the pipeline aborts on the first one.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short transformer identifier, for logs."""

    @abstractmethod
    def transform(
        self,
        svg: str,
        options: TransformOptions,
        component_name: str,
    ) -> str:
        """Return component source for ``svg`` named ``component_name``."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"

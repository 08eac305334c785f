"""Adapters — process runners for the external generator and formatter.

Public re-exports for convenient access.
"""

from iconsmith.adapters.base import Adapter, ExecutionContext
from iconsmith.adapters.mock import MockAdapter
from iconsmith.adapters.shell.process import ProcessAdapter

__all__ = [
    "Adapter",
    "ExecutionContext",
    "MockAdapter",
    "ProcessAdapter",
]

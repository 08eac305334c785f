"""
Action and Receipt models — what goes in and out of a process runner.

An Action is one external command (argv plus working directory). A
Receipt is its outcome. Runners hand failures back inside the Receipt
instead of raising; the caller decides whether a failure is fatal.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

ReceiptStatus = Literal["ok", "skipped", "failed"]


class Action(BaseModel):
    """One external command to run.

    ``command`` is an argv list and never goes through a shell. The
    generator and the formatter both run from the project root.
    """

    id: str                         # stable id, e.g. "generate-icons"
    name: str = ""                  # label for messages
    command: list[str] = Field(default_factory=list)
    cwd: str = "."

    @property
    def executable(self) -> str | None:
        return self.command[0] if self.command else None

    @property
    def display(self) -> str:
        """The command line as a single string, for logs."""
        return " ".join(self.command)


class Receipt(BaseModel):
    """Outcome of running an Action."""

    adapter: str
    action_id: str
    status: ReceiptStatus = "ok"
    return_code: int | None = None
    duration_ms: int = 0

    output: str = ""
    error: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        return self.status == "failed"

    @classmethod
    def success(cls, adapter: str, action_id: str, output: str = "", **kwargs: Any) -> Receipt:
        """The command ran and exited 0."""
        return cls(adapter=adapter, action_id=action_id, output=output, **kwargs)

    @classmethod
    def failure(cls, adapter: str, action_id: str, error: str, **kwargs: Any) -> Receipt:
        """The command could not start, timed out, or exited non-zero."""
        return cls(adapter=adapter, action_id=action_id, status="failed", error=error, **kwargs)

    @classmethod
    def skip(cls, adapter: str, action_id: str, reason: str = "", **kwargs: Any) -> Receipt:
        """The command was deliberately not run (dry run)."""
        return cls(adapter=adapter, action_id=action_id, status="skipped", output=reason, **kwargs)

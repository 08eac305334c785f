"""
Adapter base — the contract between the pipeline and external tools.

The generator and formatter stages never spawn processes themselves;
they build an Action and hand it to an Adapter. Tests swap in the
MockAdapter and inspect what would have run.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel

from iconsmith.core.models.action import Action, Receipt


class ExecutionContext(BaseModel):
    """Everything an adapter needs to execute an action."""

    action: Action

    @property
    def working_dir(self) -> str:
        """Directory the command runs in."""
        return self.action.cwd


class Adapter(ABC):
    """A process runner.

    ``execute`` reports every failure through the returned Receipt and
    never raises; ``run`` adds validation and dry-run handling on top.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The adapter identifier (e.g., 'process', 'mock')."""

    @abstractmethod
    def is_available(self) -> bool:
        """Whether the adapter can run anything at all. Fast, never raises."""

    @abstractmethod
    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        """Check the action can run before anything is spawned.

        Returns ``(ok, message)``; the message is empty when ok.
        """

    @abstractmethod
    def execute(self, context: ExecutionContext) -> Receipt:
        """Execute the action and return a receipt. MUST never raise."""

    def run(self, action: Action, dry_run: bool = False) -> Receipt:
        """Validate then execute ``action``.

        Dry runs stop after validation with a skipped receipt.
        """
        if not self.is_available():
            return Receipt.failure(
                adapter=self.name,
                action_id=action.id,
                error=f"Adapter '{self.name}' is not available",
            )

        context = ExecutionContext(action=action)

        valid, error = self.validate(context)
        if not valid:
            return Receipt.failure(
                adapter=self.name,
                action_id=action.id,
                error=f"Validation failed: {error}",
            )

        if dry_run:
            return Receipt.skip(
                adapter=self.name,
                action_id=action.id,
                reason=f"[dry-run] Would run: {action.display}",
                metadata={"dry_run": True},
            )

        return self.execute(context)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"

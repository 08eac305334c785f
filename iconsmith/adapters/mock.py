"""
Mock adapter — records commands instead of running them.

Used by ``--mock`` on the CLI and by tests. Configurable per action
ID to fail, and optionally runs a side effect (e.g. writing the SVG
files a real generator would have produced).
"""

from __future__ import annotations

from collections.abc import Callable

from iconsmith.adapters.base import Adapter, ExecutionContext
from iconsmith.core.models.action import Action, Receipt


class MockAdapter(Adapter):
    """Universal mock adapter for testing.

    By default, returns success for everything.
    """

    def __init__(
        self,
        adapter_name: str = "mock",
        available: bool = True,
        default_output: str = "[mock] executed",
    ):
        self._name = adapter_name
        self._available = available
        self._default_output = default_output
        self._failures: dict[str, tuple[str, int]] = {}
        self._effects: dict[str, Callable[[Action], None]] = {}
        self._call_log: list[ExecutionContext] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[ExecutionContext]:
        """All execution contexts this mock has received."""
        return self._call_log

    @property
    def call_count(self) -> int:
        """Number of times execute has been called."""
        return len(self._call_log)

    @property
    def commands(self) -> list[list[str]]:
        """argv of every executed action, in order."""
        return [ctx.action.command for ctx in self._call_log]

    def is_available(self) -> bool:
        return self._available

    def set_failure(self, action_id: str, error: str = "Mock failure", return_code: int = 1) -> None:
        """Configure a specific action to fail."""
        self._failures[action_id] = (error, return_code)

    def set_effect(self, action_id: str, effect: Callable[[Action], None]) -> None:
        """Run ``effect(action)`` whenever ``action_id`` executes successfully."""
        self._effects[action_id] = effect

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        if context.action.executable is None:
            return False, "Missing command"
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        self._call_log.append(context)
        action = context.action

        if action.id in self._failures:
            error, return_code = self._failures[action.id]
            return Receipt.failure(
                adapter=self._name,
                action_id=action.id,
                error=error,
                return_code=return_code,
                metadata={"mock": True},
            )

        effect = self._effects.get(action.id)
        if effect is not None:
            effect(action)

        return Receipt.success(
            adapter=self._name,
            action_id=action.id,
            output=self._default_output,
            return_code=0,
            metadata={"mock": True},
        )

    def reset(self) -> None:
        """Clear call log, failures and effects."""
        self._call_log.clear()
        self._failures.clear()
        self._effects.clear()

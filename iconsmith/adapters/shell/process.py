"""
Process adapter — run an external command with the terminal attached.

The generator and the formatter print their own progress, so the
child inherits stdin/stdout/stderr instead of being captured. The
adapter blocks until the process exits.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import time
from pathlib import Path

from iconsmith.adapters.base import Adapter, ExecutionContext
from iconsmith.core.models.action import Receipt

logger = logging.getLogger(__name__)


class ProcessAdapter(Adapter):
    """Run argv commands with inherited standard streams.

    Args:
        timeout: Optional timeout in seconds (default: wait forever).
    """

    def __init__(self, timeout: float | None = None):
        self._timeout = timeout

    @property
    def name(self) -> str:
        return "process"

    def is_available(self) -> bool:
        return True

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        executable = context.action.executable
        if not executable:
            return False, "Missing command"

        if shutil.which(executable) is None:
            return False, f"Executable not found on PATH: {executable}"

        cwd = context.working_dir
        if cwd and not Path(cwd).is_dir():
            return False, f"Working directory does not exist: {cwd}"

        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        action = context.action

        logger.debug("Executing: %s (cwd=%s)", action.display, context.working_dir)
        start = time.monotonic()

        try:
            result = subprocess.run(
                action.command,
                cwd=context.working_dir,
                timeout=self._timeout,
            )
        except subprocess.TimeoutExpired:
            return Receipt.failure(
                adapter=self.name,
                action_id=action.id,
                error=f"Command timed out after {self._timeout}s",
                metadata={"command": action.command},
            )
        except OSError as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=action.id,
                error=f"Command execution error: {e}",
                metadata={"command": action.command},
            )

        elapsed_ms = int((time.monotonic() - start) * 1000)

        if result.returncode == 0:
            return Receipt.success(
                adapter=self.name,
                action_id=action.id,
                duration_ms=elapsed_ms,
                return_code=0,
                metadata={"command": action.command},
            )
        return Receipt.failure(
            adapter=self.name,
            action_id=action.id,
            error=f"{action.display} exited with code {result.returncode}",
            duration_ms=elapsed_ms,
            return_code=result.returncode,
            metadata={"command": action.command},
        )

"""
Tests for the process and mock adapters.

ProcessAdapter tests spawn tiny POSIX commands (true, false, sh).
"""

import shutil

import pytest

from iconsmith.adapters import MockAdapter, ProcessAdapter
from iconsmith.core.models.action import Action, Receipt

posix_only = pytest.mark.skipif(
    shutil.which("sh") is None or shutil.which("true") is None,
    reason="needs a POSIX shell",
)


def _action(tmp_path, *command, action_id="test"):
    return Action(id=action_id, name="test", command=list(command), cwd=str(tmp_path))


# ── Action / Receipt ───────────────────────────────────────────────


class TestModels:
    def test_display(self):
        assert Action(id="a", command=["yarn", "prettier", "--write", "x"]).display == "yarn prettier --write x"

    def test_executable(self):
        assert Action(id="a", command=["prettier", "--write"]).executable == "prettier"
        assert Action(id="a").executable is None

    def test_receipt_helpers(self):
        ok = Receipt.success(adapter="a", action_id="x")
        failed = Receipt.failure(adapter="a", action_id="x", error="boom", return_code=3)
        skipped = Receipt.skip(adapter="a", action_id="x", reason="dry")

        assert ok.ok and not ok.failed
        assert failed.failed and failed.return_code == 3
        assert skipped.status == "skipped" and skipped.output == "dry"


# ── ProcessAdapter ─────────────────────────────────────────────────


@posix_only
class TestProcessAdapter:
    def test_success(self, tmp_path):
        receipt = ProcessAdapter().run(_action(tmp_path, "true"))

        assert receipt.ok
        assert receipt.return_code == 0
        assert receipt.adapter == "process"

    def test_nonzero_exit(self, tmp_path):
        receipt = ProcessAdapter().run(_action(tmp_path, "sh", "-c", "exit 3"))

        assert receipt.failed
        assert receipt.return_code == 3
        assert "exited with code 3" in receipt.error

    def test_runs_in_cwd(self, tmp_path):
        receipt = ProcessAdapter().run(_action(tmp_path, "sh", "-c", "touch marker"))

        assert receipt.ok
        assert (tmp_path / "marker").exists()

    def test_missing_executable(self, tmp_path):
        receipt = ProcessAdapter().run(_action(tmp_path, "definitely-not-a-real-tool-xyz"))

        assert receipt.failed
        assert "Validation failed" in receipt.error
        assert "not found on PATH" in receipt.error

    def test_missing_cwd(self, tmp_path):
        action = Action(id="x", command=["true"], cwd=str(tmp_path / "gone"))
        receipt = ProcessAdapter().run(action)

        assert receipt.failed
        assert "Working directory does not exist" in receipt.error

    def test_empty_command(self, tmp_path):
        receipt = ProcessAdapter().run(_action(tmp_path))
        assert receipt.failed
        assert "Missing command" in receipt.error

    def test_timeout(self, tmp_path):
        receipt = ProcessAdapter(timeout=0.2).run(_action(tmp_path, "sh", "-c", "sleep 5"))

        assert receipt.failed
        assert "timed out" in receipt.error

    def test_dry_run(self, tmp_path):
        receipt = ProcessAdapter().run(_action(tmp_path, "sh", "-c", "touch marker"), dry_run=True)

        assert receipt.status == "skipped"
        assert "Would run" in receipt.output
        assert not (tmp_path / "marker").exists()


# ── MockAdapter ────────────────────────────────────────────────────


class TestMockAdapter:
    def test_records_calls(self, tmp_path):
        mock = MockAdapter()
        mock.run(_action(tmp_path, "yarn", "build"))

        assert mock.call_count == 1
        assert mock.commands == [["yarn", "build"]]

    def test_default_success(self, tmp_path):
        receipt = MockAdapter().run(_action(tmp_path, "x"))
        assert receipt.ok
        assert receipt.output == "[mock] executed"

    def test_configured_failure(self, tmp_path):
        mock = MockAdapter()
        mock.set_failure("boom", error="nope", return_code=7)

        receipt = mock.run(_action(tmp_path, "x", action_id="boom"))

        assert receipt.failed
        assert receipt.error == "nope"
        assert receipt.return_code == 7

    def test_effect_runs(self, tmp_path):
        mock = MockAdapter()
        seen = []
        mock.set_effect("gen", seen.append)

        action = _action(tmp_path, "x", action_id="gen")
        mock.run(action)

        assert seen == [action]

    def test_effect_skipped_on_failure(self, tmp_path):
        mock = MockAdapter()
        seen = []
        mock.set_effect("gen", seen.append)
        mock.set_failure("gen")

        mock.run(_action(tmp_path, "x", action_id="gen"))

        assert seen == []

    def test_empty_command_rejected(self, tmp_path):
        mock = MockAdapter()
        receipt = mock.run(_action(tmp_path))

        assert receipt.failed
        assert mock.call_count == 0

    def test_dry_run_not_recorded(self, tmp_path):
        mock = MockAdapter()
        receipt = mock.run(_action(tmp_path, "x"), dry_run=True)

        assert receipt.status == "skipped"
        assert mock.call_count == 0

    def test_reset(self, tmp_path):
        mock = MockAdapter()
        mock.set_failure("x")
        mock.run(_action(tmp_path, "x", action_id="x"))
        mock.reset()

        assert mock.call_count == 0
        assert mock.run(_action(tmp_path, "x", action_id="x")).ok

    def test_name_and_availability(self):
        mock = MockAdapter(adapter_name="fake", available=False)
        assert mock.name == "fake"
        assert mock.is_available() is False

    def test_unavailable_adapter_refuses(self, tmp_path):
        mock = MockAdapter(available=False)
        receipt = mock.run(_action(tmp_path, "x"))

        assert receipt.failed
        assert "not available" in receipt.error
        assert mock.call_count == 0

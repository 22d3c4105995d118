"""verify_pipeline.pipeline

A single, high-level object representing this repo's one capability: verify a
workspace.

Callers (CLI, CI wrappers, tests) build it via
:func:`verify_pipeline.wiring.build_pipeline` and call :meth:`run`. The plan
and the command runner are injected, so tests substitute a fake runner and a
small plan without touching a real toolchain.
"""

from __future__ import annotations

from typing import Optional

from verify_pipeline.invoke import CommandRunner, InvocationAdapter, subprocess_runner
from verify_pipeline.models import RunLog, RunResult, VerifyPlan
from verify_pipeline.orchestrator import VerificationController
from verify_pipeline.report import ConsoleReporter


class WorkspaceVerifyPipeline:
    """High-level facade over the verification controller."""

    def __init__(
        self,
        plan: VerifyPlan,
        *,
        command: str = "cargo",
        runner: Optional[CommandRunner] = None,
        reporter: Optional[ConsoleReporter] = None,
    ) -> None:
        self.plan = plan
        self.command = command
        self._runner = runner or subprocess_runner()
        self._reporter = reporter
        self.last_log: RunLog = RunLog()

    def run(self) -> RunResult:
        controller = VerificationController(
            self.plan,
            InvocationAdapter(self._runner),
            command=self.command,
            reporter=self._reporter,
        )
        result = controller.run()
        self.last_log = controller.log
        return result

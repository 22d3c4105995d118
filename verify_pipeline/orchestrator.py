"""verify_pipeline.orchestrator

The pipeline controller: drive the plan's stages to completion or to the first
failure.

Control policy
--------------
Stages run top to bottom; within a stage, invocations run in expansion order.
Each step returns a :class:`~verify_pipeline.models.RunResult`. The first
non-zero result is returned immediately, so nothing after it is launched.
Failure is ordinary data here, not an exception.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from verify_pipeline.expand import expand_stage
from verify_pipeline.invoke import InvocationAdapter
from verify_pipeline.models import RunLog, RunResult, VerifyPlan
from verify_pipeline.report import ConsoleReporter

logger = logging.getLogger(__name__)


class VerificationController:
    def __init__(
        self,
        plan: VerifyPlan,
        adapter: InvocationAdapter,
        *,
        command: str = "cargo",
        reporter: Optional[ConsoleReporter] = None,
    ) -> None:
        self.plan = plan
        self.adapter = adapter
        self.command = command
        self.reporter = reporter or ConsoleReporter()
        self.log = RunLog()

    def run(self) -> RunResult:
        """Run every stage in order; return the first failure or a success result."""
        self.log = RunLog()

        for stage in self.plan.stages:
            invocations = expand_stage(stage, self.plan)
            self.reporter.stage_started(stage, len(invocations))

            for inv in invocations:
                self.reporter.invocation_started(inv, [self.command, *inv.args])
                t0 = time.time()
                result = self.adapter.invoke(inv.describe(), self.command, inv.args)
                self.log.record(inv, result.status, time.time() - t0)

                if not result.ok:
                    self.reporter.invocation_failed(inv, result)
                    self.reporter.finished(result, self.log)
                    return result

        logger.debug("all %d invocations passed", len(self.log))
        result = RunResult.success()
        self.reporter.finished(result, self.log)
        return result

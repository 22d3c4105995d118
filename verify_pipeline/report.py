"""verify_pipeline.report

Console diagnostics for a verification run.

All output goes to stderr so the toolchain's own stdout stays clean. The
reporter is a plain object so tests can hand it a ``StringIO``.
"""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from verify_pipeline.models import Invocation, RunLog, RunResult, Stage


class ConsoleReporter:
    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so redirected sys.stderr (tests, CI wrappers) is honoured.
        return self._stream if self._stream is not None else sys.stderr

    def _print(self, *parts: object) -> None:
        print(*parts, file=self.stream, flush=True)

    def stage_started(self, stage: Stage, n_invocations: int) -> None:
        self._print("\n----------------------------------------")
        self._print(f"▶ {stage.label}")
        if n_invocations == 0:
            self._print("  (nothing configured: skipping)")

    def invocation_started(self, invocation: Invocation, cmd: List[str]) -> None:
        if invocation.package or invocation.features:
            self._print(f"  Check   : {invocation.describe()}")
        self._print("  Command :", " ".join(cmd))

    def invocation_failed(self, invocation: Invocation, result: RunResult) -> None:
        self._print(f"\n❌ {invocation.check} failed with exit code {result.status}")
        if invocation.package:
            self._print(f"  Package : {invocation.package}")
        if invocation.target:
            self._print(f"  Target  : {invocation.target}")
        if invocation.features:
            self._print(f"  Features: {', '.join(invocation.features)}")
        if result.detail:
            self._print(f"  Detail  : {result.detail}")

    def finished(self, result: RunResult, log: RunLog) -> None:
        if result.ok:
            self._print(
                f"\n✅ Workspace is clean ({len(log)} checks across {len(log.stages_run)} stages)."
            )
        else:
            self._print(f"\n⚠️ Verification stopped after {len(log)} checks; exiting with {result.status}")

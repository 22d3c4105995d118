"""verify_pipeline.invoke

Invocation adapter: run one external check and turn its outcome into a
:class:`~verify_pipeline.models.RunResult`.

The actual process launch is a capability, :data:`CommandRunner`
(argv -> exit status), so the controller can be exercised with a
deterministic fake instead of a real toolchain.

Only the numeric status matters here. A compile error, a lint violation, a
formatting problem and a missing executable are all just "non-zero".
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from tools.core_cmd import run_cmd
from verify_pipeline.models import RunResult

logger = logging.getLogger(__name__)

CommandRunner = Callable[[List[str]], int]

# Shell convention for "command not found / not executable".
LAUNCH_FAILURE_STATUS = 127


def subprocess_runner(cwd: Optional[Path] = None) -> CommandRunner:
    """Return a runner that executes commands synchronously under ``cwd``."""

    def _run(cmd: List[str]) -> int:
        res = run_cmd(cmd, cwd=cwd)
        logger.debug("%s exited %s after %.1fs", res.command_str, res.exit_code, res.elapsed_seconds)
        return res.exit_code

    return _run


def normalize_status(code: int) -> int:
    """Map a subprocess return code onto a valid process exit status.

    ``subprocess`` reports death-by-signal as ``-N``; the shell reports the
    same thing as ``128 + N``.
    """
    code = int(code)
    if code < 0:
        return 128 + (-code)
    return code


class InvocationAdapter:
    """Runs one command at a time through an injected :data:`CommandRunner`."""

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def invoke(self, stage_name: str, command: str, args: Sequence[str]) -> RunResult:
        cmd = [command, *args]
        try:
            status = normalize_status(self._runner(cmd))
        except OSError as e:
            logger.warning("Could not launch %r for %s: %s", command, stage_name, e)
            return RunResult(stage=stage_name, status=LAUNCH_FAILURE_STATUS, detail=f"launch failed: {e}")
        return RunResult(stage=stage_name, status=status)

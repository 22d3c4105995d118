"""tools/core_cmd.py

Command-execution helpers shared by the verification pipeline.

This module deliberately avoids toolchain-specific knowledge. It provides:

* :func:`which_or_raise` - resolve executables reliably across environments.
* :func:`run_cmd` - run one subprocess (no shell=True) and wait for its exit code.

Output is never captured: the toolchain writes straight to the terminal so
compiler and lint diagnostics stay readable.
"""

from __future__ import annotations

import os
import shutil
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence


@dataclass(frozen=True)
class CmdResult:
    exit_code: int
    elapsed_seconds: float
    command_str: str


def which_or_raise(bin_name: str, fallbacks: Optional[List[str]] = None) -> str:
    """Locate an executable and return its absolute path.

    Paths that point at an executable file (``VERIFY_CARGO=bin/cargo``) are
    resolved against the current directory, so the result stays valid when
    the command later runs with a different ``cwd``.
    """
    p = Path(bin_name)
    if p.parent != Path(".") and p.exists() and os.access(str(p), os.X_OK):
        return str(p.resolve())

    found = shutil.which(bin_name)
    if found:
        return found

    for candidate in fallbacks or []:
        cp = Path(candidate).expanduser()
        if cp.exists() and os.access(str(cp), os.X_OK):
            return str(cp.resolve())

    raise FileNotFoundError(
        f"Executable '{bin_name}' not found on PATH.\n"
        f"Install it and ensure it's available to this Python process.\n"
        f"Tried fallbacks: {fallbacks or []}"
    )


def run_cmd(
    cmd: Sequence[str],
    *,
    cwd: Optional[Path] = None,
) -> CmdResult:
    """Run a subprocess to completion (no ``shell=True``, no timeout).

    Never raises on non-zero exit codes; only raises on execution errors
    (e.g. binary not found).
    """
    t0 = time.time()

    proc = subprocess.run(
        list(cmd),
        cwd=str(cwd) if cwd else None,
    )
    elapsed = time.time() - t0

    return CmdResult(
        exit_code=proc.returncode,
        elapsed_seconds=elapsed,
        command_str=" ".join(cmd),
    )

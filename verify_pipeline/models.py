"""verify_pipeline.models

Lightweight data structures used across the verification pipeline.

These dataclasses provide a small, explicit vocabulary for:
- what a check step is (Stage)
- which restricted-target parameters a run uses (CrossTargetPlan)
- the complete, immutable run configuration (VerifyPlan)
- one concrete toolchain call (Invocation) and its outcome (RunResult)

Everything here is frozen: a plan is built once at startup and only read
afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Stage:
    """One ordered step of the pipeline."""

    key: str
    label: str
    # Toolchain subcommand and its fixed arguments, e.g. ("fmt", "--all").
    args: Tuple[str, ...] = ()
    # Forwarded to the underlying tool after a ``--`` separator.
    tool_args: Tuple[str, ...] = ()


@dataclass(frozen=True)
class OptInCheck:
    """A package that only builds for the restricted target with an explicit feature."""

    package: str
    feature: str


@dataclass(frozen=True)
class CrossTargetPlan:
    """Parameter sets for the restricted-target stage.

    ``packages`` and ``features`` are ordered sequences; order is execution
    order and duplicates are kept.
    """

    target: str
    opt_in: Optional[OptInCheck] = None
    packages: Tuple[str, ...] = ()
    feature_package: Optional[str] = None
    features: Tuple[str, ...] = ()


@dataclass(frozen=True)
class VerifyPlan:
    """The complete run configuration."""

    stages: Tuple[Stage, ...]
    cross_target: CrossTargetPlan


@dataclass(frozen=True)
class Invocation:
    """One concrete toolchain call produced for a stage."""

    stage: str
    args: Tuple[str, ...]
    step: Optional[str] = None
    package: Optional[str] = None
    target: Optional[str] = None
    features: Tuple[str, ...] = ()

    @property
    def check(self) -> str:
        """Logical check name, e.g. ``cross-target/packages``."""
        return f"{self.stage}/{self.step}" if self.step else self.stage

    def describe(self) -> str:
        parts = [self.check]
        if self.package:
            parts.append(f"package={self.package}")
        if self.target:
            parts.append(f"target={self.target}")
        if self.features:
            parts.append(f"features={','.join(self.features)}")
        return " ".join(parts)


@dataclass(frozen=True)
class RunResult:
    """Outcome of one invocation, or of a whole run."""

    stage: str
    status: int
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.status == 0

    @staticmethod
    def success(stage: str = "all") -> "RunResult":
        return RunResult(stage=stage, status=0)


@dataclass(frozen=True)
class LogEntry:
    invocation: Invocation
    status: int
    elapsed_seconds: float


@dataclass
class RunLog:
    """Invocations executed during one run, in execution order."""

    entries: List[LogEntry] = field(default_factory=list)

    def record(self, invocation: Invocation, status: int, elapsed_seconds: float) -> None:
        self.entries.append(LogEntry(invocation, status, elapsed_seconds))

    @property
    def stages_run(self) -> List[str]:
        seen: List[str] = []
        for e in self.entries:
            if e.invocation.stage not in seen:
                seen.append(e.invocation.stage)
        return seen

    def __len__(self) -> int:
        return len(self.entries)

"""verify_pipeline.checks

Central registry of the checks a verification run performs.

Why this exists
---------------
The stage order, the restricted compilation target and the package/feature
tables are fixed data. Keeping them in one module means the controller, the
expander and the tests all agree on the *same* facts, and a run can still be
handed a different plan (tests, ``VERIFY_PLAN_FILE``) without touching code.

What belongs here
-----------------
Only pure data and the function that assembles it into a
:class:`~verify_pipeline.models.VerifyPlan`:
- no filesystem access
- no subprocess execution

Package lists are enumerated explicitly per sub-stage. Some packages are also
covered by the workspace-wide native lint; that overlap is kept on purpose,
the two profiles compile different code.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

from verify_pipeline.models import CrossTargetPlan, OptInCheck, Stage, VerifyPlan

FMT = "fmt"
LINT = "lint"
CROSS_TARGET = "cross-target"

# Sub-steps of the cross-target stage, in execution order.
STEP_OPT_IN = "opt-in"
STEP_PACKAGES = "packages"
STEP_FEATURES = "features"

# Arguments passed to the linter after ``--``.
DENY_WARNINGS: Tuple[str, ...] = ("-D", "warnings")

# Canonical stage registry.
#
# NOTE: dict insertion order is preserved, so the order here is the run order.
STAGES: Dict[str, Stage] = {
    FMT: Stage(key=FMT, label="Format (cargo fmt)", args=("fmt", "--all")),
    LINT: Stage(
        key=LINT,
        label="Lint, native profile (cargo clippy)",
        args=("clippy", "--workspace", "--tests", "--benches"),
        tool_args=DENY_WARNINGS,
    ),
    CROSS_TARGET: Stage(
        key=CROSS_TARGET,
        label="Cross-target check (cargo clippy --target)",
        args=("clippy",),
        tool_args=DENY_WARNINGS,
    ),
}

WASM_TARGET = "wasm32-unknown-unknown"

# Does not build for the restricted target unless the feature is enabled.
OPT_IN_PACKAGE = "kaspa-wasm"
OPT_IN_FEATURE = "wasm32-sdk"

TARGET_PACKAGES: Tuple[str, ...] = (
    "kaspa-addresses",
    "kaspa-consensus-core",
    "kaspa-consensus-wasm",
    "kaspa-core",
    "kaspa-hashes",
    "kaspa-math",
    "kaspa-rpc-core",
    "kaspa-txscript",
    "kaspa-utils",
    "kaspa-wallet-core",
    "kaspa-wallet-keys",
    "kaspa-wrpc-client",
)

FEATURE_PACKAGE = "kaspa-wasm"
FEATURES: Tuple[str, ...] = (
    "wasm32-core",
    "wasm32-rpc",
    "wasm32-keygen",
    "wasm32-sdk",
)


def build_plan(
    *,
    target: str = WASM_TARGET,
    opt_in: Optional[OptInCheck] = OptInCheck(OPT_IN_PACKAGE, OPT_IN_FEATURE),
    packages: Iterable[str] = TARGET_PACKAGES,
    feature_package: Optional[str] = FEATURE_PACKAGE,
    features: Iterable[str] = FEATURES,
) -> VerifyPlan:
    """Assemble a plan; the defaults are the built-in tables."""
    return VerifyPlan(
        stages=tuple(STAGES.values()),
        cross_target=CrossTargetPlan(
            target=target,
            opt_in=opt_in,
            packages=tuple(packages),
            feature_package=feature_package,
            features=tuple(features),
        ),
    )


DEFAULT_PLAN: VerifyPlan = build_plan()

"""verify_pipeline.expand

Turn plan data into the concrete, ordered invocations of each stage.

Expansion order is execution order: no deduplication, no reordering. An empty
package or feature list expands to nothing, which the controller treats as a
vacuous pass.
"""

from __future__ import annotations

from typing import List

from verify_pipeline.checks import CROSS_TARGET, STEP_FEATURES, STEP_OPT_IN, STEP_PACKAGES
from verify_pipeline.core import build_check_args
from verify_pipeline.models import CrossTargetPlan, Invocation, Stage, VerifyPlan


def expand_opt_in(stage: Stage, ct: CrossTargetPlan) -> List[Invocation]:
    if ct.opt_in is None:
        return []
    features = (ct.opt_in.feature,)
    return [
        Invocation(
            stage=stage.key,
            step=STEP_OPT_IN,
            args=tuple(
                build_check_args(stage, package=ct.opt_in.package, target=ct.target, features=features)
            ),
            package=ct.opt_in.package,
            target=ct.target,
            features=features,
        )
    ]


def expand_packages(stage: Stage, ct: CrossTargetPlan) -> List[Invocation]:
    return [
        Invocation(
            stage=stage.key,
            step=STEP_PACKAGES,
            args=tuple(build_check_args(stage, package=pkg, target=ct.target)),
            package=pkg,
            target=ct.target,
        )
        for pkg in ct.packages
    ]


def expand_features(stage: Stage, ct: CrossTargetPlan) -> List[Invocation]:
    if not ct.feature_package:
        return []
    return [
        Invocation(
            stage=stage.key,
            step=STEP_FEATURES,
            args=tuple(
                build_check_args(stage, package=ct.feature_package, target=ct.target, features=(feature,))
            ),
            package=ct.feature_package,
            target=ct.target,
            features=(feature,),
        )
        for feature in ct.features
    ]


def expand_cross_target(stage: Stage, ct: CrossTargetPlan) -> List[Invocation]:
    """Opt-in package first, then the package list, then the feature list."""
    return expand_opt_in(stage, ct) + expand_packages(stage, ct) + expand_features(stage, ct)


def expand_stage(stage: Stage, plan: VerifyPlan) -> List[Invocation]:
    if stage.key == CROSS_TARGET:
        return expand_cross_target(stage, plan.cross_target)
    return [Invocation(stage=stage.key, args=tuple(build_check_args(stage)))]

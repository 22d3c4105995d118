"""verify_pipeline.plan_file

Optional YAML form of the check tables.

The built-in tables in :mod:`verify_pipeline.checks` are the default. A YAML
plan (``VERIFY_PLAN_FILE``) carries the same fixed data for workspaces whose
package layout differs: target, opt-in package, package list, feature package
and feature list. It does not add or reorder stages.

Missing keys fall back to the built-in values. ``opt_in: null``,
``opt_in: {package: null}`` or ``feature_package: null`` switch that sub-step
off. An ``opt_in`` mapping without a ``package`` key is an error.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from verify_pipeline import checks
from verify_pipeline.models import OptInCheck, VerifyPlan


def _str_list(raw: Any, *, key: str) -> List[str]:
    if isinstance(raw, str):
        return [t.strip() for t in raw.split(",") if t.strip()]
    if not isinstance(raw, list):
        raise ValueError(f"'{key}' must be a list of names, got {type(raw).__name__}")
    return [str(t).strip() for t in raw if str(t).strip()]


def _opt_in(raw: Any) -> Optional[OptInCheck]:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValueError("'opt_in' must be a mapping with 'package' and 'feature'")
    if "package" not in raw:
        raise ValueError("'opt_in' needs a 'package' key (use 'package: null' to disable it)")
    package = raw["package"]
    if package is None:
        return None
    if not str(package).strip():
        raise ValueError("'opt_in.package' must not be empty")
    feature = raw.get("feature") or checks.OPT_IN_FEATURE
    return OptInCheck(package=str(package), feature=str(feature))


def plan_from_dict(raw: Dict[str, Any]) -> VerifyPlan:
    raw = raw or {}

    opt_in = _opt_in(raw["opt_in"]) if "opt_in" in raw else OptInCheck(checks.OPT_IN_PACKAGE, checks.OPT_IN_FEATURE)

    packages = _str_list(raw["packages"] or [], key="packages") if "packages" in raw else checks.TARGET_PACKAGES
    features = _str_list(raw["features"] or [], key="features") if "features" in raw else checks.FEATURES

    feature_package = raw.get("feature_package", checks.FEATURE_PACKAGE)

    return checks.build_plan(
        target=str(raw.get("target") or checks.WASM_TARGET),
        opt_in=opt_in,
        packages=packages,
        feature_package=str(feature_package) if feature_package else None,
        features=features,
    )


def plan_to_dict(plan: VerifyPlan) -> Dict[str, Any]:
    ct = plan.cross_target
    return {
        "target": ct.target,
        "opt_in": (
            {"package": ct.opt_in.package, "feature": ct.opt_in.feature} if ct.opt_in else None
        ),
        "packages": list(ct.packages),
        "feature_package": ct.feature_package,
        "features": list(ct.features),
    }


# ----------------------------
# YAML IO
# ----------------------------

def load_plan_yaml(path: str | Path) -> VerifyPlan:
    """Load a plan from YAML."""
    p = Path(path).expanduser().resolve()
    if not p.exists():
        raise FileNotFoundError(f"Plan file not found: {p}")
    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Plan YAML could not be parsed: {p}: {e}") from e
    if not isinstance(raw, dict):
        raise ValueError(f"Plan YAML must be a mapping/object at top level: {p}")
    return plan_from_dict(raw)


def dump_plan_yaml(path: str | Path, plan: VerifyPlan) -> Path:
    """Write the effective plan as YAML (a starting point for VERIFY_PLAN_FILE)."""
    p = Path(path).expanduser().resolve()
    p.parent.mkdir(parents=True, exist_ok=True)
    text = yaml.safe_dump(
        plan_to_dict(plan),
        sort_keys=False,
        default_flow_style=False,
        width=120,
    )
    p.write_text(text, encoding="utf-8")
    return p

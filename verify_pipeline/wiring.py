"""verify_pipeline.wiring

This module is the **composition root** for the Python runtime.

"Composition root" means: the single place where we *assemble* the running
application from its building blocks:

- load configuration / environment variables (``.env`` via python-dotenv)
- configure logging
- choose the plan (built-in tables or a YAML plan file)
- choose real vs fake command runners (useful for testing)
- build the high-level pipeline facade object

Settings (environment, never CLI flags)
---------------------------------------
VERIFY_WORKSPACE_ROOT  working directory for every toolchain call (default: cwd)
VERIFY_CARGO           toolchain executable (default: ``cargo`` on PATH)
VERIFY_PLAN_FILE       optional YAML plan replacing the built-in tables
VERIFY_LOG_LEVEL       stdlib logging level (default: WARNING)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from tools.core_cmd import which_or_raise
from verify_pipeline.checks import DEFAULT_PLAN
from verify_pipeline.invoke import CommandRunner, subprocess_runner
from verify_pipeline.models import VerifyPlan
from verify_pipeline.pipeline import WorkspaceVerifyPipeline
from verify_pipeline.plan_file import load_plan_yaml

ROOT_DIR: Path = Path(__file__).resolve().parents[1]
ENV_PATH: Path = ROOT_DIR / ".env"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    workspace_root: Path
    cargo: str = "cargo"
    plan_file: Optional[Path] = None
    log_level: str = "WARNING"


def settings_from_env(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    plan_file = (env.get("VERIFY_PLAN_FILE") or "").strip()
    return Settings(
        workspace_root=Path(env.get("VERIFY_WORKSPACE_ROOT") or os.getcwd()).expanduser().resolve(),
        cargo=(env.get("VERIFY_CARGO") or "cargo").strip(),
        plan_file=Path(plan_file).expanduser() if plan_file else None,
        log_level=(env.get("VERIFY_LOG_LEVEL") or "WARNING").strip().upper(),
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def resolve_plan(settings: Settings) -> VerifyPlan:
    if settings.plan_file is None:
        return DEFAULT_PLAN
    logger.info("Loading plan from %s", settings.plan_file)
    return load_plan_yaml(settings.plan_file)


def resolve_command(name: str) -> str:
    """Resolve the toolchain executable; fall back to the bare name.

    A missing toolchain is not fatal here: the first invocation then fails to
    launch and is reported like any other failing check.
    """
    try:
        return which_or_raise(name, fallbacks=["~/.cargo/bin/cargo"] if name == "cargo" else None)
    except FileNotFoundError as e:
        logger.warning("%s", e)
        return name


def build_pipeline(
    *,
    load_env: bool = True,
    settings: Optional[Settings] = None,
    runner: Optional[CommandRunner] = None,
) -> WorkspaceVerifyPipeline:
    """Build the high-level pipeline facade."""

    if load_env:
        load_dotenv(ENV_PATH, override=False)

    settings = settings or settings_from_env()
    configure_logging(settings.log_level)

    plan = resolve_plan(settings)
    logger.debug("workspace root: %s", settings.workspace_root)

    return WorkspaceVerifyPipeline(
        plan,
        command=resolve_command(settings.cargo),
        runner=runner or subprocess_runner(settings.workspace_root),
    )

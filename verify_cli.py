#!/usr/bin/env python3
"""
Verify that the workspace is clean before code is accepted.

Runs, in order and stopping at the first failure:
  1) cargo fmt --all
  2) cargo clippy --workspace --tests --benches (native profile)
  3) cargo clippy under the restricted target: opt-in package, package list,
     then the feature list

The exit code is the failing check's exit code, or 0 when everything passes.

Usage:
  python verify_cli.py

There are no flags. Settings come from the environment (or .env):
  VERIFY_WORKSPACE_ROOT, VERIFY_CARGO, VERIFY_PLAN_FILE, VERIFY_LOG_LEVEL
"""

from __future__ import annotations

import argparse
from typing import List, Optional

from verify_pipeline.wiring import build_pipeline


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run the fixed workspace verification pipeline (fmt, clippy, cross-target checks).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    parse_args(argv)

    try:
        pipeline = build_pipeline()
    except (OSError, ValueError) as e:
        raise SystemExit(f"Invalid verification plan: {e}")

    result = pipeline.run()
    raise SystemExit(result.status)


if __name__ == "__main__":
    main()

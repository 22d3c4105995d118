# verify_pipeline/core.py
from __future__ import annotations

from typing import List, Optional, Sequence

from verify_pipeline.models import Stage


def build_check_args(
    stage: Stage,
    *,
    package: Optional[str] = None,
    target: Optional[str] = None,
    features: Sequence[str] = (),
) -> List[str]:
    """
    Build the toolchain argument list for one stage invocation.

    The executable itself is not included; the invocation adapter prepends it.

      build_check_args(lint)                    -> clippy --workspace ... -- -D warnings
      build_check_args(cross, package="x",
                       target="wasm32-unknown-unknown",
                       features=["f"])          -> clippy -p x --target ... --features f -- -D warnings
    """
    args: List[str] = list(stage.args)

    if package:
        args += ["-p", package]
    if target:
        args += ["--target", target]
    if features:
        args += ["--features", ",".join(features)]

    if stage.tool_args:
        args += ["--", *stage.tool_args]

    return args

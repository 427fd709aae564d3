from __future__ import annotations

"""
Generator Pipeline Data Models.

Defines the result object and factory functions used to communicate
generator outcomes between the pipeline and the CLI.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class GenerationResult:
    """
    Outcome of a complete generator run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        source_dir: Normalized source root that was embedded.
        target_path: Absolute path of the generated module.
        compress: Whether payloads were zlib-compressed.
        assets: Sorted names of the embedded assets.
        errors: Per-file failures collected during the build.
        summary: Execution counters.
    """
    ok: bool
    error: str

    source_dir: str
    target_path: str
    compress: bool

    assets: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        source_dir: str = "",
        target_path: str = "",
        errors: Optional[List[str]] = None,
) -> GenerationResult:
    """
    Create a failed generation result.

    Args:
        error: Detailed error description.
        cfg: Configuration used during the failed run.
        source_dir: Normalized source root, if resolved.
        target_path: Target module path, if resolved.
        errors: Individual file failures.
    """
    return GenerationResult(
        ok=False,
        error=error,
        source_dir=source_dir,
        target_path=target_path,
        compress=cfg.get("compress", True),
        errors=errors or [],
        summary={"errors": len(errors or [])},
    )


def create_success_result(
        cfg: Dict[str, Any],
        source_dir: str,
        target_path: str,
        assets: List[str],
        summary_extra: Optional[Dict[str, Any]] = None,
) -> GenerationResult:
    """
    Create a successful generation result.

    Args:
        cfg: Final configuration used during execution.
        source_dir: Normalized source root.
        target_path: Absolute path of the written module.
        assets: Sorted embedded asset names.
        summary_extra: Additional execution metrics.
    """
    summary: Dict[str, Any] = {"assets": len(assets), "errors": 0}
    summary.update(summary_extra or {})
    return GenerationResult(
        ok=True,
        error="",
        source_dir=source_dir,
        target_path=target_path,
        compress=cfg.get("compress", True),
        assets=assets,
        summary=summary,
    )

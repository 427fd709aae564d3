from __future__ import annotations

"""
Offline Generator Orchestration.

Coordinates the batch conversion of a source directory into a generated
Python module of asset descriptors:
1. Validates configuration and paths.
2. Refuses to replace an existing module unless overwrite is requested.
3. Encodes every eligible file in parallel worker threads.
4. Aggregates failures; any failed file aborts the run.
5. Emits the module with descriptors sorted by name.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from assetfs.core.pipeline.stages.builder import build_descriptor_task
from assetfs.core.pipeline.stages.emitter import render_module
from assetfs.core.pipeline.stages.validator import validate_config
from assetfs.core.services.scanner import yield_asset_files
from assetfs.domain.asset_models import AssetDescriptor
from assetfs.domain.errors import GeneratorError
from assetfs.domain.pipeline_models import (
    GenerationResult,
    create_error_result,
    create_success_result,
)
from assetfs.infra.fs import inspect_target, normalize_path

logger = logging.getLogger(__name__)


def run_generator(
        config: Optional[Dict[str, Any]],
        *,
        overwrite: bool = False,
        generated_at: Optional[datetime] = None,
) -> GenerationResult:
    """
    Execute the full generation pipeline.

    Args:
        config: The configuration dictionary (raw or partial).
        overwrite: If True, replace an existing target module.
        generated_at: Timestamp for the module header. Defaults to now.

    Returns:
        GenerationResult: Status, target path and embedded asset names.
    """
    logger.info("The beginning of the generation process.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Resolution
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    try:
        source_dir, target_path = resolve_paths(cfg, overwrite=overwrite)
    except GeneratorError as e:
        logger.error(str(e))
        return create_error_result(str(e), cfg)

    # -------------------------------------------------------------------------
    # 2) Parallel Build
    # -------------------------------------------------------------------------
    descriptors, errors = _build_descriptors(
        source_dir, cfg["exclude"], cfg["compress"], skip_path=target_path
    )

    if errors:
        msg = f"Generation aborted: {len(errors)} file(s) failed to build."
        logger.error(msg)
        return create_error_result(msg, cfg, source_dir, target_path, errors)

    if not descriptors:
        msg = f"No files found in source directory {source_dir!r}."
        logger.error(msg)
        return create_error_result(msg, cfg, source_dir, target_path)

    # -------------------------------------------------------------------------
    # 3) Emission
    # -------------------------------------------------------------------------
    descriptors.sort(key=lambda d: d.name)
    source = render_module(descriptors, generated_at)

    try:
        with open(target_path, "w", encoding="utf-8") as f:
            f.write(source)
    except OSError as e:
        msg = f"Could not write module {target_path!r}: {e}"
        logger.error(msg)
        return create_error_result(msg, cfg, source_dir, target_path)

    logger.info(f"The generation was successful and created file: {target_path!r}")
    return create_success_result(
        cfg,
        source_dir,
        target_path,
        [d.name for d in descriptors],
        summary_extra={"bytes_written": len(source.encode("utf-8"))},
    )


def resolve_paths(cfg: Dict[str, Any], *, overwrite: bool) -> Tuple[str, str]:
    """
    Validate the source and target locations of a generator run.

    Args:
        cfg: Validated configuration.
        overwrite: Whether an existing target module may be replaced.

    Returns:
        Tuple[str, str]: (absolute source directory, absolute target module path).

    Raises:
        GeneratorError: If the source is not a directory, the target
                        directory is missing, the target path is a directory,
                        or the target exists and overwrite is False.
    """
    cwd = os.getcwd()
    source_dir = normalize_path(cfg["source_dir"], cwd)
    if not os.path.isdir(source_dir):
        raise GeneratorError(f"Broken source path {source_dir!r}: is not a directory.")

    target_dir = normalize_path(cfg["target_dir"], cwd)
    if not os.path.isdir(target_dir):
        raise GeneratorError(f"Broken target path {target_dir!r}: is not a directory.")

    target_path = os.path.join(target_dir, cfg["module_name"])
    exists, is_dir = inspect_target(target_path)
    if is_dir:
        raise GeneratorError(f"Broken target file name {target_path!r}: is a directory.")
    if exists and not overwrite:
        raise GeneratorError(
            f"File {target_path!r} already exists, use the overwrite flag to rewrite it."
        )
    if exists:
        logger.info(f"The existing file {target_path!r} will be replaced.")

    return source_dir, target_path


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _build_descriptors(
        source_dir: str,
        exclude: str,
        compress: bool,
        skip_path: str = "",
) -> Tuple[List[AssetDescriptor], List[str]]:
    """Consume the scanner, dispatch build workers and collect every outcome."""
    descriptors: List[AssetDescriptor] = []
    errors: List[str] = []

    with ThreadPoolExecutor(thread_name_prefix="AssetBuildWorker") as executor:
        tasks = [
            executor.submit(build_descriptor_task, f["file_path"], f["name"], compress)
            for f in yield_asset_files(source_dir, exclude)
            if os.path.abspath(f["file_path"]) != skip_path
        ]

        for future in as_completed(tasks):
            result = future.result()
            if result["ok"]:
                descriptors.append(result["descriptor"])
            else:
                errors.append(result["error"])

    return descriptors, sorted(errors)

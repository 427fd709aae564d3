from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging,
generator execution and result rendering for 'generate'; module loading,
filesystem materialization, optional templating and HTTP serving for
'serve'.
"""

import importlib.util
import json
import os
import sys
from dataclasses import asdict
from types import ModuleType
from typing import Any, Dict, List, Optional

from assetfs.core.pipeline.generator import resolve_paths, run_generator
from assetfs.core.pipeline.stages.validator import validate_config
from assetfs.core.services.registry import AssetRegistry
from assetfs.core.vfs.filesystem import VirtualFileSystem, load_filesystem
from assetfs.domain.config import get_default_config
from assetfs.domain.errors import AssetFSError, GeneratorError
from assetfs.domain.pipeline_models import GenerationResult
from assetfs.infra import server
from assetfs.infra.logging import LoggingConfig, configure_logging, get_logger
from assetfs.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 invalid input).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    if args.command == "generate":
        return _run_generate(args)
    return _run_serve(args)

# -----------------------------------------------------------------------------
# GENERATE
# -----------------------------------------------------------------------------

def _run_generate(args: Any) -> int:
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(get_default_config(), overrides)

    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    # Pre-flight path verification
    try:
        resolve_paths(clean_conf, overwrite=bool(args.overwrite))
    except GeneratorError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    try:
        result = run_generator(clean_conf, overwrite=bool(args.overwrite))
    except KeyboardInterrupt:
        logger.warning("Generation interrupted by user.")
        return 130

    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1


def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge known, non-None override keys into the base configuration."""
    out = dict(base)
    for k in ("source_dir", "target_dir", "module_name", "exclude", "compress"):
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out


def _print_human_summary(result: GenerationResult) -> None:
    """Render a GenerationResult as a terminal report."""
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        for err in result.errors:
            print(f"  - {err}", file=sys.stderr)
        return

    print(f"Generated module: {result.target_path}")
    print(f"Source directory: {result.source_dir}")
    print(f"Compression: {'zlib' if result.compress else 'none'}")
    print(f"Embedded assets ({len(result.assets)}):")
    for i, name in enumerate(result.assets):
        print(f"  {i}) {name}")

# -----------------------------------------------------------------------------
# SERVE
# -----------------------------------------------------------------------------

def _run_serve(args: Any) -> int:
    try:
        template_data = cli_args.parse_template_vars(args.template_vars)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    for path in args.modules:
        if not os.path.isfile(path):
            print(f"ERROR: asset module {path!r} does not exist", file=sys.stderr)
            return 2

    try:
        fs = build_filesystem(args.modules)
        if args.templates:
            fs.apply_template(args.templates, template_data)
    except AssetFSError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    logger.info(f"Filesystem is ready!\n{fs}")

    try:
        server.serve(fs, args.host, args.port)
    except KeyboardInterrupt:
        logger.info("Server stopped.")
    except OSError as e:
        logger.error(f"Server failed: {e}")
        return 1
    return 0


def load_asset_module(path: str, index: int = 0) -> ModuleType:
    """
    Import a generated asset module from a file path.

    Args:
        path: Path of the generated '.py' file.
        index: Disambiguates module names when several files share a stem.
    """
    stem = os.path.splitext(os.path.basename(path))[0]
    spec = importlib.util.spec_from_file_location(f"assetfs_generated_{index}_{stem}", path)
    if spec is None or spec.loader is None:
        raise ImportError(f"cannot load asset module from {path!r}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def register_module(module: ModuleType, registry: AssetRegistry) -> None:
    """Register a generated module's assets with a registry."""
    hook = getattr(module, "register", None)
    if callable(hook):
        hook(registry)
    else:
        registry.register(*getattr(module, "ASSETS", ()))


def build_filesystem(paths: List[str]) -> VirtualFileSystem:
    """Load generated modules from disk and materialize their filesystem."""
    registry = AssetRegistry()
    for index, path in enumerate(paths):
        register_module(load_asset_module(path, index), registry)
    return load_filesystem(registry)

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())

from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema of the 'generate' and 'serve' commands and
translates raw argparse namespaces into generator configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional, Tuple

from assetfs.domain.config import (
    DEFAULT_EXCLUDE,
    DEFAULT_MODULE_NAME,
    DEFAULT_PORT,
    DEFAULT_SOURCE_DIR,
    DEFAULT_TARGET_DIR,
)

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the assetfs CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="assetfs",
        description="Embed a directory tree into Python source and serve it from memory.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this file (rotated).",
    )

    commands = p.add_subparsers(dest="command", required=True)

    # --- generate ---
    gen = commands.add_parser("generate", help="Generate an asset module from a directory.")
    gen.add_argument(
        "--src",
        dest="source_dir",
        default=None,
        help=f"The path of the source directory (default: {DEFAULT_SOURCE_DIR}).",
    )
    gen.add_argument(
        "--tar",
        dest="target_dir",
        default=None,
        help=f"The directory the module is written to (default: {DEFAULT_TARGET_DIR}).",
    )
    gen.add_argument(
        "-m", "--module",
        dest="module_name",
        default=None,
        help=f"Name of the generated module file (default: {DEFAULT_MODULE_NAME}).",
    )
    gen.add_argument(
        "--exclude",
        dest="exclude",
        default=None,
        help=f"Glob matched against file names to exclude (default: {DEFAULT_EXCLUDE!r}).",
    )
    gen.add_argument(
        "--rw",
        dest="overwrite",
        action="store_true",
        help="Rewrite the target file if it already exists.",
    )
    gen.add_argument(
        "--no-compress",
        action="store_true",
        help="Store payloads without zlib compression.",
    )
    gen.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the generation result as JSON.",
    )

    # --- serve ---
    srv = commands.add_parser("serve", help="Serve generated asset modules over HTTP.")
    srv.add_argument(
        "--module",
        dest="modules",
        action="append",
        required=True,
        help="Path of a generated asset module (repeatable).",
    )
    srv.add_argument("--host", default="", help="Interface to bind (default: all).")
    srv.add_argument(
        "--port",
        type=int,
        default=DEFAULT_PORT,
        help=f"Server port (default: {DEFAULT_PORT}).",
    )
    srv.add_argument(
        "--template",
        dest="templates",
        action="append",
        default=[],
        help="Asset to render as a template after loading (repeatable).",
    )
    srv.add_argument(
        "--set",
        dest="template_vars",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Template variable (repeatable).",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate a 'generate' namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "source_dir": args.source_dir,
        "target_dir": args.target_dir,
        "module_name": args.module_name,
        "exclude": args.exclude,
    }
    if args.no_compress:
        overrides["compress"] = False
    return overrides


def parse_template_vars(pairs: List[str]) -> Dict[str, Any]:
    """
    Convert KEY=VALUE strings into a template context.

    'true'/'false' (any case) become booleans; other values stay strings.
    A bare KEY is treated as KEY=true.

    Raises:
        ValueError: If a key is empty.
    """
    data: Dict[str, Any] = {}
    for pair in pairs:
        key, value = _split_pair(pair)
        if not key:
            raise ValueError(f"Invalid template variable {pair!r}: empty key.")
        data[key] = _coerce(value)
    return data

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_pair(pair: str) -> Tuple[str, Optional[str]]:
    if "=" not in pair:
        return pair.strip(), None
    key, value = pair.split("=", 1)
    return key.strip(), value


def _coerce(value: Optional[str]) -> Any:
    if value is None:
        return True
    lowered = value.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return value

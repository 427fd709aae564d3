from __future__ import annotations

"""
Generator Configuration Validation Service.

Gatekeeper for the offline generator, ensuring that the configuration
dictionary conforms to the expected schema. Handles type coercion, default
value injection and module-name normalization before any file is read.
"""

import logging
import os
from typing import Any, Dict, List, Tuple

from assetfs.domain.config import DEFAULT_EXCLUDE, get_default_config

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a generator configuration dictionary.

    Converts untrusted inputs (e.g. from the CLI) into strictly typed
    parameters and fills missing keys with domain defaults.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and a
                                          list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    # 2. Field Processing
    for field in ("source_dir", "target_dir", "module_name"):
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    merged["compress"] = _as_bool(merged.get("compress"), True, "compress", warnings, strict)
    merged["exclude"] = _as_pattern(merged.get("exclude"), warnings, strict)

    # 3. Domain-Specific Normalization
    merged["module_name"] = _normalize_module_name(merged["module_name"], warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_pattern(value: Any, warnings: List[str], strict: bool) -> str:
    """Accept a glob string; an empty string disables exclusion."""
    if value is None:
        return DEFAULT_EXCLUDE
    if isinstance(value, str):
        return value.strip()

    msg = f"Invalid field 'exclude': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return DEFAULT_EXCLUDE


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_module_name(name: str, warnings: List[str], strict: bool) -> str:
    """Ensure the generated module is a bare '.py' file name."""
    base = os.path.basename(name.replace("\\", "/").rstrip("/"))
    if base != name:
        if strict:
            raise ValueError(f"Invalid module name '{name}': must not contain a path.")
        warnings.append(f"Module name '{name}' reduced to '{base}'.")

    if not base.endswith(".py"):
        warnings.append(f"Module name '{base}' corrected to '{base}.py'.")
        base = base + ".py"

    if not base[:-3].isidentifier():
        msg = f"Module name '{base}' is not an importable identifier."
        if strict:
            raise ValueError(msg)
        warnings.append(msg)

    return base

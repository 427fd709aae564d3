from __future__ import annotations

"""
Generator Configuration Domain.

Default values for the offline generator that embeds a source directory
into a Python module of asset descriptors. Configuration travels as a plain
dictionary so CLI overrides can be merged key by key.
"""

import os
from typing import Any, Dict

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_SOURCE_DIR = os.path.join("web", "asset")
DEFAULT_TARGET_DIR = "web"
DEFAULT_MODULE_NAME = "assets.py"
DEFAULT_EXCLUDE = ".*"
DEFAULT_PORT = 8090


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default generator configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "source_dir": DEFAULT_SOURCE_DIR,
        "target_dir": DEFAULT_TARGET_DIR,
        "module_name": DEFAULT_MODULE_NAME,

        # Filtering
        "exclude": DEFAULT_EXCLUDE,

        # Encoding
        "compress": True,
    }

from __future__ import annotations

"""
Generated Module Emitter.

Renders the Python source of an asset module: a header listing every
embedded asset, an ASSETS tuple of descriptor literals, and a register()
hook that appends them to a caller-owned registry.
"""

from datetime import datetime
from typing import Optional, Sequence

from jinja2 import Environment

from assetfs.domain.asset_models import AssetDescriptor

# -----------------------------------------------------------------------------
# MODULE TEMPLATE
# -----------------------------------------------------------------------------

MODULE_TEMPLATE = '''\
# CODE GENERATED AT {{ generated_at }} BY ASSETFS. DO NOT EDIT.
#
# Embedded assets:
{%- for asset in assets %}
# {{ loop.index0 }}) {{ asset.name | pyrepr }}
{%- endfor %}
#
from assetfs import AssetDescriptor, AssetRegistry

ASSETS = (
{%- for asset in assets %}
    AssetDescriptor(
        name={{ asset.name | pyrepr }},
        encoded_content={{ asset.encoded_content | pyrepr }},
        compressed={{ asset.compressed }},
    ),
{%- endfor %}
)


def register(registry: AssetRegistry) -> None:
    """Append the embedded assets to a registry."""
    registry.register(*ASSETS)
'''

_ENV = Environment(autoescape=False, keep_trailing_newline=True)
_ENV.filters["pyrepr"] = repr
_TEMPLATE = _ENV.from_string(MODULE_TEMPLATE)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_module(
        descriptors: Sequence[AssetDescriptor],
        generated_at: Optional[datetime] = None
) -> str:
    """
    Render the source code of a generated asset module.

    Args:
        descriptors: Descriptors to embed, already in their final order.
        generated_at: Timestamp written to the header. Defaults to now.

    Returns:
        str: Python source text.
    """
    stamp = (generated_at or datetime.now()).strftime("%Y/%m/%d %H:%M:%S")
    return _TEMPLATE.render(generated_at=stamp, assets=list(descriptors))

from __future__ import annotations

"""
Asset Template Post-processor.

Re-renders the content of materialized file assets as Jinja2 templates and
writes the result back into the live snapshot. The change bypasses the
registry: the next reload restores the originally decoded content, so
callers must reapply templating after every reload.
"""

import logging
from typing import Any, Dict, List, Mapping, Sequence

from jinja2 import Environment
from jinja2 import TemplateError as JinjaTemplateError

from assetfs.domain.asset_models import DirectoryEntry, FileEntry, Snapshot
from assetfs.domain.errors import IsDirectoryError, NotFoundError, TemplateError
from assetfs.infra.fs import normalize_asset_name

logger = logging.getLogger(__name__)

_ENV = Environment(autoescape=False, keep_trailing_newline=True)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def apply_template(
        snapshot: Snapshot,
        names: Sequence[str],
        data: Mapping[str, Any]
) -> List[str]:
    """
    Render the named assets as templates and replace their content in place.

    Every asset is rendered before any entry is replaced, so a failure on
    one name leaves the snapshot untouched.

    Args:
        snapshot: Live snapshot to mutate.
        names: Asset names to re-template (normalized before lookup).
        data: Key/value context made available to the templates.

    Returns:
        List[str]: Normalized names of the re-templated assets.

    Raises:
        NotFoundError: If a name is absent from the snapshot.
        IsDirectoryError: If a name resolves to a directory.
        TemplateError: If content is not UTF-8 text, or fails to parse/render.
    """
    rendered: Dict[str, FileEntry] = {}

    for raw_name in names:
        name = normalize_asset_name(raw_name)
        entry = snapshot.get(name)
        if entry is None:
            raise NotFoundError(name)
        if isinstance(entry, DirectoryEntry):
            raise IsDirectoryError(name)

        rendered[name] = FileEntry(name=name, content=_render(entry, data))

    snapshot.update(rendered)
    logger.info(f"Template applied to {len(rendered)} asset(s).")
    return list(rendered)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _render(entry: FileEntry, data: Mapping[str, Any]) -> bytes:
    """Parse an entry's content as a template and render it with data."""
    try:
        source = entry.content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise TemplateError(f"asset {entry.name} is not UTF-8 text: {e}") from e

    try:
        template = _ENV.from_string(source)
        output = template.render(dict(data))
    except JinjaTemplateError as e:
        raise TemplateError(f"template {entry.name}: {e}") from e

    return output.encode("utf-8")

from __future__ import annotations

"""
Static File-Serving Host.

Exposes a virtual filesystem over HTTP using the standard library server.
Mirrors the behavior of a conventional static file server: directories
redirect to their slash-terminated form, serve their index.html when one
exists and otherwise render a listing. No modification times are tracked,
so responses never carry Last-Modified.
"""

import html
import logging
import mimetypes
import posixpath
import urllib.parse
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, List, Type

from assetfs.core.vfs.filesystem import VirtualFileSystem
from assetfs.domain.asset_models import AssetStat
from assetfs.domain.errors import NotFoundError
from assetfs.infra.fs import normalize_asset_name

logger = logging.getLogger(__name__)

INDEX_PAGE = "index.html"


class AssetRequestHandler(BaseHTTPRequestHandler):
    """
    Request handler serving GET/HEAD from a bound VirtualFileSystem.

    Use make_handler() to obtain a subclass bound to a filesystem.
    """

    filesystem: VirtualFileSystem
    server_version = "assetfs"

    def do_GET(self) -> None:
        self._serve(send_body=True)

    def do_HEAD(self) -> None:
        self._serve(send_body=False)

    def log_message(self, format: str, *args: Any) -> None:
        logger.info(f"{self.address_string()} - {format % args}")

    # -------------------------------------------------------------------------
    # ROUTING
    # -------------------------------------------------------------------------

    def _serve(self, send_body: bool) -> None:
        split = urllib.parse.urlsplit(self.path)
        url_path = urllib.parse.unquote(split.path)

        if url_path.endswith("/" + INDEX_PAGE):
            self._redirect(split.path[: -len(INDEX_PAGE)], split.query)
            return

        name = normalize_asset_name(url_path)
        try:
            st = self.filesystem.stat(name)
        except NotFoundError:
            self.send_error(HTTPStatus.NOT_FOUND, "File not found")
            return

        if st.is_dir:
            if not split.path.endswith("/"):
                self._redirect(split.path + "/", split.query)
                return
            index = posixpath.join(name, INDEX_PAGE)
            if self.filesystem.belongs(index) and not self.filesystem.stat(index).is_dir:
                self._send_file(index, send_body)
            else:
                self._send_listing(name, send_body)
            return

        if split.path.endswith("/"):
            self._redirect(split.path.rstrip("/"), split.query)
            return

        self._send_file(name, send_body)

    # -------------------------------------------------------------------------
    # RESPONSES
    # -------------------------------------------------------------------------

    def _send_file(self, name: str, send_body: bool) -> None:
        try:
            with self.filesystem.open(name) as f:
                data = f.read()
        except NotFoundError:
            # Snapshot swapped between stat and open
            self.send_error(HTTPStatus.NOT_FOUND, "File not found")
            return

        ctype = mimetypes.guess_type(name)[0] or "application/octet-stream"
        self._send_payload(data, ctype, send_body)

    def _send_listing(self, name: str, send_body: bool) -> None:
        entries = self.filesystem.list_directory(name)
        body = render_listing(name, entries).encode("utf-8")
        self._send_payload(body, "text/html; charset=utf-8", send_body)

    def _send_payload(self, data: bytes, ctype: str, send_body: bool) -> None:
        self.send_response(HTTPStatus.OK)
        self.send_header("Content-Type", ctype)
        self.send_header("Content-Length", str(len(data)))
        self.end_headers()
        if send_body:
            self.wfile.write(data)

    def _redirect(self, location: str, query: str) -> None:
        if query:
            location = f"{location}?{query}"
        self.send_response(HTTPStatus.MOVED_PERMANENTLY)
        self.send_header("Location", location or "/")
        self.send_header("Content-Length", "0")
        self.end_headers()


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_listing(directory: str, entries: List[AssetStat]) -> str:
    """
    Render an HTML listing of the entries below a directory.

    Entry names are shown relative to the directory; nested entries keep
    their intermediate segments and directories get a trailing slash.
    """
    prefix = directory.rstrip("/") + "/"
    lines = ["<pre>"]
    for entry in entries:
        rel = entry.name[len(prefix):]
        if entry.is_dir:
            rel += "/"
        href = urllib.parse.quote(rel)
        lines.append(f'<a href="{href}">{html.escape(rel)}</a>')
    lines.append("</pre>")
    return "\n".join(lines) + "\n"


def make_handler(fs: VirtualFileSystem) -> Type[AssetRequestHandler]:
    """Return a request handler class bound to a filesystem."""
    return type("BoundAssetRequestHandler", (AssetRequestHandler,), {"filesystem": fs})


def create_server(fs: VirtualFileSystem, host: str = "", port: int = 0) -> ThreadingHTTPServer:
    """
    Create (but do not start) a threaded HTTP server over a filesystem.

    Args:
        fs: Filesystem to expose.
        host: Interface to bind; empty binds all interfaces.
        port: TCP port; 0 picks a free port.
    """
    return ThreadingHTTPServer((host, port), make_handler(fs))


def serve(fs: VirtualFileSystem, host: str = "", port: int = 8090) -> None:
    """Serve a filesystem until the process is interrupted."""
    with create_server(fs, host, port) as httpd:
        bound_host, bound_port = httpd.server_address[:2]
        logger.info(f"Server start on http://{bound_host or 'localhost'}:{bound_port}")
        httpd.serve_forever()

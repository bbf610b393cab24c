"""Local preview server for the generated site."""

from __future__ import annotations

import io
import logging
from functools import partial
from http import HTTPStatus
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

logger = logging.getLogger("wpmirror")


def resolve_request_path(root: Path, request_path: str) -> Optional[Path]:
    """Map a URL path to a file under ``root``, or ``None`` when it does not exist."""
    path = unquote(urlparse(request_path).path)
    if path.endswith("/"):
        path += "index.html"
    root = root.resolve()
    try:
        candidate = (root / path.lstrip("/")).resolve()
    except (OSError, ValueError):
        return None
    if root != candidate and root not in candidate.parents:
        return None
    if candidate.is_file():
        return candidate
    index = candidate / "index.html"
    if index.is_file():
        return index
    return None


class PreviewHandler(SimpleHTTPRequestHandler):
    """Serves clean URLs (``/slug/``) and the site's own 404 page."""

    def send_head(self):
        root = Path(self.directory)
        resolved = resolve_request_path(root, self.path)
        if resolved is None:
            return self._send_not_found(root)
        self.path = "/" + resolved.relative_to(root.resolve()).as_posix()
        return super().send_head()

    def _send_not_found(self, root: Path):
        page = root / "404.html"
        if not page.is_file():
            self.send_error(HTTPStatus.NOT_FOUND)
            return None
        body = page.read_bytes()
        self.send_response(HTTPStatus.NOT_FOUND)
        self.send_header("Content-Type", "text/html; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        return io.BytesIO(body)

    def log_message(self, format, *args):
        logger.debug("%s - %s", self.address_string(), format % args)


def serve(directory: Path, port: int = 3000, host: str = "127.0.0.1") -> None:
    handler = partial(PreviewHandler, directory=str(directory))
    with ThreadingHTTPServer((host, port), handler) as httpd:
        logger.info("Listening on http://localhost:%d", port)
        try:
            httpd.serve_forever()
        except KeyboardInterrupt:
            logger.info("Shutting down preview server")

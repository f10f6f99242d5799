"""Request handler: map a URL path to a file under the static root and serve it.

Flow for every request, whatever the method:
  - resolve the path against the root (``/`` becomes the index document)
  - pick the MIME type from the extension
  - read the whole file once; the error from that read decides 404 vs 500
"""

import errno
import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import Response

from demo_server.mime import get_extension, get_mime_type
from demo_server.pages import not_found_page, server_error_page

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

# Read errors that mean "there is no file at this path"
_MISSING_FILE_ERRORS = (FileNotFoundError, NotADirectoryError, IsADirectoryError)


class RequestContext(BaseModel):
    """Per-request resolution of a URL path to a file on disk."""

    model_config = ConfigDict(frozen=True)

    raw_path: str
    file_path: Optional[Path] = None  # None when the path escapes the root
    extension: str = ""
    mime_type: str


def resolve_request(raw_path: str, root: Path, index_document: str = "index.html") -> RequestContext:
    """Resolve ``raw_path`` (already percent-decoded, no query string) against ``root``."""
    pathname = raw_path or "/"
    if pathname == "/":
        pathname = f"/{index_document}"

    root = root.resolve()
    joined = root / pathname.lstrip("/")
    extension = get_extension(joined)
    mime_type = get_mime_type(extension)

    if "\x00" in pathname:
        return RequestContext(raw_path=raw_path, extension=extension, mime_type=mime_type)

    try:
        candidate = joined.resolve()
        candidate.relative_to(root)
    except ValueError:
        return RequestContext(raw_path=raw_path, extension=extension, mime_type=mime_type)

    return RequestContext(
        raw_path=raw_path,
        file_path=candidate,
        extension=extension,
        mime_type=mime_type,
    )


def read_file(path: Path) -> bytes:
    return path.read_bytes()


def _html_response(content: str, status_code: int) -> Response:
    # Content-Type is passed as a header so Starlette does not append a charset
    return Response(content=content, status_code=status_code, headers={"Content-Type": "text/html"})


async def serve_file(request: Request) -> Response:
    settings = request.app.state.settings
    ctx = resolve_request(
        request.scope["path"],
        settings.static_root_path,
        settings.INDEX_DOCUMENT,
    )

    if ctx.file_path is None:
        logger.debug(f"Rejected path outside static root: {ctx.raw_path}")
        return _html_response(not_found_page(settings.SITE_NAME), 404)

    try:
        data = await run_in_threadpool(read_file, ctx.file_path)
    except _MISSING_FILE_ERRORS:
        logger.debug(f"File not found: {ctx.file_path}")
        return _html_response(not_found_page(settings.SITE_NAME), 404)
    except OSError as e:
        if e.errno == errno.ENAMETOOLONG:
            logger.debug(f"Name too long: {ctx.raw_path[:64]}...")
            return _html_response(not_found_page(settings.SITE_NAME), 404)
        logger.warning(f"Failed to read {ctx.file_path}: {e}")
        return _html_response(server_error_page(settings.SITE_NAME), 500)

    headers = {"Content-Type": ctx.mime_type, **CORS_HEADERS}
    return Response(content=data, status_code=200, headers=headers)

"""Extension to MIME type lookup for served files."""

from pathlib import PurePath
from types import MappingProxyType

DEFAULT_MIME_TYPE = "application/octet-stream"

MIME_TYPES = MappingProxyType({
    ".html": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
    ".ico": "image/x-icon",
    ".mp3": "audio/mpeg",
    ".wav": "audio/wav",
    ".ogg": "audio/ogg",
    ".m4a": "audio/mp4",
})


def get_extension(path: PurePath) -> str:
    """Return the lowercase extension of ``path``, including the leading dot."""
    return path.suffix.lower()


def get_mime_type(extension: str) -> str:
    return MIME_TYPES.get(extension.lower(), DEFAULT_MIME_TYPE)

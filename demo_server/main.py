"""FastAPI application entry point serving the static root on every path."""

from typing import Optional

from fastapi import FastAPI

from demo_server.config import Settings, settings as default_settings
from demo_server.handler import serve_file

# Function routes default to GET only, so every verb is listed explicitly
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "DELETE", "OPTIONS", "PATCH", "TRACE"]


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application for ``settings`` (defaults to the environment settings)."""
    settings = settings or default_settings

    app = FastAPI(
        title=settings.SITE_NAME,
        # Every path belongs to the filesystem, including /docs and /openapi.json
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings

    app.add_route("/{full_path:path}", serve_file, methods=ALL_METHODS, include_in_schema=False)

    return app


app = create_app()

"""
Command-line entry point for the demo static file server.

    python -m demo_server                       # serve web_demo/ on :8080
    python -m demo_server --port 9000 --root ./site
"""

import argparse
import logging
import sys

from demo_server.config import settings
from demo_server.main import create_app
from demo_server.server import StaticServer


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=f"{settings.SITE_NAME} static file server")
    parser.add_argument("--host", default=None, help=f"Interface to bind (default {settings.HOST})")
    parser.add_argument("--port", type=int, default=None, help=f"Port to bind (default {settings.PORT})")
    parser.add_argument("--root", default=None, help="Directory to serve files from")
    parser.add_argument("--log-level", default=None, help=f"Logging level (default {settings.LOG_LEVEL})")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(argv)

    overrides = {}
    if args.host is not None:
        overrides["HOST"] = args.host
    if args.port is not None:
        overrides["PORT"] = args.port
    if args.root is not None:
        overrides["STATIC_ROOT"] = args.root
    if args.log_level is not None:
        overrides["LOG_LEVEL"] = args.log_level.upper()
    active = settings.model_copy(update=overrides)

    logging.basicConfig(
        level=active.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    server = StaticServer(
        create_app(active),
        host=active.HOST,
        port=active.PORT,
        root=active.static_root_path,
        site_name=active.SITE_NAME,
        log_level=active.LOG_LEVEL,
    )
    return server.start()


if __name__ == "__main__":
    sys.exit(main())

"""Static HTML error pages returned for failed requests."""

from html import escape

_PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <title>{status_code} - {title}</title>
    <style>
        body {{ font-family: Arial, sans-serif; text-align: center; padding: 50px; background: #1a1a2e; color: white; }}
        h1 {{ color: {accent}; }}
        a {{ color: #4169e1; text-decoration: none; }}
        a:hover {{ text-decoration: underline; }}
    </style>
</head>
<body>
    <h1>{status_code} - {heading}</h1>
    <p>{message}</p>
    <p><a href="/">&larr; Back to {site_name}</a></p>
</body>
</html>
"""

NOT_FOUND_ACCENT = "#87ceeb"
SERVER_ERROR_ACCENT = "#ff6b6b"


def render_error_page(
    status_code: int,
    title: str,
    message: str,
    site_name: str,
    heading: str | None = None,
    accent: str = SERVER_ERROR_ACCENT,
) -> str:
    """
    Render a complete dark-themed error document.

    Every page links back to the site root so visitors can recover from
    a bad URL without editing the address bar.
    """
    return _PAGE_TEMPLATE.format(
        status_code=status_code,
        title=escape(title),
        heading=escape(heading or title),
        message=escape(message),
        site_name=escape(site_name),
        accent=accent,
    )


def not_found_page(site_name: str) -> str:
    return render_error_page(
        404,
        "Not Found",
        "The requested file could not be found.",
        site_name,
        heading="File Not Found",
        accent=NOT_FOUND_ACCENT,
    )


def server_error_page(site_name: str) -> str:
    return render_error_page(
        500,
        "Server Error",
        "An error occurred while reading the file.",
        site_name,
    )

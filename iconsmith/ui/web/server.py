"""
Preview server — Flask app serving the icon browser over HTTP.

Opening the generated page from ``file://`` works in most browsers but
some block the relative SVG loads. ``iconsmith serve`` renders the same
page on request and serves the SVG directory next to it:

    /              → browser page
    /icons/<name>  → SVG file from the source directory
"""

from __future__ import annotations

import html
import logging

from flask import Flask, abort, send_from_directory

from iconsmith.core.models.config import BrowserConfig, ProjectPaths
from iconsmith.core.services.directories import PreconditionError
from iconsmith.ui.web.browser import load_icon_names, render_browser

logger = logging.getLogger(__name__)

ICON_ROUTE_PREFIX = "icons/"


def create_app(paths: ProjectPaths, settings: BrowserConfig | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        paths: Resolved project paths.
        settings: Browser page settings.

    Returns:
        Configured Flask application.
    """
    app = Flask(__name__)

    settings = settings or BrowserConfig()

    @app.get("/")
    def index():  # type: ignore[no-untyped-def]
        try:
            names = load_icon_names(paths)
        except PreconditionError as e:
            return f"<!doctype html><p>{html.escape(str(e))}</p>", 404
        return render_browser(
            names,
            ICON_ROUTE_PREFIX,
            settings,
            source_label=paths.relative(paths.source_dir),
        )

    @app.get("/icons/<path:filename>")
    def icon(filename: str):  # type: ignore[no-untyped-def]
        if not filename.lower().endswith(".svg"):
            abort(404)
        return send_from_directory(paths.source_dir, filename, mimetype="image/svg+xml")

    return app


def run_server(app: Flask, host: str = "127.0.0.1", port: int = 8000, debug: bool = False) -> None:
    """Start the development server (blocking)."""
    logger.info("Serving icon browser on http://%s:%d", host, port)
    app.run(host=host, port=port, debug=debug, use_reloader=False)

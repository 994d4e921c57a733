"""
Portfolio site Flask app.

- Factory: create_app(config=None)
- Routes (pages blueprint):
    GET /              -> home.html
    GET /projects      -> projects.html (one card per PROJECTS entry)
    GET /writing       -> writing.html
    GET /learning      -> learning.html
    GET /funsies       -> funsies.html
    GET /nav/<label>   -> highlight the nav control, redirect to its target
- Anything else renders not_found.html with a 404
- Site data via app.config: NAV_LINKS, PROJECTS, SOCIAL_LINKS
- Dependency Injection via app.config: SCHEDULER (reset timers)
"""

from __future__ import annotations

import logging
import os

from flask import Flask, render_template, request

from . import content
from .highlight import DEFAULT_RESET_MS, HighlightRegistry
from .pages import bp as pages_bp
from .pages import visitor_highlight

logger = logging.getLogger(__name__)


# ---------------- helpers ----------------

def _env_positive_int(name: str, default: int) -> int:
    """Positive integer env var; unset, malformed or <= 0 falls back to default."""
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("ignoring non-integer %s=%r", name, raw)
        return default
    if value <= 0:
        logger.warning("ignoring non-positive %s=%r", name, raw)
        return default
    return value


# --------------- factory ---------------

def create_app(config: dict | None = None) -> Flask:
    app = Flask(__name__, template_folder="templates", static_folder="static")
    app.config.update(
        TESTING=False,
        SECRET_KEY=os.getenv("PORTFOLIO_SECRET_KEY", "dev"),
        SITE_OWNER=os.getenv("PORTFOLIO_OWNER", "Yimin"),
        HIGHLIGHT_RESET_MS=_env_positive_int("PORTFOLIO_HIGHLIGHT_RESET_MS", DEFAULT_RESET_MS),
        NAV_LINKS=content.NAV_LINKS,
        PROJECTS=content.PROJECTS,
        SOCIAL_LINKS=content.SOCIAL_LINKS,
        # DI hook (tests can provide a manual one):
        SCHEDULER=None,  # obj with schedule(delay, fn) -> handle.cancel(), now()
    )
    if config:
        app.config.update(config)

    # Fail at startup, not on first request
    app.config["NAV_LINKS"] = content.validate_nav_links(app.config["NAV_LINKS"])
    app.config["PROJECTS"] = content.validate_projects(app.config["PROJECTS"])
    app.config["SOCIAL_LINKS"] = tuple(app.config["SOCIAL_LINKS"])
    reset_ms = int(app.config["HIGHLIGHT_RESET_MS"])
    if reset_ms <= 0:
        raise ValueError(f"HIGHLIGHT_RESET_MS must be positive, got {reset_ms}")
    app.config["HIGHLIGHT_RESET_MS"] = reset_ms

    app.highlights = HighlightRegistry(
        app.config["HIGHLIGHT_RESET_MS"], app.config["SCHEDULER"]
    )
    app.register_blueprint(pages_bp)

    @app.context_processor
    def navbar_context():
        """Every page gets what partials/navbar.html needs."""
        return {
            "site_owner": app.config["SITE_OWNER"],
            "nav_links": app.config["NAV_LINKS"],
            "logo_label": content.LOGO_LABEL,
            "highlight": visitor_highlight(),
        }

    @app.errorhandler(404)
    def not_found(_err):
        logger.info("404 for %s", request.path)
        return render_template("not_found.html", active=None), 404

    logger.debug(
        "portfolio app ready: %d nav links, %d projects",
        len(app.config["NAV_LINKS"]),
        len(app.config["PROJECTS"]),
    )
    return app

"""
Route table for the site.

Each page route sets `active` so base.html can mark the current page in the
navbar. Navbar clicks go through /nav/<label>, which records the highlight for
this visitor and then redirects to the link's real target.
"""

import logging

from flask import Blueprint, abort, current_app, redirect, render_template, session

from .content import UnknownNavLabel, nav_target

logger = logging.getLogger(__name__)

bp = Blueprint("pages", __name__)


def visitor_highlight():
    """Highlight snapshot for this render; neutral for visitors who never clicked."""
    return current_app.highlights.view(session.get("visitor"))


def _visitor_id():
    visitor = session.get("visitor")
    if not visitor:
        visitor = current_app.highlights.new_visitor_id()
        session["visitor"] = visitor
    return visitor


# Home: profile image, intro, social links
@bp.get("/")
def home():
    return render_template(
        "home.html",
        active="home",
        social_links=current_app.config["SOCIAL_LINKS"],
    )


# /projects: one card per configured project
@bp.get("/projects")
def projects():
    return render_template(
        "projects.html",
        active="projects",
        projects=current_app.config["PROJECTS"],
    )


@bp.get("/writing")
def writing():
    return render_template("writing.html", active="writing")


@bp.get("/learning")
def learning():
    return render_template("learning.html", active="learning")


@bp.get("/funsies")
def funsies():
    return render_template("funsies.html", active="funsies")


@bp.get("/nav/<label>")
def activate(label):
    """Highlight the clicked control, then navigate to where it points."""
    try:
        target = nav_target(current_app.config["NAV_LINKS"], label)
    except UnknownNavLabel:
        logger.info("unknown nav label %r", label)
        abort(404)
    current_app.highlights.activate(_visitor_id(), label)
    return redirect(target)

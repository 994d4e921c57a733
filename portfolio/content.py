"""
Static site content: nav links, project cards, social links.

Everything here is fixed at startup. create_app() copies the defaults into
app.config (NAV_LINKS, PROJECTS, SOCIAL_LINKS) so tests or a deployment can
swap them, and runs the validators below before serving anything.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

# Reserved label for the home/logo link in the navbar.
LOGO_LABEL = "logo"
PLACEHOLDER_LINK = "#"


class ContentError(ValueError):
    """Raised when the configured site content is inconsistent."""


class UnknownNavLabel(KeyError):
    """No nav link (and not the logo) carries this label."""


@dataclass(frozen=True)
class NavLink:
    label: str
    target: str


@dataclass(frozen=True)
class ProjectRecord:
    title: str
    category: str
    description: str
    link: str = PLACEHOLDER_LINK
    image: Optional[str] = None

    @property
    def is_linked(self) -> bool:
        """True when the card should open `link` in a new tab."""
        return bool(self.link) and self.link != PLACEHOLDER_LINK

    @property
    def has_image(self) -> bool:
        return bool(self.image)

    @property
    def image_is_url(self) -> bool:
        """Absolute URL or site path; anything else lives under static/."""
        return bool(self.image) and self.image.startswith(("http://", "https://", "//", "/"))


@dataclass(frozen=True)
class SocialLink:
    label: str
    href: str
    new_tab: bool = True


# ---------------- defaults ----------------

NAV_LINKS = (
    NavLink("Projects", "/projects"),
    NavLink("Writing", "/writing"),
    NavLink("Learning", "/learning"),
    NavLink("Funsies", "/funsies"),
)

PROJECTS = (
    ProjectRecord(
        title="Experiential Map",
        category="DESIGN / RESEARCH",
        description=(
            "An interactive world map that visualizes how different activities "
            "are salient in different countries, using LLM scoring and map exploration."
        ),
    ),
    ProjectRecord(
        title="Neural Decoding Analysis",
        category="COMPUTATIONAL NEUROSCIENCE",
        description=(
            "Logistic regression and PCA based decoders for calcium imaging data, "
            "decoding choice and force direction across sessions."
        ),
    ),
    ProjectRecord(
        title="Personal Website",
        category="LEARNING FLASK",
        description=(
            "This site you are looking at right now. A space to experiment with "
            "design, writing, and small projects."
        ),
    ),
)

SOCIAL_LINKS = (
    SocialLink("GitHub", "https://github.com/amoveablefeastym"),
    SocialLink("LinkedIn", "https://www.linkedin.com/in/yimin-huang-nu"),
    SocialLink("Email", "mailto:h1683618346@gmail.com", new_tab=False),
    SocialLink("Twitter", "https://twitter.com/your-handle"),
)


# ---------------- validation ----------------

def _fail(msg: str):
    logger.error("invalid site content: %s", msg)
    raise ContentError(msg)


def validate_nav_links(links: Iterable[NavLink]) -> tuple:
    """Return links as a tuple; labels unique, non-reserved, targets absolute."""
    links = tuple(links)
    seen = set()
    for link in links:
        if not link.label:
            _fail("nav link with empty label")
        if "/" in link.label:
            _fail(f"nav label {link.label!r} cannot contain '/' (it is a URL segment)")
        if link.label == LOGO_LABEL:
            _fail(f"nav label {LOGO_LABEL!r} is reserved for the home link")
        if link.label in seen:
            _fail(f"duplicate nav label {link.label!r}")
        if not link.target.startswith("/"):
            _fail(f"nav target for {link.label!r} must be an absolute path, got {link.target!r}")
        seen.add(link.label)
    return links


def validate_projects(projects: Iterable[ProjectRecord]) -> tuple:
    projects = tuple(projects)
    titles = set()
    for p in projects:
        if not p.title:
            _fail("project with empty title")
        if p.title in titles:
            _fail(f"duplicate project title {p.title!r}")
        titles.add(p.title)
    return projects


def nav_target(links: Iterable[NavLink], label: str) -> str:
    """Path a nav label points at; the logo always goes home."""
    if label == LOGO_LABEL:
        return "/"
    for link in links:
        if link.label == label:
            return link.target
    raise UnknownNavLabel(label)

import os, sys

import pytest
from bs4 import BeautifulSoup

# Ensure repo root is on sys.path so "portfolio" imports work when running from repo root
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))


class ManualScheduler:
    """Stands in for threading timers: time only moves when a test calls advance()."""

    class Handle:
        def __init__(self, due, callback):
            self.due = due
            self.callback = callback
            self.cancelled = False
            self.fired = False

        def cancel(self):
            self.cancelled = True

    def __init__(self):
        self.clock = 0.0
        self.handles = []

    def now(self):
        return self.clock

    def schedule(self, delay, callback):
        h = self.Handle(self.clock + delay, callback)
        self.handles.append(h)
        return h

    def pending(self):
        return [h for h in self.handles if not h.cancelled and not h.fired]

    def advance(self, ms):
        self.clock += ms / 1000.0
        for h in list(self.handles):
            if not h.cancelled and not h.fired and h.due <= self.clock + 1e-9:
                h.fired = True
                h.callback()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def app(scheduler):
    from portfolio.app import create_app

    cfg = {
        "TESTING": True,
        "SECRET_KEY": "test",
        "SCHEDULER": scheduler,
        "HIGHLIGHT_RESET_MS": 600,
    }
    return create_app(cfg)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def soup():
    def _s(html: bytes | str):
        return BeautifulSoup(html, "lxml")
    return _s


@pytest.fixture
def emphasized(soup):
    """Labels the navbar currently renders with the emphasis class."""
    def _e(html):
        nav = soup(html).select_one('[data-testid="navbar"]')
        return [a["data-label"] for a in nav.select(".is-emphasized")]
    return _e

"""
Navbar highlight: which nav control was activated last.

Each navbar instance (one per visitor session) owns a HighlightState:

    Neutral --activate(L)--> Activated(L) --after interval--> Neutral

Every activation cancels the pending reset and schedules a fresh one, so the
newest activation's timer always governs. Resets also carry the generation
they were scheduled for; one that fires late (cancel lost the race with the
timer thread) sees a newer generation and does nothing.
"""

from __future__ import annotations

import logging
import secrets
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_RESET_MS = 600


class ThreadingScheduler:
    """schedule(delay, fn) backed by daemon threading.Timer objects."""

    def schedule(self, delay: float, callback: Callable[[], None]):
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer

    def now(self) -> float:
        return time.monotonic()


@dataclass(frozen=True)
class HighlightView:
    """What one navbar render sees: the label and time left, read together."""

    label: Optional[str] = None
    remaining_ms: int = 0

    def is_emphasized(self, label: str) -> bool:
        return self.label is not None and self.label == label


NEUTRAL = HighlightView()


class HighlightState:
    def __init__(
        self,
        interval_ms: int = DEFAULT_RESET_MS,
        scheduler: Any = None,
        on_neutral: Optional[Callable[["HighlightState"], None]] = None,
    ):
        self.interval_ms = int(interval_ms)
        self._scheduler = scheduler or ThreadingScheduler()
        self._on_neutral = on_neutral
        self._lock = threading.Lock()
        self._label: Optional[str] = None
        self._generation = 0
        self._pending = None
        self._activated_at: Optional[float] = None

    @property
    def current(self) -> Optional[str]:
        """Activated label, or None when neutral."""
        with self._lock:
            return self._label

    def is_emphasized(self, label: str) -> bool:
        return self.snapshot().is_emphasized(label)

    def remaining_ms(self) -> int:
        """Milliseconds left before the pending reset; 0 when neutral."""
        return self.snapshot().remaining_ms

    def snapshot(self) -> HighlightView:
        with self._lock:
            if self._label is None or self._activated_at is None:
                return NEUTRAL
            label = self._label
            elapsed = (self._scheduler.now() - self._activated_at) * 1000.0
        return HighlightView(label, max(0, int(round(self.interval_ms - elapsed))))

    def activate(self, label: str) -> None:
        if not label:
            raise ValueError("cannot activate an empty label")
        with self._lock:
            if self._pending is not None:
                self._pending.cancel()
            self._generation += 1
            generation = self._generation
            self._label = label
            self._activated_at = self._scheduler.now()
            self._pending = self._scheduler.schedule(
                self.interval_ms / 1000.0, lambda: self._reset(generation)
            )
        logger.debug("highlight -> %r (gen %d)", label, generation)

    def _reset(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                logger.debug("stale reset for gen %d ignored", generation)
                return
            self._label = None
            self._activated_at = None
            self._pending = None
        logger.debug("highlight -> neutral")
        # called without our lock held; the registry takes its own lock first
        if self._on_neutral is not None:
            self._on_neutral(self)


class HighlightRegistry:
    """
    HighlightState per visitor id, kept only while Activated.

    A state is created by activate() and dropped as soon as its reset brings
    it back to Neutral, so visitors that never click anything (or stopped
    clicking) cost nothing. view() never creates a state.
    """

    def __init__(self, interval_ms: int = DEFAULT_RESET_MS, scheduler: Any = None):
        self.interval_ms = int(interval_ms)
        self.scheduler = scheduler or ThreadingScheduler()
        self._states: Dict[str, HighlightState] = {}
        self._lock = threading.Lock()

    @staticmethod
    def new_visitor_id() -> str:
        return secrets.token_urlsafe(16)

    def view(self, visitor_id: Optional[str]) -> HighlightView:
        if not visitor_id:
            return NEUTRAL
        with self._lock:
            state = self._states.get(visitor_id)
        return state.snapshot() if state is not None else NEUTRAL

    def activate(self, visitor_id: str, label: str) -> None:
        # Under the registry lock so a reset can't drop the state in between.
        with self._lock:
            state = self._states.get(visitor_id)
            if state is None:
                state = HighlightState(
                    self.interval_ms,
                    self.scheduler,
                    on_neutral=lambda s, vid=visitor_id: self._drop(vid, s),
                )
                self._states[visitor_id] = state
            state.activate(label)

    def _drop(self, visitor_id: str, state: HighlightState) -> None:
        with self._lock:
            if self._states.get(visitor_id) is state and state.current is None:
                del self._states[visitor_id]

    def __contains__(self, visitor_id: str) -> bool:
        with self._lock:
            return visitor_id in self._states

    def __len__(self) -> int:
        return len(self._states)

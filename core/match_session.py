# core/match_session.py
"""
MatchSession – one play-through of the shape list.

The session knows nothing about pygame: it holds the ordered shapes, the index
of the shape currently on screen and the number of correct matches.  Only a
correct drop moves the index forward, so ``correct_count == current_index``
at all times and a finished game is always a full score.  Wrong drops are not
counted; there is no mistake tally.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

from core.shape_assets import ShapeBundle

logger = logging.getLogger(__name__)


class SessionState(enum.Enum):
    PLAYING  = "playing"
    COMPLETE = "complete"


@dataclass(frozen=True)
class PlayingView:
    bundle:        ShapeBundle
    position:      int          # 1-based
    total:         int
    remaining:     int          # includes the shape on screen
    correct_count: int


@dataclass(frozen=True)
class CompleteView:
    correct_count: int
    total:         int


CurrentView = Union[PlayingView, CompleteView]


class MatchSession:
    def __init__(self, shapes: Sequence[ShapeBundle]):
        if not shapes:
            raise ValueError("a match session needs at least one shape")
        self.shapes: Tuple[ShapeBundle, ...] = tuple(shapes)
        self.current_index = 0
        self.correct_count = 0

    # ───────── state ─────────
    @property
    def total(self) -> int:
        return len(self.shapes)

    @property
    def state(self) -> SessionState:
        if self.current_index >= self.total:
            return SessionState.COMPLETE
        return SessionState.PLAYING

    @property
    def is_complete(self) -> bool:
        return self.state is SessionState.COMPLETE

    # ───────── operations ─────────
    def submit_match(self, candidate_name: object) -> bool:
        """Return True and advance if *candidate_name* is the current shape."""
        if self.is_complete:
            return False
        expected = self.shapes[self.current_index].name
        if not isinstance(candidate_name, str) or candidate_name != expected:
            logger.debug("Rejected %r (expected %r)", candidate_name, expected)
            return False

        self.correct_count += 1
        self.current_index += 1
        logger.info("Matched %r (%d/%d)", expected, self.correct_count, self.total)
        return True

    def reset(self) -> None:
        self.current_index = 0
        self.correct_count = 0
        logger.info("Session reset")

    def current(self) -> CurrentView:
        if self.is_complete:
            return CompleteView(correct_count=self.correct_count, total=self.total)
        return PlayingView(
            bundle=self.shapes[self.current_index],
            position=self.current_index + 1,
            total=self.total,
            remaining=self.total - self.current_index,
            correct_count=self.correct_count,
        )

    def progress_text(self) -> str:
        view = self.current()
        if isinstance(view, CompleteView):
            return f"All done! Correct matches: {view.correct_count} / {view.total}"
        return f"Match #{view.position} of {view.total} - Correct: {view.correct_count}"

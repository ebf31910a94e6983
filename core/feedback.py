"""
CueFeedback – the pause between a correct drop and the next shape.

After a match the scene plays the shape's audio cue and shows the name.  The
next shape appears once the cue has finished *and* the short confetti pause
is over.  If the cue never reports that it finished (no mixer, broken codec,
no free channel) the fallback deadline ends the pause anyway.
"""
from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


class CueFeedback:
    def __init__(self, min_delay: float, fallback_delay: float):
        self.min_delay      = min_delay
        self.fallback_delay = fallback_delay

        self._bundle: Any     = None
        self._elapsed         = 0.0
        self._deadline        = 0.0
        self._cue_done        = False

    # ----------------------------------------------------------------
    @property
    def active(self) -> bool:
        return self._bundle is not None

    @property
    def bundle(self) -> Any:
        """The bundle that was just matched, or None when idle."""
        return self._bundle

    def start(self, bundle: Any, cue_length: float | None = None) -> None:
        self._bundle   = bundle
        self._elapsed  = 0.0
        self._cue_done = False
        if cue_length is None or cue_length <= 0:
            deadline = self.fallback_delay
        else:
            deadline = cue_length + self.fallback_delay
        self._deadline = max(deadline, self.min_delay)

    def cue_finished(self) -> None:
        if self.active:
            self._cue_done = True

    def cancel(self) -> None:
        self._bundle = None

    def update(self, dt: float) -> bool:
        """Advance the clock; True exactly once, when the pause is over."""
        if not self.active:
            return False
        self._elapsed += dt

        if self._cue_done and self._elapsed >= self.min_delay:
            self._bundle = None
            return True
        if self._elapsed >= self._deadline:
            logger.warning("Cue for %r did not report completion; advancing on timer",
                           getattr(self._bundle, "name", self._bundle))
            self._bundle = None
            return True
        return False

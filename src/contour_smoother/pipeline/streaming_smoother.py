"""Frame-by-frame driver for real-time smoothing.

Hosts that receive pitch estimates one hop at a time push each frame and get
back the frames that can no longer change. A frame is final once the pass has
moved past it; the pass advances only when enough lookahead is buffered for
the correction at the cursor to match a full-contour smooth().

Pipeline: pitch estimator -> StreamingContourSmoother -> display / analysis
"""

from __future__ import annotations

import logging
from typing import List, Optional

from contour_smoother.config import SmootherConfig
from contour_smoother.frame import PitchFrame
from contour_smoother.smoother.smart_median import clamp_first_frame, correct_frame

logger = logging.getLogger(__name__)


class StreamingContourSmoother:
    """Incremental smart-median smoother with fixed latency.

    Output is identical to smooth() over the whole contour when
    no_zero >= 2. With no_zero == 1 the jump rule depends on whether any
    unvoiced frame exists anywhere later in the contour, which a bounded
    buffer cannot know.

    Interface:
      smoother = StreamingContourSmoother(SmootherConfig())
      for frame in estimator_frames:
          for done in smoother.push(frame):
              consume(done)
      for done in smoother.flush():   # end of contour
          consume(done)
    """

    def __init__(self, config: Optional[SmootherConfig] = None):
        self.config = (config or SmootherConfig()).validate()
        self._frames: List[PitchFrame] = []
        self._cursor = 1
        self._emit_from = 0
        self._total = 0

    @property
    def latency(self) -> int:
        """Frames held back before the oldest pending frame is final."""
        return self.config.lookahead

    @property
    def pending(self) -> int:
        """Frames buffered but not yet returned."""
        return len(self._frames) - self._emit_from

    def push(self, frame: PitchFrame) -> List[PitchFrame]:
        """Add the next frame; returns frames that became final (may be empty)."""
        self._frames.append(frame)
        self._total += 1
        if self._total == 1:
            clamp_first_frame(self._frames, self.config)
        return self._advance(final=False)

    def flush(self) -> List[PitchFrame]:
        """Finish the contour; returns all remaining frames and resets."""
        if not self._frames:
            return []
        ready = self._advance(final=True)
        logger.debug("stream flushed after %d frames", self._total)
        self.reset()
        return ready

    def reset(self) -> None:
        """Drop all state (e.g. new phrase or new take)."""
        self._frames = []
        self._cursor = 1
        self._emit_from = 0
        self._total = 0

    def _advance(self, final: bool) -> List[PitchFrame]:
        frames = self._frames
        while self._cursor < len(frames) and (
            final or self._cursor + self.latency < len(frames)
        ):
            last, _ = correct_frame(frames, self._cursor, self.config)
            self._cursor = last + 1

        ready = frames[self._emit_from : self._cursor]
        self._emit_from = self._cursor
        self._trim()
        return ready

    def _trim(self) -> None:
        # Keep the left context the median window and the predecessor check need
        keep = max(self.config.prior_distance, 1)
        drop = self._cursor - keep
        if drop > 0:
            del self._frames[:drop]
            self._cursor -= drop
            self._emit_from -= drop

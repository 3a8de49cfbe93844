"""Smart-median smoothing of singing pitch contours.

Implements the algorithm from:
  Smart-Median: A new real-time algorithm for smoothing singing pitch contours

One forward pass over the contour. Each frame is checked against its
predecessor and corrected in place:
- implausible jumps (octave errors) -> shrinking-window median
- short unvoiced runs between voiced frames (dropouts) -> backfilled by median
- isolated voiced blips after silence, frames above the ceiling -> 0

Minimal deps: none (stdlib only).
"""

from __future__ import annotations

import logging
from typing import MutableSequence, Optional, Tuple

from contour_smoother.config import SmootherConfig
from contour_smoother.exceptions import InvalidInputError
from contour_smoother.frame import PitchFrame
from contour_smoother.stats import count_zeros, local_window, median

logger = logging.getLogger(__name__)


def _replace(frames: MutableSequence[PitchFrame], k: int, frequency: float, rule: str) -> int:
    """Rewrite frame k's frequency; returns 1 if it changed, else 0."""
    old = frames[k].frequency
    if old == frequency:
        return 0
    frames[k] = frames[k].with_frequency(frequency)
    logger.debug("frame %d: %s -> %s Hz (%s)", k, old, frequency, rule)
    return 1


def _shrinking_estimate(
    frames: MutableSequence[PitchFrame],
    k: int,
    reference: float,
    config: SmootherConfig,
    drop_zeros: bool,
) -> float:
    """Median of [k - prior, k + fd], shrinking fd until it lands near reference.

    At most following_distance + 1 windows are tried; if none is within
    acceptable_frequency_difference of reference the last median is used.
    An estimate at or above max_frequency (>=, not only >) becomes 0.
    """
    estimate = 0.0
    for fd in range(config.following_distance, -1, -1):
        window = local_window(frames, k - config.prior_distance, k + fd)
        if drop_zeros:
            window = [f for f in window if f != 0]
        estimate = median(window)
        if abs(estimate - reference) <= config.acceptable_frequency_difference:
            break
    return estimate if estimate < config.max_frequency else 0.0


def clamp_first_frame(frames: MutableSequence[PitchFrame], config: SmootherConfig) -> int:
    """Silence frame 0 if it is above the ceiling. Returns frames rewritten."""
    first = frames[0].frequency
    if first is not None and first > config.max_frequency:
        return _replace(frames, 0, 0.0, "ceiling")
    return 0


def correct_frame(
    frames: MutableSequence[PitchFrame],
    i: int,
    config: SmootherConfig,
) -> Tuple[int, int]:
    """Apply the smoothing rules at index i (i >= 1).

    Args:
        frames: Contour, mutated in place.
        i: Current index.
        config: Validated configuration.

    Returns:
        (last, rewritten): last index handled (the pass continues at
        last + 1) and number of frames whose frequency changed.
    """
    cur = frames[i].frequency
    if cur is None:
        return i, 0
    prev = frames[i - 1].frequency
    if prev is None:
        return i, 0

    zero_run = count_zeros(frames, i)

    if prev > 0:
        if abs(cur - prev) > config.acceptable_frequency_difference:
            if zero_run >= config.no_zero:
                # Genuine rest ahead; handled when the pass reaches it
                return i, 0
            estimate = _shrinking_estimate(frames, i, prev, config, drop_zeros=True)
            return i, _replace(frames, i, estimate, "jump")

        if cur == 0:
            if zero_run >= config.no_zero:
                # Rest confirmed
                return i, 0
            # Dropout: backfill the whole run, zeros included in the window
            last = min(i + zero_run, len(frames) - 1)
            rewritten = 0
            for j in range(i, last + 1):
                if frames[j].frequency is None:
                    continue
                estimate = _shrinking_estimate(frames, j, prev, config, drop_zeros=False)
                rewritten += _replace(frames, j, estimate, "dropout")
            return last, rewritten

        if cur > config.max_frequency:
            return i, _replace(frames, i, 0.0, "ceiling")
        return i, 0

    if prev == 0:
        nxt: Optional[float] = frames[i + 1].frequency if i < len(frames) - 1 else None
        if cur > config.max_frequency or (
            nxt is not None and abs(cur - nxt) > config.acceptable_frequency_difference
        ):
            return i, _replace(frames, i, 0.0, "blip")
    return i, 0


def smooth(
    frames: MutableSequence[PitchFrame],
    max_frequency: float = 1200,
    prior_distance: int = 4,
    following_distance: int = 4,
    acceptable_frequency_difference: float = 100,
    no_zero: int = 4,
    config: Optional[SmootherConfig] = None,
) -> MutableSequence[PitchFrame]:
    """Smooth a pitch contour in place.

    The caller's list is mutated (entries are replaced by corrected copies,
    never inserted, removed or reordered) and the same list object is
    returned.

    Args:
        frames: Contour, at least one frame.
        max_frequency: Ceiling in Hz; frames above are silenced.
        prior_distance: Frames before the current one in the median window.
        following_distance: Maximum frames after the current one in the window.
        acceptable_frequency_difference: Largest plausible step (Hz) between
            consecutive frames.
        no_zero: Unvoiced frames needed to accept a rest.
        config: If given, used instead of the individual parameters.

    Returns:
        frames (same object).

    Raises:
        InvalidInputError: frames is empty or a median window is empty.
        ConfigurationError: degenerate parameters.
    """
    if config is None:
        config = SmootherConfig(
            max_frequency=max_frequency,
            prior_distance=prior_distance,
            following_distance=following_distance,
            acceptable_frequency_difference=acceptable_frequency_difference,
            no_zero=no_zero,
        )
    config.validate()
    if len(frames) == 0:
        raise InvalidInputError("cannot smooth an empty contour")

    rewritten = clamp_first_frame(frames, config)
    i = 1
    while i < len(frames):
        last, n = correct_frame(frames, i, config)
        rewritten += n
        i = last + 1

    logger.debug("smoothed %d frames, %d rewritten", len(frames), rewritten)
    return frames


class SmartMedianSmoother:
    """Reusable smoother bound to one configuration.

    Interface:
      smoother = SmartMedianSmoother(SmootherConfig.soprano())
      frames = smoother(frames)   # same as smooth(frames, config=...)
    """

    def __init__(self, config: Optional[SmootherConfig] = None):
        self.config = (config or SmootherConfig()).validate()

    def smooth(self, frames: MutableSequence[PitchFrame]) -> MutableSequence[PitchFrame]:
        return smooth(frames, config=self.config)

    __call__ = smooth

"""Numeric helpers over a pitch contour: zero runs, local windows, median.

Minimal deps: none (stdlib only).
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from contour_smoother.exceptions import InvalidInputError
from contour_smoother.frame import PitchFrame


def _rounds_to_zero(frequency: Optional[float]) -> bool:
    # Round half to even: 0.5 and -0.5 both round to 0; no estimate counts as 0
    return frequency is None or -0.5 <= frequency <= 0.5


def count_zeros(frames: Sequence[PitchFrame], from_index: int) -> int:
    """Length of the unvoiced span starting at or after from_index.

    Measured as the distance from the first frame at/after from_index whose
    frequency rounds to 0 to the first frame at/after from_index that is
    voiced. This is not a literal count of zero frames:
    - no voiced frame follows: the last index is the right boundary
    - no zero frame found: the left boundary is from_index - 1
    - frames without an estimate end the search for the first zero but
      are never voiced
    Negative distances are clamped to 0.

    Args:
        frames: The contour.
        from_index: Index to start searching from.

    Returns:
        Zero-run length (>= 0).
    """
    start = max(from_index, 0)
    first_zero = start - 1
    for k in range(start, len(frames)):
        if _rounds_to_zero(frames[k].frequency):
            first_zero = k
            break

    next_voiced = len(frames) - 1
    for k in range(start, len(frames)):
        if frames[k].voiced:
            next_voiced = k
            break

    return max(next_voiced - first_zero, 0)


def local_window(frames: Sequence[PitchFrame], start_index: int, end_index: int) -> List[float]:
    """Frequencies over the inclusive range [start_index, end_index].

    Indices are clamped to the contour; an empty range gives an empty list.
    Frames without an estimate are skipped.
    """
    start = max(start_index, 0)
    end = min(end_index, len(frames) - 1)
    return [
        frames[k].frequency
        for k in range(start, end + 1)
        if frames[k].frequency is not None
    ]


def median(values: Sequence[float]) -> float:
    """Standard median: mean of the two central values for an even count.

    Raises:
        InvalidInputError: values is empty.
    """
    if not values:
        raise InvalidInputError("median of an empty window")
    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) / 2
    return ordered[mid]

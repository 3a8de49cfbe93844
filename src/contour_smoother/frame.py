"""Per-frame pitch record and numpy interop.

A contour is a plain list of PitchFrame. Frequency semantics:
- None: no estimate for this frame
- 0: explicit unvoiced / silence
- > 0: voiced pitch in Hz
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple

import numpy as np

from contour_smoother.exceptions import InvalidInputError


@dataclass(frozen=True)
class PitchFrame:
    """One pitch estimate at a fixed analysis hop."""

    time: Optional[float] = None  # seconds
    frequency: Optional[float] = None  # Hz
    amplitude: Optional[float] = None  # energy / confidence, passed through

    @property
    def voiced(self) -> bool:
        return self.frequency is not None and self.frequency > 0

    def with_frequency(self, frequency: Optional[float]) -> "PitchFrame":
        """Copy of this frame carrying a new frequency (time/amplitude kept)."""
        return replace(self, frequency=frequency)


def _optional(value: float) -> Optional[float]:
    value = float(value)
    return None if np.isnan(value) else value


def frames_from_arrays(
    times: Sequence[float],
    frequencies: Sequence[float],
    amplitudes: Optional[Sequence[float]] = None,
) -> List[PitchFrame]:
    """Build a contour from parallel arrays.

    NaN marks a missing value (as in librosa.pyin output for f0). Unvoiced
    frames must be given as 0 to be treated as silence rather than as
    "no estimate".

    Args:
        times: Frame times in seconds, shape (n,).
        frequencies: F0 in Hz, shape (n,).
        amplitudes: Optional per-frame amplitude/confidence, shape (n,).

    Returns:
        List of PitchFrame, length n.
    """
    t = np.asarray(times, dtype=np.float64).ravel()
    f0 = np.asarray(frequencies, dtype=np.float64).ravel()
    if amplitudes is None:
        amp = np.full(f0.shape, np.nan)
    else:
        amp = np.asarray(amplitudes, dtype=np.float64).ravel()
    if not (len(t) == len(f0) == len(amp)):
        raise InvalidInputError(
            f"Array lengths differ: times={len(t)}, frequencies={len(f0)}, amplitudes={len(amp)}"
        )
    return [
        PitchFrame(time=_optional(ti), frequency=_optional(fi), amplitude=_optional(ai))
        for ti, fi, ai in zip(t, f0, amp)
    ]


def frames_to_arrays(frames: Sequence[PitchFrame]) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Inverse of frames_from_arrays: (times, frequencies, amplitudes), None -> NaN."""

    def column(attr: str) -> np.ndarray:
        return np.array(
            [np.nan if getattr(f, attr) is None else getattr(f, attr) for f in frames],
            dtype=np.float64,
        )

    return column("time"), column("frequency"), column("amplitude")

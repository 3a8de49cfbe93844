"""Smoother parameters.

All thresholds are caller-supplied; defaults suit a singing voice:
- Ceiling: 1200 Hz (anything above is an estimator error)
- Median window: 4 frames back, up to 4 frames ahead
- Jump tolerance: 100 Hz between consecutive frames
- Rest: more than 4 consecutive unvoiced frames
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass

from contour_smoother.exceptions import ConfigurationError, ConfigurationWarning

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SmootherConfig:
    """Smart-median smoothing configuration."""

    # Hz; frames above are clamped to 0
    max_frequency: float = 1200.0

    # Median window, in frames, around the frame being corrected
    prior_distance: int = 4
    following_distance: int = 4

    # Hz; larger steps between consecutive frames count as jumps
    acceptable_frequency_difference: float = 100.0

    # Minimum unvoiced run (frames) accepted as a genuine rest
    no_zero: int = 4

    @classmethod
    def default(cls) -> "SmootherConfig":
        return cls()

    @classmethod
    def speech(cls) -> "SmootherConfig":
        """Spoken voice: F0 rarely leaves 60-500 Hz."""
        return cls(max_frequency=600.0, acceptable_frequency_difference=60.0)

    @classmethod
    def soprano(cls) -> "SmootherConfig":
        """High voices: higher ceiling and wider legitimate leaps."""
        return cls(max_frequency=1600.0, acceptable_frequency_difference=150.0)

    @property
    def lookahead(self) -> int:
        """Frames past the current one that can influence its correction."""
        return self.no_zero + self.following_distance + 1

    def validate(self) -> "SmootherConfig":
        """Check parameters; returns self so calls can be chained.

        Raises:
            ConfigurationError: following_distance < 0, prior_distance < 0
                or no_zero <= 0.

        Warns:
            ConfigurationWarning: max_frequency <= 0 or
                acceptable_frequency_difference < 0.
        """
        if self.following_distance < 0:
            raise ConfigurationError("following_distance must be >= 0")
        if self.prior_distance < 0:
            raise ConfigurationError("prior_distance must be >= 0")
        if self.no_zero <= 0:
            raise ConfigurationError("no_zero must be >= 1")

        if self.max_frequency <= 0:
            self._warn(f"max_frequency={self.max_frequency} clamps every voiced frame to 0")
        if self.acceptable_frequency_difference < 0:
            self._warn(
                f"acceptable_frequency_difference={self.acceptable_frequency_difference} "
                "treats every step as a jump"
            )
        return self

    @staticmethod
    def _warn(message: str) -> None:
        logger.warning(message)
        warnings.warn(message, ConfigurationWarning, stacklevel=3)

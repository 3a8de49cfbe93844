"""Singing pitch contour smoother - frame model, zero-run/median helpers, smart-median pass, streaming driver."""

from contour_smoother.config import SmootherConfig
from contour_smoother.exceptions import ConfigurationError, ConfigurationWarning, InvalidInputError
from contour_smoother.frame import PitchFrame, frames_from_arrays, frames_to_arrays
from contour_smoother.pipeline import StreamingContourSmoother
from contour_smoother.smoother import SmartMedianSmoother, smooth
from contour_smoother.stats import count_zeros, local_window, median

__all__ = [
    "ConfigurationError",
    "ConfigurationWarning",
    "InvalidInputError",
    "PitchFrame",
    "SmartMedianSmoother",
    "SmootherConfig",
    "StreamingContourSmoother",
    "count_zeros",
    "frames_from_arrays",
    "frames_to_arrays",
    "local_window",
    "median",
    "smooth",
]

"""Zero-run, window and median helpers used by the smoother."""

from contour_smoother.stats.contour_stats import count_zeros, local_window, median

__all__ = ["count_zeros", "local_window", "median"]

"""Smart-median contour smoother."""

from contour_smoother.smoother.smart_median import SmartMedianSmoother, smooth

__all__ = ["SmartMedianSmoother", "smooth"]

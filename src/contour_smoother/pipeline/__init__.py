"""Real-time (frame-by-frame) smoothing."""

from contour_smoother.pipeline.streaming_smoother import StreamingContourSmoother

__all__ = ["StreamingContourSmoother"]

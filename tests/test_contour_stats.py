"""Unit tests for zero-run length, local window and median helpers."""

from __future__ import annotations

import unittest
from typing import List, Optional

from contour_smoother.exceptions import InvalidInputError
from contour_smoother.frame import PitchFrame
from contour_smoother.stats import count_zeros, local_window, median


def _frames(freqs: List[Optional[float]]) -> List[PitchFrame]:
    return [PitchFrame(time=k * 0.01, frequency=f) for k, f in enumerate(freqs)]


class TestMedian(unittest.TestCase):
    """Tests for median."""

    def test_odd_count(self) -> None:
        self.assertEqual(median([1, 2, 3]), 2)
        self.assertEqual(median([3, 1, 2]), 2)

    def test_even_count_averages_center(self) -> None:
        self.assertEqual(median([1, 2, 3, 4]), 2.5)
        self.assertEqual(median([440.0, 220.0]), 330.0)

    def test_single_value(self) -> None:
        self.assertEqual(median([5]), 5)

    def test_empty_raises(self) -> None:
        """Empty window is an explicit error, not a silent 0."""
        with self.assertRaises(InvalidInputError):
            median([])

    def test_input_not_reordered(self) -> None:
        values = [3.0, 1.0, 2.0]
        median(values)
        self.assertEqual(values, [3.0, 1.0, 2.0])


class TestCountZeros(unittest.TestCase):
    """Tests for count_zeros (first zero -> next voiced distance)."""

    def test_run_between_voiced(self) -> None:
        self.assertEqual(count_zeros(_frames([100, 0, 0, 0, 100]), 1), 3)

    def test_voiced_start_clamps_to_zero(self) -> None:
        """Voiced frame before the first zero gives a negative distance -> 0."""
        frames = _frames([100, 0, 0, 0, 100])
        self.assertEqual(count_zeros(frames, 0), 0)

    def test_trailing_run_ends_at_last_index(self) -> None:
        """No voiced frame after the run: the last index is the boundary."""
        self.assertEqual(count_zeros(_frames([100, 0, 0, 0]), 1), 2)

    def test_no_zero_found(self) -> None:
        """No zero at all: left boundary is from_index - 1."""
        self.assertEqual(count_zeros(_frames([100, 200, 300]), 1), 1)
        self.assertEqual(count_zeros(_frames([100, 200, 300]), 2), 1)

    def test_overcounts_across_missing_estimates(self) -> None:
        """Frames without estimate inside the span still count."""
        self.assertEqual(count_zeros(_frames([100, 0, None, 0, 100]), 1), 3)

    def test_missing_estimate_starts_run(self) -> None:
        """A frame without estimate is taken as the first zero, never as voiced."""
        self.assertEqual(count_zeros(_frames([100, None, 0, 0, 100]), 1), 3)
        self.assertEqual(count_zeros(_frames([220, None, None]), 1), 1)

    def test_missing_estimate_after_voiced_frame(self) -> None:
        """Voiced frame followed later by a gap: negative distance -> 0."""
        frames = _frames([220, 220, 440, 220, None])
        self.assertEqual(count_zeros(frames, 2), 0)

    def test_rounding_to_zero(self) -> None:
        """0.4 Hz rounds to 0 but is also voiced: distance 0."""
        self.assertEqual(count_zeros(_frames([100, 0.4, 0, 100]), 1), 0)
        self.assertEqual(count_zeros(_frames([100, 0.5, 0, 100]), 1), 0)

    def test_non_contiguous_zeros(self) -> None:
        frames = _frames([220, 0, 0, 230, 0, 0, 0, 0, 240])
        self.assertEqual(count_zeros(frames, 1), 2)
        self.assertEqual(count_zeros(frames, 4), 4)


class TestLocalWindow(unittest.TestCase):
    """Tests for local_window."""

    def setUp(self) -> None:
        self.frames = _frames([10, 20, 30, 40, 50])

    def test_inclusive_range(self) -> None:
        self.assertEqual(local_window(self.frames, 1, 3), [20, 30, 40])

    def test_clamped_to_bounds(self) -> None:
        self.assertEqual(local_window(self.frames, -3, 1), [10, 20])
        self.assertEqual(local_window(self.frames, 3, 99), [40, 50])
        self.assertEqual(local_window(self.frames, -10, 10), [10, 20, 30, 40, 50])

    def test_empty_ranges_do_not_raise(self) -> None:
        self.assertEqual(local_window(self.frames, 4, 2), [])
        self.assertEqual(local_window(self.frames, 10, 12), [])
        self.assertEqual(local_window([], 0, 3), [])

    def test_missing_estimates_skipped_zeros_kept(self) -> None:
        frames = _frames([10, None, 0, 40])
        self.assertEqual(local_window(frames, 0, 3), [10, 0, 40])


def run_toy_example() -> None:
    """Print zero-run lengths for a small contour."""
    print("=== Toy example: zero runs ===\n")
    freqs = [220, 0, 0, 230, 0, 0, 0, 0, 240]
    frames = _frames(freqs)
    for i, f in enumerate(freqs):
        print(f"  index {i}: f0={f!r:6} zero_run={count_zeros(frames, i)}")
    print("\nDone.")


if __name__ == "__main__":
    run_toy_example()
    print("\n--- Running unit tests ---")
    unittest.main(argv=[""], exit=False, verbosity=2)

"""Smooth a synthetic sung phrase in batch and streaming mode.

Usage:
  python contour_demo.py                 # default preset
  python contour_demo.py --preset soprano
  python contour_demo.py --stream        # frame-by-frame driver
  python contour_demo.py -v              # log every correction
"""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import numpy as np

from contour_smoother import (
    SmootherConfig,
    StreamingContourSmoother,
    frames_from_arrays,
    frames_to_arrays,
    smooth,
)

PRESETS = {
    "default": SmootherConfig.default,
    "speech": SmootherConfig.speech,
    "soprano": SmootherConfig.soprano,
}


def make_phrase(n_frames=300, hop_sec=0.01, seed=0):
    """Two notes with vibrato, a rest between them and estimator errors on top."""
    rng = np.random.default_rng(seed)
    t = np.arange(n_frames) * hop_sec
    f0 = np.where(t < t[-1] / 2, 262.0, 330.0)
    f0 = f0 * (1 + 0.01 * np.sin(2 * np.pi * 5.5 * t))
    f0[n_frames // 2 - 5 : n_frames // 2 + 5] = 0  # rest
    errors = rng.choice(n_frames, 12, replace=False)
    f0[errors[:6]] *= 2  # octave errors
    for start in errors[6:10]:
        f0[start : start + 2] = 0  # dropouts
    f0[errors[10]] = 1800  # above ceiling
    f0[errors[11]] = np.nan  # no estimate
    return frames_from_arrays(t, f0, rng.random(n_frames))


def main(preset="default", stream=False):
    config = PRESETS[preset]()
    frames = make_phrase()
    _, before, _ = frames_to_arrays(frames)

    if stream:
        smoother = StreamingContourSmoother(config)
        print(f"Streaming with latency {smoother.latency} frames ({preset} preset)...")
        smoothed = []
        for frame in frames:
            smoothed.extend(smoother.push(frame))
        smoothed.extend(smoother.flush())
    else:
        print(f"Smoothing {len(frames)} frames ({preset} preset)...")
        smoothed = smooth(list(frames), config=config)

    times, after, _ = frames_to_arrays(smoothed)
    changed = ~((before == after) | (np.isnan(before) & np.isnan(after)))
    print(f"Corrected {int(changed.sum())} of {len(frames)} frames:\n")
    for k in np.flatnonzero(changed):
        print(f"  t={times[k]:.2f}s  {before[k]:8.2f} Hz -> {after[k]:8.2f} Hz")
    print("\nDone.")


if __name__ == "__main__":
    args = sys.argv[1:]
    if "-v" in args:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    preset = "default"
    if "--preset" in args:
        idx = args.index("--preset")
        if idx + 1 < len(args) and args[idx + 1] in PRESETS:
            preset = args[idx + 1]
    main(preset=preset, stream="--stream" in args)

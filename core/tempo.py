"""
Tap tempo estimation.

Keeps a sliding window of recent tap timestamps and converts the mean
inter-tap interval to beats per minute.
"""
import math
import time
from typing import List, Optional, Tuple

import numpy as np

from core.constants import TAP_WINDOW_MS


class TempoEstimator:
    """
    Tap tempo state for one session.

    The window is evaluated relative to the timestamp of the triggering tap,
    never against a running clock.
    """

    def __init__(self, window_ms: int = TAP_WINDOW_MS):
        """
        Args:
            window_ms: Taps at least this old (relative to the newest) are dropped
        """
        self.window_ms = window_ms
        self._taps: List[float] = []
        self._bpm: Optional[int] = None

    @property
    def bpm(self) -> Optional[int]:
        """Latest estimate (None until two taps fall inside the window)."""
        return self._bpm

    @property
    def taps(self) -> Tuple[float, ...]:
        """Timestamps currently retained in the window."""
        return tuple(self._taps)

    def tap(self, now_ms: Optional[float] = None) -> Optional[int]:
        """
        Register a tap and return the updated estimate.

        Args:
            now_ms: Tap time in milliseconds (monotonic clock if omitted)

        Returns:
            Rounded BPM, or None with fewer than two taps in the window or a
            non-positive mean interval
        """
        if now_ms is None:
            now_ms = time.monotonic() * 1000.0

        self._taps = [t for t in self._taps if now_ms - t < self.window_ms]
        self._taps.append(now_ms)

        if len(self._taps) < 2:
            self._bpm = None
            return None

        mean_interval = float(np.mean(np.diff(self._taps)))
        if mean_interval <= 0:
            self._bpm = None
            return None

        # Half-up, so 62.5 BPM reads as 63
        self._bpm = int(math.floor(60000.0 / mean_interval + 0.5))
        return self._bpm

    def reset(self):
        """Forget all taps."""
        self._taps = []
        self._bpm = None

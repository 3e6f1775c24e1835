"""
Coordinate mapping between a track's pixel span and timeline seconds.

Rounding is half-up (floor(x + 0.5)) so that a position exactly between two
seconds always lands on the later one.
"""
import math
from typing import Iterator, Tuple

from core.constants import TIMELINE_LENGTH, MINOR_TICK_INTERVAL, MAJOR_TICK_INTERVAL


def snap_time(time: float, total_time: int = TIMELINE_LENGTH) -> int:
    """
    Clamp a time to [0, total_time] and round it half-up to whole seconds.

    Examples:
        >>> snap_time(12.5)
        13
        >>> snap_time(-4)
        0
    """
    clamped = max(0.0, min(float(total_time), float(time)))
    return int(math.floor(clamped + 0.5))


def pixel_to_time(offset_px: float, width_px: float, total_time: int = TIMELINE_LENGTH) -> int:
    """
    Convert a pointer offset inside a track to a time value.

    Args:
        offset_px: Pointer x relative to the track's left edge
        width_px: Track width in pixels
        total_time: Upper bound of the time axis

    Returns:
        Integer time in [0, total_time]. A non-positive width returns 0.
    """
    if width_px <= 0:
        return 0
    pos = max(0.0, min(float(offset_px), float(width_px)))
    return snap_time(pos / width_px * total_time, total_time)


def time_to_fraction(time: float, total_time: int = TIMELINE_LENGTH) -> float:
    """Proportional position of a time on the track (0.0 to 1.0)."""
    if total_time <= 0:
        return 0.0
    return max(0.0, min(1.0, time / total_time))


def time_to_pixel(time: float, width_px: float, total_time: int = TIMELINE_LENGTH) -> float:
    """Convert a time value to an x offset inside a track of the given width."""
    return time_to_fraction(time, total_time) * width_px


def ruler_ticks(total_time: int = TIMELINE_LENGTH) -> Iterator[Tuple[int, bool]]:
    """
    Yield (time, is_major) for every ruler tick.

    Minor ticks every 10 seconds, major ticks every minute.
    """
    for t in range(0, total_time + 1, MINOR_TICK_INTERVAL):
        yield t, t % MAJOR_TICK_INTERVAL == 0


def ruler_labels(total_time: int = TIMELINE_LENGTH) -> Iterator[Tuple[int, str]]:
    """Yield (time, text) for each minute label under the ruler."""
    for t in range(0, total_time + 1, MAJOR_TICK_INTERVAL):
        yield t, str(t // MAJOR_TICK_INTERVAL)

"""
Immutable data models for Transformation Marker.

Markers are frozen dataclasses so that:
- A snapshot handed to a view or the exporter never changes under it
- Edits replace the marker instead of mutating it in place
"""
import itertools
from dataclasses import dataclass, replace
from typing import Tuple, Optional, Dict, Any, List, Iterator, Union

from core.constants import TIMELINE_LENGTH, TAP_WINDOW_MS, Track, TransformationLabel, format_mm_ss
from core.tempo import TempoEstimator
from core.timeline import pixel_to_time, snap_time


@dataclass(frozen=True)
class Marker:
    """
    Single timestamped annotation on one track.

    Attributes:
        id: Unique identifier assigned by the MarkerStore
        time: Position on the track in seconds (0 to TIMELINE_LENGTH)
        track: Lane the marker belongs to (never changes)
        label: Transformation kind
        note: Free-form annotation text
    """
    id: int
    time: int
    track: Track
    label: TransformationLabel = TransformationLabel.UNSELECTED
    note: str = ""

    def __post_init__(self):
        """Validate marker."""
        if not 0 <= self.time <= TIMELINE_LENGTH:
            raise ValueError(f"Time must be 0-{TIMELINE_LENGTH}, got {self.time}")
        if not isinstance(self.track, Track):
            raise ValueError(f"Invalid track: {self.track!r}")
        if not isinstance(self.label, TransformationLabel):
            raise ValueError(f"Invalid label: {self.label!r}")

    @property
    def formatted_time(self) -> str:
        """Time rendered as MM:SS."""
        return format_mm_ss(self.time)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary of display values."""
        return {
            "id": self.id,
            "time": self.time,
            "track": self.track.value,
            "label": self.label.value,
            "note": self.note,
        }


class MarkerStore:
    """
    Owns the session's marker collection.

    The collection is a tuple of frozen Markers that is swapped on every
    mutation. Operations on an unknown id are silent no-ops.
    """

    EDITABLE_FIELDS = ("label", "note")

    def __init__(self):
        self._markers: Tuple[Marker, ...] = ()
        self._ids = itertools.count(1)

    def create(self, track: Union[Track, str], time: float) -> Marker:
        """
        Place a new marker.

        Args:
            track: Track (or its display name)
            time: Requested time; clamped to the timeline and rounded

        Returns:
            The new marker
        """
        track = Track(track)
        marker = Marker(id=next(self._ids), time=snap_time(time), track=track)
        self._markers = self._markers + (marker,)
        return marker

    def update(self, marker_id: int, field: str, value: Union[str, TransformationLabel]):
        """
        Replace the label or note of one marker.

        Args:
            marker_id: Marker to edit (no-op if absent)
            field: "label" or "note"
            value: New value; labels may be given as display text

        Raises:
            ValueError: If field is not editable or label is not in the vocabulary
        """
        if field not in self.EDITABLE_FIELDS:
            raise ValueError(f"Field must be one of {self.EDITABLE_FIELDS}, got {field!r}")
        if field == "label" and not isinstance(value, TransformationLabel):
            value = TransformationLabel.from_display(value)
        if field == "note":
            value = str(value)

        self._markers = tuple(
            replace(m, **{field: value}) if m.id == marker_id else m
            for m in self._markers
        )

    def delete(self, marker_id: int):
        """Remove a marker (no-op if absent)."""
        self._markers = tuple(m for m in self._markers if m.id != marker_id)

    def clear(self):
        """Remove all markers. Ids are not reused afterwards."""
        self._markers = ()

    def view_by_track(self, track: Union[Track, str]) -> List[Marker]:
        """
        Markers on one track, ascending by time.

        Ties keep creation order (sorted() is stable).
        """
        track = Track(track)
        return sorted((m for m in self._markers if m.track is track), key=lambda m: m.time)

    def snapshot(self) -> Tuple[Marker, ...]:
        """Full collection in insertion order."""
        return self._markers

    def get(self, marker_id: int) -> Optional[Marker]:
        """Look up a marker by id."""
        for m in self._markers:
            if m.id == marker_id:
                return m
        return None

    def __len__(self) -> int:
        return len(self._markers)

    def __iter__(self) -> Iterator[Marker]:
        return iter(self._markers)


class AppState:
    """
    Session state shared by the views.

    Manages:
    - Marker collection
    - Tap tempo window
    - Hover readout (track, time, x offset)
    - Last duration calculator result and export path
    """

    def __init__(self, tap_window_ms: int = TAP_WINDOW_MS):
        """Initialize empty state."""
        self.markers = MarkerStore()
        self.tempo = TempoEstimator(window_ms=tap_window_ms)
        self._hover_track: Optional[Track] = None
        self._hover_time: Optional[int] = None
        self._hover_x: Optional[float] = None
        self._duration_result: Optional[str] = None
        self._last_export_path: Optional[str] = None

    def set_hover(self, track: Track, offset_px: float, width_px: float):
        """Update hover readout from a pointer move over a track."""
        self._hover_track = track
        self._hover_time = pixel_to_time(offset_px, width_px)
        self._hover_x = max(0.0, min(float(offset_px), float(width_px)))

    def clear_hover(self):
        """Pointer left the track."""
        self._hover_track = None
        self._hover_time = None
        self._hover_x = None

    def get_hover(self) -> Optional[Tuple[Track, int, float]]:
        """Get (track, time, x) or None when nothing is hovered."""
        if self._hover_track is None:
            return None
        return self._hover_track, self._hover_time, self._hover_x

    def get_duration_result(self) -> Optional[str]:
        """Get text shown under the duration calculator."""
        return self._duration_result

    def set_duration_result(self, text: Optional[str]):
        """Set (or clear with None) the duration calculator result."""
        self._duration_result = text

    def get_last_export_path(self) -> Optional[str]:
        """Get path of the most recent successful export."""
        return self._last_export_path

    def set_last_export_path(self, path: str):
        """Record a successful export."""
        self._last_export_path = path

"""
Timeline constants and time formatting utilities.

Track names, the transformation label vocabulary, ruler spacing, etc.
"""
from enum import Enum
from typing import List

# Length of the annotated segment in seconds
TIMELINE_LENGTH = 600

# Ruler spacing (seconds)
MINOR_TICK_INTERVAL = 10
MAJOR_TICK_INTERVAL = 60

# Tap tempo window (milliseconds)
TAP_WINDOW_MS = 5000

# Export artifact
EXPORT_FILENAME = "markers.csv"
CSV_MEDIA_TYPE = "text/csv"
CSV_HEADER = ("Segment", "Time", "Label", "Note")


class Track(Enum):
    """Annotation lanes. Value is the display/export text."""

    SEGMENT_A = "Segment A"
    SEGMENT_B = "Segment B"

    @property
    def short_name(self) -> str:
        """Single-letter lane badge ("A" or "B")."""
        return self.value.split()[-1]


class TransformationLabel(Enum):
    """Closed vocabulary of transformation kinds, in display order."""

    UNSELECTED = "Select transformation"
    DIFFERENT_INTRO = "Different Intro"
    NEW_DRUM_PATTERN = "New Drum Pattern"
    DIFFERENT_INSTRUMENT = "Different Instrument"
    EFFECTS_ADDED = "Effects Added"
    SAMPLE_BASED_EDIT = "Sample-Based Edit"
    HARMONIC_VARIATION = "Harmonic Variation"
    VOICE_REPLACED_BY_INSTRUMENT = "Voice Replaced by Instrument"
    LOOPED_OR_EXTENDED = "Looped or Extended"
    VOICEOVER = "Voiceover"
    OTHER = "Other"
    DIFFERENT_ENDING = "Different Ending/Outro"
    SAME_SONG_DIFFERENT_PART = "Same song - Different part"

    @classmethod
    def choices(cls) -> List[str]:
        """Combo box items: sentinel first, then the 12 kinds."""
        return [label.value for label in cls]

    @classmethod
    def from_display(cls, text: str) -> "TransformationLabel":
        """
        Look up a label by its display text.

        Raises:
            ValueError: If text is not part of the vocabulary
        """
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"Unknown transformation label: {text!r}") from None


def format_mm_ss(seconds: int) -> str:
    """
    Format seconds as MM:SS (used for marker times and the hover readout).

    Example:
        >>> format_mm_ss(75)
        '01:15'
        >>> format_mm_ss(600)
        '10:00'
    """
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


def format_hms(seconds: int) -> str:
    """
    Format a signed number of seconds as HH:MM:SS.

    Hours are not capped at 24. Negative spans get a leading "-" on the
    absolute value.

    Example:
        >>> format_hms(90)
        '00:01:30'
        >>> format_hms(-180)
        '-00:03:00'
        >>> format_hms(90061)
        '25:01:01'
    """
    sign = "-" if seconds < 0 else ""
    hours, remainder = divmod(abs(int(seconds)), 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{sign}{hours:02d}:{minutes:02d}:{secs:02d}"


def parse_hms(timestamp: str) -> int:
    """
    Convert an HH:MM:SS timestamp to total seconds.

    Raises:
        ValueError: If timestamp is not three colon-separated integers
    """
    parts = timestamp.strip().split(":")
    if len(parts) != 3:
        raise ValueError(f"Invalid timestamp format: {timestamp}")
    hours, minutes, secs = (int(p) for p in parts)
    return hours * 3600 + minutes * 60 + secs

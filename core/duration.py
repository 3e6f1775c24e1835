"""
Elapsed-duration calculator for pasted time segment text.

Finds four HH:MM:SS timestamps (video start/end, audio start/end) in free
text and computes the two elapsed spans.
"""
import re
from dataclasses import dataclass
from typing import Union

from core.constants import format_hms, parse_hms

INVALID_INPUT_MESSAGE = "Invalid input"

_TIMESTAMP = r"(\d{2}:\d{2}:\d{2})"

# Labels must appear in this order; any text may separate them.
SEGMENT_PATTERN = re.compile(
    r"video\s*start(?:s)?\s*time[:\s]*" + _TIMESTAMP +
    r".*?video\s*end\s*time[:\s]*" + _TIMESTAMP +
    r".*?audio\s*start(?:s)?\s*time[:\s]*" + _TIMESTAMP +
    r".*?audio\s*end\s*time[:\s]*" + _TIMESTAMP,
    re.IGNORECASE | re.DOTALL,
)


@dataclass(frozen=True)
class ElapsedDurations:
    """
    Result of a successful parse.

    Attributes:
        video_seconds: Video end minus video start (may be negative)
        audio_seconds: Audio end minus audio start (may be negative)
    """
    video_seconds: int
    audio_seconds: int

    @property
    def video(self) -> str:
        return format_hms(self.video_seconds)

    @property
    def audio(self) -> str:
        return format_hms(self.audio_seconds)

    def summary(self) -> str:
        """Two-line text shown to the user."""
        return f"Video: {self.video}\nAudio: {self.audio}"


@dataclass(frozen=True)
class InvalidInput:
    """Text did not contain all four timestamps."""
    message: str = INVALID_INPUT_MESSAGE

    def __str__(self) -> str:
        return self.message


def parse_durations(text: str) -> Union[ElapsedDurations, InvalidInput]:
    """
    Extract the four timestamps and compute elapsed durations.

    Args:
        text: Pasted time segment text

    Returns:
        ElapsedDurations, or InvalidInput when any timestamp is missing
    """
    match = SEGMENT_PATTERN.search(text or "")
    if not match:
        return InvalidInput()

    video_start, video_end, audio_start, audio_end = (parse_hms(g) for g in match.groups())
    return ElapsedDurations(
        video_seconds=video_end - video_start,
        audio_seconds=audio_end - audio_start,
    )


def calculate(text: str) -> str:
    """Parse text and return the message to display."""
    result = parse_durations(text)
    if isinstance(result, InvalidInput):
        return str(result)
    return result.summary()

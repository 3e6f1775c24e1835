"""
CSV export of the marker collection.

File format:
- Header row: Segment,Time,Label,Note
- One row per marker: track, MM:SS, label, note
- Rows joined with "\\n", no trailing newline
- Fields containing a comma, quote or line break are quoted (RFC 4180);
  everything else is written verbatim
"""
import csv
import io
from pathlib import Path
from typing import Iterable, Union

from core.constants import CSV_HEADER, EXPORT_FILENAME
from core.models import Marker


def serialize(markers: Iterable[Marker]) -> str:
    """
    Serialize markers to CSV text.

    Args:
        markers: Markers in the order they should be written

    Returns:
        CSV text without a trailing newline
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    writer.writerow(CSV_HEADER)
    for marker in markers:
        writer.writerow([
            marker.track.value,
            marker.formatted_time,
            marker.label.value,
            marker.note,
        ])
    return buffer.getvalue()[:-1]


class CsvExporter:
    """Handles markers.csv file output."""

    @staticmethod
    def save(markers: Iterable[Marker], path: Union[str, Path]) -> Path:
        """
        Write markers to a .csv file.

        Args:
            markers: Markers to export
            path: Destination file path

        Returns:
            Path actually written (with .csv suffix)

        Raises:
            IOError: If save fails
        """
        try:
            # Convert path to Path object if it's a string
            if isinstance(path, str):
                path = Path(path)

            # Ensure .csv extension
            if path.suffix.lower() != ".csv":
                path = path.with_suffix(".csv")

            # Create parent directories if they don't exist
            path.parent.mkdir(parents=True, exist_ok=True)

            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(serialize(markers))

            return path

        except Exception as e:
            raise IOError(f"Failed to export markers to {path}: {e}") from e

    @staticmethod
    def default_path(directory: Union[str, Path], filename: str = EXPORT_FILENAME) -> Path:
        """
        Get path of the export file inside a directory.

        Args:
            directory: Export directory ("~" is expanded)
            filename: File name (markers.csv unless configured)
        """
        return Path(directory).expanduser() / filename

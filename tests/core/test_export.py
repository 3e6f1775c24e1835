"""
Tests for markers.csv serialization and file output.
"""
import csv
import io

import pytest

from core.constants import Track, format_mm_ss
from core.export import CsvExporter, serialize
from core.models import MarkerStore


@pytest.fixture
def store():
    store = MarkerStore()
    a = store.create(Track.SEGMENT_A, 75)
    b = store.create(Track.SEGMENT_B, 600)
    store.create(Track.SEGMENT_A, 3)
    store.update(a.id, "label", "New Drum Pattern")
    store.update(a.id, "note", "kick doubled")
    store.update(b.id, "label", "Same song - Different part")
    return store


def test_empty_export_is_header_only():
    assert serialize([]) == "Segment,Time,Label,Note"


def test_rows_recover_marker_fields(store):
    lines = serialize(store.snapshot()).split("\n")

    assert lines[0] == "Segment,Time,Label,Note"
    assert len(lines) == len(store) + 1
    for line, marker in zip(lines[1:], store.snapshot()):
        assert line.split(",") == [
            marker.track.value,
            format_mm_ss(marker.time),
            marker.label.value,
            marker.note,
        ]


def test_rows_follow_snapshot_order(store):
    lines = serialize(store.snapshot()).split("\n")
    assert lines[1] == "Segment A,01:15,New Drum Pattern,kick doubled"
    assert lines[2] == "Segment B,10:00,Same song - Different part,"
    assert lines[3] == "Segment A,00:03,Select transformation,"


def test_no_trailing_newline(store):
    assert not serialize(store.snapshot()).endswith("\n")


def test_delimiters_in_notes_are_quoted():
    store = MarkerStore()
    marker = store.create(Track.SEGMENT_A, 10)
    store.update(marker.id, "note", 'bass, then "vox"\nsecond line')

    text = serialize(store.snapshot())
    rows = list(csv.reader(io.StringIO(text)))

    assert rows[1] == ["Segment A", "00:10", "Select transformation", 'bass, then "vox"\nsecond line']
    assert '"bass, then ""vox""' in text


def test_save_writes_csv(tmp_path, store):
    path = CsvExporter.save(store.snapshot(), tmp_path / "exports" / "markers.csv")

    assert path == tmp_path / "exports" / "markers.csv"
    assert path.read_text(encoding="utf-8") == serialize(store.snapshot())


def test_save_forces_csv_suffix(tmp_path, store):
    path = CsvExporter.save(store.snapshot(), str(tmp_path / "session"))
    assert path.name == "session.csv"
    assert path.exists()


def test_save_failure_raises_ioerror(tmp_path, store):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    with pytest.raises(IOError):
        CsvExporter.save(store.snapshot(), blocker / "markers.csv")


def test_default_path(tmp_path):
    assert CsvExporter.default_path(tmp_path) == tmp_path / "markers.csv"


def test_default_path_uses_configured_filename(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))

    assert CsvExporter.default_path(tmp_path, "session.csv") == tmp_path / "session.csv"
    assert CsvExporter.default_path("~/exports") == tmp_path / "exports" / "markers.csv"

"""
Tests for the elapsed-duration calculator.
"""
from core.duration import ElapsedDurations, InvalidInput, calculate, parse_durations

SAMPLE = (
    "Video start time: 00:01:00 ... Video end time: 00:02:30 ... "
    "Audio starts time: 00:00:45 ... Audio end time: 00:03:00"
)


def test_sample_segment():
    result = parse_durations(SAMPLE)

    assert isinstance(result, ElapsedDurations)
    assert result.video == "00:01:30"
    assert result.audio == "00:02:15"
    assert calculate(SAMPLE) == "Video: 00:01:30\nAudio: 00:02:15"


def test_missing_audio_end_is_invalid():
    text = "Video start time: 00:01:00 Video end time: 00:02:30 Audio start time: 00:00:45"

    assert isinstance(parse_durations(text), InvalidInput)
    assert calculate(text) == "Invalid input"


def test_empty_input_is_invalid():
    assert calculate("") == "Invalid input"
    assert calculate(None) == "Invalid input"


def test_negative_span_has_leading_sign():
    text = (
        "Video start time: 00:05:00 Video end time: 00:02:00 "
        "Audio start time: 00:00:00 Audio end time: 00:00:10"
    )
    result = parse_durations(text)

    assert result.video_seconds == -180
    assert result.video == "-00:03:00"
    assert result.audio == "00:00:10"


def test_case_insensitive_and_multiline():
    text = (
        "Clip 12\n"
        "VIDEO START TIME 01:00:00\n"
        "notes in between\n"
        "video end time: 02:30:15\n"
        "Audio Start Time: 00:00:05\n"
        "AUDIO END TIME: 00:00:06\n"
    )
    result = parse_durations(text)

    assert result.video == "01:30:15"
    assert result.audio == "00:00:01"


def test_hours_are_not_capped():
    text = (
        "Video start time: 00:00:00 Video end time: 99:59:59 "
        "Audio start time: 00:00:00 Audio end time: 30:00:00"
    )
    result = parse_durations(text)

    assert result.video == "99:59:59"
    assert result.audio == "30:00:00"


def test_labels_out_of_order_are_invalid():
    text = (
        "Audio start time: 00:00:45 Audio end time: 00:03:00 "
        "Video start time: 00:01:00 Video end time: 00:02:30"
    )
    assert isinstance(parse_durations(text), InvalidInput)


def test_single_digit_fields_do_not_match():
    text = (
        "Video start time: 0:01:00 Video end time: 00:02:30 "
        "Audio start time: 00:00:45 Audio end time: 00:03:00"
    )
    assert str(parse_durations(text)) == "Invalid input"

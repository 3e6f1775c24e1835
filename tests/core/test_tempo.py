"""
Tests for the tap tempo estimator.
"""
from core.tempo import TempoEstimator


def test_steady_half_second_taps_give_120():
    tempo = TempoEstimator()
    results = [tempo.tap(t) for t in (0, 500, 1000, 1500)]

    assert results == [None, 120, 120, 120]
    assert tempo.bpm == 120


def test_single_tap_has_no_estimate():
    tempo = TempoEstimator()
    assert tempo.tap(1000) is None
    assert tempo.bpm is None


def test_taps_outside_window_are_dropped():
    tempo = TempoEstimator()
    tempo.tap(0)

    assert tempo.tap(6000) is None
    assert tempo.taps == (6000,)


def test_window_boundary_is_exclusive():
    tempo = TempoEstimator()
    tempo.tap(0)
    assert tempo.tap(5000) is None


def test_window_slides_with_latest_tap():
    tempo = TempoEstimator()
    for t in range(0, 6001, 1000):
        bpm = tempo.tap(t)

    assert tempo.taps == (2000, 3000, 4000, 5000, 6000)
    assert bpm == 60


def test_mean_of_uneven_intervals():
    tempo = TempoEstimator()
    tempo.tap(0)
    tempo.tap(400)
    assert tempo.tap(1000) == 120


def test_simultaneous_taps_have_no_estimate():
    tempo = TempoEstimator()
    tempo.tap(100)
    assert tempo.tap(100) is None


def test_reset_clears_window():
    tempo = TempoEstimator()
    tempo.tap(0)
    tempo.tap(500)
    tempo.reset()

    assert tempo.bpm is None
    assert tempo.taps == ()
    assert tempo.tap(700) is None


def test_custom_window():
    tempo = TempoEstimator(window_ms=1000)
    tempo.tap(0)
    assert tempo.tap(1500) is None
    assert tempo.tap(2000) == 120


def test_tap_uses_monotonic_clock_by_default(monkeypatch):
    tempo = TempoEstimator()

    monkeypatch.setattr("core.tempo.time.monotonic", lambda: 10.0)
    tempo.tap()
    monkeypatch.setattr("core.tempo.time.monotonic", lambda: 10.25)

    assert tempo.tap() == 240
    assert tempo.taps == (10000.0, 10250.0)


def test_half_bpm_rounds_up():
    tempo = TempoEstimator()
    tempo.tap(0)

    # 60000 / 960 == 62.5
    assert tempo.tap(960) == 63

"""
Tests for JSON user settings.
"""
import json

from core.settings import DEFAULT_SETTINGS, load_settings, save_settings


def test_first_run_creates_defaults(tmp_path):
    path = tmp_path / "cfg" / "settings.json"

    settings = load_settings(path)

    assert settings == DEFAULT_SETTINGS
    assert json.loads(path.read_text(encoding="utf-8")) == DEFAULT_SETTINGS


def test_file_values_merge_over_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"video": {"ui_scale": 1.5}, "legacy": {"x": 1}}), encoding="utf-8")

    settings = load_settings(path)

    assert settings["video"]["ui_scale"] == 1.5
    assert settings["video"]["vsync"] is True
    assert settings["general"]["export_filename"] == "markers.csv"
    assert "legacy" not in settings


def test_corrupt_file_falls_back_to_defaults(tmp_path, capsys):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")

    assert load_settings(path) == DEFAULT_SETTINGS
    assert "[SETTINGS]" in capsys.readouterr().out


def test_non_object_json_falls_back_to_defaults(tmp_path, capsys):
    path = tmp_path / "settings.json"
    for content in ("[]", "\"x\"", "3", "null"):
        path.write_text(content, encoding="utf-8")

        assert load_settings(path) == DEFAULT_SETTINGS
        assert "[SETTINGS] Failed to load settings" in capsys.readouterr().out


def test_invalid_values_are_reset_to_defaults(tmp_path, capsys):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({
        "general": {"export_directory": 7, "export_filename": ""},
        "video": {"ui_scale": "big", "vsync": "yes"},
        "tempo": {"tap_window_ms": "soon"},
    }), encoding="utf-8")

    assert load_settings(path) == DEFAULT_SETTINGS
    out = capsys.readouterr().out
    assert "Invalid ui_scale" in out
    assert "Invalid tap_window_ms" in out


def test_numeric_values_are_normalized(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({
        "video": {"ui_scale": 9},
        "tempo": {"tap_window_ms": "3000"},
    }), encoding="utf-8")

    settings = load_settings(path)

    assert settings["video"]["ui_scale"] == 2.0
    assert settings["tempo"]["tap_window_ms"] == 3000


def test_non_positive_tap_window_uses_default(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"tempo": {"tap_window_ms": 0}}), encoding="utf-8")

    assert load_settings(path)["tempo"]["tap_window_ms"] == 5000


def test_save_then_load(tmp_path):
    path = tmp_path / "settings.json"
    settings = load_settings(path)
    settings["tempo"]["tap_window_ms"] = 3000
    save_settings(settings, path)

    assert load_settings(path)["tempo"]["tap_window_ms"] == 3000
    assert DEFAULT_SETTINGS["tempo"]["tap_window_ms"] == 5000

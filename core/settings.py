"""
User settings stored as JSON in ~/.transformation_marker/settings.json.
"""
import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional

from core.constants import EXPORT_FILENAME, TAP_WINDOW_MS

DEFAULT_SETTINGS: Dict[str, Dict[str, Any]] = {
    "general": {
        "export_directory": str(Path.home() / "Documents"),
        "export_filename": EXPORT_FILENAME,
    },
    "video": {
        "vsync": True,
        "ui_scale": 1.0,  # 0.5x - 2.0x
    },
    "tempo": {
        "tap_window_ms": TAP_WINDOW_MS,
    },
}


def get_settings_path() -> Path:
    """Default location of the settings file."""
    return Path.home() / ".transformation_marker" / "settings.json"


def load_settings(config_path: Optional[Path] = None) -> Dict[str, Dict[str, Any]]:
    """
    Load settings, merged over the defaults category by category.

    Creates the file with defaults on first run. Unreadable files fall back
    to defaults, and individual values of the wrong type are reset to theirs.

    Args:
        config_path: Settings file (defaults to get_settings_path())
    """
    config_path = Path(config_path) if config_path else get_settings_path()
    settings = copy.deepcopy(DEFAULT_SETTINGS)

    if config_path.exists():
        try:
            with open(config_path, 'r', encoding="utf-8") as f:
                loaded = json.load(f)
            if not isinstance(loaded, dict):
                raise ValueError(f"expected a JSON object, got {type(loaded).__name__}")
            # Merge with defaults (in case new settings added)
            for category in settings:
                if isinstance(loaded.get(category), dict):
                    settings[category].update(loaded[category])
        except (OSError, ValueError) as e:
            print(f"[SETTINGS] Failed to load settings: {e}")
            return copy.deepcopy(DEFAULT_SETTINGS)
        _validate(settings)
        return settings

    # No config file exists, save defaults
    try:
        save_settings(settings, config_path)
        print("[SETTINGS] Created new settings file with defaults")
    except IOError as e:
        print(f"[SETTINGS] {e}")
    return settings


def save_settings(settings: Dict[str, Dict[str, Any]], config_path: Optional[Path] = None):
    """
    Write settings to disk.

    Raises:
        IOError: If the file cannot be written
    """
    config_path = Path(config_path) if config_path else get_settings_path()
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, 'w', encoding="utf-8") as f:
            json.dump(settings, f, indent=2)
    except OSError as e:
        raise IOError(f"Failed to save settings to {config_path}: {e}") from e


def _validate(settings: Dict[str, Dict[str, Any]]):
    """Replace values of the wrong type or range with their defaults."""
    video = settings["video"]
    tempo = settings["tempo"]

    try:
        video["ui_scale"] = max(0.5, min(2.0, float(video["ui_scale"])))
    except (TypeError, ValueError):
        print(f"[SETTINGS] Invalid ui_scale {video['ui_scale']!r}, using default")
        video["ui_scale"] = DEFAULT_SETTINGS["video"]["ui_scale"]

    if not isinstance(video["vsync"], bool):
        print(f"[SETTINGS] Invalid vsync {video['vsync']!r}, using default")
        video["vsync"] = DEFAULT_SETTINGS["video"]["vsync"]

    try:
        window_ms = int(tempo["tap_window_ms"])
        if window_ms <= 0:
            raise ValueError(window_ms)
        tempo["tap_window_ms"] = window_ms
    except (TypeError, ValueError, OverflowError):
        print(f"[SETTINGS] Invalid tap_window_ms {tempo['tap_window_ms']!r}, using default")
        tempo["tap_window_ms"] = DEFAULT_SETTINGS["tempo"]["tap_window_ms"]

    general = settings["general"]
    for key in ("export_directory", "export_filename"):
        if not isinstance(general[key], str) or not general[key]:
            print(f"[SETTINGS] Invalid {key} {general[key]!r}, using default")
            general[key] = DEFAULT_SETTINGS["general"][key]

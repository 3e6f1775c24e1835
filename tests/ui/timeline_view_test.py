"""
Marker View Test for Transformation Marker.
Opens the marker window pre-filled with sample markers for visual testing.
"""
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

import dearpygui.dearpygui as dpg
from core.constants import Track
from core.models import AppState
from ui.theme import apply_marker_theme, apply_ui_scale
from ui.views.MarkerView import MarkerView


def create_sample_markers(app_state: AppState):
    """Place a few labelled markers on both tracks."""
    store = app_state.markers
    intro = store.create(Track.SEGMENT_A, 0)
    store.update(intro.id, "label", "Different Intro")
    drums = store.create(Track.SEGMENT_A, 95)
    store.update(drums.id, "label", "New Drum Pattern")
    store.update(drums.id, "note", "half-time feel")
    store.create(Track.SEGMENT_A, 95)
    outro = store.create(Track.SEGMENT_B, 540)
    store.update(outro.id, "label", "Different Ending/Outro")
    store.create(Track.SEGMENT_B, 120)


def main():
    """Main entry point for marker view test."""

    # Initialize DearPyGui
    dpg.create_context()

    app_state = AppState()
    create_sample_markers(app_state)

    apply_ui_scale(1.0)

    marker_view = MarkerView(app_state=app_state)
    window_tag = marker_view.create()
    apply_marker_theme()

    # Setup viewport
    dpg.create_viewport(title="Transformation Marker - View Test",
                        width=1200, height=900)
    dpg.setup_dearpygui()
    dpg.show_viewport()

    # Set primary window
    dpg.set_primary_window(window_tag, True)

    # Main render loop
    while dpg.is_dearpygui_running():
        marker_view.update()
        dpg.render_dearpygui_frame()

    # Cleanup
    dpg.destroy_context()


if __name__ == "__main__":
    print("=== Transformation Marker View Test ===")
    print("Controls:")
    print("  - Click a lane to place a marker, hover to read the time")
    print("  - Pick a label / type a note in the lists below")
    print("  - Tap BPM a few times, paste text into the Duration Calculator")
    print("  - Export CSV (or Ctrl+E) to write markers.csv")
    print("-" * 50)
    main()

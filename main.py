"""
Transformation Marker - timeline annotation tool
Main entry point
"""
import dearpygui.dearpygui as dpg
from core.models import AppState
from core.settings import load_settings
from ui.theme import apply_marker_theme, apply_ui_scale
from ui.views.MarkerView import MarkerView


# Module-level variables (accessed by callbacks)
marker_view = None
app_state = None


def main():
    """Launch Transformation Marker."""
    global marker_view, app_state

    print("=== Transformation Marker ===")
    print("Initializing...")

    settings = load_settings()

    # Initialize DearPyGui
    dpg.create_context()

    # Create session state
    app_state = AppState(tap_window_ms=settings["tempo"]["tap_window_ms"])

    # Apply UI scale from settings
    ui_scale = settings["video"]["ui_scale"]
    print(f"Applying UI scale: {ui_scale}x")
    apply_ui_scale(ui_scale)

    # Create main view
    marker_view = MarkerView(app_state=app_state, settings=settings)
    window_tag = marker_view.create()

    # Apply theme once for the whole session
    apply_marker_theme()

    # Setup viewport
    dpg.create_viewport(title="Transformation Marker", width=1200, height=900,
                        vsync=settings["video"]["vsync"])
    dpg.setup_dearpygui()
    dpg.show_viewport()

    dpg.set_primary_window(window_tag, True)

    print("Ready!")

    # Main render loop
    while dpg.is_dearpygui_running():
        marker_view.update()
        dpg.render_dearpygui_frame()

    # Cleanup
    dpg.destroy_context()
    print("Transformation Marker closed.")


if __name__ == "__main__":
    main()

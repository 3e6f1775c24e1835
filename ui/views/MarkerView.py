"""
Main marker timeline view for Transformation Marker.

This is the single workspace window:
- Title bar with Export CSV
- Two timeline lanes (Segment A / Segment B)
- Clear All Markers + BPM tapper
- Per-track marker lists (side by side)
- Duration calculator
"""
import dearpygui.dearpygui as dpg
from pathlib import Path
from typing import Optional, Dict, Any

from core.constants import Track, EXPORT_FILENAME
from core.export import CsvExporter
from core.models import AppState
from ui.theme import MarkerDark, create_accent_button_theme, create_link_button_theme
from ui.widgets.BpmTapper import BpmTapper
from ui.widgets.DurationCalculator import DurationCalculator
from ui.widgets.MarkerPanel import MarkerPanel
from ui.widgets.TimelineTrack import TimelineTrack


class MarkerView:
    """
    Transformation Marker Timeline window.

    Every mutation runs inside one callback; views are redrawn from the
    store afterwards through _on_markers_changed().
    """

    def __init__(self, app_state: AppState, settings: Optional[Dict[str, Any]] = None):
        """
        Args:
            app_state: Session state
            settings: Loaded user settings (export directory/filename)
        """
        self.app_state = app_state
        self.settings = settings or {}

        self._window_tag = "marker_view_window"
        self._status_tag = "marker_view_status"
        self._export_dialog_tag = "marker_export_dialog"

        self.timelines = {}
        self.panels = {}
        self.bpm_tapper = BpmTapper(app_state.tempo)
        self.duration_calculator = DurationCalculator(app_state)

    def create(self) -> str:
        """
        Create main window with all panels.

        Returns:
            Window tag
        """
        with dpg.window(label="Transformation Marker",
                        tag=self._window_tag,
                        no_close=True):

            # Title bar
            with dpg.group(horizontal=True):
                dpg.add_text("Transformation Marker Timeline", color=MarkerDark.TEXT_PRIMARY)
                dpg.add_spacer(width=40)
                export_button = dpg.add_button(label="Export CSV", callback=self._show_export_dialog)
                dpg.bind_item_theme(export_button, create_link_button_theme())

            dpg.add_spacer(height=12)

            # Timeline lanes
            for track in Track:
                timeline = TimelineTrack(track, self.app_state,
                                         on_markers_changed=self._on_markers_changed)
                timeline.create_inline()
                self.timelines[track] = timeline
                dpg.add_spacer(height=16)

            # Clear + BPM tapper
            with dpg.group(horizontal=True):
                clear_button = dpg.add_button(label="Clear All Markers", callback=self._on_clear_all)
                dpg.bind_item_theme(clear_button, create_accent_button_theme())
                dpg.add_spacer(width=24)
                self.bpm_tapper.create_inline()

            dpg.add_spacer(height=16)

            # Marker lists side by side
            with dpg.table(header_row=False, borders_innerV=False):
                for _ in Track:
                    dpg.add_table_column()
                with dpg.table_row():
                    for track in Track:
                        panel = MarkerPanel(track, self.app_state,
                                            on_markers_changed=self._on_markers_changed)
                        panel.create()
                        self.panels[track] = panel

            dpg.add_spacer(height=24)

            self.duration_calculator.create_inline()

            dpg.add_spacer(height=8)
            dpg.add_text("", tag=self._status_tag, color=MarkerDark.TEXT_SECONDARY)

        self._setup_keyboard_handlers()

        return self._window_tag

    def _setup_keyboard_handlers(self):
        """Ctrl+E exports."""
        with dpg.handler_registry():
            dpg.add_key_press_handler(dpg.mvKey_E, callback=lambda: self._handle_ctrl_e())

    def _handle_ctrl_e(self):
        """Handle Ctrl+E for export (check if Ctrl is held)."""
        if dpg.is_key_down(dpg.mvKey_Control) or dpg.is_key_down(dpg.mvKey_LControl) or dpg.is_key_down(dpg.mvKey_RControl):
            self._show_export_dialog()

    def _on_markers_changed(self):
        """Redraw lanes and marker lists from the current snapshot."""
        for timeline in self.timelines.values():
            timeline.draw()
        for panel in self.panels.values():
            panel.refresh()

    def _on_clear_all(self):
        count = len(self.app_state.markers)
        self.app_state.markers.clear()
        print(f"[MARKER] Cleared {count} markers")
        self._on_markers_changed()

    # Export

    def _show_export_dialog(self):
        """Show file dialog for CSV export."""
        general = self.settings.get("general", {})
        target = CsvExporter.default_path(
            general.get("export_directory", str(Path.home() / "Documents")),
            general.get("export_filename", EXPORT_FILENAME)
        )
        # Reopen where the last export went
        last_export = self.app_state.get_last_export_path()
        export_dir = Path(last_export).parent if last_export else target.parent

        if not dpg.does_item_exist(self._export_dialog_tag):
            with dpg.file_dialog(
                directory_selector=False,
                show=False,
                callback=self._export_dialog_callback,
                tag=self._export_dialog_tag,
                width=700,
                height=400,
                default_path=str(export_dir),
                default_filename=target.stem
            ):
                dpg.add_file_extension(".csv", color=MarkerDark.ACCENT_BLUE)
                dpg.add_file_extension(".*")
        else:
            dpg.configure_item(self._export_dialog_tag, default_path=str(export_dir))

        dpg.show_item(self._export_dialog_tag)

    def _export_dialog_callback(self, sender, app_data):
        """Handle export file dialog selection."""
        file_path = app_data.get('file_path_name')
        if not file_path:
            print("[EXPORT] No file path, user cancelled")
            return
        self.export_to(file_path)

    def export_to(self, file_path: str) -> Optional[Path]:
        """
        Write the current snapshot to a CSV file.

        Returns:
            Written path, or None if the export failed
        """
        snapshot = self.app_state.markers.snapshot()
        try:
            path = CsvExporter.save(snapshot, file_path)
        except IOError as e:
            print(f"[ERROR] {e}")
            self._set_status(f"Export failed: {e}")
            return None

        self.app_state.set_last_export_path(str(path))
        print(f"[EXPORT] Wrote {len(snapshot)} markers to {path}")
        self._set_status(f"Exported {len(snapshot)} markers to {path}")
        return path

    def _set_status(self, text: str):
        if dpg.does_item_exist(self._status_tag):
            dpg.set_value(self._status_tag, text)

    def update(self):
        """Update method called every frame (lane auto-resize)."""
        for timeline in self.timelines.values():
            timeline.update()

    # Window Management

    def show(self):
        """Show the marker window."""
        if dpg.does_item_exist(self._window_tag):
            dpg.show_item(self._window_tag)

    def hide(self):
        """Hide the marker window."""
        if dpg.does_item_exist(self._window_tag):
            dpg.hide_item(self._window_tag)

    def destroy(self):
        """Destroy the marker window."""
        if dpg.does_item_exist(self._window_tag):
            dpg.delete_item(self._window_tag)

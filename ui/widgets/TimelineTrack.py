"""
Timeline Track - clickable lane for placing markers on one segment.

Layout (drawlist):
- Hover readout band (MM:SS bubble above the pointer)
- Lane with minor ticks every 10 s and major ticks every minute
- Marker lines (red)
- Minute labels under the lane
"""

import dearpygui.dearpygui as dpg
from typing import Optional, Callable, Tuple

from core.constants import Track, TIMELINE_LENGTH, format_mm_ss
from core.models import AppState
from core.timeline import pixel_to_time, time_to_pixel, ruler_ticks, ruler_labels
from ui.theme import MarkerDark

# Vertical layout (pixels)
READOUT_HEIGHT = 22
LANE_HEIGHT = 32
LABEL_HEIGHT = 18
MINOR_TICK_HEIGHT = 16
CANVAS_HEIGHT = READOUT_HEIGHT + LANE_HEIGHT + LABEL_HEIGHT


class TimelineTrack:
    """One annotation lane. Left-click places a marker at the pointer time."""

    def __init__(self, track: Track, app_state: AppState, width: int = 1000,
                 on_markers_changed: Optional[Callable] = None):
        """
        Args:
            track: Track this lane places markers on
            app_state: Shared session state
            width: Initial canvas width (follows the container afterwards)
            on_markers_changed: Callback after a marker is placed
        """
        self.track = track
        self.app_state = app_state
        self.width = width
        self.height = CANVAS_HEIGHT
        self.on_markers_changed = on_markers_changed

        self._hovered = False
        self._last_container_size = (0, 0)

        # DearPyGui IDs
        self.canvas_id = None
        self._canvas_container = None

    def _get_canvas_width(self) -> int:
        """Get current canvas width from container (for auto-resize support)."""
        if self._canvas_container and dpg.does_item_exist(self._canvas_container):
            rect = dpg.get_item_rect_size(self._canvas_container)
            if rect[0] > 0:
                return int(rect[0])
        return self.width

    def _get_local_mouse(self) -> Tuple[float, float]:
        """Mouse position relative to the canvas's top-left corner."""
        mouse_pos = dpg.get_mouse_pos(local=False)
        canvas_rect_min = dpg.get_item_rect_min(self.canvas_id)
        return mouse_pos[0] - canvas_rect_min[0], mouse_pos[1] - canvas_rect_min[1]

    def update(self):
        """Update lane (called every frame by MarkerView)."""
        current_size = (self._get_canvas_width(), self.height)
        if current_size != self._last_container_size:
            self._last_container_size = current_size
            self.draw()

    def draw(self):
        """Redraw lane, ruler, markers and hover readout."""
        if not self.canvas_id:
            return

        new_width = self._get_canvas_width()
        if new_width != self.width:
            self.width = new_width
            if dpg.does_item_exist(self.canvas_id):
                dpg.configure_item(self.canvas_id, width=self.width)

        dpg.delete_item(self.canvas_id, children_only=True)

        lane_top = READOUT_HEIGHT
        lane_bottom = READOUT_HEIGHT + LANE_HEIGHT

        # Lane background
        dpg.draw_rectangle(
            (0, lane_top), (self.width, lane_bottom),
            color=MarkerDark.BG_PANEL,
            fill=MarkerDark.BG_PANEL,
            rounding=16,
            parent=self.canvas_id
        )

        self._draw_ruler(lane_top, lane_bottom)
        self._draw_markers(lane_top, lane_bottom)
        self._draw_hover_readout()

    def _draw_ruler(self, lane_top: float, lane_bottom: float):
        """Minor/major ticks and minute labels."""
        for t, is_major in ruler_ticks(TIMELINE_LENGTH):
            x = time_to_pixel(t, self.width)
            if is_major:
                dpg.draw_line((x, lane_top), (x, lane_bottom),
                              color=MarkerDark.ACCENT_BLUE, thickness=1, parent=self.canvas_id)
            else:
                dpg.draw_line((x, lane_top), (x, lane_top + MINOR_TICK_HEIGHT),
                              color=MarkerDark.BORDER, thickness=1, parent=self.canvas_id)

        for t, text in ruler_labels(TIMELINE_LENGTH):
            x = time_to_pixel(t, self.width)
            # Approximate centering (7px per glyph at size 13)
            dpg.draw_text((x - 3.5 * len(text), lane_bottom + 2), text,
                          color=MarkerDark.ACCENT_BLUE, size=13, parent=self.canvas_id)

    def _draw_markers(self, lane_top: float, lane_bottom: float):
        for marker in self.app_state.markers.view_by_track(self.track):
            x = time_to_pixel(marker.time, self.width)
            dpg.draw_line((x, lane_top), (x, lane_bottom),
                          color=MarkerDark.MARKER, thickness=2, parent=self.canvas_id)

    def _draw_hover_readout(self):
        hover = self.app_state.get_hover()
        if hover is None or hover[0] is not self.track:
            return

        _, hover_time, hover_x = hover
        text = format_mm_ss(hover_time)
        half_width = 22
        x = max(half_width, min(self.width - half_width, hover_x))
        dpg.draw_rectangle((x - half_width, 0), (x + half_width, READOUT_HEIGHT - 3),
                           color=MarkerDark.BG_TOOLTIP, fill=MarkerDark.BG_TOOLTIP,
                           rounding=3, parent=self.canvas_id)
        dpg.draw_text((x - half_width + 5, 2), text,
                      color=(255, 255, 255, 255), size=14, parent=self.canvas_id)

    def _handle_canvas_click(self, sender, app_data):
        """Place a marker at the clicked time."""
        mouse_x, _ = self._get_local_mouse()
        time = pixel_to_time(mouse_x, self.width, TIMELINE_LENGTH)
        marker = self.app_state.markers.create(self.track, time)
        print(f"[MARKER] Added #{marker.id} on {self.track.value} at {marker.formatted_time}")

        if self.on_markers_changed:
            self.on_markers_changed()
        else:
            self.draw()

    def _handle_mouse_move(self, sender, app_data):
        """Update hover readout while the pointer is over the lane; clear it on leave."""
        if not self.canvas_id or not dpg.does_item_exist(self.canvas_id):
            return

        if dpg.is_item_hovered(self.canvas_id):
            mouse_x, _ = self._get_local_mouse()
            self.app_state.set_hover(self.track, mouse_x, self.width)
            self._hovered = True
            self.draw()
        elif self._hovered:
            self._hovered = False
            hover = self.app_state.get_hover()
            if hover is not None and hover[0] is self.track:
                self.app_state.clear_hover()
            self.draw()

    def create_inline(self, parent=None):
        """
        Create lane inline (embedded in current container).

        Args:
            parent: Parent container tag (optional)
        """
        kwargs = {"parent": parent} if parent else {}
        with dpg.group(horizontal=True, **kwargs):
            dpg.add_text(self.track.short_name, color=MarkerDark.ACCENT_BLUE)

            # Canvas wrapped in child_window for auto-resize
            with dpg.child_window(border=False, height=self.height + 4,
                                  no_scrollbar=True) as canvas_container:
                self.canvas_id = dpg.add_drawlist(width=self.width, height=self.height)
                self._canvas_container = canvas_container

        # Mouse handlers for canvas
        with dpg.item_handler_registry() as handler:
            dpg.add_item_clicked_handler(button=dpg.mvMouseButton_Left, callback=self._handle_canvas_click)
        dpg.bind_item_handler_registry(self.canvas_id, handler)

        # Mouse move handler (window-level) for hover and leave
        with dpg.handler_registry():
            dpg.add_mouse_move_handler(callback=self._handle_mouse_move)

        # Initial draw
        self.draw()

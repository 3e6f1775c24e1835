"""
Marker list for one track.

Each marker card shows:
- Time (MM:SS)
- Transformation label combo
- Delete button
- Note field
"""
import dearpygui.dearpygui as dpg
from typing import Optional, Callable, Tuple

from core.constants import Track, TransformationLabel
from core.models import AppState, Marker
from ui.theme import MarkerDark, create_delete_button_theme


class MarkerPanel:
    """
    Chronological marker list for a single track.

    Layout (vertical):
    ┌──────────────────────────────────┐
    │ Segment A Markers                │
    ├──────────────────────────────────┤
    │ 01:15  [Label ▼]  [Delete]       │
    │ [Add note...                   ] │
    ├──────────────────────────────────┤
    │ ...                              │
    └──────────────────────────────────┘
    """

    def __init__(self, track: Track, app_state: AppState, height: int = 384,
                 on_markers_changed: Optional[Callable] = None):
        """
        Args:
            track: Track whose markers are listed
            app_state: Shared session state
            height: List height in pixels (scrolls beyond that)
            on_markers_changed: Callback after a marker is deleted
        """
        self.track = track
        self.app_state = app_state
        self.height = height
        self.on_markers_changed = on_markers_changed

        # Ids currently rendered, in display order
        self._rendered_ids: Optional[Tuple[int, ...]] = None

        # UI tags
        slug = track.short_name.lower()
        self._group_tag = f"marker_panel_{slug}"
        self._list_tag = f"marker_panel_list_{slug}"
        self._delete_theme = None

    def create(self, parent: Optional[str] = None) -> str:
        """
        Create panel UI.

        Args:
            parent: Parent container tag (optional)

        Returns:
            Group tag for this panel
        """
        self._delete_theme = create_delete_button_theme()

        kwargs = {"parent": parent} if parent else {}
        with dpg.group(tag=self._group_tag, **kwargs):
            dpg.add_text(f"{self.track.value} Markers")
            dpg.add_child_window(tag=self._list_tag, height=self.height, border=False,
                                 no_scrollbar=True)

        self.refresh(force=True)
        return self._group_tag

    def refresh(self, force: bool = False):
        """
        Rebuild marker cards if the set or order of markers changed.

        Label/note edits don't change the id sequence, so the input being
        typed into keeps its focus.
        """
        if not dpg.does_item_exist(self._list_tag):
            return

        markers = self.app_state.markers.view_by_track(self.track)
        ids = tuple(m.id for m in markers)
        if not force and ids == self._rendered_ids:
            return
        self._rendered_ids = ids

        dpg.delete_item(self._list_tag, children_only=True)
        for marker in markers:
            self._create_marker_card(marker)

    def _create_marker_card(self, marker: Marker):
        with dpg.child_window(parent=self._list_tag, height=82, border=True):
            with dpg.group(horizontal=True):
                dpg.add_text(marker.formatted_time, color=MarkerDark.TEXT_PRIMARY)
                dpg.add_spacer(width=12)
                dpg.add_combo(
                    items=TransformationLabel.choices(),
                    default_value=marker.label.value,
                    width=240,
                    callback=self._on_label_changed,
                    user_data=marker.id
                )
                dpg.add_spacer(width=12)
                delete_button = dpg.add_button(
                    label="Delete",
                    callback=self._on_delete,
                    user_data=marker.id
                )
                dpg.bind_item_theme(delete_button, self._delete_theme)

            dpg.add_input_text(
                default_value=marker.note,
                hint="Add note...",
                width=-1,
                callback=self._on_note_changed,
                user_data=marker.id
            )

    def _on_label_changed(self, sender, app_data, user_data):
        self.app_state.markers.update(user_data, "label", app_data)

    def _on_note_changed(self, sender, app_data, user_data):
        self.app_state.markers.update(user_data, "note", app_data)

    def _on_delete(self, sender, app_data, user_data):
        self.app_state.markers.delete(user_data)
        print(f"[MARKER] Deleted #{user_data} from {self.track.value}")

        if self.on_markers_changed:
            self.on_markers_changed()
        else:
            self.refresh()

"""
Duration Calculator widget.

Paste a time segment description, press Enter (or Calculate) to get the
video and audio elapsed durations.
"""
import dearpygui.dearpygui as dpg
from typing import Optional

from core.duration import calculate
from core.models import AppState
from ui.theme import MarkerDark, create_accent_button_theme, create_primary_button_theme


class DurationCalculator:
    """Text input, Calculate/Reset buttons and result box."""

    def __init__(self, app_state: AppState):
        self.app_state = app_state

        # DearPyGui tags
        self._input_tag = "duration_calc_input"
        self._result_tag = "duration_calc_result"

    def create_inline(self, parent: Optional[str] = None):
        """
        Create calculator inline.

        Args:
            parent: Parent container tag (None for current container)
        """
        kwargs = {"parent": parent} if parent else {}
        with dpg.group(**kwargs):
            dpg.add_separator()
            dpg.add_spacer(height=8)
            dpg.add_text("Duration Calculator", color=MarkerDark.TEXT_PRIMARY)
            dpg.add_spacer(height=4)

            # Enter calculates; Ctrl+Enter inserts a line break
            dpg.add_input_text(
                tag=self._input_tag,
                hint="Paste copied time segment input here",
                multiline=True,
                on_enter=True,
                width=-1,
                height=48,
                callback=self.calculate
            )

            with dpg.group(horizontal=True):
                calc_button = dpg.add_button(label="Calculate", callback=self.calculate)
                dpg.bind_item_theme(calc_button, create_primary_button_theme())
                reset_button = dpg.add_button(label="Reset", callback=self.reset)
                dpg.bind_item_theme(reset_button, create_accent_button_theme())

            dpg.add_text("", tag=self._result_tag, color=MarkerDark.TEXT_PRIMARY)

    def calculate(self, sender=None, app_data=None):
        """Parse the input text and show the result."""
        text = dpg.get_value(self._input_tag) or ""
        result = calculate(text)
        self.app_state.set_duration_result(result)
        dpg.set_value(self._result_tag, result)

    def reset(self, sender=None, app_data=None):
        """Clear input and result."""
        self.app_state.set_duration_result(None)
        dpg.set_value(self._input_tag, "")
        dpg.set_value(self._result_tag, "")

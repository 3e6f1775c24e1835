"""
Tap tempo widget: Tap BPM / Reset buttons and the BPM readout.
"""
import dearpygui.dearpygui as dpg
from typing import Optional

from core.tempo import TempoEstimator
from ui.theme import MarkerDark, create_accent_button_theme, create_link_button_theme


class BpmTapper:
    """Buttons and readout driving a TempoEstimator."""

    def __init__(self, tempo: TempoEstimator):
        """
        Args:
            tempo: Estimator owned by the session AppState
        """
        self.tempo = tempo

        # DearPyGui tags
        self._readout_tag = "bpm_tapper_readout"
        self._tap_button_tag = "bpm_tapper_tap"

    def create_inline(self, parent: Optional[str] = None):
        """
        Create inline tapper (embedded in parent container).

        Args:
            parent: Parent container tag (None for current container)
        """
        kwargs = {"parent": parent} if parent else {}
        with dpg.group(horizontal=True, **kwargs):
            dpg.add_button(label="Tap BPM", tag=self._tap_button_tag, callback=self.tap)
            dpg.bind_item_theme(self._tap_button_tag, create_accent_button_theme())

            reset_button = dpg.add_button(label="Reset", callback=self.reset)
            dpg.bind_item_theme(reset_button, create_link_button_theme())

            dpg.add_text("", tag=self._readout_tag, color=MarkerDark.MARKER)

        self._update_readout()

    def tap(self, sender=None, app_data=None):
        """Register a tap from the Tap BPM button."""
        self.tempo.tap()
        self._update_readout()

    def reset(self, sender=None, app_data=None):
        """Forget taps and hide the readout."""
        self.tempo.reset()
        self._update_readout()

    def _update_readout(self):
        if not dpg.does_item_exist(self._readout_tag):
            return
        bpm = self.tempo.bpm
        dpg.set_value(self._readout_tag, f"BPM: {bpm}" if bpm is not None else "")

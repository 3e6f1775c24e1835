"""
Dark theme for Transformation Marker.
Provides color palette and DearPyGui theme configuration.
"""
import dearpygui.dearpygui as dpg


class MarkerDark:
    """Color constants for the marker timeline."""

    # Background colors
    BG_WINDOW = (30, 30, 47, 255)          # #1E1E2F - Main window background
    BG_PANEL = (42, 45, 64, 255)           # #2A2D40 - Track lanes, marker cards
    BG_HOVER = (55, 65, 96, 255)           # #374160 - Hover state
    BG_TOOLTIP = (0, 0, 0, 255)            # Hover time readout

    # Border colors
    BORDER = (74, 77, 96, 255)             # #4A4D60 - General borders, minor ticks

    # Text colors
    TEXT_PRIMARY = (244, 245, 252, 255)    # #F4F5FC - Primary text
    TEXT_SECONDARY = (150, 150, 165, 255)  # Hints

    # Accent colors
    ACCENT_BLUE = (142, 187, 255, 255)     # #8EBBFF - Lane badges, major ticks, links
    ACCENT_BLUE_HOVER = (166, 204, 255, 255)  # #A6CCFF
    ACCENT_BLUE_ACTIVE = (120, 165, 235, 255)

    # Markers / destructive actions
    MARKER = (255, 107, 107, 255)          # #FF6B6B - Marker lines, BPM readout, delete
    MARKER_HOVER = (230, 80, 80, 255)
    MARKER_ACTIVE = (200, 60, 60, 255)

    BUTTON_NORMAL = BG_PANEL
    BUTTON_HOVER = BG_HOVER
    BUTTON_ACTIVE = (65, 75, 110, 255)

    # Spacing
    FRAME_PADDING = (8, 6)
    ITEM_SPACING = (8, 6)
    WINDOW_PADDING = (24, 24)


def apply_marker_theme() -> None:
    """
    Apply the dark theme to DearPyGui.
    Call this once during application initialization.
    """
    with dpg.theme() as global_theme:
        with dpg.theme_component(dpg.mvAll):
            # Window/frame colors
            dpg.add_theme_color(dpg.mvThemeCol_WindowBg, MarkerDark.BG_WINDOW)
            dpg.add_theme_color(dpg.mvThemeCol_ChildBg, MarkerDark.BG_WINDOW)
            dpg.add_theme_color(dpg.mvThemeCol_PopupBg, MarkerDark.BG_PANEL)
            dpg.add_theme_color(dpg.mvThemeCol_Border, MarkerDark.BORDER)
            dpg.add_theme_color(dpg.mvThemeCol_FrameBg, MarkerDark.BG_PANEL)
            dpg.add_theme_color(dpg.mvThemeCol_FrameBgHovered, MarkerDark.BG_HOVER)
            dpg.add_theme_color(dpg.mvThemeCol_FrameBgActive, MarkerDark.BG_HOVER)

            # Text colors
            dpg.add_theme_color(dpg.mvThemeCol_Text, MarkerDark.TEXT_PRIMARY)
            dpg.add_theme_color(dpg.mvThemeCol_TextDisabled, MarkerDark.TEXT_SECONDARY)

            # Button colors
            dpg.add_theme_color(dpg.mvThemeCol_Button, MarkerDark.BUTTON_NORMAL)
            dpg.add_theme_color(dpg.mvThemeCol_ButtonHovered, MarkerDark.BUTTON_HOVER)
            dpg.add_theme_color(dpg.mvThemeCol_ButtonActive, MarkerDark.BUTTON_ACTIVE)

            # Combo list entries
            dpg.add_theme_color(dpg.mvThemeCol_Header, MarkerDark.BG_HOVER)
            dpg.add_theme_color(dpg.mvThemeCol_HeaderHovered, MarkerDark.BG_HOVER)
            dpg.add_theme_color(dpg.mvThemeCol_HeaderActive, MarkerDark.BUTTON_ACTIVE)

            # Scrollbars are hidden in the marker lists, keep them subtle elsewhere
            dpg.add_theme_color(dpg.mvThemeCol_ScrollbarBg, MarkerDark.BG_WINDOW)
            dpg.add_theme_color(dpg.mvThemeCol_ScrollbarGrab, MarkerDark.BORDER)

            # Spacing
            dpg.add_theme_style(dpg.mvStyleVar_FramePadding, MarkerDark.FRAME_PADDING[0], MarkerDark.FRAME_PADDING[1])
            dpg.add_theme_style(dpg.mvStyleVar_ItemSpacing, MarkerDark.ITEM_SPACING[0], MarkerDark.ITEM_SPACING[1])
            dpg.add_theme_style(dpg.mvStyleVar_WindowPadding, MarkerDark.WINDOW_PADDING[0], MarkerDark.WINDOW_PADDING[1])
            dpg.add_theme_style(dpg.mvStyleVar_FrameRounding, 4)
            dpg.add_theme_style(dpg.mvStyleVar_ChildRounding, 6)

    dpg.bind_theme(global_theme)


def apply_ui_scale(scale: float) -> None:
    """Scale all fonts (0.5x - 2.0x)."""
    dpg.set_global_font_scale(max(0.5, min(2.0, float(scale))))


def create_accent_button_theme() -> int:
    """
    Create outlined accent button theme (Tap BPM, Clear, Reset).

    Returns:
        Theme tag that can be bound to buttons
    """
    with dpg.theme() as accent_theme:
        with dpg.theme_component(dpg.mvButton):
            dpg.add_theme_color(dpg.mvThemeCol_Button, MarkerDark.BG_PANEL)
            dpg.add_theme_color(dpg.mvThemeCol_ButtonHovered, MarkerDark.BG_HOVER)
            dpg.add_theme_color(dpg.mvThemeCol_ButtonActive, MarkerDark.BUTTON_ACTIVE)
            dpg.add_theme_color(dpg.mvThemeCol_Text, MarkerDark.ACCENT_BLUE)
            dpg.add_theme_color(dpg.mvThemeCol_Border, MarkerDark.ACCENT_BLUE)
            dpg.add_theme_style(dpg.mvStyleVar_FrameBorderSize, 1)

    return accent_theme


def create_primary_button_theme() -> int:
    """
    Create filled accent button theme (Calculate).

    Returns:
        Theme tag that can be bound to buttons
    """
    with dpg.theme() as primary_theme:
        with dpg.theme_component(dpg.mvButton):
            dpg.add_theme_color(dpg.mvThemeCol_Button, MarkerDark.ACCENT_BLUE)
            dpg.add_theme_color(dpg.mvThemeCol_ButtonHovered, MarkerDark.ACCENT_BLUE_HOVER)
            dpg.add_theme_color(dpg.mvThemeCol_ButtonActive, MarkerDark.ACCENT_BLUE_ACTIVE)
            dpg.add_theme_color(dpg.mvThemeCol_Text, MarkerDark.BG_WINDOW)

    return primary_theme


def create_delete_button_theme() -> int:
    """
    Create delete button theme (red).

    Returns:
        Theme tag that can be bound to buttons
    """
    with dpg.theme() as delete_theme:
        with dpg.theme_component(dpg.mvButton):
            dpg.add_theme_color(dpg.mvThemeCol_Button, MarkerDark.MARKER)
            dpg.add_theme_color(dpg.mvThemeCol_ButtonHovered, MarkerDark.MARKER_HOVER)
            dpg.add_theme_color(dpg.mvThemeCol_ButtonActive, MarkerDark.MARKER_ACTIVE)
            dpg.add_theme_color(dpg.mvThemeCol_Text, (255, 255, 255, 255))

    return delete_theme


def create_link_button_theme() -> int:
    """
    Create borderless text-style button theme (Export CSV).

    Returns:
        Theme tag that can be bound to buttons
    """
    with dpg.theme() as link_theme:
        with dpg.theme_component(dpg.mvButton):
            dpg.add_theme_color(dpg.mvThemeCol_Button, (0, 0, 0, 0))
            dpg.add_theme_color(dpg.mvThemeCol_ButtonHovered, (0, 0, 0, 0))
            dpg.add_theme_color(dpg.mvThemeCol_ButtonActive, (0, 0, 0, 0))
            dpg.add_theme_color(dpg.mvThemeCol_Text, MarkerDark.ACCENT_BLUE)

    return link_theme

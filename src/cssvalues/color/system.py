"""
System colors — CSS <system-color>

Keywords resolved by the user agent from the platform palette (forced
colors mode, high contrast themes). The CSS Color 4 set plus the deprecated
CSS2 keywords, which browsers still accept and map to a current keyword.
"""

from typing import Optional

from cssvalues.values.base import CSSKeyword


class SystemColor(CSSKeyword):
    """CSS system color keywords"""

    ACCENT_COLOR = "AccentColor"
    ACCENT_COLOR_TEXT = "AccentColorText"
    ACTIVE_TEXT = "ActiveText"
    BUTTON_BORDER = "ButtonBorder"
    BUTTON_FACE = "ButtonFace"
    BUTTON_TEXT = "ButtonText"
    CANVAS = "Canvas"
    CANVAS_TEXT = "CanvasText"
    FIELD = "Field"
    FIELD_TEXT = "FieldText"
    GRAY_TEXT = "GrayText"
    HIGHLIGHT = "Highlight"
    HIGHLIGHT_TEXT = "HighlightText"
    LINK_TEXT = "LinkText"
    MARK = "Mark"
    MARK_TEXT = "MarkText"
    SELECTED_ITEM = "SelectedItem"
    SELECTED_ITEM_TEXT = "SelectedItemText"
    VISITED_TEXT = "VisitedText"

    # Deprecated
    ACTIVE_BORDER = "ActiveBorder"
    ACTIVE_CAPTION = "ActiveCaption"
    APP_WORKSPACE = "AppWorkspace"
    BACKGROUND = "Background"
    BUTTON_HIGHLIGHT = "ButtonHighlight"
    BUTTON_SHADOW = "ButtonShadow"
    CAPTION_TEXT = "CaptionText"

    @property
    def is_deprecated(self) -> bool:
        return self in DEPRECATED_REPLACEMENTS

    @property
    def replacement(self) -> Optional["SystemColor"]:
        """Current keyword a deprecated one maps to, None for current keywords."""
        return DEPRECATED_REPLACEMENTS.get(self)


DEPRECATED_REPLACEMENTS = {
    SystemColor.ACTIVE_BORDER: SystemColor.BUTTON_BORDER,
    SystemColor.ACTIVE_CAPTION: SystemColor.CANVAS,
    SystemColor.APP_WORKSPACE: SystemColor.CANVAS,
    SystemColor.BACKGROUND: SystemColor.CANVAS,
    SystemColor.BUTTON_HIGHLIGHT: SystemColor.BUTTON_FACE,
    SystemColor.BUTTON_SHADOW: SystemColor.BUTTON_FACE,
    SystemColor.CAPTION_TEXT: SystemColor.CANVAS_TEXT,
}

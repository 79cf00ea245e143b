"""
Base widget helpers for HueWheel PySide6 components.

Provides common functionality:
- ClickableFrame: QFrame with clicked signal
- hsb_to_qcolor: QColor through the same conversion as the hex preview
- set_window_palette: dark QPalette for the main window
"""

from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QFrame, QWidget

from ..core.models import SATURATION
from ..services.color import ColorService
from .constants import Colors


class ClickableFrame(QFrame):
    """QFrame that emits clicked signal."""

    clicked = Signal()

    def mousePressEvent(self, event):
        self.clicked.emit()
        super().mousePressEvent(event)


def hsb_to_qcolor(hue: float, brightness: float, saturation: float = SATURATION) -> QColor:
    """QColor for an HSB triple.

    Goes through ColorService rather than QColor.fromHsvF so painted
    colors match the hex string byte for byte.
    """
    r, g, b = ColorService.rgb_bytes(hue, saturation, brightness)
    return QColor(r, g, b)


def set_window_palette(widget: QWidget) -> None:
    """Apply the dark window palette."""
    palette = widget.palette()
    palette.setColor(QPalette.ColorRole.Window, QColor(Colors.WINDOW_BG))
    palette.setColor(QPalette.ColorRole.WindowText, QColor(Colors.WINDOW_TEXT))
    widget.setPalette(palette)
    widget.setAutoFillBackground(True)

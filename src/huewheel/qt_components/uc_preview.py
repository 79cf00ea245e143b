"""
UCPreview - Selected color swatch with hex readout.

A 92x92 swatch next to a "HEX" caption and the monospace hex string.
``pulse()`` briefly brightens the swatch border as selection feedback.
"""
from __future__ import annotations

from typing import Tuple

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QColor
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from .constants import Colors, Sizes, Styles, Timing


class UCPreview(QWidget):
    """Preview row: swatch, caption, hex value."""

    def __init__(self, parent=None):
        super().__init__(parent)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(Sizes.PREVIEW_SPACING)

        self.swatch = QFrame(self)
        self.swatch.setObjectName("previewSwatch")
        self.swatch.setFixedSize(Sizes.PREVIEW_SWATCH, Sizes.PREVIEW_SWATCH)
        layout.addWidget(self.swatch)

        text_col = QVBoxLayout()
        text_col.setSpacing(6)
        self.caption = QLabel("HEX", self)
        self.caption.setStyleSheet(Styles.HEX_CAPTION)
        self.hex_label = QLabel("", self)
        self.hex_label.setStyleSheet(Styles.HEX_VALUE)
        self.hex_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        text_col.addWidget(self.caption)
        text_col.addWidget(self.hex_label)
        text_col.addStretch(1)
        layout.addLayout(text_col)
        layout.addStretch(1)

        self._fill = "#000000"
        self._border = Colors.PREVIEW_BORDER
        self._pulsing = False
        self._apply_frame_style()

    # ----------------------------------------------------------------
    # Public API
    # ----------------------------------------------------------------

    @property
    def hex_text(self) -> str:
        return self.hex_label.text()

    @property
    def is_pulsing(self) -> bool:
        return self._pulsing

    def set_color(self, hex_value: str, rgb: Tuple[int, int, int]) -> None:
        self._fill = QColor(*rgb).name()
        self._apply_frame_style()
        self.hex_label.setText(hex_value)
        self.hex_label.setToolTip(f"rgb({rgb[0]}, {rgb[1]}, {rgb[2]})")

    def pulse(self) -> None:
        """Light-impact feedback: flash the border, restore after a beat."""
        self._pulsing = True
        self._border = Colors.PREVIEW_PULSE
        self._apply_frame_style()
        QTimer.singleShot(Timing.FEEDBACK_PULSE_MS, self._end_pulse)

    # ----------------------------------------------------------------
    # Internals
    # ----------------------------------------------------------------

    def _end_pulse(self) -> None:
        self._pulsing = False
        self._border = Colors.PREVIEW_BORDER
        self._apply_frame_style()

    def _apply_frame_style(self) -> None:
        self.swatch.setStyleSheet(Styles.preview_frame(self._fill, self._border))

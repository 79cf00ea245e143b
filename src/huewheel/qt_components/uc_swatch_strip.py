"""
UCSwatchStrip - Horizontal row of clickable color swatches.

Used twice under the wheel: the fine-adjustment strip (nine ±1° nudges)
and the harmony strip (complementary, triadic, analogous). The strip
only displays; selection goes back through ``swatch_clicked``.
"""
from __future__ import annotations

from typing import List

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QHBoxLayout, QSizePolicy, QWidget

from ..core.models import Swatch
from .base import ClickableFrame, hsb_to_qcolor
from .constants import Sizes


class UCSwatchStrip(QWidget):
    """Equal-width swatches, one per hue offset.

    Attributes:
        swatch_clicked: Emitted with the offset (degrees) of the clicked swatch.
    """

    swatch_clicked = Signal(float)

    def __init__(self, height: int = Sizes.FINE_STRIP_H, parent=None):
        super().__init__(parent)
        self.setFixedHeight(height)

        self._layout = QHBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(Sizes.SWATCH_SPACING)

        self._frames: List[ClickableFrame] = []
        self._swatches: List[Swatch] = []

    @property
    def swatches(self) -> List[Swatch]:
        return list(self._swatches)

    @property
    def frames(self) -> List[ClickableFrame]:
        return list(self._frames)

    def set_swatches(self, swatches: List[Swatch]) -> None:
        """Recolor in place; rebuild frames only when the count changes."""
        if len(swatches) != len(self._frames):
            self._rebuild(len(swatches))
        self._swatches = list(swatches)
        for frame, sw in zip(self._frames, self._swatches):
            frame.setToolTip(f"{sw.name}  {sw.hex}")
            color = hsb_to_qcolor(sw.hue, sw.brightness)
            frame.setStyleSheet(f"background-color: {color.name()}; border: none;")

    def _rebuild(self, count: int) -> None:
        for frame in self._frames:
            self._layout.removeWidget(frame)
            frame.deleteLater()
        self._frames = []
        for i in range(count):
            frame = ClickableFrame(self)
            frame.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
            frame.clicked.connect(lambda i=i: self._on_frame_clicked(i))
            self._layout.addWidget(frame)
            self._frames.append(frame)

    def _on_frame_clicked(self, index: int) -> None:
        if 0 <= index < len(self._swatches):
            self.swatch_clicked.emit(self._swatches[index].offset_degrees)

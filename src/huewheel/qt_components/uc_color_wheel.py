#!/usr/bin/env python3
"""
Interactive ring-segment color wheel widget.

Paints ``ring_count × segment_count`` annular sectors with QPainter: hue
runs clockwise from 3 o'clock, brightness falls from the rim to the
center. A click inside the disc emits ``tapped`` with widget-local
coordinates of the centered wheel square; the controller resolves it to
a segment. The selected segment, if it sits on the grid, is outlined.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from PySide6.QtCore import QPointF, QRectF, Qt, Signal
from PySide6.QtGui import QColor, QPainter, QPainterPath, QPen
from PySide6.QtWidgets import QSizePolicy, QWidget

from ..core.models import RingSegment
from ..services.wheel import WheelService
from .constants import Colors, Sizes


def segment_path(segment: RingSegment, center: QPointF, max_radius: float) -> QPainterPath:
    """Closed annular-sector path.

    Qt measures arc angles counter-clockwise; the wheel's are clockwise,
    hence the sign flips.
    """
    outer_r = max_radius * segment.outer_radius_fraction
    inner_r = max_radius * segment.inner_radius_fraction
    outer_rect = QRectF(center.x() - outer_r, center.y() - outer_r, 2 * outer_r, 2 * outer_r)
    inner_rect = QRectF(center.x() - inner_r, center.y() - inner_r, 2 * inner_r, 2 * inner_r)

    path = QPainterPath()
    path.arcMoveTo(outer_rect, -segment.start_angle_deg)
    path.arcTo(outer_rect, -segment.start_angle_deg, -segment.span_deg)
    if inner_r > 0:
        path.arcTo(inner_rect, -segment.end_angle_deg, segment.span_deg)
    else:
        path.lineTo(center)
    path.closeSubpath()
    return path


class UCColorWheel(QWidget):
    """Ring-segment hue/brightness wheel with click selection.

    Attributes:
        tapped: Emitted with (x, y, side) of a click inside the wheel square.
    """

    tapped = Signal(float, float, float)

    def __init__(self, wheel: WheelService, parent=None):
        super().__init__(parent)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
        self.setMinimumSize(Sizes.WHEEL_MIN, Sizes.WHEEL_MIN)
        self.setMaximumSize(Sizes.WHEEL_MAX, Sizes.WHEEL_MAX)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

        self._wheel = wheel
        self._highlight: Optional[RingSegment] = None

        # (side, fills); rebuilt on resize
        self._cache: Optional[Tuple[float, List[Tuple[QPainterPath, QColor]]]] = None

    # ----------------------------------------------------------------
    # Public API
    # ----------------------------------------------------------------

    @property
    def wheel(self) -> WheelService:
        return self._wheel

    @property
    def highlighted(self) -> Optional[RingSegment]:
        return self._highlight

    def set_wheel(self, wheel: WheelService) -> None:
        """Swap the layout (ring/segment counts)."""
        self._wheel = wheel
        self._cache = None
        self.update()

    def set_selection(self, hue: float, brightness: float) -> None:
        """Outline the segment matching the selection, if any. No signal."""
        self._highlight = self._wheel.highlighted(hue, brightness)
        self.update()

    def hasHeightForWidth(self):
        return True

    def heightForWidth(self, width):
        return width

    # ----------------------------------------------------------------
    # Geometry
    # ----------------------------------------------------------------

    def _square(self) -> Tuple[float, float, float]:
        """(left, top, side) of the centered wheel square."""
        side = float(min(self.width(), self.height()))
        return (self.width() - side) / 2.0, (self.height() - side) / 2.0, side

    def _fills(self, side: float) -> List[Tuple[QPainterPath, QColor]]:
        if self._cache is not None and self._cache[0] == side:
            return self._cache[1]

        left, top, _ = self._square()
        center = QPointF(left + side / 2.0, top + side / 2.0)
        colors = self._wheel.colors()
        fills = []
        for seg in self._wheel.segments(expanded=True):
            r, g, b = (int(c) for c in colors[seg.ring_index, seg.segment_index])
            fills.append((segment_path(seg, center, side / 2.0), QColor(r, g, b)))
        self._cache = (side, fills)
        return fills

    # ----------------------------------------------------------------
    # Painting
    # ----------------------------------------------------------------

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        left, top, side = self._square()
        if side <= 0:
            painter.end()
            return

        painter.setPen(Qt.PenStyle.NoPen)
        for path, color in self._fills(side):
            painter.fillPath(path, color)

        if self._highlight is not None:
            center = QPointF(left + side / 2.0, top + side / 2.0)
            padded = self._highlight.expanded(self._wheel.angle_epsilon, self._wheel.radius_epsilon)
            path = segment_path(padded, center, side / 2.0)
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.setPen(QPen(QColor(*Colors.HIGHLIGHT_OUTER), Sizes.HIGHLIGHT_OUTER_W))
            painter.drawPath(path)
            painter.setPen(QPen(QColor(*Colors.HIGHLIGHT_INNER), Sizes.HIGHLIGHT_INNER_W))
            painter.drawPath(path)

        painter.end()

    def resizeEvent(self, event):
        self._cache = None
        super().resizeEvent(event)

    # ----------------------------------------------------------------
    # Mouse interaction
    # ----------------------------------------------------------------

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self.handle_tap(pos.x(), pos.y())

    def handle_tap(self, x: float, y: float) -> bool:
        """Translate a widget-local click into wheel-square coordinates.

        Returns True when the click landed on the disc.
        """
        left, top, side = self._square()
        if side <= 0:
            return False
        lx, ly = x - left, y - top
        if self._wheel.hit_test(lx, ly, side) is None:
            return False
        self.tapped.emit(lx, ly, side)
        return True

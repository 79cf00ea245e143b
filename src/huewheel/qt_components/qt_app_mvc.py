"""
PySide6 Main Application Window using MVC Architecture.

This is a View that uses ColorWheelController for all state and logic.
The controller can be reused with any front end (REST, CLI, tests).

Every selection flows one way:
    widget signal → controller.select*() → on_selection_changed → refresh()
"""
from __future__ import annotations

import logging
import sys

from PySide6.QtCore import Qt
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QApplication, QMainWindow, QVBoxLayout, QWidget

from ..conf import settings
from ..core.controllers import ColorWheelController
from ..core.models import Selection
from .base import set_window_palette
from .constants import Sizes
from .uc_color_wheel import UCColorWheel
from .uc_preview import UCPreview
from .uc_swatch_strip import UCSwatchStrip

log = logging.getLogger(__name__)


class HueWheelWindow(QMainWindow):
    """
    Main HueWheel window.

    This View:
    - Owns the ColorWheelController
    - Forwards wheel and strip clicks to the controller
    - Re-renders wheel highlight, strips and preview from controller state
    - Implements the clipboard and feedback collaborators
    """

    def __init__(self, controller: ColorWheelController | None = None,
                 copy_to_clipboard: bool = True, feedback: bool = True):
        super().__init__()
        self.setWindowTitle("HueWheel")
        self.setMinimumSize(Sizes.WINDOW_MIN_W, Sizes.WINDOW_MIN_H)

        self.controller = controller or ColorWheelController(
            settings.ring_count, settings.segment_count)

        self._build_ui()

        # Controller → View
        self.controller.on_selection_changed = self._on_selection_changed
        if copy_to_clipboard:
            self.controller.on_copy_hex = self._copy_to_clipboard
        if feedback:
            self.controller.on_feedback = self.preview.pulse

        # View → Controller
        self.wheel_view.tapped.connect(self.controller.tap_wheel)
        self.fine_strip.swatch_clicked.connect(self.controller.select_fine_adjustment)
        self.harmony_strip.swatch_clicked.connect(self.controller.select_harmony)

        # Initial render without side effects (no clipboard write on launch)
        self.refresh()

    def _build_ui(self) -> None:
        central = QWidget(self)
        set_window_palette(central)
        self.setCentralWidget(central)

        root = QVBoxLayout(central)
        root.setContentsMargins(Sizes.PADDING, Sizes.PADDING, Sizes.PADDING, Sizes.PADDING)
        root.setSpacing(Sizes.MAIN_SPACING)

        self.wheel_view = UCColorWheel(self.controller.wheel, central)
        root.addWidget(self.wheel_view, 0, Qt.AlignmentFlag.AlignHCenter)

        controls = QVBoxLayout()
        controls.setSpacing(Sizes.CONTROLS_SPACING)
        self.fine_strip = UCSwatchStrip(Sizes.FINE_STRIP_H, central)
        self.harmony_strip = UCSwatchStrip(Sizes.HARMONY_STRIP_H, central)
        self.preview = UCPreview(central)
        controls.addWidget(self.fine_strip)
        controls.addWidget(self.harmony_strip)
        controls.addWidget(self.preview)
        root.addLayout(controls)
        root.addStretch(1)

    # ----------------------------------------------------------------
    # Rendering
    # ----------------------------------------------------------------

    def refresh(self) -> None:
        """Derive every view from the controller's single selection."""
        sel = self.controller.selection
        self.wheel_view.set_selection(sel.hue, sel.brightness)
        self.fine_strip.set_swatches(self.controller.fine_adjustments())
        self.harmony_strip.set_swatches(self.controller.harmonies())
        self.preview.set_color(self.controller.hex, self.controller.rgb)

    def _on_selection_changed(self, selection: Selection) -> None:
        self.refresh()

    # ----------------------------------------------------------------
    # Collaborators
    # ----------------------------------------------------------------

    def _copy_to_clipboard(self, hex_value: str) -> None:
        QGuiApplication.clipboard().setText(hex_value)
        log.debug("Copied %s to clipboard", hex_value)


def run_app(ring_count: int | None = None, segment_count: int | None = None) -> int:
    """Run the PySide6 application.

    Args:
        ring_count: Override saved ring count.
        segment_count: Override saved segment count.
    """
    QApplication.setDesktopFileName("huewheel")
    app = QApplication.instance() or QApplication(sys.argv)

    if ring_count is None:
        ring_count = settings.ring_count
    if segment_count is None:
        segment_count = settings.segment_count
    controller = ColorWheelController(ring_count, segment_count)
    window = HueWheelWindow(controller,
                            copy_to_clipboard=settings.copy_to_clipboard,
                            feedback=settings.feedback)
    window.show()
    log.info("HueWheel started (%d rings, %d segments)",
             controller.wheel.ring_count, controller.wheel.segment_count)

    return app.exec()


if __name__ == '__main__':
    sys.exit(run_app())

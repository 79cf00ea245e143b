"""
HueWheel Controllers - Selection state that coordinates services and views.

Controllers are GUI-framework independent. They:
1. Own the Selection model
2. Provide methods that Views call for user actions
3. Emit callbacks that Views subscribe to for updates
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from ..services.color import ColorService
from ..services.hue import HueService, shift_hue, wrap_unit
from ..services.wheel import WheelService
from .models import (
    DEFAULT_RING_COUNT,
    DEFAULT_SEGMENT_COUNT,
    MAX_BRIGHTNESS,
    MIN_BRIGHTNESS,
    SATURATION,
    HSBColor,
    RingSegment,
    Selection,
    Swatch,
)

log = logging.getLogger(__name__)


class ColorWheelController:
    """
    Controller for the color wheel screen.

    Holds the single (hue, brightness) selection. Every selection event
    replaces it and fans out to three collaborators, once each:

    - ``on_selection_changed(selection)``: re-render preview/strips/wheel
    - ``on_copy_hex(hex)``: clipboard write
    - ``on_feedback()``: light impact pulse

    Clipboard and feedback are best-effort; their failures are logged
    and dropped.
    """

    def __init__(self,
                 ring_count: int = DEFAULT_RING_COUNT,
                 segment_count: int = DEFAULT_SEGMENT_COUNT):
        self.wheel = WheelService(ring_count, segment_count)
        self.hues = HueService()
        self.selection = Selection()

        # View callbacks
        self.on_selection_changed: Optional[Callable[[Selection], None]] = None
        self.on_copy_hex: Optional[Callable[[str], None]] = None
        self.on_feedback: Optional[Callable[[], None]] = None

    # ── Derived values ──────────────────────────────────────────────

    @property
    def hue(self) -> float:
        return self.selection.hue

    @property
    def brightness(self) -> float:
        return self.selection.brightness

    @property
    def color(self) -> HSBColor:
        return self.selection.color

    @property
    def hex(self) -> str:
        return ColorService.hex_string(self.selection.hue, SATURATION, self.selection.brightness)

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return ColorService.rgb_bytes(self.selection.hue, SATURATION, self.selection.brightness)

    def fine_adjustments(self) -> List[Swatch]:
        return self.hues.fine_adjustments(self.selection.hue, self.selection.brightness)

    def harmonies(self) -> List[Swatch]:
        return self.hues.harmonies(self.selection.hue, self.selection.brightness)

    def highlighted_segment(self) -> Optional[RingSegment]:
        return self.wheel.highlighted(self.selection.hue, self.selection.brightness)

    # ── User actions ────────────────────────────────────────────────

    def select(self, hue: float, brightness: float) -> Selection:
        """Replace the selection and notify collaborators."""
        selection = Selection(
            hue=wrap_unit(hue),
            brightness=max(MIN_BRIGHTNESS, min(MAX_BRIGHTNESS, brightness)),
        )
        self.selection = selection
        hex_value = ColorService.hex_string(selection.hue, SATURATION, selection.brightness)
        log.debug("Selected hue=%.5f brightness=%.5f → %s",
                  selection.hue, selection.brightness, hex_value)

        if self.on_selection_changed:
            self.on_selection_changed(selection)
        self._copy(hex_value)
        self._pulse()
        return selection

    def select_segment(self, ring_index: int, segment_index: int) -> RingSegment:
        """Wheel tap already resolved to a segment."""
        segment = self.wheel.segment_at(ring_index, segment_index)
        self.select(segment.hue, segment.brightness)
        return segment

    def tap_wheel(self, x: float, y: float, side: float) -> Optional[RingSegment]:
        """Raw wheel tap. Taps outside the disc leave the selection alone."""
        segment = self.wheel.hit_test(x, y, side)
        if segment is None:
            return None
        self.select(segment.hue, segment.brightness)
        return segment

    def shift(self, offset_degrees: float) -> Selection:
        """Rotate the current hue by ``offset_degrees``, brightness unchanged."""
        return self.select(shift_hue(self.selection.hue, offset_degrees),
                           self.selection.brightness)

    def select_fine_adjustment(self, offset_degrees: float) -> Selection:
        """Nudge the current hue by a small offset."""
        return self.shift(offset_degrees)

    def select_harmony(self, offset_degrees: float) -> Selection:
        """Jump to a harmony partner of the current hue."""
        return self.shift(offset_degrees)

    def select_swatch(self, swatch: Swatch) -> Selection:
        return self.select(swatch.hue, swatch.brightness)

    # ── Collaborators ───────────────────────────────────────────────

    def _copy(self, hex_value: str) -> None:
        if not self.on_copy_hex:
            return
        try:
            self.on_copy_hex(hex_value)
        except Exception:
            log.debug("Clipboard write failed", exc_info=True)

    def _pulse(self) -> None:
        if not self.on_feedback:
            return
        try:
            self.on_feedback()
        except Exception:
            log.debug("Feedback pulse failed", exc_info=True)

"""Hue shifting, fine adjustments and harmony suggestions.

Pure Python, no Qt dependencies.
"""
from __future__ import annotations

import math
from typing import List, Sequence

from ..core.models import FINE_OFFSETS, HARMONY_OFFSETS, SATURATION, Swatch
from .color import ColorService


def wrap_unit(value: float) -> float:
    """Wrap a real number into [0, 1). Non-finite input maps to 0."""
    if not math.isfinite(value):
        return 0.0
    wrapped = math.fmod(value, 1.0)
    if wrapped < 0.0:
        wrapped += 1.0
    # -1e-18 + 1.0 rounds to 1.0
    if wrapped >= 1.0:
        wrapped = 0.0
    return wrapped


def shift_hue(base_hue: float, offset_degrees: float) -> float:
    """Rotate ``base_hue`` by ``offset_degrees``; result is in [0, 1)."""
    return wrap_unit(base_hue + offset_degrees / 360.0)


class HueService:
    """Builds the swatch strips shown under the wheel.

    Both strips keep the brightness fixed and rotate only the hue of the
    current selection.
    """

    def __init__(self,
                 fine_offsets: Sequence[float] = FINE_OFFSETS,
                 harmony_offsets: Sequence[float] = HARMONY_OFFSETS) -> None:
        self.fine_offsets = tuple(fine_offsets)
        self.harmony_offsets = tuple(harmony_offsets)

    @staticmethod
    def swatch(hue: float, brightness: float, offset_degrees: float) -> Swatch:
        shifted = shift_hue(hue, offset_degrees)
        return Swatch(
            offset_degrees=offset_degrees,
            hue=shifted,
            brightness=brightness,
            hex=ColorService.hex_string(shifted, SATURATION, brightness),
        )

    def fine_adjustments(self, hue: float, brightness: float) -> List[Swatch]:
        """Nine small nudges around ``hue``."""
        return [self.swatch(hue, brightness, off) for off in self.fine_offsets]

    def harmonies(self, hue: float, brightness: float) -> List[Swatch]:
        """Complementary, triadic and analogous partners of ``hue``."""
        return [self.swatch(hue, brightness, off) for off in self.harmony_offsets]

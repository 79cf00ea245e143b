"""Ring-segment geometry, ring brightness and hit testing.

Pure Python, no Qt dependencies.

Layout:
- ``segment_count`` equal angular sectors, clockwise from 3 o'clock
- ``ring_count`` equal radial bands, ring 0 outermost
- segment hue = segment / segment_count, ring brightness eased toward center
"""
from __future__ import annotations

import logging
import math
from typing import List, Optional, Tuple

import numpy as np

from ..core.models import (
    ANGLE_EPSILON_DEG,
    BRIGHTNESS_EASING,
    DEFAULT_RING_COUNT,
    DEFAULT_SEGMENT_COUNT,
    HIGHLIGHT_EPSILON,
    MAX_BRIGHTNESS,
    MIN_BRIGHTNESS,
    RADIUS_EPSILON,
    SATURATION,
    RingSegment,
)
from .color import ColorService

log = logging.getLogger(__name__)


def ring_brightness(ring_index: int, ring_count: int) -> float:
    """Brightness for a ring: full at the rim, eased down to 0.1 at the center."""
    if ring_count <= 1:
        return MAX_BRIGHTNESS
    progress = ring_index / (ring_count - 1)
    adjusted = (1.0 - progress) ** BRIGHTNESS_EASING
    return MIN_BRIGHTNESS + (MAX_BRIGHTNESS - MIN_BRIGHTNESS) * adjusted


def segment_hue(segment_index: int, segment_count: int) -> float:
    """Hue for a segment, as a fraction of a full turn."""
    return segment_index / segment_count


def to_polar(x: float, y: float, side: float) -> Tuple[float, float]:
    """Screen point inside a ``side``-wide square → (angle_deg, radius_fraction).

    The wheel is centered in the square; y grows downward so angles
    increase clockwise.
    """
    half = side / 2.0
    dx = x - half
    dy = y - half
    angle = math.degrees(math.atan2(dy, dx))
    if angle < 0:
        angle += 360.0
    if angle >= 360.0:
        angle = 0.0
    radius = math.hypot(dx, dy) / half if half > 0 else math.inf
    return angle, radius


class WheelService:
    """Wheel of ``ring_count × segment_count`` ring segments.

    Segments are rebuilt on demand; nothing here is persisted.
    """

    def __init__(self,
                 ring_count: int = DEFAULT_RING_COUNT,
                 segment_count: int = DEFAULT_SEGMENT_COUNT,
                 angle_epsilon: float = ANGLE_EPSILON_DEG,
                 radius_epsilon: float = RADIUS_EPSILON) -> None:
        if ring_count < 1:
            raise ValueError(f"ring_count must be >= 1, got {ring_count}")
        if segment_count < 1:
            raise ValueError(f"segment_count must be >= 1, got {segment_count}")
        self.ring_count = int(ring_count)
        self.segment_count = int(segment_count)
        self.angle_epsilon = angle_epsilon
        self.radius_epsilon = radius_epsilon

    @property
    def angle_step(self) -> float:
        return 360.0 / self.segment_count

    # ── Geometry ────────────────────────────────────────────────────

    def brightness(self, ring_index: int) -> float:
        return ring_brightness(ring_index, self.ring_count)

    def hue(self, segment_index: int) -> float:
        return segment_hue(segment_index, self.segment_count)

    def segment_at(self, ring_index: int, segment_index: int) -> RingSegment:
        """Logical bounds of one segment."""
        if not 0 <= ring_index < self.ring_count:
            raise IndexError(f"ring {ring_index} out of range 0..{self.ring_count - 1}")
        if not 0 <= segment_index < self.segment_count:
            raise IndexError(f"segment {segment_index} out of range 0..{self.segment_count - 1}")

        step = self.angle_step
        return RingSegment(
            ring_index=ring_index,
            segment_index=segment_index,
            start_angle_deg=segment_index * step,
            end_angle_deg=(segment_index + 1) * step,
            inner_radius_fraction=1.0 - (ring_index + 1) / self.ring_count,
            outer_radius_fraction=1.0 - ring_index / self.ring_count,
            hue=self.hue(segment_index),
            brightness=self.brightness(ring_index),
        )

    def segments(self, expanded: bool = False) -> List[RingSegment]:
        """All segments, ring-major. ``expanded`` pads them for painting."""
        result = []
        for ring in range(self.ring_count):
            for seg in range(self.segment_count):
                segment = self.segment_at(ring, seg)
                if expanded:
                    segment = segment.expanded(self.angle_epsilon, self.radius_epsilon)
                result.append(segment)
        return result

    def colors(self) -> np.ndarray:
        """Fill colors as a ``(ring_count, segment_count, 3)`` uint8 array."""
        hues = np.arange(self.segment_count, dtype=np.float64) / self.segment_count
        brightness = np.array([self.brightness(r) for r in range(self.ring_count)])
        return ColorService.rgb_bytes_array(hues[np.newaxis, :], SATURATION,
                                            brightness[:, np.newaxis])

    # ── Hit testing (logical bounds only) ───────────────────────────

    def locate(self, angle_deg: float, radius_fraction: float) -> Optional[Tuple[int, int]]:
        """Polar point → (ring, segment), or None outside the disc."""
        if not (math.isfinite(angle_deg) and math.isfinite(radius_fraction)):
            return None
        if radius_fraction < 0.0 or radius_fraction > 1.0:
            return None

        angle = angle_deg % 360.0
        segment = min(int(angle // self.angle_step), self.segment_count - 1)

        ring = int(math.floor((1.0 - radius_fraction) * self.ring_count))
        ring = max(0, min(self.ring_count - 1, ring))

        # Floor can land one band off right on a boundary; the segment's
        # own bounds are authoritative.
        for candidate in (ring, ring - 1, ring + 1):
            if 0 <= candidate < self.ring_count:
                if self.segment_at(candidate, segment).contains(angle, radius_fraction):
                    return candidate, segment
        return ring, segment

    def hit_test(self, x: float, y: float, side: float) -> Optional[RingSegment]:
        """Tap inside a ``side × side`` square → segment, or None off the wheel."""
        angle, radius = to_polar(x, y, side)
        found = self.locate(angle, radius)
        if found is None:
            log.debug("hit_test: (%.1f, %.1f) outside wheel", x, y)
            return None
        return self.segment_at(*found)

    # ── Selection highlight ─────────────────────────────────────────

    def highlighted(self, hue: float, brightness: float,
                    epsilon: float = HIGHLIGHT_EPSILON) -> Optional[RingSegment]:
        """Segment whose hue and brightness both match within ``epsilon``.

        Selections made from the strips usually fall between grid values
        and highlight nothing.
        """
        seg_f = hue * self.segment_count
        segment = int(round(seg_f)) % self.segment_count
        diff = abs(self.hue(segment) - hue) % 1.0
        if min(diff, 1.0 - diff) >= epsilon:
            return None
        for ring in range(self.ring_count):
            if abs(self.brightness(ring) - brightness) < epsilon:
                return self.segment_at(ring, segment)
        return None

"""
HueWheel Models - Pure data classes with no GUI dependencies.

These models can be used by any front end (PySide6, CLI, REST).
"""

from dataclasses import dataclass, replace
from typing import Tuple

# =============================================================================
# Domain Constants
# =============================================================================

# Saturation is not selectable; every color in the app is fully saturated.
SATURATION = 1.0

# Selection brightness floor. The wheel never renders pure black.
MIN_BRIGHTNESS = 0.1
MAX_BRIGHTNESS = 1.0

# Default wheel layout (rings from the outer edge inward, segments clockwise)
DEFAULT_RING_COUNT = 10
DEFAULT_SEGMENT_COUNT = 24

# Padding applied to rendered segment bounds to hide anti-aliasing seams.
ANGLE_EPSILON_DEG = 0.12
RADIUS_EPSILON = 0.001

# Ring brightness easing: 0.1 + 0.9 * (1 - progress) ** 0.8
BRIGHTNESS_EASING = 0.8

# Tolerance used when matching the selection to a wheel segment.
HIGHLIGHT_EPSILON = 1e-4

# Fine-adjustment strip offsets in degrees (left to right)
FINE_OFFSETS: Tuple[float, ...] = (-1.0, -0.75, -0.5, -0.25, 0.0, 0.25, 0.5, 0.75, 1.0)

# Harmony strip offsets in degrees: complementary, triadic, analogous
HARMONY_OFFSETS: Tuple[float, ...] = (180.0, 120.0, -120.0, 30.0, -30.0)

HARMONY_NAMES = {
    180.0: 'Complementary',
    120.0: 'Triadic +',
    -120.0: 'Triadic -',
    30.0: 'Analogous +',
    -30.0: 'Analogous -',
}

FALLBACK_HEX = "#000000"


# =============================================================================
# Color Model
# =============================================================================

@dataclass(frozen=True)
class HSBColor:
    """Hue/saturation/brightness triple, each component in [0, 1]."""
    hue: float = 0.0
    saturation: float = SATURATION
    brightness: float = MAX_BRIGHTNESS


@dataclass
class Selection:
    """
    Currently selected (hue, brightness) pair.

    Replaced wholesale on every selection event; no history is kept.
    """
    hue: float = 0.0
    brightness: float = MAX_BRIGHTNESS

    @property
    def saturation(self) -> float:
        return SATURATION

    @property
    def color(self) -> HSBColor:
        return HSBColor(self.hue, SATURATION, self.brightness)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.hue, self.brightness)


@dataclass(frozen=True)
class Swatch:
    """One cell of the fine-adjustment or harmony strip."""
    offset_degrees: float
    hue: float
    brightness: float
    hex: str

    @property
    def name(self) -> str:
        """Harmony name for harmony offsets, signed degrees otherwise."""
        return HARMONY_NAMES.get(self.offset_degrees, f"{self.offset_degrees:+g}°")


# =============================================================================
# Wheel Geometry Model
# =============================================================================

@dataclass(frozen=True)
class RingSegment:
    """
    Annular sector of the wheel.

    Angles are degrees clockwise from 3 o'clock in screen coordinates.
    Radii are fractions of the wheel's outer radius. Ring 0 is the
    outermost band.
    """
    ring_index: int
    segment_index: int
    start_angle_deg: float
    end_angle_deg: float
    inner_radius_fraction: float
    outer_radius_fraction: float
    hue: float = 0.0
    brightness: float = MAX_BRIGHTNESS

    @property
    def key(self) -> Tuple[int, int]:
        return (self.ring_index, self.segment_index)

    @property
    def span_deg(self) -> float:
        return self.end_angle_deg - self.start_angle_deg

    def contains(self, angle_deg: float, radius_fraction: float) -> bool:
        """Test a polar point against the logical bounds.

        Angles are half-open ``[start, end)``. Radii are half-open
        ``(inner, outer]`` so the outer rim belongs to ring 0; the
        innermost band also owns the exact center.
        """
        angle = angle_deg % 360.0
        if not self.start_angle_deg <= angle < self.end_angle_deg:
            return False
        if radius_fraction > self.outer_radius_fraction:
            return False
        if self.inner_radius_fraction <= 0.0:
            return radius_fraction >= 0.0
        return radius_fraction > self.inner_radius_fraction

    def expanded(self,
                 angle_epsilon: float = ANGLE_EPSILON_DEG,
                 radius_epsilon: float = RADIUS_EPSILON) -> 'RingSegment':
        """Rendered bounds: padded on every side, radii kept within [0, 1]."""
        return replace(
            self,
            start_angle_deg=self.start_angle_deg - angle_epsilon,
            end_angle_deg=self.end_angle_deg + angle_epsilon,
            inner_radius_fraction=max(0.0, self.inner_radius_fraction - radius_epsilon),
            outer_radius_fraction=min(1.0, self.outer_radius_fraction + radius_epsilon),
        )

"""HSB → RGB → hex conversion.

Pure Python, no Qt dependencies. The scalar path backs the preview and
clipboard; the vectorised path colours a whole wheel in one call.
"""
from __future__ import annotations

import logging
import math
from typing import Tuple

import numpy as np

from ..core.models import FALLBACK_HEX

log = logging.getLogger(__name__)


def _finite_or_zero(value: float) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        return 0.0
    return value if math.isfinite(value) else 0.0


def _clamp_unit(value: float) -> float:
    return min(1.0, max(0.0, value))


def _channel_to_byte(value: float) -> int:
    """Clamp a [0, 1] channel and scale to 0-255, rounding half away from zero."""
    return int(math.floor(_clamp_unit(_finite_or_zero(value)) * 255 + 0.5))


class ColorService:
    """Color conversion for the wheel, strips, preview and clipboard.

    All methods are static and side-effect free.
    """

    @staticmethod
    def sanitize(hue: float, saturation: float, brightness: float) -> Tuple[float, float, float]:
        """Wrap hue into [0, 1) and clamp saturation/brightness into [0, 1].

        Non-finite components become 0.
        """
        h = _finite_or_zero(hue) % 1.0
        if h >= 1.0:
            h = 0.0
        s = _clamp_unit(_finite_or_zero(saturation))
        b = _clamp_unit(_finite_or_zero(brightness))
        return h, s, b

    @staticmethod
    def hsb_to_rgb(hue: float, saturation: float, brightness: float) -> Tuple[float, float, float]:
        """Standard sector HSB → RGB. Returns floats in [0, 1]."""
        h, s, v = ColorService.sanitize(hue, saturation, brightness)
        if s == 0.0:
            return v, v, v

        h6 = h * 6.0
        sector = int(math.floor(h6)) % 6
        f = h6 - math.floor(h6)
        p = v * (1.0 - s)
        q = v * (1.0 - s * f)
        t = v * (1.0 - s * (1.0 - f))

        if sector == 0:
            return v, t, p
        if sector == 1:
            return q, v, p
        if sector == 2:
            return p, v, t
        if sector == 3:
            return p, q, v
        if sector == 4:
            return t, p, v
        return v, p, q

    @staticmethod
    def rgb_bytes(hue: float, saturation: float, brightness: float) -> Tuple[int, int, int]:
        """HSB → 8-bit RGB triplet."""
        r, g, b = ColorService.hsb_to_rgb(hue, saturation, brightness)
        return _channel_to_byte(r), _channel_to_byte(g), _channel_to_byte(b)

    @staticmethod
    def rgb_to_hex(r: int, g: int, b: int) -> str:
        """8-bit RGB → ``#RRGGBB`` (uppercase)."""
        r, g, b = (max(0, min(255, int(c))) for c in (r, g, b))
        return f"#{r:02X}{g:02X}{b:02X}"

    @staticmethod
    def hex_string(hue: float, saturation: float, brightness: float) -> str:
        """HSB → ``#RRGGBB``.

        Never raises. A brightness that is not a finite number has no
        usable value, so the result falls back to ``#000000``.
        """
        if not _is_number(brightness):
            log.debug("hex_string: unusable brightness %r, using %s", brightness, FALLBACK_HEX)
            return FALLBACK_HEX
        return ColorService.rgb_to_hex(*ColorService.rgb_bytes(hue, saturation, brightness))

    @staticmethod
    def rgb_bytes_array(hues, saturation, brightnesses) -> np.ndarray:
        """Vectorised HSB → uint8 RGB.

        ``hues`` and ``brightnesses`` broadcast against each other; the
        result has their broadcast shape plus a trailing axis of 3.
        Values match ``rgb_bytes`` element for element.
        """
        h = np.nan_to_num(np.asarray(hues, dtype=np.float64), nan=0.0, posinf=0.0, neginf=0.0)
        v = np.nan_to_num(np.asarray(brightnesses, dtype=np.float64), nan=0.0, posinf=0.0, neginf=0.0)
        s = float(_clamp_unit(_finite_or_zero(saturation)))
        h, v = np.broadcast_arrays(np.mod(h, 1.0), np.clip(v, 0.0, 1.0))
        h = np.where(h >= 1.0, 0.0, h)

        h6 = h * 6.0
        sector = np.floor(h6).astype(np.int64) % 6
        f = h6 - np.floor(h6)
        p = v * (1.0 - s)
        q = v * (1.0 - s * f)
        t = v * (1.0 - s * (1.0 - f))

        red = np.choose(sector, [v, q, p, p, t, v])
        green = np.choose(sector, [t, v, v, q, p, p])
        blue = np.choose(sector, [p, p, t, v, v, q])

        rgb = np.stack([red, green, blue], axis=-1)
        return np.floor(np.clip(rgb, 0.0, 1.0) * 255 + 0.5).astype(np.uint8)


def _is_number(value) -> bool:
    try:
        float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(float(value))


def hex_string(hue: float, saturation: float, brightness: float) -> str:
    """Module-level shortcut for :meth:`ColorService.hex_string`."""
    return ColorService.hex_string(hue, saturation, brightness)

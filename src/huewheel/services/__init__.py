"""HueWheel Services — Core hexagon (pure Python, no Qt/HTTP/CLI).

Color math and geometry shared by all driving adapters:
- core/controllers.py (selection state for PySide6 GUI and REST)
- cli.py (argparse CLI)
- api.py (FastAPI REST)
"""

from .color import ColorService, hex_string
from .hue import HueService, shift_hue, wrap_unit
from .wheel import WheelService, ring_brightness, segment_hue

__all__ = [
    'ColorService',
    'HueService',
    'WheelService',
    'hex_string',
    'ring_brightness',
    'segment_hue',
    'shift_hue',
    'wrap_unit',
]

"""
HueWheel - Radial hue/brightness color picker

Features:
- Ring-segment wheel: hue around the circle, brightness from rim to center
- Fine hue nudges (±1°) and harmony suggestions (complementary, triadic, analogous)
- Hex preview with clipboard copy on every selection
- Headless CLI, REST API and PNG export of the wheel

Usage:
    # As a library
    from huewheel import hex_string, shift_hue
    hex_string(0.0, 1.0, 1.0)   # '#FF0000'
    shift_hue(0.0, 180)         # 0.5

    # Command line
    huewheel gui                # Launch GUI
    huewheel hex 0.5            # Print hex/RGB for a hue
    huewheel render wheel.png   # Export the wheel
"""

from huewheel.__version__ import __version__
from huewheel.core.controllers import ColorWheelController
from huewheel.core.models import HSBColor, RingSegment, Selection, Swatch
from huewheel.services import (
    ColorService,
    HueService,
    WheelService,
    hex_string,
    shift_hue,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "ColorWheelController",
    "HSBColor",
    "RingSegment",
    "Selection",
    "Swatch",
    # Services
    "ColorService",
    "HueService",
    "WheelService",
    "hex_string",
    "shift_hue",
]

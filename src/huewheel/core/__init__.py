"""
HueWheel Core - Services + Controllers Architecture

Services: Pure Python color math and wheel geometry (no GUI dependencies)
Controllers: Driving adapters that wrap services for the GUI and REST API
Models: Data classes only (HSBColor, Selection, RingSegment, Swatch)

Note: Controllers are NOT re-exported here to avoid circular imports
(services → core.models → core.__init__ → controllers → services).
Import controllers directly: `from huewheel.core.controllers import ...`
"""

from .models import (
    HSBColor,
    RingSegment,
    Selection,
    Swatch,
)

__all__ = [
    'HSBColor',
    'RingSegment',
    'Selection',
    'Swatch',
]

"""PySide6 GUI components for HueWheel."""

from .qt_app_mvc import HueWheelWindow, run_app
from .base import ClickableFrame, hsb_to_qcolor
from .uc_color_wheel import UCColorWheel
from .uc_preview import UCPreview
from .uc_swatch_strip import UCSwatchStrip

__all__ = [
    'HueWheelWindow',
    'run_app',
    'ClickableFrame',
    'hsb_to_qcolor',
    'UCColorWheel',
    'UCPreview',
    'UCSwatchStrip',
]

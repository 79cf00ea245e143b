"""
Layout constants and style definitions for the HueWheel PySide6 components.

Centralizes magic numbers so they're defined once and referenced everywhere.
"""


class Colors:
    """Central color palette used across all components."""

    # Dark theme base (QPalette)
    WINDOW_BG = '#232227'
    WINDOW_TEXT = '#C6C6C6'
    MUTED_TEXT = '#888'

    # Selected segment outline: dark outer stroke, light inner stroke
    HIGHLIGHT_OUTER = (0, 0, 0, 217)        # black @ 0.85
    HIGHLIGHT_INNER = (255, 255, 255, 242)  # white @ 0.95

    # Preview frame
    PREVIEW_BORDER = '#3A3A3A'
    PREVIEW_PULSE = '#C6C6C6'


class Sizes:
    """Widget dimensions."""

    # Main window
    WINDOW_MIN_W = 460
    WINDOW_MIN_H = 720

    # Wheel (square, capped)
    WHEEL_MAX = 420
    WHEEL_MIN = 200

    # Swatch strips
    FINE_STRIP_H = 30
    HARMONY_STRIP_H = 34
    SWATCH_SPACING = 6

    # Preview
    PREVIEW_SWATCH = 92
    PREVIEW_SPACING = 12

    # Outer layout
    PADDING = 20
    MAIN_SPACING = 24
    CONTROLS_SPACING = 12

    # Highlight stroke widths
    HIGHLIGHT_OUTER_W = 2
    HIGHLIGHT_INNER_W = 1


class Timing:
    """Durations in milliseconds."""

    FEEDBACK_PULSE_MS = 120


class Styles:
    """Reusable stylesheet fragments."""

    HEX_CAPTION = f"color: {Colors.MUTED_TEXT}; font-size: 12px; font-weight: 600;"

    HEX_VALUE = (
        f"color: {Colors.WINDOW_TEXT}; font-size: 28px; font-weight: bold;"
        " font-family: monospace;"
    )

    @staticmethod
    def preview_frame(fill: str, border: str) -> str:
        return f"QFrame#previewSwatch {{ background-color: {fill}; border: 2px solid {border}; }}"

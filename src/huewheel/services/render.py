"""Headless wheel rasteriser (Pillow).

Draws the same padded ring segments the Qt widget paints, so exported
PNGs match the on-screen wheel.
"""
from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import List, Optional, Tuple

from PIL import Image, ImageDraw

from ..core.models import RingSegment
from .wheel import WheelService

log = logging.getLogger(__name__)

# Points per degree when flattening arcs into polygons
ARC_RESOLUTION = 2


def segment_polygon(segment: RingSegment, side: float) -> List[Tuple[float, float]]:
    """Flatten an annular sector into polygon points inside a ``side`` square."""
    half = side / 2.0
    outer = half * segment.outer_radius_fraction
    inner = half * segment.inner_radius_fraction
    steps = max(2, int(math.ceil(segment.span_deg * ARC_RESOLUTION)))

    def arc(radius: float, reverse: bool) -> List[Tuple[float, float]]:
        pts = []
        for i in range(steps + 1):
            t = i / steps
            if reverse:
                t = 1.0 - t
            a = math.radians(segment.start_angle_deg + t * segment.span_deg)
            pts.append((half + radius * math.cos(a), half + radius * math.sin(a)))
        return pts

    points = arc(outer, reverse=False)
    if inner > 0:
        points += arc(inner, reverse=True)
    else:
        points.append((half, half))
    return points


def render_wheel(wheel: WheelService, size: int = 420,
                 highlight: Optional[RingSegment] = None,
                 background: Tuple[int, int, int, int] = (0, 0, 0, 0)) -> Image.Image:
    """Rasterise the wheel to an RGBA image of ``size × size`` pixels."""
    img = Image.new('RGBA', (size, size), background)
    draw = ImageDraw.Draw(img)
    colors = wheel.colors()

    for segment in wheel.segments(expanded=True):
        r, g, b = (int(c) for c in colors[segment.ring_index, segment.segment_index])
        draw.polygon(segment_polygon(segment, size), fill=(r, g, b, 255))

    if highlight is not None:
        outline = segment_polygon(
            highlight.expanded(wheel.angle_epsilon, wheel.radius_epsilon), size)
        outline.append(outline[0])
        draw.line(outline, fill=(0, 0, 0, 217), width=2)
        draw.line(outline, fill=(255, 255, 255, 242), width=1)

    return img


def save_wheel_png(path: Path, wheel: WheelService, size: int = 420,
                   highlight: Optional[RingSegment] = None) -> Path:
    """Render and write the wheel to ``path`` as PNG."""
    path = Path(path)
    img = render_wheel(wheel, size=size, highlight=highlight)
    img.save(path, format='PNG')
    log.info("Wheel %dx%d (%d rings, %d segments) written to %s",
             size, size, wheel.ring_count, wheel.segment_count, path)
    return path

"""FastAPI REST API — Driving adapter for headless/remote control.

Endpoints:
    GET  /health                — Server status
    GET  /color                 — Convert an HSB triple to hex and RGB
    GET  /wheel                 — Logical ring-segment geometry
    GET  /wheel.png             — Rendered wheel image
    GET  /selection             — Current selection
    POST /selection             — Select a (hue, brightness) pair
    POST /selection/segment     — Select a wheel segment by ring/segment index
    POST /selection/shift       — Shift the current hue by a degree offset
    GET  /selection/fine        — Fine-adjustment swatches for the selection
    GET  /selection/harmonies   — Harmony swatches for the selection

Security:
    - Localhost-only by default (bind 127.0.0.1)
    - Optional token auth via --token flag (X-API-Token header)
"""
from __future__ import annotations

import io
import logging

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field

from huewheel.__version__ import __version__
from huewheel.conf import settings
from huewheel.core.controllers import ColorWheelController
from huewheel.core.models import RingSegment, Selection, Swatch
from huewheel.services import ColorService

log = logging.getLogger(__name__)

MAX_PNG_SIZE = 2048

app = FastAPI(title="HueWheel", version=__version__)

# ── Shared controller instance ────────────────────────────────────────

_controller = ColorWheelController(settings.ring_count, settings.segment_count)

# ── Token auth middleware (optional, enabled via --token) ─────────────

_api_token: str | None = None


def configure_auth(token: str | None) -> None:
    """Set the API token. Called by CLI serve command."""
    global _api_token  # noqa: PLW0603
    _api_token = token


@app.middleware("http")
async def check_token(request: Request, call_next):
    """Reject requests without valid token (if token is configured)."""
    if _api_token and request.url.path != "/health":
        if request.headers.get("X-API-Token") != _api_token:
            return JSONResponse(status_code=401, content={"detail": "Invalid token"})
    return await call_next(request)


# ── Pydantic models ──────────────────────────────────────────────────

class ColorResponse(BaseModel):
    hue: float
    saturation: float
    brightness: float
    hex: str
    rgb: tuple[int, int, int]


class SegmentResponse(BaseModel):
    ring: int
    segment: int
    start_angle: float
    end_angle: float
    inner_radius: float
    outer_radius: float
    hue: float
    brightness: float
    hex: str


class SwatchResponse(BaseModel):
    name: str
    offset: float
    hue: float
    brightness: float
    hex: str


class SelectRequest(BaseModel):
    hue: float
    brightness: float = Field(1.0, ge=0.0, le=1.0)


class SegmentRequest(BaseModel):
    ring: int
    segment: int


class ShiftRequest(BaseModel):
    degrees: float


# ── Helpers ───────────────────────────────────────────────────────────

def _color_response(hue: float, saturation: float, brightness: float) -> ColorResponse:
    h, s, b = ColorService.sanitize(hue, saturation, brightness)
    return ColorResponse(
        hue=h,
        saturation=s,
        brightness=b,
        hex=ColorService.hex_string(hue, saturation, brightness),
        rgb=ColorService.rgb_bytes(hue, saturation, brightness),
    )


def _segment_to_response(seg: RingSegment) -> SegmentResponse:
    return SegmentResponse(
        ring=seg.ring_index,
        segment=seg.segment_index,
        start_angle=seg.start_angle_deg,
        end_angle=seg.end_angle_deg,
        inner_radius=seg.inner_radius_fraction,
        outer_radius=seg.outer_radius_fraction,
        hue=seg.hue,
        brightness=seg.brightness,
        hex=ColorService.hex_string(seg.hue, 1.0, seg.brightness),
    )


def _swatch_to_response(sw: Swatch) -> SwatchResponse:
    return SwatchResponse(name=sw.name, offset=sw.offset_degrees, hue=sw.hue,
                          brightness=sw.brightness, hex=sw.hex)


def _selection_response(sel: Selection) -> ColorResponse:
    return _color_response(sel.hue, sel.saturation, sel.brightness)


# ── Endpoints ────────────────────────────────────────────────────────

@app.get("/health")
def health() -> dict:
    """Health check (always accessible, no auth required)."""
    return {"status": "ok", "version": __version__}


@app.get("/color")
def convert_color(hue: float = 0.0, saturation: float = 1.0,
                  brightness: float = 1.0) -> ColorResponse:
    """Convert an HSB triple. Out-of-range values are clamped, never rejected."""
    return _color_response(hue, saturation, brightness)


@app.get("/wheel")
def wheel_segments() -> list[SegmentResponse]:
    """Logical (hit-test) bounds of every wheel segment."""
    return [_segment_to_response(s) for s in _controller.wheel.segments()]


@app.get("/wheel.png")
def wheel_png(size: int = Query(420, ge=16, le=MAX_PNG_SIZE)) -> Response:
    """Wheel rendered as PNG, current selection outlined."""
    from huewheel.services.render import render_wheel

    img = render_wheel(_controller.wheel, size=size,
                       highlight=_controller.highlighted_segment())
    buf = io.BytesIO()
    img.save(buf, format='PNG')
    return Response(content=buf.getvalue(), media_type="image/png")


@app.get("/selection")
def get_selection() -> ColorResponse:
    return _selection_response(_controller.selection)


@app.post("/selection")
def select_color(req: SelectRequest) -> ColorResponse:
    """Replace the selection with an arbitrary (hue, brightness) pair."""
    return _selection_response(_controller.select(req.hue, req.brightness))


@app.post("/selection/segment")
def select_segment(req: SegmentRequest) -> ColorResponse:
    """Select the color of a wheel segment."""
    try:
        segment = _controller.select_segment(req.ring, req.segment)
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _selection_response(Selection(segment.hue, segment.brightness))


@app.post("/selection/shift")
def shift_selection(req: ShiftRequest) -> ColorResponse:
    """Rotate the selected hue by ``degrees``, brightness unchanged."""
    return _selection_response(_controller.shift(req.degrees))


@app.get("/selection/fine")
def fine_swatches() -> list[SwatchResponse]:
    return [_swatch_to_response(s) for s in _controller.fine_adjustments()]


@app.get("/selection/harmonies")
def harmony_swatches() -> list[SwatchResponse]:
    return [_swatch_to_response(s) for s in _controller.harmonies()]

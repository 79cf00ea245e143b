#!/usr/bin/env python3
"""
HueWheel - Command Line Interface

Entry points for the huewheel package.
"""

import argparse
import logging
import sys

from huewheel.__version__ import __version__


def _setup_logging(verbose=0):
    """Configure root logging from -v count."""
    if verbose >= 2:
        logging.basicConfig(level=logging.DEBUG, format='[%(levelname)s] %(name)s: %(message)s')
        logging.getLogger('PIL').setLevel(logging.WARNING)
    elif verbose == 1:
        logging.basicConfig(level=logging.INFO, format='[%(levelname)s] %(message)s')
    else:
        logging.basicConfig(level=logging.WARNING)


def _layout(rings=None, segments=None):
    """Resolve wheel layout: CLI flags override saved settings."""
    from huewheel.conf import settings
    return (rings if rings is not None else settings.ring_count,
            segments if segments is not None else settings.segment_count)


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="huewheel",
        description="Radial hue/brightness color picker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    huewheel gui                   Launch the GUI
    huewheel hex 0.5               Hex/RGB for hue 0.5 at full brightness
    huewheel shift 0.9 36          Rotate hue 0.9 by 36 degrees
    huewheel harmony 0.0           Complementary/triadic/analogous swatches
    huewheel fine 0.25             Fine-adjustment swatches
    huewheel segments --rings 3    Print the segment table
    huewheel render wheel.png      Export the wheel as PNG
    huewheel layout --rings 12     Persist a 12-ring wheel
    huewheel serve --port 8000     Run the REST API
        """
    )

    parser.add_argument("--version", action="store_true", help="Show version and exit")
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v, -vv)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # GUI command
    gui_parser = subparsers.add_parser("gui", help="Launch graphical interface")
    gui_parser.add_argument("--rings", type=int, help="Radial bands on the wheel")
    gui_parser.add_argument("--segments", type=int, help="Hue sectors on the wheel")

    # Hex command
    hex_parser = subparsers.add_parser("hex", help="Convert HSB to hex and RGB")
    hex_parser.add_argument("hue", type=float, help="Hue in [0, 1)")
    hex_parser.add_argument("--saturation", "-s", type=float, default=1.0, help="Saturation (default 1.0)")
    hex_parser.add_argument("--brightness", "-b", type=float, default=1.0, help="Brightness (default 1.0)")

    # Shift command
    shift_parser = subparsers.add_parser("shift", help="Rotate a hue by degrees")
    shift_parser.add_argument("hue", type=float, help="Base hue in [0, 1)")
    shift_parser.add_argument("degrees", type=float, help="Offset in degrees (may be negative)")

    # Harmony command
    harmony_parser = subparsers.add_parser("harmony", help="Show harmony swatches")
    harmony_parser.add_argument("hue", type=float, help="Base hue in [0, 1)")
    harmony_parser.add_argument("--brightness", "-b", type=float, default=1.0)

    # Fine command
    fine_parser = subparsers.add_parser("fine", help="Show fine-adjustment swatches")
    fine_parser.add_argument("hue", type=float, help="Base hue in [0, 1)")
    fine_parser.add_argument("--brightness", "-b", type=float, default=1.0)

    # Segments command
    seg_parser = subparsers.add_parser("segments", help="Print wheel segment geometry")
    seg_parser.add_argument("--rings", type=int)
    seg_parser.add_argument("--segments", type=int)
    seg_parser.add_argument("--expanded", "-e", action="store_true",
                            help="Show rendered (padded) bounds instead of hit-test bounds")

    # Render command
    render_parser = subparsers.add_parser("render", help="Export the wheel as PNG")
    render_parser.add_argument("output", help="Output PNG path")
    render_parser.add_argument("--size", type=int, default=420, help="Image side in pixels")
    render_parser.add_argument("--rings", type=int)
    render_parser.add_argument("--segments", type=int)

    # Layout command
    layout_parser = subparsers.add_parser("layout", help="Show or persist wheel layout")
    layout_parser.add_argument("--rings", type=int)
    layout_parser.add_argument("--segments", type=int)

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the REST API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.add_argument("--token", help="Require X-API-Token header")

    args = parser.parse_args()

    if args.version:
        print(f"huewheel {__version__}")
        return 0

    if args.command is None:
        parser.print_help()
        return 0

    _setup_logging(args.verbose)

    if args.command == "gui":
        return gui(rings=args.rings, segments=args.segments)
    elif args.command == "hex":
        return show_hex(args.hue, saturation=args.saturation, brightness=args.brightness)
    elif args.command == "shift":
        return show_shift(args.hue, args.degrees)
    elif args.command == "harmony":
        return show_harmony(args.hue, brightness=args.brightness)
    elif args.command == "fine":
        return show_fine(args.hue, brightness=args.brightness)
    elif args.command == "segments":
        return show_segments(rings=args.rings, segments=args.segments, expanded=args.expanded)
    elif args.command == "render":
        return render(args.output, size=args.size, rings=args.rings, segments=args.segments)
    elif args.command == "layout":
        return layout(rings=args.rings, segments=args.segments)
    elif args.command == "serve":
        return serve(host=args.host, port=args.port, token=args.token)

    return 0


def gui(rings=None, segments=None):
    """Launch the GUI application."""
    try:
        from huewheel.qt_components.qt_app_mvc import run_app
        return run_app(*_layout(rings, segments))
    except ImportError as e:
        print(f"Error: PySide6 not available: {e}")
        print("Install with: pip install PySide6")
        return 1
    except Exception as e:
        print(f"Error launching GUI: {e}")
        import traceback
        traceback.print_exc()
        return 1


def show_hex(hue, saturation=1.0, brightness=1.0):
    """Print hex and RGB for an HSB triple."""
    from huewheel.services import ColorService

    hex_value = ColorService.hex_string(hue, saturation, brightness)
    r, g, b = ColorService.rgb_bytes(hue, saturation, brightness)
    print(f"{hex_value}  rgb({r}, {g}, {b})")
    return 0


def show_shift(hue, degrees):
    """Print a hue rotated by degrees."""
    from huewheel.services import shift_hue

    print(f"{shift_hue(hue, degrees):.6f}")
    return 0


def _print_swatches(swatches):
    for sw in swatches:
        print(f"  {sw.name:<14} {sw.offset_degrees:+8.2f}°  hue={sw.hue:.6f}  {sw.hex}")


def show_harmony(hue, brightness=1.0):
    """Print harmony swatches for a hue."""
    from huewheel.services import HueService

    print(f"Harmonies for hue {hue:.6f}:")
    _print_swatches(HueService().harmonies(hue, brightness))
    return 0


def show_fine(hue, brightness=1.0):
    """Print fine-adjustment swatches for a hue."""
    from huewheel.services import HueService

    print(f"Fine adjustments for hue {hue:.6f}:")
    _print_swatches(HueService().fine_adjustments(hue, brightness))
    return 0


def show_segments(rings=None, segments=None, expanded=False):
    """Print the ring-segment table."""
    from huewheel.services import ColorService, WheelService

    try:
        wheel = WheelService(*_layout(rings, segments))
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    kind = "rendered" if expanded else "hit-test"
    print(f"{wheel.ring_count} rings x {wheel.segment_count} segments ({kind} bounds)")
    print(f"{'ring':>4} {'seg':>4} {'start':>9} {'end':>9} {'inner':>7} {'outer':>7}"
          f" {'hue':>8} {'bright':>7}  hex")
    for seg in wheel.segments(expanded=expanded):
        hex_value = ColorService.hex_string(seg.hue, 1.0, seg.brightness)
        print(f"{seg.ring_index:>4} {seg.segment_index:>4}"
              f" {seg.start_angle_deg:>9.3f} {seg.end_angle_deg:>9.3f}"
              f" {seg.inner_radius_fraction:>7.3f} {seg.outer_radius_fraction:>7.3f}"
              f" {seg.hue:>8.5f} {seg.brightness:>7.4f}  {hex_value}")
    return 0


def render(output, size=420, rings=None, segments=None):
    """Write the wheel to a PNG file."""
    from huewheel.services import WheelService
    from huewheel.services.render import save_wheel_png

    if size < 16:
        print("Error: --size must be at least 16")
        return 1
    try:
        wheel = WheelService(*_layout(rings, segments))
        path = save_wheel_png(output, wheel, size=size)
    except (ValueError, OSError) as e:
        print(f"Error: {e}")
        return 1
    print(f"Wrote {path}")
    return 0


def layout(rings=None, segments=None):
    """Show the saved wheel layout, or persist a new one."""
    from huewheel.conf import settings

    if rings is None and segments is None:
        r, s = settings.layout
        print(f"Wheel layout: {r} rings x {s} segments")
        return 0

    try:
        settings.set_layout(*_layout(rings, segments))
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    r, s = settings.layout
    print(f"Saved wheel layout: {r} rings x {s} segments")
    return 0


def serve(host="127.0.0.1", port=8000, token=None):
    """Run the REST API with uvicorn."""
    try:
        import uvicorn

        from huewheel.api import app, configure_auth
    except ImportError as e:
        print(f"Error: REST dependencies not available: {e}")
        print("Install with: pip install fastapi uvicorn")
        return 1

    configure_auth(token)
    print(f"[HueWheel] API listening on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port)
    return 0


if __name__ == "__main__":
    sys.exit(main())

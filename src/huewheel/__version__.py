"""HueWheel version information."""

__version__ = "1.1.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 1.0.0 - Initial release: ring-segment wheel, fine hue strip, harmony strip,
#         hex preview with clipboard copy
# 1.1.0 - Headless CLI (hex/shift/harmony/fine/segments/render), FastAPI adapter,
#         XDG config for wheel layout, Pillow PNG export

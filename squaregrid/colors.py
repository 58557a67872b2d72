"""Color conversions shared by the Pillow and tkinter surfaces."""
from PIL import ImageColor


def to_rgb(color):
    """Convert a color name, '#rrggbb' string or RGB(A) tuple to an (r, g, b) tuple."""
    if isinstance(color, (tuple, list)):
        if len(color) < 3:
            raise ValueError(f"color tuple needs at least 3 components: {color!r}")
        return tuple(int(v) for v in color[:3])
    if not isinstance(color, str):
        raise ValueError(f"unsupported color: {color!r}")
    return ImageColor.getrgb(color)[:3]


def to_hex(color):
    """Convert any supported color to '#rrggbb', the form tkinter always accepts."""
    r, g, b = to_rgb(color)
    return f"#{r:02x}{g:02x}{b:02x}"


def validate_color(color):
    """Raise ValueError unless color can be drawn; returns color unchanged."""
    to_rgb(color)
    return color

"""
Drawing surfaces.

A surface is the raster a SquareGrid paints on. The renderer only needs
fill_rect / stroke_rect / scale; the widget additionally needs the on-screen
rectangle, click delivery and the host's device pixel ratio.

ImageSurface is a headless Pillow-backed surface living in an ImageHost. It is
what tests, PNG export and the web host draw on.
"""
import io
import logging
from typing import Callable, List, NamedTuple, Optional, Tuple

from PIL import Image, ImageDraw

from squaregrid.colors import to_rgb
from squaregrid.mapper import Rect

logger = logging.getLogger(__name__)


class PointerEvent(NamedTuple):
    """A click in client (screen) coordinates, as delivered by an ImageHost."""
    client_x: float
    client_y: float


class Surface:
    """Interface every surface implements."""

    # -------------------------
    # Drawing
    # -------------------------
    def fill_rect(self, x, y, width, height, color):
        raise NotImplementedError

    def stroke_rect(self, x, y, width, height, color, line_width=1):
        raise NotImplementedError

    def scale(self, sx, sy):
        raise NotImplementedError

    # -------------------------
    # Geometry
    # -------------------------
    @property
    def backing_size(self) -> Tuple[int, int]:
        raise NotImplementedError

    def set_backing_size(self, width, height):
        raise NotImplementedError

    @property
    def display_size(self) -> Tuple[float, float]:
        raise NotImplementedError

    def set_display_size(self, width, height):
        raise NotImplementedError

    def bounding_rect(self) -> Rect:
        """On-screen rectangle of the surface, in the same units as client_point."""
        raise NotImplementedError

    # -------------------------
    # Host integration
    # -------------------------
    def client_point(self, event) -> Tuple[float, float]:
        raise NotImplementedError

    def bind_click(self, handler):
        raise NotImplementedError

    def device_pixel_ratio(self) -> float:
        return 1.0

    def detach(self):
        raise NotImplementedError


class ImageSurface(Surface):
    def __init__(self, width: int, height: int):
        self._image = Image.new("RGB", (int(width), int(height)), (0, 0, 0))
        self._draw = ImageDraw.Draw(self._image)
        self._display_size = (width, height)
        self._sx = 1.0
        self._sy = 1.0
        self._click_handler: Optional[Callable] = None
        self._host: Optional["ImageHost"] = None

    @classmethod
    def attach(cls, parent: "ImageHost", width, height) -> "ImageSurface":
        surface = cls(width, height)
        parent.append(surface)
        return surface

    @property
    def host(self) -> Optional["ImageHost"]:
        return self._host

    # -------------------------
    # Drawing
    # -------------------------
    def _to_physical(self, x, y, width, height):
        x0 = round(x * self._sx)
        y0 = round(y * self._sy)
        x1 = round((x + width) * self._sx) - 1
        y1 = round((y + height) * self._sy) - 1
        return x0, y0, x1, y1

    def fill_rect(self, x, y, width, height, color):
        x0, y0, x1, y1 = self._to_physical(x, y, width, height)
        if x1 < x0 or y1 < y0:
            return
        self._draw.rectangle([x0, y0, x1, y1], fill=to_rgb(color))

    def stroke_rect(self, x, y, width, height, color, line_width=1):
        x0, y0, x1, y1 = self._to_physical(x, y, width, height)
        if x1 < x0 or y1 < y0:
            return
        # Pillow draws the outline inside the box
        line = max(1, round(line_width * self._sx))
        self._draw.rectangle([x0, y0, x1, y1], outline=to_rgb(color), width=line)

    def scale(self, sx, sy):
        self._sx *= sx
        self._sy *= sy

    def get_pixel(self, x, y):
        """Color of the physical pixel (x, y) as an (r, g, b) tuple."""
        return self._image.getpixel((int(x), int(y)))[:3]

    # -------------------------
    # Geometry
    # -------------------------
    @property
    def backing_size(self):
        return self._image.size

    def set_backing_size(self, width, height):
        # Resizing a raster discards its content, like a browser canvas does
        self._image = Image.new("RGB", (round(width), round(height)), (0, 0, 0))
        self._draw = ImageDraw.Draw(self._image)

    @property
    def display_size(self):
        return self._display_size

    def set_display_size(self, width, height):
        self._display_size = (width, height)

    def bounding_rect(self) -> Rect:
        left, top = self._host.origin_of(self) if self._host is not None else (0, 0)
        width, height = self._display_size
        return Rect(left, top, width, height)

    # -------------------------
    # Host integration
    # -------------------------
    def client_point(self, event):
        return event.client_x, event.client_y

    def bind_click(self, handler):
        self._click_handler = handler

    def dispatch(self, event):
        if self._click_handler is not None:
            self._click_handler(event)

    def device_pixel_ratio(self):
        return self._host.device_pixel_ratio if self._host is not None else 1.0

    def detach(self):
        if self._host is not None:
            self._host.remove(self)

    # -------------------------
    # Export
    # -------------------------
    def to_png(self) -> bytes:
        buffer = io.BytesIO()
        self._image.save(buffer, format="PNG")
        return buffer.getvalue()

    def save(self, filename):
        self._image.save(filename)


class ImageHost:
    """
    In-memory container for ImageSurfaces.

    Plays the part a window plays for a real widget: it places surfaces at a
    screen origin, reports the device pixel ratio and delivers clicks.
    """

    def __init__(self, device_pixel_ratio: float = 1.0):
        self.device_pixel_ratio = device_pixel_ratio
        self._children: List[Tuple[ImageSurface, Tuple[float, float]]] = []

    @property
    def children(self) -> List[ImageSurface]:
        return [surface for surface, _ in self._children]

    def append(self, surface: ImageSurface, origin=(0, 0)):
        surface._host = self
        self._children.append((surface, tuple(origin)))

    def remove(self, surface: ImageSurface):
        self._children = [(s, o) for s, o in self._children if s is not surface]
        surface._host = None

    def origin_of(self, surface: ImageSurface):
        for s, origin in self._children:
            if s is surface:
                return origin
        return (0, 0)

    def click(self, client_x, client_y) -> bool:
        """Deliver a click to the topmost surface under the point."""
        for surface, _ in reversed(self._children):
            if surface.bounding_rect().contains(client_x, client_y):
                surface.dispatch(PointerEvent(client_x, client_y))
                return True
        logger.debug("Click at (%s, %s) hit no surface", client_x, client_y)
        return False

"""
tkinter host: a tk.Canvas acting as the grid's drawing surface.

Tk works in physical pixels, so after pixel-density correction the canvas is
simply larger; click positions come from the same physical space and map to
cells unchanged.
"""
import tkinter as tk

from squaregrid.colors import to_hex
from squaregrid.config import SURFACE_CLASS
from squaregrid.mapper import Rect
from squaregrid.surface import Surface


class TkSurface(Surface):
    def __init__(self, canvas: tk.Canvas, width, height):
        self.canvas = canvas
        self._backing_size = (int(width), int(height))
        self._display_size = (width, height)
        self._sx = 1.0
        self._sy = 1.0

    @classmethod
    def attach(cls, parent, width, height) -> "TkSurface":
        canvas = tk.Canvas(parent, width=width, height=height,
                           highlightthickness=0, borderwidth=0)
        canvas.pack()
        return cls(canvas, width, height)

    def _to_physical(self, x, y, width, height):
        return (x * self._sx, y * self._sy,
                (x + width) * self._sx, (y + height) * self._sy)

    def fill_rect(self, x, y, width, height, color):
        x0, y0, x1, y1 = self._to_physical(x, y, width, height)
        bw, bh = self._backing_size
        if x0 <= 0 and y0 <= 0 and x1 >= bw and y1 >= bh:
            self.canvas.delete(SURFACE_CLASS)
        else:
            # drop items hidden under the new fill so the item count stays bounded
            for item in self.canvas.find_enclosed(x0 - 1, y0 - 1, x1 + 1, y1 + 1):
                self.canvas.delete(item)
        self.canvas.create_rectangle(x0, y0, x1, y1, fill=to_hex(color), outline="", width=0,
                                     tags=(SURFACE_CLASS,))

    def stroke_rect(self, x, y, width, height, color, line_width=1):
        x0, y0, x1, y1 = self._to_physical(x, y, width, height)
        self.canvas.create_rectangle(x0, y0, x1, y1, outline=to_hex(color),
                                     width=line_width * self._sx, tags=(SURFACE_CLASS,))

    def scale(self, sx, sy):
        self._sx *= sx
        self._sy *= sy

    @property
    def backing_size(self):
        return self._backing_size

    def set_backing_size(self, width, height):
        self._backing_size = (round(width), round(height))
        self.canvas.config(width=self._backing_size[0], height=self._backing_size[1])
        self.canvas.delete(SURFACE_CLASS)

    @property
    def display_size(self):
        return self._display_size

    def set_display_size(self, width, height):
        # Tk has no separate CSS size; the nominal size is only recorded
        self._display_size = (width, height)

    def bounding_rect(self) -> Rect:
        canvas = self.canvas
        canvas.update_idletasks()
        # an unmapped canvas reports 1x1; fall back to the requested size
        width = canvas.winfo_width() if canvas.winfo_ismapped() else canvas.winfo_reqwidth()
        height = canvas.winfo_height() if canvas.winfo_ismapped() else canvas.winfo_reqheight()
        return Rect(canvas.winfo_rootx(), canvas.winfo_rooty(), width, height)

    def client_point(self, event):
        return event.x_root, event.y_root

    def bind_click(self, handler):
        self.canvas.bind("<Button-1>", handler)

    def device_pixel_ratio(self):
        # Tk reports 96 pixels per inch on a standard-density display
        return max(1.0, self.canvas.winfo_fpixels('1i') / 96.0)

    def detach(self):
        self.canvas.destroy()

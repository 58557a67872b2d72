"""
Web host for a SquareGrid.

The grid is drawn on a headless ImageSurface and served as a PNG inside an
<input type="image"> form. Browsers post the click position of an image input
as "<name>.x" / "<name>.y", which is turned back into a click on the surface.
"""
import threading

from flask import Flask, Response, abort, jsonify, redirect, render_template_string, request, url_for

from squaregrid import config
from squaregrid.surface import ImageHost, ImageSurface
from squaregrid.widget import SquareGrid

INDEX_HTML = """
<!doctype html>
<html>
  <head>
    <meta charset="utf-8" />
    <title>SquareGrid</title>
  </head>
  <body>
    <h1>SquareGrid</h1>
    <p>{{ rows }} x {{ columns }} cells. Click a cell to toggle it.</p>
    <form action="{{ url_for('click') }}" method="post">
      <input type="image" name="grid" alt="grid"
             src="{{ url_for('grid_png', v=version) }}"
             width="{{ width }}" height="{{ height }}" />
    </form>
    <form action="{{ url_for('clear') }}" method="post">
      <button type="submit">Clear</button>
    </form>
    <p><a href="{{ url_for('cells') }}">Cells as JSON</a></p>
  </body>
</html>
"""


def create_app(grid=None, config_overrides=None):
    """
    Build the Flask app around grid, or around a new grid whose clicks toggle
    cells between PAINT_COLOR and unset.
    """
    app = Flask(__name__)
    app.config.update(
        GRID_ROWS=20,
        GRID_COLUMNS=20,
        GRID_CELL_SIZE=config.DEFAULT_CELL_SIZE,
        GRID_PIXEL_RATIO=1.0,
        PAINT_COLOR=config.PAINT_COLOR,
    )
    if config_overrides:
        app.config.update(config_overrides)

    if grid is None:
        host = ImageHost(device_pixel_ratio=app.config["GRID_PIXEL_RATIO"])
        grid = SquareGrid(app.config["GRID_ROWS"], app.config["GRID_COLUMNS"],
                          app.config["GRID_CELL_SIZE"], parent=host)
        paint = app.config["PAINT_COLOR"]

        def toggle(row, column, event):
            if grid.is_cell_set(row, column):
                grid.clear_cell(row, column)
            else:
                grid.set_cell_color(row, column, paint)
            app.logger.debug("Toggled cell (%d, %d)", row, column)

        grid.set_on_click_callback(toggle)
    elif not isinstance(grid.surface, ImageSurface):
        raise TypeError("The web host needs a grid drawn on an ImageSurface.")

    lock = threading.Lock()
    state = {"version": 0}
    app.grid = grid

    @app.route("/")
    def index():
        width, height = grid.surface.display_size
        return render_template_string(
            INDEX_HTML, rows=grid.rows, columns=grid.columns,
            width=width, height=height, version=state["version"],
        )

    @app.route("/grid.png")
    def grid_png():
        with lock:
            png = grid.surface.to_png()
        return Response(png, mimetype="image/png",
                        headers={"Cache-Control": "no-store"})

    @app.route("/click", methods=["POST"])
    def click():
        try:
            x = float(request.form["grid.x"])
            y = float(request.form["grid.y"])
        except (KeyError, ValueError):
            abort(400, description="grid.x and grid.y are required numbers")
        with lock:
            host = grid.surface.host
            if host is None:
                abort(409, description="the grid has been destroyed")
            rect = grid.surface.bounding_rect()
            host.click(rect.left + x, rect.top + y)
            state["version"] += 1
        return redirect(url_for("index"))

    @app.route("/clear", methods=["POST"])
    def clear():
        with lock:
            grid.clear_grid()
            state["version"] += 1
        return redirect(url_for("index"))

    @app.route("/cells")
    def cells():
        with lock:
            diff = grid.get_diff_cells()
            default_color = grid.get_default_color()
        return jsonify({
            "rows": grid.rows,
            "columns": grid.columns,
            "default_color": default_color,
            "cells": [
                {"row": row, "column": column, "color": color}
                for (row, column), color in sorted(diff.items())
            ],
        })

    return app

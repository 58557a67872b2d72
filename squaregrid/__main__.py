"""
Demo: python -m squaregrid

Opens a window with a grid whose cells toggle on click, or serves the same
grid in the browser with --web.
"""
import argparse
import logging
import threading

from squaregrid import config
from squaregrid.logging_config import setup_logging


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="squaregrid", description="Interactive square grid demo")
    parser.add_argument("--rows", type=int, default=30)
    parser.add_argument("--columns", type=int, default=40)
    parser.add_argument("--cell-size", type=int, default=config.DEFAULT_CELL_SIZE)
    parser.add_argument("--always-draw-grid", action="store_true")
    parser.add_argument("--web", action="store_true", help="serve the grid with Flask instead of tkinter")
    parser.add_argument("--port", type=int, default=5000)
    parser.add_argument("--debug", action="store_true")
    return parser.parse_args(argv)


def run_tk(args):
    import tkinter as tk
    from squaregrid.widget import SquareGrid

    root = tk.Tk()
    root.title("Square Grid")
    grid = SquareGrid(args.rows, args.columns, args.cell_size, root)
    grid.set_always_draw_grid(args.always_draw_grid)

    def toggle(row, column, event):
        if grid.is_cell_set(row, column):
            grid.clear_cell(row, column)
        else:
            grid.set_cell_color(row, column, config.PAINT_COLOR)

    grid.set_on_click_callback(toggle)
    root.mainloop()


def run_web(args):
    import webbrowser
    from squaregrid.app.flask_app import create_app

    app = create_app(config_overrides={
        "GRID_ROWS": args.rows,
        "GRID_COLUMNS": args.columns,
        "GRID_CELL_SIZE": args.cell_size,
    })
    app.grid.set_always_draw_grid(args.always_draw_grid)
    url = f"http://127.0.0.1:{args.port}/"
    threading.Timer(0.5, lambda: webbrowser.open(url)).start()
    app.run(host="127.0.0.1", port=args.port, debug=args.debug)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.INFO)
    if args.web:
        run_web(args)
    else:
        run_tk(args)


if __name__ == "__main__":
    main()

import pytest

tk = pytest.importorskip("tkinter")

from squaregrid.widget import SquareGrid  # noqa: E402


@pytest.fixture
def root():
    try:
        root = tk.Tk()
    except tk.TclError:
        pytest.skip("no display available")
    root.withdraw()
    yield root
    root.destroy()


def test_grid_on_tk_canvas(root):
    clicks = []
    grid = SquareGrid(3, 4, 10, root, on_click=lambda r, c, e: clicks.append((r, c)))
    canvas = grid.surface.canvas
    grid.set_cell_color(1, 1, "red")
    assert canvas.find_withtag("squareGrid")

    class Event:
        x_root = 0
        y_root = 0

    rect = grid.surface.bounding_rect()
    event = Event()
    event.x_root = rect.left + rect.width - 1
    event.y_root = rect.top + rect.height - 1
    grid.on_mouse_click(event)
    assert clicks == [(2, 3)]


def test_full_redraw_does_not_accumulate_items(root):
    grid = SquareGrid(3, 3, 10, root)
    grid.redraw()
    count = len(grid.surface.canvas.find_all())
    grid.redraw()
    grid.redraw()
    assert len(grid.surface.canvas.find_all()) == count


def test_destroy_removes_canvas(root):
    grid = SquareGrid(3, 3, 10, root)
    canvas = grid.surface.canvas
    grid.destroy()
    assert not canvas.winfo_exists()

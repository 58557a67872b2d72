from squaregrid.colors import to_rgb
from squaregrid.model import GridModel
from squaregrid.renderer import Renderer, RenderSettings, nominal_size
from squaregrid.surface import ImageSurface
from tests.test_utils import RecordingSurface, make_grid

WHITE = to_rgb("white")
BLACK = to_rgb("black")
BLUE = to_rgb("blue")


def make_renderer(rows=3, columns=3, cell_size=10, **settings):
    model = GridModel(rows, columns, "white")
    surface = RecordingSurface(*nominal_size(rows, columns, cell_size))
    return Renderer(model, surface, cell_size, RenderSettings(**settings)), model, surface


def test_nominal_size_has_one_unit_margin():
    assert nominal_size(3, 4, 10) == (42, 32)


def test_redraw_all_fills_background_then_cells_row_major():
    renderer, model, surface = make_renderer(rows=2, columns=2, grid_color=None)
    model.set(0, 1, "red")
    renderer.redraw_all()
    assert surface.calls == [
        ("fill", 0, 0, 22, 22, "white"),
        ("fill", 1, 1, 10, 10, "white"),
        ("fill", 11, 1, 10, 10, "red"),
        ("fill", 1, 11, 10, 10, "white"),
        ("fill", 11, 11, 10, 10, "white"),
    ]


def test_border_only_on_explicit_cells():
    renderer, model, surface = make_renderer(rows=1, columns=2, grid_color="black")
    model.set(0, 0, "red")
    renderer.redraw_all()
    strokes = [call for call in surface.calls if call[0] == "stroke"]
    assert strokes == [("stroke", 1, 1, 10, 10, "black")]


def test_always_draw_grid_borders_every_cell():
    renderer, model, surface = make_renderer(rows=1, columns=2, grid_color="black",
                                             always_draw_grid=True)
    renderer.redraw_all()
    strokes = [call for call in surface.calls if call[0] == "stroke"]
    assert len(strokes) == 2


def test_no_grid_color_means_no_borders():
    renderer, model, surface = make_renderer(grid_color=None, always_draw_grid=True)
    model.set(1, 1, "red")
    renderer.redraw_all()
    renderer.redraw_one(1, 1)
    assert not [call for call in surface.calls if call[0] == "stroke"]


def test_apply_pixel_density():
    surface = ImageSurface(32, 22)
    Renderer.apply_pixel_density(surface, 2)
    assert surface.backing_size == (64, 44)
    assert surface.display_size == (32, 22)
    surface.fill_rect(1, 1, 10, 10, "blue")
    assert surface.get_pixel(2, 2) == BLUE
    assert surface.get_pixel(21, 21) == BLUE
    assert surface.get_pixel(22, 22) != BLUE


def test_example_scenario_pixels():
    grid, _ = make_grid(3, 3, 10)
    grid.set_cell_color(1, 1, "blue")
    grid.redraw()
    surface = grid.surface
    # cell (1, 1) spans [11, 11]-[20, 20]
    assert surface.get_pixel(15, 15) == BLUE
    for x, y in [(11, 15), (20, 15), (15, 11), (15, 20)]:
        assert surface.get_pixel(x, y) == BLACK
    # other cells: default color and no border
    for r in range(3):
        for c in range(3):
            if (r, c) == (1, 1):
                continue
            x, y = 1 + c * 10, 1 + r * 10
            assert surface.get_pixel(x + 5, y + 5) == WHITE
            assert surface.get_pixel(x, y) == WHITE
    # margin
    assert surface.get_pixel(0, 0) == WHITE
    assert surface.get_pixel(31, 31) == WHITE


def test_example_scenario_with_always_draw_grid():
    grid, _ = make_grid(3, 3, 10)
    grid.set_always_draw_grid(True)
    grid.set_cell_color(1, 1, "blue")
    surface = grid.surface
    assert surface.get_pixel(1, 5) == BLACK
    assert surface.get_pixel(5, 5) == WHITE
    assert surface.get_pixel(15, 15) == BLUE


def test_hidpi_rendering():
    grid, _ = make_grid(3, 3, 10, pixel_ratio=2)
    grid.set_cell_color(1, 1, "blue")
    surface = grid.surface
    assert surface.backing_size == (64, 64)
    assert surface.display_size == (32, 32)
    # physical span of cell (1, 1) is [22, 41], border two pixels wide
    assert surface.get_pixel(30, 30) == BLUE
    assert surface.get_pixel(22, 30) == BLACK
    assert surface.get_pixel(23, 30) == BLACK
    assert surface.get_pixel(24, 30) == BLUE
    assert surface.get_pixel(41, 41) == BLACK
    assert surface.get_pixel(42, 42) == WHITE

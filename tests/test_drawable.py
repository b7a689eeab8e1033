import pytest

from polypanel.drawable import Drawable


def test_base_class_methods_are_virtual():
    dd = Drawable()
    with pytest.raises(NotImplementedError):
        dd.draw_polygons([])
    with pytest.raises(NotImplementedError):
        dd.draw_polyline([])
    with pytest.raises(NotImplementedError):
        dd.draw_surface([], [], lambda x, y: 0.0)


def test_default_style():
    dd = Drawable()
    assert dd.fillcolor == 'blue'
    assert dd.linecolor == 'red'
    assert dd.alpha == 0.3
    assert dd.linewidth == 1.0


def test_color_setters_validate():
    dd = Drawable()
    dd.fillcolor = 'green'
    dd.linecolor = (0.1, 0.2, 0.3)
    assert dd.fillcolor == 'green'
    with pytest.raises(ValueError):
        dd.fillcolor = 'not-a-color'
    with pytest.raises(ValueError):
        dd.linecolor = 42


@pytest.mark.parametrize('bad', [-0.1, 1.5, 'half', True])
def test_alpha_setter_validates(bad):
    dd = Drawable()
    with pytest.raises(ValueError):
        dd.alpha = bad


def test_linewidth_setter_validates():
    dd = Drawable()
    dd.linewidth = 2
    assert dd.linewidth == 2
    with pytest.raises(ValueError):
        dd.linewidth = 0


def test_draw_grid_quads(recorder):
    grid = [[(x, y, x * y) for y in range(4)] for x in range(3)]
    quads = recorder.draw_grid_quads(grid)
    assert len(quads) == 2 * 3
    assert quads[0] == [(0, 0, 0), (1, 0, 0), (1, 1, 1), (0, 1, 0)]
    assert len(recorder.series) == 1
    assert recorder.series[0][0] == quads

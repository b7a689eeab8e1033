import matplotlib.pyplot as plt
import pytest

from polypanel.drawable import Drawable


class RecordingPanel(Drawable):
    """Drawable that keeps every draw call instead of rendering it."""

    def __init__(self):
        super().__init__()
        self.series = []
        self.polylines = []
        self.surfaces = []

    def draw_polygons(self, polygons):
        self.series.append((list(polygons), self.fillcolor, self.alpha))

    def draw_polyline(self, points):
        self.polylines.append(list(points))

    def draw_surface(self, xs, ys, func):
        self.surfaces.append((list(xs), list(ys), func, self.alpha))


@pytest.fixture
def recorder():
    return RecordingPanel()


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close('all')

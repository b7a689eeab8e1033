import math

from polypanel import demos


def test_lines_is_a_single_spiral(recorder):
    pts = demos.lines(recorder)
    assert len(recorder.polylines) == 1
    assert len(pts) == 200
    assert pts[0][2] == -1.0
    assert all(math.isclose(x * x + y * y, 1.0) for x, y, _ in pts)


def test_waves_uses_lighter_alpha(recorder):
    recorder.alpha = 0.3
    xs, ys = demos.waves(recorder)
    assert len(xs) == len(ys) == 50
    assert xs[0] == -2.5 and xs[-1] == 2.4
    (_, _, func, alpha), = recorder.surfaces
    assert alpha == 0.2
    assert func(0.0, 0.0) == 1.0
    assert recorder.alpha == 0.3


def test_waves3d_quads(recorder):
    quads = demos.waves3d(recorder)
    assert len(recorder.series) == 1
    assert len(quads) == 49 * 49
    assert all(len(q) == 4 for q in quads)
    x, y, z = quads[0][0]
    assert z == demos.wave_height(x, y)


def test_triangles(recorder):
    tris = demos.triangles(recorder)
    assert len(recorder.series) == 1
    assert len(tris) == 60
    assert tris[0] == [(-1.0, -1.5, -2.0), (-1.0, -0.5, -2.0), (0.0, -1.5, -2.0)]
    assert all(-3.0 <= c <= 3.0 for t in tris for p in t for c in p)

import math

import numpy as np
import pytest

from polypanel import shapes
from polypanel.batch import revolution_profile, revolution_table
from polypanel.mesh_checks import face_size_histogram, mesh_oriented, mesh_watertight

def _norms(mesh):
    return [float(np.linalg.norm(np.asarray(v.position, dtype=float))) for f in mesh for v in f]

REFERENCE_SHAPES = {
    'tetra': (shapes.tetra(1.0), {3: 4}),
    'cube': (shapes.cube(1.0), {4: 6}),
    'cube_center': (shapes.cube_center(1.0), {3: 24}),
    'octa': (shapes.octa(1.0), {3: 8}),
    'icosahedron': (shapes.icosahedron(1.0), {3: 20}),
    'dodecahedron': (shapes.dodecahedron(1.0), {5: 12}),
    'dodecahedron_center': (shapes.dodecahedron_center(1.0), {3: 60}),
    'c60': (shapes.c60(1.0), {5: 12, 6: 20}),
    'c60_center': (shapes.c60_center(1.0), {3: 180}),
    'revolution': (shapes.revolution(1.0, 9, 6, (True, True), revolution_profile), {4: 210, 6: 2}),
    'revo_table': (shapes.revolution_from_table(1.0, 9, 6, (True, True), revolution_table(9)), {4: 108, 6: 2}),
    'rsphere': (shapes.rsphere(1.0, 6), {3: 24, 4: 48}),
    'cylinder': (shapes.cylinder(1.0, 4.0, 6), {4: 6, 6: 2}),
    'capsule': (shapes.capsule(1.0, 3.0, 6), {3: 12, 4: 30}),
    'cone': (shapes.cone(1.0, 4.0, 6), {3: 6, 6: 1}),
    'torus': (shapes.torus(2.0, 0.8, 6, 6), {4: 36}),
    'ring': (shapes.ring(2.0, 0.1, 0.8, 12, 6), {4: 72}),
    'tube': (shapes.tube(2.0, 1.6, 4.0, 6), {4: 24}),
    'halfpipe': (shapes.halfpipe(4.712388980, 2.4, 2.0, 4.0, 6), {4: 26}),
    'pin': (shapes.pin(0.4, 8, 6), {3: 12, 4: 42}),
}

@pytest.mark.parametrize('name', sorted(REFERENCE_SHAPES))
def test_face_sizes(name):
    mesh, expected = REFERENCE_SHAPES[name]
    assert face_size_histogram(mesh) == expected

@pytest.mark.parametrize('name', sorted(REFERENCE_SHAPES))
def test_reference_shapes_are_closed_and_consistently_wound(name):
    mesh, _ = REFERENCE_SHAPES[name]
    assert mesh_watertight(mesh), mesh_watertight(mesh).warnings
    assert mesh_oriented(mesh), mesh_oriented(mesh).warnings

@pytest.mark.parametrize('name', sorted(REFERENCE_SHAPES))
def test_reference_shapes_fit_the_chart(name):
    mesh, _ = REFERENCE_SHAPES[name]
    for face in mesh:
        for v in face:
            assert all(-3.0 <= float(c) <= 3.0 for c in v.position)

@pytest.mark.parametrize('gen', [shapes.tetra, shapes.cube, shapes.octa, shapes.icosahedron,
                                 shapes.dodecahedron, shapes.c60])
def test_polyhedra_are_inscribed(gen):
    mesh = gen(2.0)
    assert all(math.isclose(n, 2.0, rel_tol=1e-9) for n in _norms(mesh))

@pytest.mark.parametrize('gen', [shapes.tetra, shapes.cube, shapes.octa, shapes.icosahedron,
                                 shapes.dodecahedron, shapes.c60])
def test_polyhedra_faces_point_outward(gen):
    for face in gen(1.0):
        pts = np.array([np.asarray(v.position, dtype=float) for v in face])
        normal = np.cross(pts[1] - pts[0], pts[2] - pts[0])
        assert np.dot(normal, pts.mean(axis=0)) > 0

def test_c60_edges_are_equal():
    mesh = shapes.c60(1.0)
    lengths = []
    for face in mesh:
        pts = [np.asarray(v.position, dtype=float) for v in face]
        for i in range(len(pts)):
            lengths.append(np.linalg.norm(pts[i] - pts[(i + 1) % len(pts)]))
    assert max(lengths) - min(lengths) < 1e-9
    distinct = {tuple(np.round(np.asarray(v.position, dtype=float), 9)) for f in mesh for v in f}
    assert len(distinct) == 60

def test_dtype_is_applied():
    mesh = shapes.cube(1.0, dtype=np.float32)
    assert mesh.dtype == np.dtype(np.float32)
    assert all(v.position.dtype == np.float32 for f in mesh for v in f)

def test_revolution_matches_profile():
    mesh = shapes.revolution(1.5, 1, 4, (False, False), lambda n, m: (n / m, 1.0 + n))
    zs = sorted({round(float(v.position[2]), 9) for f in mesh for v in f})
    assert zs == [0.0, 0.25, 0.5, 0.75]
    top = [v for f in mesh for v in f if math.isclose(float(v.position[2]), 0.75)]
    assert all(math.isclose(math.hypot(float(v.position[0]), float(v.position[1])), 6.0)
               for v in top)

def _z_extent(mesh):
    zs = [float(v.position[2]) for f in mesh for v in f]
    return min(zs), max(zs)

def test_revolution_stops_one_step_short_of_the_table():
    profiled = shapes.revolution(1.0, 9, 6, (True, True), revolution_profile)
    tabled = shapes.revolution_from_table(1.0, 9, 6, (True, True), revolution_table(9))
    assert _z_extent(profiled) == pytest.approx((-2.25, 2.125))
    assert _z_extent(tabled) == pytest.approx((-2.25, 2.25))
    assert len(profiled) != len(tabled)

def test_revolution_without_caps_is_open():
    mesh = shapes.revolution(1.0, 2, 6, (False, False), revolution_profile)
    assert not mesh_watertight(mesh)
    assert mesh_oriented(mesh)

def test_revolution_table_length_checked():
    with pytest.raises(ValueError):
        shapes.revolution_from_table(1.0, 9, 6, (True, True), revolution_table(8))

def test_parametric_shapes_carry_uv():
    mesh = shapes.torus(2.0, 0.5, 8, 4)
    assert all(v.uv is not None for f in mesh for v in f)
    assert all(0.0 <= c <= 1.0 for f in mesh for v in f for c in v.uv)

@pytest.mark.parametrize('call', [
    lambda: shapes.tetra(0.0),
    lambda: shapes.cylinder(1.0, -1.0, 6),
    lambda: shapes.cone(1.0, 1.0, 2),
    lambda: shapes.rsphere(1.0, 1),
    lambda: shapes.torus(1.0, 2.0, 6, 6),
    lambda: shapes.tube(1.0, 2.0, 1.0, 6),
    lambda: shapes.halfpipe(7.0, 2.0, 1.0, 1.0, 6),
    lambda: shapes.pin(0.4, 1, 6),
    lambda: shapes.revolve([(0.0, 1.0)], 6),
    lambda: shapes.revolve([(0.0, 1.0), (1.0, -1.0)], 6),
])
def test_bad_parameters_raise(call):
    with pytest.raises(ValueError):
        call()

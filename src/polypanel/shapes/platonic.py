"""Platonic solids inscribed in a sphere of the given radius.

All faces are wound so their normals point away from the origin.
"""

from __future__ import annotations

import math

import numpy as np

from polypanel.faces import Mesh
from polypanel.shapes._common import check_positive, fan, outward, pi2


def sphere2cartesian(lat, lon, rad):
    """
    Convert spherical polar coordinates (degrees) to cartesian
    coordinates for a sphere centered at the origin.
        ``lat`` -- latitude
        ``lon`` -- longitude
        ``rad`` -- sphere radius
    """
    if lat == 90:
        return np.array([0.0, 0.0, rad])
    elif lat == -90:
        return np.array([0.0, 0.0, -rad])
    latr = (((lat + 90) % 180) - 90) * pi2 / 360.0
    lonr = (lon % 360) * pi2 / 360.0
    smallrad = math.cos(latr) * rad
    return np.array([math.cos(lonr) * smallrad,
                     math.sin(lonr) * smallrad,
                     math.sin(latr) * rad])


# face indices for icosahedron
icaIndices = [[1, 11, 3], [3, 11, 5], [5, 11, 7], [7, 11, 9], [9, 11, 1],
              [2, 1, 3], [2, 3, 4], [4, 3, 5], [4, 5, 6], [6, 5, 7], [6, 7, 8],
              [8, 7, 9], [8, 9, 10], [10, 9, 1], [10, 1, 2],
              [0, 2, 4], [0, 4, 6], [0, 6, 8], [0, 8, 10], [0, 10, 2]]


def icosahedron_table(radius):
    """Return ``(verts, faces)`` of an icosahedron, faces wound outward.

    Vertex 0 is the north pole, 11 the south pole; the ten vertices in
    between alternate between the southern and northern rings.
    """
    verts = [sphere2cartesian(90, 0, radius)]
    lat = math.atan(0.5) * 360.0 / pi2
    for i in range(10):
        sgn = -1 if i % 2 == 0 else 1
        verts.append(sphere2cartesian(lat * sgn, i * 36.0, radius))
    verts.append(sphere2cartesian(-90, 0, radius))
    faces = [outward(f, verts) for f in icaIndices]
    return verts, faces


def _scaled(table, radius):
    return [np.asarray(v, dtype=float) * radius / math.sqrt(3.0) for v in table]


_TETRA = [(1, 1, 1), (1, -1, -1), (-1, 1, -1), (-1, -1, 1)]

_CUBE = [(-1, -1, -1), (1, -1, -1), (1, 1, -1), (-1, 1, -1),
         (-1, -1, 1), (1, -1, 1), (1, 1, 1), (-1, 1, 1)]

_CUBE_FACES = [[0, 3, 2, 1], [4, 5, 6, 7],
               [0, 1, 5, 4], [2, 3, 7, 6],
               [1, 2, 6, 5], [3, 0, 4, 7]]


def tetra(radius, *, dtype=np.float64):
    radius = check_positive('radius', radius)
    verts = _scaled(_TETRA, radius)
    faces = [outward(f, verts) for f in ([0, 1, 2], [0, 1, 3], [0, 2, 3], [1, 2, 3])]
    return Mesh.from_indexed(verts, faces, dtype)


def cube(radius, *, dtype=np.float64):
    radius = check_positive('radius', radius)
    verts = _scaled(_CUBE, radius)
    faces = [outward(f, verts) for f in _CUBE_FACES]
    return Mesh.from_indexed(verts, faces, dtype)


def cube_center(radius, *, dtype=np.float64):
    """cube with every square split into four triangles about its center"""
    radius = check_positive('radius', radius)
    verts = _scaled(_CUBE, radius)
    faces = []
    for f in _CUBE_FACES:
        faces += fan(outward(f, verts), verts)
    return Mesh.from_indexed(verts, faces, dtype)


def octa(radius, *, dtype=np.float64):
    radius = check_positive('radius', radius)
    verts = [np.array(v, dtype=float) * radius
             for v in ((1, 0, 0), (-1, 0, 0), (0, 1, 0),
                       (0, -1, 0), (0, 0, 1), (0, 0, -1))]
    faces = []
    for x in (0, 1):
        for y in (2, 3):
            for z in (4, 5):
                faces.append(outward([x, y, z], verts))
    return Mesh.from_indexed(verts, faces, dtype)


def icosahedron(radius, *, dtype=np.float64):
    radius = check_positive('radius', radius)
    verts, faces = icosahedron_table(radius)
    return Mesh.from_indexed(verts, faces, dtype)

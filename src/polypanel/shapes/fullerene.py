"""Icosahedral family: dodecahedron and the C60 truncated icosahedron.

Both are derived from :func:`polypanel.shapes.platonic.icosahedron_table`.
The dodecahedron is its dual (one vertex per icosahedron face); C60 cuts
every icosahedron edge in thirds, giving 12 pentagons and 20 hexagons.
The ``*_center`` variants split each face into a triangle fan about the
face centroid.
"""

from __future__ import annotations

import numpy as np

from polypanel.faces import Mesh
from polypanel.shapes._common import check_positive, fan, ring_order
from polypanel.shapes.platonic import icosahedron_table


def _neighbors(faces, count):
    adj = [set() for _ in range(count)]
    for f in faces:
        for i, a in enumerate(f):
            b = f[(i + 1) % len(f)]
            adj[a].add(b)
            adj[b].add(a)
    return [sorted(s) for s in adj]


def _third(p, q):
    return p + (q - p) / 3.0


def _normalize(verts, radius):
    scale = radius / float(np.linalg.norm(verts[0]))
    return [v * scale for v in verts]


def dodecahedron_table(radius):
    ico, ico_faces = icosahedron_table(1.0)
    centroids = [np.mean([ico[i] for i in f], axis=0) for f in ico_faces]
    faces = []
    for v in range(len(ico)):
        around = [k for k, f in enumerate(ico_faces) if v in f]
        order = ring_order(ico[v], ico[v], [centroids[k] for k in around])
        faces.append([around[i] for i in order])
    return _normalize(centroids, radius), faces


def c60_table(radius):
    ico, ico_faces = icosahedron_table(1.0)
    verts = []
    index = {}

    def cut(a, b):
        if (a, b) not in index:
            verts.append(_third(ico[a], ico[b]))
            index[(a, b)] = len(verts) - 1
        return index[(a, b)]

    faces = []
    for a, nbrs in enumerate(_neighbors(ico_faces, len(ico))):
        order = ring_order(ico[a], ico[a], [ico[b] for b in nbrs])
        faces.append([cut(a, nbrs[i]) for i in order])
    for a, b, c in ico_faces:
        faces.append([cut(a, b), cut(b, a), cut(b, c),
                      cut(c, b), cut(c, a), cut(a, c)])
    return _normalize(verts, radius), faces


def _centered(table):
    verts, faces = table
    out = []
    for f in faces:
        out += fan(f, verts)
    return verts, out


def dodecahedron(radius, *, dtype=np.float64):
    verts, faces = dodecahedron_table(check_positive('radius', radius))
    return Mesh.from_indexed(verts, faces, dtype)


def dodecahedron_center(radius, *, dtype=np.float64):
    verts, faces = _centered(dodecahedron_table(check_positive('radius', radius)))
    return Mesh.from_indexed(verts, faces, dtype)


def c60(radius, *, dtype=np.float64):
    verts, faces = c60_table(check_positive('radius', radius))
    return Mesh.from_indexed(verts, faces, dtype)


def c60_center(radius, *, dtype=np.float64):
    verts, faces = _centered(c60_table(check_positive('radius', radius)))
    return Mesh.from_indexed(verts, faces, dtype)

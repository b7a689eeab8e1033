"""Shapes swept around the z axis with a closed or hollow cross section."""

from __future__ import annotations

import numpy as np

from polypanel.faces import Mesh
from polypanel.shapes._common import (angle_table, check_positive,
                                      check_segments, pi2)


def ring(major, radial, vertical, major_segments, minor_segments, *, dtype=np.float64):
    """Sweep an ellipse with semi-axes ``radial`` x ``vertical`` around a
    circle of radius ``major``.  Quads are wound outward."""
    major = check_positive('major radius', major)
    radial = check_positive('radial semi-axis', radial)
    vertical = check_positive('vertical semi-axis', vertical)
    ns = check_segments('major segments', major_segments)
    ms = check_segments('minor segments', minor_segments)
    if radial >= major:
        raise ValueError(f'cross section ({radial}) must be smaller than major radius ({major})')

    theta = angle_table(ns)
    phi = angle_table(ms)
    verts = []
    uvs = []
    for i, (ct, st) in enumerate(theta):
        for j, (cp, sp) in enumerate(phi):
            rr = major + radial * cp
            verts.append((rr * ct, rr * st, vertical * sp))
            uvs.append((i / ns, j / ms))

    def idx(i, j):
        return (i % ns) * ms + (j % ms)

    faces = [[idx(i, j), idx(i + 1, j), idx(i + 1, j + 1), idx(i, j + 1)]
             for i in range(ns) for j in range(ms)]
    return Mesh.from_indexed(verts, faces, dtype, uvs)


def torus(major, minor, major_segments, minor_segments, *, dtype=np.float64):
    return ring(major, minor, minor, major_segments, minor_segments, dtype=dtype)


def _hollow(outer, inner, height, segments, sweep, dtype):
    outer = check_positive('outer radius', outer)
    inner = check_positive('inner radius', inner)
    h2 = check_positive('height', height) / 2
    segments = check_segments('segments', segments)
    if inner >= outer:
        raise ValueError(f'inner radius {inner} must be smaller than outer radius {outer}')
    closed = sweep is None
    table = angle_table(segments, pi2 if closed else sweep, closed=closed)

    verts = []
    for r, z in ((outer, -h2), (outer, h2), (inner, -h2), (inner, h2)):
        verts += [(c * r, s * r, z) for c, s in table]
    n = len(table)
    ob, ot, ib, it = (list(range(k * n, (k + 1) * n)) for k in range(4))

    faces = []
    for j in range(segments):
        j1 = (j + 1) % n
        faces.append([ob[j], ob[j1], ot[j1], ot[j]])
        faces.append([ib[j], it[j], it[j1], ib[j1]])
        faces.append([ot[j], ot[j1], it[j1], it[j]])
        faces.append([ob[j], ib[j], ib[j1], ob[j1]])
    if not closed:
        faces.append([ib[0], ob[0], ot[0], it[0]])
        faces.append([ib[-1], it[-1], ot[-1], ob[-1]])
    return Mesh.from_indexed(verts, faces, dtype)


def tube(outer, inner, height, segments, *, dtype=np.float64):
    """hollow cylinder with wall thickness ``outer - inner`` and annular ends"""
    return _hollow(outer, inner, height, segments, None, dtype)


def halfpipe(angle, outer, inner, height, segments, *, dtype=np.float64):
    """a tube cut to an ``angle`` (radians) wedge, closed at both ends"""
    angle = check_positive('angle', angle)
    if angle > pi2:
        raise ValueError(f'bad halfpipe angle {angle} (must not exceed 2*pi)')
    return _hollow(outer, inner, height, segments, angle, dtype)

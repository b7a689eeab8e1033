"""Solids of revolution about the z axis.

Every generator here reduces to :func:`revolve`, which sweeps a profile of
``(z, radius)`` rows around the axis.  Rows must be given bottom to top.
A row with zero radius collapses to a single pole vertex, and the
``caps`` pair closes the bottom and/or top ring with a flat polygon.
"""

from __future__ import annotations

import math

import numpy as np

from polypanel.faces import Mesh
from polypanel.shapes._common import (POLE_EPSILON, angle_table,
                                      check_positive, check_segments)


def revolve(rows, segments, caps=(False, False), *, dtype=np.float64):
    """Sweep ``rows`` of ``(z, radius)`` into a mesh with ``segments`` sides."""
    segments = check_segments('segments', segments)
    if len(rows) < 2:
        raise ValueError('a profile needs at least two rows')
    table = angle_table(segments)
    last = len(rows) - 1

    verts = []
    uvs = []
    rings = []
    for k, (z, r) in enumerate(rows):
        z = float(z)
        r = float(r)
        if r < 0:
            raise ValueError(f'bad profile radius {r} in row {k}')
        v = k / last
        if r < POLE_EPSILON:
            verts.append((0.0, 0.0, z))
            uvs.append((0.5, v))
            rings.append([len(verts) - 1] * segments)
            continue
        ring = []
        for j, (c, s) in enumerate(table):
            verts.append((c * r, s * r, z))
            uvs.append((j / segments, v))
            ring.append(len(verts) - 1)
        rings.append(ring)

    faces = []
    for lower, upper in zip(rings, rings[1:]):
        lower_pole = lower[0] == lower[-1]
        upper_pole = upper[0] == upper[-1]
        if lower_pole and upper_pole:
            continue
        for j in range(segments):
            j1 = (j + 1) % segments
            if lower_pole:
                faces.append([lower[j], upper[j1], upper[j]])
            elif upper_pole:
                faces.append([lower[j], lower[j1], upper[j]])
            else:
                faces.append([lower[j], lower[j1], upper[j1], upper[j]])

    bottom, top = caps
    if bottom and rings[0][0] != rings[0][-1]:
        faces.append(list(reversed(rings[0])))
    if top and rings[-1][0] != rings[-1][-1]:
        faces.append(list(rings[-1]))
    return Mesh.from_indexed(verts, faces, dtype, uvs)


def revolution(radius, q, segments, caps, profile, *, dtype=np.float64):
    """Revolve ``profile(n, m)`` for ``n = 0..m-1`` with ``m = 4*q``.

    ``profile`` returns ``(z, weight)``; the ring radius is
    ``radius * weight``.  The last sample is one step short of
    ``profile(m, m)``, so a profile spanning [a, b] ends at
    ``b - (b - a)/m``.
    """
    radius = check_positive('radius', radius)
    q = check_segments('q', q, minimum=1)
    m = 4 * q
    rows = []
    for n in range(m):
        z, w = profile(n, m)
        rows.append((z, radius * w))
    return revolve(rows, segments, caps, dtype=dtype)


def revolution_from_table(radius, q, segments, caps, tbl, *, dtype=np.float64):
    """Revolve an explicit ``(z, weight)`` table of ``2*q + 1`` rows."""
    radius = check_positive('radius', radius)
    q = check_segments('q', q, minimum=1)
    if len(tbl) != 2 * q + 1:
        raise ValueError(f'profile table has {len(tbl)} rows, expected {2 * q + 1}')
    rows = [(z, radius * w) for z, w in tbl]
    return revolve(rows, segments, caps, dtype=dtype)


def _arc_rows(zc, radius, start, stop, steps):
    rows = []
    for k in range(steps + 1):
        phi = start + (stop - start) * k / steps
        rows.append((zc + radius * math.sin(phi), radius * math.cos(phi)))
    return rows


def rsphere(radius, segments, *, dtype=np.float64):
    """latitude/longitude sphere: ``segments`` bands, twice as many sides"""
    radius = check_positive('radius', radius)
    segments = check_segments('segments', segments, minimum=2)
    rows = _arc_rows(0.0, radius, -math.pi / 2, math.pi / 2, segments)
    return revolve(rows, 2 * segments, dtype=dtype)


def cylinder(radius, height, segments, *, dtype=np.float64):
    radius = check_positive('radius', radius)
    h2 = check_positive('height', height) / 2
    return revolve([(-h2, radius), (h2, radius)], segments, (True, True), dtype=dtype)


def cone(radius, height, segments, *, dtype=np.float64):
    radius = check_positive('radius', radius)
    h2 = check_positive('height', height) / 2
    return revolve([(-h2, radius), (h2, 0.0)], segments, (True, False), dtype=dtype)


def capsule(radius, height, segments, *, dtype=np.float64):
    """cylinder of ``height`` closed by hemispheres; total length ``height + 2*radius``"""
    radius = check_positive('radius', radius)
    h2 = check_positive('height', height) / 2
    segments = check_segments('segments', segments)
    steps = max(2, segments // 2)
    rows = _arc_rows(-h2, radius, -math.pi / 2, 0.0, steps)
    rows += _arc_rows(h2, radius, 0.0, math.pi / 2, steps)
    return revolve(rows, segments, dtype=dtype)


def pin(radius, q, segments, *, length=3.0, dtype=np.float64):
    """map pin: a spherical head of ``radius`` on a cone ending in a point

    The head is sampled with ``q`` rows; the tip sits ``length`` below the
    head center, and the whole pin is centred on the origin.
    """
    radius = check_positive('radius', radius)
    q = check_segments('q', q, minimum=2)
    length = check_positive('length', length)
    if length <= radius:
        raise ValueError(f'bad pin length {length} (must exceed radius {radius})')
    zc = length / 2
    tip = zc - length
    # the cone meets the head tangentially
    start = -math.asin(radius / length)
    rows = [(tip, 0.0)] + _arc_rows(zc, radius, start, math.pi / 2, q)
    return revolve(rows, segments, dtype=dtype)

"""Shared helpers for the polyPanel shape generators."""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

import numpy as np

# radii below this collapse a ring of vertices to a single pole vertex
POLE_EPSILON = 1e-12

pi2 = 2.0 * math.pi


def check_positive(name: str, value: float) -> float:
    if not value > 0:
        raise ValueError(f'bad {name}: {value} (must be positive)')
    return float(value)


def check_segments(name: str, count: int, minimum: int = 3) -> int:
    if int(count) != count or count < minimum:
        raise ValueError(f'bad {name}: {count} (must be an integer >= {minimum})')
    return int(count)


def angle_table(samples: int, sweep: float = pi2, closed: bool = True) -> List[Tuple[float, float]]:
    """Return ``(cos, sin)`` pairs for ``samples`` steps over ``sweep``.

    Index 0 is exactly ``(1.0, 0.0)`` so seams line up.  A closed table
    has ``samples`` entries (the last step wraps to index 0); an open one
    has ``samples + 1`` entries and ends at ``sweep``.
    """
    step = sweep / samples
    count = samples if closed else samples + 1
    table = [(1.0, 0.0)]
    for i in range(1, count):
        a = i * step
        table.append((math.cos(a), math.sin(a)))
    return table


def newell_normal(pts: Sequence[Sequence[float]]) -> np.ndarray:
    """Unnormalised polygon normal; robust for non-planar loops."""
    n = np.zeros(3)
    for i in range(len(pts)):
        a = pts[i]
        b = pts[(i + 1) % len(pts)]
        n[0] += (a[1] - b[1]) * (a[2] + b[2])
        n[1] += (a[2] - b[2]) * (a[0] + b[0])
        n[2] += (a[0] - b[0]) * (a[1] + b[1])
    return n


def outward(face: List[int], verts: Sequence[Sequence[float]]) -> List[int]:
    """Reverse ``face`` if its winding points toward the origin.

    Only meaningful for convex solids centred at the origin.
    """
    pts = [verts[i] for i in face]
    centroid = np.mean(np.asarray(pts, dtype=float), axis=0)
    if float(np.dot(newell_normal(pts), centroid)) < 0:
        return list(reversed(face))
    return list(face)


def fan(face: List[int], verts: List[np.ndarray]) -> List[List[int]]:
    """Split ``face`` into triangles around a new centroid vertex.

    The centroid is appended to ``verts``; the triangles keep the winding
    of ``face``.
    """
    centroid = np.mean(np.asarray([verts[i] for i in face], dtype=float), axis=0)
    verts.append(centroid)
    c = len(verts) - 1
    n = len(face)
    return [[c, face[i], face[(i + 1) % n]] for i in range(n)]


def ring_order(axis: np.ndarray, center: np.ndarray,
               points: Sequence[np.ndarray]) -> List[int]:
    """Return indices of ``points`` sorted counter-clockwise about ``axis``.

    The ordering is as seen from the tip of ``axis`` looking back at
    ``center``, which gives loops wound outward along ``axis``.
    """
    n = axis / np.linalg.norm(axis)
    ref = np.array([1.0, 0.0, 0.0])
    if abs(float(np.dot(ref, n))) > 0.9:
        ref = np.array([0.0, 1.0, 0.0])
    u = ref - np.dot(ref, n) * n
    u = u / np.linalg.norm(u)
    w = np.cross(n, u)
    angles = []
    for i, p in enumerate(points):
        d = np.asarray(p, dtype=float) - center
        angles.append((math.atan2(float(np.dot(d, w)), float(np.dot(d, u))), i))
    return [i for _, i in sorted(angles)]

"""Structural self-checks for generated meshes.

Both checks work on rounded vertex positions, so a seam built from
duplicated vertices reads the same as a shared one.  The counts come
out as histograms in the style of :func:`face_size_histogram`.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List

from polypanel.faces import Mesh
from polypanel.geometry_utils import position_key


@dataclass(frozen=True)
class CheckResult:
    ok: bool
    warnings: List[str] = field(default_factory=list)

    @classmethod
    def from_warnings(cls, warnings: List[str]) -> "CheckResult":
        return cls(not warnings, list(warnings))

    def __bool__(self) -> bool:
        return self.ok


def _histogram(values) -> Dict[int, int]:
    return dict(sorted(Counter(values).items()))


def face_size_histogram(mesh: Mesh) -> Dict[int, int]:
    """Return ``{vertex count: number of faces}``."""

    return _histogram(len(f) for f in mesh)


def _directed_edges(mesh: Mesh):
    for face in mesh:
        keys = [position_key(v.position) for v in face]
        for a, b in zip(keys, keys[1:] + keys[:1]):
            if a != b:
                yield a, b


def edge_use_histogram(mesh: Mesh) -> Dict[int, int]:
    """Return ``{faces sharing an edge: number of such edges}``.

    A closed two-manifold mesh gives ``{2: edge_count}``.
    """

    uses = Counter(frozenset(edge) for edge in _directed_edges(mesh))
    return _histogram(uses.values())


def mesh_watertight(mesh: Mesh) -> CheckResult:
    """Every edge must be shared by exactly two faces."""

    warnings = []
    for uses, edges in edge_use_histogram(mesh).items():
        if uses == 1:
            warnings.append(f'open: {edges} edges belong to a single face')
        elif uses > 2:
            warnings.append(f'non-manifold: {edges} edges shared by {uses} faces')
    return CheckResult.from_warnings(warnings)


def mesh_oriented(mesh: Mesh) -> CheckResult:
    """Neighbouring faces must traverse their shared edge in opposite
    directions, so no directed edge may appear twice."""

    twice = sum(1 for n in Counter(_directed_edges(mesh)).values() if n > 1)
    if not twice:
        return CheckResult.from_warnings([])
    return CheckResult.from_warnings(
        [f'winding: {twice} directed edges run the same way in two faces'])


__all__ = [
    'CheckResult',
    'face_size_histogram',
    'edge_use_histogram',
    'mesh_watertight',
    'mesh_oriented',
]

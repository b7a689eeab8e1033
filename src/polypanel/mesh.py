"""Turn polyPanel meshes into polygon series for a 3D panel."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from polypanel.faces import Face, Mesh
from polypanel.geometry_utils import Converter, Vec3, to_vec3


def face_polygon(face: Face, convert: Converter = to_vec3) -> List[Vec3]:
    """Return the converted positions of ``face`` in face order."""

    return [convert(v.position) for v in face]


def mesh_view(mesh: Iterable[Face], convert: Converter = to_vec3) -> Iterator[List[Vec3]]:
    """Yield one polygon per face of ``mesh``, in mesh iteration order.

    Every vertex is passed through ``convert`` and the vertex count and
    order of each face are kept.  Faces are not checked: a face with fewer
    than three vertices comes out as a degenerate polygon.
    """

    for face in mesh:
        yield face_polygon(face, convert)


def mesh_polygons(mesh: Iterable[Face], convert: Converter = to_vec3) -> List[List[Vec3]]:
    return list(mesh_view(mesh, convert))


def surface3d(panel, mesh: Mesh, convert: Converter = to_vec3,
              fillcolor: Optional[str] = None,
              alpha: Optional[float] = None) -> List[List[Vec3]]:
    """Draw every face of ``mesh`` on ``panel`` as a single polygon series.

    ``fillcolor`` and ``alpha`` override the panel's current fill style
    for this call only.  Returns the polygons that were drawn.
    """

    polygons = mesh_polygons(mesh, convert)
    saved = panel.fillcolor, panel.alpha
    try:
        if fillcolor is not None:
            panel.fillcolor = fillcolor
        if alpha is not None:
            panel.alpha = alpha
        panel.draw_polygons(polygons)
    finally:
        panel.fillcolor, panel.alpha = saved
    return polygons


__all__ = [
    "face_polygon",
    "mesh_view",
    "mesh_polygons",
    "surface3d",
]

"""Mesh generators for the shapes shown in the diagnostic grid.

Each generator takes its shape parameters plus a keyword-only ``dtype``
(any numpy float dtype, default ``float64``) for the vertex positions, and
returns a :class:`polypanel.faces.Mesh`.
"""

from polypanel.shapes.fullerene import (c60, c60_center, dodecahedron,
                                        dodecahedron_center)
from polypanel.shapes.platonic import (cube, cube_center, icosahedron, octa,
                                       tetra)
from polypanel.shapes.revolution import (capsule, cone, cylinder, pin,
                                         revolution, revolution_from_table,
                                         revolve, rsphere)
from polypanel.shapes.swept import halfpipe, ring, torus, tube

__all__ = [
    "tetra",
    "cube",
    "cube_center",
    "octa",
    "icosahedron",
    "dodecahedron",
    "dodecahedron_center",
    "c60",
    "c60_center",
    "revolve",
    "revolution",
    "revolution_from_table",
    "rsphere",
    "cylinder",
    "capsule",
    "cone",
    "pin",
    "torus",
    "ring",
    "tube",
    "halfpipe",
]

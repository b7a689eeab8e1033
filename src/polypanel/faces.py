"""Face/vertex containers shared by the shape generators and the renderer.

A ``Mesh`` is an ordered list of ``Face`` objects, and each face is an
ordered list of ``Vertex`` objects.  Positions keep whatever numeric type
the generator produced (numpy scalars of any float dtype, Python floats,
``Fraction``, ``Decimal``...).  Nothing here converts or validates them;
that is left to :mod:`polypanel.geometry_utils` at render time.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterator, List, Optional, Sequence, Tuple

import numpy as np

UV = Tuple[float, float]


@dataclass(frozen=True)
class Vertex:
    """A 3-component position plus an optional texture coordinate."""

    position: Sequence[Any]
    uv: Optional[UV] = None

    def puv(self) -> Tuple[Sequence[Any], Optional[UV]]:
        return self.position, self.uv


@dataclass
class Face:
    """Ordered vertex loop; the order defines the winding."""

    vertices: List[Vertex] = field(default_factory=list)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def __getitem__(self, idx: int) -> Vertex:
        return self.vertices[idx]


@dataclass
class Mesh:
    """Ordered collection of faces for a single shape."""

    faces: List[Face] = field(default_factory=list)
    dtype: Any = None

    def __iter__(self) -> Iterator[Face]:
        return iter(self.faces)

    def __len__(self) -> int:
        return len(self.faces)

    def __getitem__(self, idx: int) -> Face:
        return self.faces[idx]

    def vertex_count(self) -> int:
        """Total number of face corners (shared corners counted per face)."""
        return sum(len(f) for f in self.faces)

    def with_uv(self, keep: bool) -> "Mesh":
        """Return the mesh with texture coordinates kept or stripped."""
        if keep:
            return self
        faces = [Face([replace(v, uv=None) for v in f]) for f in self.faces]
        return Mesh(faces, self.dtype)

    @classmethod
    def from_indexed(cls,
                     verts: Sequence[Sequence[float]],
                     faces: Sequence[Sequence[int]],
                     dtype: Any = np.float64,
                     uvs: Optional[Sequence[UV]] = None) -> "Mesh":
        """Expand an indexed vertex table into a face list.

        ``verts`` is converted once to ``dtype`` (pass ``dtype=None`` to keep
        the values as given); each entry of ``faces`` is a list of indices
        into ``verts`` and, if supplied, ``uvs``.
        """
        if dtype is None:
            positions = [tuple(v[:3]) for v in verts]
        else:
            positions = [np.asarray(v[:3], dtype=dtype) for v in verts]
        out = []
        for face in faces:
            loop = []
            for idx in face:
                uv = uvs[idx] if uvs is not None else None
                loop.append(Vertex(positions[idx], uv))
            out.append(Face(loop))
        return cls(out, None if dtype is None else np.dtype(dtype))


__all__ = [
    "UV",
    "Vertex",
    "Face",
    "Mesh",
]

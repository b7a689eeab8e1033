"""Render the diagnostic grid: one shape per panel, one image per batch.

The grid assignment lives in a declarative table of :class:`PanelSpec`
rows.  :func:`render_batch` walks the table in index order, builds each
mesh, gives it its own 3D chart and writes the canvas once at the end.
By default the first failure aborts the batch and nothing is written.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Sequence, Tuple

from polypanel import demos, shapes
from polypanel.chart import DEFAULT_CHART, ChartConfig, mk_chart
from polypanel.mesh import surface3d
from polypanel.mesh_checks import face_size_histogram, mesh_oriented, mesh_watertight
from polypanel.mpl_drawable import mplCanvas

logger = logging.getLogger(__name__)

KINDS = ('mesh', 'demo')


class RenderError(RuntimeError):
    """A panel failed while rendering a strict batch."""

    def __init__(self, index: int, title: str, cause: BaseException):
        super().__init__(f'panel {index} ({title}) failed: {type(cause).__name__}: {cause}')
        self.index = index
        self.title = title


@dataclass(frozen=True)
class PanelSpec:
    """One grid cell: which generator (or demo) fills it, and its title.

    For ``kind == 'mesh'`` the generator is called with ``args`` and
    ``kwargs`` and must return a mesh.  For ``kind == 'demo'`` it is called
    with the panel as first argument and draws directly on it.
    """

    index: int
    title: str
    generator: Callable[..., Any]
    args: Tuple[Any, ...] = ()
    kwargs: Dict[str, Any] = field(default_factory=dict)
    kind: str = 'mesh'

    def build(self):
        return self.generator(*self.args, **self.kwargs)


@dataclass(frozen=True)
class BatchConfig:
    filename: str = './images/polyhedron.png'
    size: Tuple[int, int] = (1920, 1280)
    grid: Tuple[int, int] = (4, 6)
    dpi: int = 100
    strict: bool = True


DEFAULT_BATCH = BatchConfig()


@dataclass
class BatchResult:
    filename: str
    rendered: List[int] = field(default_factory=list)
    failed: Dict[int, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


def revolution_profile(n, m):
    """axial position stepping up from -2.25 by 4.5/m, constant unit weight"""
    return -2.25 + 4.5 * n / m, 1.0


def revolution_table(q=9):
    s = q * 2 + 1
    return [(-2.25 + 4.5 * sn / (s - 1), 1.0) for sn in range(s)]


REFERENCE_PANELS: Tuple[PanelSpec, ...] = (
    PanelSpec(0, 'spiral', demos.lines, kind='demo'),
    PanelSpec(1, 'Tetra', shapes.tetra, (1.0,)),
    PanelSpec(2, 'Cube', shapes.cube, (1.0,)),
    PanelSpec(3, 'CubeCenter', shapes.cube_center, (1.0,)),
    PanelSpec(4, 'Octa', shapes.octa, (1.0,)),
    PanelSpec(5, 'Revolution', shapes.revolution,
              (1.0, 9, 6, (True, True), revolution_profile)),
    PanelSpec(6, 'waves', demos.waves, kind='demo'),
    PanelSpec(7, 'RSphere', shapes.rsphere, (1.0, 6)),
    PanelSpec(8, 'Cylinder', shapes.cylinder, (1.0, 4.0, 6)),
    PanelSpec(9, 'Capsule', shapes.capsule, (1.0, 3.0, 6)),
    PanelSpec(10, 'Cone', shapes.cone, (1.0, 4.0, 6)),
    PanelSpec(11, 'Revo Table', shapes.revolution_from_table,
              (1.0, 9, 6, (True, True), revolution_table(9))),
    PanelSpec(12, 'waves3d', demos.waves3d, kind='demo'),
    PanelSpec(13, 'Torus24', shapes.torus, (2.0, 0.8, 6, 6)),
    PanelSpec(14, 'Ring24', shapes.ring, (2.0, 0.1, 0.8, 12, 6)),
    PanelSpec(15, 'Tube', shapes.tube, (2.0, 1.6, 4.0, 6)),
    PanelSpec(16, 'HalfPipe', shapes.halfpipe, (4.712388980, 2.4, 2.0, 4.0, 6)),
    PanelSpec(17, 'Pin', shapes.pin, (0.4, 8, 6)),
    PanelSpec(18, 'triangles', demos.triangles, kind='demo'),
    PanelSpec(19, 'Icosahedron', shapes.icosahedron, (1.0,)),
    PanelSpec(20, 'Dodecahedron', shapes.dodecahedron, (1.0,)),
    PanelSpec(21, 'DodecahedronCenter', shapes.dodecahedron_center, (1.0,)),
    PanelSpec(22, 'C60', shapes.c60, (1.0,)),
    PanelSpec(23, 'C60Center', shapes.c60_center, (1.0,)),
)


def validate_table(table: Sequence[PanelSpec], rows: int, cols: int) -> None:
    """Raise ``ValueError`` unless every row fits the grid exactly once."""
    seen = set()
    for spec in table:
        if spec.kind not in KINDS:
            raise ValueError(f'bad panel kind {spec.kind!r} for panel {spec.index}')
        if not 0 <= spec.index < rows * cols:
            raise ValueError(f'panel index {spec.index} outside {rows}x{cols} grid')
        if spec.index in seen:
            raise ValueError(f'panel index {spec.index} assigned twice')
        seen.add(spec.index)


def panel_assignment(table: Sequence[PanelSpec] = REFERENCE_PANELS) -> Dict[int, str]:
    """Return ``{panel index: title}`` in index order."""
    return {spec.index: spec.title for spec in sorted(table, key=lambda s: s.index)}


def render_panel(canvas, region, spec: PanelSpec, config: ChartConfig = DEFAULT_CHART):
    """Build and draw a single panel; returns the panel."""
    if spec.kind == 'demo':
        panel = mk_chart(canvas, region, spec.title, config)
        spec.generator(panel, *spec.args, **spec.kwargs)
        logger.info('panel %2d %-18s demo', spec.index, spec.title)
        return panel

    mesh = spec.build()
    panel = mk_chart(canvas, region, spec.title, config)
    surface3d(panel, mesh.with_uv(False))
    logger.info('panel %2d %-18s %d faces %s', spec.index, spec.title,
                len(mesh), face_size_histogram(mesh))
    closed = mesh_watertight(mesh)
    if not closed:
        logger.info('panel %2d %s is open: %s', spec.index, spec.title,
                    '; '.join(closed.warnings))
    oriented = mesh_oriented(mesh)
    if not oriented:
        logger.warning('panel %2d %s winding: %s', spec.index, spec.title,
                       '; '.join(oriented.warnings))
    return panel


def render_batch(filename: str = DEFAULT_BATCH.filename,
                 size: Tuple[int, int] = DEFAULT_BATCH.size,
                 grid: Tuple[int, int] = DEFAULT_BATCH.grid,
                 table: Sequence[PanelSpec] = REFERENCE_PANELS,
                 config: ChartConfig = DEFAULT_CHART,
                 dpi: int = DEFAULT_BATCH.dpi,
                 strict: bool = DEFAULT_BATCH.strict) -> BatchResult:
    """Render every row of ``table`` into a ``grid`` of panels and write
    the canvas to ``filename``.

    With ``strict`` (the default) the first panel failure raises
    :class:`RenderError` and no image is written.  Otherwise failures are
    collected in the result and the remaining panels are still drawn.
    """
    rows, cols = grid
    validate_table(table, rows, cols)
    result = BatchResult(filename)

    canvas = mplCanvas(size, dpi)
    try:
        canvas.filename = filename
        regions = canvas.split_evenly(rows, cols)
        for spec in sorted(table, key=lambda s: s.index):
            try:
                render_panel(canvas, regions[spec.index], spec, config)
            except Exception as exc:
                logger.error('panel %d (%s) failed: %s', spec.index, spec.title, exc)
                if strict:
                    raise RenderError(spec.index, spec.title, exc) from exc
                result.failed[spec.index] = f'{type(exc).__name__}: {exc}'
                continue
            result.rendered.append(spec.index)
        result.filename = canvas.display()
    finally:
        canvas.close()
    return result


def create_png(filename: str = DEFAULT_BATCH.filename) -> BatchResult:
    """Render the reference 4x6 grid at 1920x1280."""
    return render_batch(filename)


__all__ = [
    'RenderError',
    'PanelSpec',
    'BatchConfig',
    'DEFAULT_BATCH',
    'BatchResult',
    'REFERENCE_PANELS',
    'revolution_profile',
    'revolution_table',
    'validate_table',
    'panel_assignment',
    'render_panel',
    'render_batch',
    'create_png',
]

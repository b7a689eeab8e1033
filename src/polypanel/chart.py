"""Per-panel 3D chart construction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from polypanel.grid import Region


@dataclass(frozen=True)
class ChartConfig:
    """Axis domain, camera and styling shared by every panel in a batch.

    ``pitch`` and ``yaw`` are in radians and ``scale`` is the zoom of the
    cubic plot box.  The defaults give a readable oblique view of shapes
    sized to fit in ``axis_range``; they are empirical, not derived.
    """

    axis_range: Tuple[float, float] = (-3.0, 3.0)
    pitch: float = 0.5
    yaw: float = 0.2
    scale: float = 0.7
    margin: int = 20
    font: Tuple[str, int] = ("sans-serif", 40)
    tick_size: int = 10
    fillcolor: str = "blue"
    alpha: float = 0.3
    linecolor: str = "red"

    def __post_init__(self):
        lo, hi = self.axis_range
        if not lo < hi:
            raise ValueError(f'bad axis range {self.axis_range}')
        if self.scale <= 0:
            raise ValueError(f'bad camera scale {self.scale}')
        if self.margin < 0:
            raise ValueError(f'bad margin {self.margin}')


DEFAULT_CHART = ChartConfig()


def mk_chart(canvas, region: Region, name: str, config: ChartConfig = DEFAULT_CHART):
    """Build an independent 3D panel over ``region`` of ``canvas``.

    The panel gets the cubic axis domain, the camera and the title from
    ``config``, and its axes and gridlines are configured right away.
    """
    panel = canvas.panel(region, config.margin)
    family, size = config.font
    panel.set_title(name, family, size)
    panel.set_projection(config.pitch, config.yaw, config.scale)
    lo, hi = config.axis_range
    panel.configure_axes(lo, hi, config.tick_size)
    panel.fillcolor = config.fillcolor
    panel.alpha = config.alpha
    panel.linecolor = config.linecolor
    return panel


__all__ = [
    "ChartConfig",
    "DEFAULT_CHART",
    "mk_chart",
]

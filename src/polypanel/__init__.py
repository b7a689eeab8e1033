# -*- coding: utf-8 -*-
"""polyPanel: generated meshes rendered into a grid of 3D diagnostic panels."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("polyPanel")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

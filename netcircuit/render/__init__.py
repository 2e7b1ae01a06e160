"""Render — draw a routed circuit onto a 2-D surface.

Submodules:
  options   RenderOptions (palette, sizes, routing grid size).
  surface   RenderSurface protocol and the Pillow-backed RasterSurface.
  renderer  build_circuit driver and the component/wire drawing passes.
"""

from .options import RenderOptions, DEFAULT_RENDER_OPTIONS
from .surface import RenderSurface, RasterSurface
from .renderer import build_circuit, draw_components, draw_wires

__all__ = [
    "RenderOptions", "DEFAULT_RENDER_OPTIONS",
    "RenderSurface", "RasterSurface",
    "build_circuit", "draw_components", "draw_wires",
]

"""netcircuit — circuit modelling, orthogonal wire routing, and rendering.

Packages, leaf to root:

  geometry   Point / Rect value types
  router     grid rasterizer, A* pathfinder, simplifier, fallback, facade
  circuit    pins, components, wires, circuits, connection validation
  render     rendering surface abstraction and the circuit renderer
"""

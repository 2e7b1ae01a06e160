"""Router — orthogonal wire routing between pins around component bodies.

Submodules:
  grid          Passability grid and rasterization of obstacles/wires.
  pathfinder    A* search on the grid.
  simplify      Collinear-point removal.
  fallback      L-shaped / straight routes when the search fails, and
                the obstacle-interior test used to attach pins.
  engine        Routing facade (single path, wire, whole circuit).
  serialization JSON conversion (routing_to_dict, parse_routing).
"""

from .grid import PassabilityGrid, rasterize
from .pathfinder import find_path
from .simplify import simplify, are_collinear
from .fallback import fallback_path, is_segment_clear, crosses_interior
from .engine import route_path, route_wire, route_circuit
from .serialization import routing_to_dict, parse_routing

__all__ = [
    # Grid / search
    "PassabilityGrid", "rasterize", "find_path",
    # Path shaping
    "simplify", "are_collinear", "fallback_path", "is_segment_clear", "crosses_interior",
    # Engine
    "route_path", "route_wire", "route_circuit",
    # Serialization
    "routing_to_dict", "parse_routing",
]

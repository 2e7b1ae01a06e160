"""A* pathfinder for 4-connected routing on the passability grid.

Unit step cost and a Manhattan heuristic, which is admissible and
consistent for this move set, so the returned path has the minimal number
of steps.  The open set is a binary heap keyed by ``(f, insertion order)``:
among equal f-scores the node pushed first is expanded first.
"""

from __future__ import annotations

import heapq

from netcircuit.geometry import Point

from .grid import PassabilityGrid, FREE


# Manhattan directions: (dx, dy)
DIRS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def find_path(
    grid: PassabilityGrid,
    start: Point,
    end: Point,
) -> list[Point]:
    """Shortest 4-connected path from *start* to *end*.

    Returns canvas points (one per visited cell, at the cell's top-left
    corner) from the start cell to the end cell, or an empty list when the
    end is unreachable.  The start and end cells are always enterable even
    if blocked, so pins sitting on a component edge stay reachable.
    """
    sx, sy = grid.world_to_grid(start)
    tx, ty = grid.world_to_grid(end)

    # Grid internals as locals for the inner loop.
    W = grid.width
    H = grid.height
    cells = grid._cells

    if not (0 <= sx < W and 0 <= sy < H and 0 <= tx < W and 0 <= ty < H):
        return []

    start_key = sy * W + sx
    sink_key = ty * W + tx
    counter = 0
    heap: list[tuple[int, int, int, int]] = [(abs(sx - tx) + abs(sy - ty), counter, sx, sy)]
    g_scores: dict[int, int] = {start_key: 0}
    parents: dict[int, int] = {}
    closed: set[int] = set()

    while heap:
        _f, _cnt, cx, cy = heapq.heappop(heap)
        key = cy * W + cx

        # Stale entry superseded by a cheaper push
        if key in closed:
            continue

        if key == sink_key:
            return _reconstruct(grid, parents, key)

        closed.add(key)
        cur_g = g_scores[key]

        for dx, dy in DIRS:
            nx, ny = cx + dx, cy + dy
            if not (0 <= nx < W and 0 <= ny < H):
                continue
            nkey = ny * W + nx
            if nkey in closed:
                continue
            if cells[nkey] != FREE and nkey != sink_key and nkey != start_key:
                continue

            tentative_g = cur_g + 1
            if nkey not in g_scores or tentative_g < g_scores[nkey]:
                g_scores[nkey] = tentative_g
                parents[nkey] = key
                counter += 1
                h = abs(nx - tx) + abs(ny - ty)
                heapq.heappush(heap, (tentative_g + h, counter, nx, ny))

    return []


def _reconstruct(grid: PassabilityGrid, parents: dict[int, int], key: int) -> list[Point]:
    W = grid.width
    keys = [key]
    while key in parents:
        key = parents[key]
        keys.append(key)
    keys.reverse()
    return [grid.grid_to_world(k % W, k // W) for k in keys]

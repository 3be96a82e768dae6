"""Geometric checks on a polygonal mesh: edge lengths, polygon areas, marker arrays."""

from __future__ import annotations

import math
import sys
from typing import Mapping

from polymeshkit.mesh import PolygonalMesh

EPSILON = sys.float_info.epsilon
AREA_TOLERANCE = math.sqrt(3.0) * EPSILON * EPSILON / 4.0


def edge_length(mesh: PolygonalMesh, edge: int) -> float:
    """Return the length of an edge in the xy plane."""
    origin, end = mesh.cell1ds_extrems[edge]
    x0, y0, _ = mesh.cell0ds_coordinates[origin]
    x1, y1, _ = mesh.cell0ds_coordinates[end]
    return math.hypot(x0 - x1, y0 - y1)


def zero_length_edges(mesh: PolygonalMesh) -> list[int]:
    """Return the ids of edges shorter than machine epsilon, in mesh order."""
    return [edge for edge in mesh.cell1ds_id if edge_length(mesh, edge) < EPSILON]


def _angular_order(mesh: PolygonalMesh, vertices: list[int]) -> list[int]:
    """Order vertices by angle around their centroid; equal angles keep the first."""
    points = [mesh.cell0ds_coordinates[v] for v in vertices]
    x_bar = sum(p[0] for p in points) / len(points)
    y_bar = sum(p[1] for p in points) / len(points)
    by_angle: dict[float, int] = {}
    for vertex, (x, y, _) in zip(vertices, points):
        angle = math.atan2(y - y_bar, x - x_bar)
        if angle < 0:
            angle += 2 * math.pi
        by_angle.setdefault(angle, vertex)
    return [by_angle[angle] for angle in sorted(by_angle)]


def polygon_area(mesh: PolygonalMesh, polygon: int) -> float:
    """Return the area of a polygon whose vertices are ordered around their centroid."""
    vertices = mesh.cell2ds_vertices[polygon]
    if not vertices:
        raise ValueError(f"polygon {polygon} has no vertices")
    ordered = _angular_order(mesh, vertices)
    twice_area = 0.0
    for current, following in zip(ordered, ordered[1:] + ordered[:1]):
        x1, y1, _ = mesh.cell0ds_coordinates[current]
        x2, y2, _ = mesh.cell0ds_coordinates[following]
        twice_area += x1 * y2 - y1 * x2
    return abs(twice_area) / 2.0


def null_area_polygons(mesh: PolygonalMesh) -> list[int]:
    """Return the ids of polygons whose area is below the area tolerance."""
    return [p for p in mesh.cell2ds_id if polygon_area(mesh, p) < AREA_TOLERANCE]


def marker_values(markers: Mapping[int, list[int]], count: int) -> list[float]:
    """Spread a marker map into one value per item, zero where no marker is set."""
    values = [0.0] * count
    for marker, ids in markers.items():
        for ident in ids:
            if not 0 <= ident < count:
                raise IndexError(f"id {ident} out of range for {count} items")
            values[ident] = float(marker)
    return values
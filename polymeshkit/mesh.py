"""Polygonal mesh made of points, edges and polygons, read from CSV files."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


class MeshImportError(Exception):
    """Raised when a mesh file is missing, empty or malformed."""


@dataclass
class PolygonalMesh:
    """Points (0D cells), edges (1D cells) and polygons (2D cells) with markers."""

    cell0ds_id: list[int] = field(default_factory=list)
    cell0ds_coordinates: list[tuple[float, float, float]] = field(default_factory=list)
    cell1ds_id: list[int] = field(default_factory=list)
    cell1ds_extrems: list[tuple[int, int]] = field(default_factory=list)
    cell2ds_id: list[int] = field(default_factory=list)
    cell2ds_vertices: list[list[int]] = field(default_factory=list)
    cell2ds_edges: list[list[int]] = field(default_factory=list)
    marker_cell0ds: dict[int, list[int]] = field(default_factory=dict)
    marker_cell1ds: dict[int, list[int]] = field(default_factory=dict)
    marker_cell2ds: dict[int, list[int]] = field(default_factory=dict)

    @property
    def num_cell0ds(self) -> int:
        """Number of points."""
        return len(self.cell0ds_id)

    @property
    def num_cell1ds(self) -> int:
        """Number of edges."""
        return len(self.cell1ds_id)

    @property
    def num_cell2ds(self) -> int:
        """Number of polygons."""
        return len(self.cell2ds_id)


def _read_records(path: str | os.PathLike, kind: str) -> list[list[str]]:
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError as exc:
        raise MeshImportError(f"file not found: {path}") from exc
    records = [line.replace(";", " ").split() for line in lines[1:] if line.strip()]
    if not records:
        raise MeshImportError(f"There is no cell {kind}")
    return records


def _uint(token: str) -> int:
    value = int(token)
    if value < 0:
        raise ValueError(f"negative value {value}")
    return value


def _add_marker(markers: dict[int, list[int]], marker: int, ident: int) -> None:
    if marker != 0:
        markers.setdefault(marker, []).append(ident)


def _check_slot(ident: int, count: int, path: str | os.PathLike) -> None:
    if ident >= count:
        raise MeshImportError(f"id {ident} out of range in {path}")


def import_cell0ds(mesh: PolygonalMesh, path: str | os.PathLike) -> None:
    """Read points as lines of ``id;marker;x;y``, storing coordinates by id."""
    records = _read_records(path, "0D")
    coordinates = [(0.0, 0.0, 0.0)] * len(records)
    ids: list[int] = []
    markers: dict[int, list[int]] = {}
    for tokens in records:
        try:
            ident, marker = _uint(tokens[0]), _uint(tokens[1])
            x, y = float(tokens[2]), float(tokens[3])
        except (IndexError, ValueError) as exc:
            raise MeshImportError(f"malformed line in {path}: {' '.join(tokens)}") from exc
        _check_slot(ident, len(records), path)
        coordinates[ident] = (x, y, 0.0)
        ids.append(ident)
        _add_marker(markers, marker, ident)
    mesh.cell0ds_id = ids
    mesh.cell0ds_coordinates = coordinates
    mesh.marker_cell0ds = markers


def import_cell1ds(mesh: PolygonalMesh, path: str | os.PathLike) -> None:
    """Read edges as lines of ``id;marker;origin;end``, storing extremes by id."""
    records = _read_records(path, "1D")
    extrems = [(0, 0)] * len(records)
    ids: list[int] = []
    markers: dict[int, list[int]] = {}
    for tokens in records:
        try:
            ident, marker = _uint(tokens[0]), _uint(tokens[1])
            origin, end = int(tokens[2]), int(tokens[3])
        except (IndexError, ValueError) as exc:
            raise MeshImportError(f"malformed line in {path}: {' '.join(tokens)}") from exc
        _check_slot(ident, len(records), path)
        extrems[ident] = (origin, end)
        ids.append(ident)
        _add_marker(markers, marker, ident)
    mesh.cell1ds_id = ids
    mesh.cell1ds_extrems = extrems
    mesh.marker_cell1ds = markers


def import_cell2ds(mesh: PolygonalMesh, path: str | os.PathLike) -> None:
    """Read polygons as ``id;marker;n;vertices...;m;edges...`` in file order."""
    records = _read_records(path, "2D")
    ids: list[int] = []
    all_vertices: list[list[int]] = []
    all_edges: list[list[int]] = []
    markers: dict[int, list[int]] = {}
    for tokens in records:
        values = iter(tokens)
        try:
            ident = _uint(next(values))
            marker = _uint(next(values))
            vertices = [_uint(next(values)) for _ in range(_uint(next(values)))]
            edges = [_uint(next(values)) for _ in range(_uint(next(values)))]
        except (StopIteration, ValueError) as exc:
            raise MeshImportError(f"malformed line in {path}: {' '.join(tokens)}") from exc
        _add_marker(markers, marker, ident)
        ids.append(ident)
        all_vertices.append(vertices)
        all_edges.append(edges)
    mesh.cell2ds_id = ids
    mesh.cell2ds_vertices = all_vertices
    mesh.cell2ds_edges = all_edges
    mesh.marker_cell2ds = markers


def import_mesh(directory: str | os.PathLike = ".") -> PolygonalMesh:
    """Read ``Cell0Ds.csv``, ``Cell1Ds.csv`` and ``Cell2Ds.csv`` from a directory."""
    base = Path(directory)
    mesh = PolygonalMesh()
    import_cell0ds(mesh, base / "Cell0Ds.csv")
    import_cell1ds(mesh, base / "Cell1Ds.csv")
    import_cell2ds(mesh, base / "Cell2Ds.csv")
    return mesh
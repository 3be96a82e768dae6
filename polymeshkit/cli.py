"""Command that reads a mesh, checks it and exports it to UCD files."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from polymeshkit.geometry import marker_values, null_area_polygons, zero_length_edges
from polymeshkit.mesh import MeshImportError, PolygonalMesh, import_mesh
from polymeshkit.ucd import UCDProperty, UCDUtilities


def _print_markers(title: str, markers: dict[int, list[int]]) -> None:
    for marker in sorted(markers):
        print(f"{title} {marker}:" + "".join(f"{ident} " for ident in markers[marker]))


def _report(mesh: PolygonalMesh) -> None:
    print("Test Marker")
    print()
    _print_markers("Punti con marker", mesh.marker_cell0ds)
    print()
    _print_markers("Lati con marker", mesh.marker_cell1ds)
    print()
    _print_markers("Poligoni con marker", mesh.marker_cell2ds)

    bad_edges = zero_length_edges(mesh)
    for edge in bad_edges:
        print(f"Il lato {edge} ha lunghezza nulla")
    if not bad_edges:
        print("Tutti i lati sono corretti")

    bad_polygons = null_area_polygons(mesh)
    for polygon in bad_polygons:
        print(f"Il poligono {polygon} ha area nulla")
    if not bad_polygons:
        print("Tutti i poligoni sono corretti")


def _export(mesh: PolygonalMesh, output: Path) -> None:
    utilities = UCDUtilities()
    point_markers = UCDProperty(
        "Marker", "-", marker_values(mesh.marker_cell0ds, mesh.num_cell0ds)
    )
    utilities.export_points(
        output / "Cell0Ds.inp", mesh.cell0ds_coordinates, [point_markers]
    )
    edge_markers = UCDProperty(
        "Marker", "-", marker_values(mesh.marker_cell1ds, mesh.num_cell1ds)
    )
    utilities.export_segments(
        output / "Cell1Ds.inp",
        mesh.cell0ds_coordinates,
        mesh.cell1ds_extrems,
        (),
        [edge_markers],
    )


def main(argv: list[str] | None = None) -> int:
    """Import the mesh, print marker and geometry checks, export UCD files."""
    parser = argparse.ArgumentParser(
        prog="polymeshkit",
        description="Check a polygonal mesh and export it to UCD files.",
    )
    parser.add_argument(
        "directory", nargs="?", default=".", help="directory holding Cell0Ds/1Ds/2Ds.csv"
    )
    parser.add_argument(
        "-o", "--output", default=".", help="directory for Cell0Ds.inp and Cell1Ds.inp"
    )
    args = parser.parse_args(argv)

    try:
        mesh = import_mesh(args.directory)
    except MeshImportError as exc:
        print("file not found", file=sys.stderr)
        print(exc, file=sys.stderr)
        return 1

    _report(mesh)
    _export(mesh, Path(args.output))
    return 0


if __name__ == "__main__":
    sys.exit(main())
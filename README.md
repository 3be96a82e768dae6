# polymeshkit

A small toolkit for two-dimensional polygonal meshes. It reads a mesh from
three semicolon-separated files, checks it for zero-length edges and
zero-area polygons, and writes the points and edges as ASCII UCD (`.inp`)
files, which ParaView can open.

## Input files

A mesh directory holds three files. Each starts with one header line, which
is skipped; blank lines are ignored.

- `Cell0Ds.csv`: `Id;Marker;X;Y`
- `Cell1Ds.csv`: `Id;Marker;Origin;End`
- `Cell2Ds.csv`: `Id;Marker;NumVertices;V1;...;NumEdges;E1;...`

Point and edge ids must lie in `0 .. count-1`: coordinates and extremes are
stored at the position given by the id. Points get `z = 0`. Polygons are kept
in file order.

A marker of `0` means the cell has no marker. Cells with any other marker
are grouped by that marker.

## Command line

```
polymeshkit [DIRECTORY] [-o OUTPUT]
```

`DIRECTORY` holds the three CSV files and defaults to the current
directory; `OUTPUT` is where the `.inp` files go, also defaulting to the
current directory. The command:

1. prints the points, edges and polygons grouped by marker, in increasing
   marker order;
2. reports every edge shorter than machine epsilon and every polygon whose
   area is below `sqrt(3) * eps**2 / 4`, or says that all are correct;
3. writes `Cell0Ds.inp` (one point cell per point) and `Cell1Ds.inp` (one
   line cell per edge), each with the markers as a `Marker` cell property.

If a file is missing, malformed or has no cells, the command prints
`file not found` and the reason on standard error and exits with status 1.

## Library use

```python
from polymeshkit.mesh import import_mesh
from polymeshkit.geometry import zero_length_edges, null_area_polygons, polygon_area
from polymeshkit.ucd import UCDUtilities, UCDProperty

mesh = import_mesh("path/to/mesh")
print(mesh.num_cell0ds, mesh.num_cell1ds, mesh.num_cell2ds)
print(zero_length_edges(mesh), null_area_polygons(mesh))
print(polygon_area(mesh, 0))

UCDUtilities().export_points("points.inp", mesh.cell0ds_coordinates)
```

- `polymeshkit.mesh`: `PolygonalMesh`, `import_mesh(directory)` and the
  single-file readers `import_cell0ds`, `import_cell1ds`, `import_cell2ds`.
  All raise `MeshImportError` when a file cannot be read, is malformed or
  holds no cells.
- `polymeshkit.geometry`: `edge_length`, `zero_length_edges`,
  `polygon_area` (vertices are ordered by angle around their centroid before
  the shoelace formula is applied), `null_area_polygons`, and
  `marker_values(markers, count)`, which spreads a marker map into one value
  per item.
- `polymeshkit.ucd`: `UCDUtilities` with `export_points`, `export_segments`,
  `export_polygons` and `export_polyhedra`; `UCDProperty` for per-item data
  (`num_components` values per item); `UCDCell` and `CellType`. Points must
  have three coordinates. Polygons must be triangles or quadrilaterals and
  polyhedra must be tetrahedra; any other cell raises `ValueError`. A
  `materials` sequence is used only when it has one entry per cell.

## What it does not do

The command does not export polygons; `export_polygons` is available from
the library but only for triangles and quadrilaterals. The package writes
UCD files but does not read them back.
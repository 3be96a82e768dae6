import pytest

from polymeshkit.mesh import (
    MeshImportError,
    PolygonalMesh,
    import_cell0ds,
    import_cell1ds,
    import_cell2ds,
    import_mesh,
)

CELL0DS = """Id;Marker;X;Y
0;1;0.0;0.0
1;2;1.0;0.0
2;0;1.0;1.0
3;1;0.0;1.0
"""

CELL1DS = """Id;Marker;Origin;End
0;5;0;1
1;0;1;2
2;5;2;3
3;0;3;0
4;0;0;2
"""

CELL2DS = """Id;Marker;NumVertices;Vertices;NumEdges;Edges
0;0;3;0;1;2;3;0;1;4
1;3;3;0;2;3;3;4;2;3
"""


@pytest.fixture
def mesh_dir(tmp_path):
    (tmp_path / "Cell0Ds.csv").write_text(CELL0DS, encoding="utf-8")
    (tmp_path / "Cell1Ds.csv").write_text(CELL1DS, encoding="utf-8")
    (tmp_path / "Cell2Ds.csv").write_text(CELL2DS, encoding="utf-8")
    return tmp_path


def test_import_cell0ds(mesh_dir):
    mesh = PolygonalMesh()
    import_cell0ds(mesh, mesh_dir / "Cell0Ds.csv")
    assert mesh.num_cell0ds == 4
    assert mesh.cell0ds_id == [0, 1, 2, 3]
    assert mesh.cell0ds_coordinates == [
        (0.0, 0.0, 0.0),
        (1.0, 0.0, 0.0),
        (1.0, 1.0, 0.0),
        (0.0, 1.0, 0.0),
    ]
    assert mesh.marker_cell0ds == {1: [0, 3], 2: [1]}


def test_coordinates_are_placed_by_id(tmp_path):
    path = tmp_path / "Cell0Ds.csv"
    path.write_text("Id;Marker;X;Y\n1;0;2.5;3.5\n0;0;-1.0;4.0\n", encoding="utf-8")
    mesh = PolygonalMesh()
    import_cell0ds(mesh, path)
    assert mesh.cell0ds_id == [1, 0]
    assert mesh.cell0ds_coordinates == [(-1.0, 4.0, 0.0), (2.5, 3.5, 0.0)]
    assert mesh.marker_cell0ds == {}


def test_import_cell1ds(mesh_dir):
    mesh = PolygonalMesh()
    import_cell1ds(mesh, mesh_dir / "Cell1Ds.csv")
    assert mesh.num_cell1ds == 5
    assert mesh.cell1ds_extrems == [(0, 1), (1, 2), (2, 3), (3, 0), (0, 2)]
    assert mesh.marker_cell1ds == {5: [0, 2]}


def test_import_cell2ds(mesh_dir):
    mesh = PolygonalMesh()
    import_cell2ds(mesh, mesh_dir / "Cell2Ds.csv")
    assert mesh.num_cell2ds == 2
    assert mesh.cell2ds_id == [0, 1]
    assert mesh.cell2ds_vertices == [[0, 1, 2], [0, 2, 3]]
    assert mesh.cell2ds_edges == [[0, 1, 4], [4, 2, 3]]
    assert mesh.marker_cell2ds == {3: [1]}


def test_import_mesh(mesh_dir):
    mesh = import_mesh(mesh_dir)
    assert (mesh.num_cell0ds, mesh.num_cell1ds, mesh.num_cell2ds) == (4, 5, 2)
    for origin, end in mesh.cell1ds_extrems:
        assert 0 <= origin < mesh.num_cell0ds
        assert 0 <= end < mesh.num_cell0ds
    for vertices, edges in zip(mesh.cell2ds_vertices, mesh.cell2ds_edges):
        assert len(vertices) == len(edges)


def test_import_mesh_missing_file(tmp_path):
    (tmp_path / "Cell0Ds.csv").write_text(CELL0DS, encoding="utf-8")
    with pytest.raises(MeshImportError):
        import_mesh(tmp_path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(MeshImportError):
        import_cell0ds(PolygonalMesh(), tmp_path / "nope.csv")


@pytest.mark.parametrize(
    "importer, kind",
    [(import_cell0ds, "0D"), (import_cell1ds, "1D"), (import_cell2ds, "2D")],
)
def test_header_only_file_raises(tmp_path, importer, kind):
    path = tmp_path / "empty.csv"
    path.write_text("Id;Marker\n", encoding="utf-8")
    with pytest.raises(MeshImportError, match=kind):
        importer(PolygonalMesh(), path)


def test_malformed_point_line_raises(tmp_path):
    path = tmp_path / "Cell0Ds.csv"
    path.write_text("Id;Marker;X;Y\n0;0;abc;1.0\n", encoding="utf-8")
    with pytest.raises(MeshImportError):
        import_cell0ds(PolygonalMesh(), path)


def test_out_of_range_id_raises(tmp_path):
    path = tmp_path / "Cell1Ds.csv"
    path.write_text("Id;Marker;Origin;End\n3;0;0;1\n", encoding="utf-8")
    with pytest.raises(MeshImportError):
        import_cell1ds(PolygonalMesh(), path)


def test_truncated_polygon_line_raises(tmp_path):
    path = tmp_path / "Cell2Ds.csv"
    path.write_text("Id;Marker;N;V\n0;0;3;0;1\n", encoding="utf-8")
    with pytest.raises(MeshImportError):
        import_cell2ds(PolygonalMesh(), path)


def test_empty_mesh_counts():
    mesh = PolygonalMesh()
    assert (mesh.num_cell0ds, mesh.num_cell1ds, mesh.num_cell2ds) == (0, 0, 0)
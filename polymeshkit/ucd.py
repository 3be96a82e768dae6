"""Export of points, segments, polygons and polyhedra to the AVS UCD ASCII format."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Sequence

Point = Sequence[float]


class CellType(Enum):
    """Kinds of cell known to the UCD format."""

    UNKNOWN = -1
    POINT = 0
    LINE = 1
    TRIANGLE = 2
    QUADRILATERAL = 3
    HEXAHEDRON = 4
    PRISM = 5
    TETRAHEDRON = 6
    PYRAMID = 7


_LABELS = {
    CellType.LINE: "line",
    CellType.TRIANGLE: "tri",
    CellType.QUADRILATERAL: "quad",
    CellType.HEXAHEDRON: "hex",
    CellType.PRISM: "prism",
    CellType.TETRAHEDRON: "tet",
    CellType.PYRAMID: "pyr",
    CellType.POINT: "pt",
}


@dataclass(frozen=True)
class UCDProperty:
    """A named quantity attached to every point or every cell.

    ``data`` holds ``num_components`` consecutive values per item.
    """

    label: str
    unit_label: str
    data: Sequence[float]
    num_components: int = 1


@dataclass(frozen=True)
class UCDCell:
    """One cell of a UCD file: its type, zero-based point ids and material."""

    type: CellType
    point_ids: tuple[int, ...]
    material_id: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "point_ids", tuple(int(i) for i in self.point_ids))

    def label(self) -> str:
        """Return the keyword the UCD format uses for this cell's type."""
        try:
            return _LABELS[self.type]
        except KeyError:
            raise ValueError("Type not supported") from None


def _material(materials: Sequence[int] | None, count: int, index: int) -> int:
    if materials is not None and len(materials) == count:
        return int(materials[index])
    return 0


def _property_lines(properties: Sequence[UCDProperty], count: int) -> Iterator[str]:
    if not properties:
        return
    yield " ".join([str(len(properties)), *(str(p.num_components) for p in properties)])
    for prop in properties:
        yield f"{prop.label}, {prop.unit_label}"
    for item in range(count):
        values = (
            prop.data[prop.num_components * item + component]
            for prop in properties
            for component in range(prop.num_components)
        )
        yield " ".join([str(item + 1), *(f"{value:.16e}" for value in values)])


class UCDUtilities:
    """Writes meshes as ASCII UCD files readable by visualisation tools."""

    def export_points(
        self,
        file_path: str | os.PathLike,
        points: Sequence[Point],
        points_properties: Sequence[UCDProperty] = (),
        materials: Sequence[int] | None = None,
    ) -> None:
        """Write every point as a point cell; the properties belong to those cells."""
        self._write_ascii(
            points, (), self._point_cells(points, materials), points_properties, file_path
        )

    def export_segments(
        self,
        file_path: str | os.PathLike,
        points: Sequence[Point],
        segments: Sequence[Sequence[int]],
        points_properties: Sequence[UCDProperty] = (),
        segments_properties: Sequence[UCDProperty] = (),
        materials: Sequence[int] | None = None,
    ) -> None:
        """Write segments given as (origin, end) pairs of point indices."""
        self._write_ascii(
            points,
            points_properties,
            self._line_cells(segments, materials),
            segments_properties,
            file_path,
        )

    def export_polygons(
        self,
        file_path: str | os.PathLike,
        points: Sequence[Point],
        polygons_vertices: Sequence[Sequence[int]],
        points_properties: Sequence[UCDProperty] = (),
        polygons_properties: Sequence[UCDProperty] = (),
        materials: Sequence[int] | None = None,
    ) -> None:
        """Write triangles and quadrilaterals given by their vertex indices."""
        self._write_ascii(
            points,
            points_properties,
            self._polygon_cells(polygons_vertices, materials),
            polygons_properties,
            file_path,
        )

    def export_polyhedra(
        self,
        file_path: str | os.PathLike,
        points: Sequence[Point],
        polyhedra_vertices: Sequence[Sequence[int]],
        points_properties: Sequence[UCDProperty] = (),
        polyhedra_properties: Sequence[UCDProperty] = (),
        materials: Sequence[int] | None = None,
    ) -> None:
        """Write tetrahedra given by their vertex indices."""
        self._write_ascii(
            points,
            points_properties,
            self._polyhedra_cells(polyhedra_vertices, materials),
            polyhedra_properties,
            file_path,
        )

    @staticmethod
    def _point_cells(points: Sequence[Point], materials: Sequence[int] | None) -> list[UCDCell]:
        count = len(points)
        return [
            UCDCell(CellType.POINT, (p,), _material(materials, count, p)) for p in range(count)
        ]

    @staticmethod
    def _line_cells(
        lines: Sequence[Sequence[int]], materials: Sequence[int] | None
    ) -> list[UCDCell]:
        count = len(lines)
        return [
            UCDCell(CellType.LINE, (line[0], line[1]), _material(materials, count, index))
            for index, line in enumerate(lines)
        ]

    @staticmethod
    def _polygon_cells(
        polygons: Sequence[Sequence[int]], materials: Sequence[int] | None
    ) -> list[UCDCell]:
        count = len(polygons)
        cells = []
        for index, vertices in enumerate(polygons):
            if len(vertices) == 3:
                kind = CellType.TRIANGLE
            elif len(vertices) == 4:
                kind = CellType.QUADRILATERAL
            else:
                raise ValueError("Polygon type not supported")
            cells.append(UCDCell(kind, tuple(vertices), _material(materials, count, index)))
        return cells

    @staticmethod
    def _polyhedra_cells(
        polyhedra: Sequence[Sequence[int]], materials: Sequence[int] | None
    ) -> list[UCDCell]:
        count = len(polyhedra)
        cells = []
        for index, vertices in enumerate(polyhedra):
            if len(vertices) != 4:
                raise ValueError("Polyhedron type not supported")
            cells.append(
                UCDCell(CellType.TETRAHEDRON, tuple(vertices), _material(materials, count, index))
            )
        return cells

    @staticmethod
    def _write_ascii(
        points: Sequence[Point],
        point_properties: Sequence[UCDProperty],
        cells: Iterable[UCDCell],
        cell_properties: Sequence[UCDProperty],
        file_path: str | os.PathLike,
    ) -> None:
        cells = list(cells)
        lines = [
            f"{len(points)} {len(cells)} {len(point_properties)} {len(cell_properties)} 0"
        ]
        for number, point in enumerate(points, 1):
            x, y, z = point
            lines.append(f"{number} {x:.16e} {y:.16e} {z:.16e}")
        for number, cell in enumerate(cells, 1):
            lines.append(
                " ".join(
                    [
                        str(number),
                        str(cell.material_id),
                        cell.label(),
                        *(str(pid + 1) for pid in cell.point_ids),
                    ]
                )
            )
        lines.extend(_property_lines(point_properties, len(points)))
        lines.extend(_property_lines(cell_properties, len(cells)))

        with open(file_path, "w", encoding="utf-8") as handle:
            handle.write("\n".join(lines) + "\n")
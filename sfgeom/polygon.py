"""PolygonRing, Polygon and MultiPolygon."""
from dataclasses import dataclass
from typing import Iterable, Sequence, Union

from .constants import MIN_RING_COORDS
from .coords import float_coordinates, fmt_coords, fmt_groups
from .errors import IndexOutOfBounds, build_members, check_count, check_index
from .line_string import PathCurve
from .types import Coordinate, CoordinateInput

RingInput = Sequence[CoordinateInput]
PolygonInput = Iterable[Union["PolygonRing", RingInput]]


@dataclass(frozen=True, order=True, init=False)
class PolygonRing(PathCurve):
    """Closed sequence of at least three coordinates.

    If the first and last coordinate differ, the first is appended to close
    the ring, so the stored length is n or n+1.
    """
    coords: tuple[Coordinate, ...]

    def __init__(self, coordinates: RingInput):
        coords = float_coordinates(check_count(coordinates, MIN_RING_COORDS))
        if coords[0] != coords[-1]:
            coords = coords + (coords[0],)
        object.__setattr__(self, "coords", coords)

    def is_closed(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"LINEARRING {fmt_coords(self.coords)}"


@dataclass(frozen=True, order=True, init=False)
class Polygon:
    """Ordered rings: the first is the exterior, the rest are holes.

    Ring roles, orientation and non-intersection are the caller's
    responsibility. Construction stops at the first ring that fails.
    """
    rings: tuple[PolygonRing, ...]

    def __init__(self, rings: PolygonInput = ()):
        object.__setattr__(self, "rings", build_members(rings, PolygonRing, PolygonRing))

    def num_rings(self) -> int:
        return len(self.rings)

    def exterior_ring(self) -> PolygonRing:
        if not self.rings:
            raise IndexOutOfBounds(0, 0)
        return self.rings[0]

    def num_interior_rings(self) -> int:
        return max(len(self.rings) - 1, 0)

    def interior_ring_n(self, index: int) -> PolygonRing:
        return self.rings[1 + check_index(index, self.num_interior_rings())]

    def _body(self) -> str:
        if not self.rings:
            return "EMPTY"
        return "(" + ", ".join(fmt_coords(r.coords) for r in self.rings) + ")"

    def __str__(self) -> str:
        return f"POLYGON {self._body()}"


@dataclass(frozen=True, order=True, init=False)
class MultiPolygon:
    """Ordered collection of polygons, given as Polygons or raw ring lists."""
    polygons: tuple[Polygon, ...]

    def __init__(self, polygons: Iterable[Union[Polygon, PolygonInput]] = ()):
        object.__setattr__(self, "polygons", build_members(polygons, Polygon, Polygon))

    def num_geometries(self) -> int:
        return len(self.polygons)

    def geometry_n(self, index: int) -> Polygon:
        return self.polygons[check_index(index, len(self.polygons))]

    def __str__(self) -> str:
        return fmt_groups((p._body() for p in self.polygons), "MULTIPOLYGON")

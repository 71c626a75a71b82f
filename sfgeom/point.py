"""Point and MultiPoint."""
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from .coords import float_coordinate, fmt_coord, fmt_groups, xy_array
from .errors import (
    CoordinateDimensionError, EmptyGeometry, build_members, check_index,
)
from .types import Coordinate, CoordinateInput, Number


@dataclass(frozen=True, order=True, init=False)
class Point:
    """A single coordinate (x, y[, z[, m]]).

    Integer and float inputs coerce to the same stored floats, so
    ``Point(0, 1) == Point(0.0, 1.0)``.
    """
    coords: Coordinate

    def __init__(self, x: Number, y: Number, z: Optional[Number] = None, m: Optional[Number] = None):
        if m is not None and z is None:
            raise CoordinateDimensionError("m requires z")
        raw = [x, y]
        if z is not None:
            raw.append(z)
        if m is not None:
            raw.append(m)
        object.__setattr__(self, "coords", float_coordinate(raw))

    @classmethod
    def from_coordinate(cls, coordinate: CoordinateInput) -> "Point":
        """Build from a raw coordinate sequence, e.g. [0, 1] or (1, 2, 3)."""
        return cls(*float_coordinate(coordinate))

    @property
    def x(self) -> float:
        return self.coords[0]

    @property
    def y(self) -> float:
        return self.coords[1]

    @property
    def z(self) -> Optional[float]:
        return self.coords[2] if len(self.coords) > 2 else None

    @property
    def m(self) -> Optional[float]:
        return self.coords[3] if len(self.coords) > 3 else None

    @property
    def dimension(self) -> int:
        """Number of stored components."""
        return len(self.coords)

    def centroid(self) -> "Point":
        return self

    def is_simple(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"POINT ({fmt_coord(self.coords)})"


@dataclass(frozen=True, order=True, init=False)
class MultiPoint:
    """Ordered collection of points. Members may be given as Points or raw coordinates."""
    points: tuple[Point, ...]

    def __init__(self, points: Iterable[Union[Point, CoordinateInput]] = ()):
        object.__setattr__(self, "points", build_members(points, Point.from_coordinate, Point))

    def num_geometries(self) -> int:
        return len(self.points)

    def geometry_n(self, index: int) -> Point:
        return self.points[check_index(index, len(self.points))]

    def centroid(self) -> Point:
        """Mean of member x and y independently (not area-weighted)."""
        if not self.points:
            raise EmptyGeometry("centroid of an empty MultiPoint is undefined")
        cx, cy = xy_array([p.coords for p in self.points]).mean(axis=0)
        return Point(float(cx), float(cy))

    def is_simple(self) -> bool:
        """True if no two members share identical coordinates."""
        seen = set()
        for p in self.points:
            if p.coords in seen:
                return False
            seen.add(p.coords)
        return True

    def __str__(self) -> str:
        return fmt_groups((f"({fmt_coord(p.coords)})" for p in self.points), "MULTIPOINT")

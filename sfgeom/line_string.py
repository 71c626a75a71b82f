"""LineSegment, LineString and MultiLineString."""
import math
from dataclasses import dataclass
from typing import Iterable, Sequence, Union

from .constants import MIN_LINE_STRING_COORDS, SEGMENT_COORDS
from .coords import float_coordinates, fmt_coords, fmt_groups
from .errors import (
    CoordinateDimensionError, EmptyGeometry, build_members, check_count, check_index,
)
from .point import Point
from .segments import (
    is_simple_path, path_centroid, path_length, path_lengths, path_segments,
    segments_intersect, shared_endpoint, touch_only_at,
)
from .types import Coordinate, CoordinateInput

# ============================================================
# Shared Curve Methods
# ============================================================
class PathCurve:
    """Curve and vertex-access methods over a stored ``coords`` sequence.

    Mixed into the concrete curve types; it carries no state of its own.
    """
    coords: tuple[Coordinate, ...]

    def num_points(self) -> int:
        return len(self.coords)

    def point_n(self, index: int) -> Point:
        return Point.from_coordinate(self.coords[check_index(index, len(self.coords))])

    def start_point(self) -> Point:
        return Point.from_coordinate(self.coords[0])

    def end_point(self) -> Point:
        return Point.from_coordinate(self.coords[-1])

    def length(self) -> float:
        return path_length(self.coords)

    def is_closed(self) -> bool:
        return self.coords[0] == self.coords[-1]

    def is_simple(self) -> bool:
        return is_simple_path(self.coords)

    def is_ring(self) -> bool:
        return self.is_closed() and self.is_simple()

    def centroid(self) -> Point:
        return Point(*path_centroid(self.coords))

# ============================================================
# LineSegment
# ============================================================
@dataclass(frozen=True, order=True, init=False)
class LineSegment(PathCurve):
    """Two-point line, the minimal curve. Degenerate (equal) endpoints are allowed."""
    coords: tuple[Coordinate, Coordinate]

    def __init__(self, coordinates: Sequence[CoordinateInput]):
        coordinates = check_count(coordinates, SEGMENT_COORDS)
        if len(coordinates) > SEGMENT_COORDS:
            raise CoordinateDimensionError(
                f"line segment takes exactly {SEGMENT_COORDS} coordinates, found {len(coordinates)}")
        object.__setattr__(self, "coords", float_coordinates(coordinates))

    def x_length(self) -> float:
        """Signed x delta, end minus start."""
        return self.coords[1][0] - self.coords[0][0]

    def y_length(self) -> float:
        """Signed y delta, end minus start."""
        return self.coords[1][1] - self.coords[0][1]

    def length(self) -> float:
        return math.hypot(self.x_length(), self.y_length())

    def centroid(self) -> Point:
        """Midpoint: start offset by half of each delta."""
        x0, y0 = self.coords[0][:2]
        return Point(x0 + self.x_length()/2, y0 + self.y_length()/2)

    def is_simple(self) -> bool:
        # A zero-length segment only meets itself at its closure point.
        return True

    def __str__(self) -> str:
        return f"LINESTRING {fmt_coords(self.coords)}"

# ============================================================
# LineString
# ============================================================
@dataclass(frozen=True, order=True, init=False)
class LineString(PathCurve):
    """Polyline of two or more coordinates, stored as given (no auto-closure)."""
    coords: tuple[Coordinate, ...]

    def __init__(self, coordinates: Sequence[CoordinateInput]):
        coordinates = check_count(coordinates, MIN_LINE_STRING_COORDS)
        object.__setattr__(self, "coords", float_coordinates(coordinates))

    def __str__(self) -> str:
        return f"LINESTRING {fmt_coords(self.coords)}"

# ============================================================
# MultiLineString
# ============================================================
@dataclass(frozen=True, order=True, init=False)
class MultiLineString:
    """Ordered collection of line strings.

    Members may be LineStrings or raw coordinate sequences. Building from raw
    input stops at the first member that fails; the error's path starts with
    that member's index.
    """
    line_strings: tuple[LineString, ...]

    def __init__(self, line_strings: Iterable[Union[LineString, Sequence[CoordinateInput]]] = ()):
        object.__setattr__(self, "line_strings", build_members(line_strings, LineString, LineString))

    def num_geometries(self) -> int:
        return len(self.line_strings)

    def geometry_n(self, index: int) -> LineString:
        return self.line_strings[check_index(index, len(self.line_strings))]

    def length(self) -> float:
        return sum((ls.length() for ls in self.line_strings), 0.0)

    def is_closed(self) -> bool:
        """True if non-empty and every member is closed."""
        return bool(self.line_strings) and all(ls.is_closed() for ls in self.line_strings)

    def centroid(self) -> Point:
        """Length-weighted centroid over all members."""
        if not self.line_strings:
            raise EmptyGeometry("centroid of an empty MultiLineString is undefined")
        total = self.length()
        if total == 0:
            return self.line_strings[0].start_point().centroid()
        sx = sy = 0.0
        for ls in self.line_strings:
            w = float(path_lengths(ls.coords).sum())
            if w:
                cx, cy = path_centroid(ls.coords)
                sx += cx * w; sy += cy * w
        return Point(sx / total, sy / total)

    def is_simple(self) -> bool:
        """True if every member is simple and members touch only at shared boundary endpoints.

        The boundary of a member is its two endpoints unless it is closed,
        in which case it has none.
        """
        if not all(ls.is_simple() for ls in self.line_strings):
            return False
        boundaries = [set() if ls.is_closed() else {ls.coords[0][:2], ls.coords[-1][:2]}
                      for ls in self.line_strings]
        # A zero-length member is tested as its single point.
        segs = [path_segments(ls.coords) or [(ls.coords[0][:2], ls.coords[0][:2])]
                for ls in self.line_strings]
        for a in range(len(segs)):
            for b in range(a + 1, len(segs)):
                for s in segs[a]:
                    for t in segs[b]:
                        if not segments_intersect(s, t):
                            continue
                        p = shared_endpoint(s, t)
                        if (p is None or p not in boundaries[a] or p not in boundaries[b]
                                or not touch_only_at(s, t, p)):
                            return False
        return True

    def __str__(self) -> str:
        return fmt_groups((fmt_coords(ls.coords) for ls in self.line_strings), "MULTILINESTRING")

"""Simple Features geometry value types, predicates and WKT rendering."""

from .errors import (
    GeometryError, TooFewCoordinates, NonFiniteCoordinate, CoordinateDimensionError,
    IndexOutOfBounds, EmptyGeometry,
)
from .coords import float_coordinate, float_coordinates, fmt_num
from .point import Point, MultiPoint
from .line_string import LineSegment, LineString, MultiLineString
from .polygon import PolygonRing, Polygon, MultiPolygon
from .traits import Geometry, Curve, LineStringLike, GeometryCollection, total_length

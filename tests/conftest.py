"""Shared test fixtures for sfgeom tests."""
import pytest
from sfgeom.point import Point, MultiPoint
from sfgeom.line_string import LineSegment, LineString, MultiLineString
from sfgeom.polygon import PolygonRing, Polygon, MultiPolygon


@pytest.fixture(scope="session")
def segment_345():
    """3-4-5 segment from the origin."""
    return LineSegment([[0, 0], [4, 3]])


@pytest.fixture(scope="session")
def zigzag():
    """Open, simple line string of total length 3."""
    return LineString([[0, 0], [1, 0], [1, 1], [2, 1]])


@pytest.fixture(scope="session")
def bowtie():
    """Closed line string that crosses itself at (1, 1)."""
    return LineString([[0, 0], [2, 2], [2, 0], [0, 2], [0, 0]])


@pytest.fixture(scope="session")
def unit_square_ring():
    """Unit square given open; closure is appended."""
    return PolygonRing([[0, 0], [1, 0], [1, 1], [0, 1]])


@pytest.fixture(scope="session")
def square_with_hole():
    """10x10 square with a 2x2 hole."""
    return Polygon([
        [[0, 0], [10, 0], [10, 10], [0, 10]],
        [[4, 4], [6, 4], [6, 6], [4, 6]],
    ])


@pytest.fixture(scope="session")
def two_points():
    return MultiPoint([Point(0, 0), Point(1, 0)])


@pytest.fixture(scope="session")
def two_lines():
    return MultiLineString([[[0, 0], [1, 0]], [[2, 0], [2, 3]]])


@pytest.fixture(scope="session")
def two_triangles():
    return MultiPolygon([
        [[[0, 0], [0, 1], [1, 1]]],
        [[[5, 5], [5, 6], [6, 6]]],
    ])

"""Tests for sfgeom/polygon.py — PolygonRing, Polygon, MultiPolygon."""
import pytest
from sfgeom.point import Point
from sfgeom.polygon import PolygonRing, Polygon, MultiPolygon
from sfgeom.errors import IndexOutOfBounds, NonFiniteCoordinate, TooFewCoordinates


class TestPolygonRing:
    @pytest.mark.parametrize("coords", [[], [[0, 0]], [[0, 0], [1, 1]]])
    def test_too_few_coordinates(self, coords):
        with pytest.raises(TooFewCoordinates) as exc:
            PolygonRing(coords)
        assert exc.value.count == len(coords)
        assert exc.value.minimum == 3

    def test_closure_appended(self, unit_square_ring):
        assert unit_square_ring.num_points() == 5
        assert unit_square_ring.coords[0] == unit_square_ring.coords[-1]

    def test_closure_idempotent(self):
        open_ring = PolygonRing([[0, 0], [0, 1], [1, 1]])
        closed_ring = PolygonRing([[0., 0.], [0., 1.], [1., 1.], [0., 0.]])
        assert open_ring == closed_ring
        assert closed_ring.num_points() == 4

    def test_three_equal_points_still_valid(self):
        ring = PolygonRing([[1, 1], [2, 2], [1, 1]])
        assert ring.num_points() == 3

    def test_curve_capability(self, unit_square_ring):
        assert unit_square_ring.is_closed()
        assert unit_square_ring.is_ring()
        assert abs(unit_square_ring.length() - 4.0) < 1e-12
        assert unit_square_ring.start_point() == unit_square_ring.end_point() == Point(0, 0)

    def test_self_crossing_ring(self):
        ring = PolygonRing([[0, 0], [2, 2], [2, 0], [0, 2]])
        assert not ring.is_simple()
        assert not ring.is_ring()

    def test_centroid(self, unit_square_ring):
        assert unit_square_ring.centroid() == Point(0.5, 0.5)

    def test_wkt(self, unit_square_ring):
        assert str(unit_square_ring) == "LINEARRING (0 0, 1 0, 1 1, 0 1, 0 0)"


class TestPolygon:
    def test_wkt(self):
        assert str(Polygon([[[0, 0], [0, 1], [1, 1], [0, 0]]])) == "POLYGON ((0 0, 0 1, 1 1, 0 0))"

    def test_int_equals_float(self):
        assert Polygon([[[0., 0.], [0., 1.], [1., 1.], [0., 0.]]]) == Polygon([[[0, 0], [0, 1], [1, 1]]])

    def test_accepts_built_rings(self, unit_square_ring):
        assert Polygon([unit_square_ring]).exterior_ring() is unit_square_ring

    def test_bad_ring_reports_index(self):
        with pytest.raises(TooFewCoordinates) as exc:
            Polygon([[[0, 0], [0, 1], [1, 1]], [[0, 0], [1, 1]]])
        assert exc.value.count == 2
        assert exc.value.path == (1,)

    def test_bad_coordinate_reports_full_path(self):
        with pytest.raises(NonFiniteCoordinate) as exc:
            Polygon([[[0, 0], [0, 1], [1, 10**400]]])
        assert exc.value.path == (0, 2)

    def test_rings(self, square_with_hole):
        assert square_with_hole.num_rings() == 2
        assert square_with_hole.exterior_ring().num_points() == 5
        assert square_with_hole.num_interior_rings() == 1
        assert square_with_hole.interior_ring_n(0).start_point() == Point(4, 4)

    def test_interior_ring_out_of_range(self, square_with_hole):
        with pytest.raises(IndexOutOfBounds):
            square_with_hole.interior_ring_n(1)

    def test_empty(self):
        p = Polygon()
        assert p.num_rings() == 0
        assert p.num_interior_rings() == 0
        assert str(p) == "POLYGON EMPTY"
        with pytest.raises(IndexOutOfBounds):
            p.exterior_ring()

    def test_wkt_with_hole(self, square_with_hole):
        assert str(square_with_hole) == (
            "POLYGON ((0 0, 10 0, 10 10, 0 10, 0 0), (4 4, 6 4, 6 6, 4 6, 4 4))")


class TestMultiPolygon:
    def test_int_equals_float(self, two_triangles):
        assert MultiPolygon([
            [[[0., 0.], [0., 1.], [1., 1.], [0., 0.]]],
            [[[5., 5.], [5., 6.], [6., 6.]]],
        ]) == two_triangles

    def test_geometry_n(self, two_triangles):
        assert two_triangles.num_geometries() == 2
        assert two_triangles.geometry_n(1) == Polygon([[[5, 5], [5, 6], [6, 6]]])
        with pytest.raises(IndexOutOfBounds):
            two_triangles.geometry_n(5)

    def test_accepts_built_polygons(self, two_triangles):
        built = MultiPolygon([Polygon([[[0, 0], [0, 1], [1, 1]]]), Polygon([[[5, 5], [5, 6], [6, 6]]])])
        assert built == two_triangles

    def test_first_failure_aborts(self):
        with pytest.raises(TooFewCoordinates) as exc:
            MultiPolygon([
                [[[0, 0], [0, 1], [1, 1]]],
                [[[0, 0], [0, 1], [1, 1]], [[2, 2]]],
                [[]],
            ])
        assert exc.value.count == 1
        assert exc.value.path == (1, 1)
        assert "(at member 1/1)" in str(exc.value)

    def test_wkt(self, two_triangles):
        assert str(two_triangles) == (
            "MULTIPOLYGON (((0 0, 0 1, 1 1, 0 0)), ((5 5, 5 6, 6 6, 5 5)))")
        assert str(MultiPolygon()) == "MULTIPOLYGON EMPTY"
        assert str(MultiPolygon([Polygon()])) == "MULTIPOLYGON (EMPTY)"

"""Capability protocols shared by the geometry types.

Concrete types never inherit from these; each one simply provides the
methods of the capabilities it has, and ``isinstance`` checks work
structurally because the protocols are runtime-checkable.
"""
from typing import Iterable, Protocol, TypeVar, runtime_checkable

from .point import Point

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Geometry(Protocol):
    def centroid(self) -> Point: ...

    def is_simple(self) -> bool: ...


@runtime_checkable
class Curve(Protocol):
    def length(self) -> float: ...

    def start_point(self) -> Point: ...

    def end_point(self) -> Point: ...

    def is_closed(self) -> bool: ...

    def is_ring(self) -> bool: ...


@runtime_checkable
class LineStringLike(Protocol):
    """Indexed access to the vertices of a curve."""

    def num_points(self) -> int: ...

    def point_n(self, index: int) -> Point: ...


@runtime_checkable
class GeometryCollection(Protocol[T_co]):
    """Indexed access to the members of a multi-part geometry."""

    def num_geometries(self) -> int: ...

    def geometry_n(self, index: int) -> T_co: ...


def total_length(curves: Iterable[Curve]) -> float:
    """Sum of lengths over any mix of curves."""
    return sum((c.length() for c in curves), 0.0)


def vertices(line: LineStringLike) -> list[Point]:
    """All vertices of a curve, in order."""
    return [line.point_n(i) for i in range(line.num_points())]


def members(collection: GeometryCollection[T_co]) -> list[T_co]:
    """All members of a collection, in order."""
    return [collection.geometry_n(i) for i in range(collection.num_geometries())]

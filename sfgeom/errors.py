"""Error types raised by geometry construction and access."""
from .types import Path


class GeometryError(ValueError):
    """Raised for invalid geometry construction or access.

    *path* holds the member indices leading to the failing element when the
    error came from a nested constructor (e.g. ``(2, 0)`` for ring 0 of
    polygon 2). It is empty for errors raised directly.
    """
    path: Path = ()

    def __str__(self) -> str:
        msg = super().__str__()
        if self.path:
            return f"{msg} (at member {'/'.join(str(i) for i in self.path)})"
        return msg


class TooFewCoordinates(GeometryError):
    """Fewer coordinates than the geometry kind requires."""

    def __init__(self, count: int, minimum: int):
        super().__init__(f"too few coordinates, expected {minimum} or more, found {count}")
        self.count = count
        self.minimum = minimum


class NonFiniteCoordinate(GeometryError):
    """A coordinate component cannot be represented as a finite float."""

    def __init__(self, value):
        super().__init__(f"coordinate component is not a finite float: {value!r}")
        self.value = value


class CoordinateDimensionError(GeometryError):
    """Coordinate has the wrong number of components."""


class IndexOutOfBounds(GeometryError, IndexError):
    """Member or point index outside the stored sequence."""

    def __init__(self, index: int, size: int):
        super().__init__(f"index {index} out of bounds for {size} members")
        self.index = index
        self.size = size


class EmptyGeometry(GeometryError):
    """Derived value is undefined because the geometry has no members."""


def at_member(err: GeometryError, index: int) -> None:
    """Prefix *index* to the error's member path before it is re-raised."""
    err.path = (index,) + err.path


def check_index(index: int, size: int) -> int:
    """Return *index* if 0 <= index < size, else raise IndexOutOfBounds."""
    if not 0 <= index < size:
        raise IndexOutOfBounds(index, size)
    return index


def build_members(items, build, kind) -> tuple:
    """Build each item with *build* unless it is already a *kind*.

    Stops at the first failing item; its index is prefixed to the error path.
    """
    members = []
    for i, item in enumerate(items):
        try:
            members.append(item if isinstance(item, kind) else build(item))
        except GeometryError as err:
            at_member(err, i)
            raise
    return tuple(members)


def check_count(coordinates, minimum: int) -> list:
    """Materialise *coordinates*, raising TooFewCoordinates if fewer than *minimum*."""
    coordinates = list(coordinates)
    if len(coordinates) < minimum:
        raise TooFewCoordinates(len(coordinates), minimum)
    return coordinates

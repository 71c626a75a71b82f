"""Numeric coercion of raw coordinates and WKT number formatting."""
import math
from typing import Iterable, Sequence

import numpy as np

from .constants import MIN_DIMENSION, MAX_DIMENSION
from .errors import CoordinateDimensionError, GeometryError, NonFiniteCoordinate, at_member
from .types import Coordinate, CoordinateInput, Number

_NUMERIC_TYPES = (int, float, np.integer, np.floating)

# ============================================================
# Coercion
# ============================================================
def float_component(value: Number) -> float:
    """Cast one numeric component to a finite float.

    Raises TypeError for non-numeric input (bool included) and
    NonFiniteCoordinate on overflow, NaN or infinity.
    """
    if isinstance(value, bool) or not isinstance(value, _NUMERIC_TYPES):
        raise TypeError(f"coordinate component must be int or float, got {type(value).__name__}")
    try:
        f = float(value)
    except OverflowError as err:
        raise NonFiniteCoordinate(value) from err
    if not math.isfinite(f):
        raise NonFiniteCoordinate(value)
    return f


def float_coordinate(coordinate: CoordinateInput) -> Coordinate:
    """Convert one raw coordinate, e.g. [0, 1], into a tuple of floats."""
    n = len(coordinate)
    if not MIN_DIMENSION <= n <= MAX_DIMENSION:
        raise CoordinateDimensionError(
            f"coordinate must have {MIN_DIMENSION} to {MAX_DIMENSION} components, found {n}")
    return tuple(float_component(v) for v in coordinate)


def float_coordinates(coordinates: Iterable[CoordinateInput]) -> tuple[Coordinate, ...]:
    """Convert a sequence of raw coordinates into a tuple of float coordinates.

    All coordinates must share one dimension. On failure the index of the
    offending coordinate is recorded on the error's path.
    """
    out: list[Coordinate] = []
    for i, coordinate in enumerate(coordinates):
        try:
            c = float_coordinate(coordinate)
            if out and len(c) != len(out[0]):
                raise CoordinateDimensionError(
                    f"mixed coordinate dimensions: {len(out[0])} and {len(c)}")
        except GeometryError as err:
            at_member(err, i)
            raise
        out.append(c)
    return tuple(out)


def xy_array(coords: Sequence[Coordinate]) -> np.ndarray:
    """Nx2 float array of the x/y components; z and m are dropped."""
    return np.array([c[:2] for c in coords], dtype=np.float64).reshape(-1, 2)

# ============================================================
# WKT Formatting
# ============================================================
def fmt_num(v: float) -> str:
    """Shortest round-trippable positional decimal, e.g. 0, 1.5, 0.0000001."""
    return np.format_float_positional(v, trim="-")


def fmt_coord(c: Coordinate) -> str:
    """Space-separated components, e.g. '0 1.5'."""
    return " ".join(fmt_num(v) for v in c)


def fmt_coords(coords: Iterable[Coordinate]) -> str:
    """Parenthesised coordinate list, e.g. '(0 0, 1 1)'."""
    return "(" + ", ".join(fmt_coord(c) for c in coords) + ")"


def fmt_groups(groups: Iterable[str], tag: str) -> str:
    """Join pre-rendered groups under a WKT tag; no groups renders '<tag> EMPTY'."""
    groups = list(groups)
    if not groups:
        return f"{tag} EMPTY"
    return f"{tag} (" + ", ".join(groups) + ")"

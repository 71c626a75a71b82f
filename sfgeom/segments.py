"""Planar segment predicates and path metrics for curves.

Segments are pairs of (x, y) tuples. All tests are exact float
comparisons; no tolerance is applied.
"""
from typing import Sequence

import numpy as np

from .coords import xy_array
from .types import Coordinate

Seg = tuple[Coordinate, Coordinate]


def orient(a: Coordinate, b: Coordinate, c: Coordinate) -> int:
    """Sign of the cross product (b - a) x (c - a): 1 left, -1 right, 0 collinear."""
    cross = (b[0]-a[0])*(c[1]-a[1]) - (b[1]-a[1])*(c[0]-a[0])
    return (cross > 0) - (cross < 0)


def on_segment(p: Coordinate, a: Coordinate, b: Coordinate) -> bool:
    """True if p, already known collinear with a-b, lies within the segment's box."""
    return (min(a[0], b[0]) <= p[0] <= max(a[0], b[0])
            and min(a[1], b[1]) <= p[1] <= max(a[1], b[1]))


def segments_intersect(s: Seg, t: Seg) -> bool:
    """True if closed segments s and t share at least one point."""
    (a, b), (c, d) = s, t
    o1 = orient(a, b, c); o2 = orient(a, b, d)
    o3 = orient(c, d, a); o4 = orient(c, d, b)
    if o1 != o2 and o3 != o4:
        return True
    return ((o1 == 0 and on_segment(c, a, b)) or (o2 == 0 and on_segment(d, a, b))
            or (o3 == 0 and on_segment(a, c, d)) or (o4 == 0 and on_segment(b, c, d)))


def touch_only_at(s: Seg, t: Seg, p: Coordinate) -> bool:
    """True if s and t, both having p as an endpoint, meet at p and nowhere else.

    Non-collinear segments through a common point meet only there; collinear
    ones overlap unless they leave p in opposite directions.
    """
    u = s[1] if s[0] == p else s[0]
    v = t[1] if t[0] == p else t[0]
    if orient(p, u, v) != 0:
        return True
    return (u[0]-p[0])*(v[0]-p[0]) + (u[1]-p[1])*(v[1]-p[1]) < 0


def shared_endpoint(s: Seg, t: Seg):
    """An endpoint common to s and t, or None."""
    for p in s:
        if p == t[0] or p == t[1]:
            return p
    return None


def path_segments(coords: Sequence[Coordinate]) -> list[Seg]:
    """Consecutive (x, y) segments of a path, skipping repeated vertices."""
    pts: list[Coordinate] = []
    for c in coords:
        xy = c[:2]
        if not pts or pts[-1] != xy:
            pts.append(xy)
    return list(zip(pts, pts[1:]))


def is_simple_path(coords: Sequence[Coordinate]) -> bool:
    """True if the path does not cross or touch itself.

    Consecutive segments may share their common vertex, and a closed path
    may meet itself at the start/end vertex. The path is closed only when
    its first and last coordinates match in every component. Every pair of segments is
    tested, so cost is quadratic in the vertex count.
    """
    segs = path_segments(coords)
    k = len(segs)
    closed = k > 0 and coords[0] == coords[-1]
    for i in range(k):
        for j in range(i + 1, k):
            if j == i + 1:
                if not touch_only_at(segs[i], segs[j], segs[i][1]):
                    return False
            elif closed and i == 0 and j == k - 1:
                if not touch_only_at(segs[i], segs[j], segs[i][0]):
                    return False
            elif segments_intersect(segs[i], segs[j]):
                return False
    return True


# ============================================================
# Path Metrics
# ============================================================
def path_lengths(coords: Sequence[Coordinate]) -> np.ndarray:
    """2-D length of each consecutive segment."""
    d = np.diff(xy_array(coords), axis=0)
    return np.hypot(d[:, 0], d[:, 1])


def path_length(coords: Sequence[Coordinate]) -> float:
    """Total 2-D length of the path."""
    return float(path_lengths(coords).sum())


def path_centroid(coords: Sequence[Coordinate]) -> tuple[float, float]:
    """Length-weighted mean of segment midpoints.

    A zero-length path has no weights; its first vertex is returned.
    """
    xy = xy_array(coords)
    w = path_lengths(coords)
    total = w.sum()
    if total == 0:
        return float(xy[0, 0]), float(xy[0, 1])
    mid = (xy[:-1] + xy[1:]) / 2
    cx, cy = (mid * w[:, None]).sum(axis=0) / total
    return float(cx), float(cy)

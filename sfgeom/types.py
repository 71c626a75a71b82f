"""Shared type definitions for sfgeom."""
from typing import Sequence, Union

import numpy as np

Number = Union[int, float, np.integer, np.floating]

# Stored coordinate: (x, y) or (x, y, z) or (x, y, z, m), always floats.
Coordinate = tuple[float, ...]

# Raw coordinate as a caller passes it in, e.g. [0, 1] or (0.5, 2).
CoordinateInput = Sequence[Number]

# Index path to a nested member, e.g. (2, 0) = polygon 2, ring 0.
Path = tuple[int, ...]

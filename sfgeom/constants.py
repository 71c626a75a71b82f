"""Named construction limits for the geometry types."""

MIN_LINE_STRING_COORDS = 2    # a polyline needs at least two vertices
MIN_RING_COORDS = 3           # before closure is appended
SEGMENT_COORDS = 2            # a line segment has exactly two

MIN_DIMENSION = 2             # x, y
MAX_DIMENSION = 4             # x, y, z, m

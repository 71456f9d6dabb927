"""
Core constants for pointgeometry

Holds the origin used as the reference point for distance computation and the
fixed record layout of a point. The layout mirrors the native struct: two
little-endian float64 fields, `x` then `y`, 16 bytes in total.
"""

import numpy as np


ORIGIN_X = 0.0
ORIGIN_Y = 0.0

POINT_DTYPE = np.dtype([("x", "<f8"), ("y", "<f8")])

"""
NumPy conversions for points

This module moves points between `Point` values, plain float64 arrays and
structured records of `POINT_DTYPE`, and provides vectorized versions of the
point arithmetic.

# Key Functions
- `points_to_array()`: Points to an (N, 2) array
- `array_to_points()`: (2,) or (N, 2) array to points
- `to_records()`: Points to a `POINT_DTYPE` structured array
- `from_records()`: Structured array to points
- `distances_to_origin()`: Vectorized distance to the origin
- `add_arrays()`: Vectorized point addition

# Array Convention
A single point is a 1D array of shape (2,); many points are a 2D array of
shape (N, 2) with one point per row.
"""

import numpy as np
from .core import POINT_DTYPE, ORIGIN_X, ORIGIN_Y
from .log import get_logger
from .points import Point

logger = get_logger(__name__)


def _as_point_array(arr):
    arr = np.asarray(arr, dtype=np.float64)
    if arr.ndim == 1:
        if arr.shape[0] != 2:
            raise ValueError("Points must have 2 coordinates")
    elif arr.ndim == 2:
        if arr.shape[1] != 2:
            raise ValueError("Points must have 2 coordinates")
    else:
        raise ValueError("Points must be 1D or 2D array")
    return arr


def points_to_array(points):
    """
    Convert points to a NumPy array

    Parameters:
    -----------
    points : iterable of Point

    Returns:
    --------
    ndarray, shape (N, 2)
        One [x, y] row per point

    Examples:
    ---------
    >>> points_to_array([Point(3, 4), Point(-1, 2.5)])
    array([[ 3. ,  4. ],
           [-1. ,  2.5]])
    """
    rows = [(p.x, p.y) for p in points]
    logger.debug("Converting %d points to array", len(rows))
    return np.array(rows, dtype=np.float64).reshape(len(rows), 2)


def array_to_points(arr):
    """
    Convert a NumPy array to points

    Parameters:
    -----------
    arr : array-like
        - 1D array of shape (2,) -> one point
        - 2D array of shape (N, 2) -> N points

    Returns:
    --------
    list of Point

    Raises:
    -------
    ValueError
        If the array is not shaped as a point or a stack of points
    """
    arr = _as_point_array(arr)
    if arr.ndim == 1:
        return [Point(arr[0], arr[1])]
    logger.debug("Converting array of shape %s to points", arr.shape)
    return [Point(row[0], row[1]) for row in arr]


def to_records(points):
    """
    Pack points into a structured array with the fixed point layout

    The result is contiguous memory of 16-byte records (`x` then `y`, both
    float64), suitable for handing to native code expecting the C struct.

    Examples:
    ---------
    >>> rec = to_records([Point(3, 4)])
    >>> rec["x"], rec["y"]
    (array([3.]), array([4.]))
    """
    points = list(points)
    records = np.empty(len(points), dtype=POINT_DTYPE)
    for i, p in enumerate(points):
        records[i] = (p.x, p.y)
    logger.debug("Packed %d points into %d bytes", len(points), records.nbytes)
    return records


def from_records(records):
    """
    Unpack a structured array of point records

    Raises:
    -------
    ValueError
        If the array has no `x` and `y` fields
    """
    records = np.asarray(records)
    names = records.dtype.names or ()
    if "x" not in names or "y" not in names:
        raise ValueError("Records must have 'x' and 'y' fields")
    return [Point(x, y) for x, y in zip(records["x"].ravel(), records["y"].ravel())]


def distances_to_origin(arr):
    """
    Vectorized Euclidean distance to the origin

    Element-wise identical to `distance_to_origin`: sqrt(dx*dx + dy*dy) with
    IEEE-754 semantics for NaN and infinity.

    Parameters:
    -----------
    arr : array-like, shape (2,) or (N, 2)
        Point or points

    Returns:
    --------
    float or ndarray, shape (N,)
        Distance for a single point, array of distances otherwise

    Examples:
    ---------
    >>> distances_to_origin([[3, 4], [0, 0]])
    array([5., 0.])
    """
    arr = _as_point_array(arr)
    with np.errstate(over="ignore", invalid="ignore"):
        dx = arr[..., 0] - ORIGIN_X
        dy = arr[..., 1] - ORIGIN_Y
        result = np.sqrt(dx * dx + dy * dy)

    if arr.ndim == 1:
        return float(result)
    return result


def add_arrays(a, b):
    """
    Vectorized point addition

    Parameters:
    -----------
    a, b : array-like, shape (2,) or (N, 2)
        Points to add. A single point is added to every row of the other
        operand.

    Returns:
    --------
    ndarray
        Component-wise sums

    Raises:
    -------
    ValueError
        If both operands are stacks of different lengths
    """
    a = _as_point_array(a)
    b = _as_point_array(b)
    if a.ndim == 2 and b.ndim == 2 and a.shape != b.shape:
        raise ValueError("Point arrays must have the same shape")

    with np.errstate(invalid="ignore", over="ignore"):
        return a + b

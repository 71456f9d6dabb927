"""
2D points and the arithmetic over them

A `Point` is an immutable pair of double-precision coordinates. The module
functions are total over the IEEE-754 double domain: NaN and infinity are
accepted and propagate through every operation exactly as the floating-point
rules dictate, nothing is validated and nothing raises.

# Key Functions
- `create_point()`: Build a point from two numbers
- `distance_to_origin()`: Euclidean distance from the point to (0, 0)
- `add_points()`: Component-wise sum of two points
- `display_point()`: Print the point as `Point(x: 3.00, y: 4.00)`
"""

import numpy as np
from .core import ORIGIN_X, ORIGIN_Y


class Point:
    """Immutable 2D point with float64 coordinates"""

    __slots__ = ("_x", "_y")

    def __init__(self, x, y):
        """
        Create a Point

        Parameters:
        -----------
        x : float
            Horizontal coordinate, stored unchanged
        y : float
            Vertical coordinate, stored unchanged
        """
        self._x = float(x)
        self._y = float(y)

    @classmethod
    def from_array(cls, arr):
        """
        Create a Point from an array-like of shape (2,)

        Raises:
        -------
        ValueError
            If the input is not a single 2D point
        """
        arr = np.asarray(arr, dtype=np.float64)
        if arr.shape != (2,):
            raise ValueError("Point must be 2D")
        return cls(arr[0], arr[1])

    @property
    def x(self):
        """Get the x coordinate"""
        return self._x

    @property
    def y(self):
        """Get the y coordinate"""
        return self._y

    def to_array(self):
        """Get the point as a NumPy array [x, y]"""
        return np.array([self._x, self._y], dtype=np.float64)

    def distance_to_origin(self):
        return distance_to_origin(self)

    def __add__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return add_points(self, other)

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self):
        return hash((self._x, self._y))

    def __str__(self):
        return format_point(self)

    def __repr__(self):
        return f"Point(x={self._x!r}, y={self._y!r})"


def create_point(x, y):
    """
    Create a Point holding exactly the given coordinates

    Examples:
    ---------
    >>> p = create_point(3.0, 4.0)
    >>> p.x, p.y
    (3.0, 4.0)
    """
    return Point(x, y)


def distance_to_origin(p):
    """
    Euclidean distance from a point to the origin

    Computed as sqrt(dx*dx + dy*dy), which differs from `math.hypot` in the
    last bit for some inputs.

    Parameters:
    -----------
    p : Point
        Point to measure

    Returns:
    --------
    float
        Non-negative distance; NaN if either coordinate is NaN, +inf if a
        coordinate is infinite

    Examples:
    ---------
    >>> distance_to_origin(create_point(3, 4))
    5.0
    """
    dx = p.x - ORIGIN_X
    dy = p.y - ORIGIN_Y
    return float(np.sqrt(dx * dx + dy * dy))


def distance_between(p1, p2):
    """
    Euclidean distance between two points

    Examples:
    ---------
    >>> distance_between(create_point(1, 1), create_point(4, 5))
    5.0
    """
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    return float(np.sqrt(dx * dx + dy * dy))


def add_points(p1, p2):
    """
    Add two points component-wise

    Examples:
    ---------
    >>> add_points(create_point(3, 4), create_point(-1, 2.5))
    Point(x=2.0, y=6.5)
    """
    return Point(p1.x + p2.x, p1.y + p2.y)


def format_point(p):
    """Render a point with both coordinates rounded to two decimals"""
    return f"Point(x: {p.x:.2f}, y: {p.y:.2f})"


def display_point(p, file=None):
    """
    Print a point as `Point(x: <x>, y: <y>)`

    Parameters:
    -----------
    p : Point
        Point to print
    file : file-like, optional
        Output stream (default: sys.stdout)
    """
    print(format_point(p), file=file)

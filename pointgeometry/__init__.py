"""
pointgeometry

Minimal 2D point geometry: construction, distance to the origin, addition and
fixed-format printing, with NumPy conversions for working on many points and
a fixed record layout for handing points to native code.

# Quick Start
```python
from pointgeometry import create_point, add_points, distance_to_origin, display_point

p1 = create_point(3.0, 4.0)
p2 = create_point(-1.0, 2.5)

display_point(add_points(p1, p2))   # Point(x: 2.00, y: 6.50)
distance_to_origin(p1)              # 5.0
```
"""

from .core import ORIGIN_X, ORIGIN_Y, POINT_DTYPE
from .points import (
    Point,
    create_point,
    distance_to_origin,
    distance_between,
    add_points,
    format_point,
    display_point,
)
from .transforms import (
    points_to_array,
    array_to_points,
    to_records,
    from_records,
    distances_to_origin,
    add_arrays,
)
from .log import setup_logging

__version__ = "0.1.0"
__all__ = [
    "ORIGIN_X",
    "ORIGIN_Y",
    "POINT_DTYPE",
    "Point",
    "create_point",
    "distance_to_origin",
    "distance_between",
    "add_points",
    "format_point",
    "display_point",
    "points_to_array",
    "array_to_points",
    "to_records",
    "from_records",
    "distances_to_origin",
    "add_arrays",
    "setup_logging",
]

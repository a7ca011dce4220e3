"""
Geometry Layer
==============

Bounded Context: Axis-aligned regions and point containment.

Responsibilities:
- Validated, order-normalized axis bounds
- Rectangle2D / Parallelepiped3D containment (including projection queries)
- Bound reports for display
- NO I/O, NO logging, NO parsing

Usage:

    from regionbox_geometry import Rectangle2D, Parallelepiped3D, RegionDetector

    rect = Rectangle2D.from_bounds(0, 10, 0, 5)
    rect.contains([5, 2])                      # True

    box = Parallelepiped3D.from_bounds(0, 10, 0, 5, 0, 2)
    box.contains([5, 2])                       # True (axis3 ignored)

    mask = RegionDetector.detect(box, [[5, 2, 1], [5, 2, 3]])
"""

from regionbox_geometry.axis import BoundedAxis, InvalidBound, validate_finite
from regionbox_geometry.shapes import (
    Point2D,
    Point3D,
    RegionKind,
    Rectangle2D,
    Parallelepiped3D,
    Region,
    build_region,
    format_number,
)
from regionbox_geometry.detector import RegionDetector

__all__ = [
    # Axis
    "BoundedAxis",
    "InvalidBound",
    "validate_finite",
    # Shapes
    "Point2D",
    "Point3D",
    "RegionKind",
    "Rectangle2D",
    "Parallelepiped3D",
    "Region",
    "build_region",
    "format_number",
    # Batch
    "RegionDetector",
]

__version__ = "1.0.0"

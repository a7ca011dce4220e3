"""
Region Shapes Module
====================

Axis-aligned regions built from BoundedAxis values.

Design:
- Closed set of variants: Rectangle2D, Parallelepiped3D (tagged by RegionKind)
- Composition: a Parallelepiped3D owns a Rectangle2D projection plus a third axis
- Containment never raises for short coordinate lists, it answers False
- set_bounds() is all-or-nothing: new axes are validated before any swap
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Union

from regionbox_geometry.axis import BoundedAxis


@dataclass(frozen=True)
class Point2D:
    """A 2D point."""
    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Point3D:
    """A 3D point."""
    x: float
    y: float
    z: float

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


class RegionKind(str, Enum):
    """Region variant tag."""

    RECTANGLE = "rectangle"
    PARALLELEPIPED = "parallelepiped"

    @property
    def dimensions(self) -> int:
        return 2 if self is RegionKind.RECTANGLE else 3

    @property
    def bound_count(self) -> int:
        return 2 * self.dimensions


def format_number(value: float) -> str:
    """Shortest round-trip text for a float, without a trailing '.0'."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _report_line(index: int, axis: BoundedAxis) -> str:
    return (
        f"b{index} <= x{index} <= a{index} : "
        f"{format_number(axis.low)} <= x{index} <= {format_number(axis.high)}"
    )


def _build_axes(*bounds: float) -> List[BoundedAxis]:
    """Build one axis per (b, a) pair, validating in argument order."""
    axes = []
    for i in range(0, len(bounds), 2):
        index = i // 2 + 1
        axes.append(
            BoundedAxis.from_bounds(
                bounds[i],
                bounds[i + 1],
                names=(f"b{index}", f"a{index}"),
                axis=index,
            )
        )
    return axes


class Rectangle2D:
    """
    Region b1 <= x1 <= a1, b2 <= x2 <= a2.

    Attributes:
        axis1: Bounds on the first coordinate
        axis2: Bounds on the second coordinate

    Example:
        >>> rect = Rectangle2D.from_bounds(10, 0, 5, 0)
        >>> rect.contains([5, 2])
        True
        >>> rect.format_report()
        ['b1 <= x1 <= a1 : 0 <= x1 <= 10', 'b2 <= x2 <= a2 : 0 <= x2 <= 5']
    """

    kind = RegionKind.RECTANGLE
    title = "Rectangle"

    def __init__(self, axis1: BoundedAxis, axis2: BoundedAxis):
        self.axis1 = axis1
        self.axis2 = axis2

    @classmethod
    def from_bounds(cls, b1: float, a1: float, b2: float, a2: float) -> "Rectangle2D":
        """
        Build a rectangle from raw bound pairs in any order.

        Raises:
            InvalidBound: First non-finite bound, checked in b1, a1, b2, a2 order
        """
        return cls(*_build_axes(b1, a1, b2, a2))

    @property
    def dimensions(self) -> int:
        return 2

    @property
    def axes(self) -> tuple[BoundedAxis, ...]:
        return (self.axis1, self.axis2)

    def set_bounds(self, b1: float, a1: float, b2: float, a2: float) -> None:
        """Replace both axes. On InvalidBound the rectangle is left unchanged."""
        self.axis1, self.axis2 = _build_axes(b1, a1, b2, a2)

    def contains(self, coordinates: Optional[Sequence[float]]) -> bool:
        """
        Check a point given as [x1, x2, ...].

        Fewer than 2 coordinates gives False; coordinates past x2 are ignored.
        """
        if coordinates is None or len(coordinates) < 2:
            return False
        return self.axis1.contains(coordinates[0]) and self.axis2.contains(coordinates[1])

    def contains_point(self, point: Point2D) -> bool:
        if isinstance(point, Point3D):
            raise TypeError("Rectangle2D only accepts Point2D, got Point3D")
        return self.contains(point.to_tuple())

    def format_report(self) -> List[str]:
        """One display line per axis, axis1 first."""
        return [_report_line(i, axis) for i, axis in enumerate(self.axes, start=1)]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Rectangle2D):
            return NotImplemented
        return self.axes == other.axes

    def __repr__(self) -> str:
        return f"Rectangle2D(axis1={self.axis1!r}, axis2={self.axis2!r})"


class Parallelepiped3D:
    """
    Region b1 <= x1 <= a1, b2 <= x2 <= a2, b3 <= x3 <= a3.

    The first two axes live in a Rectangle2D projection (``base``), which
    answers 2-coordinate queries on its own. axis3 is only consulted when a
    third coordinate is given.

    Example:
        >>> box = Parallelepiped3D.from_bounds(0, 10, 0, 5, 0, 2)
        >>> box.contains([5, 2, 3])
        False
        >>> box.contains([5, 2])
        True
    """

    kind = RegionKind.PARALLELEPIPED
    title = "Parallelepiped"

    def __init__(self, base: Rectangle2D, axis3: BoundedAxis):
        self.base = base
        self.axis3 = axis3

    @classmethod
    def from_bounds(
        cls,
        b1: float,
        a1: float,
        b2: float,
        a2: float,
        b3: float,
        a3: float,
    ) -> "Parallelepiped3D":
        """
        Build a parallelepiped from raw bound pairs in any order.

        Raises:
            InvalidBound: First non-finite bound, checked in b1 .. a3 order
        """
        axis1, axis2, axis3 = _build_axes(b1, a1, b2, a2, b3, a3)
        return cls(Rectangle2D(axis1, axis2), axis3)

    @property
    def axis1(self) -> BoundedAxis:
        return self.base.axis1

    @property
    def axis2(self) -> BoundedAxis:
        return self.base.axis2

    @property
    def dimensions(self) -> int:
        return 3

    @property
    def axes(self) -> tuple[BoundedAxis, ...]:
        return (self.axis1, self.axis2, self.axis3)

    def set_bounds(
        self,
        b1: float,
        a1: float,
        b2: float,
        a2: float,
        b3: float,
        a3: float,
    ) -> None:
        """Replace all three axes. On InvalidBound nothing changes."""
        axis1, axis2, axis3 = _build_axes(b1, a1, b2, a2, b3, a3)
        self.base = Rectangle2D(axis1, axis2)
        self.axis3 = axis3

    def contains(self, coordinates: Optional[Sequence[float]]) -> bool:
        """
        Check a point given as [x1, x2] or [x1, x2, x3, ...].

        Exactly 2 coordinates is a projection query: axis3 is ignored.
        """
        if coordinates is None or len(coordinates) < 2:
            return False
        if len(coordinates) == 2:
            return self.base.contains(coordinates)
        return self.base.contains(coordinates) and self.axis3.contains(coordinates[2])

    def contains_point(self, point: Union[Point2D, Point3D]) -> bool:
        return self.contains(point.to_tuple())

    def format_report(self) -> List[str]:
        """Three display lines, axis3 last."""
        return self.base.format_report() + [_report_line(3, self.axis3)]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Parallelepiped3D):
            return NotImplemented
        return self.axes == other.axes

    def __repr__(self) -> str:
        return (
            f"Parallelepiped3D(axis1={self.axis1!r}, axis2={self.axis2!r}, "
            f"axis3={self.axis3!r})"
        )


Region = Union[Rectangle2D, Parallelepiped3D]


def build_region(kind: Union[RegionKind, str], bounds: Sequence[float]) -> Region:
    """
    Build the region variant named by ``kind`` from a flat bound list.

    Args:
        kind: RegionKind or its string value ("rectangle", "parallelepiped")
        bounds: [b1, a1, b2, a2] or [b1, a1, b2, a2, b3, a3]

    Returns:
        Rectangle2D or Parallelepiped3D

    Raises:
        ValueError: Unknown kind or wrong number of bounds
        InvalidBound: Non-finite bound
    """
    kind = RegionKind(kind)
    if len(bounds) != kind.bound_count:
        raise ValueError(
            f"{kind.value} needs {kind.bound_count} bounds, got {len(bounds)}"
        )
    if kind is RegionKind.RECTANGLE:
        return Rectangle2D.from_bounds(*bounds)
    return Parallelepiped3D.from_bounds(*bounds)

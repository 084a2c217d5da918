"""Geometric value objects for ink strokes."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import ClassVar, Iterator, List, Optional, Tuple
import math

from ..config import EPSILON


@dataclass(frozen=True)
class Point:
    """Immutable 2D ink point with an optional timestamp (milliseconds)."""
    x: float
    y: float
    time: Optional[int] = None

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def distance_squared_to(self, other: Point) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def same_position(self, other: Point) -> bool:
        """True if both points have identical coordinates, ignoring time."""
        return self.x == other.x and self.y == other.y

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Point:
        return Point(self.x / scalar, self.y / scalar)

    def dot(self, other: Point) -> float:
        """Dot product treating points as vectors."""
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        """Length when treated as a vector from origin."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalized(self) -> Point:
        """Unit vector in same direction."""
        length = self.length()
        if length < EPSILON:
            return Point(0.0, 0.0)
        return self / length

    def to_tuple(self) -> Tuple[float, float]:
        """Convert to (x, y) tuple, dropping time."""
        return (self.x, self.y)

    def to_list(self) -> List[float]:
        """Convert to list for JSON serialization."""
        if self.time is None:
            return [float(self.x), float(self.y)]
        return [float(self.x), float(self.y), self.time]

    def to_dict(self) -> dict:
        d = {'x': float(self.x), 'y': float(self.y)}
        if self.time is not None:
            d['time'] = self.time
        return d

    @classmethod
    def from_tuple(cls, t: Tuple[float, ...]) -> Point:
        """Create from (x, y) or (x, y, time) tuple."""
        if len(t) > 2 and t[2] is not None:
            return cls(t[0], t[1], int(t[2]))
        return cls(t[0], t[1])

    @classmethod
    def from_list(cls, lst: List[float]) -> Point:
        """Create from [x, y] or [x, y, time] list."""
        return cls.from_tuple(tuple(lst))

    @classmethod
    def from_dict(cls, d: dict) -> Point:
        """Create from a dict with 'x', 'y' and optional 'time' (or 't')."""
        time = d.get('time', d.get('t'))
        return cls(float(d['x']), float(d['y']), int(time) if time is not None else None)


@dataclass(frozen=True)
class BBox:
    """Immutable axis-aligned bounding box."""
    x_min: float
    y_min: float
    x_max: float
    y_max: float

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def center(self) -> Point:
        return Point(
            (self.x_min + self.x_max) / 2,
            (self.y_min + self.y_max) / 2
        )

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def diagonal_length(self) -> float:
        """Length of the box diagonal, used to scale resampling."""
        return math.sqrt(self.width * self.width + self.height * self.height)

    def contains(self, point: Point) -> bool:
        """Check if point is inside bounding box (edges included)."""
        return (self.x_min <= point.x <= self.x_max and
                self.y_min <= point.y <= self.y_max)

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x_min, self.y_min, self.x_max, self.y_max)

    @classmethod
    def from_points(cls, points) -> BBox:
        """Create bounding box containing all points."""
        if not points:
            return cls(0, 0, 0, 0)
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), min(ys), max(xs), max(ys))


@dataclass(frozen=True)
class Segment:
    """A directed line segment from p1 to p2.

    Distance and parallelism treat the segment as undirected; the order
    of the endpoints only defines the direction angle.
    """
    p1: Point
    p2: Point

    @property
    def is_degenerate(self) -> bool:
        """True when both endpoints share the same coordinates."""
        return self.p1.same_position(self.p2)

    @property
    def length(self) -> float:
        return self.p1.distance_to(self.p2)

    @property
    def angle(self) -> float:
        """Direction angle in radians, atan2(dy, dx)."""
        return math.atan2(self.p2.y - self.p1.y, self.p2.x - self.p1.x)

    @property
    def angle_degrees(self) -> float:
        """Directed angle in degrees within [0, 360), y axis pointing down."""
        return (360 - math.degrees(self.angle)) % 360

    @property
    def angle_degrees_undirected(self) -> float:
        """Angle in degrees within [0, 180), ignoring direction."""
        return (360 - math.degrees(self.angle)) % 180

    @property
    def direction(self) -> Point:
        """Unit direction vector from p1 to p2."""
        return (self.p2 - self.p1).normalized()

    @property
    def midpoint(self) -> Point:
        return Point((self.p1.x + self.p2.x) / 2, (self.p1.y + self.p2.y) / 2)

    @property
    def bbox(self) -> BBox:
        return BBox.from_points([self.p1, self.p2])

    def to_list(self) -> List[List[float]]:
        return [self.p1.to_list(), self.p2.to_list()]

    @classmethod
    def from_list(cls, lst: List[List[float]]) -> Segment:
        """Create from [[x1, y1], [x2, y2]]."""
        return cls(Point.from_list(lst[0]), Point.from_list(lst[1]))


@dataclass(frozen=True)
class ImplicitLine:
    """A line in implicit form a*x + b*y = c.

    Derived from two points by ``analysis.lines.to_implicit``; never stored
    on a Segment.
    """
    a: float
    b: float
    c: float

    NULL: ClassVar[ImplicitLine]

    def residual(self, point: Point) -> float:
        """Signed amount by which the point misses the equation."""
        return self.a * point.x + self.b * point.y - self.c

    def contains(self, point: Point, tolerance: float = EPSILON) -> bool:
        return abs(self.residual(point)) < tolerance

    @property
    def is_degenerate(self) -> bool:
        """True when a and b are both effectively zero."""
        return abs(self.a) < EPSILON and abs(self.b) < EPSILON

    @property
    def is_null(self) -> bool:
        """True for the identically-zero equation 0 = 0."""
        return self.is_degenerate and abs(self.c) < EPSILON


ImplicitLine.NULL = ImplicitLine(0.0, 0.0, 0.0)


@dataclass
class Stroke:
    """A stroke as a time-ordered sequence of points."""
    points: List[Point] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, idx):
        return self.points[idx]

    @property
    def start(self) -> Optional[Point]:
        """First point of stroke, None when empty."""
        return self.points[0] if self.points else None

    @property
    def end(self) -> Optional[Point]:
        """Last point of stroke, None when empty."""
        return self.points[-1] if self.points else None

    @property
    def bbox(self) -> BBox:
        """Bounding box of stroke."""
        return BBox.from_points(self.points)

    def diagonal_length(self) -> float:
        return self.bbox.diagonal_length

    def length(self) -> float:
        """Total arc length of stroke."""
        total = 0.0
        for i in range(1, len(self.points)):
            total += self.points[i].distance_to(self.points[i - 1])
        return total

    def substroke(self, start_index: int, end_index: int) -> Stroke:
        """Stroke with the points from start_index through end_index inclusive."""
        if start_index < 0 or end_index >= len(self.points) or start_index > end_index:
            raise IndexError(
                f"substroke [{start_index}, {end_index}] out of range for "
                f"{len(self.points)} points")
        return Stroke(list(self.points[start_index:end_index + 1]))

    def reversed(self) -> Stroke:
        """Return stroke with reversed point order."""
        return Stroke(list(reversed(self.points)))

    def to_list(self) -> List[List[float]]:
        """Convert to nested list for JSON serialization."""
        return [p.to_list() for p in self.points]

    @classmethod
    def from_list(cls, lst: List[List[float]]) -> Stroke:
        """Create from nested list."""
        return cls([Point.from_list(p) for p in lst])

    @classmethod
    def from_tuples(cls, tuples: List[Tuple[float, ...]]) -> Stroke:
        """Create from list of tuples."""
        return cls([Point.from_tuple(t) for t in tuples])

    @classmethod
    def from_dicts(cls, dicts: List[dict]) -> Stroke:
        return cls([Point.from_dict(d) for d in dicts])

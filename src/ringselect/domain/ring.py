"""Core geometric types for ring representation.

This module defines the fundamental geometric types used throughout ringselect:
- Point: A 2D point
- Ring: A closed sequence of points bounding an exterior or a hole
- WindingDirection: Enum for ring winding direction
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from ringselect.exceptions import EmptyRingError, InvalidGeometryError


class WindingDirection(Enum):
    """Ring winding direction.

    The sign of a ring's signed area encodes its direction:
    - Positive area: counter-clockwise
    - Negative area: clockwise
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


@dataclass(frozen=True, slots=True)
class Point:
    """A point in the plane.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_list(self) -> list[float]:
        """Serialize to a two-element list."""
        return [self.x, self.y]

    @classmethod
    def from_sequence(cls, data: Any) -> "Point":
        """Deserialize from an [x, y] pair.

        Args:
            data: Sequence holding exactly two numbers

        Returns:
            Point instance

        Raises:
            InvalidGeometryError: If data is not a pair of numbers
        """
        try:
            x, y = data
            return cls(float(x), float(y))
        except (TypeError, ValueError) as e:
            raise InvalidGeometryError(f"expected [x, y] coordinate pair, got {data!r}") from e


@dataclass
class Ring:
    """A closed ring bounding a polygon exterior or a hole.

    The ring may be stored open or closed (first point repeated at the end);
    both forms describe the same loop. A ring without points is a legal
    placeholder and is skipped during ring selection.

    Attributes:
        points: List of points forming the ring
    """

    points: list[Point] = field(default_factory=list)
    _cached_area: float | None = field(default=None, repr=False, init=False, compare=False)

    def __len__(self) -> int:
        return len(self.points)

    def is_empty(self) -> bool:
        """Check if the ring has no points."""
        return len(self.points) == 0

    def signed_area(self) -> float:
        """Calculate signed area using shoelace formula.

        The sign of the area indicates winding direction:
        - Positive area: counter-clockwise winding
        - Negative area: clockwise winding

        Result is cached for efficiency.

        Returns:
            Signed area of the ring
        """
        if self._cached_area is not None:
            return self._cached_area

        n = len(self.points)
        if n < 3:
            self._cached_area = 0.0
            return 0.0

        area = 0.0
        for i in range(n):
            j = (i + 1) % n
            area += self.points[i].x * self.points[j].y
            area -= self.points[j].x * self.points[i].y

        self._cached_area = area / 2.0
        return self._cached_area

    def winding_direction(self) -> WindingDirection | None:
        """Winding direction derived from the signed area.

        Returns:
            Direction of the ring, or None for degenerate (zero-area) rings
        """
        area = self.signed_area()
        if area > 0:
            return WindingDirection.COUNTER_CLOCKWISE
        if area < 0:
            return WindingDirection.CLOCKWISE
        return None

    def point_on_border(self) -> Point:
        """Return a point lying on the ring's border.

        Picks the midpoint of the first segment whose endpoints differ,
        including the implicit closing segment. Rings whose points all
        coincide return their first point.

        Raises:
            EmptyRingError: If the ring has no points
        """
        n = len(self.points)
        if n == 0:
            raise EmptyRingError("point on border")

        for i in range(n):
            p = self.points[i]
            q = self.points[(i + 1) % n]
            if p != q:
                return Point((p.x + q.x) / 2.0, (p.y + q.y) / 2.0)

        return self.points[0]

    def reversed(self) -> "Ring":
        """Return a new ring traversing the same points in opposite direction."""
        return Ring(points=list(reversed(self.points)))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "type": "ring",
            "points": [p.to_list() for p in self.points],
        }

    @classmethod
    def from_points(cls, data: Any) -> "Ring":
        """Build a ring from a list of [x, y] pairs."""
        if not isinstance(data, list):
            raise InvalidGeometryError(f"expected list of coordinates, got {type(data).__name__}")
        return cls(points=[Point.from_sequence(p) for p in data])

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Ring":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with a "points" list

        Returns:
            Ring instance
        """
        if "points" not in data:
            raise InvalidGeometryError("ring requires 'points'")
        return cls.from_points(data["points"])

"""Geometry shape variants consumed by ring selection.

The set of shapes is closed: a geometry is a Box, a Ring, a Polygon or a
MultiPolygon. Code that dispatches over shapes handles exactly these four.
"""

from dataclasses import dataclass, field
from typing import Any, Union

from ringselect.domain.ring import Point, Ring
from ringselect.exceptions import InvalidGeometryError


@dataclass(frozen=True)
class Box:
    """An axis-aligned box, treated as a single counter-clockwise ring.

    Attributes:
        min_corner: Lower-left corner
        max_corner: Upper-right corner
    """

    min_corner: Point
    max_corner: Point

    @property
    def width(self) -> float:
        return self.max_corner.x - self.min_corner.x

    @property
    def height(self) -> float:
        return self.max_corner.y - self.min_corner.y

    def signed_area(self) -> float:
        """Area of the box; a box is always counter-clockwise."""
        return self.width * self.height

    def as_ring(self) -> Ring:
        """Return the closed counter-clockwise ring outlining the box."""
        lo, hi = self.min_corner, self.max_corner
        return Ring(
            points=[
                Point(lo.x, lo.y),
                Point(hi.x, lo.y),
                Point(hi.x, hi.y),
                Point(lo.x, hi.y),
                Point(lo.x, lo.y),
            ]
        )

    def point_on_border(self) -> Point:
        """Midpoint of the bottom edge."""
        return Point((self.min_corner.x + self.max_corner.x) / 2.0, self.min_corner.y)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "box",
            "min": self.min_corner.to_list(),
            "max": self.max_corner.to_list(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Box":
        if "min" not in data or "max" not in data:
            raise InvalidGeometryError("box requires 'min' and 'max'")
        return cls(
            min_corner=Point.from_sequence(data["min"]),
            max_corner=Point.from_sequence(data["max"]),
        )


@dataclass
class Polygon:
    """A polygon with one exterior ring and zero or more holes.

    Attributes:
        exterior: Outer boundary
        interiors: Holes, in traversal order
    """

    exterior: Ring
    interiors: list[Ring] = field(default_factory=list)

    def rings(self) -> list[Ring]:
        """All rings, exterior first."""
        return [self.exterior, *self.interiors]

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "polygon",
            "exterior": [p.to_list() for p in self.exterior.points],
            "interiors": [[p.to_list() for p in ring.points] for ring in self.interiors],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        if "exterior" not in data:
            raise InvalidGeometryError("polygon requires 'exterior'")
        interiors = data.get("interiors", [])
        if not isinstance(interiors, list):
            raise InvalidGeometryError("polygon 'interiors' must be a list of rings")
        return cls(
            exterior=Ring.from_points(data["exterior"]),
            interiors=[Ring.from_points(ring) for ring in interiors],
        )


@dataclass
class MultiPolygon:
    """A collection of polygons.

    Attributes:
        polygons: Member polygons; their position is the multi index
    """

    polygons: list[Polygon] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.polygons)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "multipolygon",
            "polygons": [p.to_dict() for p in self.polygons],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MultiPolygon":
        polygons = data.get("polygons")
        if not isinstance(polygons, list):
            raise InvalidGeometryError("multipolygon requires a 'polygons' list")
        return cls(polygons=[Polygon.from_dict(p) for p in polygons])


Geometry = Union[Box, Ring, Polygon, MultiPolygon]

_SHAPES: dict[str, Any] = {
    "box": Box,
    "ring": Ring,
    "polygon": Polygon,
    "multipolygon": MultiPolygon,
}


def geometry_from_dict(data: dict[str, Any]) -> Geometry:
    """Deserialize any geometry variant using its "type" field.

    Args:
        data: Dictionary produced by a shape's to_dict()

    Returns:
        Box, Ring, Polygon or MultiPolygon

    Raises:
        InvalidGeometryError: If the type is missing or unknown
    """
    if not isinstance(data, dict):
        raise InvalidGeometryError(f"expected object, got {type(data).__name__}")

    kind = str(data.get("type", "")).lower()
    shape = _SHAPES.get(kind)
    if shape is None:
        raise InvalidGeometryError(
            f"unknown geometry type {data.get('type')!r} "
            f"(expected one of: {', '.join(_SHAPES)})"
        )
    return shape.from_dict(data)

"""Per-ring properties recorded during ring selection."""

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

from ringselect.domain.ring import Point, Ring
from ringselect.domain.shapes import Box, Geometry

WithinClassifier = Callable[[Point, Geometry], int]


@dataclass
class RingProperties:
    """Descriptor of one ring as seen by the selection step.

    Attributes:
        area: Signed area of the ring (positive = counter-clockwise)
        point: A point on the ring's border, used to classify the ring
        within_code: +1 inside the other geometry, -1 outside, 0 on its border
        reversed: True if the ring's winding must be flipped in the output
    """

    area: float
    point: Point | None = None
    within_code: int = -1
    reversed: bool = False

    @classmethod
    def from_ring(
        cls,
        ring: Ring | Box,
        other: Geometry | None = None,
        within: WithinClassifier | None = None,
        standalone_within_code: int = -1,
    ) -> "RingProperties":
        """Build properties for a ring or box.

        Without a companion geometry, within_code is set to
        standalone_within_code. With one, the ring's border point is
        classified against it using the within classifier
        (point_in_geometry unless another one is supplied).

        Args:
            ring: The ring (or box) being described
            other: The other input geometry, if any
            within: Classifier returning +1 / 0 / -1 for a point and a geometry
            standalone_within_code: within_code for the single-geometry case

        Returns:
            RingProperties with reversed set to False
        """
        point = ring.point_on_border()
        props = cls(
            area=ring.signed_area(),
            point=point,
            within_code=standalone_within_code,
        )
        if other is not None:
            if within is None:
                from ringselect.core.geometry import point_in_geometry

                within = point_in_geometry
            props.within_code = within(point, other)
        return props

    def copy(self, **changes: Any) -> "RingProperties":
        """Return a copy, optionally with some fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        return {
            "area": self.area,
            "point": self.point.to_list() if self.point is not None else None,
            "within_code": self.within_code,
            "reversed": self.reversed,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RingProperties":
        point = data.get("point")
        return cls(
            area=float(data["area"]),
            point=Point.from_sequence(point) if point is not None else None,
            within_code=int(data.get("within_code", -1)),
            reversed=bool(data.get("reversed", False)),
        )

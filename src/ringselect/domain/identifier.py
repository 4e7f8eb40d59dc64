"""Ring identifiers: composite keys addressing a ring in one of two geometries."""

from dataclasses import dataclass, replace
from typing import Any

from ringselect.exceptions import InvalidGeometryError


@dataclass(frozen=True, order=True, slots=True)
class RingIdentifier:
    """Address of a single ring inside one of the two input geometries.

    Identifiers are hashable and ordered lexicographically on
    (source_index, multi_index, ring_index), so they serve as dict keys and
    sort deterministically.

    Attributes:
        source_index: 0 for the first input geometry, 1 for the second
        multi_index: Position inside a multi-geometry, -1 if not a collection
        ring_index: -1 for the exterior ring, 0, 1, 2, ... for holes
    """

    source_index: int
    multi_index: int = -1
    ring_index: int = -1

    def next_ring(self) -> "RingIdentifier":
        """Identifier of the following ring of the same polygon."""
        return replace(self, ring_index=self.ring_index + 1)

    @property
    def is_exterior(self) -> bool:
        return self.ring_index == -1

    def __str__(self) -> str:
        return f"({self.source_index}, {self.multi_index}, {self.ring_index})"

    def to_dict(self) -> dict[str, int]:
        return {
            "source_index": self.source_index,
            "multi_index": self.multi_index,
            "ring_index": self.ring_index,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RingIdentifier":
        try:
            return cls(
                source_index=int(data["source_index"]),
                multi_index=int(data.get("multi_index", -1)),
                ring_index=int(data.get("ring_index", -1)),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidGeometryError(f"malformed ring identifier {data!r}") from e

    @classmethod
    def from_sequence(cls, data: Any) -> "RingIdentifier":
        """Deserialize from a [source, multi, ring] triple."""
        try:
            source_index, multi_index, ring_index = data
            return cls(int(source_index), int(multi_index), int(ring_index))
        except (TypeError, ValueError) as e:
            raise InvalidGeometryError(f"malformed ring identifier {data!r}") from e

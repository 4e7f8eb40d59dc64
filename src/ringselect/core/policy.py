"""Per-overlay decision rules for standalone rings.

A ring that does not take part in any intersection either lies completely
inside the other geometry (within_code +1) or completely outside it (-1).
Whether such a ring belongs to the output depends on the operation:

- union: keep rings outside the other geometry
- intersection: keep rings inside the other geometry
- difference (first minus second): keep rings of the first geometry that
  lie outside the second, and rings of the second that lie inside the
  first. The latter now bound holes, so their winding is reversed.
"""

from enum import Enum

from ringselect.domain import RingIdentifier, RingProperties


class OverlayType(str, Enum):
    """Boolean overlay operation."""

    UNION = "union"
    INTERSECTION = "intersection"
    DIFFERENCE = "difference"


def include(overlay: OverlayType, ring_id: RingIdentifier, props: RingProperties) -> bool:
    """Decide whether a ring contributes to the overlay result.

    Examples:
        >>> outside = RingProperties(area=10.0, within_code=-1)
        >>> include(OverlayType.UNION, RingIdentifier(0), outside)
        True
        >>> include(OverlayType.DIFFERENCE, RingIdentifier(1), outside)
        False
    """
    if overlay is OverlayType.UNION:
        return props.within_code * -1 == 1
    if overlay is OverlayType.INTERSECTION:
        return props.within_code == 1
    if overlay is OverlayType.DIFFERENCE:
        is_first = ring_id.source_index == 0
        return props.within_code * -1 * (1 if is_first else -1) == 1
    raise ValueError(f"Unknown overlay type: {overlay!r}")


def is_reversed(overlay: OverlayType, ring_id: RingIdentifier, props: RingProperties) -> bool:
    """Decide whether an included ring must have its winding flipped."""
    if overlay is OverlayType.DIFFERENCE:
        return include(overlay, ring_id, props) and ring_id.source_index == 1
    return False


def decide(
    overlay: OverlayType, ring_id: RingIdentifier, props: RingProperties
) -> tuple[bool, bool]:
    """Return (include, reversed) for a ring."""
    included = include(overlay, ring_id, props)
    return included, included and is_reversed(overlay, ring_id, props)

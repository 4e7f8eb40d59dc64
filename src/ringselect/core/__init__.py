"""Core algorithms for ringselect.

This module contains the algorithms for:

- Geometric predicates (border points, point classification)
- Ring extraction (enumerating rings of boxes, rings, polygons, multi-polygons)
- Selection policy (include / reversed per overlay operation)
- Selection map building (filtering described rings for an overlay)

All functions are:
- Stateless (safe to call concurrently)
- Pure (inputs are never modified; every call builds fresh maps)

Key functions:
- point_in_geometry: Classify a point as inside (+1), on border (0), outside (-1)
- extract_rings: Describe every non-empty ring of a geometry
- decide: (include, reversed) for one ring under an overlay
- update_selection_map: Filter described rings
- select_rings: Extraction plus filtering

Key classes:
- OverlayType: union, intersection, difference
- RingSelector: Configured, logging front end
"""

from ringselect.core.extraction import extract_rings, iter_rings
from ringselect.core.geometry import (
    INSIDE,
    ON_BORDER,
    OUTSIDE,
    distance_to_segment,
    point_in_geometry,
    point_in_ring,
    point_on_border,
)
from ringselect.core.policy import OverlayType, decide, include, is_reversed
from ringselect.core.selection import (
    RingSelector,
    SelectionMap,
    collect_all_rings,
    select_rings,
    update_selection_map,
)

__all__ = [
    # Classification codes
    "INSIDE",
    "ON_BORDER",
    "OUTSIDE",
    # Policy
    "OverlayType",
    # Selection classes
    "RingSelector",
    "SelectionMap",
    "collect_all_rings",
    "decide",
    # Geometry functions
    "distance_to_segment",
    "extract_rings",
    "include",
    "is_reversed",
    "iter_rings",
    "point_in_geometry",
    "point_in_ring",
    "point_on_border",
    "select_rings",
    "update_selection_map",
]

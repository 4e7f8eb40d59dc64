"""Domain models for ringselect.

This module contains the value types that flow through ring selection:
points, rings, the shape variants, ring identifiers and ring properties.
All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable to plain dictionaries (JSON input and output)
- Free of selection logic

Key classes:
- Point, Ring: Coordinates and closed boundary loops
- Box, Polygon, MultiPolygon: Shape variants of an input geometry
- RingIdentifier: (source_index, multi_index, ring_index) key
- RingProperties: Area, border point, within_code and reversed flag of a ring
"""

from ringselect.domain.identifier import RingIdentifier
from ringselect.domain.properties import RingProperties, WithinClassifier
from ringselect.domain.ring import Point, Ring, WindingDirection
from ringselect.domain.shapes import Box, Geometry, MultiPolygon, Polygon, geometry_from_dict

__all__: list[str] = [
    # Enums
    "WindingDirection",
    # Core types
    "Point",
    "Ring",
    "Box",
    "Polygon",
    "MultiPolygon",
    "Geometry",
    "RingIdentifier",
    "RingProperties",
    "WithinClassifier",
    "geometry_from_dict",
]

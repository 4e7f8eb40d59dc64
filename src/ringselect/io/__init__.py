"""File I/O layer for ringselect.

This module reads geometries and intersection maps from JSON files and
writes selection maps back to JSON, keeping the domain models free of
file handling.

Key functions and classes:
- read_geometry: Load a Box, Ring, Polygon or MultiPolygon
- read_intersection_map: Load identifiers of rings consumed by intersections
- SelectionWriter: Save a selection map
"""

from ringselect.io.reader import parse_intersection_map, read_geometry, read_intersection_map
from ringselect.io.writer import SelectionWriter, selection_from_list, selection_to_list

__all__ = [
    "SelectionWriter",
    "parse_intersection_map",
    "read_geometry",
    "read_intersection_map",
    "selection_from_list",
    "selection_to_list",
]

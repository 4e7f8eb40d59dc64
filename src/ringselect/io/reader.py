"""Readers for geometry and intersection map files.

Both file kinds are JSON. Geometries use the dictionaries produced by the
domain models' to_dict(); intersection maps are lists of ring identifiers,
each either a [source, multi, ring] triple or an object with those keys.
"""

import json
from pathlib import Path
from typing import Any

from ringselect.domain import Geometry, RingIdentifier, geometry_from_dict
from ringselect.exceptions import GeometryLoadError, InvalidGeometryError


def _load_json(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    try:
        with path.open(encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise GeometryLoadError(str(path), f"invalid JSON ({e.msg} at line {e.lineno})") from e
    except UnicodeDecodeError as e:
        raise GeometryLoadError(str(path), f"not UTF-8 text ({e.reason} at byte {e.start})") from e


def read_geometry(path: Path) -> Geometry:
    """Load a geometry from a JSON file.

    Args:
        path: Path to the geometry file

    Returns:
        Box, Ring, Polygon or MultiPolygon

    Raises:
        FileNotFoundError: If the file does not exist
        GeometryLoadError: If the file is not valid JSON or not a geometry
    """
    data = _load_json(path)
    try:
        return geometry_from_dict(data)
    except InvalidGeometryError as e:
        raise GeometryLoadError(str(path), e.details) from e


def parse_intersection_map(data: Any) -> set[RingIdentifier]:
    """Convert decoded JSON into a set of ring identifiers.

    Raises:
        InvalidGeometryError: If an entry is not an identifier
    """
    if isinstance(data, dict):
        data = data.get("rings", [])
    if not isinstance(data, list):
        raise InvalidGeometryError("intersection map must be a list of ring identifiers")

    ring_ids: set[RingIdentifier] = set()
    for entry in data:
        if isinstance(entry, dict):
            ring_ids.add(RingIdentifier.from_dict(entry))
        else:
            ring_ids.add(RingIdentifier.from_sequence(entry))
    return ring_ids


def read_intersection_map(path: Path) -> set[RingIdentifier]:
    """Load the identifiers of rings consumed by intersection processing.

    Args:
        path: Path to the intersection map file

    Returns:
        Set of ring identifiers

    Raises:
        FileNotFoundError: If the file does not exist
        GeometryLoadError: If the file is not valid JSON or malformed
    """
    data = _load_json(path)
    try:
        return parse_intersection_map(data)
    except InvalidGeometryError as e:
        raise GeometryLoadError(str(path), e.details) from e

"""Ring extraction: enumerate the rings of a geometry with their identifiers.

Every shape variant is handled by a single dispatch over the closed set
{Box, Ring, Polygon, MultiPolygon}:

- Box: one implicit ring, always present
- Ring: present only if it has at least one point
- Polygon: exterior first (ring_index -1), then holes numbered 0, 1, 2, ...
- MultiPolygon: each member polygon with multi_index 0, 1, 2, ...

source_index and multi_index stay fixed for the rings of one polygon; only
ring_index advances from hole to hole.
"""

from collections.abc import Iterator

from ringselect.domain import (
    Box,
    Geometry,
    MultiPolygon,
    Polygon,
    Ring,
    RingIdentifier,
    RingProperties,
    WithinClassifier,
)
from ringselect.exceptions import UnsupportedGeometryError


def _polygon_rings(
    polygon: Polygon, ring_id: RingIdentifier
) -> Iterator[tuple[RingIdentifier, Ring]]:
    yield ring_id, polygon.exterior
    for hole in polygon.interiors:
        ring_id = ring_id.next_ring()
        yield ring_id, hole


def iter_rings(
    geometry: Geometry, source_index: int
) -> Iterator[tuple[RingIdentifier, Ring | Box]]:
    """Yield (identifier, ring) for every ring of a geometry.

    Empty rings are still yielded so that hole numbering stays aligned
    with the geometry's hole order; extract_rings() drops them.

    Args:
        geometry: Box, Ring, Polygon or MultiPolygon
        source_index: 0 for the first input geometry, 1 for the second

    Yields:
        Identifier and the ring (or box) it addresses

    Raises:
        UnsupportedGeometryError: If geometry is not a known shape
    """
    ring_id = RingIdentifier(source_index, -1, -1)

    if isinstance(geometry, Box):
        yield ring_id, geometry
    elif isinstance(geometry, Ring):
        yield ring_id, geometry
    elif isinstance(geometry, Polygon):
        yield from _polygon_rings(geometry, ring_id)
    elif isinstance(geometry, MultiPolygon):
        for multi_index, polygon in enumerate(geometry.polygons):
            yield from _polygon_rings(polygon, RingIdentifier(source_index, multi_index, -1))
    else:
        raise UnsupportedGeometryError(geometry)


def extract_rings(
    geometry: Geometry,
    source_index: int,
    other: Geometry | None = None,
    within: WithinClassifier | None = None,
    standalone_within_code: int = -1,
) -> dict[RingIdentifier, RingProperties]:
    """Describe every non-empty ring of a geometry.

    Args:
        geometry: Geometry whose rings are described
        source_index: 0 for the first input geometry, 1 for the second
        other: The other input geometry; when given, within_code of each
            ring is computed against it
        within: Classifier used for within_code (see RingProperties.from_ring)
        standalone_within_code: within_code used when other is None

    Returns:
        Mapping of identifier to RingProperties, one entry per non-empty ring
    """
    result: dict[RingIdentifier, RingProperties] = {}

    for ring_id, ring in iter_rings(geometry, source_index):
        if isinstance(ring, Ring) and ring.is_empty():
            continue
        result[ring_id] = RingProperties.from_ring(
            ring,
            other,
            within=within,
            standalone_within_code=standalone_within_code,
        )

    return result

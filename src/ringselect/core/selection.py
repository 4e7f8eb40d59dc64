"""Selection of standalone rings for an overlay operation.

Rings that take part in an intersection are traversed by the overlay's
turn-following step. Every other ring lies entirely inside or entirely
outside the other geometry and is either copied to the output as a whole
or dropped. This module builds that selection:

1. Describe every ring of both inputs (extraction.extract_rings)
2. Drop rings present in the intersection map
3. Keep the rest according to the overlay policy, resolving `reversed`

Key components:
- update_selection_map: Pure filtering step
- select_rings: Extraction plus filtering for one or two geometries
- RingSelector: Configured, logging front end used by the CLI
"""

from collections.abc import Container, Mapping
from functools import partial

import structlog

from ringselect.config import RingSelectSettings, get_default_settings
from ringselect.core.extraction import extract_rings
from ringselect.core.geometry import point_in_geometry
from ringselect.core.policy import OverlayType, decide
from ringselect.domain import Geometry, RingIdentifier, RingProperties, WithinClassifier
from ringselect.utils import SelectionLogger, SelectionStats

SelectionMap = dict[RingIdentifier, RingProperties]


def update_selection_map(
    overlay: OverlayType,
    intersection_map: Container[RingIdentifier],
    map_with_all: Mapping[RingIdentifier, RingProperties],
    selection_logger: SelectionLogger | None = None,
) -> SelectionMap:
    """Filter described rings down to those contributing to the overlay.

    Neither input is modified; included descriptors are copied with their
    `reversed` flag set by the policy.

    Args:
        overlay: Overlay operation
        intersection_map: Identifiers of rings consumed by intersection
            processing; only membership is consulted
        map_with_all: Every described ring of the input geometries
        selection_logger: Optional logger receiving one event per ring

    Returns:
        New mapping of the selected rings
    """
    selection_map: SelectionMap = {}

    for ring_id, props in map_with_all.items():
        if ring_id in intersection_map:
            if selection_logger is not None:
                selection_logger.log_ring_excluded(str(ring_id))
            continue

        included, reversed_ = decide(overlay, ring_id, props)
        if selection_logger is not None:
            selection_logger.log_ring_decision(
                str(ring_id),
                ring_id.source_index,
                props.area,
                props.within_code,
                included,
                reversed_,
            )
        if included:
            selection_map[ring_id] = props.copy(reversed=reversed_)

    return selection_map


def collect_all_rings(
    geometry1: Geometry,
    geometry2: Geometry | None = None,
    within: WithinClassifier = point_in_geometry,
    standalone_within_code: int = -1,
) -> SelectionMap:
    """Describe every ring of one or two geometries.

    With two geometries, rings of geometry1 get source_index 0 and are
    classified against geometry2, and vice versa for source_index 1. With
    one geometry, its rings get source_index 0 and standalone_within_code.
    """
    if geometry2 is None:
        return extract_rings(geometry1, 0, standalone_within_code=standalone_within_code)

    map_with_all = extract_rings(geometry1, 0, geometry2, within=within)
    map_with_all.update(extract_rings(geometry2, 1, geometry1, within=within))
    return map_with_all


def select_rings(
    overlay: OverlayType,
    geometry1: Geometry,
    geometry2: Geometry | None = None,
    intersection_map: Container[RingIdentifier] | None = None,
    *,
    within: WithinClassifier | None = None,
    config: RingSelectSettings | None = None,
    standalone_within_code: int | None = None,
) -> SelectionMap:
    """Select the rings of one or two geometries that belong to the overlay.

    Args:
        overlay: Overlay operation
        geometry1: First input geometry (source_index 0)
        geometry2: Second input geometry (source_index 1), or None for the
            single-geometry form
        intersection_map: Identifiers of rings already consumed by
            intersection processing
        within: Classifier producing within_code for a ring's border point;
            point_in_geometry with the configured border tolerance if None
        config: Settings supplying border_tolerance and the standalone
            within_code (defaults if None)
        standalone_within_code: within_code for the single-geometry form;
            overrides the configured value

    Returns:
        Mapping of selected ring identifiers to their properties
    """
    settings = config if config is not None else get_default_settings()
    if within is None:
        within = partial(point_in_geometry, tolerance=settings.geometry.border_tolerance)
    if standalone_within_code is None:
        standalone_within_code = settings.selection.standalone_within_code

    map_with_all = collect_all_rings(
        geometry1,
        geometry2,
        within=within,
        standalone_within_code=standalone_within_code,
    )
    return update_selection_map(overlay, intersection_map or {}, map_with_all)


class RingSelector:
    """Configured ring selection with structured logging.

    The selector holds no per-call state: every call builds fresh maps, so
    one instance may be shared between threads.
    """

    def __init__(
        self,
        settings: RingSelectSettings | None = None,
        within: WithinClassifier | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self.settings = settings if settings is not None else get_default_settings()
        self.logger = logger if logger is not None else structlog.get_logger("ringselect.selection")
        if within is None:
            within = partial(
                point_in_geometry, tolerance=self.settings.geometry.border_tolerance
            )
        self.within = within

    def collect(
        self, geometry1: Geometry, geometry2: Geometry | None = None
    ) -> SelectionMap:
        """Describe every non-empty ring of the inputs, without filtering."""
        return collect_all_rings(
            geometry1,
            geometry2,
            within=self.within,
            standalone_within_code=self.settings.selection.standalone_within_code,
        )

    def select(
        self,
        overlay: OverlayType,
        geometry1: Geometry,
        geometry2: Geometry | None = None,
        intersection_map: Container[RingIdentifier] | None = None,
    ) -> SelectionMap:
        """Select rings for an overlay; see select_rings()."""
        selection_map, _ = self.select_with_stats(overlay, geometry1, geometry2, intersection_map)
        return selection_map

    def select_with_stats(
        self,
        overlay: OverlayType,
        geometry1: Geometry,
        geometry2: Geometry | None = None,
        intersection_map: Container[RingIdentifier] | None = None,
    ) -> tuple[SelectionMap, SelectionStats]:
        """Select rings and report how many were excluded, included and reversed."""
        if geometry2 is None:
            self.logger.debug("Single-geometry selection", overlay=overlay.value)

        map_with_all = self.collect(geometry1, geometry2)
        selection_logger = SelectionLogger(self.logger)
        selection_map = update_selection_map(
            overlay,
            intersection_map or {},
            map_with_all,
            selection_logger=selection_logger,
        )
        selection_logger.log_selection_complete(overlay.value)
        return selection_map, selection_logger.stats

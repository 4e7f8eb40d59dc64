"""Unit tests for selection map building.

Tests cover:
- Intersection map exclusion
- Policy application and `reversed` resolution
- Single and dual geometry forms
- Purity and idempotence
- RingSelector configuration and statistics
"""

import pytest

from ringselect.config import (
    GeometryConfig,
    RingSelectSettings,
    SelectionConfig,
    get_default_settings,
)
from ringselect.core.policy import OverlayType
from ringselect.core.selection import (
    RingSelector,
    collect_all_rings,
    select_rings,
    update_selection_map,
)
from ringselect.domain import Point, Polygon, Ring, RingIdentifier, RingProperties


def _square(x0: float, y0: float, size: float) -> Ring:
    return Ring(
        points=[
            Point(x0, y0),
            Point(x0 + size, y0),
            Point(x0 + size, y0 + size),
            Point(x0, y0 + size),
        ]
    )


def _all_codes_map() -> dict[RingIdentifier, RingProperties]:
    """Three rings per source, one for each within_code."""
    rings = {}
    for source in (0, 1):
        for ring_index, code in zip((-1, 0, 1), (-1, 0, 1)):
            rings[RingIdentifier(source, -1, ring_index)] = RingProperties(
                area=float(ring_index + 2), within_code=code
            )
    return rings


class TestUpdateSelectionMap:
    """Tests for the filtering step."""

    @pytest.mark.parametrize("overlay", list(OverlayType))
    def test_no_identifier_invented(self, overlay):
        map_with_all = _all_codes_map()
        selection = update_selection_map(overlay, {}, map_with_all)
        assert set(selection) <= set(map_with_all)

    @pytest.mark.parametrize("overlay", list(OverlayType))
    def test_intersection_rings_excluded(self, overlay):
        """Rings in the intersection map never reach the output."""
        map_with_all = _all_codes_map()
        intersection_map = {ring_id: object() for ring_id in list(map_with_all)[::2]}
        selection = update_selection_map(overlay, intersection_map, map_with_all)
        assert not set(selection) & set(intersection_map)

    def test_intersection_map_as_set(self):
        """Any container with membership tests works as intersection map."""
        map_with_all = _all_codes_map()
        excluded = {RingIdentifier(0, -1, -1)}
        selection = update_selection_map(OverlayType.UNION, excluded, map_with_all)
        assert list(selection) == [RingIdentifier(1, -1, -1)]

    def test_union_keeps_outside_rings(self):
        selection = update_selection_map(OverlayType.UNION, {}, _all_codes_map())
        assert sorted(selection) == [RingIdentifier(0, -1, -1), RingIdentifier(1, -1, -1)]
        assert not any(props.reversed for props in selection.values())

    def test_intersection_keeps_inside_rings(self):
        selection = update_selection_map(OverlayType.INTERSECTION, {}, _all_codes_map())
        assert sorted(selection) == [RingIdentifier(0, -1, 1), RingIdentifier(1, -1, 1)]
        assert not any(props.reversed for props in selection.values())

    def test_difference_reverses_second_geometry(self):
        selection = update_selection_map(OverlayType.DIFFERENCE, {}, _all_codes_map())
        assert sorted(selection) == [RingIdentifier(0, -1, -1), RingIdentifier(1, -1, 1)]
        assert selection[RingIdentifier(0, -1, -1)].reversed is False
        assert selection[RingIdentifier(1, -1, 1)].reversed is True

    def test_inputs_not_modified(self):
        """Descriptors in the unfiltered map keep reversed == False."""
        map_with_all = _all_codes_map()
        selection = update_selection_map(OverlayType.DIFFERENCE, {}, map_with_all)
        assert selection[RingIdentifier(1, -1, 1)] is not map_with_all[RingIdentifier(1, -1, 1)]
        assert not any(props.reversed for props in map_with_all.values())
        assert map_with_all == _all_codes_map()

    def test_stale_reversed_flag_overwritten(self):
        """The policy decides reversed regardless of the incoming value."""
        map_with_all = {
            RingIdentifier(0, -1, -1): RingProperties(area=1.0, within_code=-1, reversed=True)
        }
        selection = update_selection_map(OverlayType.UNION, {}, map_with_all)
        assert selection[RingIdentifier(0, -1, -1)].reversed is False

    def test_descriptor_fields_preserved(self):
        props = RingProperties(area=-7.5, point=Point(1, 2), within_code=1)
        selection = update_selection_map(
            OverlayType.INTERSECTION, {}, {RingIdentifier(1, 0, 3): props}
        )
        assert selection[RingIdentifier(1, 0, 3)] == props


class TestSelectRings:
    """Tests for extraction plus filtering."""

    def test_dual_geometry_union(self):
        """Outer ring survives a union; the ring inside it does not."""
        outer = _square(0, 0, 10)
        inner = _square(2, 2, 2)
        selection = select_rings(OverlayType.UNION, outer, inner)
        assert list(selection) == [RingIdentifier(0, -1, -1)]

    def test_dual_geometry_difference_hole(self):
        """Subtracting a contained ring turns it into a reversed hole."""
        outer = _square(0, 0, 10)
        inner = _square(2, 2, 2)
        selection = select_rings(OverlayType.DIFFERENCE, outer, inner)
        assert sorted(selection) == [RingIdentifier(0, -1, -1), RingIdentifier(1, -1, -1)]
        assert selection[RingIdentifier(1, -1, -1)].reversed is True
        assert selection[RingIdentifier(0, -1, -1)].reversed is False

    def test_empty_rings_never_selected(self):
        """Empty rings are absent from every overlay's output."""
        polygon = Polygon(exterior=_square(0, 0, 10), interiors=[Ring()])
        for overlay in OverlayType:
            selection = select_rings(overlay, polygon, _square(50, 50, 1))
            assert RingIdentifier(0, -1, 0) not in selection

    def test_intersection_map_respected(self):
        outer = _square(0, 0, 10)
        inner = _square(2, 2, 2)
        selection = select_rings(
            OverlayType.DIFFERENCE, outer, inner, {RingIdentifier(1, -1, -1): ["turn"]}
        )
        assert list(selection) == [RingIdentifier(0, -1, -1)]

    def test_custom_classifier(self):
        """within_code comes from the injected classifier."""
        selection = select_rings(
            OverlayType.INTERSECTION,
            _square(0, 0, 1),
            _square(100, 100, 1),
            within=lambda point, geometry: 1,
        )
        assert sorted(selection) == [RingIdentifier(0, -1, -1), RingIdentifier(1, -1, -1)]

    def test_single_geometry_defaults(self):
        """Single-geometry rings count as outside: union keeps all, intersection none."""
        polygon = Polygon(exterior=_square(0, 0, 10), interiors=[_square(2, 2, 2).reversed()])
        assert len(select_rings(OverlayType.UNION, polygon)) == 2
        assert select_rings(OverlayType.INTERSECTION, polygon) == {}

    def test_single_geometry_override(self):
        polygon = Polygon(exterior=_square(0, 0, 10))
        selection = select_rings(OverlayType.INTERSECTION, polygon, standalone_within_code=1)
        assert list(selection) == [RingIdentifier(0, -1, -1)]

    def test_config_keyword(self):
        """Settings can be passed directly to the one-shot form."""
        selection = select_rings(OverlayType.UNION, _square(0, 0, 1), config=get_default_settings())
        assert list(selection) == [RingIdentifier(0, -1, -1)]

    def test_config_border_tolerance(self):
        other = _square(0, 0, 10)
        near = _square(2, 10.0001, 2)
        loose = RingSelectSettings(geometry=GeometryConfig(border_tolerance=1e-3))
        assert RingIdentifier(0, -1, -1) not in select_rings(
            OverlayType.UNION, near, other, config=loose
        )
        assert RingIdentifier(0, -1, -1) in select_rings(OverlayType.UNION, near, other)

    def test_config_standalone_within_code(self):
        settings = RingSelectSettings(selection=SelectionConfig(standalone_within_code=1))
        selection = select_rings(OverlayType.INTERSECTION, _square(0, 0, 1), config=settings)
        assert list(selection) == [RingIdentifier(0, -1, -1)]

    def test_explicit_standalone_within_code_wins_over_config(self):
        settings = RingSelectSettings(selection=SelectionConfig(standalone_within_code=1))
        selection = select_rings(
            OverlayType.INTERSECTION, _square(0, 0, 1), config=settings, standalone_within_code=-1
        )
        assert selection == {}

    @pytest.mark.parametrize("overlay", list(OverlayType))
    def test_idempotent(self, overlay):
        """Two calls with identical inputs give identical maps."""
        g1 = Polygon(exterior=_square(0, 0, 10), interiors=[_square(1, 1, 1).reversed()])
        g2 = _square(5, 5, 2)
        intersection_map = {RingIdentifier(0, -1, 0): None}
        first = select_rings(overlay, g1, g2, intersection_map)
        second = select_rings(overlay, g1, g2, intersection_map)
        assert first == second

    def test_collect_all_rings_sources(self):
        """Both inputs are described, each against the other."""
        rings = collect_all_rings(_square(0, 0, 10), _square(2, 2, 2))
        assert rings[RingIdentifier(0, -1, -1)].within_code == -1
        assert rings[RingIdentifier(1, -1, -1)].within_code == 1


class TestRingSelector:
    """Tests for the configured selector."""

    def test_default_settings(self):
        selector = RingSelector()
        selection = selector.select(OverlayType.UNION, _square(0, 0, 10), _square(2, 2, 2))
        assert list(selection) == [RingIdentifier(0, -1, -1)]

    def test_stats(self):
        selector = RingSelector()
        polygon = Polygon(exterior=_square(0, 0, 10), interiors=[_square(6, 6, 2).reversed()])
        _, stats = selector.select_with_stats(
            OverlayType.DIFFERENCE,
            polygon,
            _square(1, 1, 2),
            {RingIdentifier(0, -1, 0)},
        )
        assert stats.total_rings == 3
        assert stats.excluded_count == 1
        assert stats.included_count == 2
        assert stats.reversed_count == 1
        assert stats.rejected_count == 0

    def test_border_tolerance_setting(self):
        """A ring just off the other's edge counts as touching with a loose tolerance."""
        other = _square(0, 0, 10)
        near = _square(2, 10.0001, 2)
        loose = RingSelector(RingSelectSettings(geometry=GeometryConfig(border_tolerance=1e-3)))
        strict = RingSelector()
        assert loose.collect(near, other)[RingIdentifier(0, -1, -1)].within_code == 0
        assert strict.collect(near, other)[RingIdentifier(0, -1, -1)].within_code == -1

    def test_standalone_within_code_setting(self):
        selector = RingSelector(
            RingSelectSettings(selection=SelectionConfig(standalone_within_code=1))
        )
        selection = selector.select(OverlayType.INTERSECTION, _square(0, 0, 1))
        assert list(selection) == [RingIdentifier(0, -1, -1)]

    def test_injected_classifier(self):
        selector = RingSelector(within=lambda point, geometry: 0)
        assert selector.select(OverlayType.UNION, _square(0, 0, 1), _square(0, 0, 1)) == {}

"""Unit tests for the file I/O layer.

Tests for geometry and intersection map readers and the selection writer.
"""

import json
from pathlib import Path

import pytest

from ringselect.domain import Box, Point, Polygon, RingIdentifier, RingProperties
from ringselect.exceptions import GeometryLoadError, SelectionSaveError
from ringselect.io import (
    SelectionWriter,
    parse_intersection_map,
    read_geometry,
    read_intersection_map,
    selection_from_list,
    selection_to_list,
)


def _write(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestReadGeometry:
    """Tests for read_geometry."""

    def test_read_polygon(self, tmp_path):
        path = _write(
            tmp_path / "polygon.json",
            {
                "type": "polygon",
                "exterior": [[0, 0], [10, 0], [10, 10], [0, 10]],
                "interiors": [[[2, 2], [2, 4], [4, 4], [4, 2]]],
            },
        )
        geometry = read_geometry(path)
        assert isinstance(geometry, Polygon)
        assert len(geometry.interiors) == 1
        assert geometry.exterior.points[1] == Point(10, 0)

    def test_read_box(self, tmp_path):
        path = _write(tmp_path / "box.json", {"type": "box", "min": [0, 0], "max": [2, 3]})
        assert read_geometry(path) == Box(Point(0, 0), Point(2, 3))

    def test_type_is_case_insensitive(self, tmp_path):
        path = _write(tmp_path / "ring.json", {"type": "Ring", "points": [[0, 0], [1, 0], [1, 1]]})
        assert len(read_geometry(path)) == 3

    def test_nonexistent_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_geometry(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(GeometryLoadError, match="invalid JSON"):
            read_geometry(path)

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "binary.json"
        path.write_bytes(b"\xff\xfe")
        with pytest.raises(GeometryLoadError, match="not UTF-8"):
            read_geometry(path)

    def test_unknown_type(self, tmp_path):
        path = _write(tmp_path / "line.json", {"type": "linestring"})
        with pytest.raises(GeometryLoadError) as exc_info:
            read_geometry(path)
        assert exc_info.value.path == str(path)
        assert "unknown geometry type" in exc_info.value.reason

    def test_bad_coordinates(self, tmp_path):
        path = _write(tmp_path / "ring.json", {"type": "ring", "points": [[0, 0], [1]]})
        with pytest.raises(GeometryLoadError, match="coordinate pair"):
            read_geometry(path)


class TestReadIntersectionMap:
    """Tests for intersection map parsing."""

    def test_triples(self, tmp_path):
        path = _write(tmp_path / "turns.json", [[0, -1, -1], [1, 0, 2]])
        assert read_intersection_map(path) == {
            RingIdentifier(0, -1, -1),
            RingIdentifier(1, 0, 2),
        }

    def test_objects(self):
        data = [{"source_index": 1}, {"source_index": 0, "multi_index": 2, "ring_index": 0}]
        assert parse_intersection_map(data) == {
            RingIdentifier(1, -1, -1),
            RingIdentifier(0, 2, 0),
        }

    def test_wrapped_in_object(self):
        assert parse_intersection_map({"rings": [[0, -1, 1]]}) == {RingIdentifier(0, -1, 1)}

    def test_empty(self):
        assert parse_intersection_map([]) == set()

    def test_malformed(self, tmp_path):
        path = _write(tmp_path / "turns.json", [[0, 1]])
        with pytest.raises(GeometryLoadError, match="malformed ring identifier"):
            read_intersection_map(path)

    def test_not_a_list(self, tmp_path):
        path = _write(tmp_path / "turns.json", 42)
        with pytest.raises(GeometryLoadError):
            read_intersection_map(path)


class TestSelectionWriter:
    """Tests for SelectionWriter."""

    def _selection(self):
        return {
            RingIdentifier(1, -1, -1): RingProperties(
                area=4.0, point=Point(1, 0), within_code=1, reversed=True
            ),
            RingIdentifier(0, -1, -1): RingProperties(area=10.0, point=Point(2, 0), within_code=-1),
        }

    def test_entries_sorted_by_identifier(self):
        entries = selection_to_list(self._selection())
        assert [e["id"]["source_index"] for e in entries] == [0, 1]
        assert entries[1]["reversed"] is True
        assert entries[0]["point"] == [2.0, 0.0]

    def test_save(self, tmp_path):
        output = tmp_path / "out" / "selected.json"
        SelectionWriter(output).save(self._selection(), overlay="difference")

        document = json.loads(output.read_text(encoding="utf-8"))
        assert document["overlay"] == "difference"
        assert len(document["rings"]) == 2
        assert selection_from_list(document["rings"]) == self._selection()

    def test_save_without_overlay(self, tmp_path):
        output = tmp_path / "selected.json"
        SelectionWriter(output).save({})
        assert json.loads(output.read_text(encoding="utf-8")) == {"rings": []}

    def test_save_failure(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("", encoding="utf-8")
        writer = SelectionWriter(blocker / "selected.json")
        with pytest.raises(SelectionSaveError):
            writer.save(self._selection())

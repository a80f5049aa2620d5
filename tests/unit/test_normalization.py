"""Tests for boundary normalisation.

Covers:
- GeoJSON Polygon, Feature, nested-ring and flat-ring inputs
- JSON text vs already decoded input
- Point filtering (non-numeric, NaN, infinite, short points, booleans)
- Empty outcomes and their reasons
- Round-trip through ring_to_polygon / ring_to_json
"""

from __future__ import annotations

import json
import logging

import pytest

from sector_boundaries.models.point import LatLng
from sector_boundaries.models.ring import CanonicalRing
from sector_boundaries.normalization import (
    BoundaryShape,
    Empty,
    EmptyReason,
    Parsed,
    filter_points,
    normalize,
    parse_boundary,
    ring_to_json,
    ring_to_polygon,
    to_lat_lng,
)

LIMA_EXPECTED = [
    LatLng(lat=-12.05, lng=-77.03),
    LatLng(lat=-12.05, lng=-77.02),
    LatLng(lat=-12.04, lng=-77.02),
    LatLng(lat=-12.04, lng=-77.03),
]


# ===========================================================================
# Recognised shapes
# ===========================================================================


class TestPolygonInput:
    """GeoJSON Polygon input."""

    def test_polygon_dict(self, lima_polygon: dict[str, object]) -> None:
        ring = normalize(lima_polygon)
        assert ring is not None
        assert list(ring) == LIMA_EXPECTED

    def test_polygon_json_text(self, lima_polygon_json: str) -> None:
        ring = normalize(lima_polygon_json)
        assert ring is not None
        assert list(ring) == LIMA_EXPECTED

    def test_point_count_matches_outer_ring(self) -> None:
        coords = [[float(i), float(-i)] for i in range(7)]
        ring = normalize({"type": "Polygon", "coordinates": [coords]})
        assert ring is not None
        assert len(ring) == 7

    def test_axis_order_swapped(self) -> None:
        ring = normalize({"type": "Polygon", "coordinates": [[[10.0, 20.0]]]})
        assert ring is not None
        assert ring[0] == LatLng(lat=20.0, lng=10.0)

    def test_holes_ignored(self, lima_polygon: dict[str, object]) -> None:
        hole = [[-77.025, -12.045], [-77.024, -12.045], [-77.024, -12.044]]
        with_hole = {"type": "Polygon", "coordinates": [*lima_polygon["coordinates"], hole]}  # type: ignore[misc]
        assert normalize(with_hole) == normalize(lima_polygon)

    def test_shape_reported(self, lima_polygon: dict[str, object]) -> None:
        result = parse_boundary(lima_polygon)
        assert isinstance(result, Parsed)
        assert result.shape is BoundaryShape.POLYGON

    def test_empty_coordinates_is_empty(self) -> None:
        result = parse_boundary({"type": "Polygon", "coordinates": []})
        assert isinstance(result, Empty)

    def test_missing_coordinates_is_unrecognised(self) -> None:
        result = parse_boundary({"type": "Polygon"})
        assert result == Empty(EmptyReason.UNRECOGNISED_SHAPE)


class TestFeatureInput:
    """GeoJSON Feature wrapping a Polygon."""

    def test_feature_equals_geometry(self, lima_feature: dict[str, object]) -> None:
        assert normalize(lima_feature) == normalize(lima_feature["geometry"])

    def test_feature_json_text(self, lima_feature: dict[str, object]) -> None:
        ring = normalize(json.dumps(lima_feature))
        assert ring is not None
        assert list(ring) == LIMA_EXPECTED

    def test_shape_reported(self, lima_feature: dict[str, object]) -> None:
        result = parse_boundary(lima_feature)
        assert isinstance(result, Parsed)
        assert result.shape is BoundaryShape.FEATURE

    def test_feature_with_point_geometry(self) -> None:
        feature = {"type": "Feature", "geometry": {"type": "Point", "coordinates": [-77.0, -12.0]}}
        assert normalize(feature) is None

    def test_feature_without_geometry(self) -> None:
        assert normalize({"type": "Feature", "properties": {}}) is None


class TestRawArrayInput:
    """Legacy raw ring arrays."""

    def test_flat_and_nested_are_identical(self) -> None:
        flat = [[-77.03, -12.05], [-77.02, -12.05], [-77.02, -12.04]]
        nested = [flat]
        assert normalize(flat) == normalize(nested)
        assert normalize(flat) is not None

    def test_nested_shape_reported(self) -> None:
        result = parse_boundary([[[1.0, 2.0], [3.0, 4.0]]])
        assert isinstance(result, Parsed)
        assert result.shape is BoundaryShape.NESTED_RINGS

    def test_flat_shape_reported(self) -> None:
        result = parse_boundary([[1.0, 2.0], [3.0, 4.0]])
        assert isinstance(result, Parsed)
        assert result.shape is BoundaryShape.FLAT_RING

    def test_nested_uses_first_ring_only(self) -> None:
        ring = normalize([[[1.0, 2.0]], [[5.0, 6.0], [7.0, 8.0]]])
        assert ring is not None
        assert list(ring) == [LatLng(lat=2.0, lng=1.0)]

    def test_raw_array_json_text(self) -> None:
        ring = normalize("[[-77.03, -12.05], [-77.02, -12.05]]")
        assert ring is not None
        assert ring[1] == LatLng(lat=-12.05, lng=-77.02)

    def test_array_of_numbers_is_unrecognised(self) -> None:
        assert parse_boundary([1.0, 2.0]) == Empty(EmptyReason.UNRECOGNISED_SHAPE)


# ===========================================================================
# Point filtering
# ===========================================================================


class TestPointFiltering:
    """Invalid points are dropped; valid ones are kept in order."""

    def test_partial_corruption_tolerated(self) -> None:
        raw = [[1.0, 2.0], ["a", 3.0], [4.0], None, [5.0, 6.0]]
        result = parse_boundary(raw)
        assert isinstance(result, Parsed)
        assert list(result.ring) == [LatLng(lat=2.0, lng=1.0), LatLng(lat=6.0, lng=5.0)]
        assert result.dropped_points == 3

    def test_nan_excluded(self) -> None:
        ring = normalize([[float("nan"), 1.0], [2.0, 3.0]])
        assert ring is not None
        assert list(ring) == [LatLng(lat=3.0, lng=2.0)]

    def test_nan_from_json_text_excluded(self) -> None:
        ring = normalize("[[NaN, 1.0], [2.0, 3.0]]")
        assert ring is not None
        assert len(ring) == 1

    def test_infinity_excluded(self) -> None:
        assert normalize([[float("inf"), 1.0]]) is None

    def test_oversized_integer_excluded(self) -> None:
        ring = normalize("[[" + "9" * 400 + ", -12.05], [-77.02, -12.05]]")
        assert ring is not None
        assert list(ring) == [LatLng(lat=-12.05, lng=-77.02)]

    def test_oversized_integer_point(self) -> None:
        assert to_lat_lng([10**400, 1.0]) is None

    def test_numeric_strings_excluded(self) -> None:
        assert normalize([["-77.03", "-12.05"]]) is None

    def test_booleans_excluded(self) -> None:
        assert to_lat_lng([True, 1.0]) is None

    def test_integers_accepted(self) -> None:
        assert to_lat_lng([1, 2]) == LatLng(lat=2.0, lng=1.0)

    def test_altitude_ignored(self) -> None:
        assert to_lat_lng([-77.03, -12.05, 150.0]) == LatLng(lat=-12.05, lng=-77.03)

    def test_tuple_points_accepted(self) -> None:
        assert to_lat_lng((-77.03, -12.05)) == LatLng(lat=-12.05, lng=-77.03)

    def test_all_invalid_is_empty(self) -> None:
        result = parse_boundary({"type": "Polygon", "coordinates": [[["x", "y"], [None, 1]]]})
        assert result == Empty(EmptyReason.NO_VALID_POINTS)

    def test_non_list_ring_yields_nothing(self) -> None:
        assert filter_points("not a ring") == ([], 0)


# ===========================================================================
# Empty outcomes
# ===========================================================================


class TestEmptyOutcomes:
    """Absent or unusable input never raises."""

    @pytest.mark.parametrize("raw", [None, "", [], {}])
    def test_no_input(self, raw: object) -> None:
        assert parse_boundary(raw) == Empty(EmptyReason.NO_INPUT)
        assert normalize(raw) is None

    def test_malformed_json_returns_none(self) -> None:
        assert normalize("{not valid json") is None
        assert parse_boundary("{not valid json") == Empty(EmptyReason.INVALID_JSON)

    def test_whitespace_is_invalid_json(self) -> None:
        assert parse_boundary("   ") == Empty(EmptyReason.INVALID_JSON)

    def test_malformed_json_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="sector_boundaries.normalization"):
            normalize("{not valid json")
        assert "not valid JSON" in caplog.text

    @pytest.mark.parametrize(
        "raw",
        [
            "null",
            "42",
            '"a string"',
            {"type": "LineString", "coordinates": [[0, 0], [1, 1]]},
            {"foo": "bar"},
            42,
            3.5,
        ],
    )
    def test_unrecognised_shapes(self, raw: object) -> None:
        assert normalize(raw) is None

    def test_deeply_nested_json_does_not_raise(self) -> None:
        assert normalize("[" * 5_000 + "]" * 5_000) is None


# ===========================================================================
# Serialisation round trip
# ===========================================================================


class TestRoundTrip:
    """Feeding a normalised ring back reproduces it."""

    def test_ring_to_polygon_shape(self) -> None:
        ring = CanonicalRing((LatLng(lat=-12.05, lng=-77.03), LatLng(lat=-12.04, lng=-77.02)))
        assert ring_to_polygon(ring) == {
            "type": "Polygon",
            "coordinates": [[[-77.03, -12.05], [-77.02, -12.04]]],
        }

    def test_round_trip_dict(self, lima_polygon: dict[str, object]) -> None:
        ring = normalize(lima_polygon)
        assert ring is not None
        assert normalize(ring_to_polygon(ring)) == ring

    def test_round_trip_json_from_legacy_array(self) -> None:
        ring = normalize([[1.5, 2.5], ["bad"], [3.5, 4.5]])
        assert ring is not None
        assert normalize(ring_to_json(ring)) == ring

    def test_normalize_is_idempotent(self, lima_polygon_json: str) -> None:
        assert normalize(lima_polygon_json) == normalize(lima_polygon_json)

"""Tests for the globe and map builders."""

from __future__ import annotations

import pytest

from geo_distance.config import MAP_ZOOM, TILE_URL
from geo_distance.geo import haversine_km
from geo_distance.map_layers import (
    arcs_data,
    build_globe_deck,
    build_map_figure,
    great_circle_points,
    points_data,
)
from geo_distance.models import CoordinatePair

MINYA_NY = CoordinatePair.from_flat(28.1094, 30.75, 40.7128, -74.0060)


class TestLayerData:
    def test_arcs_data(self):
        arcs = arcs_data(MINYA_NY)
        assert len(arcs) == 1
        arc = arcs[0]
        assert (arc["startLat"], arc["startLng"]) == (28.1094, 30.75)
        assert (arc["endLat"], arc["endLng"]) == (40.7128, -74.0060)

    def test_points_data(self):
        points = points_data(MINYA_NY, "Minya, Egypt", "New York")
        assert [p["label"] for p in points] == ["Minya, Egypt", "New York"]
        assert (points[1]["lat"], points[1]["lng"]) == (40.7128, -74.0060)


class TestGreatCirclePoints:
    def test_endpoints(self):
        path = great_circle_points(MINYA_NY, n=32)
        assert len(path) == 32
        assert path[0] == pytest.approx((28.1094, 30.75))
        assert path[-1] == pytest.approx((40.7128, -74.0060))

    def test_midpoint_halves_distance(self):
        path = great_circle_points(MINYA_NY, n=3)
        total = haversine_km(28.1094, 30.75, 40.7128, -74.0060)
        mid_lat, mid_lon = path[1]
        assert haversine_km(28.1094, 30.75, mid_lat, mid_lon) == pytest.approx(total / 2, rel=1e-6)

    def test_progresses_monotonically(self):
        path = great_circle_points(MINYA_NY, n=16)
        dists = [haversine_km(28.1094, 30.75, lat, lon) for lat, lon in path]
        assert dists == sorted(dists)

    def test_antimeridian_is_unwrapped(self):
        pair = CoordinatePair.from_flat(0, 170, 0, -170)
        path = great_circle_points(pair, n=21)
        lons = [lon for _, lon in path]
        assert lons[0] == pytest.approx(170)
        assert lons[-1] == pytest.approx(190)
        assert all(abs(b - a) < 5 for a, b in zip(lons, lons[1:]))

    def test_coincident_points_fall_back(self):
        pair = CoordinatePair.from_flat(10, 20, 10, 20)
        assert great_circle_points(pair) == [(10, 20), (10, 20)]

    def test_antipodal_points_fall_back(self):
        pair = CoordinatePair.from_flat(0, 0, 0, 180)
        assert great_circle_points(pair) == [(0, 0), (0, 180)]


class TestBuilders:
    def test_globe_deck_layers(self):
        deck = build_globe_deck(MINYA_NY)
        assert [layer.type for layer in deck.layers] == ["BitmapLayer", "ArcLayer", "ScatterplotLayer"]

    def test_map_figure(self):
        fig = build_map_figure(MINYA_NY, n=10)
        assert len(fig.data) == 2
        path, endpoints = fig.data
        assert len(path.lat) == 10
        assert list(endpoints.lat) == [28.1094, 40.7128]
        assert list(endpoints.lon) == [30.75, -74.0060]

    def test_map_uses_raster_tiles(self):
        fig = build_map_figure(MINYA_NY)
        map_layout = fig.layout.map
        assert map_layout.zoom == MAP_ZOOM
        assert map_layout.center.lat == 28.1094
        layer = map_layout.layers[0]
        assert layer.sourcetype == "raster"
        assert list(layer.source) == [TILE_URL]

"""Globe and slippy-map builders for a coordinate pair.

Both views are pure functions of the pair: the dashboard rebuilds them on every
rerun and never mutates them.
"""

from __future__ import annotations

import numpy as np
import plotly.graph_objects as go
import pydeck as pdk

from geo_distance.config import GLOBE_IMAGE_URL, MAP_ZOOM, TILE_ATTRIBUTION, TILE_URL
from geo_distance.geo import to_cartesian
from geo_distance.models import CoordinatePair

ARC_COLOR = [30, 90, 255]
POINT_COLOR = [255, 50, 50]
PATH_COLOR = "#1e5aff"
POINT_RADIUS_M = 80_000


def arcs_data(pair: CoordinatePair) -> list[dict]:
    """Arc records for the globe, one per pair."""
    return [
        {
            "startLat": pair.origin.latitude,
            "startLng": pair.origin.longitude,
            "endLat": pair.destination.latitude,
            "endLng": pair.destination.longitude,
            "color": ARC_COLOR,
        }
    ]


def points_data(
    pair: CoordinatePair,
    origin_label: str = "Origin",
    destination_label: str = "Destination",
) -> list[dict]:
    """Marker records for the globe: origin first, destination second."""
    return [
        {"lat": pair.origin.latitude, "lng": pair.origin.longitude, "label": origin_label},
        {"lat": pair.destination.latitude, "lng": pair.destination.longitude, "label": destination_label},
    ]


def great_circle_points(pair: CoordinatePair, n: int = 64) -> list[tuple[float, float]]:
    """Sample ``n`` (lat, lon) points along the great circle from origin to destination.

    Longitudes are unwrapped, so they may leave [-180, 180] when the path
    crosses the antimeridian. Coincident and antipodal pairs have no unique
    great circle and return just the two endpoints.
    """
    p1 = np.array(to_cartesian(*pair.origin.as_tuple(), radius=1.0))
    p2 = np.array(to_cartesian(*pair.destination.as_tuple(), radius=1.0))
    omega = np.arccos(np.clip(np.dot(p1, p2), -1.0, 1.0))
    sin_omega = np.sin(omega)

    if n < 2 or sin_omega < 1e-9:
        return [pair.origin.as_tuple(), pair.destination.as_tuple()]

    t = np.linspace(0.0, 1.0, n)[:, np.newaxis]
    pts = (np.sin((1.0 - t) * omega) * p1 + np.sin(t * omega) * p2) / sin_omega

    lats = np.degrees(np.arcsin(np.clip(pts[:, 2], -1.0, 1.0)))
    lats[0], lats[-1] = pair.origin.latitude, pair.destination.latitude

    raw_lons = np.arctan2(pts[:, 1], pts[:, 0])
    raw_lons[0] = np.radians(pair.origin.longitude)
    raw_lons[-1] = np.radians(pair.destination.longitude)
    lons = np.degrees(np.unwrap(raw_lons))

    return list(zip(lats.tolist(), lons.tolist()))


def build_globe_deck(
    pair: CoordinatePair,
    origin_label: str = "Origin",
    destination_label: str = "Destination",
) -> pdk.Deck:
    """3D globe with an earth texture, the great-circle arc and both endpoints."""
    earth = pdk.Layer(
        "BitmapLayer",
        id="earth",
        image=GLOBE_IMAGE_URL,
        bounds=[-180, -90, 180, 90],
    )

    arc = pdk.Layer(
        "ArcLayer",
        id="arc",
        data=arcs_data(pair),
        get_source_position="[startLng, startLat]",
        get_target_position="[endLng, endLat]",
        get_source_color="color",
        get_target_color="color",
        get_width=3,
        great_circle=True,
    )

    points = pdk.Layer(
        "ScatterplotLayer",
        id="points",
        data=points_data(pair, origin_label, destination_label),
        get_position="[lng, lat]",
        get_radius=POINT_RADIUS_M,
        get_fill_color=POINT_COLOR,
        pickable=True,
        auto_highlight=True,
    )

    view_state = pdk.ViewState(
        latitude=pair.origin.latitude,
        longitude=pair.origin.longitude,
        zoom=0.6,
    )

    return pdk.Deck(
        layers=[earth, arc, points],
        views=[pdk.View(type="_GlobeView", controller=True)],
        initial_view_state=view_state,
        tooltip={"text": "{label}\n{lat}, {lng}"},
        map_provider=None,
        map_style=None,
    )


def build_map_figure(
    pair: CoordinatePair,
    n: int = 64,
    origin_label: str = "Origin",
    destination_label: str = "Destination",
    height: int = 500,
) -> go.Figure:
    """2D slippy map over raster tiles with the path polyline and both endpoints."""
    path = great_circle_points(pair, n)
    path_lats, path_lons = zip(*path)

    fig = go.Figure()
    fig.add_trace(go.Scattermap(
        lat=list(path_lats),
        lon=list(path_lons),
        mode="lines",
        line=dict(color=PATH_COLOR, width=5),
        name="Path",
        hoverinfo="skip",
    ))
    fig.add_trace(go.Scattermap(
        lat=[pair.origin.latitude, pair.destination.latitude],
        lon=[pair.origin.longitude, pair.destination.longitude],
        mode="markers",
        marker=dict(size=12, color="red"),
        text=[origin_label, destination_label],
        name="Endpoints",
        hovertemplate="<b>%{text}</b><br>%{lat:.4f}, %{lon:.4f}<extra></extra>",
    ))

    fig.update_layout(
        map=dict(
            style="white-bg",
            center=dict(lat=pair.origin.latitude, lon=pair.origin.longitude),
            zoom=MAP_ZOOM,
            layers=[dict(
                below="traces",
                sourcetype="raster",
                sourceattribution=TILE_ATTRIBUTION,
                source=[TILE_URL],
            )],
        ),
        height=height,
        margin=dict(l=0, r=0, t=0, b=0),
        showlegend=False,
    )
    return fig

"""Preset routes offered as one-click shortcuts."""

from __future__ import annotations

from dataclasses import dataclass

from geo_distance.models import Coordinate, CoordinatePair

MINYA = Coordinate(28.1094, 30.7500)
ORIGIN_LABEL = "Minya, Egypt"


@dataclass(frozen=True)
class Preset:
    """A named origin/destination pair."""

    name: str
    pair: CoordinatePair
    destination_label: str


def _from_minya(name: str, label: str, lat: float, lon: float) -> Preset:
    return Preset(name=name, pair=CoordinatePair(MINYA, Coordinate(lat, lon)), destination_label=label)


# Insertion order is the order buttons are shown in
PRESETS: dict[str, Preset] = {
    p.name: p
    for p in (
        _from_minya("Minya to New York", "New York", 40.7128, -74.0060),
        _from_minya("Minya to London", "London", 51.5074, -0.1278),
        _from_minya("Minya to Tokyo", "Tokyo", 35.6762, 139.6503),
        _from_minya("Minya to Sydney", "Sydney", -33.8688, 151.2093),
        _from_minya("Minya to Cape Town", "Cape Town", -33.9249, 18.4241),
    )
}

DEFAULT_PRESET = "Minya to New York"


def find_preset(pair: CoordinatePair) -> Preset | None:
    """Return the preset whose pair equals ``pair``, if any."""
    for preset in PRESETS.values():
        if preset.pair == pair:
            return preset
    return None

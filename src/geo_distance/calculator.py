"""Distance calculation and the per-session calculator state.

``compute_distances`` is the pure entry point. ``DistanceCalculator`` owns the
state behind one form: the current pair, the last result or error, and the
append-only history. It is only mutated through its public operations.
"""

from __future__ import annotations

import logging

from geo_distance.geo import euclidean_km, haversine_km
from geo_distance.models import CoordinatePair, DistanceResult, History, HistoryEntry
from geo_distance.presets import DEFAULT_PRESET, PRESETS
from geo_distance.validation import InvalidCoordinateError, validate_pair

logger = logging.getLogger(__name__)

ZERO_PAIR = CoordinatePair.from_flat(0.0, 0.0, 0.0, 0.0)


def compute_distances(pair: CoordinatePair) -> DistanceResult:
    """Validate ``pair`` and compute both distances.

    Raises:
        InvalidCoordinateError: if either point is out of range. Nothing is
            computed in that case.
    """
    validate_pair(pair)

    lat1, lon1 = pair.origin.as_tuple()
    lat2, lon2 = pair.destination.as_tuple()
    geodesic = haversine_km(lat1, lon1, lat2, lon2)
    # chord <= arc; clamp float noise near coincident points
    euclidean = min(euclidean_km(lat1, lon1, lat2, lon2), geodesic)

    return DistanceResult(geodesic_km=geodesic, euclidean_km=euclidean)


class DistanceCalculator:
    """Single-owner state for one calculator form."""

    def __init__(self, pair: CoordinatePair | None = None):
        self._pair = pair if pair is not None else PRESETS[DEFAULT_PRESET].pair
        self._result: DistanceResult | None = None
        self._error: str = ""
        self._history = History()

    @property
    def pair(self) -> CoordinatePair:
        return self._pair

    @property
    def result(self) -> DistanceResult | None:
        return self._result

    @property
    def error(self) -> str:
        return self._error

    @property
    def history(self) -> History:
        return self._history

    @property
    def last_entry(self) -> HistoryEntry | None:
        return self._history.latest

    def set_coordinates(self, lat1: float, lon1: float, lat2: float, lon2: float) -> None:
        """Replace the current pair. Range checks happen on recalculate."""
        self._pair = CoordinatePair.from_flat(lat1, lon1, lat2, lon2)

    def recalculate(self) -> DistanceResult | None:
        """Compute distances for the current pair and record them.

        On invalid input the error message is stored and ``None`` returned;
        the previous result and the history are left as they were.
        """
        try:
            result = compute_distances(self._pair)
        except InvalidCoordinateError as exc:
            logger.warning("Rejected pair %s: %s", self._pair.to_flat(), "; ".join(exc.errors))
            self._error = str(exc)
            return None

        self._error = ""
        self._result = result
        self._history.append(HistoryEntry(pair=self._pair, result=result))
        logger.info(
            "Pair %s: geodesic %.2f km, euclidean %.2f km",
            self._pair.to_flat(), result.geodesic_km, result.euclidean_km,
        )
        return result

    def reset(self) -> None:
        """Zero the inputs and clear result and error. History is kept."""
        self._pair = ZERO_PAIR
        self._result = None
        self._error = ""

    def select_preset(self, name: str) -> None:
        """Load a preset pair. Raises KeyError for unknown names."""
        self._pair = PRESETS[name].pair

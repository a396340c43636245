"""Data models for coordinate pairs, distance results and calculation history."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterator


@dataclass(frozen=True)
class Coordinate:
    """A point on the globe in WGS84 decimal degrees."""

    latitude: float             # [-90, 90]
    longitude: float            # [-180, 180]

    def as_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class CoordinatePair:
    """Origin and destination of a single calculation."""

    origin: Coordinate
    destination: Coordinate

    @classmethod
    def from_flat(cls, lat1: float, lon1: float, lat2: float, lon2: float) -> CoordinatePair:
        return cls(Coordinate(lat1, lon1), Coordinate(lat2, lon2))

    def to_flat(self) -> dict[str, float]:
        return {
            "lat1": self.origin.latitude,
            "lon1": self.origin.longitude,
            "lat2": self.destination.latitude,
            "lon2": self.destination.longitude,
        }


@dataclass(frozen=True)
class DistanceResult:
    """Both distances for one pair, in kilometers."""

    geodesic_km: float
    euclidean_km: float

    @property
    def difference_km(self) -> float:
        # Unrounded; callers round for display only.
        return self.geodesic_km - self.euclidean_km


@dataclass(frozen=True)
class HistoryEntry:
    """One successful calculation."""

    pair: CoordinatePair
    result: DistanceResult
    computed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_record(self) -> dict:
        record: dict = dict(self.pair.to_flat())
        record.update(
            geodesic_km=self.result.geodesic_km,
            euclidean_km=self.result.euclidean_km,
            difference_km=self.result.difference_km,
            computed_at=self.computed_at.isoformat(),
        )
        return record

    def to_json(self) -> str:
        return json.dumps(self.to_record())

    @classmethod
    def from_json(cls, raw: str) -> HistoryEntry:
        d = json.loads(raw)
        return cls(
            pair=CoordinatePair.from_flat(d["lat1"], d["lon1"], d["lat2"], d["lon2"]),
            result=DistanceResult(d["geodesic_km"], d["euclidean_km"]),
            computed_at=datetime.fromisoformat(d["computed_at"]),
        )


class History:
    """Append-only, insertion-ordered log of calculations."""

    def __init__(self) -> None:
        self._entries: list[HistoryEntry] = []

    def append(self, entry: HistoryEntry) -> None:
        self._entries.append(entry)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(tuple(self._entries))

    def __getitem__(self, index: int) -> HistoryEntry:
        return self._entries[index]

    @property
    def latest(self) -> HistoryEntry | None:
        return self._entries[-1] if self._entries else None

    def to_records(self) -> list[dict]:
        return [entry.to_record() for entry in self._entries]

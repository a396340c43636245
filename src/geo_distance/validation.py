"""Coordinate range validation."""

from __future__ import annotations

from geo_distance.models import CoordinatePair

INVALID_COORDINATES_MESSAGE = (
    "Invalid coordinates. Latitude must be between -90 and 90, "
    "and longitude between -180 and 180."
)


class InvalidCoordinateError(ValueError):
    """Raised when either point of a pair is out of range."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"{INVALID_COORDINATES_MESSAGE} ({'; '.join(errors)})")


def validate_coordinate(lat: float, lon: float) -> list[str]:
    """Validate one point. Returns list of error messages (empty = valid).

    NaN never satisfies the range checks, so it is rejected too.
    """
    errors: list[str] = []

    if not -90 <= lat <= 90:
        errors.append(f"latitude {lat} out of range [-90, 90]")

    if not -180 <= lon <= 180:
        errors.append(f"longitude {lon} out of range [-180, 180]")

    return errors


def is_valid_coordinate(lat: float, lon: float) -> bool:
    return not validate_coordinate(lat, lon)


def validate_pair(pair: CoordinatePair) -> None:
    """Check both points independently.

    Raises:
        InvalidCoordinateError: listing every problem found in either point.
    """
    errors: list[str] = []
    for label, point in (("origin", pair.origin), ("destination", pair.destination)):
        errors.extend(f"{label} {e}" for e in validate_coordinate(point.latitude, point.longitude))
    if errors:
        raise InvalidCoordinateError(errors)

"""
지리 좌표 (latitude / longitude) value type
"""
from dataclasses import dataclass
from typing import Tuple

from ..constants import POSITION_PRECISION
from ..exceptions import PositionRangeError
from ..utils import normalize_latitude, normalize_longitude, round_half_up


@dataclass(frozen=True)
class GeographicPosition:
    """
    Immutable geographic position in decimal degrees.

    Both fields are rounded to 3 decimal places on construction. No range
    check is applied here (see `validated` for the strict factory);
    arithmetic helpers fold results back into range.

    Attributes:
        latitude: degrees, [-90, 90], positive north
        longitude: degrees, [-180, 180], positive east
    """
    latitude: float = 0.0
    longitude: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'latitude',
                           round_half_up(float(self.latitude), POSITION_PRECISION))
        object.__setattr__(self, 'longitude',
                           round_half_up(float(self.longitude), POSITION_PRECISION))

    @classmethod
    def from_pair(cls, lat_lon) -> "GeographicPosition":
        """Build from a (lat, lon) pair (tuple, list, or numpy array)."""
        return cls(float(lat_lon[0]), float(lat_lon[-1]))

    @classmethod
    def validated(cls, latitude: float, longitude: float) -> "GeographicPosition":
        """
        Strict constructor.

        Raises:
            PositionRangeError: latitude outside [-90, 90] or longitude outside [-180, 180]
        """
        if not -90.0 <= latitude <= 90.0:
            raise PositionRangeError(f"latitude must be in [-90, 90]. Got {latitude}")
        if not -180.0 <= longitude <= 180.0:
            raise PositionRangeError(f"longitude must be in [-180, 180]. Got {longitude}")
        return cls(latitude, longitude)

    @property
    def lat_lon(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)

    def copy(self) -> "GeographicPosition":
        return GeographicPosition(self.latitude, self.longitude)

    # ------------------------------------------------------------------
    # Arithmetic (degree space, reflected back into range)
    # ------------------------------------------------------------------

    def add_latitude(self, delta: float) -> "GeographicPosition":
        return GeographicPosition(normalize_latitude(self.latitude + delta), self.longitude)

    def subtract_latitude(self, delta: float) -> "GeographicPosition":
        return GeographicPosition(normalize_latitude(self.latitude - delta), self.longitude)

    def add_longitude(self, delta: float) -> "GeographicPosition":
        return GeographicPosition(self.latitude, normalize_longitude(self.longitude + delta))

    def subtract_longitude(self, delta: float) -> "GeographicPosition":
        return GeographicPosition(self.latitude, normalize_longitude(self.longitude - delta))

    def add_position(self, delta_lat: float, delta_lon: float) -> "GeographicPosition":
        """Add latitude and longitude offsets in one step."""
        return GeographicPosition(
            normalize_latitude(self.latitude + delta_lat),
            normalize_longitude(self.longitude + delta_lon),
        )

    # ------------------------------------------------------------------
    # Comparison (exact, on the rounded values)
    # ------------------------------------------------------------------

    def is_same_latitude(self, other: "GeographicPosition") -> bool:
        return self.latitude == other.latitude

    def is_same_longitude(self, other: "GeographicPosition") -> bool:
        return self.longitude == other.longitude

    def is_same_position(self, other: "GeographicPosition") -> bool:
        return self.is_same_latitude(other) and self.is_same_longitude(other)

    def is_close_to(self, other: "GeographicPosition", tolerance: float = 0.005) -> bool:
        """Both coordinates within `tolerance` degrees."""
        return (abs(self.latitude - other.latitude) <= tolerance
                and abs(self.longitude - other.longitude) <= tolerance)

    # ------------------------------------------------------------------
    # Side of a line (planar approximation, local triples only)
    # ------------------------------------------------------------------

    def _side(self, start: "GeographicPosition", end: "GeographicPosition") -> float:
        # x = longitude (east), y = latitude (north); > 0 means counter-clockwise (left)
        return ((end.longitude - start.longitude) * (self.latitude - start.latitude)
                - (self.longitude - start.longitude) * (end.latitude - start.latitude))

    def is_right_of(self, start: "GeographicPosition", end: "GeographicPosition") -> bool:
        """
        True if this position lies right of the infinite line start -> end
        (points on the line count as right).
        """
        return self._side(start, end) <= 0.0

    def is_left_of(self, start: "GeographicPosition", end: "GeographicPosition") -> bool:
        return not self.is_right_of(start, end)

    def __str__(self):
        return f"Latitude: {self.latitude} Longitude: {self.longitude}"

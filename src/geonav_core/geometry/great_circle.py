"""
Great circle 계산 (spherical Earth, nautical miles)

All angles are degrees at the function boundary; radians are used
internally only. Returned positions are always inside
[-90, 90] x [-180, 180].
"""
import numpy as np
from typing import Iterable, Mapping, Optional, Tuple

from ..constants import EARTH_RADIUS_NM, DEGENERATE_EPSILON
from ..exceptions import UndefinedGreatCircleError
from ..position import GeographicPosition
from ..utils import WrapTo180, WrapTo360, clamp_unit, normalize_latitude, nm_to_km


def _radians(pos: GeographicPosition) -> Tuple[float, float]:
    return np.radians(pos.latitude), np.radians(pos.longitude)


def _position(rlat: float, rlon: float) -> GeographicPosition:
    """Radian lat/lon → GeographicPosition, longitude wrapped into (-180, 180]."""
    return GeographicPosition(float(np.degrees(rlat)), float(WrapTo180(np.degrees(rlon))))


def angular_distance(distance_nm: float) -> float:
    """Angular distance (radians) for a separation in nautical miles"""
    return distance_nm / EARTH_RADIUS_NM


def distance_nm(start: GeographicPosition, end: GeographicPosition) -> float:
    """
    Haversine great-circle distance

    a = sin²(Δlat/2) + cos(lat1)·cos(lat2)·sin²(Δlon/2)
    c = 2·atan2(√a, √(1−a))

    Returns:
        distance in nautical miles
    """
    rlat1, rlon1 = _radians(start)
    rlat2, rlon2 = _radians(end)
    dlat = rlat2 - rlat1
    dlon = rlon2 - rlon1

    a = np.sin(dlat / 2.0)**2 + np.cos(rlat1) * np.cos(rlat2) * np.sin(dlon / 2.0)**2
    a = np.clip(a, 0.0, 1.0)
    c = 2.0 * np.arctan2(np.sqrt(a), np.sqrt(1.0 - a))
    return float(c * EARTH_RADIUS_NM)


def distance_km(start: GeographicPosition, end: GeographicPosition) -> float:
    return nm_to_km(distance_nm(start, end))


def distances_nm(origin: GeographicPosition, positions: Iterable[GeographicPosition]) -> np.ndarray:
    """
    Distance from `origin` to every position (vectorised haversine).

    Each element depends only on its own pair, so the result order simply
    follows the input order.
    """
    coords = np.array([p.lat_lon for p in positions], dtype=float).reshape(-1, 2)
    rlat1, rlon1 = _radians(origin)
    rlat2 = np.radians(coords[:, 0])
    rlon2 = np.radians(coords[:, 1])

    a = (np.sin((rlat2 - rlat1) / 2.0)**2
         + np.cos(rlat1) * np.cos(rlat2) * np.sin((rlon2 - rlon1) / 2.0)**2)
    a = np.clip(a, 0.0, 1.0)
    return 2.0 * np.arctan2(np.sqrt(a), np.sqrt(1.0 - a)) * EARTH_RADIUS_NM


def closest_position(
    origin: GeographicPosition,
    named_positions: Mapping[str, GeographicPosition]
) -> Tuple[str, float]:
    """
    Nearest named position to `origin`

    Returns:
        (name, distance_nm)

    Raises:
        ValueError: If `named_positions` is empty
    """
    if not named_positions:
        raise ValueError("named_positions must not be empty")

    names = list(named_positions)
    dists = distances_nm(origin, (named_positions[n] for n in names))
    idx = int(np.argmin(dists))
    return names[idx], float(dists[idx])


def bearing(start: GeographicPosition, end: GeographicPosition) -> float:
    """
    Initial great-circle bearing from start to end

    θ = atan2(sin(Δlon)·cos(lat2), cos(lat1)·sin(lat2) − sin(lat1)·cos(lat2)·cos(Δlon))

    Returns:
        degrees, [0, 360), 0=North, clockwise
    """
    rlat1, rlon1 = _radians(start)
    rlat2, rlon2 = _radians(end)
    dlon = rlon2 - rlon1

    y = np.sin(dlon) * np.cos(rlat2)
    x = np.cos(rlat1) * np.sin(rlat2) - np.sin(rlat1) * np.cos(rlat2) * np.cos(dlon)
    return float(WrapTo360(np.degrees(np.arctan2(y, x))))


initial_bearing = bearing


def final_bearing(start: GeographicPosition, end: GeographicPosition) -> float:
    """Bearing on arrival at `end` (degrees, [0, 360))"""
    return float(WrapTo360(bearing(end, start) + 180.0))


def relative_bearing(start: GeographicPosition, heading: float, end: GeographicPosition) -> float:
    """
    Initial bearing of `end` relative to `heading` at `start`

    Returns:
        degrees, (-180, 180]; negative = left (port), positive = right (starboard)
    """
    return float(WrapTo180(bearing(start, end) - heading))


def midpoint(start: GeographicPosition, end: GeographicPosition) -> GeographicPosition:
    """Great-circle position halfway between two points"""
    rlat1, rlon1 = _radians(start)
    rlat2, rlon2 = _radians(end)
    dlon = rlon2 - rlon1

    bx = np.cos(rlat2) * np.cos(dlon)
    by = np.cos(rlat2) * np.sin(dlon)
    rlatm = np.arctan2(np.sin(rlat1) + np.sin(rlat2),
                       np.sqrt((np.cos(rlat1) + bx)**2 + by**2))
    rlonm = rlon1 + np.arctan2(by, np.cos(rlat1) + bx)
    return _position(rlatm, rlonm)


def intermediate_point(
    start: GeographicPosition,
    end: GeographicPosition,
    fraction: float
) -> GeographicPosition:
    """
    Position a given fraction of the way along the great circle (slerp)

    fraction=0 returns `start`, fraction=1 returns `end`.

    Raises:
        UndefinedGreatCircleError: start and end are antipodal and 0 < fraction < 1
    """
    if fraction == 0.0:
        return start
    if fraction == 1.0:
        return end

    ad = angular_distance(distance_nm(start, end))
    if ad < DEGENERATE_EPSILON:
        return start
    sin_ad = np.sin(ad)
    if abs(sin_ad) < DEGENERATE_EPSILON:
        raise UndefinedGreatCircleError(
            f"No unique great circle between antipodal points {start} and {end}")

    rlat1, rlon1 = _radians(start)
    rlat2, rlon2 = _radians(end)
    a = np.sin((1.0 - fraction) * ad) / sin_ad
    b = np.sin(fraction * ad) / sin_ad

    x = a * np.cos(rlat1) * np.cos(rlon1) + b * np.cos(rlat2) * np.cos(rlon2)
    y = a * np.cos(rlat1) * np.sin(rlon1) + b * np.cos(rlat2) * np.sin(rlon2)
    z = a * np.sin(rlat1) + b * np.sin(rlat2)

    rlati = np.arctan2(z, np.sqrt(x**2 + y**2))
    rloni = np.arctan2(y, x)
    return _position(rlati, rloni)


def update_position(
    start: GeographicPosition,
    heading: float,
    distance: float
) -> GeographicPosition:
    """
    Destination given a start point, initial heading and distance (direct problem)

    lat2 = asin(sin(lat1)·cos(δ) + cos(lat1)·sin(δ)·cos(θ))
    lon2 = lon1 + atan2(sin(θ)·sin(δ)·cos(lat1), cos(δ) − sin(lat1)·sin(lat2))

    Args:
        start: 출발 위치
        heading: degrees, 0=North, clockwise
        distance: nautical miles
    """
    rlat1, rlon1 = _radians(start)
    theta = np.radians(heading)
    delta = angular_distance(distance)

    rlat2 = np.arcsin(clamp_unit(
        np.sin(rlat1) * np.cos(delta) + np.cos(rlat1) * np.sin(delta) * np.cos(theta)))
    rlon2 = rlon1 + np.arctan2(np.sin(theta) * np.sin(delta) * np.cos(rlat1),
                               np.cos(delta) - np.sin(rlat1) * np.sin(rlat2))
    return _position(rlat2, rlon2)


def calculate_position_from_course_speed_time(
    start: GeographicPosition,
    course: float,
    speed: float,
    time_hours: float
) -> GeographicPosition:
    """
    Dead-reckoning position after `time_hours` at constant course and speed

    Args:
        course: degrees
        speed: knots; speed <= 0 means no movement
        time_hours: hours
    """
    if speed <= 0.0:
        return start
    return update_position(start, course, speed * time_hours)


def northernmost_point(
    start: GeographicPosition,
    end: GeographicPosition
) -> Optional[GeographicPosition]:
    """
    Highest-latitude point (vertex) of the great circle through two positions

    The normal of the great-circle plane is the cross product of the two unit
    vectors. Its latitude offset by +90° and reflected over the pole gives the
    vertex latitude (90° − lat_n) on the far meridian (lon_n + 180°).

    Returns:
        GeographicPosition, or None if the points are identical or antipodal
    """
    rlat1, rlon1 = _radians(start)
    rlat2, rlon2 = _radians(end)

    a = np.array([np.cos(rlat1) * np.cos(rlon1), np.cos(rlat1) * np.sin(rlon1), np.sin(rlat1)])
    b = np.array([np.cos(rlat2) * np.cos(rlon2), np.cos(rlat2) * np.sin(rlon2), np.sin(rlat2)])
    c = np.cross(a, b)
    mag = np.linalg.norm(c)
    if mag < DEGENERATE_EPSILON:
        return None

    dx, dy, dz = c / mag
    if dz < 0.0:
        # use the pole in the northern hemisphere
        dx, dy, dz = -dx, -dy, -dz

    lat_n = np.degrees(np.arcsin(clamp_unit(dz)))
    lon_n = np.degrees(np.arctan2(dy, dx))

    lat = normalize_latitude(90.0 + lat_n)
    lon = WrapTo180(lon_n + 180.0)
    return GeographicPosition(float(lat), float(lon))


def equator_crossings(
    start: GeographicPosition,
    end: GeographicPosition
) -> Optional[Tuple[GeographicPosition, GeographicPosition]]:
    """
    The two (antipodal) points where the great circle crosses the equator

    Returns:
        (east crossing, west crossing) of the vertex, or None if the great
        circle is undefined
    """
    vertex = northernmost_point(start, end)
    if vertex is None:
        return None

    eq1 = GeographicPosition(0.0, float(WrapTo180(vertex.longitude + 90.0)))
    eq2 = GeographicPosition(0.0, float(WrapTo180(vertex.longitude - 90.0)))
    return (eq1, eq2)

import math
import numpy as np
from typing import NamedTuple

from ..constants import (
    PI_OVER_180,
    KM_PER_NM,
    NM_PER_KM,
    STATUTE_MILES_PER_NM,
    KM_PER_STATUTE_MILE,
    NM_PER_DEGREE,
    LINE_OF_SIGHT_FACTOR,
)


def wrap_angle(angle, unit='rad', positive=False):
    """
    Wraps an angle to the range (-limit, limit], where limit is pi for radians or 180 for degrees.

    This uses a trigonometric identity to correctly and efficiently wrap the angle.

    Args:
        angle (float): The angle value.
        unit (str): The unit of the angle, either 'rad' for radians or 'deg' for degrees.
        positive (bool): If True, returns the absolute value of the wrapped angle.

    Returns:
        float: The wrapped angle in the same unit.
    """
    if unit == 'rad':
        # np.arctan2(sin(angle), cos(angle)) wraps angle to (-pi, pi]
        wrapped_angle = np.arctan2(np.sin(angle), np.cos(angle))
    elif unit == 'deg':
        rad = np.deg2rad(angle)
        wrapped_rad = np.arctan2(np.sin(rad), np.cos(rad))
        wrapped_angle = np.rad2deg(wrapped_rad)
    else:
        raise ValueError("Unit must be 'rad' or 'deg'.")

    return abs(wrapped_angle) if positive else wrapped_angle


def angle_difference(angle1, angle2, unit='rad'):
    """
    Calculates the shortest difference between two angles (angle1 - angle2).

    The result is wrapped to (-pi, pi] for radians or (-180, 180] for degrees.
    """
    return wrap_angle(angle1 - angle2, unit=unit)


def WrapToPi(rad, positive=False):
    """The function `WrapToPi` transforms an angle in radians to the range (-pi, pi]."""
    return wrap_angle(rad, unit='rad', positive=positive)


def WrapTo180(deg, positive=False):
    """Transform an angle to the range (-180, 180]."""
    return wrap_angle(deg, unit='deg', positive=positive)


def wrap_to_range(angle, min_val, max_val):
    """
    Wraps an angle to a given range [min_val, max_val).

    The length of the range (max_val - min_val) is assumed to be a full circle (2*pi or 360).
    """
    span = max_val - min_val
    if span <= 0:
        raise ValueError("max_val must be greater than min_val.")

    wrapped = (angle - min_val) % span + min_val

    # Snap to min_val if the result is very close to max_val (due to float inaccuracies)
    if np.isclose(wrapped, max_val):
        return min_val

    return wrapped


def WrapTo360(deg):
    """
    Transform an angle in degrees to the range [0, 360).
    """
    return wrap_to_range(deg, 0.0, 360.0)


def _limits(unit):
    if unit == 'deg':
        return 90.0, 180.0, 360.0
    if unit == 'rad':
        return np.pi / 2.0, np.pi, 2.0 * np.pi
    raise ValueError("Unit must be 'rad' or 'deg'.")


def normalize_latitude(lat, unit='deg'):
    """
    Reflect a latitude that has run past a pole back into [-90, 90] (or [-pi/2, pi/2]).

    lat > 90  -> 180 - lat
    lat < -90 -> -180 - lat

    Only a single crossing is folded back; the longitude is left untouched.
    """
    limit, half, _ = _limits(unit)
    if lat > limit:
        return half - lat
    if lat < -limit:
        return -half - lat
    return lat


def normalize_longitude(lon, unit='deg'):
    """
    Reflect a longitude past the antimeridian back into [-180, 180] (or [-pi, pi]).

    lon > 180  -> 360 - lon
    lon < -180 -> -360 - lon
    """
    _, limit, full = _limits(unit)
    if lon > limit:
        return full - lon
    if lon < -limit:
        return -full - lon
    return lon


def clamp_unit(value):
    """Clamp an asin/acos argument to [-1, 1] (floating rounding near poles/antipodes)."""
    return float(np.clip(value, -1.0, 1.0))


def round_half_up(value, precision=0):
    """Round half away from the floor, e.g. 0.0005 -> 0.001 at precision 3."""
    scale = 10.0 ** precision
    return math.floor(value * scale + 0.5) / scale


def within_tolerance(x, y, tolerance=0.00005):
    """True if two floats differ by no more than `tolerance`."""
    return abs(x - y) <= tolerance


# ---------------------------------------------------------------------------
# Unit conversions
# ---------------------------------------------------------------------------

def to_radians(deg):
    return deg * PI_OVER_180


def to_degrees(rad):
    return rad / PI_OVER_180


def km_to_nm(km):
    return km * NM_PER_KM


def nm_to_km(nm):
    return nm * KM_PER_NM


def statute_miles_to_nm(miles):
    return miles / STATUTE_MILES_PER_NM


def nm_to_statute_miles(nm):
    return nm * STATUTE_MILES_PER_NM


def miles_to_km(miles):
    return miles * KM_PER_STATUTE_MILE


def km_to_miles(km):
    return km / KM_PER_STATUTE_MILE


def nm_to_degrees(nm):
    """1 nm = 1 minute of arc"""
    return nm / NM_PER_DEGREE


def degrees_to_nm(deg):
    return deg * NM_PER_DEGREE


class DMS(NamedTuple):
    """
    Degrees / minutes / seconds 표현
    """
    degrees: int
    minutes: int
    seconds: int
    direction: str   # 'N', 'S', 'E', 'W'


def to_dms(kind, degrees):
    """
    Convert decimal degrees to degrees-minutes-seconds.

    Args:
        kind: 'latitude' or 'longitude'
        degrees: decimal degrees (sign gives the hemisphere)

    Returns:
        DMS, e.g. to_dms('longitude', 10.5) -> DMS(10, 30, 0, 'E')
    """
    if kind == 'latitude':
        direction = 'S' if degrees < 0 else 'N'
    elif kind == 'longitude':
        direction = 'W' if degrees < 0 else 'E'
    else:
        raise ValueError(f"kind must be 'latitude' or 'longitude'. Got {kind}")

    d = abs(degrees)
    whole_deg = int(d)
    minutes = (d - whole_deg) * 60.0
    whole_min = int(minutes)
    seconds = int(round_half_up((minutes - whole_min) * 60.0))

    # carry 60" -> 1', 60' -> 1°
    if seconds == 60:
        seconds = 0
        whole_min += 1
    if whole_min == 60:
        whole_min = 0
        whole_deg += 1

    return DMS(whole_deg, whole_min, seconds, direction)


# ---------------------------------------------------------------------------
# Visibility
# ---------------------------------------------------------------------------

def line_of_sight_distance(eye_height_ft, object_height_ft):
    """
    Line-of-sight distance (nm) between an eye and an object, heights in feet.
    """
    return LINE_OF_SIGHT_FACTOR * (math.sqrt(eye_height_ft) + math.sqrt(object_height_ft))


def horizon(eye_height_ft):
    """Distance (nm) to the horizon for an observer at `eye_height_ft`."""
    return line_of_sight_distance(eye_height_ft, 0.0)


def is_visible(eye_height_ft, object_height_ft, distance_nm):
    return distance_nm <= line_of_sight_distance(eye_height_ft, object_height_ft)

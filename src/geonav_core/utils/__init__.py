from .utils import (
    WrapToPi,
    WrapTo180,
    WrapTo360,
    wrap_angle,
    wrap_to_range,
    angle_difference,
    normalize_latitude,
    normalize_longitude,
    clamp_unit,
    round_half_up,
    within_tolerance,
    to_radians,
    to_degrees,
    km_to_nm,
    nm_to_km,
    statute_miles_to_nm,
    nm_to_statute_miles,
    miles_to_km,
    km_to_miles,
    nm_to_degrees,
    degrees_to_nm,
    DMS,
    to_dms,
    line_of_sight_distance,
    horizon,
    is_visible,
)

__all__ = [
    'WrapToPi',
    'WrapTo180',
    'WrapTo360',
    'wrap_angle',
    'wrap_to_range',
    'angle_difference',
    'normalize_latitude',
    'normalize_longitude',
    'clamp_unit',
    'round_half_up',
    'within_tolerance',
    'to_radians',
    'to_degrees',
    'km_to_nm',
    'nm_to_km',
    'statute_miles_to_nm',
    'nm_to_statute_miles',
    'miles_to_km',
    'km_to_miles',
    'nm_to_degrees',
    'degrees_to_nm',
    'DMS',
    'to_dms',
    'line_of_sight_distance',
    'horizon',
    'is_visible',
]

"""
geonav-core - Great-Circle Navigation and Closest Point of Approach

Spherical-Earth navigation math: great-circle distance and bearings,
intermediate positions, dead reckoning, and CPA classification between
two moving vessels.
"""

from .position import GeographicPosition
from .geometry import (
    distance_nm,
    distance_km,
    distances_nm,
    closest_position,
    bearing,
    initial_bearing,
    final_bearing,
    relative_bearing,
    midpoint,
    intermediate_point,
    update_position,
    calculate_position_from_course_speed_time,
    northernmost_point,
    equator_crossings,
)
from .risk import calculate_cpa, CpaStatus, CpaResult
from .exceptions import (
    GeoNavError,
    UndefinedGreatCircleError,
    PositionRangeError,
    UnknownLocationError,
    ExperimentalFeatureError,
)


__version__ = "0.1.0"

__all__ = [
    # Types
    "GeographicPosition",
    "CpaStatus",
    "CpaResult",

    # Great circle
    "distance_nm",
    "distance_km",
    "distances_nm",
    "closest_position",
    "bearing",
    "initial_bearing",
    "final_bearing",
    "relative_bearing",
    "midpoint",
    "intermediate_point",
    "update_position",
    "calculate_position_from_course_speed_time",
    "northernmost_point",
    "equator_crossings",

    # CPA
    "calculate_cpa",

    # Errors
    "GeoNavError",
    "UndefinedGreatCircleError",
    "PositionRangeError",
    "UnknownLocationError",
    "ExperimentalFeatureError",
]

"""
Geometry utilities for great-circle navigation
"""

from .great_circle import (
    angular_distance,
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

from .bearings import (
    relative_to_absolute,
    absolute_to_relative,
    heading_speed_to_velocity,
    velocity_to_heading_speed,
    RelativeMotion,
    relative_motion,
)

__all__ = [
    # great_circle
    'angular_distance',
    'distance_nm',
    'distance_km',
    'distances_nm',
    'closest_position',
    'bearing',
    'initial_bearing',
    'final_bearing',
    'relative_bearing',
    'midpoint',
    'intermediate_point',
    'update_position',
    'calculate_position_from_course_speed_time',
    'northernmost_point',
    'equator_crossings',
    # bearings
    'relative_to_absolute',
    'absolute_to_relative',
    'heading_speed_to_velocity',
    'velocity_to_heading_speed',
    'RelativeMotion',
    'relative_motion',
]

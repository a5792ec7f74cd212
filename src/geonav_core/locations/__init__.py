"""
Named-location sources

Both sources expose `resolve(name) -> GeographicPosition`.
"""

from .reference import REFERENCE_LOCATIONS, list_locations, resolve
from .airport import Airport, AirportCatalog, parse_airports

__all__ = [
    'REFERENCE_LOCATIONS',
    'list_locations',
    'resolve',
    'Airport',
    'AirportCatalog',
    'parse_airports',
]

"""
Fixed table of named reference locations
"""
from typing import Dict, List

from ..exceptions import UnknownLocationError
from ..position import GeographicPosition

REFERENCE_LOCATIONS: Dict[str, GeographicPosition] = {
    'equatorPM': GeographicPosition(0.0, 0.0),
    'equator60E': GeographicPosition(0.0, 60.0),
    'equator60W': GeographicPosition(0.0, -60.0),
    'Greenwich-UK': GeographicPosition(51.477, 0.0),
    'AtlanticCity-NJ': GeographicPosition(39.380, -74.453),
    'Philadelphia-PA': GeographicPosition(39.867, -75.240),
    'SanDiego-CA': GeographicPosition(32.730, -117.190),
    'LosAngeles-CA': GeographicPosition(33.7415, -118.23083),
    'PointFermin-CA': GeographicPosition(33.70733, -118.29333),
}


def list_locations() -> List[str]:
    return sorted(REFERENCE_LOCATIONS)


def resolve(name: str) -> GeographicPosition:
    """
    Raises:
        UnknownLocationError: If `name` is not in the table
    """
    try:
        return REFERENCE_LOCATIONS[name]
    except KeyError:
        raise UnknownLocationError(name) from None

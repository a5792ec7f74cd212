"""
Geographic position value type
"""

from .types import GeographicPosition

__all__ = [
    'GeographicPosition',
]

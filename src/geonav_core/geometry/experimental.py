"""
Experimental great-circle routines

Not exported from `geonav_core.geometry`. Results are not guaranteed for
every configuration (near-polar start points, nearly coincident great
circles), so callers must opt in explicitly and validate the output.
"""
import numpy as np
from typing import Optional

from ..constants import DEGENERATE_EPSILON
from ..exceptions import ExperimentalFeatureError
from ..position import GeographicPosition
from ..utils import WrapTo180, WrapToPi, clamp_unit


def great_circle_intersection(
    start1: GeographicPosition,
    heading1: float,
    start2: GeographicPosition,
    heading2: float,
    allow_experimental: bool = False
) -> Optional[GeographicPosition]:
    """
    Intersection of two great circles, each given by a start point and heading

    Args:
        start1, heading1: first path (heading in degrees)
        start2, heading2: second path
        allow_experimental: must be True to run

    Returns:
        The intersection ahead of both start points, or None when it is
        ambiguous (infinitely many, or behind one of the starts) or a start
        point sits on a pole

    Raises:
        ExperimentalFeatureError: If `allow_experimental` is False
    """
    if not allow_experimental:
        raise ExperimentalFeatureError(
            "great_circle_intersection is experimental; pass allow_experimental=True")

    rlat1, rlon1 = np.radians(start1.latitude), np.radians(start1.longitude)
    rlat2, rlon2 = np.radians(start2.latitude), np.radians(start2.longitude)
    b1 = np.radians(heading1)
    b2 = np.radians(heading2)
    dlat = rlat2 - rlat1
    dlon = rlon2 - rlon1

    # angular separation of the start points
    r = 2.0 * np.arcsin(clamp_unit(np.sqrt(
        np.sin(dlat / 2.0)**2 + np.cos(rlat1) * np.cos(rlat2) * np.sin(dlon / 2.0)**2)))
    if r < DEGENERATE_EPSILON:
        return start1

    denom1 = np.sin(r) * np.cos(rlat1)
    denom2 = np.sin(r) * np.cos(rlat2)
    if abs(denom1) < DEGENERATE_EPSILON or abs(denom2) < DEGENERATE_EPSILON:
        return None

    theta_a = np.arccos(clamp_unit((np.sin(rlat2) - np.sin(rlat1) * np.cos(r)) / denom1))
    theta_b = np.arccos(clamp_unit((np.sin(rlat1) - np.sin(rlat2) * np.cos(r)) / denom2))

    # bearings start1 -> start2 and start2 -> start1
    if np.sin(dlon) > 0.0:
        theta12, theta21 = theta_a, 2.0 * np.pi - theta_b
    else:
        theta12, theta21 = 2.0 * np.pi - theta_a, theta_b

    alpha1 = WrapToPi(b1 - theta12)
    alpha2 = WrapToPi(theta21 - b2)

    if np.sin(alpha1) == 0.0 and np.sin(alpha2) == 0.0:
        return None
    if np.sin(alpha1) * np.sin(alpha2) < 0.0:
        return None

    cos_alpha3 = (-np.cos(alpha1) * np.cos(alpha2)
                  + np.sin(alpha1) * np.sin(alpha2) * np.cos(r))
    d13 = np.arctan2(np.sin(r) * np.sin(alpha1) * np.sin(alpha2),
                     np.cos(alpha2) + np.cos(alpha1) * cos_alpha3)

    rlat3 = np.arcsin(clamp_unit(
        np.sin(rlat1) * np.cos(d13) + np.cos(rlat1) * np.sin(d13) * np.cos(b1)))
    dlon13 = np.arctan2(np.sin(b1) * np.sin(d13) * np.cos(rlat1),
                        np.cos(d13) - np.sin(rlat1) * np.sin(rlat3))
    rlon3 = rlon1 + dlon13

    return GeographicPosition(float(np.degrees(rlat3)), float(WrapTo180(np.degrees(rlon3))))

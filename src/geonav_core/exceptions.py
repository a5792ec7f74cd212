"""
geonav-core error types

Numerical edge cases (asin/acos domain overflow) are clamped locally and
never surface here. CPA outcomes such as RECEDING are statuses, not errors.
"""


class GeoNavError(Exception):
    """Base class for all geonav-core errors"""


class UndefinedGreatCircleError(GeoNavError, ValueError):
    """Two positions are identical or antipodal, so no unique great circle exists"""


class PositionRangeError(GeoNavError, ValueError):
    """Latitude or longitude outside [-90, 90] / [-180, 180]"""


class UnknownLocationError(GeoNavError, KeyError):
    """A named location could not be resolved"""


class ExperimentalFeatureError(GeoNavError, RuntimeError):
    """An experimental routine was called without opting in"""

"""
항해 계산 상수 (Spherical Earth model)
"""
import math

# Mean Earth radius on a sphere
EARTH_RADIUS_NM = 3440.065   # nautical miles

PI_OVER_180 = math.pi / 180.0

# Unit conversion factors
STATUTE_MILES_PER_NM = 1.1508
KM_PER_STATUTE_MILE = 1.60934
KM_PER_NM = 1.852
NM_PER_KM = 0.53996
NM_PER_DEGREE = 60.0
SECONDS_PER_HOUR = 3600.0

# Line-of-sight coefficient (nm per sqrt(ft))
LINE_OF_SIGHT_FACTOR = 1.144

# Position storage precision (decimal places)
POSITION_PRECISION = 3

# Thresholds
CPA_EPSILON = 1e-6           # knots, 상대 속도 0 판정
DEGENERATE_EPSILON = 1e-12   # zero-vector 판정 (identical / antipodal points)

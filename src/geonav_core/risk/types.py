"""
CPA 계산 결과 타입 정의
"""
from enum import Enum
from typing import NamedTuple

from ..position import GeographicPosition


class CpaStatus(Enum):
    """
    CPA 분류 결과

    Each calculation ends in exactly one of these states.
    """
    VALID = "valid"                              # 미래에 CPA 발생
    RECEDING = "receding"                        # 이미 멀어지는 중
    NO_RELATIVE_MOTION = "no_relative_motion"    # 상대 운동 없음 (거리 일정)


class CpaResult(NamedTuple):
    """
    Closest Point of Approach 결과

    For RECEDING / NO_RELATIVE_MOTION the distance fields hold the current
    range, elapsed_time_s is 0 and position is the own ship's position.
    """
    position: GeographicPosition   # own ship position at CPA
    distance_to_cpa_nm: float      # own ship run to the CPA (nm)
    elapsed_time_s: float          # time to CPA (seconds)
    range_at_cpa_nm: float         # separation at CPA (nm), negative = target to port
    status: CpaStatus

    @property
    def is_valid(self) -> bool:
        """미래 CPA 존재 여부"""
        return self.status is CpaStatus.VALID

    @property
    def elapsed_time_h(self) -> float:
        return self.elapsed_time_s / 3600.0

    def copy(self) -> "CpaResult":
        return self._replace(position=self.position.copy())

    def is_same(self, other: "CpaResult") -> bool:
        """Loose equality used when comparing computed results"""
        return (self.position.is_close_to(other.position, 0.05)
                and abs(self.distance_to_cpa_nm - other.distance_to_cpa_nm) <= 0.5
                and abs(self.elapsed_time_s - other.elapsed_time_s) <= 0.0005
                and abs(self.range_at_cpa_nm - other.range_at_cpa_nm) <= 0.5
                and self.status is other.status)

    def __str__(self):
        return (f"Latitude    : {self.position.latitude}\n"
                f"Longitude   : {self.position.longitude}\n"
                f"Distance    : {self.distance_to_cpa_nm:.3f} nm\n"
                f"Elapsed Time: {self.elapsed_time_s:.1f} seconds\n"
                f"Range at CPA: {self.range_at_cpa_nm:.3f} nm\n"
                f"Status      : {self.status.value}")

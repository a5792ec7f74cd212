"""
Closest Point of Approach (CPA) 계산 (great circle + relative motion)
"""
import logging
import numpy as np

from .types import CpaStatus, CpaResult
from ..constants import CPA_EPSILON, SECONDS_PER_HOUR
from ..geometry import (
    distance_nm,
    relative_bearing,
    relative_motion,
    calculate_position_from_course_speed_time,
)
from ..position import GeographicPosition
from ..utils import WrapTo360

logger = logging.getLogger(__name__)


def calculate_cpa(
    own_position: GeographicPosition,
    own_course: float,
    own_speed: float,
    target_position: GeographicPosition,
    target_course: float,
    target_speed: float,
    epsilon: float = CPA_EPSILON
) -> CpaResult:
    """
    CPA 계산

    Own ship의 속도를 target의 침로 좌표계로 회전시킨 뒤 target 속도를 빼서
    상대 운동을 구하고, 상대 운동 방향 기준 target의 상대 방위로 분류한다.

        x_rel = v_o·cos(c_o)·cos(c_t) + v_o·sin(c_o)·sin(c_t) − v_t
        y_rel = v_o·sin(c_o)·cos(c_t) − v_o·cos(c_o)·sin(c_t)

    - ||v_rel|| < epsilon            → NO_RELATIVE_MOTION
    - |relative bearing| > 90°       → RECEDING
    - otherwise                      → VALID
        t_cpa = range·cos(rb) / ||v_rel||   (hours)
        range_at_cpa = range·sin(rb)

    Args:
        own_position: Own ship 위치
        own_course: Own ship course (degrees, 0=North, CW)
        own_speed: Own ship speed (knots)
        target_position: Target 위치
        target_course: Target course (degrees)
        target_speed: Target speed (knots)
        epsilon: 상대 속도 0 판정 임계값 (knots)

    Returns:
        CpaResult
    """
    motion = relative_motion(own_course, own_speed, target_course, target_speed)
    rel_velocity = motion.speed
    range_to_target = distance_nm(own_position, target_position)

    logger.debug(
        "CPA inputs: own=%s crs=%.3f spd=%.3f target=%s crs=%.3f spd=%.3f",
        own_position, own_course, own_speed, target_position, target_course, target_speed,
    )
    logger.debug("relative motion x=%.6f y=%.6f |v|=%.6f range=%.4f nm",
                 motion.x, motion.y, rel_velocity, range_to_target)

    if rel_velocity < epsilon:
        return CpaResult(own_position, range_to_target, 0.0, range_to_target,
                         CpaStatus.NO_RELATIVE_MOTION)

    # 상대 운동 방향 (absolute), target 상대 방위
    relative_course = float(WrapTo360(target_course + motion.angle))
    rb = relative_bearing(own_position, relative_course, target_position)
    logger.debug("relative course=%.5f relative bearing=%.5f", relative_course, rb)

    if abs(rb) > 90.0:
        return CpaResult(own_position, range_to_target, 0.0, range_to_target,
                         CpaStatus.RECEDING)

    rb_rad = np.radians(rb)
    hours = float(range_to_target * np.cos(rb_rad) / rel_velocity)
    range_at_cpa = float(range_to_target * np.sin(rb_rad))
    cpa_position = calculate_position_from_course_speed_time(
        own_position, own_course, own_speed, hours)

    return CpaResult(
        position=cpa_position,
        distance_to_cpa_nm=hours * own_speed,
        elapsed_time_s=hours * SECONDS_PER_HOUR,
        range_at_cpa_nm=range_at_cpa,
        status=CpaStatus.VALID,
    )

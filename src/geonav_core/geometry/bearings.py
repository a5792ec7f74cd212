"""
항해 방위 / 속도 벡터 계산 유틸리티 (North = 0°, clockwise)
"""
import numpy as np
from typing import NamedTuple, Tuple

from ..utils import WrapTo180, WrapTo360


def relative_to_absolute(heading: float, relative_bearing: float) -> float:
    """
    Heading과 상대 방위로부터 절대 방위 계산

    Returns:
        절대 방위 (degrees, [0, 360))
    """
    return float(WrapTo360(heading + relative_bearing))


def absolute_to_relative(heading: float, absolute_bearing: float) -> float:
    """
    Heading과 절대 방위로부터 상대 방위 계산

    Returns:
        상대 방위 (degrees, (-180, 180]); negative = port, positive = starboard
    """
    return float(WrapTo180(absolute_bearing - heading))


def heading_speed_to_velocity(heading: float, speed: float) -> Tuple[float, float]:
    """
    Heading과 속도를 속도 벡터로 변환

    Args:
        heading: Heading (degrees, 0=North, clockwise)
        speed: 속도 (knots)

    Returns:
        속도 벡터 (vx, vy), vx=North, vy=East
    """
    # heading=0°(North) → vx=speed, vy=0
    # heading=90°(East) → vx=0, vy=speed
    vx = speed * np.cos(np.radians(heading))
    vy = speed * np.sin(np.radians(heading))
    return (float(vx), float(vy))


def velocity_to_heading_speed(velocity: Tuple[float, float]) -> Tuple[float, float]:
    """
    속도 벡터를 heading과 속도로 변환

    Returns:
        (heading, speed), heading in degrees [0, 360)
    """
    vx, vy = velocity  # vx=North, vy=East
    speed = float(np.hypot(vx, vy))
    heading = float(WrapTo360(np.degrees(np.arctan2(vy, vx))))
    return heading, speed


class RelativeMotion(NamedTuple):
    """
    Own ship motion seen from the target's course frame

    x: along the target's heading (knots)
    y: toward the target's starboard side (knots)
    """
    x: float
    y: float

    @property
    def speed(self) -> float:
        return float(np.hypot(self.x, self.y))

    @property
    def angle(self) -> float:
        """Direction of relative motion, degrees clockwise from the target heading."""
        return float(np.degrees(np.arctan2(self.y, self.x)))


def relative_motion(
    own_course: float,
    own_speed: float,
    target_course: float,
    target_speed: float
) -> RelativeMotion:
    """
    Own ship velocity rotated into the target's course frame, minus target speed

    Args:
        own_course: degrees, 0=North, clockwise
        own_speed: knots
        target_course: degrees
        target_speed: knots
    """
    vx, vy = heading_speed_to_velocity(own_course, own_speed)
    tc = np.radians(target_course)
    t_sin, t_cos = np.sin(tc), np.cos(tc)

    x_rel = vx * t_cos + vy * t_sin - target_speed
    y_rel = vy * t_cos - vx * t_sin
    return RelativeMotion(float(x_rel), float(y_rel))

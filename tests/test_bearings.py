"""
방위 / 속도 벡터 변환 테스트
"""
import pytest

from geonav_core.geometry import (
    relative_to_absolute,
    absolute_to_relative,
    heading_speed_to_velocity,
    velocity_to_heading_speed,
)


def test_relative_absolute_round_trip():
    assert relative_to_absolute(350.0, 20.0) == pytest.approx(10.0)
    assert absolute_to_relative(350.0, 10.0) == pytest.approx(20.0)
    assert absolute_to_relative(10.0, 350.0) == pytest.approx(-20.0)


def test_heading_speed_to_velocity():
    """NED: heading=0 → North, heading=90 → East"""
    vx, vy = heading_speed_to_velocity(0.0, 12.0)
    assert vx == pytest.approx(12.0)
    assert vy == pytest.approx(0.0, abs=1e-9)

    vx, vy = heading_speed_to_velocity(90.0, 12.0)
    assert vx == pytest.approx(0.0, abs=1e-9)
    assert vy == pytest.approx(12.0)


def test_velocity_to_heading_speed():
    heading, speed = velocity_to_heading_speed((0.0, -5.0))
    assert heading == pytest.approx(270.0)
    assert speed == pytest.approx(5.0)

    heading, speed = velocity_to_heading_speed(heading_speed_to_velocity(135.0, 7.5))
    assert heading == pytest.approx(135.0)
    assert speed == pytest.approx(7.5)

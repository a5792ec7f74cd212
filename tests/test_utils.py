"""
각도 / 단위 변환 유틸리티 테스트
"""
import numpy as np
import pytest

from geonav_core.utils import (
    WrapTo180,
    WrapTo360,
    WrapToPi,
    angle_difference,
    normalize_latitude,
    normalize_longitude,
    clamp_unit,
    round_half_up,
    within_tolerance,
    to_radians,
    to_degrees,
    km_to_nm,
    nm_to_km,
    statute_miles_to_nm,
    nm_to_statute_miles,
    miles_to_km,
    km_to_miles,
    nm_to_degrees,
    degrees_to_nm,
    DMS,
    to_dms,
    horizon,
    is_visible,
    line_of_sight_distance,
)


def test_wrap_to_360():
    assert np.isclose(WrapTo360(-90.0), 270.0)
    assert WrapTo360(360.0) == 0.0
    assert np.isclose(WrapTo360(725.0), 5.0)


def test_wrap_to_180():
    assert np.isclose(WrapTo180(270.0), -90.0)
    assert np.isclose(WrapTo180(-190.0), 170.0)
    assert np.isclose(WrapToPi(3 * np.pi / 2), -np.pi / 2)


def test_angle_difference():
    assert np.isclose(angle_difference(10.0, 350.0, unit='deg'), 20.0)
    with pytest.raises(ValueError):
        angle_difference(1.0, 2.0, unit='grad')


def test_normalize_latitude_degrees():
    assert normalize_latitude(45.0) == 45.0
    assert normalize_latitude(95.0) == 85.0
    assert normalize_latitude(-95.0) == -85.0


def test_normalize_longitude_degrees():
    assert normalize_longitude(-120.0) == -120.0
    assert normalize_longitude(190.0) == 170.0
    assert normalize_longitude(-190.0) == -170.0


def test_normalize_radians():
    assert np.isclose(normalize_latitude(np.pi / 2 + 0.1, unit='rad'), np.pi / 2 - 0.1)
    assert np.isclose(normalize_longitude(-np.pi - 0.2, unit='rad'), -np.pi + 0.2)
    with pytest.raises(ValueError):
        normalize_latitude(1.0, unit='turns')


def test_clamp_unit():
    assert clamp_unit(1.0000001) == 1.0
    assert clamp_unit(-1.2) == -1.0
    assert clamp_unit(0.25) == 0.25


def test_round_half_up():
    assert round_half_up(2.5) == 3.0
    assert round_half_up(-2.5) == -2.0
    assert round_half_up(1.23456, 3) == 1.235


def test_within_tolerance():
    assert within_tolerance(1.00001, 1.0)
    assert not within_tolerance(1.001, 1.0)
    assert within_tolerance(1.4, 1.0, 0.5)


def test_radian_conversions():
    assert np.isclose(to_radians(180.0), np.pi)
    assert np.isclose(to_degrees(np.pi / 2), 90.0)


def test_distance_conversions():
    assert np.isclose(statute_miles_to_nm(1.1508), 1.0)
    assert np.isclose(nm_to_statute_miles(1.0), 1.1508)
    assert np.isclose(miles_to_km(1.0), 1.60934)
    assert np.isclose(km_to_miles(1.60934), 1.0)
    assert np.isclose(nm_to_km(1.0), 1.852)
    assert np.isclose(km_to_nm(1.852), 1.0, atol=1e-3)
    assert nm_to_degrees(60.0) == 1.0
    assert degrees_to_nm(1.5) == 90.0


def test_dms():
    assert to_dms('longitude', 10.5) == DMS(10, 30, 0, 'E')
    assert to_dms('latitude', -10.55) == DMS(10, 33, 0, 'S')
    assert to_dms('longitude', -74.453).direction == 'W'


def test_dms_carries_seconds_and_minutes():
    assert to_dms('latitude', 10.9999999) == DMS(11, 0, 0, 'N')


def test_dms_rejects_unknown_kind():
    with pytest.raises(ValueError):
        to_dms('altitude', 1.0)


def test_visibility():
    """눈높이 15ft, 수면 물체 → 약 4.4 nm 까지 보임"""
    assert np.isclose(horizon(25.0), 5.72)
    assert np.isclose(line_of_sight_distance(16.0, 9.0), 1.144 * 7.0)
    assert is_visible(15.0, 0.0, 1.0)
    assert not is_visible(15.0, 0.0, 5.0)

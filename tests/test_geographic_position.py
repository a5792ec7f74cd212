"""
GeographicPosition value type 테스트
"""
import dataclasses

import pytest

from geonav_core import GeographicPosition, PositionRangeError


def test_construction_rounds_to_three_decimals():
    pos = GeographicPosition(40.45678, -74.3934)
    assert pos.latitude == 40.457
    assert pos.longitude == -74.393


def test_default_is_equator_prime_meridian():
    assert GeographicPosition().lat_lon == (0.0, 0.0)


def test_construction_is_idempotent():
    pos = GeographicPosition(33.74150, -118.23083)
    again = GeographicPosition(pos.latitude, pos.longitude)
    assert again == pos
    assert GeographicPosition(again.latitude, again.longitude) == again


def test_from_pair():
    pos = GeographicPosition.from_pair([40.45, -74.393])
    assert pos == GeographicPosition(40.45, -74.393)


def test_construction_does_not_validate_range():
    pos = GeographicPosition(95.0, 200.0)
    assert pos.lat_lon == (95.0, 200.0)


def test_validated_rejects_out_of_range():
    with pytest.raises(PositionRangeError):
        GeographicPosition.validated(91.0, 0.0)
    with pytest.raises(ValueError):
        GeographicPosition.validated(0.0, -180.5)
    assert GeographicPosition.validated(-90.0, 180.0).lat_lon == (-90.0, 180.0)


def test_position_is_immutable():
    pos = GeographicPosition(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        pos.latitude = 3.0


def test_copy_is_equal_value():
    pos = GeographicPosition(12.5, -45.25)
    dup = pos.copy()
    assert dup == pos
    assert dup is not pos


def test_add_and_subtract_latitude_within_range():
    pos = GeographicPosition(10.0, 20.0)
    assert pos.add_latitude(5.0).latitude == 15.0
    assert pos.subtract_latitude(15.0).latitude == -5.0
    # receiver unchanged
    assert pos.latitude == 10.0


def test_latitude_reflects_past_pole():
    assert GeographicPosition(85.0, 10.0).add_latitude(10.0).latitude == 85.0
    assert GeographicPosition(-85.0, 0.0).subtract_latitude(10.0).latitude == -85.0


def test_longitude_reflects_past_antimeridian():
    assert GeographicPosition(0.0, 175.0).add_longitude(10.0).longitude == 175.0
    assert GeographicPosition(0.0, -175.0).subtract_longitude(10.0).longitude == -175.0
    assert GeographicPosition(0.0, 10.0).add_longitude(20.0).longitude == 30.0


def test_add_position():
    pos = GeographicPosition(10.0, 20.0).add_position(1.5, -2.5)
    assert pos.lat_lon == (11.5, 17.5)


def test_same_position_uses_rounded_values():
    p1 = GeographicPosition(1.0001, 2.0)
    p2 = GeographicPosition(1.0, 2.0)
    p3 = GeographicPosition(1.001, 2.0)
    assert p1.is_same_position(p2)
    assert not p3.is_same_position(p2)
    assert p3.is_same_longitude(p2)
    assert not p3.is_same_latitude(p2)


def test_side_of_line():
    """북쪽으로 향하는 선 기준 동쪽 = right, 서쪽 = left"""
    start = GeographicPosition(0.0, 0.0)
    end = GeographicPosition(1.0, 0.0)
    east = GeographicPosition(0.5, 0.1)
    west = GeographicPosition(0.5, -0.1)

    assert east.is_right_of(start, end)
    assert not east.is_left_of(start, end)
    assert west.is_left_of(start, end)
    assert not west.is_right_of(start, end)


def test_is_close_to():
    p1 = GeographicPosition(1.0, 1.0)
    assert p1.is_close_to(GeographicPosition(1.004, 0.996))
    assert not p1.is_close_to(GeographicPosition(1.01, 1.0))
    assert p1.is_close_to(GeographicPosition(1.3, 1.3), tolerance=0.5)


def test_str():
    assert str(GeographicPosition(39.38, -74.453)) == "Latitude: 39.38 Longitude: -74.453"

"""
Named location 조회 테스트
"""
import logging

import pytest

from geonav_core import GeographicPosition, UnknownLocationError
from geonav_core.locations import (
    REFERENCE_LOCATIONS,
    list_locations,
    resolve,
    AirportCatalog,
    parse_airports,
)

AIRPORTS = """\
ZYYJ:N/A:YANJI:YANJI:CHINA:191:42.882:129.448
KACY:ACY:ATLANTIC CITY INTL:ATLANTIC CITY:USA:75:39.458:-74.577
BAD:ROW
KPHL:PHL:PHILADELPHIA INTL:PHILADELPHIA:USA:not-a-number:39.872:-75.241
"""


def test_reference_locations():
    assert resolve('AtlanticCity-NJ') == GeographicPosition(39.380, -74.453)
    assert resolve('equatorPM').lat_lon == (0.0, 0.0)
    assert list_locations() == sorted(REFERENCE_LOCATIONS)


def test_unknown_reference_location():
    with pytest.raises(UnknownLocationError):
        resolve('Atlantis')
    with pytest.raises(KeyError):
        resolve('Atlantis')


def test_airport_catalog_from_text(caplog):
    with caplog.at_level(logging.WARNING, logger="geonav_core.locations.airport"):
        catalog = AirportCatalog.from_text(AIRPORTS)

    assert len(catalog) == 2
    assert 'ZYYJ' in catalog
    assert 'KPHL' not in catalog
    assert catalog.resolve('ZYYJ') == GeographicPosition(42.882, 129.448)
    assert catalog.get('KACY').elevation == 75
    assert "row 3" in caplog.text
    assert "row 4" in caplog.text


def test_airport_catalog_from_file(tmp_path):
    path = tmp_path / "airports.txt"
    path.write_text(AIRPORTS, encoding="utf-8")
    catalog = AirportCatalog.from_file(path)

    assert catalog.resolve('KACY').is_close_to(GeographicPosition(39.458, -74.577))
    with pytest.raises(UnknownLocationError):
        catalog.resolve('EGLL')


def test_duplicate_icao_keeps_first():
    text = "AAAA:AA:FIRST:X:Y:0:1.0:2.0\nAAAA:AA:SECOND:X:Y:0:3.0:4.0\n"
    catalog = AirportCatalog(parse_airports(text.splitlines()))
    assert catalog.get('AAAA').name == 'FIRST'

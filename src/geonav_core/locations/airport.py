"""
Airport catalog (colon-delimited text)

One airport per line:

    ICAO:IATA:NAME:CITY:COUNTRY:ELEVATION:LATITUDE:LONGITUDE
"""
import csv
import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, Union

from ..exceptions import UnknownLocationError
from ..position import GeographicPosition

logger = logging.getLogger(__name__)

FIELDS = ('icao', 'iata', 'name', 'city', 'country', 'elevation', 'latitude', 'longitude')


@dataclass(frozen=True)
class Airport:
    icao: str
    iata: str
    name: str
    city: str
    country: str
    elevation: int      # feet
    latitude: float
    longitude: float

    @property
    def position(self) -> GeographicPosition:
        return GeographicPosition(self.latitude, self.longitude)


def parse_airports(lines: Iterable[str]) -> Iterator[Airport]:
    """Parse catalog rows; malformed rows are logged and skipped."""
    for line_no, row in enumerate(csv.reader(lines, delimiter=':'), start=1):
        if not row or not any(field.strip() for field in row):
            continue
        if len(row) != len(FIELDS):
            logger.warning("airport row %d: expected %d fields, got %d",
                           line_no, len(FIELDS), len(row))
            continue
        icao, iata, name, city, country, elevation, lat, lon = (f.strip() for f in row)
        try:
            airport = Airport(icao, iata, name, city, country,
                              int(elevation), float(lat), float(lon))
        except ValueError as exc:
            logger.warning("airport row %d skipped: %s", line_no, exc)
            continue
        yield airport


class AirportCatalog:
    """
    ICAO-keyed airport lookup

    Args:
        airports: parsed Airport records; the first record wins on duplicate ICAO codes
    """

    def __init__(self, airports: Iterable[Airport]):
        self._airports: Dict[str, Airport] = {}
        for airport in airports:
            self._airports.setdefault(airport.icao, airport)

    @classmethod
    def from_text(cls, text: str) -> "AirportCatalog":
        return cls(parse_airports(io.StringIO(text)))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "AirportCatalog":
        with open(path, newline='', encoding='utf-8') as fh:
            catalog = cls(parse_airports(fh))
        logger.info("loaded %d airports from %s", len(catalog), path)
        return catalog

    def __len__(self):
        return len(self._airports)

    def __contains__(self, icao):
        return icao in self._airports

    def get(self, icao: str) -> Optional[Airport]:
        return self._airports.get(icao)

    def resolve(self, icao: str) -> GeographicPosition:
        """
        Raises:
            UnknownLocationError: If the ICAO code is not in the catalog
        """
        airport = self._airports.get(icao)
        if airport is None:
            raise UnknownLocationError(icao)
        return airport.position

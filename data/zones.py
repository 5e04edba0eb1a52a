"""
Zone Data Source
Baseline readings for the monitored zones shown on the dashboard map
"""

import logging
from typing import Dict, List, Optional
from models.schemas import BaselineReading

logger = logging.getLogger(__name__)


# Sample zones used when no live source is wired in
SAMPLE_ZONES = [
    {
        "zone_id": "abids-road",
        "zone_name": "Abids Road",
        "aqi": 280,
        "population_exposed": 50000,
        "coordinates": [78.4567, 17.3850],
    },
    {
        "zone_id": "charminar",
        "zone_name": "Charminar",
        "aqi": 320,
        "population_exposed": 65000,
        "coordinates": [78.4580, 17.3860],
    },
    {
        "zone_id": "kukatpally-road",
        "zone_name": "Kukatpally Road",
        "aqi": 250,
        "population_exposed": 42000,
        "coordinates": [78.4600, 17.3880],
    },
]


class ZoneNotFoundError(KeyError):
    """Requested zone is not known to the data source"""

    def __init__(self, zone_id: str):
        super().__init__(zone_id)
        self.zone_id = zone_id

    def __str__(self) -> str:
        return f"Zone '{self.zone_id}' not found"


class ZoneDataSource:
    """Supplies validated baseline readings by zone id"""

    def __init__(self, zones: Optional[List[Dict]] = None):
        records = SAMPLE_ZONES if zones is None else zones
        self._zones: Dict[str, BaselineReading] = {}
        self._coordinates: Dict[str, List[float]] = {}

        for record in records:
            reading = BaselineReading(
                zone_id=record["zone_id"],
                zone_name=record.get("zone_name", ""),
                aqi=record["aqi"],
                population_exposed=record.get("population_exposed", 0),
            )
            key = reading.zone_id.lower()
            self._zones[key] = reading
            if "coordinates" in record:
                self._coordinates[key] = list(record["coordinates"])

        logger.info(f"Zone data source loaded with {len(self._zones)} zones")

    def list_zones(self) -> List[BaselineReading]:
        return list(self._zones.values())

    def get_baseline(self, zone_id: str) -> BaselineReading:
        """
        Baseline reading of a zone

        Args:
            zone_id: Zone identifier (case-insensitive)

        Returns:
            BaselineReading

        Raises:
            ZoneNotFoundError: unknown zone id
        """
        reading = self._zones.get(zone_id.strip().lower())
        if reading is None:
            raise ZoneNotFoundError(zone_id)
        return reading

    def get_coordinates(self, zone_id: str) -> Optional[List[float]]:
        """[lon, lat] of the zone marker, None when unknown"""
        return self._coordinates.get(zone_id.strip().lower())

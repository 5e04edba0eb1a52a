from fastapi import APIRouter, HTTPException, Query
from typing import List, Optional
from api.schemas import InterventionGroup, ZoneInfo
from api.routes.simulation import zone_source
from data.zones import ZoneNotFoundError
from models.interventions import INTERVENTION_CATALOG
from models.schemas import BaselineReading
from utils.helpers import classify_aqi

router = APIRouter(tags=["zones"])


def _zone_info(reading: BaselineReading) -> ZoneInfo:
    return ZoneInfo(
        zone_id=reading.zone_id,
        zone_name=reading.zone_name,
        aqi=reading.aqi,
        population_exposed=reading.population_exposed,
        risk_level=classify_aqi(reading.aqi),
        coordinates=zone_source.get_coordinates(reading.zone_id),
    )


@router.get("/api/v1/zones", response_model=List[ZoneInfo])
def list_zones():
    """Monitored zones with their current baseline"""
    return [_zone_info(reading) for reading in zone_source.list_zones()]


@router.get("/api/v1/zones/{zone_id}", response_model=ZoneInfo)
def get_zone(zone_id: str):
    try:
        return _zone_info(zone_source.get_baseline(zone_id))
    except ZoneNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/api/v1/interventions", response_model=List[InterventionGroup])
def list_interventions(aqi: Optional[float] = Query(None, ge=0, allow_inf_nan=False)):
    """Intervention catalog grouped by category, with AQI badges when a baseline is given"""
    return INTERVENTION_CATALOG.describe(aqi)

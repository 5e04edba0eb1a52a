import logging
from fastapi import APIRouter, HTTPException
from typing import List
from api.schemas import (
    InterventionRanking,
    ScenarioComparison,
    SimulationRequest,
    ZoneSimulationRequest,
)
from data.zones import ZoneDataSource, ZoneNotFoundError
from models.impact_calculator import ImpactCalculator
from models.schemas import SimulationResult

logger = logging.getLogger(__name__)

router = APIRouter(tags=["simulation"])
zone_source = ZoneDataSource()
calculator = ImpactCalculator()


def _get_baseline(zone_id: str):
    try:
        return zone_source.get_baseline(zone_id)
    except ZoneNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/api/v1/simulate", response_model=SimulationResult)
def simulate(req: SimulationRequest):
    """Simulate interventions against a baseline supplied by the caller"""
    result = calculator.compute(req.baseline, req.selections)
    logger.info(
        f"Simulation for {result.zone_id}: AQI {result.baseline.current_aqi:.0f} -> "
        f"{result.baseline.new_aqi:.0f}"
    )
    return result


@router.post("/api/v1/zones/{zone_id}/simulate", response_model=SimulationResult)
def simulate_zone(zone_id: str, req: ZoneSimulationRequest):
    """Simulate interventions for a known zone"""
    baseline = _get_baseline(zone_id)
    return calculator.compute(baseline, req.selections)


@router.get("/api/v1/zones/{zone_id}/ranking", response_model=List[InterventionRanking])
def rank_interventions(zone_id: str):
    """Interventions ordered by the AQI points each removes on its own"""
    baseline = _get_baseline(zone_id)
    df = calculator.rank_interventions(baseline)

    return [
        InterventionRanking(
            key=row["key"],
            label=row["label"],
            category=row["category"],
            fraction=float(row["fraction"]),
            aqi_reduction=float(row["aqiReduction"]),
            new_aqi=float(row["newAqi"]),
            improvement_percent=float(row["improvementPercent"]),
        )
        for _, row in df.iterrows()
    ]


@router.get("/api/v1/zones/{zone_id}/scenarios", response_model=List[ScenarioComparison])
def compare_scenarios(zone_id: str):
    """Preset intervention packages compared for one zone"""
    baseline = _get_baseline(zone_id)
    df = calculator.compare_scenarios(baseline)

    return [
        ScenarioComparison(
            scenario=row["scenario"],
            interventions=int(row["interventions"]),
            new_aqi=float(row["newAqi"]),
            aqi_reduction=float(row["aqiReduction"]),
            population_benefited=int(row["populationBenefited"]),
            new_risk_level=row["newRiskLevel"],
        )
        for _, row in df.iterrows()
    ]

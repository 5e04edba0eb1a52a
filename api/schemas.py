from pydantic import BaseModel, Field
from typing import Dict, List, Optional
from models.schemas import BaselineReading, CamelModel, SimulationResult

class SimulationRequest(BaseModel):
    baseline: BaselineReading
    selections: Dict[str, bool] = Field(default_factory=dict)

class ZoneSimulationRequest(BaseModel):
    selections: Dict[str, bool] = Field(default_factory=dict)

class ReportRequest(BaseModel):
    result: Optional[SimulationResult] = None

class InterventionInfo(CamelModel):
    key: str
    label: str
    description: str
    impact: str
    reduction_fraction: float
    aqi_reduction: Optional[int] = None

class InterventionGroup(CamelModel):
    category: str
    name: str
    typical_range: str
    interventions: List[InterventionInfo]

class ZoneInfo(CamelModel):
    zone_id: str
    zone_name: str
    aqi: float
    population_exposed: int
    risk_level: str
    coordinates: Optional[List[float]] = None

class InterventionRanking(CamelModel):
    key: str
    label: str
    category: str
    fraction: float
    aqi_reduction: float
    new_aqi: float
    improvement_percent: float

class ScenarioComparison(CamelModel):
    scenario: str
    interventions: int
    new_aqi: float
    aqi_reduction: float
    population_benefited: int
    new_risk_level: str

"""
Pydantic models for the simulation engine
Baseline readings in, simulation results and report fields out
"""

from datetime import datetime
from typing import Dict, List
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Immutable model exchanged with the presentation layer in camelCase"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class BaselineReading(CamelModel):
    """Current air quality of a monitored zone, as supplied by the zone data source"""
    zone_id: str = Field(..., min_length=1, examples=["charminar"])
    zone_name: str = Field("", examples=["Charminar"])
    aqi: float = Field(..., ge=0, allow_inf_nan=False, examples=[280])
    population_exposed: int = Field(0, ge=0, examples=[50000])

    @field_validator("zone_id")
    @classmethod
    def _strip_zone_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("zoneId must not be blank")
        return v

    @model_validator(mode="before")
    @classmethod
    def _default_zone_name(cls, data):
        # Zones without a display name are shown by their id
        if not isinstance(data, dict):
            return data
        name = data.get("zoneName", data.get("zone_name"))
        if isinstance(name, str) and name.strip():
            return data

        data = dict(data)
        data.pop("zoneName", None)
        zone_id = data.get("zoneId", data.get("zone_id"))
        data["zone_name"] = zone_id.strip() if isinstance(zone_id, str) else ""
        return data


class BaselineSummary(CamelModel):
    """Original conditions plus the projected AQI"""
    current_aqi: float
    new_aqi: float
    current_pm25: float
    current_pm10: float
    current_no2: float
    population_exposed: int
    current_risk_level: str
    new_risk_level: str


class ImpactResults(CamelModel):
    aqi_reduction: float = Field(..., description="Percent improvement of the AQI (0-100)")
    pm25_reduction: float = Field(..., description="Heuristic: 0.8 x aqiReduction")
    pm10_reduction: float = Field(..., description="Heuristic: 0.6 x aqiReduction")
    no2_reduction: float = Field(..., description="Heuristic: 0.4 x aqiReduction")
    total_reduction: float = Field(..., description="AQI points removed before clamping at zero")
    contributions: Dict[str, float] = Field(
        default_factory=dict, description="AQI points removed by each selected intervention"
    )
    population_benefited: int
    cost_benefit_ratio: float = Field(
        ..., description="Presentational heuristic, not derived from cost data"
    )
    implementation_timeline_months: float = Field(
        ..., description="Presentational heuristic, not derived from project data"
    )
    confidence: float = Field(
        ..., description="Presentational heuristic, not a statistical confidence"
    )


class SimulationResult(CamelModel):
    """Outcome of one (baseline, selection) computation"""
    zone_id: str
    baseline: BaselineSummary
    selections: Dict[str, bool]
    results: ImpactResults
    generated_at: datetime
    data_source: str = "Urban Planning Simulation"


class ReportFields(CamelModel):
    """Fields of the exported report, already formatted for display"""
    title: str
    zone: str
    current_aqi: int
    improved_aqi: int
    improvement: str
    population_benefited: str
    generated_on: str

    def lines(self) -> List[str]:
        return [
            f"Zone: {self.zone}",
            f"Current AQI: {self.current_aqi}",
            f"Improved AQI: {self.improved_aqi}",
            f"Improvement: {self.improvement}",
            f"People Benefited: {self.population_benefited}",
            f"Generated on: {self.generated_on}",
        ]

"""
Intervention Impact Calculator
Projects the AQI of a zone after a set of urban interventions is adopted
"""

import logging
import numpy as np
import pandas as pd
from typing import Dict, Mapping, Optional, Union
from config.settings import settings
from models.interventions import (
    INTERVENTION_CATALOG,
    InterventionCatalog,
    SelectionSet,
)
from models.schemas import BaselineReading, BaselineSummary, ImpactResults, SimulationResult
from utils.constants import (
    CONFIDENCE_BASE,
    CONFIDENCE_DIVISOR,
    COST_BENEFIT_BASE,
    COST_BENEFIT_DIVISOR,
    POLLUTANT_RATIOS,
    POLLUTANT_REDUCTION_WEIGHTS,
    TIMELINE_BASE_MONTHS,
    TIMELINE_DIVISOR,
)
from utils.helpers import classify_aqi, round_half_up, utc_now

logger = logging.getLogger(__name__)

Selections = Union[SelectionSet, Mapping]


class ImpactCalculator:
    """
    Rule-based additive estimator of intervention impact

    Every selected intervention removes a fixed fraction of the baseline AQI.
    Effects add up without interacting, so a large selection can remove more
    than the whole baseline; the projected AQI is then clamped at zero.
    """

    def __init__(self, catalog: InterventionCatalog = INTERVENTION_CATALOG):
        self.catalog = catalog

    def compute(self, baseline: BaselineReading, selections: Selections) -> SimulationResult:
        """
        Compute the simulation result for a zone and a selection

        Args:
            baseline: Validated baseline reading of the zone
            selections: SelectionSet, or a {key: bool} mapping

        Returns:
            A fresh SimulationResult
        """
        selection = self._as_selection(selections)
        aqi = float(baseline.aqi)

        contributions = {
            key.value: aqi * self.catalog.fraction(key)
            for key in selection.selected
        }
        total_reduction = float(np.sum(list(contributions.values()))) if contributions else 0.0

        new_aqi = max(0.0, aqi - total_reduction)
        improvement = self.improvement_percent(aqi, new_aqi)
        population_benefited = round_half_up(baseline.population_exposed * improvement / 100)

        summary = BaselineSummary(
            current_aqi=aqi,
            new_aqi=new_aqi,
            current_pm25=aqi * POLLUTANT_RATIOS["pm25"],
            current_pm10=aqi * POLLUTANT_RATIOS["pm10"],
            current_no2=aqi * POLLUTANT_RATIOS["no2"],
            population_exposed=baseline.population_exposed,
            current_risk_level=classify_aqi(aqi),
            new_risk_level=classify_aqi(new_aqi),
        )

        results = ImpactResults(
            aqi_reduction=improvement,
            pm25_reduction=improvement * POLLUTANT_REDUCTION_WEIGHTS["pm25"],
            pm10_reduction=improvement * POLLUTANT_REDUCTION_WEIGHTS["pm10"],
            no2_reduction=improvement * POLLUTANT_REDUCTION_WEIGHTS["no2"],
            total_reduction=total_reduction,
            contributions=contributions,
            population_benefited=population_benefited,
            **self._heuristics(improvement),
        )

        logger.debug(
            f"Simulated {baseline.zone_id}: {len(selection)} interventions, "
            f"AQI {aqi:.1f} -> {new_aqi:.1f} ({improvement:.1f}%)"
        )

        return SimulationResult(
            zone_id=baseline.zone_id,
            baseline=summary,
            selections=selection.as_dict(),
            results=results,
            generated_at=utc_now(),
            data_source=settings.DATA_SOURCE_LABEL,
        )

    @staticmethod
    def improvement_percent(current_aqi: float, new_aqi: float) -> float:
        """Percent of the baseline AQI removed, 0 for a zero baseline"""
        if current_aqi == 0:
            return 0.0
        return (current_aqi - new_aqi) / current_aqi * 100

    @staticmethod
    def _heuristics(improvement: float) -> Dict[str, float]:
        """Display-only figures; affine in the improvement percent"""
        return {
            "cost_benefit_ratio": COST_BENEFIT_BASE + improvement / COST_BENEFIT_DIVISOR,
            "implementation_timeline_months": TIMELINE_BASE_MONTHS + improvement / TIMELINE_DIVISOR,
            "confidence": CONFIDENCE_BASE + improvement / CONFIDENCE_DIVISOR,
        }

    def _as_selection(self, selections: Optional[Selections]) -> SelectionSet:
        if isinstance(selections, SelectionSet):
            return selections
        return SelectionSet.from_mapping(selections)

    def rank_interventions(self, baseline: BaselineReading) -> pd.DataFrame:
        """
        Rank interventions by the AQI points each removes when adopted alone

        Args:
            baseline: Baseline reading of the zone

        Returns:
            DataFrame sorted by aqiReduction (largest first)
        """
        aqi = float(baseline.aqi)
        rows = []
        for spec in self.catalog.specs():
            reduction = aqi * spec.reduction_fraction
            new_aqi = max(0.0, aqi - reduction)
            rows.append({
                "key": spec.key.value,
                "label": spec.label,
                "category": spec.category.display_name,
                "fraction": spec.reduction_fraction,
                "aqiReduction": reduction,
                "newAqi": new_aqi,
                "improvementPercent": self.improvement_percent(aqi, new_aqi),
            })

        df = pd.DataFrame(rows)
        # stable sort keeps catalog order among ties
        return df.sort_values("aqiReduction", ascending=False, kind="mergesort").reset_index(drop=True)

    def default_scenarios(self) -> Dict[str, SelectionSet]:
        """Preset selections: nothing, one package per category, everything"""
        scenarios = {"No Intervention": SelectionSet.empty()}
        for category, specs in self.catalog.by_category().items():
            scenarios[f"{category.display_name} Package"] = SelectionSet(spec.key for spec in specs)
        scenarios["All Measures"] = SelectionSet(self.catalog.keys())
        return scenarios

    def compare_scenarios(self, baseline: BaselineReading,
                          scenarios: Optional[Dict[str, Selections]] = None) -> pd.DataFrame:
        """
        Compare named selections for one zone

        Args:
            baseline: Baseline reading of the zone
            scenarios: Scenario name to selection; defaults to default_scenarios()

        Returns:
            DataFrame with one row per scenario, in the given order
        """
        if scenarios is None:
            scenarios = self.default_scenarios()

        rows = []
        for name, selections in scenarios.items():
            selection = self._as_selection(selections)
            result = self.compute(baseline, selection)
            rows.append({
                "scenario": name,
                "interventions": len(selection),
                "newAqi": result.baseline.new_aqi,
                "aqiReduction": result.results.aqi_reduction,
                "populationBenefited": result.results.population_benefited,
                "newRiskLevel": result.baseline.new_risk_level,
            })

        return pd.DataFrame(rows)


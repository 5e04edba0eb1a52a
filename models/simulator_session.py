"""
Simulator Session
Holds the selection for one zone and recomputes on every change
"""

import logging
from typing import Mapping, Optional, Union
from models.impact_calculator import ImpactCalculator
from models.interventions import Intervention, SelectionSet
from models.report_exporter import PdfReportExporter
from models.schemas import BaselineReading, SimulationResult

logger = logging.getLogger(__name__)


class SimulatorSession:
    """
    Presentation-side state for the intervention simulator

    Each change of the selection triggers a full, synchronous computation
    that replaces the previous result. No history is kept.
    """

    def __init__(self, baseline: BaselineReading, calculator: Optional[ImpactCalculator] = None):
        self.baseline = baseline
        self.calculator = calculator or ImpactCalculator()
        self.selections = SelectionSet.empty()
        self.result: Optional[SimulationResult] = None

    def toggle(self, key: Union[str, Intervention], value: Optional[bool] = None) -> SimulationResult:
        """
        Switch one intervention and recompute

        Args:
            key: Intervention key
            value: New state; flips the current state when None

        Returns:
            The new simulation result
        """
        return self._apply(self.selections.with_toggle(key, value))

    def select(self, mapping: Mapping) -> SimulationResult:
        """Replace the whole selection from a {key: bool} mapping and recompute"""
        return self._apply(SelectionSet.from_mapping(mapping))

    def _apply(self, selections: SelectionSet) -> SimulationResult:
        logger.debug(f"Selection for {self.baseline.zone_id} changed to {selections!r}")
        self.selections = selections
        self.result = self.calculator.compute(self.baseline, selections)
        return self.result

    def export_report(self, exporter: Optional[PdfReportExporter] = None) -> bytes:
        """
        Export the latest result as PDF

        Raises:
            ReportExportError: when nothing has been simulated yet
        """
        exporter = exporter or PdfReportExporter()
        return exporter.render(self.result)

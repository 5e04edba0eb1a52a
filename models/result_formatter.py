"""
Result Formatter
Projects a simulation result onto the fixed fields of the exported report
"""

import re
from config.settings import settings
from models.schemas import ReportFields, SimulationResult
from utils.helpers import format_thousands, format_timestamp, round_half_up

# Zone ids end up in a Content-Disposition header
_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_-]")


class ResultFormatter:
    """Read-only view of a SimulationResult for the export document"""

    def __init__(self, title: str = settings.REPORT_TITLE):
        self.title = title

    def format(self, result: SimulationResult) -> ReportFields:
        """
        Format a result for the report

        Args:
            result: Simulation result to read

        Returns:
            ReportFields with integers rounded and the percent at 0 decimals
        """
        return ReportFields(
            title=self.title,
            zone=result.zone_id,
            current_aqi=round_half_up(result.baseline.current_aqi),
            improved_aqi=round_half_up(result.baseline.new_aqi),
            improvement=f"{round_half_up(result.results.aqi_reduction)}%",
            population_benefited=format_thousands(result.results.population_benefited),
            generated_on=format_timestamp(result.generated_at, "date"),
        )

    @staticmethod
    def report_filename(result: SimulationResult, extension: str = settings.REPORT_EXTENSION) -> str:
        """Air_Quality_Report_<zoneId>_<YYYY-MM-DD>.<extension>"""
        date = format_timestamp(result.generated_at, "date")
        zone = _UNSAFE_FILENAME_CHARS.sub("_", result.zone_id)
        return f"{settings.REPORT_FILENAME_PREFIX}_{zone}_{date}.{extension}"

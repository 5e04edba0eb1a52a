"""
PDF Report Exporter
Renders a simulation result as a single-page air quality report
"""

import logging
from pathlib import Path
from typing import Optional
from fpdf import FPDF
from fpdf.errors import FPDFException
from config.settings import settings
from models.result_formatter import ResultFormatter
from models.schemas import SimulationResult
from utils.constants import API_MESSAGES

logger = logging.getLogger(__name__)


class ReportExportError(Exception):
    """Report could not be produced; `message` is safe to show to the user"""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class PdfReportExporter:
    """
    Single-page PDF export of a SimulationResult

    Page layout: title at the top, then one labelled line per report field.
    """

    LEFT_MARGIN = 20
    TITLE_Y = 30
    FIRST_LINE_Y = 50
    LINE_SPACING = 20

    def __init__(self, formatter: Optional[ResultFormatter] = None):
        self.formatter = formatter or ResultFormatter()

    def render(self, result: Optional[SimulationResult]) -> bytes:
        """
        Render the report

        Args:
            result: Latest simulation result, or None if none was computed

        Returns:
            PDF document bytes

        Raises:
            ReportExportError: no result, or the document could not be built
        """
        if result is None:
            raise ReportExportError(API_MESSAGES["no_simulation"], status_code=400)

        fields = self.formatter.format(result)

        try:
            pdf = FPDF(orientation="P", unit="mm", format="A4")
            pdf.add_page()

            pdf.set_font("helvetica", "B", 20)
            pdf.text(self.LEFT_MARGIN, self.TITLE_Y, fields.title)

            pdf.set_font("helvetica", "", 12)
            for i, line in enumerate(fields.lines()):
                pdf.text(self.LEFT_MARGIN, self.FIRST_LINE_Y + i * self.LINE_SPACING, line)

            document = bytes(pdf.output())
        except FPDFException as e:
            logger.error(f"PDF generation failed for zone {result.zone_id}: {e}")
            raise ReportExportError(API_MESSAGES["export_failed"]) from e

        logger.info(f"Generated report for zone {result.zone_id} ({len(document)} bytes)")
        return document

    def filename(self, result: SimulationResult) -> str:
        return self.formatter.report_filename(result)

    def save(self, result: Optional[SimulationResult], directory: Optional[Path] = None) -> Path:
        """
        Render the report and write it to disk

        Args:
            result: Simulation result to export
            directory: Target directory, settings.REPORTS_DIR by default

        Returns:
            Path of the written file
        """
        document = self.render(result)
        target_dir = Path(directory) if directory is not None else settings.REPORTS_DIR

        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            path = target_dir / self.filename(result)
            path.write_bytes(document)
        except OSError as e:
            logger.error(f"Could not write report to {target_dir}: {e}")
            raise ReportExportError(API_MESSAGES["export_failed"]) from e

        logger.info(f"Report saved as {path}")
        return path

from datetime import datetime, timezone

import pytest

from models.impact_calculator import ImpactCalculator
from models.interventions import SelectionSet
from models.report_exporter import PdfReportExporter, ReportExportError
from models.schemas import BaselineReading


@pytest.fixture
def result():
    baseline = BaselineReading(zone_id="charminar", zone_name="Charminar", aqi=320, population_exposed=65000)
    computed = ImpactCalculator().compute(baseline, SelectionSet.of("lowEmissionZone", "vehicleRestrictions"))
    return computed.model_copy(update={"generated_at": datetime(2026, 10, 19, tzinfo=timezone.utc)})


def test_render_produces_pdf(result):
    document = PdfReportExporter().render(result)
    assert document.startswith(b"%PDF")
    assert len(document) > 500


def test_render_without_result_is_user_visible_error():
    with pytest.raises(ReportExportError) as exc:
        PdfReportExporter().render(None)
    assert exc.value.status_code == 400
    assert exc.value.message == "Please run a simulation first by selecting interventions"


def test_filename(result):
    assert PdfReportExporter().filename(result) == "Air_Quality_Report_charminar_2026-10-19.pdf"


def test_save_writes_file(result, tmp_path):
    path = PdfReportExporter().save(result, tmp_path / "reports")
    assert path.name == "Air_Quality_Report_charminar_2026-10-19.pdf"
    assert path.read_bytes().startswith(b"%PDF")


def test_unencodable_zone_reported_as_export_error(result):
    # core fonts only cover latin-1
    unencodable = result.model_copy(update={"zone_id": "zone-☃"})
    with pytest.raises(ReportExportError) as exc:
        PdfReportExporter().render(unencodable)
    assert exc.value.message == "Failed to generate PDF report. Please try again."

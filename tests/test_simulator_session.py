import pytest

from models.report_exporter import ReportExportError
from models.schemas import BaselineReading
from models.simulator_session import SimulatorSession


@pytest.fixture
def session():
    baseline = BaselineReading(zone_id="kukatpally-road", zone_name="Kukatpally Road", aqi=250, population_exposed=42000)
    return SimulatorSession(baseline)


def test_no_result_before_first_change(session):
    assert session.result is None
    assert len(session.selections) == 0


def test_export_before_simulation_fails_gracefully(session):
    with pytest.raises(ReportExportError) as exc:
        session.export_report()
    assert "Please run a simulation first" in exc.value.message


def test_toggle_recomputes_from_scratch(session):
    first = session.toggle("banOpenBurning")
    assert first.baseline.new_aqi == pytest.approx(200)

    second = session.toggle("dustControlMeasures")
    assert session.result is second
    assert second.baseline.new_aqi == pytest.approx(175)

    third = session.toggle("banOpenBurning")
    assert third.baseline.new_aqi == pytest.approx(225)
    assert third.selections["banOpenBurning"] is False


def test_select_replaces_selection(session):
    session.toggle("greenWalls")
    result = session.select({"industrialEmissionControls": True})
    assert result.selections["greenWalls"] is False
    assert result.results.aqi_reduction == pytest.approx(22)


def test_export_after_simulation(session):
    session.toggle("publicTransportBoost")
    assert session.export_report().startswith(b"%PDF")

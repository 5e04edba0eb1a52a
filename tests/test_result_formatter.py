from datetime import datetime, timezone

import pytest

from models.impact_calculator import ImpactCalculator
from models.interventions import SelectionSet
from models.result_formatter import ResultFormatter
from models.schemas import BaselineReading


@pytest.fixture
def result():
    baseline = BaselineReading(zone_id="abids-road", zone_name="Abids Road", aqi=280, population_exposed=50000)
    computed = ImpactCalculator().compute(baseline, SelectionSet.of("banOpenBurning"))
    return computed.model_copy(update={"generated_at": datetime(2026, 10, 19, 8, 30, tzinfo=timezone.utc)})


def test_format_report_fields(result):
    fields = ResultFormatter().format(result)
    assert fields.title == "Urban Air Quality Report"
    assert fields.zone == "abids-road"
    assert fields.current_aqi == 280
    assert fields.improved_aqi == 224
    assert fields.improvement == "20%"
    assert fields.population_benefited == "10,000"
    assert fields.generated_on == "2026-10-19"


def test_report_lines(result):
    lines = ResultFormatter().format(result).lines()
    assert lines == [
        "Zone: abids-road",
        "Current AQI: 280",
        "Improved AQI: 224",
        "Improvement: 20%",
        "People Benefited: 10,000",
        "Generated on: 2026-10-19",
    ]


def test_percent_rounds_to_whole_number():
    baseline = BaselineReading(zone_id="z", aqi=300)
    computed = ImpactCalculator().compute(baseline, SelectionSet.of("greenWalls", "permeablePavement", "streetTrees"))
    # 5% + 4% + 6% = 15%
    assert ResultFormatter().format(computed).improvement == "15%"


def test_report_filename(result):
    assert ResultFormatter.report_filename(result) == "Air_Quality_Report_abids-road_2026-10-19.pdf"
    assert ResultFormatter.report_filename(result, "txt") == "Air_Quality_Report_abids-road_2026-10-19.txt"


@pytest.mark.parametrize("zone_id, expected", [
    ('a"b', "a_b"),
    ("old city\r\nX-Evil: 1", "old_city__X-Evil__1"),
    ("ward_12/north", "ward_12_north"),
])
def test_report_filename_replaces_unsafe_zone_characters(result, zone_id, expected):
    renamed = result.model_copy(update={"zone_id": zone_id})
    assert ResultFormatter.report_filename(renamed) == f"Air_Quality_Report_{expected}_2026-10-19.pdf"


def test_formatting_does_not_change_result(result):
    before = result.model_dump()
    ResultFormatter().format(result)
    assert result.model_dump() == before
